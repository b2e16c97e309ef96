from typing import Any, List, Optional

from sqlalchemy import select

from database.models import Company, Job, JobApplication
from database.repositories.base import BaseRepository


class CompanyRepository(BaseRepository):
    model = Company

    def get_for_admin(self, admin_id: Any) -> Optional[Company]:
        stmt = select(Company).where(Company.admin_id == admin_id).order_by(Company.created_at)
        return self.db.execute(stmt).scalars().first()


class JobRepository(BaseRepository):
    model = Job

    def list_for_company(self, company_id: Any) -> List[Job]:
        stmt = select(Job).where(Job.company_id == company_id).order_by(Job.posted_at.desc(), Job.id)
        return self.db.execute(stmt).scalars().all()


class JobApplicationRepository(BaseRepository):
    model = JobApplication

    def get_for_student_and_job(self, student_id: Any, job_id: Any) -> Optional[JobApplication]:
        stmt = select(JobApplication).where(
            JobApplication.student_id == student_id,
            JobApplication.job_id == job_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def list_for_job(self, job_id: Any) -> List[JobApplication]:
        stmt = select(JobApplication).where(JobApplication.job_id == job_id).order_by(JobApplication.id)
        return self.db.execute(stmt).scalars().all()
