#!/usr/bin/env python3
"""
Job service - company profile, job postings and applicant review.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from core.app_context import AppContext
from core.errors import EligibilityDenied, NotFound, PermissionDenied, ValidationError
from core.scorer import Applicant, JobRequirements
from database.models import Company, Job, User
from database.repository import CareerRepository
from notification.message_builder import NotificationMessageBuilder
from ..models.requests import CompanyProfileUpdateRequest, JobCreateRequest, JobUpdateRequest
from ..models.responses import (
    ApplicantsResponse,
    CompanyOut,
    JobApplicationOut,
    JobOut,
    RankedApplicantOut,
    ScoreBreakdownOut,
)
from ..utils import safe_datetime_iso, to_company_out, to_job_application_out, to_job_out

logger = logging.getLogger(__name__)

NOT_QUALIFIED = "applicant does not meet job requirements"

# applied -> shortlisted | rejected, shortlisted -> rejected
JOB_APPLICATION_TRANSITIONS = {
    'applied': {'shortlisted', 'rejected'},
    'shortlisted': {'rejected'},
}


class JobService:
    """Service for company-side operations."""

    def __init__(self, db: Session, ctx: AppContext):
        self.db = db
        self.repo = CareerRepository(db)
        self.ctx = ctx
        self.engine = ctx.matching_engine

    def company_for(self, actor: User) -> Company:
        company = self.repo.companies.get_for_admin(actor.id)
        if company is None:
            raise NotFound("Company not found")
        return company

    def get_company_profile(self, actor: User) -> CompanyOut:
        return to_company_out(self.company_for(actor))

    def update_company_profile(self, actor: User, request: CompanyProfileUpdateRequest) -> CompanyOut:
        company = self.company_for(actor)
        company = self.repo.companies.update(company.id, request.model_dump(exclude_unset=True, exclude_none=True))
        self.repo.commit()
        return to_company_out(company)

    def _owned_job(self, actor: User, job_id: str) -> Job:
        job = self.repo.jobs.get_or_404(job_id, "Job")
        if job.company_id != self.company_for(actor).id:
            raise PermissionDenied("Not allowed to manage this job")
        return job

    def post_job(self, actor: User, request: JobCreateRequest) -> JobOut:
        """Persist a job. The caller schedules the qualified-student fan-out after commit."""
        company = self.company_for(actor)
        if company.status == 'suspended':
            raise PermissionDenied("Company is suspended")

        job = Job(
            company_id=company.id,
            company_name=company.name,
            title=request.title.strip(),
            description=request.description,
            location=request.location,
            job_type=request.job_type,
            salary_range=request.salary_range,
            min_gpa=request.min_gpa,
            required_certificates=[c.strip() for c in request.required_certificates if c and c.strip()],
            min_years_experience=request.min_years_experience,
            deadline=request.deadline,
            is_active=True,
        )
        self.repo.jobs.add(job)
        self.repo.commit()
        logger.info(f"Job {job.id} posted by company {company.id}")
        return to_job_out(job)

    def list_jobs(self, actor: User) -> List[JobOut]:
        company = self.company_for(actor)
        return [to_job_out(j) for j in self.repo.jobs.list_for_company(company.id)]

    def update_job(self, actor: User, job_id: str, request: JobUpdateRequest) -> JobOut:
        job = self._owned_job(actor, job_id)
        changes = request.model_dump(exclude_unset=True)
        if 'is_active' in changes and changes['is_active'] is None:
            raise ValidationError("is_active cannot be null")
        job = self.repo.jobs.update(job.id, changes)
        self.repo.commit()
        return to_job_out(job)

    def ranked_applicants(self, actor: User, job_id: str) -> ApplicantsResponse:
        """Applicants in rank order, students and latest transcripts batch-loaded."""
        job = self._owned_job(actor, job_id)
        job_applications = self.repo.job_applications.list_for_job(job.id)
        student_ids = [ja.student_id for ja in job_applications]
        students = self.repo.users.get_many(student_ids)
        transcripts = self.repo.transcripts.latest_for_many(student_ids)

        applicants = [
            Applicant(
                id=ja.id,
                candidate=self.engine.candidate_for(students.get(ja.student_id), transcripts.get(ja.student_id)),
                applied_at=ja.applied_at,
                payload=ja,
            )
            for ja in job_applications
            if ja.student_id in students
        ]
        ranked = self.engine.rank_applicants(applicants, JobRequirements.from_job(job))

        results = []
        for entry in ranked:
            ja = entry.applicant.payload
            student = students[ja.student_id]
            results.append(RankedApplicantOut(
                rank=entry.rank,
                job_application_id=ja.id,
                student_id=ja.student_id,
                status=ja.status,
                applied_at=safe_datetime_iso(ja.applied_at),
                student=student.profile or {},
                qualified=entry.qualified,
                reasons=list(entry.qualification.reasons),
                match_score=entry.value,
                breakdown=ScoreBreakdownOut(**entry.score.breakdown.to_dict()),
                matched_certificates=list(entry.score.matched_certificates),
            ))

        return ApplicantsResponse(
            success=True,
            job_id=job.id,
            count=len(results),
            qualified_count=sum(1 for r in results if r.qualified),
            applicants=results,
        )

    def transition_job_application(self, actor: User, job_application_id: str, status: str) -> JobApplicationOut:
        job_application = self.repo.job_applications.get_or_404(job_application_id, "Job application")
        job = self._owned_job(actor, job_application.job_id)

        if status not in JOB_APPLICATION_TRANSITIONS.get(job_application.status, set()):
            raise ValidationError("invalid status transition")

        if status == 'shortlisted':
            student = self.repo.users.get(job_application.student_id)
            transcript = self.repo.transcripts.latest_for(job_application.student_id)
            candidate = self.engine.candidate_for(student, transcript)
            qualification = self.engine.qualify(candidate, JobRequirements.from_job(job))
            if not qualification.qualified:
                logger.info(
                    f"Shortlist of {job_application.id} refused: {'; '.join(qualification.reasons)}"
                )
                raise EligibilityDenied(NOT_QUALIFIED)

        job_application.status = status
        self.repo.commit()
        logger.info(f"Job application {job_application.id} -> {status}")

        self.ctx.notification_service(self.repo).notify(
            NotificationMessageBuilder.job_application_status_changed(
                job_application.student_id, job_application.id, job, status
            )
        )
        return to_job_application_out(job_application)
