import logging

from sqlalchemy.orm import Session

from database.repositories import (
    UserRepository,
    TranscriptRepository,
    ApplicationRepository,
    InstitutionRepository,
    CourseRepository,
    FacultyRepository,
    CompanyRepository,
    JobRepository,
    JobApplicationRepository,
    NotificationRepository,
)

logger = logging.getLogger(__name__)


class CareerRepository:
    """
    Facade over the per-collection repositories, all bound to one Session so
    they share a transaction.
    """

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.transcripts = TranscriptRepository(db)
        self.applications = ApplicationRepository(db)
        self.institutions = InstitutionRepository(db)
        self.courses = CourseRepository(db)
        self.faculties = FacultyRepository(db)
        self.companies = CompanyRepository(db)
        self.jobs = JobRepository(db)
        self.job_applications = JobApplicationRepository(db)
        self.notifications = NotificationRepository(db)

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
