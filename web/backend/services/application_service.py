#!/usr/bin/env python3
"""
Application service - course applications for students and institutions.
"""

import logging
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from core.app_context import AppContext
from core.errors import NotFound, PermissionDenied
from core.utils import as_utc
from database.models import Application, User
from database.repository import CareerRepository
from ..models.requests import ApplicationCreateRequest
from ..models.responses import ApplicationSummary
from ..utils import to_application_summary

logger = logging.getLogger(__name__)


class ApplicationService:
    """Service for course applications."""

    def __init__(self, db: Session, ctx: AppContext):
        self.db = db
        self.repo = CareerRepository(db)
        self.ctx = ctx
        self.admission = ctx.admission_service(self.repo)

    def submit(self, student: User, request: ApplicationCreateRequest) -> ApplicationSummary:
        """
        Submit an application through the admission guard.

        Raises:
            ValidationError, NotFound: bad input.
            EligibilityDenied: limit reached or already admitted.
            ConflictError: lost a concurrent submission race (retryable).
        """
        result = self.admission.create_application_if_eligible(
            student_id=student.id,
            course_id=request.course_id,
            institution_id=request.institution_id,
            personal_statement=request.personal_statement,
            documents=request.documents,
        )
        application = result.unwrap()
        return self._summarize([application])[0]

    def list_for_student(self, student: User) -> List[ApplicationSummary]:
        applications = self.repo.applications.list_for_student(student.id)
        return self._summarize(applications)

    def get_for_student(self, student: User, application_id: str) -> ApplicationSummary:
        application = self.repo.applications.get_or_404(application_id, "Application")
        if application.student_id != student.id:
            raise PermissionDenied("Access denied")
        return self._summarize([application])[0]

    def withdraw(self, student: User, application_id: str) -> ApplicationSummary:
        result = self.admission.transition_application(application_id, 'withdrawn', student.id, 'student')
        return self._summarize([result.unwrap()])[0]

    def list_for_institution_actor(self, actor: User, status: Optional[str] = None) -> List[ApplicationSummary]:
        """Applications to every institution the actor administers (all of them for admins)."""
        if actor.role == 'admin':
            institution_ids = [i.id for i in self.repo.institutions.list_all()]
        else:
            institution_ids = [i.id for i in self.repo.institutions.get_by_admin(actor.id)]
            if not institution_ids:
                raise NotFound("Institution not found")

        applications: List[Application] = []
        for institution_id in institution_ids:
            applications.extend(self.repo.applications.list_for_institution(institution_id, status))
        applications.sort(key=lambda a: as_utc(a.applied_at), reverse=True)
        return self._summarize(applications)

    def transition(self, actor: User, application_id: str, status: str) -> ApplicationSummary:
        result = self.admission.transition_application(application_id, status, actor.id, actor.role)
        return self._summarize([result.unwrap()])[0]

    def _summarize(self, applications: Iterable[Application]) -> List[ApplicationSummary]:
        """Attach course, faculty and institution summaries in three batch reads."""
        applications = list(applications)
        courses = self.repo.courses.get_many(a.course_id for a in applications)
        institutions = self.repo.institutions.get_many(a.institution_id for a in applications)
        faculties = self.repo.faculties.get_many(c.faculty_id for c in courses.values())
        faculty_names = {fid: f.name for fid, f in faculties.items()}

        return [
            to_application_summary(
                application,
                course=courses.get(application.course_id),
                institution=institutions.get(application.institution_id),
                faculty_names=faculty_names,
            )
            for application in applications
        ]
