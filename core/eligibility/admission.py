#!/usr/bin/env python3
"""
Admission Service - guarded application writes and status transitions.

The check-then-create race is closed twice over:
- the student's row is locked (SELECT ... FOR UPDATE) before the fresh
  re-check, serializing decisions for one student, and
- each non-withdrawn application holds a unique (student, institution,
  active_slot) position, so the store rejects a write past the limit even
  where row locks are unavailable.
"""

import logging
from typing import Any, List, Optional

from core.config_loader import EligibilityConfig
from core.errors import (
    ConflictError,
    EligibilityDenied,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from core.eligibility.checker import EligibilityChecker
from core.eligibility.models import AdmissionResult
from database.repository import CareerRepository
from notification.message_builder import NotificationMessageBuilder

logger = logging.getLogger(__name__)

INVALID_TRANSITION = "invalid status transition"
DECIDING_ROLES = ('institution', 'admin')


class ApplicationAdmissionService:
    def __init__(
        self,
        repo: CareerRepository,
        config: Optional[EligibilityConfig] = None,
        notifier=None,
        checker: Optional[EligibilityChecker] = None
    ):
        self.repo = repo
        self.config = config or EligibilityConfig()
        self.checker = checker or EligibilityChecker(self.config)
        self.notifier = notifier

    def create_application_if_eligible(
        self,
        student_id: Any,
        course_id: Any,
        institution_id: Any,
        personal_statement: Optional[str] = None,
        documents: Optional[List[Any]] = None
    ) -> AdmissionResult:
        """
        Create a pending application if the student may apply.

        Raises ValidationError / NotFound for bad input. Returns a result
        carrying EligibilityDenied or ConflictError for business refusals;
        nothing is written in either case.
        """
        if not student_id:
            raise ValidationError("Student ID is required")
        if not course_id or not institution_id:
            raise ValidationError("Course ID and Institution ID are required")

        course = self.repo.courses.get(course_id)
        if course is None:
            raise NotFound("Course not found")
        if course.institution_id != institution_id:
            raise ValidationError("Course does not belong to selected institution")

        institution = self.repo.institutions.get(institution_id)
        if institution is None or not institution.is_active:
            raise NotFound("Institution not found")

        if self.repo.users.lock_student(student_id) is None:
            raise NotFound("Student not found")

        applications = self.repo.applications.list_for_student(student_id)
        decision = self.checker.can_apply(applications, institution_id)
        if not decision.allowed:
            logger.info(f"Application by {student_id} to {institution_id} denied: {decision.reason}")
            self.repo.rollback()
            return AdmissionResult(error=EligibilityDenied(decision.reason))

        try:
            application = self.repo.applications.insert_in_free_slot(
                student_id=student_id,
                course_id=course_id,
                institution_id=institution_id,
                limit=self.checker.limit,
                personal_statement=personal_statement or '',
                documents=documents,
            )
        except ConflictError as e:
            self.repo.rollback()
            return AdmissionResult(error=e)

        self.repo.commit()
        logger.info(f"Application {application.id} created for student {student_id} (slot {application.active_slot})")

        self._notify(NotificationMessageBuilder.application_submitted(
            student_id, application.id, course.name
        ))
        return AdmissionResult(application=application)

    def transition_application(
        self,
        application_id: Any,
        new_status: str,
        actor_id: Any,
        actor_role: str
    ) -> AdmissionResult:
        """
        Move an application to a new status on behalf of an actor.

        institution/admin: pending -> admitted | rejected
        student (owner):   pending -> withdrawn
        """
        application = self.repo.applications.get_or_404(application_id, "Application")

        if actor_role in DECIDING_ROLES:
            if actor_role == 'institution':
                institution = self.repo.institutions.get(application.institution_id)
                if institution is None or institution.admin_id != actor_id:
                    raise PermissionDenied("Not allowed to decide on this application")
            if new_status not in ('admitted', 'rejected'):
                raise ValidationError(INVALID_TRANSITION)

            # Same per-student lock as the create path, then re-read everything
            self.repo.users.lock_student(application.student_id)
            applications = self.repo.applications.list_for_student(application.student_id)
            if application.status != 'pending':
                raise ValidationError(INVALID_TRANSITION)

            if new_status == 'admitted':
                decision = self.checker.can_admit(applications, application.id)
                if not decision.allowed:
                    self.repo.rollback()
                    return AdmissionResult(error=EligibilityDenied(decision.reason))

        elif actor_role == 'student':
            if application.student_id != actor_id:
                raise PermissionDenied("Not allowed to modify this application")
            if new_status != 'withdrawn':
                raise ValidationError(INVALID_TRANSITION)

            # An admission may have landed since the row was loaded
            self.repo.users.lock_student(application.student_id)
            self.repo.applications.reload(application)
            if application.status != 'pending':
                raise ValidationError(INVALID_TRANSITION)

        else:
            raise PermissionDenied("Insufficient permissions")

        previous = application.status
        self.repo.applications.set_status(application, new_status)
        self.repo.commit()
        logger.info(f"Application {application.id}: {previous} -> {new_status} by {actor_role} {actor_id}")

        course = self.repo.courses.get(application.course_id)
        self._notify(NotificationMessageBuilder.application_status_changed(
            application.student_id, application.id, course.name if course else None, new_status
        ))
        return AdmissionResult(application=application)

    def _notify(self, content) -> None:
        if self.notifier is not None:
            self.notifier.notify(content)
