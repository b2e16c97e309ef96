#!/usr/bin/env python3
"""
Student service - profile, transcript records, job applications and notifications.
"""

import logging
from collections import Counter
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.app_context import AppContext
from core.errors import NotFound, ValidationError
from core.utils import as_utc, utcnow
from database.models import JobApplication, User
from database.repository import CareerRepository
from ..models.requests import ProfileUpdateRequest, TranscriptUploadRequest
from ..models.responses import (
    ApplicationStats,
    JobApplicationOut,
    NotificationOut,
    ProfileResponse,
    TranscriptOut,
)
from ..utils import safe_datetime_iso, to_job_application_out, to_transcript_out, to_user_profile

logger = logging.getLogger(__name__)

ALREADY_APPLIED = "You have already applied to this job"


class StudentService:
    """Service for a student's own records."""

    def __init__(self, db: Session, ctx: AppContext):
        self.db = db
        self.repo = CareerRepository(db)
        self.ctx = ctx

    def get_profile(self, student: User) -> ProfileResponse:
        statuses = Counter(a.status for a in self.repo.applications.list_for_student(student.id))
        stats = ApplicationStats(
            total=sum(statuses.values()),
            pending=statuses.get('pending', 0),
            admitted=statuses.get('admitted', 0),
        )
        return ProfileResponse(success=True, user=to_user_profile(student), stats=stats)

    def update_profile(self, student: User, request: ProfileUpdateRequest) -> ProfileResponse:
        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            raise ValidationError("No profile fields to update")

        self.repo.users.update_profile(student, changes)
        self.repo.commit()
        logger.info(f"Updated profile fields {sorted(changes)} for {student.id}")
        return self.get_profile(student)

    def upload_transcript(self, student: User, request: TranscriptUploadRequest) -> TranscriptOut:
        transcript = self.repo.transcripts.add_transcript(
            student_id=student.id,
            gpa=request.gpa,
            certificates=[c.strip() for c in request.certificates if c and c.strip()],
            file_url=request.file_url,
        )
        self.repo.commit()
        logger.info(f"Transcript {transcript.id} recorded for {student.id}")
        return to_transcript_out(transcript)

    def latest_transcript(self, student: User) -> TranscriptOut:
        transcript = self.repo.transcripts.latest_for(student.id)
        if transcript is None:
            raise NotFound("No transcript on file")
        return to_transcript_out(transcript)

    def apply_to_job(self, student: User, job_id: str) -> JobApplicationOut:
        job = self.repo.jobs.get_or_404(job_id, "Job")
        if not job.is_active:
            raise ValidationError("Job is no longer accepting applications")
        if job.deadline is not None and as_utc(job.deadline) < utcnow():
            raise ValidationError("Application deadline has passed")
        if self.repo.job_applications.get_for_student_and_job(student.id, job.id) is not None:
            raise ValidationError(ALREADY_APPLIED)

        transcript = self.repo.transcripts.latest_for(student.id)
        snapshot = None
        if transcript is not None:
            snapshot = {
                'transcript_id': transcript.id,
                'gpa': transcript.gpa,
                'certificates': list(transcript.certificates or []),
                'uploaded_at': safe_datetime_iso(transcript.uploaded_at),
            }

        job_application = JobApplication(
            student_id=student.id,
            job_id=job.id,
            status='applied',
            transcript_snapshot=snapshot,
        )
        try:
            self.repo.job_applications.add(job_application)
            self.repo.commit()
        except IntegrityError as e:
            self.repo.rollback()
            raise ValidationError(ALREADY_APPLIED) from e

        logger.info(f"Student {student.id} applied to job {job.id}")
        return to_job_application_out(job_application)

    def list_notifications(self, student: User, unread_only: bool = False) -> List[NotificationOut]:
        return [
            NotificationOut(
                id=n.id,
                title=n.title,
                message=n.message,
                type=n.type,
                job_id=n.job_id,
                read=bool(n.read),
                created_at=safe_datetime_iso(n.created_at),
            )
            for n in self.repo.notifications.list_for_user(student.id, unread_only=unread_only)
        ]
