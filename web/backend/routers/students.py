#!/usr/bin/env python3
"""
Student endpoints - course applications, profile, transcripts, job applications
and notifications.
"""

import logging
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from core.app_context import AppContext
from database.models import User
from ..dependencies import get_app_context, get_db, require_role
from ..models.requests import ApplicationCreateRequest, ProfileUpdateRequest, TranscriptUploadRequest
from ..models.responses import (
    ApplicationResponse,
    ApplicationsResponse,
    JobApplicationResponse,
    NotificationsResponse,
    ProfileResponse,
    TranscriptResponse,
)
from ..rate_limit import limiter, submission_limit
from ..services.application_service import ApplicationService
from ..services.student_service import StudentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/students", tags=["students"])

student_only = require_role('student')


@router.post("/applications", response_model=ApplicationResponse, status_code=201)
@limiter.limit(submission_limit)
def submit_application(
    request: Request,
    body: ApplicationCreateRequest,
    student: User = Depends(student_only),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    """
    Apply to a course.

    Refused with 400 when the per-institution limit is reached or the student
    is already admitted elsewhere; a lost concurrent race returns a retryable 409.
    """
    application = ApplicationService(db, ctx).submit(student, body)
    return ApplicationResponse(success=True, application=application)


@router.get("/applications", response_model=ApplicationsResponse)
def list_applications(
    student: User = Depends(student_only),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    """List the student's applications, newest first."""
    applications = ApplicationService(db, ctx).list_for_student(student)
    return ApplicationsResponse(success=True, count=len(applications), applications=applications)


@router.get("/applications/{application_id}", response_model=ApplicationResponse)
def get_application(
    application_id: str,
    student: User = Depends(student_only),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    application = ApplicationService(db, ctx).get_for_student(student, application_id)
    return ApplicationResponse(success=True, application=application)


@router.post("/applications/{application_id}/withdraw", response_model=ApplicationResponse)
def withdraw_application(
    application_id: str,
    student: User = Depends(student_only),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    """Withdraw a pending application, freeing its slot at the institution."""
    application = ApplicationService(db, ctx).withdraw(student, application_id)
    return ApplicationResponse(success=True, application=application)


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    student: User = Depends(student_only),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    return StudentService(db, ctx).get_profile(student)


@router.put("/profile", response_model=ProfileResponse)
def update_profile(
    body: ProfileUpdateRequest,
    student: User = Depends(student_only),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    return StudentService(db, ctx).update_profile(student, body)


@router.post("/transcript", response_model=TranscriptResponse, status_code=201)
def upload_transcript(
    body: TranscriptUploadRequest,
    student: User = Depends(student_only),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    """Record a transcript; the newest one is used for job matching."""
    transcript = StudentService(db, ctx).upload_transcript(student, body)
    return TranscriptResponse(success=True, transcript=transcript)


@router.get("/transcript", response_model=TranscriptResponse)
def get_transcript(
    student: User = Depends(student_only),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    transcript = StudentService(db, ctx).latest_transcript(student)
    return TranscriptResponse(success=True, transcript=transcript)


@router.post("/jobs/{job_id}/apply", response_model=JobApplicationResponse, status_code=201)
@limiter.limit(submission_limit)
def apply_to_job(
    request: Request,
    job_id: str,
    student: User = Depends(student_only),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    job_application = StudentService(db, ctx).apply_to_job(student, job_id)
    return JobApplicationResponse(success=True, job_application=job_application)


@router.get("/notifications", response_model=NotificationsResponse)
def list_notifications(
    unread_only: bool = Query(default=False, description="Only unread notifications"),
    student: User = Depends(student_only),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    notifications = StudentService(db, ctx).list_notifications(student, unread_only=unread_only)
    return NotificationsResponse(success=True, count=len(notifications), notifications=notifications)
