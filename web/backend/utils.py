#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

from decimal import Decimal
from typing import Any, Dict, Optional
from datetime import datetime

from core.utils import as_utc
from database.models import Application, Company, Course, Faculty, Institution, Job, JobApplication, Transcript, User
from .models.responses import (
    ApplicationSummary,
    CompanyOut,
    CourseBrief,
    CourseOut,
    FacultyOut,
    InstitutionBrief,
    InstitutionOut,
    JobApplicationOut,
    JobOut,
    JobRequirementsOut,
    TranscriptOut,
    UserProfile,
)


def safe_float(value: Optional[Any], default: Optional[float] = None) -> Optional[float]:
    """
    Safely convert value to float.

    Args:
        value: Value to convert (can be Decimal, int, float, or None).
        default: Default value if conversion fails or value is None.

    Returns:
        Float value.
    """
    if value is None:
        return default

    if isinstance(value, Decimal):
        return float(value)

    try:
        return float(value)
    except (ValueError, TypeError):
        return default


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Safely convert datetime to a UTC ISO format string.

    Args:
        dt: Datetime object (naive values are taken as UTC).

    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    return as_utc(dt).isoformat()


def to_user_profile(user: User) -> UserProfile:
    return UserProfile(
        id=user.id,
        email=user.email,
        role=user.role,
        profile=user.profile or {},
        is_verified=bool(user.is_verified),
        created_at=safe_datetime_iso(user.created_at),
    )


def to_application_summary(
    application: Application,
    course: Optional[Course] = None,
    institution: Optional[Institution] = None,
    faculty_names: Optional[Dict[str, str]] = None
) -> ApplicationSummary:
    course_brief = None
    if course is not None:
        course_brief = CourseBrief(
            id=course.id,
            name=course.name,
            description=course.description,
            duration=course.duration,
            fees=course.fees,
            faculty_name=(faculty_names or {}).get(course.faculty_id),
        )

    institution_brief = None
    if institution is not None:
        institution_brief = InstitutionBrief(
            id=institution.id,
            name=institution.name,
            location=institution.location,
            description=institution.description,
        )

    return ApplicationSummary(
        id=application.id,
        student_id=application.student_id,
        course_id=application.course_id,
        institution_id=application.institution_id,
        status=application.status,
        personal_statement=application.personal_statement,
        documents=application.documents or [],
        applied_at=safe_datetime_iso(application.applied_at),
        updated_at=safe_datetime_iso(application.updated_at),
        course=course_brief,
        institution=institution_brief,
    )


def to_transcript_out(transcript: Transcript) -> TranscriptOut:
    return TranscriptOut(
        id=transcript.id,
        student_id=transcript.student_id,
        gpa=safe_float(transcript.gpa),
        certificates=transcript.certificates or [],
        file_url=transcript.file_url,
        uploaded_at=safe_datetime_iso(transcript.uploaded_at),
    )


def to_institution_out(institution: Institution) -> InstitutionOut:
    return InstitutionOut(
        id=institution.id,
        admin_id=institution.admin_id,
        name=institution.name,
        type=institution.type,
        location=institution.location,
        description=institution.description,
        contact=institution.contact or {},
        is_active=bool(institution.is_active),
    )


def to_course_out(course: Course, faculty_name: Optional[str] = None) -> CourseOut:
    return CourseOut(
        id=course.id,
        institution_id=course.institution_id,
        faculty_id=course.faculty_id,
        faculty_name=faculty_name,
        name=course.name,
        description=course.description,
        duration=course.duration,
        fees=course.fees,
        requirements=course.requirements or {},
        is_active=bool(course.is_active),
    )


def to_faculty_out(faculty: Faculty) -> FacultyOut:
    return FacultyOut(
        id=faculty.id,
        institution_id=faculty.institution_id,
        name=faculty.name,
        description=faculty.description,
    )


def to_company_out(company: Company) -> CompanyOut:
    return CompanyOut(
        id=company.id,
        admin_id=company.admin_id,
        name=company.name,
        industry=company.industry,
        status=company.status,
    )


def to_job_out(job: Job) -> JobOut:
    return JobOut(
        id=job.id,
        company_id=job.company_id,
        company_name=job.company_name,
        title=job.title,
        description=job.description,
        location=job.location,
        job_type=job.job_type,
        salary_range=job.salary_range,
        requirements=JobRequirementsOut(
            min_gpa=safe_float(job.min_gpa),
            required_certificates=list(job.required_certificates or []),
            min_years_experience=safe_float(job.min_years_experience),
        ),
        deadline=safe_datetime_iso(job.deadline),
        is_active=bool(job.is_active),
        posted_at=safe_datetime_iso(job.posted_at),
    )


def to_job_application_out(job_application: JobApplication) -> JobApplicationOut:
    return JobApplicationOut(
        id=job_application.id,
        student_id=job_application.student_id,
        job_id=job_application.job_id,
        status=job_application.status,
        transcript_snapshot=job_application.transcript_snapshot,
        applied_at=safe_datetime_iso(job_application.applied_at),
        updated_at=safe_datetime_iso(job_application.updated_at),
    )
