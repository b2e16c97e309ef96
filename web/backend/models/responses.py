#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class MessageResponse(BaseModel):
    success: bool
    message: str


class UserProfile(BaseModel):
    id: str
    email: str
    role: str
    profile: Dict[str, Any] = Field(default_factory=dict)
    is_verified: bool = False
    created_at: Optional[str] = None


class ApplicationStats(BaseModel):
    total: int = 0
    pending: int = 0
    admitted: int = 0


class ProfileResponse(BaseModel):
    success: bool
    user: UserProfile
    stats: Optional[ApplicationStats] = None


class ResendVerificationResponse(BaseModel):
    success: bool
    message: str
    email: str
    verification_link: Optional[str] = None


class VerificationStatusResponse(BaseModel):
    success: bool
    uid: str
    email: Optional[str]
    email_verified: bool


class CourseBrief(BaseModel):
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[str] = None
    fees: Optional[str] = None
    faculty_name: Optional[str] = None


class InstitutionBrief(BaseModel):
    id: str
    name: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None


class ApplicationSummary(BaseModel):
    """An application with its course and institution summaries."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "9b2f0c7e4d1a4f8c9a3e2b1c0d9e8f7a",
                "student_id": "student-uid",
                "course_id": "c1",
                "institution_id": "i1",
                "status": "pending",
                "personal_statement": "",
                "documents": [],
                "applied_at": "2026-02-01T12:00:00+00:00",
                "updated_at": "2026-02-01T12:00:00+00:00",
                "course": {"id": "c1", "name": "BSc Computer Science"},
                "institution": {"id": "i1", "name": "Limkokwing University"}
            }
        }
    )

    id: str
    student_id: str
    course_id: str
    institution_id: str
    status: str
    personal_statement: Optional[str] = None
    documents: List[Any] = Field(default_factory=list)
    applied_at: Optional[str] = None
    updated_at: Optional[str] = None
    course: Optional[CourseBrief] = None
    institution: Optional[InstitutionBrief] = None


class ApplicationResponse(BaseModel):
    success: bool
    application: ApplicationSummary


class ApplicationsResponse(BaseModel):
    success: bool
    count: int
    applications: List[ApplicationSummary]


class TranscriptOut(BaseModel):
    id: str
    student_id: str
    gpa: Optional[float] = None
    certificates: List[Any] = Field(default_factory=list)
    file_url: Optional[str] = None
    uploaded_at: Optional[str] = None


class TranscriptResponse(BaseModel):
    success: bool
    transcript: Optional[TranscriptOut] = None


class InstitutionOut(BaseModel):
    id: str
    admin_id: Optional[str] = None
    name: str
    type: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    contact: Dict[str, Any] = Field(default_factory=dict)
    is_active: bool = True


class InstitutionResponse(BaseModel):
    success: bool
    institution: InstitutionOut


class InstitutionsResponse(BaseModel):
    success: bool
    count: int
    institutions: List[InstitutionOut]


class CourseOut(BaseModel):
    id: str
    institution_id: str
    faculty_id: Optional[str] = None
    faculty_name: Optional[str] = None
    name: str
    description: Optional[str] = None
    duration: Optional[str] = None
    fees: Optional[str] = None
    requirements: Dict[str, Any] = Field(default_factory=dict)
    is_active: bool = True


class CoursesResponse(BaseModel):
    success: bool
    count: int
    courses: List[CourseOut]


class FacultyOut(BaseModel):
    id: str
    institution_id: str
    name: str
    description: Optional[str] = None


class FacultiesResponse(BaseModel):
    success: bool
    count: int
    faculties: List[FacultyOut]


class CompanyOut(BaseModel):
    id: str
    admin_id: Optional[str] = None
    name: str
    industry: Optional[str] = None
    status: str


class CompanyResponse(BaseModel):
    success: bool
    company: CompanyOut


class CompaniesResponse(BaseModel):
    success: bool
    count: int
    companies: List[CompanyOut]


class JobRequirementsOut(BaseModel):
    min_gpa: Optional[float] = None
    required_certificates: List[str] = Field(default_factory=list)
    min_years_experience: Optional[float] = None


class JobOut(BaseModel):
    id: str
    company_id: str
    company_name: Optional[str] = None
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    salary_range: Optional[str] = None
    requirements: JobRequirementsOut
    deadline: Optional[str] = None
    is_active: bool = True
    posted_at: Optional[str] = None


class JobResponse(BaseModel):
    success: bool
    job: JobOut
    notifications_scheduled: bool = False


class JobsResponse(BaseModel):
    success: bool
    count: int
    jobs: List[JobOut]


class JobApplicationOut(BaseModel):
    id: str
    student_id: str
    job_id: str
    status: str
    transcript_snapshot: Optional[Dict[str, Any]] = None
    applied_at: Optional[str] = None
    updated_at: Optional[str] = None


class JobApplicationResponse(BaseModel):
    success: bool
    job_application: JobApplicationOut


class ScoreBreakdownOut(BaseModel):
    academic: float
    certificates: float
    experience: float


class RankedApplicantOut(BaseModel):
    """One applicant in ranked order, with the score explained."""
    rank: int
    job_application_id: str
    student_id: str
    status: str
    applied_at: Optional[str] = None
    student: Dict[str, Any] = Field(default_factory=dict)
    qualified: bool
    reasons: List[str] = Field(default_factory=list)
    match_score: float
    breakdown: ScoreBreakdownOut
    matched_certificates: List[str] = Field(default_factory=list)


class ApplicantsResponse(BaseModel):
    success: bool
    job_id: str
    count: int
    qualified_count: int
    applicants: List[RankedApplicantOut]


class NotificationOut(BaseModel):
    id: str
    title: str
    message: str
    type: str
    job_id: Optional[str] = None
    read: bool = False
    created_at: Optional[str] = None


class NotificationsResponse(BaseModel):
    success: bool
    count: int
    notifications: List[NotificationOut]


class SystemStats(BaseModel):
    users: int
    institutions: int
    companies: int
    applications: int
    jobs: int
    recent_users: List[UserProfile] = Field(default_factory=list)
    recent_applications: List[ApplicationSummary] = Field(default_factory=list)


class StatsResponse(BaseModel):
    success: bool
    stats: SystemStats


class ApplicationReport(BaseModel):
    period: str
    since: str
    total: int
    by_status: Dict[str, int] = Field(default_factory=dict)
    by_institution: Dict[str, int] = Field(default_factory=dict)
    by_course: Dict[str, int] = Field(default_factory=dict)


class ApplicationReportResponse(BaseModel):
    success: bool
    report: ApplicationReport
