#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from datetime import datetime
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Literal, Optional


class CreateProfileRequest(BaseModel):
    """Create the platform profile for the signed-in identity."""
    role: Literal['student', 'institution', 'company', 'admin']
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    phone: Optional[str] = None
    admin_code: Optional[str] = Field(None, description="Required when role is admin")


class ResendVerificationRequest(BaseModel):
    email: str = Field(..., min_length=3)


class ApplicationCreateRequest(BaseModel):
    """
    Apply to an institution course.

    IDs are optional here so a missing value is reported as a 400 by the
    admission service rather than a schema error.
    """
    course_id: Optional[str] = None
    institution_id: Optional[str] = None
    personal_statement: Optional[str] = None
    documents: List[Any] = Field(default_factory=list)


class StatusUpdateRequest(BaseModel):
    status: str = Field(..., description="Target status")


class CertificateIn(BaseModel):
    name: str = Field(..., min_length=1)
    issuer: Optional[str] = None
    issued_at: Optional[str] = None


class WorkExperienceIn(BaseModel):
    company: Optional[str] = None
    title: Optional[str] = None
    start_date: Optional[str] = Field(None, description="YYYY-MM or YYYY-MM-DD")
    end_date: Optional[str] = Field(None, description="Empty for a current position")
    years: Optional[float] = Field(None, ge=0)


class ProfileUpdateRequest(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    contact: Optional[Dict[str, Any]] = None
    certificates: Optional[List[CertificateIn]] = None
    work_experience: Optional[List[WorkExperienceIn]] = None


class TranscriptUploadRequest(BaseModel):
    """Transcript record; the file itself lives in external storage."""
    gpa: Optional[float] = Field(None, ge=0)
    certificates: List[str] = Field(default_factory=list)
    file_url: Optional[str] = None


class JobCreateRequest(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    salary_range: Optional[str] = None
    min_gpa: Optional[float] = Field(None, ge=0)
    required_certificates: List[str] = Field(default_factory=list)
    min_years_experience: Optional[float] = Field(None, ge=0)
    deadline: Optional[datetime] = None


class JobUpdateRequest(BaseModel):
    """Only activity and deadline are editable after posting."""
    is_active: Optional[bool] = None
    deadline: Optional[datetime] = None


class CompanyProfileUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    industry: Optional[str] = None


class CompanyStatusUpdateRequest(BaseModel):
    status: Literal['approved', 'suspended']


class InstitutionCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    type: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    contact: Dict[str, Any] = Field(default_factory=dict)
    admin_id: Optional[str] = Field(None, description="User ID of the institution's administrator")


class InstitutionUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    type: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    contact: Optional[Dict[str, Any]] = None
    admin_id: Optional[str] = None
    is_active: Optional[bool] = None
