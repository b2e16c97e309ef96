from sqlalchemy import (
    Column, Text, Boolean, Float, TIMESTAMP, ForeignKey, Index, UniqueConstraint
)

from core.utils import new_id, utcnow
from .base import Base, JSONDocument

COMPANY_STATUSES = ('pending', 'approved', 'suspended')
JOB_APPLICATION_STATUSES = ('applied', 'shortlisted', 'rejected')


class Company(Base):
    __tablename__ = 'companies'

    id = Column(Text, primary_key=True, default=new_id)
    admin_id = Column(Text, ForeignKey('users.id', ondelete='SET NULL'), nullable=True)
    name = Column(Text, nullable=False)
    industry = Column(Text)
    status = Column(Text, nullable=False, default='pending')  # pending|approved|suspended

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index('idx_companies_admin', 'admin_id'),
    )


class Job(Base):
    """
    A job posting. Structured requirements are split into columns so the
    matching engine never has to parse free text:
        min_gpa, required_certificates (list of names), min_years_experience
    """
    __tablename__ = 'jobs'

    id = Column(Text, primary_key=True, default=new_id)
    company_id = Column(Text, ForeignKey('companies.id', ondelete='CASCADE'), nullable=False)
    company_name = Column(Text)

    title = Column(Text, nullable=False)
    description = Column(Text)
    location = Column(Text)
    job_type = Column(Text)
    salary_range = Column(Text)

    min_gpa = Column(Float, nullable=True)
    required_certificates = Column(JSONDocument, nullable=False, default=list)
    min_years_experience = Column(Float, nullable=True)

    deadline = Column(TIMESTAMP(timezone=True), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    posted_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index('idx_jobs_company_posted', 'company_id', 'posted_at'),
        Index('idx_jobs_active', 'is_active'),
    )


class JobApplication(Base):
    __tablename__ = 'job_applications'

    id = Column(Text, primary_key=True, default=new_id)
    student_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    job_id = Column(Text, ForeignKey('jobs.id', ondelete='CASCADE'), nullable=False)
    status = Column(Text, nullable=False, default='applied')  # applied|shortlisted|rejected

    # Latest transcript at the time of applying: {"gpa": 3.5, "certificates": [...]}
    transcript_snapshot = Column(JSONDocument, nullable=True)

    applied_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        UniqueConstraint('student_id', 'job_id', name='uq_job_application_student_job'),
        Index('idx_job_applications_job', 'job_id'),
    )
