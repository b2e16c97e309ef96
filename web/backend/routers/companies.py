#!/usr/bin/env python3
"""
Company endpoints - profile, job postings and ranked applicants.
"""

import logging
from typing import Callable

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from sqlalchemy.orm import Session

from core.app_context import AppContext
from database.models import User
from notification.fanout import run_job_posted_fanout
from ..dependencies import get_app_context, get_db, get_session_factory, require_role
from ..models.requests import (
    CompanyProfileUpdateRequest,
    JobCreateRequest,
    JobUpdateRequest,
    StatusUpdateRequest,
)
from ..models.responses import (
    ApplicantsResponse,
    CompanyResponse,
    JobApplicationResponse,
    JobResponse,
    JobsResponse,
)
from ..rate_limit import limiter, submission_limit
from ..services.job_service import JobService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/companies", tags=["companies"])

company_only = require_role('company')


@router.get("/profile", response_model=CompanyResponse)
def get_company_profile(
    actor: User = Depends(company_only),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    return CompanyResponse(success=True, company=JobService(db, ctx).get_company_profile(actor))


@router.put("/profile", response_model=CompanyResponse)
def update_company_profile(
    body: CompanyProfileUpdateRequest,
    actor: User = Depends(company_only),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    return CompanyResponse(success=True, company=JobService(db, ctx).update_company_profile(actor, body))


@router.post("/jobs", response_model=JobResponse, status_code=201)
@limiter.limit(submission_limit)
def post_job(
    request: Request,
    body: JobCreateRequest,
    background_tasks: BackgroundTasks,
    actor: User = Depends(company_only),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context),
    session_factory: Callable[[], Session] = Depends(get_session_factory)
):
    """
    Post a job.

    The response returns once the job is stored; qualified students are
    notified afterwards in the background.
    """
    job = JobService(db, ctx).post_job(actor, body)

    scheduled = ctx.config.notifications.enabled
    if scheduled:
        background_tasks.add_task(
            run_job_posted_fanout,
            job.id,
            session_factory,
            ctx.config,
            ctx.config.database.statement_timeout_seconds,
        )
        logger.info(f"Scheduled job-posted notifications for {job.id}")
    return JobResponse(success=True, job=job, notifications_scheduled=scheduled)


@router.get("/jobs", response_model=JobsResponse)
def list_jobs(
    actor: User = Depends(company_only),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    jobs = JobService(db, ctx).list_jobs(actor)
    return JobsResponse(success=True, count=len(jobs), jobs=jobs)


@router.patch("/jobs/{job_id}", response_model=JobResponse)
def update_job(
    job_id: str,
    body: JobUpdateRequest,
    actor: User = Depends(company_only),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    return JobResponse(success=True, job=JobService(db, ctx).update_job(actor, job_id, body))


@router.get("/jobs/{job_id}/applicants", response_model=ApplicantsResponse)
def get_ranked_applicants(
    job_id: str,
    actor: User = Depends(company_only),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    """
    Applicants in rank order: qualified before unqualified, then by match
    score, then by application time.
    """
    return JobService(db, ctx).ranked_applicants(actor, job_id)


@router.put("/job-applications/{job_application_id}/status", response_model=JobApplicationResponse)
def update_job_application_status(
    job_application_id: str,
    body: StatusUpdateRequest,
    actor: User = Depends(company_only),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    job_application = JobService(db, ctx).transition_job_application(actor, job_application_id, body.status)
    return JobApplicationResponse(success=True, job_application=job_application)
