#!/usr/bin/env python3
"""
Endpoints for institution administrators: own catalog and incoming applications.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.app_context import AppContext
from database.models import User
from ..dependencies import get_app_context, get_db, require_role
from ..models.requests import StatusUpdateRequest
from ..models.responses import (
    ApplicationResponse,
    ApplicationsResponse,
    CoursesResponse,
    FacultiesResponse,
)
from ..services.application_service import ApplicationService
from ..services.catalog_service import CatalogService

router = APIRouter(prefix="/api/institution", tags=["institution"])

institution_actor = require_role('institution', 'admin')


@router.get("/courses", response_model=CoursesResponse)
def list_own_courses(
    actor: User = Depends(require_role('institution')),
    db: Session = Depends(get_db)
):
    courses = CatalogService(db).own_courses(actor)
    return CoursesResponse(success=True, count=len(courses), courses=courses)


@router.get("/faculties", response_model=FacultiesResponse)
def list_own_faculties(
    actor: User = Depends(require_role('institution')),
    db: Session = Depends(get_db)
):
    faculties = CatalogService(db).own_faculties(actor)
    return FacultiesResponse(success=True, count=len(faculties), faculties=faculties)


@router.get("/applications", response_model=ApplicationsResponse)
def list_applications(
    status: Optional[str] = Query(default=None, description="Filter by application status"),
    actor: User = Depends(institution_actor),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    applications = ApplicationService(db, ctx).list_for_institution_actor(actor, status)
    return ApplicationsResponse(success=True, count=len(applications), applications=applications)


@router.put("/applications/{application_id}/status", response_model=ApplicationResponse)
def update_application_status(
    application_id: str,
    body: StatusUpdateRequest,
    actor: User = Depends(institution_actor),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    """
    Admit or reject a pending application.

    Admission is refused with 400 when the student already holds an
    admission at another institution.
    """
    application = ApplicationService(db, ctx).transition(actor, application_id, body.status)
    return ApplicationResponse(success=True, application=application)
