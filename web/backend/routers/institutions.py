#!/usr/bin/env python3
"""
Institution catalog endpoints - public browsing and admin management.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.models import User
from ..dependencies import get_db, require_role
from ..models.requests import InstitutionCreateRequest, InstitutionUpdateRequest
from ..models.responses import (
    CoursesResponse,
    FacultiesResponse,
    InstitutionResponse,
    InstitutionsResponse,
)
from ..services.catalog_service import CatalogService

router = APIRouter(prefix="/api/institutions", tags=["institutions"])


@router.get("", response_model=InstitutionsResponse)
def list_institutions(db: Session = Depends(get_db)):
    """List active institutions."""
    institutions = CatalogService(db).list_institutions()
    return InstitutionsResponse(success=True, count=len(institutions), institutions=institutions)


@router.get("/{institution_id}", response_model=InstitutionResponse)
def get_institution(institution_id: str, db: Session = Depends(get_db)):
    return InstitutionResponse(success=True, institution=CatalogService(db).get_institution(institution_id))


@router.get("/{institution_id}/courses", response_model=CoursesResponse)
def list_courses(institution_id: str, db: Session = Depends(get_db)):
    courses = CatalogService(db).list_courses(institution_id)
    return CoursesResponse(success=True, count=len(courses), courses=courses)


@router.get("/{institution_id}/faculties", response_model=FacultiesResponse)
def list_faculties(institution_id: str, db: Session = Depends(get_db)):
    faculties = CatalogService(db).list_faculties(institution_id)
    return FacultiesResponse(success=True, count=len(faculties), faculties=faculties)


@router.post("", response_model=InstitutionResponse, status_code=201)
def create_institution(
    body: InstitutionCreateRequest,
    admin: User = Depends(require_role('admin')),
    db: Session = Depends(get_db)
):
    return InstitutionResponse(success=True, institution=CatalogService(db).create_institution(body))


@router.put("/{institution_id}", response_model=InstitutionResponse)
def update_institution(
    institution_id: str,
    body: InstitutionUpdateRequest,
    admin: User = Depends(require_role('admin')),
    db: Session = Depends(get_db)
):
    return InstitutionResponse(
        success=True,
        institution=CatalogService(db).update_institution(institution_id, body)
    )
