#!/usr/bin/env python3
"""
Admin endpoints - system statistics, reports and company moderation.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.models import User
from ..dependencies import get_db, require_role
from ..models.requests import CompanyStatusUpdateRequest
from ..models.responses import (
    ApplicationReportResponse,
    CompaniesResponse,
    CompanyResponse,
    InstitutionsResponse,
    StatsResponse,
)
from ..services.catalog_service import CatalogService
from ..services.report_service import ReportService

router = APIRouter(prefix="/api/admin", tags=["admin"])

admin_only = require_role('admin')


@router.get("/stats", response_model=StatsResponse)
def get_stats(
    admin: User = Depends(admin_only),
    db: Session = Depends(get_db)
):
    """Counts per collection with the most recent users and applications."""
    return StatsResponse(success=True, stats=ReportService(db).get_stats())


@router.get("/institutions", response_model=InstitutionsResponse)
def list_institutions(
    admin: User = Depends(admin_only),
    db: Session = Depends(get_db)
):
    """All institutions, including inactive ones."""
    institutions = CatalogService(db).list_all_institutions()
    return InstitutionsResponse(success=True, count=len(institutions), institutions=institutions)


@router.get("/companies", response_model=CompaniesResponse)
def list_companies(
    admin: User = Depends(admin_only),
    db: Session = Depends(get_db)
):
    companies = ReportService(db).list_companies()
    return CompaniesResponse(success=True, count=len(companies), companies=companies)


@router.get("/reports/applications", response_model=ApplicationReportResponse)
def application_report(
    period: str = Query(default="month", description="week, month or year"),
    admin: User = Depends(admin_only),
    db: Session = Depends(get_db)
):
    return ApplicationReportResponse(success=True, report=ReportService(db).application_report(period))


@router.put("/companies/{company_id}/status", response_model=CompanyResponse)
def update_company_status(
    company_id: str,
    body: CompanyStatusUpdateRequest,
    admin: User = Depends(admin_only),
    db: Session = Depends(get_db)
):
    return CompanyResponse(success=True, company=ReportService(db).set_company_status(company_id, body.status))
