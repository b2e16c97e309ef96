#!/usr/bin/env python3
"""
Report service - admin statistics and application reports.
"""

import logging
from collections import Counter
from typing import List

from dateutil.relativedelta import relativedelta
from sqlalchemy.orm import Session

from core.utils import utcnow
from database.repository import CareerRepository
from ..models.responses import ApplicationReport, CompanyOut, SystemStats
from ..utils import safe_datetime_iso, to_application_summary, to_company_out, to_user_profile

logger = logging.getLogger(__name__)

REPORT_PERIODS = {
    'week': relativedelta(weeks=1),
    'month': relativedelta(months=1),
    'year': relativedelta(years=1),
}
DEFAULT_PERIOD = 'month'


class ReportService:
    """Service for admin reporting."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = CareerRepository(db)

    def get_stats(self, recent_limit: int = 5) -> SystemStats:
        """
        Get system-wide counts and recent activity.

        Returns:
            Counts per collection plus the most recent users and applications.
        """
        return SystemStats(
            users=self.repo.users.count(),
            institutions=self.repo.institutions.count(),
            companies=self.repo.companies.count(),
            applications=self.repo.applications.count(),
            jobs=self.repo.jobs.count(),
            recent_users=[to_user_profile(u) for u in self.repo.users.recent(recent_limit)],
            recent_applications=[to_application_summary(a) for a in self.repo.applications.recent(recent_limit)],
        )

    def application_report(self, period: str = DEFAULT_PERIOD) -> ApplicationReport:
        """Applications since the start of the period, grouped by status, institution and course."""
        if period not in REPORT_PERIODS:
            period = DEFAULT_PERIOD
        since = utcnow() - REPORT_PERIODS[period]

        applications = self.repo.applications.in_period(since)
        return ApplicationReport(
            period=period,
            since=safe_datetime_iso(since),
            total=len(applications),
            by_status=dict(Counter(a.status for a in applications)),
            by_institution=dict(Counter(a.institution_id for a in applications)),
            by_course=dict(Counter(a.course_id for a in applications)),
        )

    def list_companies(self) -> List[CompanyOut]:
        return [to_company_out(c) for c in self.repo.companies.list_all()]

    def set_company_status(self, company_id: str, status: str) -> CompanyOut:
        company = self.repo.companies.update(company_id, {'status': status})
        self.repo.commit()
        logger.info(f"Company {company.id} status set to {status}")
        return to_company_out(company)
