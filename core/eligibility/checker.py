#!/usr/bin/env python3
"""
Eligibility Checker - may a student submit another application?

Rules, applied to the student's complete, freshly loaded application set:
1. At most `max_applications_per_institution` non-withdrawn applications at
   the target institution.
2. No new applications once any application has been admitted. Withdrawing
   other applications afterwards does not lift this.
"""

import logging
from typing import Any, Iterable, Optional

from core.config_loader import EligibilityConfig
from core.eligibility.models import EligibilityDecision

logger = logging.getLogger(__name__)

LIMIT_REACHED = "institution application limit reached"
ALREADY_ADMITTED = "already admitted elsewhere"


def _field(application: Any, name: str):
    if isinstance(application, dict):
        return application.get(name)
    return getattr(application, name, None)


class EligibilityChecker:
    def __init__(self, config: Optional[EligibilityConfig] = None):
        self.config = config or EligibilityConfig()

    @property
    def limit(self) -> int:
        return self.config.max_applications_per_institution

    def can_apply(self, applications: Iterable[Any], institution_id: Any) -> EligibilityDecision:
        applications = list(applications)

        active_here = sum(
            1 for app in applications
            if _field(app, 'institution_id') == institution_id
            and _field(app, 'status') != 'withdrawn'
        )
        if active_here >= self.limit:
            return EligibilityDecision.deny(LIMIT_REACHED)

        if any(_field(app, 'status') == 'admitted' for app in applications):
            return EligibilityDecision.deny(ALREADY_ADMITTED)

        return EligibilityDecision.allow()

    def can_admit(self, applications: Iterable[Any], application_id: Any) -> EligibilityDecision:
        """A student holds at most one admitted application at a time."""
        for app in applications:
            if _field(app, 'status') == 'admitted' and _field(app, 'id') != application_id:
                return EligibilityDecision.deny(ALREADY_ADMITTED)
        return EligibilityDecision.allow()
