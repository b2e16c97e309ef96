#!/usr/bin/env python3
"""
Eligibility Module - admission control for course applications.

Public API:
- EligibilityChecker: pure rule evaluation over an application set
- ApplicationAdmissionService: guarded create and status transitions
- EligibilityDecision, AdmissionResult: typed outcomes
"""

from core.eligibility.models import EligibilityDecision, AdmissionResult
from core.eligibility.checker import EligibilityChecker, LIMIT_REACHED, ALREADY_ADMITTED
from core.eligibility.admission import ApplicationAdmissionService

__all__ = [
    'EligibilityChecker',
    'ApplicationAdmissionService',
    'EligibilityDecision',
    'AdmissionResult',
    'LIMIT_REACHED',
    'ALREADY_ADMITTED',
]
