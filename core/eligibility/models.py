#!/usr/bin/env python3
"""
Eligibility Models - decisions and typed admission results.
"""

from dataclasses import dataclass
from typing import Optional

from core.errors import CareerServiceError


@dataclass(frozen=True)
class EligibilityDecision:
    allowed: bool
    reason: Optional[str] = None

    @classmethod
    def allow(cls) -> 'EligibilityDecision':
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> 'EligibilityDecision':
        return cls(allowed=False, reason=reason)


@dataclass
class AdmissionResult:
    """
    Outcome of a guarded application write.

    Business refusals (EligibilityDenied, ConflictError) are returned rather
    than raised so callers can branch on them; `unwrap()` raises instead.
    """
    application: Optional[object] = None
    error: Optional[CareerServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.application
