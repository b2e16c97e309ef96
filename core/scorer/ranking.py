#!/usr/bin/env python3
"""
Ranking - total, deterministic order over scored applicants.

Order: qualified first, score descending, earlier application first
(missing timestamps last), then id ascending as the final tie-break.
"""

from typing import Iterable, List

from core.utils import as_utc
from core.scorer.models import RankedApplicant


def rank_key(entry: RankedApplicant):
    applied_at = as_utc(entry.applicant.applied_at)
    return (
        0 if entry.qualified else 1,
        -entry.value,
        applied_at is None,
        applied_at.timestamp() if applied_at is not None else 0.0,
        str(entry.id),
    )


def rank(entries: Iterable[RankedApplicant]) -> List[RankedApplicant]:
    ordered = sorted(entries, key=rank_key)
    for position, entry in enumerate(ordered, start=1):
        entry.rank = position
    return ordered
