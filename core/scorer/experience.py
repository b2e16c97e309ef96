#!/usr/bin/env python3
"""
Experience Calculation - years of work experience from profile entries.

Entries either state `years` directly or give a start/end date range.
Date ranges are merged first so overlapping jobs count once; a missing
end date means the job is current.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

_DATE_FORMATS = ('%Y-%m-%d', '%Y-%m')


def parse_month(value: Any) -> Optional[date]:
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    # Full ISO timestamps keep only the date part
    if 'T' in text:
        text = text.split('T', 1)[0]
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Unrecognized date: {value!r}")


def merge_intervals(intervals: Iterable[Tuple[date, date]]) -> List[Tuple[date, date]]:
    merged: List[Tuple[date, date]] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1]:
            if end > merged[-1][1]:
                merged[-1] = (merged[-1][0], end)
        else:
            merged.append((start, end))
    return merged


def _months_between(start: date, end: date) -> int:
    diff = relativedelta(end, start)
    return max(0, diff.years * 12 + diff.months)


def years_of_experience(entries: Optional[Iterable[Dict[str, Any]]], today: Optional[date] = None) -> float:
    """
    Total years of experience across work history entries.

    Explicit `years` values are summed as given. Dated entries contribute the
    months covered by the union of their ranges. Malformed entries are logged
    and skipped.
    """
    if not entries:
        return 0.0

    today = today or date.today()
    explicit_years = 0.0
    intervals: List[Tuple[date, date]] = []

    for entry in entries:
        if not isinstance(entry, dict):
            continue
        years = entry.get('years')
        if years is not None:
            try:
                explicit_years += max(0.0, float(years))
            except (ValueError, TypeError):
                logger.warning(f"Ignoring non-numeric years in experience entry: {years!r}")
            continue
        try:
            start = parse_month(entry.get('start_date'))
            end = parse_month(entry.get('end_date')) or today
        except ValueError as e:
            logger.warning(f"Could not parse dates for experience entry: {e}")
            continue
        if start is None:
            continue
        if end > today:
            end = today
        if end > start:
            intervals.append((start, end))

    total_months = sum(_months_between(start, end) for start, end in merge_intervals(intervals))
    return round(explicit_years + total_months / 12, 2)
