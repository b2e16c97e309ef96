#!/usr/bin/env python3
"""
Unit tests for years-of-experience calculation.
"""

import unittest
from datetime import date

from core.scorer.experience import merge_intervals, parse_month, years_of_experience

TODAY = date(2026, 3, 1)


class TestParseMonth(unittest.TestCase):

    def test_parses_month_and_day_formats(self):
        self.assertEqual(parse_month("2024-05"), date(2024, 5, 1))
        self.assertEqual(parse_month("2024-05-17"), date(2024, 5, 17))

    def test_drops_time_part(self):
        self.assertEqual(parse_month("2024-05-17T10:30:00Z"), date(2024, 5, 17))

    def test_blank_is_none(self):
        self.assertIsNone(parse_month(None))
        self.assertIsNone(parse_month(""))

    def test_garbage_raises(self):
        with self.assertRaises(ValueError):
            parse_month("last spring")


class TestMergeIntervals(unittest.TestCase):

    def test_overlapping_ranges_merge(self):
        merged = merge_intervals([
            (date(2022, 1, 1), date(2022, 12, 1)),
            (date(2022, 6, 1), date(2023, 6, 1)),
            (date(2024, 1, 1), date(2024, 2, 1)),
        ])
        self.assertEqual(merged, [
            (date(2022, 1, 1), date(2023, 6, 1)),
            (date(2024, 1, 1), date(2024, 2, 1)),
        ])


class TestYearsOfExperience(unittest.TestCase):

    def test_no_entries(self):
        self.assertEqual(years_of_experience(None, today=TODAY), 0.0)
        self.assertEqual(years_of_experience([], today=TODAY), 0.0)

    def test_explicit_years_are_summed(self):
        entries = [{"years": 1.5}, {"years": 2}]
        self.assertEqual(years_of_experience(entries, today=TODAY), 3.5)

    def test_overlapping_jobs_count_once(self):
        entries = [
            {"start_date": "2022-01", "end_date": "2023-01"},
            {"start_date": "2022-07", "end_date": "2023-07"},
        ]
        self.assertEqual(years_of_experience(entries, today=TODAY), 1.5)

    def test_current_job_runs_until_today(self):
        entries = [{"start_date": "2025-03", "end_date": None}]
        self.assertEqual(years_of_experience(entries, today=TODAY), 1.0)

    def test_future_end_is_capped_at_today(self):
        entries = [{"start_date": "2025-09", "end_date": "2030-01"}]
        self.assertEqual(years_of_experience(entries, today=TODAY), 0.5)

    def test_malformed_entries_are_skipped(self):
        entries = [
            {"start_date": "sometime", "end_date": "2023-01"},
            {"years": "a few"},
            "not a dict",
            {"start_date": "2024-03", "end_date": "2025-03"},
        ]
        self.assertEqual(years_of_experience(entries, today=TODAY), 1.0)


if __name__ == '__main__':
    unittest.main()
