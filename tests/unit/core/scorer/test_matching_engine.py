#!/usr/bin/env python3
"""
Unit tests for MatchingEngine wiring over stored records.
"""

import unittest
from datetime import date
from types import SimpleNamespace

from core.config_loader import ScoringConfig
from core.scorer import JobRequirements, MatchingEngine


def student(student_id="s1", certificates=(), work_experience=None):
    return SimpleNamespace(
        id=student_id,
        profile={"certificates": list(certificates), "work_experience": work_experience or []},
    )


def transcript(gpa, certificates=()):
    return SimpleNamespace(gpa=gpa, certificates=list(certificates))


def job(min_gpa=None, certificates=(), min_years=None):
    return SimpleNamespace(
        id="j1",
        min_gpa=min_gpa,
        required_certificates=list(certificates),
        min_years_experience=min_years,
    )


class TestMatchingEngine(unittest.TestCase):

    def setUp(self):
        self.engine = MatchingEngine(today=lambda: date(2026, 3, 1))

    def test_candidate_merges_profile_and_transcript_certificates(self):
        candidate = self.engine.candidate_for(
            student(certificates=[{"name": "PMP"}]),
            transcript(3.4, ["AWS"]),
        )
        self.assertEqual(candidate.certificates, frozenset({"aws", "pmp"}))
        self.assertEqual(candidate.gpa, 3.4)
        self.assertTrue(candidate.has_transcript)

    def test_candidate_without_transcript(self):
        candidate = self.engine.candidate_for(student(), None)
        self.assertFalse(candidate.has_transcript)
        self.assertIsNone(candidate.gpa)

    def test_experience_counts_to_injected_today(self):
        candidate = self.engine.candidate_for(
            student(work_experience=[{"start_date": "2024-03", "end_date": ""}]),
            transcript(3.0),
        )
        self.assertEqual(candidate.years_experience, 2.0)

    def test_requirements_from_job(self):
        requirements = JobRequirements.from_job(job(3.0, [" AWS ", ""], 2))
        self.assertEqual(requirements.required_certificates, frozenset({"aws"}))
        self.assertEqual(requirements.min_gpa, 3.0)
        self.assertEqual(requirements.min_years_experience, 2)

    def test_notification_qualification(self):
        result = self.engine.evaluate_qualification_for_notification(
            student(), transcript(3.6, ["AWS"]), job(3.0, ["AWS"])
        )
        self.assertTrue(result.qualified)

        result = self.engine.evaluate_qualification_for_notification(student(), None, job(3.0))
        self.assertFalse(result.qualified)

    def test_injected_weights(self):
        engine = MatchingEngine(ScoringConfig(academic_weight=20.0))
        candidate = engine.candidate_for(student(), transcript(3.0))
        self.assertEqual(engine.score(candidate, JobRequirements()).breakdown.academic, 60.0)


if __name__ == '__main__':
    unittest.main()
