#!/usr/bin/env python3
"""
Unit tests for match score components and qualification.
"""

import unittest

from core.config_loader import ScoringConfig
from core.scorer.models import Candidate, JobRequirements
from core.scorer.qualification import NO_TRANSCRIPT, evaluate_qualification
from core.scorer.scoring import calculate_score, clamp_gpa


def candidate(gpa=3.0, certificates=(), years=0.0, has_transcript=True, student_id="s1"):
    return Candidate(
        student_id=student_id,
        gpa=gpa,
        has_transcript=has_transcript,
        certificates=frozenset(c.lower() for c in certificates),
        years_experience=years,
    )


class TestCalculateScore(unittest.TestCase):

    def setUp(self):
        self.config = ScoringConfig()

    def test_components_sum_to_value(self):
        requirements = JobRequirements.build(min_gpa=3.0, required_certificates=["AWS"])
        score = calculate_score(candidate(3.5, ["AWS", "PMP"], years=2), requirements, self.config)

        self.assertEqual(score.breakdown.academic, 35.0)
        self.assertEqual(score.breakdown.certificates, 6.0)  # 1 required * 5 + 1 extra * 1
        self.assertEqual(score.breakdown.experience, 16.0)
        self.assertEqual(score.value, 57.0)
        self.assertEqual(score.matched_certificates, ("aws",))
        self.assertEqual(score.extra_certificates, 1)

    def test_no_transcript_scores_zero_academic(self):
        score = calculate_score(candidate(None, has_transcript=False), JobRequirements(), self.config)
        self.assertEqual(score.breakdown.academic, 0.0)

    def test_extra_certificate_bonus_is_capped(self):
        extras = [f"cert-{i}" for i in range(12)]
        score = calculate_score(candidate(0.0, extras), JobRequirements(), self.config)
        self.assertEqual(score.breakdown.certificates, self.config.extra_certificate_bonus_cap)

    def test_experience_is_capped(self):
        score = calculate_score(candidate(0.0, years=25), JobRequirements(), self.config)
        self.assertEqual(score.years_counted, self.config.experience_cap_years)
        self.assertEqual(score.breakdown.experience, 80.0)

    def test_out_of_range_gpa_is_clamped(self):
        with self.assertLogs('core.scorer.scoring', level='WARNING'):
            score = calculate_score(candidate(5.2), JobRequirements(), self.config)
        self.assertEqual(score.breakdown.academic, 40.0)

    def test_weights_come_from_config(self):
        config = ScoringConfig(academic_weight=1.0, certificate_weight=0.0, experience_weight=0.0)
        score = calculate_score(candidate(3.2, ["AWS"], years=4), JobRequirements.build(required_certificates=["aws"]), config)
        self.assertEqual(score.value, 3.2)

    def test_certificate_names_compare_case_insensitively(self):
        requirements = JobRequirements.build(required_certificates=["  Aws "])
        score = calculate_score(candidate(3.0, ["aws"]), requirements, self.config)
        self.assertEqual(score.matched_certificates, ("aws",))


class TestClampGpa(unittest.TestCase):

    def test_in_range_is_untouched(self):
        self.assertEqual(clamp_gpa(3.3, 4.0), 3.3)

    def test_negative_clamps_to_zero(self):
        self.assertEqual(clamp_gpa(-1.0, 4.0), 0.0)


class TestQualification(unittest.TestCase):

    def test_meets_every_minimum(self):
        requirements = JobRequirements.build(min_gpa=3.0, required_certificates=["AWS"], min_years_experience=1)
        result = evaluate_qualification(candidate(3.5, ["AWS"], years=2), requirements)
        self.assertTrue(result.qualified)
        self.assertEqual(result.reasons, ())

    def test_exact_minimum_qualifies(self):
        requirements = JobRequirements.build(min_gpa=3.0, min_years_experience=2)
        self.assertTrue(evaluate_qualification(candidate(3.0, years=2), requirements).qualified)

    def test_every_failed_rule_is_reported(self):
        requirements = JobRequirements.build(min_gpa=3.0, required_certificates=["AWS", "PMP"], min_years_experience=3)
        result = evaluate_qualification(candidate(2.5, ["PMP"], years=1), requirements)

        self.assertFalse(result.qualified)
        self.assertEqual(len(result.reasons), 3)
        self.assertIn("missing required certificates: aws", result.reasons)

    def test_no_transcript_never_qualifies(self):
        result = evaluate_qualification(candidate(None, has_transcript=False), JobRequirements())
        self.assertFalse(result.qualified)
        self.assertEqual(result.reasons, (NO_TRANSCRIPT,))

    def test_no_requirements_only_needs_a_transcript(self):
        self.assertTrue(evaluate_qualification(candidate(0.5), JobRequirements()).qualified)


if __name__ == '__main__':
    unittest.main()
