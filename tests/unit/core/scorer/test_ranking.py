#!/usr/bin/env python3
"""
Unit tests for applicant ranking order.
"""

import random
import unittest

from core.scorer import Applicant, Candidate, JobRequirements, MatchingEngine
from core.scorer.ranking import rank_key
from tests import at


def applicant(app_id, gpa, certificates=(), applied_minutes=0, has_transcript=True):
    return Applicant(
        id=app_id,
        candidate=Candidate(
            student_id=f"student-{app_id}",
            gpa=gpa,
            has_transcript=has_transcript,
            certificates=frozenset(c.lower() for c in certificates),
        ),
        applied_at=at(applied_minutes) if applied_minutes is not None else None,
    )


class TestRanking(unittest.TestCase):

    def setUp(self):
        self.engine = MatchingEngine()
        self.requirements = JobRequirements.build(min_gpa=3.0, required_certificates=["AWS"])

    def test_qualified_applicant_outranks_higher_gpa(self):
        a = applicant("A", 3.5, ["AWS", "PMP"])
        b = applicant("B", 3.8)

        ranked = self.engine.rank_applicants([b, a], self.requirements)

        self.assertEqual([r.id for r in ranked], ["A", "B"])
        self.assertTrue(ranked[0].qualified)
        self.assertFalse(ranked[1].qualified)
        self.assertGreater(ranked[1].value, 0)
        self.assertEqual([r.rank for r in ranked], [1, 2])

    def test_higher_score_first_among_qualified(self):
        low = applicant("low", 3.1, ["AWS"])
        high = applicant("high", 3.9, ["AWS"])
        ranked = self.engine.rank_applicants([low, high], self.requirements)
        self.assertEqual([r.id for r in ranked], ["high", "low"])

    def test_equal_scores_break_on_applied_at_then_id(self):
        late = applicant("a-late", 3.5, ["AWS"], applied_minutes=10)
        early = applicant("z-early", 3.5, ["AWS"], applied_minutes=5)
        same_time = applicant("b-same", 3.5, ["AWS"], applied_minutes=10)

        ranked = self.engine.rank_applicants([late, same_time, early], self.requirements)

        self.assertEqual([r.id for r in ranked], ["z-early", "a-late", "b-same"])

    def test_missing_applied_at_sorts_last_within_a_tie(self):
        dated = applicant("b", 3.5, ["AWS"], applied_minutes=30)
        undated = applicant("a", 3.5, ["AWS"], applied_minutes=None)
        ranked = self.engine.rank_applicants([undated, dated], self.requirements)
        self.assertEqual([r.id for r in ranked], ["b", "a"])

    def test_order_is_deterministic_for_any_input_order(self):
        applicants = [
            applicant(f"app-{i:02d}", 2.0 + (i % 5) * 0.4, ["AWS"] if i % 2 else [], applied_minutes=i % 3)
            for i in range(20)
        ]
        expected = [r.id for r in self.engine.rank_applicants(applicants, self.requirements)]

        rng = random.Random(7)
        for _ in range(5):
            shuffled = list(applicants)
            rng.shuffle(shuffled)
            self.assertEqual([r.id for r in self.engine.rank_applicants(shuffled, self.requirements)], expected)

    def test_rank_keys_are_distinct(self):
        applicants = [applicant(str(i), 3.5, ["AWS"]) for i in range(5)]
        ranked = self.engine.rank_applicants(applicants, self.requirements)
        keys = [rank_key(r) for r in ranked]
        self.assertEqual(len(set(keys)), len(keys))

    def test_empty_input(self):
        self.assertEqual(self.engine.rank_applicants([], self.requirements), [])

    def test_to_dict_explains_score(self):
        ranked = self.engine.rank_applicants([applicant("A", 3.5, ["AWS"])], self.requirements)
        data = ranked[0].to_dict()
        self.assertEqual(data['rank'], 1)
        self.assertEqual(data['matched_certificates'], ["aws"])
        self.assertEqual(data['breakdown']['academic'], 35.0)


if __name__ == '__main__':
    unittest.main()
