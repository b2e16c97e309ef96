#!/usr/bin/env python3
"""
Matching Engine - scores, qualifies and ranks job applicants.

Pure functions over already-loaded records: the engine never touches the
store, so callers batch-load students and transcripts and hand them in.
The same inputs always produce the same scores and order.
"""

from datetime import date
from typing import Callable, Iterable, List, Optional
import logging

from core.config_loader import ScoringConfig
from core.scorer.models import (
    Applicant,
    Candidate,
    JobRequirements,
    MatchScore,
    QualificationResult,
    RankedApplicant,
)
from core.scorer.qualification import evaluate_qualification
from core.scorer.ranking import rank
from core.scorer.scoring import calculate_score

logger = logging.getLogger(__name__)


class MatchingEngine:
    """Applicant scoring and ranking with injected weights."""

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        today: Optional[Callable[[], date]] = None
    ):
        self.config = config or ScoringConfig()
        self._today = today or date.today

    def candidate_for(self, student, transcript=None) -> Candidate:
        return Candidate.from_records(student, transcript, today=self._today())

    def score(self, candidate: Candidate, requirements: JobRequirements) -> MatchScore:
        return calculate_score(candidate, requirements, self.config)

    def qualify(self, candidate: Candidate, requirements: JobRequirements) -> QualificationResult:
        return evaluate_qualification(candidate, requirements)

    def score_applicant(self, applicant: Applicant, requirements: JobRequirements) -> RankedApplicant:
        return RankedApplicant(
            applicant=applicant,
            score=self.score(applicant.candidate, requirements),
            qualification=self.qualify(applicant.candidate, requirements),
        )

    def rank_applicants(
        self,
        applicants: Iterable[Applicant],
        requirements: JobRequirements
    ) -> List[RankedApplicant]:
        scored = [self.score_applicant(a, requirements) for a in applicants]
        ranked = rank(scored)
        logger.debug(
            f"Ranked {len(ranked)} applicants "
            f"({sum(1 for r in ranked if r.qualified)} qualified)"
        )
        return ranked

    def evaluate_qualification_for_notification(self, student, transcript, job) -> QualificationResult:
        """Qualification of a student for a freshly posted job, no application needed."""
        candidate = self.candidate_for(student, transcript)
        return self.qualify(candidate, JobRequirements.from_job(job))
