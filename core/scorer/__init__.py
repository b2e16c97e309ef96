#!/usr/bin/env python3
"""
Scoring Module - applicant matching and ranking.

Public API:
- MatchingEngine: scores, qualifies and ranks applicants
- JobRequirements, Candidate, Applicant: engine inputs
- MatchScore, QualificationResult, RankedApplicant: engine outputs

Split into focused modules:

- models.py: Data structures
- experience.py: Years of experience from work history
- scoring.py: Score components and formula
- qualification.py: Minimum-requirements gate
- ranking.py: Total order over scored applicants
- service.py: MatchingEngine orchestrator
"""

from core.scorer.models import (
    Applicant,
    Candidate,
    JobRequirements,
    MatchScore,
    QualificationResult,
    RankedApplicant,
    ScoreBreakdown,
)
from core.scorer.service import MatchingEngine

__all__ = [
    'MatchingEngine',
    'Applicant',
    'Candidate',
    'JobRequirements',
    'MatchScore',
    'QualificationResult',
    'RankedApplicant',
    'ScoreBreakdown',
]
