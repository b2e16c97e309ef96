#!/usr/bin/env python3
"""
Score Calculation - academic, certificate and experience components.

Formula (weights from ScoringConfig):
    academic     = clamp(gpa, 0, gpa_scale_max) * academic_weight
    certificates = |required ∩ held| * certificate_weight
                   + min(|held - required| * extra_certificate_bonus, extra_certificate_bonus_cap)
    experience   = min(years, experience_cap_years) * experience_weight
    value        = academic + certificates + experience
"""

import logging

from core.config_loader import ScoringConfig
from core.scorer.models import Candidate, JobRequirements, MatchScore, ScoreBreakdown

logger = logging.getLogger(__name__)

PRECISION = 4


def clamp_gpa(gpa: float, scale_max: float, student_id=None) -> float:
    if gpa < 0 or gpa > scale_max:
        clamped = min(max(gpa, 0.0), scale_max)
        logger.warning(f"GPA {gpa} for student {student_id} outside 0-{scale_max}; clamped to {clamped}")
        return clamped
    return gpa


def calculate_academic(candidate: Candidate, config: ScoringConfig) -> float:
    if not candidate.has_transcript or candidate.gpa is None:
        return 0.0
    gpa = clamp_gpa(float(candidate.gpa), config.gpa_scale_max, candidate.student_id)
    return round(gpa * config.academic_weight, PRECISION)


def calculate_certificates(candidate: Candidate, requirements: JobRequirements, config: ScoringConfig):
    """Returns (score, matched required names sorted, count of extra certificates)."""
    matched = candidate.certificates & requirements.required_certificates
    extra = candidate.certificates - requirements.required_certificates
    bonus = min(len(extra) * config.extra_certificate_bonus, config.extra_certificate_bonus_cap)
    score = len(matched) * config.certificate_weight + bonus
    return round(score, PRECISION), tuple(sorted(matched)), len(extra)


def calculate_experience(candidate: Candidate, config: ScoringConfig):
    """Returns (score, years counted after the cap)."""
    years = min(max(candidate.years_experience, 0.0), config.experience_cap_years)
    return round(years * config.experience_weight, PRECISION), years


def calculate_score(candidate: Candidate, requirements: JobRequirements, config: ScoringConfig) -> MatchScore:
    academic = calculate_academic(candidate, config)
    certificates, matched, extra = calculate_certificates(candidate, requirements, config)
    experience, years = calculate_experience(candidate, config)

    return MatchScore(
        value=round(academic + certificates + experience, PRECISION),
        breakdown=ScoreBreakdown(
            academic=academic,
            certificates=certificates,
            experience=experience,
        ),
        matched_certificates=matched,
        extra_certificates=extra,
        years_counted=years,
    )
