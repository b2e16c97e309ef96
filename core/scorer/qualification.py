#!/usr/bin/env python3
"""
Qualification Gate - does a candidate meet a job's stated minimums?

Reported separately from the match score: a high score never makes an
applicant qualified, and ranking places every qualified applicant first.
"""

from typing import List

from core.scorer.models import Candidate, JobRequirements, QualificationResult

NO_TRANSCRIPT = "no transcript on file"


def evaluate_qualification(candidate: Candidate, requirements: JobRequirements) -> QualificationResult:
    reasons: List[str] = []

    if not candidate.has_transcript:
        reasons.append(NO_TRANSCRIPT)
    elif requirements.min_gpa is not None:
        if candidate.gpa is None or candidate.gpa < requirements.min_gpa:
            reasons.append(f"GPA {candidate.gpa} below minimum {requirements.min_gpa}")

    missing = requirements.required_certificates - candidate.certificates
    if missing:
        reasons.append(f"missing required certificates: {', '.join(sorted(missing))}")

    if requirements.min_years_experience is not None:
        if candidate.years_experience < requirements.min_years_experience:
            reasons.append(
                f"{candidate.years_experience} years of experience below minimum "
                f"{requirements.min_years_experience}"
            )

    return QualificationResult(qualified=not reasons, reasons=tuple(reasons))
