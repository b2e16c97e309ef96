#!/usr/bin/env python3
"""
Scoring Models - Data structures for applicant matching.
"""

from datetime import date, datetime
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple
from dataclasses import dataclass, field

from core.utils import normalize_certificates
from core.scorer.experience import years_of_experience


@dataclass(frozen=True)
class JobRequirements:
    """Structured minimum requirements of a job. None means "not specified"."""
    min_gpa: Optional[float] = None
    required_certificates: FrozenSet[str] = frozenset()
    min_years_experience: Optional[float] = None

    @classmethod
    def build(
        cls,
        min_gpa: Optional[float] = None,
        required_certificates: Optional[Iterable[Any]] = None,
        min_years_experience: Optional[float] = None
    ) -> 'JobRequirements':
        return cls(
            min_gpa=min_gpa,
            required_certificates=normalize_certificates(required_certificates),
            min_years_experience=min_years_experience,
        )

    @classmethod
    def from_job(cls, job) -> 'JobRequirements':
        return cls.build(
            min_gpa=job.min_gpa,
            required_certificates=job.required_certificates,
            min_years_experience=job.min_years_experience,
        )


@dataclass(frozen=True)
class Candidate:
    """What the engine knows about one student: latest transcript plus profile."""
    student_id: Any
    gpa: Optional[float]
    has_transcript: bool
    certificates: FrozenSet[str] = frozenset()
    years_experience: float = 0.0

    @classmethod
    def from_records(cls, student, transcript=None, today: Optional[date] = None) -> 'Candidate':
        """
        Build a candidate from a student record and their latest transcript.

        Certificates are the union of transcript and profile certificates.
        """
        profile = (student.profile if student is not None else None) or {}
        certificates = normalize_certificates(profile.get('certificates'))
        if transcript is not None:
            certificates = certificates | normalize_certificates(transcript.certificates)

        return cls(
            student_id=student.id if student is not None else None,
            gpa=transcript.gpa if transcript is not None else None,
            has_transcript=transcript is not None,
            certificates=certificates,
            years_experience=years_of_experience(profile.get('work_experience'), today=today),
        )


@dataclass(frozen=True)
class ScoreBreakdown:
    academic: float = 0.0
    certificates: float = 0.0
    experience: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {
            'academic': self.academic,
            'certificates': self.certificates,
            'experience': self.experience,
        }


@dataclass(frozen=True)
class MatchScore:
    """Explainable match score. value is the sum of the breakdown components."""
    value: float
    breakdown: ScoreBreakdown
    matched_certificates: Tuple[str, ...] = ()
    extra_certificates: int = 0
    years_counted: float = 0.0


@dataclass(frozen=True)
class QualificationResult:
    qualified: bool
    reasons: Tuple[str, ...] = ()


@dataclass
class Applicant:
    """An applicant to rank. payload carries the caller's record untouched."""
    id: Any
    candidate: Candidate
    applied_at: Optional[datetime] = None
    payload: Any = None


@dataclass
class RankedApplicant:
    applicant: Applicant
    score: MatchScore
    qualification: QualificationResult
    rank: int = 0

    @property
    def id(self) -> Any:
        return self.applicant.id

    @property
    def qualified(self) -> bool:
        return self.qualification.qualified

    @property
    def value(self) -> float:
        return self.score.value

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'rank': self.rank,
            'qualified': self.qualified,
            'reasons': list(self.qualification.reasons),
            'match_score': self.value,
            'breakdown': self.score.breakdown.to_dict(),
            'matched_certificates': list(self.score.matched_certificates),
        }
