"""Domain service for candidate profile completion scoring."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from app.domain.entities.candidate_profile import CandidateProfile
from app.domain.services.field_weights import (
    OPTIONAL_FIELDS,
    OPTIONAL_WEIGHT,
    REQUIRED_FIELDS,
    REQUIRED_WEIGHT,
)


@dataclass(frozen=True)
class CompletionResult:
    """Completeness of a profile at scoring time."""

    is_completed: bool
    overall_percentage: int  # 0-100
    required_percentage: int
    optional_percentage: int
    missing_required: List[str] = field(default_factory=list)
    missing_optional: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isCompleted": self.is_completed,
            "overallPercentage": self.overall_percentage,
            "requiredPercentage": self.required_percentage,
            "optionalPercentage": self.optional_percentage,
            "missingRequired": list(self.missing_required),
            "missingOptional": list(self.missing_optional),
        }


def is_field_present(value: Any) -> bool:
    """A value counts when its string form is non-blank; numeric zero is present."""
    if value is None:
        return False
    return len(str(value).strip()) > 0


def _round_half_up(value: float) -> int:
    # round() uses banker's rounding; percentages round .5 upwards
    return int(value + 0.5)


class IProfileCompletionService(ABC):
    """Domain service interface for profile completion assessment."""

    @abstractmethod
    def score(self, fields: Optional[Mapping[str, Any]]) -> CompletionResult:
        """Score a flat camelCase field map."""
        pass

    @abstractmethod
    def score_profile(self, profile: CandidateProfile) -> CompletionResult:
        """Score a candidate profile aggregate."""
        pass


class ProfileCompletionService(IProfileCompletionService):
    """Weighted completeness scoring over required and optional profile fields."""

    def __init__(
        self,
        required_fields: Sequence[str] = REQUIRED_FIELDS,
        optional_fields: Sequence[str] = OPTIONAL_FIELDS,
    ):
        self._required_fields = tuple(required_fields)
        self._optional_fields = tuple(optional_fields)

    def score(self, fields: Optional[Mapping[str, Any]]) -> CompletionResult:
        """Compute completion for ``fields``; absent, ``None`` and blank values are missing."""
        fields = fields or {}

        missing_required = [
            name for name in self._required_fields if not is_field_present(fields.get(name))
        ]
        missing_optional = [
            name for name in self._optional_fields if not is_field_present(fields.get(name))
        ]

        required_present = len(self._required_fields) - len(missing_required)
        optional_present = len(self._optional_fields) - len(missing_optional)

        required_percentage = _round_half_up(required_present / len(self._required_fields) * 100)
        optional_percentage = _round_half_up(optional_present / len(self._optional_fields) * 100)

        overall = _round_half_up(
            required_percentage * REQUIRED_WEIGHT + optional_percentage * OPTIONAL_WEIGHT
        )

        return CompletionResult(
            is_completed=not missing_required,
            overall_percentage=max(0, min(100, overall)),
            required_percentage=required_percentage,
            optional_percentage=optional_percentage,
            missing_required=missing_required,
            missing_optional=missing_optional,
        )

    def score_profile(self, profile: CandidateProfile) -> CompletionResult:
        return self.score(profile.completion_fields())


__all__ = [
    "CompletionResult",
    "IProfileCompletionService",
    "ProfileCompletionService",
    "is_field_present",
]
