"""Field weighting table for candidate profile completion."""

from __future__ import annotations

from typing import Tuple

REQUIRED_FIELDS: Tuple[str, ...] = (
    "title",
    "summary",
    "experience",
    "location",
    "remotePreference",
    "availability",
)

OPTIONAL_FIELDS: Tuple[str, ...] = (
    "salaryMin",
    "salaryMax",
    "linkedinUrl",
    "githubUrl",
    "portfolioUrl",
)

# Share of the overall percentage contributed by each group; must sum to 1.
REQUIRED_WEIGHT = 0.7
OPTIONAL_WEIGHT = 0.3


__all__ = ["REQUIRED_FIELDS", "OPTIONAL_FIELDS", "REQUIRED_WEIGHT", "OPTIONAL_WEIGHT"]
