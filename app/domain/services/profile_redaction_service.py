"""Viewer-aware redaction of candidate profiles.

Anonymization is the only gate on identity and contact fields: a profile that
is not anonymized is fully visible to any viewer. Salary is gated separately on
authentication. Display fallbacks for unknown or missing values live in the
tables below.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

from app.domain.entities.candidate_profile import (
    CandidateProfile,
    Education,
    Tag,
    WorkExperience,
)
from app.domain.entities.viewer import ViewerContext
from app.domain.services.profile_completion_service import CompletionResult

ANONYMOUS_DISPLAY_NAME = "Executive Profile"
DEFAULT_TITLE = "Executive"
DEFAULT_LOCATION = "Not specified"
DEFAULT_BIO = "Profile summary not available."
DEFAULT_CURRENCY = "USD"

EXPERIENCE_LABELS: Mapping[str, str] = {
    "junior": "0-5 years",
    "mid": "5-10 years",
    "senior": "10-20 years",
    "lead": "20-25 years",
    "executive": "25+ years",
}
EXPERIENCE_FALLBACK = "10+ years"

AVAILABILITY_LABELS: Mapping[str, str] = {
    "immediately": "Immediate",
    "2weeks": "2 weeks",
    "1month": "1 month",
    "3months": "3 months",
    "6months": "6 months",
}
AVAILABILITY_FALLBACK = "Available"

SKILL_CATEGORIES = frozenset({"skill", "expertise"})
SECTOR_CATEGORIES = frozenset({"sector", "industry"})

# Keys dropped from the payload entirely when their value is None.
_OMITTED_WHEN_ABSENT = ("email", "linkedinUrl", "githubUrl", "portfolioUrl", "salary")


def format_experience(value: Optional[str]) -> str:
    return EXPERIENCE_LABELS.get(value or "", EXPERIENCE_FALLBACK)


def format_availability(value: Optional[str]) -> str:
    return AVAILABILITY_LABELS.get(value or "", AVAILABILITY_FALLBACK)


def parse_salary_amount(raw: Any) -> Optional[float]:
    """Parse a stored salary value, returning ``None`` when absent or unparsable."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float, Decimal)):
        amount = float(raw)
    else:
        text = str(raw).strip()
        if not text:
            return None
        try:
            amount = float(text)
        except ValueError:
            return None
    if not math.isfinite(amount):
        return None
    return amount


def partition_tags(tags: List[Tag]) -> tuple[List[str], List[str]]:
    """Split tags into (skills, sectors), keeping join order."""
    skills = [tag.name for tag in tags if tag.category in SKILL_CATEGORIES]
    sectors = [tag.name for tag in tags if tag.category in SECTOR_CATEGORIES]
    return skills, sectors


@dataclass(frozen=True)
class SalaryView:
    """Salary block shown to authenticated viewers."""

    min: Optional[float]
    max: Optional[float]
    currency: str

    def to_dict(self) -> Dict[str, Any]:
        return {"min": self.min, "max": self.max, "currency": self.currency}


@dataclass(frozen=True)
class PublicProfileView:
    """Redacted representation of a profile for one viewer class."""

    show_full_details: bool
    display_name: str
    title: str
    location: str
    bio: str
    experience: str
    availability: str
    remote_preference: Optional[str]
    image_url: Optional[str]
    email: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    salary: Optional[SalaryView] = None
    skills: List[str] = field(default_factory=list)
    sectors: List[str] = field(default_factory=list)
    work_experiences: List[WorkExperience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "name": self.display_name,
            "title": self.title,
            "location": self.location,
            "bio": self.bio,
            "experience": self.experience,
            "availability": self.availability,
            "remotePreference": self.remote_preference,
            "imageUrl": self.image_url,
            "email": self.email,
            "linkedinUrl": self.linkedin_url,
            "githubUrl": self.github_url,
            "portfolioUrl": self.portfolio_url,
            "salary": self.salary.to_dict() if self.salary else None,
            "skills": list(self.skills),
            "sectors": list(self.sectors),
            "workExperiences": [item.to_dict() for item in self.work_experiences],
            "education": [item.to_dict() for item in self.education],
        }
        for key in _OMITTED_WHEN_ABSENT:
            if payload[key] is None:
                del payload[key]
        return payload


class ProfileRedactionService:
    """Decides which profile fields a viewer may see."""

    def redact(
        self,
        profile: CandidateProfile,
        completion: CompletionResult,
        viewer: ViewerContext,
    ) -> PublicProfileView:
        show_full_details = viewer.is_profile_owner or not profile.is_anonymized

        display_name = ANONYMOUS_DISPLAY_NAME
        email = image_url = linkedin_url = github_url = portfolio_url = None

        if show_full_details:
            owner = profile.owner
            if owner is not None:
                display_name = owner.full_name() or ANONYMOUS_DISPLAY_NAME
                email = owner.email or None
                image_url = owner.image_url or None
            linkedin_url = profile.linkedin_url or None
            github_url = profile.github_url or None
            portfolio_url = profile.portfolio_url or None

        salary = None
        if viewer.is_authenticated or viewer.is_profile_owner:
            salary = SalaryView(
                min=parse_salary_amount(profile.salary_min),
                max=parse_salary_amount(profile.salary_max),
                currency=profile.salary_currency or DEFAULT_CURRENCY,
            )

        skills, sectors = partition_tags(profile.tags)

        return PublicProfileView(
            show_full_details=show_full_details,
            display_name=display_name,
            title=profile.title or DEFAULT_TITLE,
            location=profile.location or DEFAULT_LOCATION,
            bio=profile.summary or DEFAULT_BIO,
            experience=format_experience(profile.experience),
            availability=format_availability(profile.availability),
            remote_preference=profile.remote_preference,
            image_url=image_url,
            email=email,
            linkedin_url=linkedin_url,
            github_url=github_url,
            portfolio_url=portfolio_url,
            salary=salary,
            skills=skills,
            sectors=sectors,
            work_experiences=list(profile.work_experiences) if show_full_details else [],
            education=list(profile.education) if show_full_details else [],
        )


__all__ = [
    "ANONYMOUS_DISPLAY_NAME",
    "AVAILABILITY_FALLBACK",
    "AVAILABILITY_LABELS",
    "EXPERIENCE_FALLBACK",
    "EXPERIENCE_LABELS",
    "ProfileRedactionService",
    "PublicProfileView",
    "SalaryView",
    "format_availability",
    "format_experience",
    "parse_salary_amount",
    "partition_tags",
]
