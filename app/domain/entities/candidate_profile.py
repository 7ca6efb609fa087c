"""Pure domain representation of candidate profile aggregates."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from app.domain.value_objects import CandidateId, TagId, UserId


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


class ExperienceLevel(str, Enum):
    """Seniority buckets a candidate can choose from."""

    ENTRY = "entry"
    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    EXECUTIVE = "executive"


class RemotePreference(str, Enum):
    """Working arrangement preferences."""

    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"
    FLEXIBLE = "flexible"


class Availability(str, Enum):
    """Notice period buckets."""

    IMMEDIATELY = "immediately"
    TWO_WEEKS = "2weeks"
    ONE_MONTH = "1month"
    THREE_MONTHS = "3months"
    SIX_MONTHS = "6months"


class UserRole(str, Enum):
    """Platform roles assigned to users."""

    CANDIDATE = "candidate"
    COMPANY = "company"
    ADMIN = "admin"


@dataclass
class OwnerUser:
    """Basic fields of the user that owns a profile."""

    user_id: UserId
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    image_url: Optional[str] = None
    role: UserRole = UserRole.CANDIDATE
    is_active: bool = True

    def full_name(self) -> str:
        """Join first and last name, empty when neither is set."""
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def is_active_candidate(self) -> bool:
        return self.is_active and self.role == UserRole.CANDIDATE


@dataclass
class Tag:
    """Skill, sector or expertise label shared across candidates.

    ``category`` is the stored string; besides skill, expertise and industry,
    legacy rows carry values such as ``sector``.
    """

    id: TagId
    name: str
    category: str
    proficiency: Optional[str] = None
    years_experience: Optional[int] = None
    is_endorsed: bool = False


@dataclass
class WorkExperience:
    """Professional experience entry."""

    id: Any
    company: str
    title: str
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    description: Optional[str] = None
    location: Optional[str] = None
    is_current: bool = False
    is_remote: bool = False
    order: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "company": self.company,
            "title": self.title,
            "description": self.description,
            "location": self.location,
            "startDate": _isoformat(self.start_date),
            "endDate": _isoformat(self.end_date),
            "isCurrent": self.is_current,
            "isRemote": self.is_remote,
            "order": self.order,
        }


@dataclass
class Education:
    """Education entry."""

    id: Any
    institution: str
    degree: str
    field: Optional[str] = None
    gpa: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    description: Optional[str] = None
    order: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "institution": self.institution,
            "degree": self.degree,
            "field": self.field,
            "gpa": self.gpa,
            "startDate": _isoformat(self.start_date),
            "endDate": _isoformat(self.end_date),
            "description": self.description,
            "order": self.order,
        }


@dataclass
class VisibilitySettings:
    """Candidate-controlled display preferences stored in public metadata."""

    show_salary: bool = True
    show_location: bool = True
    show_experience: bool = True
    show_contact: bool = False

    @classmethod
    def from_metadata(cls, metadata: Optional[Dict[str, Any]]) -> "VisibilitySettings":
        metadata = metadata or {}
        return cls(
            show_salary=metadata.get("showSalary", True),
            show_location=metadata.get("showLocation", True),
            show_experience=metadata.get("showExperience", True),
            show_contact=metadata.get("showContact", False),
        )

    def to_metadata(self) -> Dict[str, Any]:
        return {
            "showSalary": self.show_salary,
            "showLocation": self.show_location,
            "showExperience": self.show_experience,
            "showContact": self.show_contact,
        }


@dataclass
class CandidateProfile:
    """Aggregate root representing one executive's profile."""

    id: CandidateId
    user_id: UserId
    owner: Optional[OwnerUser] = None
    title: Optional[str] = None
    summary: Optional[str] = None
    experience: Optional[str] = None
    location: Optional[str] = None
    remote_preference: Optional[str] = None
    availability: Optional[str] = None
    salary_min: Optional[str] = None
    salary_max: Optional[str] = None
    salary_currency: Optional[str] = "USD"
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    resume_url: Optional[str] = None
    is_active: bool = True
    is_anonymized: bool = True
    profile_completed: bool = False
    public_metadata: Dict[str, Any] = field(default_factory=dict)
    private_metadata: Dict[str, Any] = field(default_factory=dict)
    tags: List[Tag] = field(default_factory=list)
    work_experiences: List[WorkExperience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def completion_fields(self) -> Dict[str, Any]:
        """Flat field map keyed by the public camelCase names used for scoring."""
        return {
            "title": self.title,
            "summary": self.summary,
            "experience": self.experience,
            "location": self.location,
            "remotePreference": self.remote_preference,
            "availability": self.availability,
            "salaryMin": self.salary_min,
            "salaryMax": self.salary_max,
            "linkedinUrl": self.linkedin_url,
            "githubUrl": self.github_url,
            "portfolioUrl": self.portfolio_url,
        }

    @property
    def visibility(self) -> VisibilitySettings:
        return VisibilitySettings.from_metadata(self.public_metadata)

    def update_visibility(
        self,
        *,
        is_anonymized: bool,
        is_active: bool,
        settings: VisibilitySettings,
    ) -> None:
        """Apply new visibility preferences and record the change."""
        now = datetime.utcnow()
        self.is_anonymized = is_anonymized
        self.is_active = is_active
        self.public_metadata = {
            **(self.public_metadata or {}),
            **settings.to_metadata(),
            "visibilityUpdatedAt": now.isoformat(),
        }
        self.private_metadata = {
            **(self.private_metadata or {}),
            "lastVisibilityChangeAt": now.isoformat(),
            "lastVisibilityChangeBy": "self",
        }
        self.updated_at = now

    def toggle_anonymity(self) -> bool:
        """Flip anonymization and return the previous state."""
        previous = self.is_anonymized
        now = datetime.utcnow()
        self.is_anonymized = not previous
        private = dict(self.private_metadata or {})
        private["lastAnonymityToggleAt"] = now.isoformat()
        private["lastAnonymityToggleBy"] = "self"
        private["anonymityToggleCount"] = int(private.get("anonymityToggleCount") or 0) + 1
        self.private_metadata = private
        self.updated_at = now
        return previous

    def record_self_edit(self, fields: List[str]) -> None:
        """Store which fields the candidate changed on their last edit."""
        now = datetime.utcnow()
        self.private_metadata = {
            **(self.private_metadata or {}),
            "lastSelfEditAt": now.isoformat(),
            "lastSelfEditFields": list(fields),
        }
        self.updated_at = now


@dataclass
class ProfilePurchase:
    """A company's paid unlock of a candidate profile."""

    candidate_id: CandidateId
    company_id: Any
    viewed_by_user_id: UserId
    payment_id: Optional[str] = None
    payment_amount: Optional[str] = None
    currency: Optional[str] = "USD"
    created_at: datetime = field(default_factory=datetime.utcnow)


__all__ = [
    "Availability",
    "CandidateProfile",
    "Education",
    "ExperienceLevel",
    "OwnerUser",
    "ProfilePurchase",
    "RemotePreference",
    "Tag",
    "UserRole",
    "VisibilitySettings",
    "WorkExperience",
]
