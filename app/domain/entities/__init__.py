"""Domain entities exposed for application layer use."""

from .candidate_profile import (
    Availability,
    CandidateProfile,
    Education,
    ExperienceLevel,
    OwnerUser,
    ProfilePurchase,
    RemotePreference,
    Tag,
    UserRole,
    VisibilitySettings,
    WorkExperience,
)
from .viewer import RequestAuth, ViewerContext

__all__ = [
    # Candidate profile
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
    # Viewer
    "RequestAuth",
    "ViewerContext",
]
