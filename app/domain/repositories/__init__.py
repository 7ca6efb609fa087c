"""Domain repository abstractions."""

from .candidate_profile_repository import ICandidateProfileRepository, ProfileRelations
from .profile_purchase_repository import IProfilePurchaseRepository
from .user_repository import IUserRepository

__all__ = [
    "ICandidateProfileRepository",
    "IProfilePurchaseRepository",
    "IUserRepository",
    "ProfileRelations",
]
