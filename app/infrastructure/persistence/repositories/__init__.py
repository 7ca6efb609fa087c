"""Repository implementations using PostgreSQL and domain mappers."""

from .candidate_profile_repository import PostgresCandidateProfileRepository
from .profile_purchase_repository import PostgresProfilePurchaseRepository
from .user_repository import PostgresUserRepository

__all__ = [
    "PostgresCandidateProfileRepository",
    "PostgresProfilePurchaseRepository",
    "PostgresUserRepository",
]
