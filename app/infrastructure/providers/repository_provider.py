"""Repository provider utilities."""

from __future__ import annotations

import asyncio

from app.domain.repositories import (
    ICandidateProfileRepository,
    IProfilePurchaseRepository,
    IUserRepository,
)
from app.infrastructure.persistence.repositories import (
    PostgresCandidateProfileRepository,
    PostgresProfilePurchaseRepository,
    PostgresUserRepository,
)
from app.infrastructure.providers.database_provider import get_database_manager

_candidate_profile_repository: ICandidateProfileRepository | None = None
_user_repository: IUserRepository | None = None
_profile_purchase_repository: IProfilePurchaseRepository | None = None

_profile_lock = asyncio.Lock()
_user_lock = asyncio.Lock()
_purchase_lock = asyncio.Lock()


async def get_candidate_profile_repository() -> ICandidateProfileRepository:
    """Return singleton candidate profile repository satisfying the domain interface."""
    global _candidate_profile_repository
    if _candidate_profile_repository is not None:
        return _candidate_profile_repository

    async with _profile_lock:
        if _candidate_profile_repository is not None:
            return _candidate_profile_repository

        _candidate_profile_repository = PostgresCandidateProfileRepository(await get_database_manager())
        return _candidate_profile_repository


async def get_user_repository() -> IUserRepository:
    """Return singleton user repository implementation."""
    global _user_repository
    if _user_repository is not None:
        return _user_repository

    async with _user_lock:
        if _user_repository is not None:
            return _user_repository

        _user_repository = PostgresUserRepository(await get_database_manager())
        return _user_repository


async def get_profile_purchase_repository() -> IProfilePurchaseRepository:
    """Return singleton purchase lookup repository."""
    global _profile_purchase_repository
    if _profile_purchase_repository is not None:
        return _profile_purchase_repository

    async with _purchase_lock:
        if _profile_purchase_repository is not None:
            return _profile_purchase_repository

        _profile_purchase_repository = PostgresProfilePurchaseRepository(await get_database_manager())
        return _profile_purchase_repository


async def reset_repositories() -> None:
    """Drop cached repositories so they bind to a fresh database manager."""
    global _candidate_profile_repository, _user_repository, _profile_purchase_repository
    async with _profile_lock:
        _candidate_profile_repository = None
    async with _user_lock:
        _user_repository = None
    async with _purchase_lock:
        _profile_purchase_repository = None


__all__ = [
    "get_candidate_profile_repository",
    "get_profile_purchase_repository",
    "get_user_repository",
    "reset_repositories",
]
