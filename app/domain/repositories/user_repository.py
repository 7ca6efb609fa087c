"""Domain repository contract for platform users."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.candidate_profile import OwnerUser
from app.domain.value_objects import UserId


class IUserRepository(ABC):
    """Read access to users synced from the identity provider."""

    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[OwnerUser]:
        """Get a user by identity-provider id."""
        raise NotImplementedError


__all__ = ["IUserRepository"]
