"""PostgreSQL implementation of IUserRepository."""

from __future__ import annotations

from typing import Optional

from app.database.sqlmodel_engine import SQLModelDatabaseManager
from app.domain.entities.candidate_profile import OwnerUser
from app.domain.repositories.user_repository import IUserRepository
from app.domain.value_objects import UserId
from app.infrastructure.persistence.mappers.candidate_profile_mapper import CandidateProfileMapper
from app.infrastructure.persistence.models.user_table import UserTable


class PostgresUserRepository(IUserRepository):
    """PostgreSQL adapter implementation of IUserRepository."""

    def __init__(self, db_manager: SQLModelDatabaseManager):
        self._db = db_manager

    async def get_by_id(self, user_id: UserId) -> Optional[OwnerUser]:
        """Find user by identity-provider id."""
        async with self._db.get_session() as session:
            user = await session.get(UserTable, user_id.value)

        if user is None:
            return None
        return CandidateProfileMapper.user_to_domain(user)


__all__ = ["PostgresUserRepository"]
