"""PostgreSQL implementation of IProfilePurchaseRepository over company_users and profile_views."""

from __future__ import annotations

from typing import Optional

from sqlmodel import select

from app.database.sqlmodel_engine import SQLModelDatabaseManager
from app.domain.entities.candidate_profile import ProfilePurchase
from app.domain.repositories.profile_purchase_repository import IProfilePurchaseRepository
from app.domain.value_objects import CandidateId, CompanyId, UserId
from app.infrastructure.persistence.mappers.candidate_profile_mapper import CandidateProfileMapper
from app.infrastructure.persistence.models.candidate_profile_table import ProfileViewTable
from app.infrastructure.persistence.models.user_table import CompanyUserTable

PURCHASED_VIEW_TYPE = "purchased"


class PostgresProfilePurchaseRepository(IProfilePurchaseRepository):
    """Read-only lookups of company membership and purchased profile views."""

    def __init__(self, db_manager: SQLModelDatabaseManager):
        self._db = db_manager

    async def get_company_id_for_user(self, user_id: UserId) -> Optional[CompanyId]:
        stmt = (
            select(CompanyUserTable.company_id)
            .where(CompanyUserTable.user_id == user_id.value)
            .order_by(CompanyUserTable.created_at)
            .limit(1)
        )
        async with self._db.get_session() as session:
            company_id = (await session.execute(stmt)).scalar_one_or_none()

        return CompanyId(company_id) if company_id is not None else None

    async def find_purchase(
        self,
        company_id: CompanyId,
        candidate_id: CandidateId,
    ) -> Optional[ProfilePurchase]:
        """Earliest ``purchased`` view row for the pair, if any."""
        stmt = (
            select(ProfileViewTable)
            .where(
                ProfileViewTable.company_id == company_id.value,
                ProfileViewTable.candidate_id == candidate_id.value,
                ProfileViewTable.view_type == PURCHASED_VIEW_TYPE,
            )
            .order_by(ProfileViewTable.created_at)
            .limit(1)
        )
        async with self._db.get_session() as session:
            row = (await session.execute(stmt)).scalars().first()

        return CandidateProfileMapper.purchase_to_domain(row) if row is not None else None


__all__ = ["PURCHASED_VIEW_TYPE", "PostgresProfilePurchaseRepository"]
