"""PostgreSQL implementation of ICandidateProfileRepository using CandidateProfileMapper."""

from __future__ import annotations

import asyncio
from typing import List, Optional, Sequence

import structlog
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.database.sqlmodel_engine import SQLModelDatabaseManager
from app.domain.entities.candidate_profile import CandidateProfile, Education, Tag, WorkExperience
from app.domain.exceptions import ValidationError
from app.domain.repositories.candidate_profile_repository import (
    ICandidateProfileRepository,
    ProfileRelations,
)
from app.domain.value_objects import CandidateId, TagId, UserId
from app.infrastructure.persistence.mappers.candidate_profile_mapper import CandidateProfileMapper
from app.infrastructure.persistence.models.candidate_profile_table import (
    CandidateProfileTable,
    CandidateTagTable,
    EducationTable,
    TagTable,
    WorkExperienceTable,
)
from app.infrastructure.persistence.models.user_table import UserTable

logger = structlog.get_logger(__name__)


class PostgresCandidateProfileRepository(ICandidateProfileRepository):
    """PostgreSQL adapter implementation of ICandidateProfileRepository."""

    def __init__(self, db_manager: SQLModelDatabaseManager):
        self._db = db_manager

    async def get_by_id(self, candidate_id: CandidateId) -> Optional[CandidateProfile]:
        """Find a profile by id with its owner joined."""
        stmt = (
            select(CandidateProfileTable, UserTable)
            .outerjoin(UserTable, UserTable.id == CandidateProfileTable.user_id)
            .where(CandidateProfileTable.id == candidate_id.value)
        )
        async with self._db.get_session() as session:
            row = (await session.execute(stmt)).first()

        if row is None:
            return None
        profile_row, user_row = row
        return CandidateProfileMapper.to_domain(profile_row, user_row)

    async def get_by_user_id(self, user_id: UserId) -> Optional[CandidateProfile]:
        """Find the profile owned by an identity-provider user."""
        stmt = (
            select(CandidateProfileTable, UserTable)
            .outerjoin(UserTable, UserTable.id == CandidateProfileTable.user_id)
            .where(CandidateProfileTable.user_id == user_id.value)
        )
        async with self._db.get_session() as session:
            row = (await session.execute(stmt)).first()

        if row is None:
            return None
        profile_row, user_row = row
        return CandidateProfileMapper.to_domain(profile_row, user_row)

    async def get_relations(self, candidate_id: CandidateId) -> ProfileRelations:
        """Load tags (assigned position), work experiences and education (display order)."""
        tags, experiences, education = await asyncio.gather(
            self._get_tags(candidate_id),
            self._get_work_experiences(candidate_id),
            self._get_education(candidate_id),
        )
        return ProfileRelations(tags=tags, work_experiences=experiences, education=education)

    async def _get_tags(self, candidate_id: CandidateId) -> List[Tag]:
        stmt = (
            select(TagTable, CandidateTagTable)
            .join(CandidateTagTable, CandidateTagTable.tag_id == TagTable.id)
            .where(CandidateTagTable.candidate_id == candidate_id.value)
            .order_by(CandidateTagTable.position, CandidateTagTable.created_at)
        )
        async with self._db.get_session() as session:
            rows = (await session.execute(stmt)).all()
        return [CandidateProfileMapper.tag_to_domain(tag, assignment) for tag, assignment in rows]

    async def _get_work_experiences(self, candidate_id: CandidateId) -> List[WorkExperience]:
        stmt = (
            select(WorkExperienceTable)
            .where(WorkExperienceTable.candidate_id == candidate_id.value)
            .order_by(WorkExperienceTable.order)
        )
        async with self._db.get_session() as session:
            rows = (await session.execute(stmt)).scalars().all()
        return [CandidateProfileMapper.work_experience_to_domain(row) for row in rows]

    async def _get_education(self, candidate_id: CandidateId) -> List[Education]:
        stmt = (
            select(EducationTable)
            .where(EducationTable.candidate_id == candidate_id.value)
            .order_by(EducationTable.order)
        )
        async with self._db.get_session() as session:
            rows = (await session.execute(stmt)).scalars().all()
        return [CandidateProfileMapper.education_to_domain(row) for row in rows]

    async def save(
        self,
        profile: CandidateProfile,
        *,
        tag_ids: Optional[Sequence[TagId]] = None,
    ) -> CandidateProfile:
        """Insert or update the profile row, optionally replacing its tags, in one transaction."""
        async with self._db.get_session() as session:
            if tag_ids is not None:
                await self._ensure_tags_exist(session, tag_ids)

            table = await session.get(CandidateProfileTable, profile.id.value)
            if table is None:
                table = CandidateProfileMapper.to_table(profile)
                session.add(table)
            else:
                CandidateProfileMapper.update_table_from_domain(table, profile)
            await session.flush()

            if tag_ids is not None:
                await self._replace_tag_assignments(session, profile.id, tag_ids)

            await session.refresh(table)
            user = await session.get(UserTable, table.user_id)
            saved = CandidateProfileMapper.to_domain(table, user)

        logger.debug("candidate_profile_saved", candidate_id=str(saved.id), tags_replaced=tag_ids is not None)
        return saved

    async def _ensure_tags_exist(self, session: AsyncSession, tag_ids: Sequence[TagId]) -> None:
        if not tag_ids:
            return
        stmt = select(TagTable.id).where(TagTable.id.in_([tag_id.value for tag_id in tag_ids]))
        known = set((await session.execute(stmt)).scalars().all())
        unknown = [str(tag_id) for tag_id in tag_ids if tag_id.value not in known]
        if unknown:
            raise ValidationError(f"Unknown tags: {', '.join(unknown)}")

    async def _replace_tag_assignments(
        self,
        session: AsyncSession,
        candidate_id: CandidateId,
        tag_ids: Sequence[TagId],
    ) -> None:
        await session.execute(
            delete(CandidateTagTable).where(CandidateTagTable.candidate_id == candidate_id.value)
        )
        seen = set()
        for tag_id in tag_ids:
            if tag_id.value in seen:
                continue
            seen.add(tag_id.value)
            session.add(
                CandidateTagTable(
                    candidate_id=candidate_id.value,
                    tag_id=tag_id.value,
                    position=len(seen) - 1,
                )
            )
        await session.flush()

        logger.info("candidate_tags_replaced", candidate_id=str(candidate_id), tag_count=len(seen))


__all__ = ["PostgresCandidateProfileRepository"]
