"""
Tests for PostgresCandidateProfileRepository against a stubbed async session.

No database is involved; the tests check which statements and rows the
adapter hands to SQLAlchemy.
"""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, Mock
from uuid import uuid4

import pytest

from app.domain.exceptions import ValidationError
from app.domain.value_objects import CandidateId, TagId
from app.infrastructure.persistence.models.candidate_profile_table import CandidateTagTable
from app.infrastructure.persistence.repositories.candidate_profile_repository import (
    PostgresCandidateProfileRepository,
)
from tests.fixtures.candidate_fixtures import CandidateProfileBuilder


def _result(scalars=(), rows=()):
    result = MagicMock()
    result.scalars.return_value.all.return_value = list(scalars)
    result.all.return_value = list(rows)
    return result


@pytest.fixture
def session():
    session = Mock()
    session.execute = AsyncMock(return_value=_result())
    session.get = AsyncMock(return_value=None)
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    return session


@pytest.fixture
def repository(session):
    db_manager = Mock()

    @asynccontextmanager
    async def get_session():
        yield session

    db_manager.get_session = get_session
    return PostgresCandidateProfileRepository(db_manager)


class TestTagValidation:

    async def test_unknown_tags_abort_before_any_write(self, repository, session):
        known = TagId(uuid4())
        missing = TagId(uuid4())
        session.execute.return_value = _result(scalars=[known.value])
        profile = CandidateProfileBuilder().build()

        with pytest.raises(ValidationError, match=str(missing)):
            await repository.save(profile, tag_ids=[known, missing])

        session.get.assert_not_awaited()
        session.add.assert_not_called()

    async def test_known_tags_pass(self, repository, session):
        tag_ids = [TagId(uuid4()), TagId(uuid4())]
        session.execute.return_value = _result(scalars=[tag_id.value for tag_id in tag_ids])

        await repository._ensure_tags_exist(session, tag_ids)

    async def test_empty_tag_list_skips_lookup(self, repository, session):
        await repository._ensure_tags_exist(session, [])

        session.execute.assert_not_awaited()


class TestTagOrdering:

    async def test_assignments_get_sequential_positions(self, repository, session):
        candidate_id = CandidateId(uuid4())
        first, second, third = TagId(uuid4()), TagId(uuid4()), TagId(uuid4())

        await repository._replace_tag_assignments(session, candidate_id, [second, first, second, third])

        added = [call.args[0] for call in session.add.call_args_list]
        assert [row.tag_id for row in added] == [second.value, first.value, third.value]
        assert [row.position for row in added] == [0, 1, 2]
        assert all(row.candidate_id == candidate_id.value for row in added)

    async def test_tags_are_read_in_position_order(self, repository, session):
        await repository._get_tags(CandidateId(uuid4()))

        order_by = str(session.execute.await_args.args[0]).split("ORDER BY")[1]
        assert order_by.index("candidate_tags.position") < order_by.index("candidate_tags.created_at")

    def test_position_column_is_indexed_with_candidate(self):
        table = CandidateTagTable.__table__

        assert table.c.position.nullable is False
        assert any(
            [column.name for column in index.columns] == ["candidate_id", "position"]
            for index in table.indexes
        )
