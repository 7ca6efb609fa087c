"""Pytest fixtures shared across the candidate profile test suite."""

from __future__ import annotations

import os
from collections.abc import AsyncIterator

# Settings require a secret before any app module is imported.
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-at-least-32-characters")
os.environ.setdefault("ENVIRONMENT", "local")

import pytest
from hypothesis import HealthCheck, settings

from app.infrastructure.providers.auth_provider import reset_token_verifier
from app.infrastructure.providers.repository_provider import reset_repositories
from tests.mocks.mock_repositories import (
    MockCandidateProfileRepository,
    MockProfilePurchaseRepository,
    MockUserRepository,
)

# The first text draw builds unicode tables; on a cold cache it trips too_slow.
settings.register_profile("suite", suppress_health_check=[HealthCheck.too_slow], deadline=None)
settings.load_profile("suite")


@pytest.fixture
async def reset_provider_state() -> AsyncIterator[None]:
    """Start and finish with clean provider singletons.

    Not autouse: hypothesis rejects function-scoped fixtures on @given tests.
    """
    await reset_repositories()
    await reset_token_verifier()
    yield
    await reset_repositories()
    await reset_token_verifier()


@pytest.fixture
def profile_repository() -> MockCandidateProfileRepository:
    return MockCandidateProfileRepository()


@pytest.fixture
def user_repository() -> MockUserRepository:
    return MockUserRepository()


@pytest.fixture
def purchase_repository() -> MockProfilePurchaseRepository:
    return MockProfilePurchaseRepository()
