"""Factory for creating CandidateProfileApplicationService dependencies."""

from __future__ import annotations

import structlog

from app.application.dependencies.candidate_profile_dependencies import CandidateProfileDependencies
from app.infrastructure.providers.repository_provider import (
    get_candidate_profile_repository,
    get_profile_purchase_repository,
    get_user_repository,
)

logger = structlog.get_logger(__name__)


async def get_candidate_profile_dependencies() -> CandidateProfileDependencies:
    """Construct dependencies for the candidate profile application service.

    All three repositories are required; the pure domain services use their
    defaults.
    """
    profile_repository = await get_candidate_profile_repository()
    user_repository = await get_user_repository()
    purchase_repository = await get_profile_purchase_repository()

    logger.debug("candidate_profile_dependencies_ready")

    return CandidateProfileDependencies(
        profile_repository=profile_repository,
        user_repository=user_repository,
        purchase_repository=purchase_repository,
    )


__all__ = ["get_candidate_profile_dependencies"]
