"""Domain repository contracts for candidate profile aggregates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from app.domain.entities.candidate_profile import (
    CandidateProfile,
    Education,
    Tag,
    WorkExperience,
)
from app.domain.value_objects import CandidateId, TagId, UserId


@dataclass
class ProfileRelations:
    """Child records loaded alongside a profile."""

    tags: List[Tag] = field(default_factory=list)
    work_experiences: List[WorkExperience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)


class ICandidateProfileRepository(ABC):
    """Domain-facing abstraction for candidate profile persistence operations."""

    @abstractmethod
    async def get_by_id(self, candidate_id: CandidateId) -> Optional[CandidateProfile]:
        """Load a profile joined with its owning user, without child records."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_user_id(self, user_id: UserId) -> Optional[CandidateProfile]:
        """Load the profile owned by ``user_id``."""
        raise NotImplementedError

    @abstractmethod
    async def get_relations(self, candidate_id: CandidateId) -> ProfileRelations:
        """Load tags (join order), work experiences and education for a profile."""
        raise NotImplementedError

    @abstractmethod
    async def save(
        self,
        profile: CandidateProfile,
        *,
        tag_ids: Optional[Sequence[TagId]] = None,
    ) -> CandidateProfile:
        """Insert or update a profile aggregate's scalar fields and metadata.

        When ``tag_ids`` is given the profile's tag assignments are replaced,
        in that order, within the same transaction as the profile write.

        Raises:
            ValidationError: If any of ``tag_ids`` is not a known tag; nothing is written
        """
        raise NotImplementedError


__all__ = ["ICandidateProfileRepository", "ProfileRelations"]
