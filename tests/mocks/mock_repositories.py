"""
Mock repository implementations for testing.

These mocks implement the repository interfaces and maintain
test data in memory while tracking method calls for verification.
Stored aggregates are copied on the way in and out so callers cannot
mutate repository state without calling ``save``.
"""

import copy
from typing import Dict, List, Optional, Sequence, Tuple

from app.domain.entities.candidate_profile import (
    CandidateProfile,
    Education,
    OwnerUser,
    ProfilePurchase,
    Tag,
    WorkExperience,
)
from app.domain.exceptions import ValidationError
from app.domain.repositories import (
    ICandidateProfileRepository,
    IProfilePurchaseRepository,
    IUserRepository,
    ProfileRelations,
)
from app.domain.value_objects import CandidateId, CompanyId, TagId, UserId


class MockCandidateProfileRepository(ICandidateProfileRepository):
    """Mock candidate profile repository for testing."""

    def __init__(self):
        self.profiles: Dict[CandidateId, CandidateProfile] = {}
        self.tag_catalog: Dict[TagId, Tag] = {}
        self.tags: Dict[CandidateId, List[Tag]] = {}
        self.work_experiences: Dict[CandidateId, List[WorkExperience]] = {}
        self.education: Dict[CandidateId, List[Education]] = {}
        self.call_log: List[tuple] = []
        self.should_fail_on_save = False

    def add_test_profile(
        self,
        profile: CandidateProfile,
        *,
        tags: Sequence[Tag] = (),
        work_experiences: Sequence[WorkExperience] = (),
        education: Sequence[Education] = (),
    ) -> None:
        """Seed a profile and its child records."""
        stored = copy.deepcopy(profile)
        stored.tags, stored.work_experiences, stored.education = [], [], []
        self.profiles[profile.id] = stored
        for tag in tags:
            self.tag_catalog[tag.id] = tag
        self.tags[profile.id] = list(tags)
        self.work_experiences[profile.id] = list(work_experiences)
        self.education[profile.id] = list(education)

    def add_catalog_tag(self, tag: Tag) -> None:
        self.tag_catalog[tag.id] = tag

    async def get_by_id(self, candidate_id: CandidateId) -> Optional[CandidateProfile]:
        self.call_log.append(("get_by_id", candidate_id))
        profile = self.profiles.get(candidate_id)
        return copy.deepcopy(profile) if profile else None

    async def get_by_user_id(self, user_id: UserId) -> Optional[CandidateProfile]:
        self.call_log.append(("get_by_user_id", user_id))
        for profile in self.profiles.values():
            if profile.user_id == user_id:
                return copy.deepcopy(profile)
        return None

    async def get_relations(self, candidate_id: CandidateId) -> ProfileRelations:
        self.call_log.append(("get_relations", candidate_id))
        return ProfileRelations(
            tags=copy.deepcopy(self.tags.get(candidate_id, [])),
            work_experiences=copy.deepcopy(self.work_experiences.get(candidate_id, [])),
            education=copy.deepcopy(self.education.get(candidate_id, [])),
        )

    async def save(
        self,
        profile: CandidateProfile,
        *,
        tag_ids: Optional[Sequence[TagId]] = None,
    ) -> CandidateProfile:
        self.call_log.append(("save", profile.id, list(tag_ids) if tag_ids is not None else None))
        if self.should_fail_on_save:
            raise Exception("Mock save failure")

        if tag_ids is not None:
            unknown = [str(tag_id) for tag_id in tag_ids if tag_id not in self.tag_catalog]
            if unknown:
                raise ValidationError(f"Unknown tags: {', '.join(unknown)}")

        stored = copy.deepcopy(profile)
        stored.tags, stored.work_experiences, stored.education = [], [], []
        self.profiles[profile.id] = stored

        if tag_ids is not None:
            self.tags[profile.id] = [
                self.tag_catalog[tag_id] for tag_id in dict.fromkeys(tag_ids)
            ]
        return copy.deepcopy(stored)

    def calls(self, method: str) -> List[tuple]:
        return [call for call in self.call_log if call[0] == method]


class MockUserRepository(IUserRepository):
    """Mock user repository for testing."""

    def __init__(self):
        self.users: Dict[UserId, OwnerUser] = {}
        self.call_log: List[tuple] = []

    def add_test_user(self, user: OwnerUser) -> None:
        self.users[user.user_id] = user

    async def get_by_id(self, user_id: UserId) -> Optional[OwnerUser]:
        self.call_log.append(("get_by_id", user_id))
        user = self.users.get(user_id)
        return copy.deepcopy(user) if user else None


class MockProfilePurchaseRepository(IProfilePurchaseRepository):
    """Mock company membership and purchase lookups."""

    def __init__(self):
        self.memberships: Dict[UserId, CompanyId] = {}
        self.purchases: Dict[Tuple[CompanyId, CandidateId], ProfilePurchase] = {}
        self.call_log: List[tuple] = []

    def add_membership(self, user_id: str, company_id: CompanyId) -> None:
        self.memberships[UserId(user_id)] = company_id

    def add_purchase(self, purchase: ProfilePurchase) -> None:
        self.purchases[(purchase.company_id, purchase.candidate_id)] = purchase

    async def get_company_id_for_user(self, user_id: UserId) -> Optional[CompanyId]:
        self.call_log.append(("get_company_id_for_user", user_id))
        return self.memberships.get(user_id)

    async def find_purchase(
        self,
        company_id: CompanyId,
        candidate_id: CandidateId,
    ) -> Optional[ProfilePurchase]:
        self.call_log.append(("find_purchase", company_id, candidate_id))
        return self.purchases.get((company_id, candidate_id))


__all__ = [
    "MockCandidateProfileRepository",
    "MockProfilePurchaseRepository",
    "MockUserRepository",
]
