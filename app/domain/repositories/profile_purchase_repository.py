"""Domain repository contract for company membership and profile purchases."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.candidate_profile import ProfilePurchase
from app.domain.value_objects import CandidateId, CompanyId, UserId


class IProfilePurchaseRepository(ABC):
    """Lookup of purchase facts; this service never writes purchases."""

    @abstractmethod
    async def get_company_id_for_user(self, user_id: UserId) -> Optional[CompanyId]:
        """Resolve the company the user belongs to, if any."""
        raise NotImplementedError

    @abstractmethod
    async def find_purchase(
        self,
        company_id: CompanyId,
        candidate_id: CandidateId,
    ) -> Optional[ProfilePurchase]:
        """Find the ``purchased`` profile view for a company and candidate."""
        raise NotImplementedError


__all__ = ["IProfilePurchaseRepository"]
