"""Application service orchestrating candidate profile use cases."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Sequence
from uuid import uuid4

import structlog

from app.application.dependencies.candidate_profile_dependencies import (
    CandidateProfileDependencies,
)
from app.domain.entities.candidate_profile import (
    CandidateProfile,
    OwnerUser,
    ProfilePurchase,
    VisibilitySettings,
)
from app.domain.entities.viewer import RequestAuth
from app.domain.exceptions import (
    AuthenticationRequiredError,
    CandidateProfileNotFoundError,
    CandidateRoleRequiredError,
    CompanyMembershipRequiredError,
    ProfileAccessNotPurchasedError,
    ValidationError,
)
from app.domain.repositories.candidate_profile_repository import ProfileRelations
from app.domain.services.profile_completion_service import CompletionResult
from app.domain.services.profile_redaction_service import parse_salary_amount
from app.domain.value_objects import CandidateId, TagId, UserId

logger = structlog.get_logger(__name__)

# Scalar profile attributes a candidate may edit about themselves.
EDITABLE_FIELDS = (
    "title",
    "summary",
    "experience",
    "location",
    "remote_preference",
    "salary_min",
    "salary_max",
    "salary_currency",
    "availability",
    "is_anonymized",
    "linkedin_url",
    "github_url",
    "portfolio_url",
)
_SALARY_FIELDS = ("salary_min", "salary_max")


@dataclass
class OwnProfileResult:
    """Profile with children and completion, returned to its owner."""

    profile: CandidateProfile
    completion: CompletionResult


@dataclass
class RegistrationResult(OwnProfileResult):
    """Registered profile; ``created`` is False when an existing one was overwritten."""

    created: bool = False


@dataclass
class VisibilityResult:
    """Current visibility preferences of a profile."""

    is_anonymized: bool
    is_active: bool
    settings: VisibilitySettings
    updated_at: datetime | None = None


@dataclass
class AnonymityToggleResult:
    """Outcome of flipping anonymization."""

    is_anonymized: bool
    previous_state: bool
    updated_at: datetime


@dataclass
class UnlockedProfileResult:
    """Unredacted profile served to a purchasing company."""

    profile: CandidateProfile
    completion: CompletionResult
    purchase: ProfilePurchase


def _parse_candidate_id(candidate_id: Any) -> CandidateId:
    try:
        return CandidateId(candidate_id)
    except (ValueError, TypeError) as e:
        raise CandidateProfileNotFoundError("Profile not found") from e


def _apply_profile_fields(profile: CandidateProfile, data: dict[str, Any]) -> None:
    unknown = sorted(set(data) - set(EDITABLE_FIELDS))
    if unknown:
        raise ValidationError(f"Unsupported profile fields: {', '.join(unknown)}")

    for name, value in data.items():
        if name in _SALARY_FIELDS and value is not None:
            value = str(value)
        setattr(profile, name, value)

    salary_min = parse_salary_amount(profile.salary_min)
    salary_max = parse_salary_amount(profile.salary_max)
    if salary_min is not None and salary_max is not None and salary_min > salary_max:
        raise ValidationError("Minimum salary must be less than or equal to maximum salary")


def _parse_tag_ids(tag_ids: Sequence[Any] | None) -> List[TagId] | None:
    """Validate tag identifiers and drop repeats, keeping first-seen order."""
    if tag_ids is None:
        return None
    try:
        parsed = [TagId(tag_id) for tag_id in tag_ids]
    except (ValueError, TypeError) as e:
        raise ValidationError("Tags must be valid identifiers") from e
    return list(dict.fromkeys(parsed))


def _attach_relations(profile: CandidateProfile, relations: ProfileRelations) -> CandidateProfile:
    profile.tags = list(relations.tags)
    profile.work_experiences = list(relations.work_experiences)
    profile.education = list(relations.education)
    return profile


class CandidateProfileApplicationService:
    """Provide candidate profile operations for the API layer."""

    def __init__(self, dependencies: CandidateProfileDependencies) -> None:
        self._deps = dependencies

    # ------------------------------------------------------------------
    # Public profile view
    # ------------------------------------------------------------------

    async def view_profile(
        self,
        *,
        candidate_id: Any,
        request_auth: RequestAuth,
    ) -> dict[str, Any]:
        """Return the profile payload shaped for the requesting viewer.

        The profile, its child records and the purchase fact are independent
        reads and are fetched concurrently; redaction only runs once all three
        have completed.

        Raises:
            CandidateProfileNotFoundError: If the profile does not exist
        """
        candidate = _parse_candidate_id(candidate_id)
        repository = self._deps.profile_repository

        profile, relations, has_purchased = await asyncio.gather(
            repository.get_by_id(candidate),
            repository.get_relations(candidate),
            self._has_purchased_access(request_auth, candidate),
        )

        if profile is None:
            logger.info("profile_view_not_found", candidate_id=str(candidate))
            raise CandidateProfileNotFoundError("Profile not found")

        _attach_relations(profile, relations)

        completion = self._deps.completion_service.score_profile(profile)
        viewer = self._deps.viewer_classifier.classify(profile, request_auth, has_purchased)
        redacted = self._deps.redaction_service.redact(profile, completion, viewer)
        payload = self._deps.response_assembler.assemble(profile, completion, redacted, viewer)

        logger.info(
            "profile_view_served",
            candidate_id=str(candidate),
            authenticated=viewer.is_authenticated,
            own_profile=viewer.is_profile_owner,
            unlocked=viewer.has_purchased_access,
            full_details=redacted.show_full_details,
        )
        return payload

    async def _has_purchased_access(
        self,
        request_auth: RequestAuth,
        candidate_id: CandidateId,
    ) -> bool:
        if request_auth.user_id is None:
            return False

        purchases = self._deps.purchase_repository
        company_id = await purchases.get_company_id_for_user(UserId(request_auth.user_id))
        if company_id is None:
            return False

        purchase = await purchases.find_purchase(company_id, candidate_id)
        return purchase is not None

    # ------------------------------------------------------------------
    # Candidate self-service
    # ------------------------------------------------------------------

    async def get_own_profile(self, *, request_auth: RequestAuth) -> OwnProfileResult:
        """Load the caller's profile with children and completion."""
        user = await self._require_candidate(request_auth)
        profile = await self._load_own_profile(user, with_relations=True)
        completion = self._deps.completion_service.score_profile(profile)
        return OwnProfileResult(profile=profile, completion=completion)

    async def register_profile(
        self,
        *,
        request_auth: RequestAuth,
        profile_data: dict[str, Any],
        tag_ids: Sequence[Any] | None = None,
    ) -> RegistrationResult:
        """Create the caller's profile, or overwrite it when one already exists.

        Args:
            request_auth: Caller identity
            profile_data: snake_case registration fields
            tag_ids: When given, becomes the profile's tag set in order

        Raises:
            CandidateRoleRequiredError: If the caller is not an active candidate
            ValidationError: If the salary range is inverted, a field is unknown or a tag does not exist
        """
        user = await self._require_candidate(request_auth)
        repository = self._deps.profile_repository

        existing = await repository.get_by_user_id(user.user_id)
        created = existing is None
        if created:
            profile = CandidateProfile(id=CandidateId(uuid4()), user_id=user.user_id)
        else:
            profile = existing
        profile.owner = profile.owner or user

        logger.info(
            "profile_registration_requested",
            candidate_id=str(profile.id),
            user_id=str(user.user_id),
            is_new=created,
        )

        _apply_profile_fields(profile, profile_data)
        parsed_tags = _parse_tag_ids(tag_ids)

        completion = self._deps.completion_service.score_profile(profile)
        profile.profile_completed = completion.is_completed
        profile.updated_at = datetime.utcnow()

        saved = await repository.save(profile, tag_ids=parsed_tags)
        _attach_relations(saved, await repository.get_relations(saved.id))

        logger.info(
            "profile_registration_completed",
            candidate_id=str(saved.id),
            is_new=created,
            overall_percentage=completion.overall_percentage,
            is_completed=completion.is_completed,
        )
        return RegistrationResult(profile=saved, completion=completion, created=created)

    async def update_own_profile(
        self,
        *,
        request_auth: RequestAuth,
        update_data: dict[str, Any],
        tag_ids: Sequence[Any] | None = None,
    ) -> OwnProfileResult:
        """Apply a partial update and refresh the cached completion flag.

        Args:
            request_auth: Caller identity
            update_data: snake_case fields to change; absent keys are left untouched
            tag_ids: When given, replaces the profile's tag assignments in order

        Raises:
            ValidationError: If the merged salary range is inverted, a field is unknown
                or a tag does not exist
        """
        user = await self._require_candidate(request_auth)
        profile = await self._load_own_profile(user, with_relations=False)

        logger.info(
            "update_own_profile_requested",
            candidate_id=str(profile.id),
            user_id=str(user.user_id),
            update_fields=list(update_data.keys()),
            tags_replaced=tag_ids is not None,
        )

        _apply_profile_fields(profile, update_data)
        parsed_tags = _parse_tag_ids(tag_ids)

        completion = self._deps.completion_service.score_profile(profile)
        if completion.is_completed != profile.profile_completed:
            logger.info(
                "profile_completion_changed",
                candidate_id=str(profile.id),
                is_completed=completion.is_completed,
            )
        profile.profile_completed = completion.is_completed

        edited = list(update_data.keys())
        if parsed_tags is not None:
            edited.append("tags")
        profile.record_self_edit(edited)

        repository = self._deps.profile_repository
        saved = await repository.save(profile, tag_ids=parsed_tags)
        _attach_relations(saved, await repository.get_relations(saved.id))

        logger.info(
            "update_own_profile_completed",
            candidate_id=str(saved.id),
            overall_percentage=completion.overall_percentage,
            is_completed=completion.is_completed,
        )
        return OwnProfileResult(profile=saved, completion=completion)

    async def get_visibility(self, *, request_auth: RequestAuth) -> VisibilityResult:
        user = await self._require_candidate(request_auth)
        profile = await self._load_own_profile(user, with_relations=False)
        return VisibilityResult(
            is_anonymized=profile.is_anonymized,
            is_active=profile.is_active,
            settings=profile.visibility,
            updated_at=profile.updated_at,
        )

    async def update_visibility(
        self,
        *,
        request_auth: RequestAuth,
        is_anonymized: bool,
        is_active: bool,
        settings: VisibilitySettings,
    ) -> VisibilityResult:
        """Persist new visibility preferences for the caller's profile."""
        user = await self._require_candidate(request_auth)
        profile = await self._load_own_profile(user, with_relations=False)

        profile.update_visibility(
            is_anonymized=is_anonymized,
            is_active=is_active,
            settings=settings,
        )
        saved = await self._deps.profile_repository.save(profile)

        logger.info(
            "visibility_updated",
            candidate_id=str(saved.id),
            is_anonymized=saved.is_anonymized,
            is_active=saved.is_active,
        )
        return VisibilityResult(
            is_anonymized=saved.is_anonymized,
            is_active=saved.is_active,
            settings=saved.visibility,
            updated_at=saved.updated_at,
        )

    async def toggle_anonymity(self, *, request_auth: RequestAuth) -> AnonymityToggleResult:
        user = await self._require_candidate(request_auth)
        profile = await self._load_own_profile(user, with_relations=False)

        previous = profile.toggle_anonymity()
        saved = await self._deps.profile_repository.save(profile)

        logger.info(
            "anonymity_toggled",
            candidate_id=str(saved.id),
            is_anonymized=saved.is_anonymized,
            toggle_count=saved.private_metadata.get("anonymityToggleCount"),
        )
        return AnonymityToggleResult(
            is_anonymized=saved.is_anonymized,
            previous_state=previous,
            updated_at=saved.updated_at,
        )

    # ------------------------------------------------------------------
    # Purchased access
    # ------------------------------------------------------------------

    async def get_unlocked_profile(
        self,
        *,
        request_auth: RequestAuth,
        candidate_id: Any,
    ) -> UnlockedProfileResult:
        """Return the full profile to a company that purchased it.

        Raises:
            AuthenticationRequiredError: If the caller is anonymous
            CompanyMembershipRequiredError: If the caller belongs to no company
            ProfileAccessNotPurchasedError: If the company has not purchased the profile
            CandidateProfileNotFoundError: If the profile does not exist
        """
        if request_auth.user_id is None:
            raise AuthenticationRequiredError("Authentication required")

        candidate = _parse_candidate_id(candidate_id)
        purchases = self._deps.purchase_repository

        company_id = await purchases.get_company_id_for_user(UserId(request_auth.user_id))
        if company_id is None:
            raise CompanyMembershipRequiredError("Access denied: Company membership required")

        purchase = await purchases.find_purchase(company_id, candidate)
        if purchase is None:
            logger.info(
                "unlock_rejected_not_purchased",
                candidate_id=str(candidate),
                company_id=str(company_id),
            )
            raise ProfileAccessNotPurchasedError(str(candidate), str(company_id))

        repository = self._deps.profile_repository
        profile, relations = await asyncio.gather(
            repository.get_by_id(candidate),
            repository.get_relations(candidate),
        )
        if profile is None:
            raise CandidateProfileNotFoundError("Candidate not found")

        _attach_relations(profile, relations)
        completion = self._deps.completion_service.score_profile(profile)

        logger.info(
            "profile_access_logged",
            company_id=str(company_id),
            user_id=request_auth.user_id,
            candidate_id=str(candidate),
            access_type="full_view",
        )
        return UnlockedProfileResult(profile=profile, completion=completion, purchase=purchase)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _require_candidate(self, request_auth: RequestAuth) -> OwnerUser:
        if request_auth.user_id is None:
            raise AuthenticationRequiredError("Authentication required")

        user = await self._deps.user_repository.get_by_id(UserId(request_auth.user_id))
        if user is None or not user.is_active_candidate():
            logger.warning("candidate_verification_failed", user_id=request_auth.user_id)
            raise CandidateRoleRequiredError("User not found or not authorized as candidate")
        return user

    async def _load_own_profile(
        self,
        user: OwnerUser,
        *,
        with_relations: bool,
    ) -> CandidateProfile:
        repository = self._deps.profile_repository
        profile = await repository.get_by_user_id(user.user_id)
        if profile is None:
            raise CandidateProfileNotFoundError("Candidate profile not found")

        if profile.owner is None:
            profile.owner = user
        if with_relations:
            _attach_relations(profile, await repository.get_relations(profile.id))
        return profile


__all__ = [
    "AnonymityToggleResult",
    "CandidateProfileApplicationService",
    "EDITABLE_FIELDS",
    "OwnProfileResult",
    "RegistrationResult",
    "UnlockedProfileResult",
    "VisibilityResult",
]
