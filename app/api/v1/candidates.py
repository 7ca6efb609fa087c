"""
Candidate Self-Service API Endpoints

Profile management for signed-in candidates:
- Profile registration (create or overwrite)
- Own profile retrieval and partial updates
- Visibility preferences and anonymity toggle
- Purchased full-profile unlock for company members
"""

import structlog
from fastapi import APIRouter, HTTPException, Path, Response, status

from app.api.converters import (
    anonymity_toggle_to_dict,
    own_profile_to_dict,
    unlocked_profile_to_dict,
    visibility_to_dict,
)
from app.api.dependencies import CandidateProfileServiceDep, map_domain_exception_to_http
from app.api.schemas.base import ApiResponse
from app.api.schemas.candidate_schemas import (
    CandidateProfileCreate,
    CandidateProfileUpdate,
    VisibilityUpdate,
)
from app.core.dependencies import RequestAuthDep
from app.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/candidates", tags=["candidates"])


@router.post("/register", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
async def register_profile(
    payload: CandidateProfileCreate,
    response: Response,
    request_auth: RequestAuthDep,
    profile_service: CandidateProfileServiceDep,
) -> ApiResponse:
    """
    Create the caller's candidate profile, or overwrite the one they already have.

    Responds 201 when a profile is created and 200 when an existing one is
    updated. Optional fields left out of the body keep their stored values.
    """
    try:
        result = await profile_service.register_profile(
            request_auth=request_auth,
            profile_data=payload.to_profile_data(),
            tag_ids=payload.tags,
        )
        if not result.created:
            response.status_code = status.HTTP_200_OK
        message = "Profile created successfully" if result.created else "Profile updated successfully"
        return ApiResponse.ok(own_profile_to_dict(result), message)

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("profile_registration_failed", user_id=request_auth.user_id, error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error during registration")


@router.get("/profile", response_model=ApiResponse)
async def get_own_profile(
    request_auth: RequestAuthDep,
    profile_service: CandidateProfileServiceDep,
) -> ApiResponse:
    """Return the caller's profile with skills, history and completion breakdown."""
    try:
        result = await profile_service.get_own_profile(request_auth=request_auth)
        return ApiResponse.ok(own_profile_to_dict(result), "Profile retrieved successfully")

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("own_profile_retrieval_failed", user_id=request_auth.user_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to retrieve profile")


@router.put("/profile", response_model=ApiResponse)
async def update_own_profile(
    payload: CandidateProfileUpdate,
    request_auth: RequestAuthDep,
    profile_service: CandidateProfileServiceDep,
) -> ApiResponse:
    """
    Partially update the caller's profile.

    Only fields present in the body change. When ``tags`` is sent it replaces
    the whole tag set. The cached completion flag is recomputed on every save.
    """
    try:
        result = await profile_service.update_own_profile(
            request_auth=request_auth,
            update_data=payload.to_update_data(),
            tag_ids=payload.tags,
        )
        return ApiResponse.ok(own_profile_to_dict(result), "Profile updated successfully")

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("own_profile_update_failed", user_id=request_auth.user_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to update profile")


@router.get("/profile/visibility", response_model=ApiResponse)
async def get_visibility(
    request_auth: RequestAuthDep,
    profile_service: CandidateProfileServiceDep,
) -> ApiResponse:
    """Return the caller's visibility preferences with their defaults applied."""
    try:
        result = await profile_service.get_visibility(request_auth=request_auth)
        return ApiResponse.ok(visibility_to_dict(result), "Visibility settings retrieved successfully")

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("visibility_retrieval_failed", user_id=request_auth.user_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to retrieve visibility settings")


@router.put("/profile/visibility", response_model=ApiResponse)
async def update_visibility(
    payload: VisibilityUpdate,
    request_auth: RequestAuthDep,
    profile_service: CandidateProfileServiceDep,
) -> ApiResponse:
    try:
        result = await profile_service.update_visibility(
            request_auth=request_auth,
            is_anonymized=payload.is_anonymized,
            is_active=payload.is_active,
            settings=payload.to_settings(),
        )
        return ApiResponse.ok(visibility_to_dict(result), "Visibility settings updated successfully")

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("visibility_update_failed", user_id=request_auth.user_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to update visibility settings")


@router.post("/profile/visibility/toggle-anonymity", response_model=ApiResponse)
async def toggle_anonymity(
    request_auth: RequestAuthDep,
    profile_service: CandidateProfileServiceDep,
) -> ApiResponse:
    """Flip the caller's anonymization flag."""
    try:
        result = await profile_service.toggle_anonymity(request_auth=request_auth)
        state = "anonymized" if result.is_anonymized else "de-anonymized"
        return ApiResponse.ok(anonymity_toggle_to_dict(result), f"Profile {state} successfully")

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("anonymity_toggle_failed", user_id=request_auth.user_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to toggle anonymity")


@router.get("/{candidate_id}/unlock", response_model=ApiResponse)
async def get_unlocked_profile(
    request_auth: RequestAuthDep,
    profile_service: CandidateProfileServiceDep,
    candidate_id: str = Path(..., description="Candidate profile identifier"),
) -> ApiResponse:
    """
    Return the complete profile to a company that has purchased it.

    Checks run in order: authentication (401), company membership (403),
    purchase (402), then profile existence (404).
    """
    try:
        result = await profile_service.get_unlocked_profile(
            request_auth=request_auth,
            candidate_id=candidate_id,
        )
        return ApiResponse.ok(
            unlocked_profile_to_dict(result),
            "Full candidate profile retrieved successfully",
        )

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("profile_unlock_failed", candidate_id=candidate_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to retrieve unlocked profile")
