"""
Public Profile View Endpoint

Serves a single candidate profile to any caller, redacted according to who
is asking: anonymous visitors, signed-in users, the profile owner and
companies that purchased access all see different subsets.
"""

import structlog
from fastapi import APIRouter, HTTPException, Path

from app.api.dependencies import CandidateProfileServiceDep, map_domain_exception_to_http
from app.api.schemas.base import ApiResponse
from app.core.dependencies import RequestAuthDep
from app.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/search/profiles", tags=["search"])


@router.get("/{candidate_id}", response_model=ApiResponse)
async def get_profile(
    request_auth: RequestAuthDep,
    profile_service: CandidateProfileServiceDep,
    candidate_id: str = Path(..., description="Candidate profile identifier"),
) -> ApiResponse:
    """Return the viewer-appropriate profile payload; unknown ids are 404."""
    try:
        payload = await profile_service.view_profile(
            candidate_id=candidate_id,
            request_auth=request_auth,
        )
        return ApiResponse.ok(payload, "Profile retrieved successfully")

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("profile_view_failed", candidate_id=candidate_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to retrieve profile")
