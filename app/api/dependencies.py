"""
API-specific dependencies for application services with dependency injection.

This module provides FastAPI dependency injection helpers for application services,
bridging the API layer with the hexagonal architecture's application services.
"""

from typing import Annotated

import structlog
from fastapi import Depends, HTTPException

from app.application.candidate_profile_service import CandidateProfileApplicationService
from app.domain.exceptions import (
    AuthenticationRequiredError,
    AuthorizationError,
    ConfigurationError,
    DomainException,
    NotFoundError,
    ProfileAccessNotPurchasedError,
    ValidationError,
)
from app.infrastructure.factories.candidate_profile_dependency_factory import (
    get_candidate_profile_dependencies,
)

logger = structlog.get_logger(__name__)


# Application Service Dependencies
async def get_candidate_profile_service() -> CandidateProfileApplicationService:
    """Create CandidateProfileApplicationService with shared infrastructure."""
    try:
        dependencies = await get_candidate_profile_dependencies()
        return CandidateProfileApplicationService(dependencies)
    except Exception as e:
        logger.error("candidate_profile_service_unavailable", error=str(e))
        raise HTTPException(
            status_code=503,
            detail="Profile service unavailable"
        ) from e


# Type aliases for dependency injection
CandidateProfileServiceDep = Annotated[
    CandidateProfileApplicationService,
    Depends(get_candidate_profile_service),
]


# Domain Exception Handlers
def map_domain_exception_to_http(exception: Exception) -> HTTPException:
    """Map domain exceptions to appropriate HTTP responses."""

    # NotFoundError hierarchy - 404 Not Found
    if isinstance(exception, NotFoundError):
        return HTTPException(status_code=404, detail=str(exception))

    # ValidationError - 400 Bad Request
    elif isinstance(exception, ValidationError):
        return HTTPException(status_code=400, detail=str(exception))

    # Missing caller identity - 401 Unauthorized
    elif isinstance(exception, AuthenticationRequiredError):
        return HTTPException(
            status_code=401,
            detail=str(exception),
            headers={"WWW-Authenticate": "Bearer"},
        )

    # AuthorizationError hierarchy - 403 Forbidden
    elif isinstance(exception, AuthorizationError):
        return HTTPException(status_code=403, detail=str(exception))

    # Unpaid unlock - 402 Payment Required
    elif isinstance(exception, ProfileAccessNotPurchasedError):
        return HTTPException(status_code=402, detail=str(exception))

    # ConfigurationError - 500 Internal Server Error (configuration issues)
    elif isinstance(exception, ConfigurationError):
        logger.error("configuration_error", error=str(exception))
        return HTTPException(status_code=500, detail="Service configuration error")

    # Generic DomainException - 500 Internal Server Error
    elif isinstance(exception, DomainException):
        logger.error("unhandled_domain_exception", exception_type=type(exception).__name__, error=str(exception))
        return HTTPException(status_code=500, detail="Domain operation failed")

    else:
        # Non-domain exception - log and return generic error
        logger.error("non_domain_exception", exception_type=type(exception).__name__, error=str(exception))
        return HTTPException(status_code=500, detail="Internal server error")


__all__ = [
    "CandidateProfileServiceDep",
    "get_candidate_profile_service",
    "map_domain_exception_to_http",
]
