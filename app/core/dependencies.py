"""
FastAPI Dependencies
"""

from typing import Annotated, Optional

import structlog
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.domain.entities.viewer import RequestAuth
from app.domain.exceptions import ConfigurationError
from app.infrastructure.auth.token_verifier import BearerTokenVerifier
from app.infrastructure.providers.auth_provider import (
    get_token_verifier as resolve_token_verifier,
)

logger = structlog.get_logger(__name__)

# Security scheme
security = HTTPBearer(auto_error=False)


async def get_token_verifier() -> BearerTokenVerifier:
    """Resolve the bearer-token verifier from infrastructure providers."""
    try:
        return await resolve_token_verifier()
    except ConfigurationError as e:
        logger.error("token_verifier_misconfigured", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Authentication is not configured",
        )


# Authentication dependencies
async def get_request_auth(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    verifier: BearerTokenVerifier = Depends(get_token_verifier),
) -> RequestAuth:
    """Identify the caller.

    A request without a bearer token is anonymous. A token that is present
    but fails verification is rejected rather than downgraded to anonymous.
    """
    if not credentials:
        return RequestAuth.anonymous()

    request_auth = verifier.authenticate(credentials.credentials)
    if request_auth is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    structlog.contextvars.bind_contextvars(user_id=request_auth.user_id)
    return request_auth


RequestAuthDep = Annotated[RequestAuth, Depends(get_request_auth)]


__all__ = [
    "RequestAuthDep",
    "get_request_auth",
    "get_token_verifier",
    "security",
]
