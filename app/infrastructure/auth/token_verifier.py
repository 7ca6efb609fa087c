"""
Verification of identity-provider bearer tokens.

Tokens are issued elsewhere; this service only checks signature, expiry and
the optional issuer/audience claims, then exposes the ``sub`` claim as the
request's user id.
"""

from typing import Any, Dict, Optional

import jwt
import structlog

from app.core.config import Settings
from app.domain.entities.viewer import RequestAuth
from app.domain.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)

# Algorithms verified with a public key rather than the shared secret
ASYMMETRIC_ALGORITHM_PREFIXES = ("RS", "PS", "ES", "EdDSA")


class BearerTokenVerifier:
    """JWT verification against the configured identity-provider key"""

    def __init__(self, settings: Settings):
        if settings.AUTH_JWT_ALGORITHM.startswith(ASYMMETRIC_ALGORITHM_PREFIXES) and not settings.AUTH_JWT_PUBLIC_KEY:
            raise ConfigurationError(
                f"AUTH_JWT_PUBLIC_KEY is required for {settings.AUTH_JWT_ALGORITHM} tokens"
            )
        self.settings = settings

    def verify_token(self, token: str) -> Optional[Dict[str, Any]]:
        """Verify and decode a bearer token; ``None`` when it is not acceptable."""
        options = {"require": ["sub", "exp"]}
        if not self.settings.AUTH_JWT_AUDIENCE:
            options["verify_aud"] = False

        try:
            return jwt.decode(
                token,
                self.settings.get_jwt_verification_key(),
                algorithms=[self.settings.AUTH_JWT_ALGORITHM],
                audience=self.settings.AUTH_JWT_AUDIENCE,
                issuer=self.settings.AUTH_JWT_ISSUER,
                options=options,
            )
        except jwt.ExpiredSignatureError:
            logger.warning("bearer_token_expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.warning("bearer_token_invalid", error=str(e))
            return None

    def authenticate(self, token: str) -> Optional[RequestAuth]:
        """Turn a bearer token into request auth, or ``None`` if verification fails."""
        payload = self.verify_token(token)
        if payload is None:
            return None

        subject = str(payload.get("sub") or "").strip()
        if not subject:
            logger.warning("bearer_token_missing_subject")
            return None
        return RequestAuth(user_id=subject)


__all__ = ["ASYMMETRIC_ALGORITHM_PREFIXES", "BearerTokenVerifier"]
