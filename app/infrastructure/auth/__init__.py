"""Infrastructure layer authentication services."""

from app.infrastructure.auth.token_verifier import BearerTokenVerifier

__all__ = ["BearerTokenVerifier"]
