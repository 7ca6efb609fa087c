"""Bearer-token verifier provider."""

from __future__ import annotations

import asyncio
from typing import Optional

from app.core.config import get_settings
from app.infrastructure.auth.token_verifier import BearerTokenVerifier

_token_verifier: Optional[BearerTokenVerifier] = None
_verifier_lock = asyncio.Lock()


async def get_token_verifier() -> BearerTokenVerifier:
    """Return singleton token verifier configured from settings."""
    global _token_verifier

    if _token_verifier is not None:
        return _token_verifier

    async with _verifier_lock:
        if _token_verifier is not None:
            return _token_verifier

        _token_verifier = BearerTokenVerifier(get_settings())
        return _token_verifier


async def reset_token_verifier() -> None:
    global _token_verifier
    async with _verifier_lock:
        _token_verifier = None


__all__ = ["get_token_verifier", "reset_token_verifier"]
