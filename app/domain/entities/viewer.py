"""Request-scoped descriptions of who is looking at a profile."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RequestAuth:
    """Identity-provider answer for the current request; ``None`` means anonymous."""

    user_id: Optional[str] = None

    @classmethod
    def anonymous(cls) -> "RequestAuth":
        return cls(user_id=None)


@dataclass(frozen=True)
class ViewerContext:
    """Viewer class used by a single redaction decision. Never persisted."""

    is_authenticated: bool
    is_profile_owner: bool
    has_purchased_access: bool
    viewer_user_id: Optional[str] = None


__all__ = ["RequestAuth", "ViewerContext"]
