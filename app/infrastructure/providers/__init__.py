"""Infrastructure provider accessors package."""

from .auth_provider import get_token_verifier, reset_token_verifier  # noqa: F401
from .database_provider import (  # noqa: F401
    get_database_manager,
    reset_database_manager,
)
from .repository_provider import (  # noqa: F401
    get_candidate_profile_repository,
    get_profile_purchase_repository,
    get_user_repository,
    reset_repositories,
)

__all__ = [
    "get_candidate_profile_repository",
    "get_database_manager",
    "get_profile_purchase_repository",
    "get_token_verifier",
    "get_user_repository",
    "reset_database_manager",
    "reset_repositories",
    "reset_token_verifier",
]
