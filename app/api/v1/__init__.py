"""
API v1 Routes
"""

from .candidates import router as candidates_router
from .search_profiles import router as search_profiles_router

__all__ = [
    "candidates_router",
    "search_profiles_router",
]
