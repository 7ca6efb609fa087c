"""
Mappers for converting between domain entities and persistence models.

This module provides all mapper classes that handle bidirectional conversion
between pure domain entities and SQLModel persistence models, following
hexagonal architecture principles.
"""

from app.infrastructure.persistence.mappers.candidate_profile_mapper import (
    CandidateProfileMapper,
)

__all__ = ["CandidateProfileMapper"]
