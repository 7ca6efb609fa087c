"""API request and response schemas."""

from .base import ApiResponse, ErrorResponse, ValidationErrorDetail
from .candidate_schemas import CandidateProfileUpdate, VisibilityUpdate

__all__ = [
    "ApiResponse",
    "CandidateProfileUpdate",
    "ErrorResponse",
    "ValidationErrorDetail",
    "VisibilityUpdate",
]
