"""
Shared API response envelopes.

These are DTOs (Data Transfer Objects) in the API layer, separate from
domain entities and persistence tables.

Every endpoint answers with one of two shapes:
- success: ``{"success": true, "data": ..., "message": ...}``
- error: ``{"success": false, "error": ..., "status": ...}``
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    """
    Success envelope wrapping an endpoint payload.

    ``data`` is kept as plain JSON so redacted payloads can omit keys
    entirely instead of serializing them as null.
    """

    success: bool = Field(default=True, description="Always true for successful responses")
    data: Any = Field(default=None, description="Endpoint payload")
    message: Optional[str] = Field(default=None, description="Human-readable outcome")

    @classmethod
    def ok(cls, data: Any, message: Optional[str] = None) -> "ApiResponse":
        return cls(success=True, data=data, message=message)


class ValidationErrorDetail(BaseModel):
    """One failed request field."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error envelope returned for every non-2xx response."""

    success: bool = Field(default=False)
    error: str = Field(..., description="Error message")
    status: int = Field(..., description="HTTP status code")
    details: Optional[List[ValidationErrorDetail]] = Field(
        default=None,
        description="Per-field problems for request validation failures"
    )


__all__ = ["ApiResponse", "ErrorResponse", "ValidationErrorDetail"]
