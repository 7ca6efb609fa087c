"""Domain value objects used across aggregates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID


def _coerce_uuid(value: Any, *, field_name: str) -> UUID:
    """Convert strings to UUID instances while validating type."""
    if isinstance(value, UUID):
        return value
    if isinstance(value, str):
        return UUID(value)
    raise TypeError(f"{field_name} must be a UUID-compatible value")


@dataclass(frozen=True)
class CandidateId:
    """Aggregate identifier for CandidateProfile domain entities."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="candidate_id"))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class CompanyId:
    """Identifier of a hiring company."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="company_id"))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TagId:
    """Identifier of a shared skill/sector tag."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="tag_id"))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UserId:
    """Opaque user identifier issued by the external identity provider."""

    value: str

    def __init__(self, value: Any):
        if value is None or not str(value).strip():
            raise ValueError("user_id cannot be empty")
        object.__setattr__(self, "value", str(value).strip())

    def __str__(self) -> str:
        return self.value


__all__ = [
    "CandidateId",
    "CompanyId",
    "TagId",
    "UserId",
]
