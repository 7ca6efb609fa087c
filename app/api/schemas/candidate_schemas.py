"""
Request schemas for candidate self-service endpoints.

Field names are snake_case in Python and camelCase on the wire.
"""

from typing import Any, Dict, List, Optional
from urllib.parse import urlparse
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.domain.entities.candidate_profile import (
    Availability,
    ExperienceLevel,
    RemotePreference,
    VisibilitySettings,
)

MAX_SALARY = 10_000_000
MAX_TAGS = 20


def _validate_http_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    parsed = urlparse(value.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("Please enter a valid URL")
    return value.strip()


def _check_salary_order(salary_min: Optional[float], salary_max: Optional[float]) -> None:
    if salary_min is not None and salary_max is not None and salary_min > salary_max:
        raise ValueError("Minimum salary must be less than or equal to maximum salary")


class CandidateProfileCreate(BaseModel):
    """Registration payload; the required completion fields must all be present."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = Field(..., min_length=1, max_length=100)
    summary: str = Field(..., min_length=10, max_length=2000)
    experience: ExperienceLevel
    location: str = Field(..., min_length=1, max_length=100)
    remote_preference: RemotePreference = Field(..., alias="remotePreference")
    availability: Availability
    salary_min: Optional[float] = Field(default=None, ge=0, le=MAX_SALARY, alias="salaryMin")
    salary_max: Optional[float] = Field(default=None, ge=0, le=MAX_SALARY, alias="salaryMax")
    salary_currency: str = Field(default="USD", pattern=r"^[A-Z]{3}$", alias="salaryCurrency")
    is_anonymized: bool = Field(default=True, alias="isAnonymized")
    linkedin_url: Optional[str] = Field(default=None, alias="linkedinUrl")
    github_url: Optional[str] = Field(default=None, alias="githubUrl")
    portfolio_url: Optional[str] = Field(default=None, alias="portfolioUrl")
    tags: Optional[List[UUID]] = Field(default=None, max_length=MAX_TAGS)

    @field_validator("linkedin_url", "github_url", "portfolio_url")
    @classmethod
    def validate_urls(cls, v: Optional[str]) -> Optional[str]:
        return _validate_http_url(v)

    @model_validator(mode="after")
    def check_salary_range(self) -> "CandidateProfileCreate":
        _check_salary_order(self.salary_min, self.salary_max)
        return self

    def to_profile_data(self) -> Dict[str, Any]:
        """snake_case profile fields to store.

        Optional fields the client left out are omitted so re-registering
        does not clear them; defaulted fields are always included.
        """
        data = self.model_dump(mode="json", exclude_unset=True, exclude={"tags"})
        data.setdefault("salary_currency", self.salary_currency)
        data.setdefault("is_anonymized", self.is_anonymized)
        return data


class CandidateProfileUpdate(BaseModel):
    """Partial update of the caller's own profile; omitted fields stay unchanged."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    summary: Optional[str] = Field(default=None, min_length=10, max_length=2000)
    experience: Optional[ExperienceLevel] = None
    location: Optional[str] = Field(default=None, min_length=1, max_length=100)
    remote_preference: Optional[RemotePreference] = Field(default=None, alias="remotePreference")
    salary_min: Optional[float] = Field(default=None, ge=0, le=MAX_SALARY, alias="salaryMin")
    salary_max: Optional[float] = Field(default=None, ge=0, le=MAX_SALARY, alias="salaryMax")
    salary_currency: Optional[str] = Field(default=None, pattern=r"^[A-Z]{3}$", alias="salaryCurrency")
    availability: Optional[Availability] = None
    is_anonymized: Optional[bool] = Field(default=None, alias="isAnonymized")
    linkedin_url: Optional[str] = Field(default=None, alias="linkedinUrl")
    github_url: Optional[str] = Field(default=None, alias="githubUrl")
    portfolio_url: Optional[str] = Field(default=None, alias="portfolioUrl")
    tags: Optional[List[UUID]] = Field(default=None, max_length=MAX_TAGS)

    @field_validator("linkedin_url", "github_url", "portfolio_url")
    @classmethod
    def validate_urls(cls, v: Optional[str]) -> Optional[str]:
        return _validate_http_url(v)

    @field_validator("is_anonymized", "salary_currency")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @model_validator(mode="after")
    def check_salary_range(self) -> "CandidateProfileUpdate":
        _check_salary_order(self.salary_min, self.salary_max)
        return self

    def to_update_data(self) -> Dict[str, Any]:
        """snake_case fields the client actually sent, tags excluded."""
        return self.model_dump(mode="json", exclude_unset=True, exclude={"tags"})


class VisibilityUpdate(BaseModel):
    """Full replacement of the caller's visibility preferences."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    is_anonymized: bool = Field(..., alias="isAnonymized")
    is_active: bool = Field(..., alias="isActive")
    show_salary: bool = Field(default=True, alias="showSalary")
    show_location: bool = Field(default=True, alias="showLocation")
    show_experience: bool = Field(default=True, alias="showExperience")
    show_contact: bool = Field(default=False, alias="showContact")

    def to_settings(self) -> VisibilitySettings:
        return VisibilitySettings(
            show_salary=self.show_salary,
            show_location=self.show_location,
            show_experience=self.show_experience,
            show_contact=self.show_contact,
        )


__all__ = ["CandidateProfileCreate", "CandidateProfileUpdate", "MAX_SALARY", "MAX_TAGS", "VisibilityUpdate"]
