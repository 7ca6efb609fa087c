"""
Infrastructure persistence models module.

This module contains database table definitions following hexagonal architecture,
separated from domain models and business logic.
"""

from app.infrastructure.persistence.models.candidate_profile_table import (
    CandidateProfileTable,
    CandidateTagTable,
    EducationTable,
    ProfileViewTable,
    TagTable,
    WorkExperienceTable,
)
from app.infrastructure.persistence.models.user_table import (
    CompanyTable,
    CompanyUserTable,
    UserTable,
)

__all__ = [
    # Users and companies
    "CompanyTable",
    "CompanyUserTable",
    "UserTable",
    # Candidate profiles
    "CandidateProfileTable",
    "CandidateTagTable",
    "EducationTable",
    "ProfileViewTable",
    "TagTable",
    "WorkExperienceTable",
]
