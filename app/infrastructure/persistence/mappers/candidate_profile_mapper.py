"""
Mapper between candidate profile domain entities and persistence models.

Handles:
- Value object conversions (CandidateId, UserId, TagId)
- NUMERIC columns to decimal strings and back
- JSONB metadata columns that may be NULL
- Joined user rows into the optional profile owner
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from app.domain.entities.candidate_profile import (
    CandidateProfile,
    Education,
    OwnerUser,
    ProfilePurchase,
    Tag,
    UserRole,
    WorkExperience,
)
from app.domain.value_objects import CandidateId, CompanyId, TagId, UserId
from app.infrastructure.persistence.models.candidate_profile_table import (
    CandidateProfileTable,
    CandidateTagTable,
    EducationTable,
    ProfileViewTable,
    TagTable,
    WorkExperienceTable,
)
from app.infrastructure.persistence.models.user_table import UserTable


def _decimal_to_str(value: Optional[Decimal]) -> Optional[str]:
    return str(value) if value is not None else None


def _str_to_decimal(value: Optional[Any]) -> Optional[Decimal]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as e:
        raise ValueError(f"Not a decimal amount: {value!r}") from e


def _parse_role(value: Optional[str]) -> UserRole:
    try:
        return UserRole(value or UserRole.CANDIDATE.value)
    except ValueError:
        # Unknown roles never satisfy candidate checks
        return UserRole.COMPANY


class CandidateProfileMapper:
    """Maps between CandidateProfile aggregates and their table rows."""

    @staticmethod
    def to_domain(
        table: CandidateProfileTable,
        user: Optional[UserTable] = None,
    ) -> CandidateProfile:
        """
        Convert CandidateProfileTable (persistence) to CandidateProfile (domain).

        Args:
            table: Profile row
            user: Joined owner row; ``None`` when the user record is missing

        Returns:
            CandidateProfile without tags or child records attached
        """
        return CandidateProfile(
            id=CandidateId(table.id),
            user_id=UserId(table.user_id),
            owner=CandidateProfileMapper.user_to_domain(user) if user is not None else None,
            title=table.title,
            summary=table.summary,
            experience=table.experience,
            location=table.location,
            remote_preference=table.remote_preference,
            availability=table.availability,
            salary_min=_decimal_to_str(table.salary_min),
            salary_max=_decimal_to_str(table.salary_max),
            salary_currency=table.salary_currency,
            linkedin_url=table.linkedin_url,
            github_url=table.github_url,
            portfolio_url=table.portfolio_url,
            resume_url=table.resume_url,
            is_active=table.is_active,
            is_anonymized=table.is_anonymized,
            profile_completed=table.profile_completed,
            public_metadata=dict(table.public_metadata or {}),
            private_metadata=dict(table.private_metadata or {}),
            created_at=table.created_at,
            updated_at=table.updated_at,
        )

    @staticmethod
    def to_table(entity: CandidateProfile) -> CandidateProfileTable:
        """Convert CandidateProfile (domain) to a new CandidateProfileTable."""
        table = CandidateProfileTable(
            id=entity.id.value,
            user_id=entity.user_id.value,
            created_at=entity.created_at,
        )
        return CandidateProfileMapper.update_table_from_domain(table, entity)

    @staticmethod
    def update_table_from_domain(
        table: CandidateProfileTable,
        entity: CandidateProfile,
    ) -> CandidateProfileTable:
        """
        Sync editable columns from the domain entity onto an existing row.

        Identity columns and ``created_at`` are left untouched.
        """
        table.title = entity.title
        table.summary = entity.summary
        table.experience = entity.experience
        table.location = entity.location
        table.remote_preference = entity.remote_preference
        table.availability = entity.availability

        table.salary_min = _str_to_decimal(entity.salary_min)
        table.salary_max = _str_to_decimal(entity.salary_max)
        table.salary_currency = entity.salary_currency

        table.linkedin_url = entity.linkedin_url
        table.github_url = entity.github_url
        table.portfolio_url = entity.portfolio_url
        table.resume_url = entity.resume_url

        table.is_active = entity.is_active
        table.is_anonymized = entity.is_anonymized
        table.profile_completed = entity.profile_completed

        # New dicts so SQLAlchemy notices the JSONB change
        table.public_metadata = dict(entity.public_metadata or {})
        table.private_metadata = dict(entity.private_metadata or {})

        table.updated_at = entity.updated_at
        return table

    # ========================================================================
    # Related rows
    # ========================================================================

    @staticmethod
    def user_to_domain(user: UserTable) -> OwnerUser:
        return OwnerUser(
            user_id=UserId(user.id),
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            image_url=user.image_url,
            role=_parse_role(user.role),
            is_active=user.is_active,
        )

    @staticmethod
    def tag_to_domain(tag: TagTable, assignment: CandidateTagTable) -> Tag:
        return Tag(
            id=TagId(tag.id),
            name=tag.name,
            category=tag.category,
            proficiency=assignment.proficiency,
            years_experience=assignment.years_experience,
            is_endorsed=assignment.is_endorsed,
        )

    @staticmethod
    def work_experience_to_domain(row: WorkExperienceTable) -> WorkExperience:
        return WorkExperience(
            id=row.id,
            company=row.company,
            title=row.title,
            start_date=row.start_date,
            end_date=row.end_date,
            description=row.description,
            location=row.location,
            is_current=row.is_current,
            is_remote=row.is_remote,
            order=row.order,
        )

    @staticmethod
    def education_to_domain(row: EducationTable) -> Education:
        return Education(
            id=row.id,
            institution=row.institution,
            degree=row.degree,
            field=row.field_of_study,
            gpa=_decimal_to_str(row.gpa),
            start_date=row.start_date,
            end_date=row.end_date,
            description=row.description,
            order=row.order,
        )

    @staticmethod
    def purchase_to_domain(row: ProfileViewTable) -> ProfilePurchase:
        return ProfilePurchase(
            candidate_id=CandidateId(row.candidate_id),
            company_id=CompanyId(row.company_id),
            viewed_by_user_id=UserId(row.viewed_by_user_id),
            payment_id=row.payment_id,
            payment_amount=_decimal_to_str(row.payment_amount),
            currency=row.currency,
            created_at=row.created_at,
        )


__all__ = ["CandidateProfileMapper"]
