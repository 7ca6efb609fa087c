"""
SQLModel tables for candidate profiles and their child records.

Salary and GPA use fixed-precision NUMERIC columns; mappers convert them to
decimal strings for the domain layer.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.dialects.postgresql import JSONB, UUID as PostgreSQLUUID
from sqlmodel import Field, SQLModel

from app.infrastructure.persistence.models.base import (
    create_created_at_column,
    create_updated_at_column,
    create_uuid_pk_column,
)


def _candidate_fk_column() -> Column:
    return Column(
        PostgreSQLUUID(as_uuid=True),
        ForeignKey("candidate_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )


class CandidateProfileTable(SQLModel, table=True):
    """Executive candidate profile, one per user."""
    __tablename__ = "candidate_profiles"

    __table_args__ = (
        Index("idx_candidate_profiles_active_anonymized", "is_active", "is_anonymized"),
    )

    id: UUID = Field(default_factory=uuid4, sa_column=create_uuid_pk_column())
    user_id: str = Field(
        sa_column=Column(Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
        description="Owning identity-provider user id"
    )

    # Professional details
    title: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    summary: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    experience: Optional[str] = Field(
        default=None,
        sa_column=Column(String(20), nullable=True),
        description="entry, junior, mid, senior, lead or executive"
    )
    location: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    remote_preference: Optional[str] = Field(default=None, sa_column=Column(String(20), nullable=True))
    availability: Optional[str] = Field(default=None, sa_column=Column(String(20), nullable=True))

    # Compensation
    salary_min: Optional[Decimal] = Field(default=None, sa_column=Column(Numeric(10, 2), nullable=True))
    salary_max: Optional[Decimal] = Field(default=None, sa_column=Column(Numeric(10, 2), nullable=True))
    salary_currency: Optional[str] = Field(
        default="USD",
        sa_column=Column(String(3), nullable=True, default="USD"),
    )

    # Flags
    is_anonymized: bool = Field(default=True, sa_column=Column(Boolean, nullable=False, default=True))
    is_active: bool = Field(default=True, sa_column=Column(Boolean, nullable=False, default=True))
    profile_completed: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))

    # Links
    linkedin_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    github_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    portfolio_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    resume_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    # Metadata
    private_metadata: Optional[Dict[str, Any]] = Field(
        default=None,
        sa_column=Column(JSONB, nullable=True),
        description="Self-edit and anonymity bookkeeping, never exposed"
    )
    public_metadata: Optional[Dict[str, Any]] = Field(
        default=None,
        sa_column=Column(JSONB, nullable=True),
        description="Visibility preferences"
    )

    created_at: datetime = Field(default_factory=datetime.utcnow, sa_column=create_created_at_column())
    updated_at: datetime = Field(default_factory=datetime.utcnow, sa_column=create_updated_at_column())


class TagTable(SQLModel, table=True):
    """Shared skill, sector or expertise label."""
    __tablename__ = "tags"

    id: UUID = Field(default_factory=uuid4, sa_column=create_uuid_pk_column())
    name: str = Field(sa_column=Column(Text, nullable=False, unique=True))
    category: str = Field(
        sa_column=Column(String(20), nullable=False, index=True),
        description="skill, expertise, industry, certification, language or other"
    )
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    is_verified: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_column=create_created_at_column())


class CandidateTagTable(SQLModel, table=True):
    """Assignment of a tag to a candidate."""
    __tablename__ = "candidate_tags"

    __table_args__ = (
        Index("idx_candidate_tags_candidate_position", "candidate_id", "position"),
    )

    id: UUID = Field(default_factory=uuid4, sa_column=create_uuid_pk_column())
    candidate_id: UUID = Field(sa_column=_candidate_fk_column())
    tag_id: UUID = Field(
        sa_column=Column(
            PostgreSQLUUID(as_uuid=True),
            ForeignKey("tags.id", ondelete="CASCADE"),
            nullable=False,
        )
    )
    position: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Zero-based order in which the candidate listed the tag"
    )
    proficiency: Optional[str] = Field(default=None, sa_column=Column(String(20), nullable=True))
    years_experience: Optional[int] = Field(default=None, sa_column=Column(Integer, nullable=True))
    is_endorsed: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_column=create_created_at_column())


class WorkExperienceTable(SQLModel, table=True):
    """Professional experience entry."""
    __tablename__ = "work_experiences"

    id: UUID = Field(default_factory=uuid4, sa_column=create_uuid_pk_column())
    candidate_id: UUID = Field(sa_column=_candidate_fk_column())
    company: str = Field(sa_column=Column(Text, nullable=False))
    title: str = Field(sa_column=Column(Text, nullable=False))
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    location: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    start_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    end_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))
    is_current: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))
    is_remote: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))
    order: int = Field(default=0, sa_column=Column("order", Integer, nullable=False, default=0))
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_column=create_created_at_column())
    updated_at: datetime = Field(default_factory=datetime.utcnow, sa_column=create_updated_at_column())


class EducationTable(SQLModel, table=True):
    """Education entry."""
    __tablename__ = "education"

    id: UUID = Field(default_factory=uuid4, sa_column=create_uuid_pk_column())
    candidate_id: UUID = Field(sa_column=_candidate_fk_column())
    institution: str = Field(sa_column=Column(Text, nullable=False))
    degree: str = Field(sa_column=Column(Text, nullable=False))
    field_of_study: Optional[str] = Field(default=None, sa_column=Column("field", Text, nullable=True))
    gpa: Optional[Decimal] = Field(default=None, sa_column=Column(Numeric(3, 2), nullable=True))
    start_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    end_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    order: int = Field(default=0, sa_column=Column("order", Integer, nullable=False, default=0))
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_column=create_created_at_column())
    updated_at: datetime = Field(default_factory=datetime.utcnow, sa_column=create_updated_at_column())


class ProfileViewTable(SQLModel, table=True):
    """A company's view of a candidate; ``purchased`` rows are paid unlocks."""
    __tablename__ = "profile_views"

    __table_args__ = (
        Index("idx_profile_views_company_candidate_type", "company_id", "candidate_id", "view_type"),
    )

    id: UUID = Field(default_factory=uuid4, sa_column=create_uuid_pk_column())
    candidate_id: UUID = Field(sa_column=_candidate_fk_column())
    company_id: UUID = Field(
        sa_column=Column(
            PostgreSQLUUID(as_uuid=True),
            ForeignKey("companies.id", ondelete="CASCADE"),
            nullable=False,
        )
    )
    viewed_by_user_id: str = Field(
        sa_column=Column(Text, ForeignKey("users.id"), nullable=False)
    )
    view_type: str = Field(
        sa_column=Column(String(20), nullable=False),
        description="anonymous, purchased or admin"
    )
    payment_id: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    payment_amount: Optional[Decimal] = Field(default=None, sa_column=Column(Numeric(10, 2), nullable=True))
    currency: Optional[str] = Field(default="USD", sa_column=Column(String(3), nullable=True, default="USD"))
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_column=create_created_at_column())


__all__ = [
    "CandidateProfileTable",
    "CandidateTagTable",
    "EducationTable",
    "ProfileViewTable",
    "TagTable",
    "WorkExperienceTable",
]
