"""
SQLModel tables for identity-provider users and company membership.

Users are synced from the identity provider; their primary key is the
provider's opaque user id rather than a UUID.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.dialects.postgresql import UUID as PostgreSQLUUID
from sqlmodel import Field, SQLModel

from app.infrastructure.persistence.models.base import (
    create_created_at_column,
    create_updated_at_column,
    create_uuid_pk_column,
)


class UserTable(SQLModel, table=True):
    """Platform user row (candidate, company member or admin)."""
    __tablename__ = "users"

    id: str = Field(
        sa_column=Column(Text, primary_key=True, nullable=False),
        description="Identity-provider user id"
    )
    email: str = Field(
        sa_column=Column(Text, nullable=False, unique=True),
        description="Primary email address"
    )
    first_name: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    last_name: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    image_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    role: str = Field(
        default="candidate",
        sa_column=Column(String(20), nullable=False, default="candidate", index=True),
        description="candidate, company or admin"
    )
    is_active: bool = Field(
        default=True,
        sa_column=Column(Boolean, nullable=False, default=True),
    )
    last_login: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_column=create_created_at_column())
    updated_at: datetime = Field(default_factory=datetime.utcnow, sa_column=create_updated_at_column())


class CompanyTable(SQLModel, table=True):
    """Hiring company that can purchase profile access."""
    __tablename__ = "companies"

    id: UUID = Field(default_factory=uuid4, sa_column=create_uuid_pk_column())
    name: str = Field(sa_column=Column(Text, nullable=False))
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    website: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    industry: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    location: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    tier: str = Field(
        default="basic",
        sa_column=Column(String(20), nullable=False, default="basic"),
    )
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_column=create_created_at_column())
    updated_at: datetime = Field(default_factory=datetime.utcnow, sa_column=create_updated_at_column())


class CompanyUserTable(SQLModel, table=True):
    """Membership of a user in a company."""
    __tablename__ = "company_users"

    __table_args__ = (
        Index("idx_company_users_user_id", "user_id"),
    )

    id: UUID = Field(default_factory=uuid4, sa_column=create_uuid_pk_column())
    user_id: str = Field(
        sa_column=Column(Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    )
    company_id: UUID = Field(
        sa_column=Column(
            PostgreSQLUUID(as_uuid=True),
            ForeignKey("companies.id", ondelete="CASCADE"),
            nullable=False,
        )
    )
    role: str = Field(
        default="member",
        sa_column=Column(String(20), nullable=False, default="member"),
        description="owner, admin or member"
    )
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_column=create_created_at_column())


__all__ = ["CompanyTable", "CompanyUserTable", "UserTable"]
