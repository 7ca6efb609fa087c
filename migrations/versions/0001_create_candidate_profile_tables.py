"""create candidate profile tables

Revision ID: 0001
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        primary_key=True,
        nullable=False,
        server_default=sa.text("gen_random_uuid()"),
    )


def _timestamp(name: str) -> sa.Column:
    return sa.Column(name, sa.DateTime(), nullable=False, server_default=sa.func.now())


def _candidate_fk() -> sa.Column:
    return sa.Column(
        "candidate_id",
        postgresql.UUID(as_uuid=True),
        sa.ForeignKey("candidate_profiles.id", ondelete="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Text(), primary_key=True, nullable=False),
        sa.Column("email", sa.Text(), nullable=False, unique=True),
        sa.Column("first_name", sa.Text(), nullable=True),
        sa.Column("last_name", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("role", sa.String(length=20), nullable=False, server_default="candidate"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("last_login", sa.DateTime(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )
    op.create_index("ix_users_role", "users", ["role"])

    op.create_table(
        "companies",
        _uuid_pk(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("website", sa.Text(), nullable=True),
        sa.Column("industry", sa.Text(), nullable=True),
        sa.Column("location", sa.Text(), nullable=True),
        sa.Column("tier", sa.String(length=20), nullable=False, server_default="basic"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )

    op.create_table(
        "company_users",
        _uuid_pk(),
        sa.Column("user_id", sa.Text(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column(
            "company_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("companies.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("role", sa.String(length=20), nullable=False, server_default="member"),
        _timestamp("created_at"),
    )
    op.create_index("idx_company_users_user_id", "company_users", ["user_id"])

    op.create_table(
        "tags",
        _uuid_pk(),
        sa.Column("name", sa.Text(), nullable=False, unique=True),
        sa.Column("category", sa.String(length=20), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        _timestamp("created_at"),
    )
    op.create_index("ix_tags_category", "tags", ["category"])

    op.create_table(
        "candidate_profiles",
        _uuid_pk(),
        sa.Column(
            "user_id",
            sa.Text(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("experience", sa.String(length=20), nullable=True),
        sa.Column("location", sa.Text(), nullable=True),
        sa.Column("remote_preference", sa.String(length=20), nullable=True),
        sa.Column("availability", sa.String(length=20), nullable=True),
        sa.Column("salary_min", sa.Numeric(10, 2), nullable=True),
        sa.Column("salary_max", sa.Numeric(10, 2), nullable=True),
        sa.Column("salary_currency", sa.String(length=3), nullable=True, server_default="USD"),
        sa.Column("is_anonymized", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("profile_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("linkedin_url", sa.Text(), nullable=True),
        sa.Column("github_url", sa.Text(), nullable=True),
        sa.Column("portfolio_url", sa.Text(), nullable=True),
        sa.Column("resume_url", sa.Text(), nullable=True),
        sa.Column("private_metadata", postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column("public_metadata", postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )
    op.create_index(
        "idx_candidate_profiles_active_anonymized",
        "candidate_profiles",
        ["is_active", "is_anonymized"],
    )

    op.create_table(
        "candidate_tags",
        _uuid_pk(),
        _candidate_fk(),
        sa.Column(
            "tag_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("tags.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("proficiency", sa.String(length=20), nullable=True),
        sa.Column("years_experience", sa.Integer(), nullable=True),
        sa.Column("is_endorsed", sa.Boolean(), nullable=False, server_default=sa.false()),
        _timestamp("created_at"),
    )
    op.create_index("ix_candidate_tags_candidate_id", "candidate_tags", ["candidate_id"])

    op.create_table(
        "work_experiences",
        _uuid_pk(),
        _candidate_fk(),
        sa.Column("company", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("location", sa.Text(), nullable=True),
        sa.Column("start_date", sa.DateTime(), nullable=False),
        sa.Column("end_date", sa.DateTime(), nullable=True),
        sa.Column("is_current", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_remote", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("order", sa.Integer(), nullable=False, server_default=sa.text("0")),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )
    op.create_index("ix_work_experiences_candidate_id", "work_experiences", ["candidate_id"])

    op.create_table(
        "education",
        _uuid_pk(),
        _candidate_fk(),
        sa.Column("institution", sa.Text(), nullable=False),
        sa.Column("degree", sa.Text(), nullable=False),
        sa.Column("field", sa.Text(), nullable=True),
        sa.Column("gpa", sa.Numeric(3, 2), nullable=True),
        sa.Column("start_date", sa.DateTime(), nullable=False),
        sa.Column("end_date", sa.DateTime(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("order", sa.Integer(), nullable=False, server_default=sa.text("0")),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )
    op.create_index("ix_education_candidate_id", "education", ["candidate_id"])

    op.create_table(
        "profile_views",
        _uuid_pk(),
        _candidate_fk(),
        sa.Column(
            "company_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("companies.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("viewed_by_user_id", sa.Text(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("view_type", sa.String(length=20), nullable=False),
        sa.Column("payment_id", sa.Text(), nullable=True),
        sa.Column("payment_amount", sa.Numeric(10, 2), nullable=True),
        sa.Column("currency", sa.String(length=3), nullable=True, server_default="USD"),
        _timestamp("created_at"),
    )
    op.create_index("ix_profile_views_candidate_id", "profile_views", ["candidate_id"])
    op.create_index(
        "idx_profile_views_company_candidate_type",
        "profile_views",
        ["company_id", "candidate_id", "view_type"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("profile_views")
    op.drop_table("education")
    op.drop_table("work_experiences")
    op.drop_table("candidate_tags")
    op.drop_table("candidate_profiles")
    op.drop_table("tags")
    op.drop_table("company_users")
    op.drop_table("companies")
    op.drop_table("users")
