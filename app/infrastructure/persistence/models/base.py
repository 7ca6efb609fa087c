"""Shared column factories for SQLModel table definitions."""

from sqlalchemy import Column, DateTime, text
from sqlalchemy.dialects.postgresql import UUID as PostgreSQLUUID
from sqlalchemy.sql import func


def create_uuid_pk_column() -> Column:
    """Primary key column generated by Postgres when the row omits it."""
    return Column(
        PostgreSQLUUID(as_uuid=True),
        primary_key=True,
        nullable=False,
        server_default=text("gen_random_uuid()"),
    )


def create_created_at_column() -> Column:
    return Column(DateTime, nullable=False, server_default=func.now())


def create_updated_at_column() -> Column:
    return Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())


__all__ = [
    "create_created_at_column",
    "create_updated_at_column",
    "create_uuid_pk_column",
]
