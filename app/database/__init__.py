"""
Database module for the candidate profile service.

This module provides the async SQLModel engine and session manager for PostgreSQL.
"""

from .sqlmodel_engine import SQLModelDatabaseManager

__all__ = ["SQLModelDatabaseManager"]
