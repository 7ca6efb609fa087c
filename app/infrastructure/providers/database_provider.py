"""Database manager provider for hexagonal adapters."""

from __future__ import annotations

import asyncio
from typing import Optional

import structlog

from app.core.config import get_settings
from app.database.sqlmodel_engine import SQLModelDatabaseManager

logger = structlog.get_logger(__name__)

_db_manager: Optional[SQLModelDatabaseManager] = None
_lock = asyncio.Lock()


async def get_database_manager() -> SQLModelDatabaseManager:
    """Return the initialized process-wide database manager."""
    global _db_manager

    if _db_manager is not None:
        return _db_manager

    async with _lock:
        if _db_manager is not None:
            return _db_manager

        manager = SQLModelDatabaseManager(get_settings())
        await manager.initialize()
        _db_manager = manager
        return _db_manager


async def reset_database_manager() -> None:
    global _db_manager
    async with _lock:
        if _db_manager is not None:
            await _db_manager.shutdown()
            logger.info("database_manager_reset")
        _db_manager = None


__all__ = ["get_database_manager", "reset_database_manager"]
