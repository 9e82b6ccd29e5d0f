"""Provider utilities for CV file storage."""

from __future__ import annotations

import asyncio
from typing import Optional

import structlog

from app.core.config import get_settings
from app.domain.interfaces import IFileStorage
from app.infrastructure.adapters.storage_adapter import LocalFileStorageAdapter


logger = structlog.get_logger(__name__)

_file_storage: Optional[IFileStorage] = None
_lock = asyncio.Lock()


async def get_file_storage() -> IFileStorage:
    """
    Return singleton file storage service configured via settings.

    Example:
        ```python
        file_storage = await get_file_storage()
        await file_storage.save_file(owner_id, cv_id, filename, content)
        ```
    """
    global _file_storage

    if _file_storage is not None:
        return _file_storage

    async with _lock:
        if _file_storage is not None:
            return _file_storage

        settings = get_settings()
        _file_storage = LocalFileStorageAdapter(base_path=settings.LOCAL_STORAGE_PATH)
        logger.info(
            "File storage service initialized",
            storage_type="local",
            base_path=settings.LOCAL_STORAGE_PATH
        )
        return _file_storage


async def reset_file_storage() -> None:
    """Drop the cached storage adapter (tests and shutdown)."""
    global _file_storage
    async with _lock:
        if _file_storage is not None:
            logger.info("File storage service shutting down")
        _file_storage = None


__all__ = [
    "get_file_storage",
    "reset_file_storage",
]
