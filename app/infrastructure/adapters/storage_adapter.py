"""Local filesystem storage adapter implementing IFileStorage interface.

CV files are stored per workspace owner so that one owner can never reach
another owner's uploads through a crafted path.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any
from uuid import UUID

import aiofiles
import structlog

from app.domain.interfaces import IFileStorage

logger = structlog.get_logger(__name__)


class LocalFileStorageAdapter(IFileStorage):
    """
    Local filesystem storage adapter with per-owner isolation.

    Storage Structure:
        {base_path}/{owner_id}/{cv_id}/{sanitized_filename}

    Security Features:
        - UUID validation of owner and CV ids prevents path traversal
        - Filename sanitization removes dangerous characters
        - Resolved paths must stay inside the base directory
    """

    def __init__(self, base_path: str = "./storage/cvs"):
        """
        Initialize local file storage adapter.

        Args:
            base_path: Base directory for file storage. Created if doesn't exist.
        """
        self.base_path = Path(base_path).resolve()
        self.base_path.mkdir(parents=True, exist_ok=True)

        logger.info(
            "LocalFileStorageAdapter initialized",
            base_path=str(self.base_path),
        )

    def _validate_uuid(self, value: str, field_name: str) -> None:
        try:
            UUID(str(value))
        except (ValueError, AttributeError, TypeError) as e:
            logger.warning("Invalid UUID format", field_name=field_name, value=value)
            raise ValueError(f"Invalid {field_name}: must be a valid UUID format") from e

    def _sanitize_filename(self, filename: str) -> str:
        """
        Sanitize filename to prevent security issues.

        Removes dangerous characters and path traversal attempts while
        preserving the original extension.
        """
        if not filename or not filename.strip():
            raise ValueError("Filename cannot be empty")

        # Remove any directory components (path traversal protection)
        filename = os.path.basename(filename)

        # Allow: alphanumeric, dash, underscore, dot
        sanitized = re.sub(r'[^a-zA-Z0-9._-]', '_', filename)

        # Prevent hidden files
        if sanitized.startswith('.'):
            sanitized = 'file_' + sanitized

        if not sanitized or sanitized in ('.', '..'):
            raise ValueError(f"Invalid filename after sanitization: {filename}")

        if sanitized != filename:
            logger.debug("Filename sanitized", original=filename, sanitized=sanitized)

        return sanitized

    def _resolve(self, storage_path: str) -> Path:
        """Map a relative storage path to an absolute path inside the base directory."""
        if not storage_path:
            raise ValueError("Storage path cannot be empty")

        resolved = (self.base_path / storage_path).resolve()
        if self.base_path not in resolved.parents:
            logger.warning("Storage path escapes base directory", storage_path=storage_path)
            raise ValueError("Invalid storage path")
        return resolved

    async def save_file(
        self,
        owner_id: str,
        cv_id: str,
        filename: str,
        content: bytes
    ) -> str:
        """
        Save file content with owner isolation.

        Returns:
            Storage path in format: "owner_id/cv_id/filename"

        Raises:
            ValueError: If owner_id, cv_id or filename is invalid
            OSError: If file cannot be written (permissions, disk space, etc.)
        """
        self._validate_uuid(owner_id, "owner_id")
        self._validate_uuid(cv_id, "cv_id")
        sanitized_filename = self._sanitize_filename(filename)

        storage_path = f"{owner_id}/{cv_id}/{sanitized_filename}"
        file_path = self._resolve(storage_path)

        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(file_path, 'wb') as f:
                await f.write(content)
        except OSError as e:
            logger.error(
                "Filesystem error saving file",
                owner_id=owner_id,
                cv_id=cv_id,
                filename=filename,
                error=str(e),
                error_type=type(e).__name__
            )
            raise OSError(f"Failed to save file: {str(e)}") from e

        logger.info(
            "File saved successfully",
            owner_id=owner_id,
            cv_id=cv_id,
            storage_path=storage_path,
            file_size=len(content)
        )
        return storage_path

    async def retrieve_file(self, storage_path: str) -> bytes:
        """
        Retrieve file content.

        Raises:
            ValueError: If the storage path is invalid
            FileNotFoundError: If file does not exist
            OSError: If file cannot be read
        """
        file_path = self._resolve(storage_path)
        if not file_path.is_file():
            logger.warning("Stored file not found", storage_path=storage_path)
            raise FileNotFoundError(f"No file found at {storage_path}")

        try:
            async with aiofiles.open(file_path, 'rb') as f:
                content = await f.read()
        except OSError as e:
            logger.error("Filesystem error retrieving file", storage_path=storage_path, error=str(e))
            raise OSError(f"Failed to retrieve file: {str(e)}") from e

        logger.debug("File retrieved", storage_path=storage_path, file_size=len(content))
        return content

    async def delete_file(self, storage_path: str) -> bool:
        """
        Delete a stored file and its CV directory when it becomes empty.

        Returns:
            True if file was deleted, False if file did not exist
        """
        file_path = self._resolve(storage_path)
        if not file_path.exists():
            logger.debug("File does not exist for deletion", storage_path=storage_path)
            return False

        try:
            file_path.unlink()
            parent = file_path.parent
            if parent != self.base_path and not any(parent.iterdir()):
                parent.rmdir()
        except OSError as e:
            logger.error("Filesystem error deleting file", storage_path=storage_path, error=str(e))
            raise OSError(f"Failed to delete file: {str(e)}") from e

        logger.info("File deleted successfully", storage_path=storage_path)
        return True

    async def check_health(self) -> dict[str, Any]:
        """Verify that the base directory exists and is writable."""
        path_exists = self.base_path.exists()

        is_writable = False
        test_dir = self.base_path / ".health_check"
        try:
            test_dir.mkdir(exist_ok=True)
            is_writable = True
            test_dir.rmdir()
        except OSError:
            pass

        return {
            "status": "healthy" if path_exists and is_writable else "unhealthy",
            "service": "LocalFileStorageAdapter",
            "base_path": str(self.base_path),
            "writable": is_writable,
        }


__all__ = ["LocalFileStorageAdapter"]
