"""
Upload validation for CV files.

Sizes are checked while streaming so an upload without a reliable ``size``
attribute is never read past the configured limit.
"""

import asyncio
import os
from typing import Any, Tuple

import structlog

from app.domain.entities.cv import ALLOWED_CV_EXTENSIONS
from app.domain.exceptions import FileSizeExceededError, InvalidFileError

logger = structlog.get_logger(__name__)


class FileSizeValidator:
    """
    Stream-based validator for uploaded CV files.

    Works with any object exposing async ``read(size)`` and ``seek(offset)``,
    such as FastAPI's ``UploadFile``.
    """

    # Default buffer size for streaming reads (64KB)
    DEFAULT_BUFFER_SIZE = 64 * 1024

    @classmethod
    def validate_extension(cls, filename: str) -> str:
        """
        Check the file extension against the accepted CV formats.

        Returns:
            The lower-cased extension without the leading dot.

        Raises:
            InvalidFileError: If the extension is missing or not accepted
        """
        extension = os.path.splitext(filename or "")[1].lower()
        if extension not in ALLOWED_CV_EXTENSIONS:
            allowed = ", ".join(ext.lstrip(".").upper() for ext in ALLOWED_CV_EXTENSIONS)
            raise InvalidFileError(
                filename=filename,
                reason=f"Unsupported file type. Allowed types: {allowed}",
            )
        return extension.lstrip(".")

    @classmethod
    def validate_size(cls, size: int, max_size_bytes: int, filename: str = None) -> None:
        if size <= 0:
            raise InvalidFileError(filename=filename, reason="File is empty")
        if size > max_size_bytes:
            logger.warning(
                "File size exceeds limit",
                filename=filename,
                file_size=size,
                max_size=max_size_bytes,
            )
            raise FileSizeExceededError(actual_size=size, max_size=max_size_bytes, filename=filename)

    @classmethod
    async def read_limited(
        cls,
        file: Any,
        max_size_bytes: int,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> Tuple[bytes, int]:
        """
        Read an upload into memory, stopping as soon as it passes the limit.

        Args:
            file: Async file-like upload
            max_size_bytes: Maximum allowed file size in bytes
            buffer_size: Chunk size for streaming reads

        Returns:
            Tuple of (content, size)

        Raises:
            FileSizeExceededError: If the file exceeds the limit
            InvalidFileError: If the file is empty or cannot be read
        """
        filename = getattr(file, "filename", None) or "unknown"

        declared = getattr(file, "size", None)
        if declared is not None and declared > max_size_bytes:
            raise FileSizeExceededError(actual_size=declared, max_size=max_size_bytes, filename=filename)

        chunks = []
        total_size = 0
        chunk_count = 0

        try:
            await file.seek(0)
            while True:
                chunk = await file.read(buffer_size)
                if not chunk:
                    break

                total_size += len(chunk)
                chunk_count += 1
                if total_size > max_size_bytes:
                    logger.warning(
                        "File size exceeds limit during streaming",
                        filename=filename,
                        bytes_read=total_size,
                        max_size=max_size_bytes,
                    )
                    raise FileSizeExceededError(
                        actual_size=total_size,
                        max_size=max_size_bytes,
                        filename=filename,
                    )
                chunks.append(chunk)

                # Yield control every ~3MB at 64KB chunks
                if chunk_count % 50 == 0:
                    await asyncio.sleep(0)
        except OSError as e:
            logger.error("File I/O error during upload validation", filename=filename, error=str(e))
            raise InvalidFileError(filename=filename, reason=f"File I/O error: {str(e)}")

        cls.validate_size(total_size, max_size_bytes, filename)

        logger.debug(
            "Upload read within size limit",
            filename=filename,
            total_size=total_size,
            chunks_read=chunk_count,
        )
        return b"".join(chunks), total_size

    @classmethod
    def format_file_size(cls, size_bytes: int) -> str:
        """Format a size for messages, e.g. ``2.5 MB``."""
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.1f} KB"
        elif size_bytes < 1024 * 1024 * 1024:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
        else:
            return f"{size_bytes / (1024 * 1024 * 1024):.1f} GB"


__all__ = ["FileSizeValidator"]
