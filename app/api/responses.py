"""Helpers for file download responses."""

import re
import unicodedata
from typing import Dict
from urllib.parse import quote

_UNSAFE_FALLBACK_CHARS = re.compile(r'[\x00-\x1f\x7f"\\]')


def ascii_file_name(file_name: str, default: str = "download") -> str:
    """Latin-only stand-in for clients that ignore ``filename*``."""
    decomposed = unicodedata.normalize("NFKD", file_name)
    ascii_name = decomposed.encode("ascii", "ignore").decode("ascii")
    ascii_name = _UNSAFE_FALLBACK_CHARS.sub("", ascii_name).strip()
    if not ascii_name or ascii_name.startswith("."):
        ascii_name = default + ascii_name
    return ascii_name


def attachment_headers(file_name: str) -> Dict[str, str]:
    """
    Content-Disposition header for a download.

    Carries an ASCII ``filename`` and the exact name as RFC 5987
    ``filename*`` so non-Latin names survive header encoding.
    """
    return {
        "Content-Disposition": (
            f'attachment; filename="{ascii_file_name(file_name)}"; '
            f"filename*=UTF-8''{quote(file_name, safe='')}"
        )
    }
