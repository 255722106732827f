"""Stage 2: Binary content detection."""

from __future__ import annotations

from file_content._utils import BINARY_DETECTION_THRESHOLD


def is_binary(data: bytes, max_bytes: int = BINARY_DETECTION_THRESHOLD) -> bool:
    """Return True if a null byte occurs within the first *max_bytes* of data."""
    return data.find(b"\x00", 0, max_bytes) != -1
