"""Internal shared utilities for file_content."""

from __future__ import annotations

#: Number of leading bytes scanned for a null byte when deciding whether
#: BOM-less data is binary.  Git uses the same window.
BINARY_DETECTION_THRESHOLD: int = 8_000


def _validate_max_bytes(max_bytes: int) -> None:
    """Raise ValueError if *max_bytes* is not a positive integer."""
    if isinstance(max_bytes, bool) or not isinstance(max_bytes, int) or max_bytes < 1:
        msg = "max_bytes must be a positive integer"
        raise ValueError(msg)
