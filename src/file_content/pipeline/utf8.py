"""Stage 3: strict UTF-8 validation."""

from __future__ import annotations

from file_content.errors import MalformedUtf8Error


def decode_utf8(data: bytes, offset: int = 0) -> str:
    """Decode *data* as strict UTF-8.

    Python's UTF-8 codec rejects overlong forms, encoded surrogates, code
    points above U+10FFFF and truncated sequences.

    :param data: The bytes to decode, with any BOM already removed.
    :param offset: Added to the reported error position, so positions refer
        to the caller's full buffer (e.g. 3 when a UTF-8 BOM was stripped).
    :raises MalformedUtf8Error: If *data* is not well-formed UTF-8.
    """
    try:
        return data.decode("utf-8", errors="strict")
    except UnicodeDecodeError as exc:
        raise MalformedUtf8Error(offset + exc.start, exc.reason) from exc
