"""Re-encoding of decoded text back to bytes."""

from __future__ import annotations

from file_content.enums import Encoding
from file_content.errors import InvalidTextError
from file_content.pipeline import BinaryContent, Content, find_surrogate
from file_content.pipeline.utf16 import encode_utf16


def encode(text: str, encoding: Encoding) -> bytes:
    """Encode *text* in *encoding*, BOM included.

    For any text produced by detection this reproduces the original bytes
    exactly.

    :raises InvalidTextError: If *text* contains a lone surrogate.
    """
    position = find_surrogate(text)
    if position is not None:
        raise InvalidTextError(position)

    if encoding.byte_order is None:
        body = text.encode("utf-8")
    else:
        body = encode_utf16(text, encoding)
    return encoding.bom + body


def encode_content(content: Content) -> bytes:
    """Serialize text or binary content; binary bytes are copied verbatim."""
    if isinstance(content, BinaryContent):
        return bytes(content.data)
    return encode(content.text, content.encoding)
