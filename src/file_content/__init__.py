"""Encoding-preserving text file content: detect, decode and re-encode."""

from __future__ import annotations

from file_content._utils import BINARY_DETECTION_THRESHOLD
from file_content.encoder import encode, encode_content
from file_content.enums import ByteOrder, Encoding
from file_content.errors import (
    BinaryContentError,
    InvalidTextError,
    MalformedUtf8Error,
    MalformedUtf16Error,
    TextDataError,
    UnevenLengthError,
)
from file_content.file import File, read_from_reader, read_to_string
from file_content.pipeline import BinaryContent, Content, TextData
from file_content.pipeline.orchestrator import run_pipeline

__version__ = "0.3.0"
__all__ = [
    "BinaryContent",
    "BinaryContentError",
    "ByteOrder",
    "Content",
    "Encoding",
    "File",
    "InvalidTextError",
    "MalformedUtf16Error",
    "MalformedUtf8Error",
    "TextData",
    "TextDataError",
    "UnevenLengthError",
    "decode",
    "detect",
    "encode",
    "encode_content",
    "read_from_reader",
    "read_to_string",
]


def detect(
    byte_str: bytes | bytearray, max_bytes: int = BINARY_DETECTION_THRESHOLD
) -> Content:
    """Detect the encoding of *byte_str* and decode it.

    :returns: :class:`TextData` for text in a supported encoding, or
        :class:`BinaryContent` holding the input bytes.
    :raises TextDataError: If the data is malformed in the encoding its BOM
        (or the absence of one) selects.
    """
    data = byte_str if isinstance(byte_str, bytes) else bytes(byte_str)
    return run_pipeline(data, max_bytes=max_bytes)


def decode(
    byte_str: bytes | bytearray, max_bytes: int = BINARY_DETECTION_THRESHOLD
) -> TextData:
    """Like :func:`detect`, but binary content raises :class:`BinaryContentError`."""
    content = detect(byte_str, max_bytes=max_bytes)
    if isinstance(content, BinaryContent):
        raise BinaryContentError
    return content
