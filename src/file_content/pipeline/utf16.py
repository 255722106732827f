"""Stage 1b: UTF-16 code unit packing and validation.

Bytes following a UTF-16 BOM must form whole 16-bit code units; the unit
sequence is then decoded with the strict UTF-16 codec, which rejects
unpaired surrogates.
"""

from __future__ import annotations

import struct

from file_content.enums import ByteOrder, Encoding
from file_content.errors import MalformedUtf16Error, UnevenLengthError


def _check_even_length(data: bytes) -> None:
    if len(data) % 2:
        raise UnevenLengthError(len(data))


def to_code_units(data: bytes, byte_order: ByteOrder) -> tuple[int, ...]:
    """Reinterpret *data* as consecutive 16-bit code units.

    :param data: Raw bytes with any BOM already removed.
    :param byte_order: Order of the two bytes within each unit.
    :returns: The code units, in input order.  Empty input gives ``()``.
    :raises UnevenLengthError: If *data* has an odd length.
    """
    _check_even_length(data)
    return struct.unpack(f"{byte_order.value}{len(data) // 2}H", data)


def from_code_units(units: list[int] | tuple[int, ...], byte_order: ByteOrder) -> bytes:
    """Pack 16-bit code units into bytes using *byte_order*."""
    return struct.pack(f"{byte_order.value}{len(units)}H", *units)


def decode_utf16(data: bytes, encoding: Encoding) -> str:
    """Decode BOM-less UTF-16 *data* strictly.

    :param encoding: :attr:`Encoding.UTF16_BE` or :attr:`Encoding.UTF16_LE`.
    :raises UnevenLengthError: If *data* has an odd length.
    :raises MalformedUtf16Error: On an unpaired surrogate; the position is
        the index of the offending code unit.
    """
    _check_even_length(data)
    try:
        return data.decode(encoding.python_codec, errors="strict")
    except UnicodeDecodeError as exc:
        raise MalformedUtf16Error(exc.start // 2, exc.reason) from exc


def encode_utf16(text: str, encoding: Encoding) -> bytes:
    """Encode *text* as BOM-less UTF-16 in the byte order of *encoding*."""
    return text.encode(encoding.python_codec)
