"""Stage 1: BOM (Byte Order Mark) detection."""

from __future__ import annotations

from file_content.enums import Encoding

UTF8_BOM: bytes = b"\xef\xbb\xbf"
UTF16_BE_BOM: bytes = b"\xfe\xff"
UTF16_LE_BOM: bytes = b"\xff\xfe"

# Checked in this order; the first prefix match wins.
_BOMS: tuple[tuple[bytes, Encoding], ...] = (
    (UTF8_BOM, Encoding.UTF8_BOM),
    (UTF16_BE_BOM, Encoding.UTF16_BE),
    (UTF16_LE_BOM, Encoding.UTF16_LE),
)

_BOM_BY_ENCODING: dict[Encoding, bytes] = {enc: bom for bom, enc in _BOMS}


def detect_bom(data: bytes) -> Encoding | None:
    """Check for a BOM at the start of data. Returns the encoding or None."""
    for bom_bytes, encoding in _BOMS:
        if data.startswith(bom_bytes):
            return encoding
    return None


def bom_for(encoding: Encoding) -> bytes:
    """Return the BOM written in front of *encoding* (empty for plain UTF-8)."""
    return _BOM_BY_ENCODING.get(encoding, b"")
