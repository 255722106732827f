"""Enumerations for file_content."""

from __future__ import annotations

import enum


class ByteOrder(enum.Enum):
    """Byte order of 16-bit code units."""

    BIG = ">"
    LITTLE = "<"


class Encoding(enum.Enum):
    """The closed set of text encodings that can be detected and re-encoded.

    ``str(encoding)`` gives the display label, e.g. ``"UTF-16-LE"``.
    """

    UTF8 = "UTF-8"
    UTF8_BOM = "UTF-8-BOM"
    UTF16_BE = "UTF-16-BE"
    UTF16_LE = "UTF-16-LE"

    def __str__(self) -> str:
        return self.value

    @property
    def python_codec(self) -> str:
        """Name of the equivalent Python codec."""
        return _PYTHON_CODECS[self]

    @property
    def byte_order(self) -> ByteOrder | None:
        """Code unit byte order for UTF-16 encodings, ``None`` otherwise."""
        if self is Encoding.UTF16_BE:
            return ByteOrder.BIG
        if self is Encoding.UTF16_LE:
            return ByteOrder.LITTLE
        return None

    @property
    def bom(self) -> bytes:
        """Byte order mark written before the text (empty for plain UTF-8)."""
        from file_content.pipeline.bom import bom_for

        return bom_for(self)

    @classmethod
    def from_label(cls, label: str) -> Encoding:
        """Look up an encoding by display label or common alias.

        Matching ignores case and treats ``-`` and ``_`` alike, so
        ``"utf_16_le"``, ``"UTF-16-LE"`` and ``"utf-16le"`` all resolve to
        :attr:`UTF16_LE`.

        :raises ValueError: If *label* names no supported encoding.
        """
        key = label.strip().lower().replace("_", "-")
        try:
            return _ALIASES[key]
        except KeyError:
            msg = f"unsupported encoding: {label!r}"
            raise ValueError(msg) from None


_PYTHON_CODECS: dict[Encoding, str] = {
    Encoding.UTF8: "utf-8",
    Encoding.UTF8_BOM: "utf-8-sig",
    Encoding.UTF16_BE: "utf-16-be",
    Encoding.UTF16_LE: "utf-16-le",
}

_ALIASES: dict[str, Encoding] = {
    "utf-8": Encoding.UTF8,
    "utf8": Encoding.UTF8,
    "utf-8-bom": Encoding.UTF8_BOM,
    "utf8-bom": Encoding.UTF8_BOM,
    "utf8bom": Encoding.UTF8_BOM,
    "utf-8-sig": Encoding.UTF8_BOM,
    "utf8-sig": Encoding.UTF8_BOM,
    "utf-16-be": Encoding.UTF16_BE,
    "utf-16be": Encoding.UTF16_BE,
    "utf16-be": Encoding.UTF16_BE,
    "utf16be": Encoding.UTF16_BE,
    "utf-16-le": Encoding.UTF16_LE,
    "utf-16le": Encoding.UTF16_LE,
    "utf16-le": Encoding.UTF16_LE,
    "utf16le": Encoding.UTF16_LE,
}
