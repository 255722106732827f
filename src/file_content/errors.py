"""Exceptions raised while decoding or encoding text content."""

from __future__ import annotations


class TextDataError(ValueError):
    """Base class for every failure to turn bytes into text (or back)."""


class UnevenLengthError(TextDataError):
    """A UTF-16 payload has an odd number of bytes."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"uneven length byte sequence ({length} bytes)")


class MalformedUtf8Error(TextDataError):
    """The data is not well-formed UTF-8.

    :attr:`position` is the offset of the first offending byte in the
    original buffer, including any BOM.
    """

    def __init__(self, position: int, reason: str) -> None:
        self.position = position
        self.reason = reason
        super().__init__(f"invalid UTF-8 at byte {position}: {reason}")


class MalformedUtf16Error(TextDataError):
    """A UTF-16 code unit sequence contains an unpaired surrogate.

    :attr:`position` is the index of the offending code unit, counted
    from the first unit after the BOM.
    """

    def __init__(self, position: int, reason: str) -> None:
        self.position = position
        self.reason = reason
        super().__init__(f"invalid UTF-16 at code unit {position}: {reason}")


class InvalidTextError(TextDataError):
    """A string holds a lone surrogate and cannot be encoded."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"lone surrogate in text at index {position}")


class BinaryContentError(TextDataError):
    """Text was requested but the content is binary."""

    def __init__(self) -> None:
        super().__init__("File content is binary")
