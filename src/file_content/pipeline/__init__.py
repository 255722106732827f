"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses
import re

from file_content.enums import Encoding
from file_content.errors import InvalidTextError

_SURROGATE = re.compile("[\ud800-\udfff]")


def find_surrogate(text: str) -> int | None:
    """Return the index of the first surrogate code point in *text*, if any."""
    match = _SURROGATE.search(text)
    return match.start() if match else None


@dataclasses.dataclass(frozen=True, slots=True)
class TextData:
    """Validated text paired with the encoding it was (or will be) stored in.

    A Python ``str`` can carry lone surrogates, which no supported encoding
    can represent; construction rejects them so any ``TextData`` can always
    be re-encoded.

    :raises InvalidTextError: If *text* contains a surrogate code point.
    """

    text: str
    encoding: Encoding

    def __post_init__(self) -> None:
        position = find_surrogate(self.text)
        if position is not None:
            raise InvalidTextError(position)

    @property
    def label(self) -> str:
        return str(self.encoding)


@dataclasses.dataclass(frozen=True, slots=True)
class BinaryContent:
    """Opaque bytes that were not recognised as text."""

    data: bytes

    @property
    def label(self) -> str:
        return "Binary"


#: Result of detection: exactly one of text or binary.
Content = TextData | BinaryContent
