"""Pairing of a filesystem path with its detected content."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import BinaryIO

from file_content._utils import BINARY_DETECTION_THRESHOLD
from file_content.encoder import encode_content
from file_content.errors import BinaryContentError, TextDataError
from file_content.pipeline import BinaryContent, Content, TextData
from file_content.pipeline.orchestrator import run_pipeline

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class File:
    """A path together with its text or binary content.

    Reading never fails on content: data that cannot be decoded in any
    supported encoding is kept as :class:`BinaryContent` so saving writes
    it back unchanged.  Only I/O errors propagate.
    """

    path: Path
    content: Content

    @classmethod
    def from_reader(
        cls,
        path: str | Path,
        reader: BinaryIO,
        max_bytes: int = BINARY_DETECTION_THRESHOLD,
    ) -> File:
        """Read *reader* to the end and detect its content.

        :param path: Path the content belongs to; nothing is read from it.
        :param reader: A binary file-like object.
        :param max_bytes: Window scanned for null bytes on BOM-less data.
        """
        data = reader.read()
        try:
            content = run_pipeline(data, max_bytes=max_bytes)
        except TextDataError as exc:
            logger.debug("%s: keeping content as binary: %s", path, exc)
            content = BinaryContent(data)
        return cls(Path(path), content)

    @classmethod
    def from_path(
        cls, path: str | Path, max_bytes: int = BINARY_DETECTION_THRESHOLD
    ) -> File:
        """Open *path* and detect its content."""
        path = Path(path)
        with path.open("rb") as f:
            return cls.from_reader(path, f, max_bytes=max_bytes)

    @property
    def is_binary(self) -> bool:
        return isinstance(self.content, BinaryContent)

    def replace(self, **changes: object) -> File:
        """Return a copy with *path* and/or *content* replaced."""
        return dataclasses.replace(self, **changes)

    def to_bytes(self) -> bytes:
        return encode_content(self.content)

    def write(self, writer: BinaryIO) -> None:
        """Write the encoded content to a binary file-like object."""
        writer.write(self.to_bytes())

    def save(self) -> None:
        """Write the content to :attr:`path`, creating or truncating it."""
        with self.path.open("wb") as f:
            self.write(f)

    def __str__(self) -> str:
        if isinstance(self.content, TextData):
            body = self.content.text
        else:
            body = repr(self.content.data)
        return f"File: {self.path}\nEncoding: {self.content.label}\nContent:\n{body}"


def read_from_reader(
    reader: BinaryIO, max_bytes: int = BINARY_DETECTION_THRESHOLD
) -> str:
    """Read *reader* to the end and return its decoded text.

    :raises BinaryContentError: If the content is binary.
    :raises TextDataError: If the content is malformed text.
    """
    content = run_pipeline(reader.read(), max_bytes=max_bytes)
    if isinstance(content, BinaryContent):
        raise BinaryContentError
    return content.text


def read_to_string(
    path: str | Path, max_bytes: int = BINARY_DETECTION_THRESHOLD
) -> str:
    """Return the decoded text of the file at *path*.

    :raises BinaryContentError: If the file is binary.
    :raises TextDataError: If the file holds malformed text.
    :raises OSError: If the file cannot be read.
    """
    with Path(path).open("rb") as f:
        return read_from_reader(f, max_bytes=max_bytes)
