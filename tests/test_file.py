from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from file_content.encoder import encode
from file_content.enums import Encoding
from file_content.errors import (
    BinaryContentError,
    MalformedUtf8Error,
    UnevenLengthError,
)
from file_content.file import File, read_from_reader, read_to_string
from file_content.pipeline import BinaryContent, TextData

FILE_CONTENT = "Hello! 你好! 🌍"


@pytest.mark.parametrize("encoding", list(Encoding))
def test_load_from_encoded_content(encoding: Encoding):
    reader = io.BytesIO(encode("Hello!", encoding))
    subject = File.from_reader("foo.txt", reader)
    assert subject == File(Path("foo.txt"), TextData("Hello!", encoding))
    assert not subject.is_binary


def test_load_from_binary():
    data = bytes([1, 2, 3, 0, 4, 5])
    subject = File.from_reader("foo.txt", io.BytesIO(data))
    assert subject == File(Path("foo.txt"), BinaryContent(data))
    assert subject.is_binary


@pytest.mark.parametrize("data", [b"\xc1\x80", b"\xff\xfe\x48", b"\xfe\xff\xdc\xa5"])
def test_undecodable_content_is_kept_as_binary(
    data: bytes, caplog: pytest.LogCaptureFixture
):
    with caplog.at_level(logging.DEBUG, logger="file_content.file"):
        subject = File.from_reader("foo.txt", io.BytesIO(data))
    assert subject.content == BinaryContent(data)
    assert subject.to_bytes() == data
    assert "keeping content as binary" in caplog.text


def test_from_reader_max_bytes():
    subject = File.from_reader("foo.txt", io.BytesIO(b"ab\x00"), max_bytes=2)
    assert subject.content == TextData("ab\x00", Encoding.UTF8)


@pytest.mark.parametrize("encoding", list(Encoding))
def test_save_encoded_content(tmp_path: Path, encoding: Encoding):
    path = tmp_path / "unicode"
    expected_bytes = encode(FILE_CONTENT, encoding)
    path.write_bytes(expected_bytes)

    subject = File.from_path(path)
    assert subject.content == TextData(FILE_CONTENT, encoding)

    path.write_bytes(b"overwritten")
    subject.save()
    assert path.read_bytes() == expected_bytes


def test_save_binary_content(tmp_path: Path):
    data = bytes([1, 2, 3, 0, 4, 5])
    path = tmp_path / "binary"
    File(path, BinaryContent(data)).save()
    assert path.read_bytes() == data


def test_save_creates_file(tmp_path: Path):
    path = tmp_path / "new.txt"
    File(path, TextData("He", Encoding.UTF16_BE)).save()
    assert path.read_bytes() == b"\xfe\xff\x00\x48\x00\x65"


def test_write_to_stream():
    buf = io.BytesIO()
    File(Path("x"), TextData("Hi", Encoding.UTF8_BOM)).write(buf)
    assert buf.getvalue() == b"\xef\xbb\xbfHi"


def test_replace_changes_encoding_on_save(tmp_path: Path):
    path = tmp_path / "a.txt"
    path.write_bytes(b"\xff\xfeH\x00i\x00")
    original = File.from_path(path)
    converted = original.replace(content=TextData(original.content.text, Encoding.UTF8))
    converted.save()
    assert path.read_bytes() == b"Hi"
    assert original.content.encoding is Encoding.UTF16_LE


def test_replace_path(tmp_path: Path):
    original = File(tmp_path / "a.txt", TextData("x", Encoding.UTF8))
    moved = original.replace(path=tmp_path / "b.txt")
    assert moved.path == tmp_path / "b.txt"
    assert moved.content is original.content


def test_missing_file_raises_os_error(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        File.from_path(tmp_path / "missing")


def test_str_text():
    subject = File(Path("foo.txt"), TextData("Hello!", Encoding.UTF16_LE))
    assert str(subject) == "File: foo.txt\nEncoding: UTF-16-LE\nContent:\nHello!"


def test_str_binary():
    subject = File(Path("foo.bin"), BinaryContent(b"\x01\x00"))
    assert str(subject) == "File: foo.bin\nEncoding: Binary\nContent:\nb'\\x01\\x00'"


def test_read_from_reader():
    assert read_from_reader(io.BytesIO(b"\xfe\xff\x00H\x00i")) == "Hi"


def test_read_from_reader_binary():
    with pytest.raises(BinaryContentError):
        read_from_reader(io.BytesIO(b"\x00"))


def test_read_from_reader_errors_propagate():
    with pytest.raises(UnevenLengthError):
        read_from_reader(io.BytesIO(b"\xfe\xff\x00"))


def test_read_to_string(tmp_path: Path):
    path = tmp_path / "a.txt"
    path.write_bytes(encode(FILE_CONTENT, Encoding.UTF8_BOM))
    assert read_to_string(path) == FILE_CONTENT
    assert read_to_string(str(path)) == FILE_CONTENT


def test_read_to_string_malformed(tmp_path: Path):
    path = tmp_path / "a.txt"
    path.write_bytes(b"ok \xc1\x80")
    with pytest.raises(MalformedUtf8Error) as excinfo:
        read_to_string(path)
    assert excinfo.value.position == 3


def test_read_to_string_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_to_string(tmp_path / "missing")
