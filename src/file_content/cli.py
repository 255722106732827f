"""Command-line interface for file_content."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import file_content
from file_content.encoder import encode_content
from file_content.enums import Encoding
from file_content.file import File
from file_content.pipeline import TextData


def _parse_encoding(label: str) -> Encoding:
    try:
        return Encoding.from_label(label)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _show(file: File, minimal: bool) -> None:
    if minimal:
        print(file.content.label)
    else:
        print(file)


def _convert(file: File, encoding: Encoding) -> None:
    if not isinstance(file.content, TextData):
        print(f"file-content: {file.path}: binary content, not converted", file=sys.stderr)
        return
    converted = file.replace(content=TextData(file.content.text, encoding))
    converted.save()
    print(f"{file.path}: {file.content.label} -> {encoding}")


def main(argv: list[str] | None = None) -> None:
    """Run the ``file-content`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Show the encoding and text of files, or convert between encodings."
    )
    parser.add_argument("files", nargs="*", help="Files to read")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the encoding label"
    )
    parser.add_argument(
        "--to",
        type=_parse_encoding,
        default=None,
        metavar="ENCODING",
        help="Re-encode text files in place (UTF-8, UTF-8-BOM, UTF-16-BE, UTF-16-LE)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log detection steps"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"file-content {file_content.__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if not args.files:
        file = File.from_reader("<stdin>", sys.stdin.buffer)
        if args.to is not None:
            if isinstance(file.content, TextData):
                file = file.replace(content=TextData(file.content.text, args.to))
            sys.stdout.buffer.write(encode_content(file.content))
        else:
            _show(file, args.minimal)
        return

    failed = False
    for filepath in args.files:
        try:
            file = File.from_path(Path(filepath))
            if args.to is not None:
                _convert(file, args.to)
            else:
                _show(file, args.minimal)
        except OSError as e:
            print(f"file-content: {filepath}: {e}", file=sys.stderr)
            failed = True
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
