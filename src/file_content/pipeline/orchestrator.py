"""Pipeline orchestrator: runs the detection stages in priority order."""

from __future__ import annotations

import logging

from file_content._utils import BINARY_DETECTION_THRESHOLD, _validate_max_bytes
from file_content.enums import Encoding
from file_content.pipeline import BinaryContent, Content, TextData
from file_content.pipeline.binary import is_binary
from file_content.pipeline.bom import bom_for, detect_bom
from file_content.pipeline.utf8 import decode_utf8
from file_content.pipeline.utf16 import decode_utf16

logger = logging.getLogger(__name__)


def run_pipeline(data: bytes, max_bytes: int = BINARY_DETECTION_THRESHOLD) -> Content:
    """Classify *data* as text in one of the supported encodings, or binary.

    A BOM commits the data to that encoding: if the payload fails
    validation the error propagates and the data is never reconsidered as
    plain UTF-8 or binary.  Only BOM-less data goes through the null-byte
    check.

    :param data: The complete buffer to classify.
    :param max_bytes: Size of the leading window scanned for null bytes.
    :returns: :class:`TextData` or :class:`BinaryContent`.
    :raises UnevenLengthError: UTF-16 BOM followed by an odd number of bytes.
    :raises MalformedUtf16Error: UTF-16 BOM followed by unpaired surrogates.
    :raises MalformedUtf8Error: UTF-8 BOM, or BOM-less text, that is not
        well-formed UTF-8.
    """
    _validate_max_bytes(max_bytes)

    encoding = detect_bom(data)
    if encoding is not None:
        logger.debug("%s BOM found", encoding)
        payload = data[len(bom_for(encoding)) :]
        if encoding is Encoding.UTF8_BOM:
            text = decode_utf8(payload, offset=len(data) - len(payload))
        else:
            text = decode_utf16(payload, encoding)
        return TextData(text, encoding)

    if is_binary(data, max_bytes):
        logger.debug("null byte within first %d bytes, treating as binary", max_bytes)
        return BinaryContent(data)

    text = decode_utf8(data)
    logger.debug("no BOM, decoded %d bytes as UTF-8", len(data))
    return TextData(text, Encoding.UTF8)
