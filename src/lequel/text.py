"""Turning strings, bytes and files into lines of text."""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import BinaryIO

from lequel._utils import DEFAULT_MAX_BYTES, _validate_positive_int


def text_from_string(data: str | bytes | bytearray) -> list[str]:
    """Split *data* into lines without their terminators.

    Bytes are decoded as UTF-8 on a best-effort basis: a leading BOM is
    dropped and invalid sequences become U+FFFD.
    """
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8-sig", errors="replace")
    return data.splitlines()


def text_from_stream(
    stream: BinaryIO, max_bytes: int = DEFAULT_MAX_BYTES
) -> list[str]:
    """Read at most *max_bytes* bytes of *stream* and split them into lines.

    When the stream holds more than *max_bytes* bytes, a multi-byte
    character cut by the limit is dropped instead of decoded as U+FFFD.
    """
    _validate_positive_int(max_bytes, "max_bytes")
    data = stream.read(max_bytes)
    if len(data) < max_bytes or not stream.read(1):
        return text_from_string(data)
    decoder = codecs.getincrementaldecoder("utf-8-sig")(errors="replace")
    return decoder.decode(data, final=False).splitlines()


def text_from_file(path: str | Path, max_bytes: int = DEFAULT_MAX_BYTES) -> list[str]:
    """Read at most *max_bytes* bytes of *path* and split them into lines.

    :raises OSError: If the file cannot be read.
    """
    _validate_positive_int(max_bytes, "max_bytes")
    with Path(path).open("rb") as f:
        return text_from_stream(f, max_bytes)
