"""Helpers for binary file objects (``io.BytesIO``, open files, sockets' makefile()).

Seekable streams are rewound to position 0 before they are read, so the
whole content is returned regardless of where the caller left the cursor.
Non-seekable streams are read from their current position.
"""

import base64
import gzip
import io
from typing import BinaryIO


def _rewind(stream: BinaryIO) -> None:
    if stream.seekable():
        stream.seek(0)


def to_byte_array(stream: BinaryIO) -> bytes:
    if stream is None:
        raise ValueError("stream must not be None")
    _rewind(stream)
    return stream.read()


def to_base64_string(stream: BinaryIO) -> str:
    return base64.b64encode(to_byte_array(stream)).decode("ascii")


def read_all_text(stream: BinaryIO, encoding: str = "utf-8") -> str:
    """Decode the whole stream; the stream itself is left open."""
    _rewind(stream)
    reader = io.TextIOWrapper(stream, encoding=encoding)
    try:
        return reader.read()
    finally:
        # detach so closing the wrapper does not close the caller's stream
        reader.detach()


def compress_gzip(stream: BinaryIO) -> bytes:
    return gzip.compress(to_byte_array(stream))


def decompress_gzip(stream: BinaryIO) -> bytes:
    _rewind(stream)
    with gzip.GzipFile(fileobj=stream, mode="rb") as archive:
        return archive.read()
