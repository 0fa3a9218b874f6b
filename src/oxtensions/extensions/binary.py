"""Helpers for byte strings."""

import base64
import gzip
import hashlib
import io
from typing import Optional


def is_null_or_empty(data: Optional[bytes]) -> bool:
    return not data


def to_hex_string(data: Optional[bytes]) -> str:
    """Upper-case hexadecimal without separators: b"\\x0a\\xff" -> "0AFF"."""
    if not data:
        return ""
    return data.hex().upper()


def to_base64_string(data: Optional[bytes]) -> str:
    if not data:
        return ""
    return base64.b64encode(data).decode("ascii")


def to_utf8_string(data: Optional[bytes]) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def to_ascii_string(data: Optional[bytes]) -> str:
    # bytes outside 0..127 become "?"
    if not data:
        return ""
    return "".join(chr(b) if b < 128 else "?" for b in data)


def compute_md5(data: Optional[bytes]) -> bytes:
    if not data:
        return b""
    return hashlib.md5(data).digest()


def compute_sha256(data: Optional[bytes]) -> bytes:
    if not data:
        return b""
    return hashlib.sha256(data).digest()


def to_stream(data: Optional[bytes]) -> io.BytesIO:
    """Wrap `data` in a readable stream positioned at the start."""
    return io.BytesIO(data or b"")


def compress_gzip(data: Optional[bytes]) -> bytes:
    if not data:
        return b""
    return gzip.compress(data)


def decompress_gzip(data: Optional[bytes]) -> bytes:
    if not data:
        return b""
    return gzip.decompress(data)
