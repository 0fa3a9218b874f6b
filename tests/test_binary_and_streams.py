"""Unit tests for byte-string and stream helpers."""

import gzip
import io

import pytest

from oxtensions.extensions import binary, streams


class TestBinary:

    def test_hex_is_upper_case(self):
        assert binary.to_hex_string(b"\x0a\xff") == "0AFF"
        assert binary.to_hex_string(None) == ""

    def test_text_decoding(self):
        assert binary.to_utf8_string("café".encode("utf-8")) == "café"
        assert binary.to_ascii_string("café".encode("utf-8")) == "caf??"
        assert binary.to_base64_string(b"hello") == "aGVsbG8="

    def test_hashes(self):
        assert binary.compute_md5(b"abc").hex() == "900150983cd24fb0d6963f7d28e17f72"
        assert binary.compute_sha256(b"abc").hex() == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    @pytest.mark.parametrize("func", [binary.compute_md5, binary.compute_sha256])
    def test_hash_of_empty_input_is_empty(self, func):
        assert func(b"") == b""

    def test_gzip(self):
        payload = b"repeat " * 100
        compressed = binary.compress_gzip(payload)
        assert len(compressed) < len(payload)
        assert binary.decompress_gzip(compressed) == payload

    def test_to_stream_starts_at_beginning(self):
        assert binary.to_stream(b"data").read() == b"data"


class TestStreams:

    def test_to_byte_array_rewinds(self):
        stream = io.BytesIO(b"hello")
        stream.read()
        assert streams.to_byte_array(stream) == b"hello"

    def test_to_byte_array_rejects_none(self):
        with pytest.raises(ValueError):
            streams.to_byte_array(None)

    def test_to_base64_string(self):
        assert streams.to_base64_string(io.BytesIO(b"hello")) == "aGVsbG8="

    def test_read_all_text_leaves_stream_open(self):
        stream = io.BytesIO("héllo wörld".encode("utf-8"))
        assert streams.read_all_text(stream) == "héllo wörld"
        assert not stream.closed

    def test_read_all_text_with_encoding(self):
        stream = io.BytesIO("héllo".encode("latin-1"))
        assert streams.read_all_text(stream, encoding="latin-1") == "héllo"

    def test_gzip(self):
        compressed = streams.compress_gzip(io.BytesIO(b"payload"))
        assert gzip.decompress(compressed) == b"payload"
        assert streams.decompress_gzip(io.BytesIO(compressed)) == b"payload"
