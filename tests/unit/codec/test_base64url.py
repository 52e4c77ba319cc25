"""Tests for the base64url codec."""

import os

import pytest

from jwtcore.codec.base64url import base64url_decode, base64url_encode
from jwtcore.core.errors import MalformedEncodingError


class TestBase64UrlEncode:
    """Tests for encoding."""

    def test_known_vector(self) -> None:
        assert base64url_encode(b"1234") == "MTIzNA"

    def test_empty(self) -> None:
        assert base64url_encode(b"") == ""

    def test_url_safe_alphabet(self) -> None:
        encoded = base64url_encode(b"\xfb\xff\xbf")
        assert encoded == "-_-_"
        assert "+" not in encoded
        assert "/" not in encoded

    def test_no_padding(self) -> None:
        for length in range(1, 10):
            assert "=" not in base64url_encode(b"a" * length)


class TestBase64UrlDecode:
    """Tests for decoding."""

    def test_known_vector(self) -> None:
        assert base64url_decode("MTIzNA") == b"1234"

    def test_accepts_bytes(self) -> None:
        assert base64url_decode(b"MTIzNA") == b"1234"

    def test_accepts_exact_padding(self) -> None:
        assert base64url_decode("MTIzNA==") == b"1234"

    def test_roundtrip_padding_boundaries(self) -> None:
        for length in range(0, 8):
            data = os.urandom(length)
            assert base64url_decode(base64url_encode(data)) == data

    def test_roundtrip_special_characters(self) -> None:
        data = b"\xfb\xff\xbf\x3e\x3f"
        assert base64url_decode(base64url_encode(data)) == data

    @pytest.mark.parametrize(
        "text",
        [
            "MTIzNA=",  # short padding
            "MTIzNA===",  # excess padding
            "MTIz NA",  # whitespace
            "MT+zNA",  # standard alphabet
            "MT/zNA",
            "MTIzN",  # impossible length
            "MTIzNB",  # non-zero trailing bits
            "MTIz!A",
            "MTIzNä",
        ],
    )
    def test_rejects_invalid(self, text: str) -> None:
        with pytest.raises(MalformedEncodingError):
            base64url_decode(text)

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            base64url_decode("!!!!")
