"""Tests for compact JSON serialization."""

import pytest

from jwtcore.codec.json_codec import deserialize, serialize


class TestSerialize:
    """Tests for serialization."""

    def test_compact_separators(self) -> None:
        assert serialize({"typ": "JWT", "alg": "HS256"}) == b'{"typ":"JWT","alg":"HS256"}'

    def test_utf8_output(self) -> None:
        assert serialize("é") == '"é"'.encode()

    def test_rejects_nan(self) -> None:
        with pytest.raises(ValueError):
            serialize(float("nan"))

    def test_rejects_bytes(self) -> None:
        with pytest.raises(TypeError):
            serialize(b"\x80")

    def test_rejects_lone_surrogate(self) -> None:
        with pytest.raises(UnicodeEncodeError):
            serialize("\udc80")


class TestDeserialize:
    """Tests for parsing."""

    def test_object(self) -> None:
        assert deserialize(b'{"a":[1,2]}') == {"a": [1, 2]}

    def test_rejects_nan_constant(self) -> None:
        with pytest.raises(ValueError):
            deserialize(b'{"a":NaN}')

    def test_rejects_invalid_utf8(self) -> None:
        with pytest.raises(ValueError):
            deserialize(b'"\xff"')

    def test_depth_limit(self) -> None:
        nested = b"[" * 5 + b"]" * 5
        assert deserialize(nested, max_depth=5) == [[[[[]]]]]
        with pytest.raises(ValueError):
            deserialize(nested, max_depth=4)

    def test_very_deep_nesting_is_value_error(self) -> None:
        nested = b"[" * 100_000 + b"]" * 100_000
        with pytest.raises(ValueError):
            deserialize(nested)
