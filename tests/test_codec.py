"""Tests for the transport codec."""

import base64
import json
import re
import zlib

import pytest

from forestshare.models.failure import DecodeError, FailureKind, KnownError
from forestshare.sharing.codec import decode, encode

BASE64_PATTERN = re.compile(r"^[A-Za-z0-9+/]*={0,2}$")


class TestRoundTrip:
    def test_round_trip_dict(self) -> None:
        value = {"appVersion": "0.3.0", "gameBoxes": ["BASE"], "player": {"name": "Alex"}}
        assert decode(encode(value)) == value

    def test_round_trip_nested_lists(self) -> None:
        value = [1, [2, [3, None]], {"a": True, "b": 1.5}]
        assert decode(encode(value)) == value

    def test_round_trip_non_ascii_text(self) -> None:
        value = {"name": "Zoë 🌲"}
        assert decode(encode(value)) == value


class TestEncode:
    def test_output_is_printable_base64(self) -> None:
        encoded = encode({"name": "Zoë", "cards": list(range(20))})

        assert encoded.isascii()
        assert BASE64_PATTERN.match(encoded)

    def test_output_is_deflated_json(self) -> None:
        encoded = encode({"a": 1})

        text = zlib.decompress(base64.b64decode(encoded)).decode("utf-8")
        assert text == '{"a":1}'

    def test_compresses_repetitive_payloads(self) -> None:
        value = {"woodyPlants": [{"name": "OAK", "gameBox": "BASE"}] * 30}

        assert len(encode(value)) < len(json.dumps(value))


class TestDecodeFailures:
    def test_rejects_non_base64_text(self) -> None:
        with pytest.raises(DecodeError):
            decode("this is not base64!")

    def test_rejects_non_ascii_text(self) -> None:
        with pytest.raises(DecodeError):
            decode("ëëëë")

    def test_rejects_empty_string(self) -> None:
        with pytest.raises(DecodeError):
            decode("")

    def test_rejects_base64_of_non_deflate_data(self) -> None:
        with pytest.raises(DecodeError):
            decode(base64.b64encode(b"plain bytes").decode("ascii"))

    def test_rejects_truncated_stream(self) -> None:
        truncated = zlib.compress(b'{"name": "Alex", "cards": [1, 2, 3]}')[:-6]

        with pytest.raises(DecodeError):
            decode(base64.b64encode(truncated).decode("ascii"))

    def test_rejects_deflated_non_json(self) -> None:
        with pytest.raises(DecodeError):
            decode(base64.b64encode(zlib.compress(b"{not json")).decode("ascii"))

    def test_rejects_non_string_input(self) -> None:
        with pytest.raises(DecodeError):
            decode(None)  # type: ignore[arg-type]

    def test_all_failures_share_one_kind(self) -> None:
        """Callers only need to know decoding failed, not why."""
        inputs = [
            "@@@",
            base64.b64encode(b"plain bytes").decode("ascii"),
            base64.b64encode(zlib.compress(b"{not json")).decode("ascii"),
        ]
        for data in inputs:
            with pytest.raises(DecodeError) as exc_info:
                decode(data)
            assert isinstance(exc_info.value, KnownError)
            assert exc_info.value.kind == FailureKind.INVALID_DATA
            assert exc_info.value.detail


class TestDecodeTolerance:
    def test_ignores_surrounding_whitespace(self) -> None:
        encoded = encode({"a": 1})
        assert decode(f"  {encoded}\n") == {"a": 1}
