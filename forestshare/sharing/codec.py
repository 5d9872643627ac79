"""
Transport codec for optical-code payloads.

    value -> compact JSON -> zlib deflate -> base64 (standard alphabet)

Deflate keeps the payload within what a single QR code can hold; base64
keeps it printable so it survives rendering and camera capture.
"""

import base64
import binascii
import json
import zlib
from typing import Any

from forestshare.models.failure import DecodeError

# Highest compression; payloads are tiny so speed is irrelevant
COMPRESSION_LEVEL = 9


def encode(value: Any) -> str:
    """
    Encode a JSON-serializable value into a printable transport string.

    Args:
        value: Any value accepted by json.dumps

    Returns:
        ASCII string (base64 of the deflated JSON text)
    """
    text = json.dumps(value, separators=(",", ":"), ensure_ascii=True)
    compressed = zlib.compress(text.encode("utf-8"), COMPRESSION_LEVEL)
    return base64.b64encode(compressed).decode("ascii")


def decode(data: str) -> Any:
    """
    Decode a transport string produced by `encode`.

    Surrounding whitespace (common in scanner output) is ignored.

    Raises:
        DecodeError: If the input is not base64, the deflate stream is
            corrupt or truncated, or the inflated text is not valid JSON
    """
    if not isinstance(data, str):
        raise DecodeError(detail=f"Expected str, got {type(data).__name__}")

    try:
        compressed = base64.b64decode(data.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(detail=f"Not base64: {e}") from e

    try:
        text = zlib.decompress(compressed).decode("utf-8")
    except (zlib.error, UnicodeDecodeError) as e:
        raise DecodeError(detail=f"Decompression failed: {e}") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(detail=f"Not JSON: {e.msg}") from e
