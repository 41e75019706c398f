"""Base64 framing helpers for credentials_obfuscation envelopes."""

from __future__ import annotations

import base64


def to_base64(data: bytes) -> str:
    """Encode bytes to standard base64.

    Args:
        data: The bytes to encode.

    Returns:
        Standard base64 string with padding.
    """
    return base64.b64encode(data).decode("ascii")


def from_base64(s: str | bytes) -> bytes:
    """Decode a standard base64 string to bytes.

    Unlike ``base64.b64decode`` defaults, characters outside the base64
    alphabet are rejected instead of silently dropped.

    Args:
        s: The base64 string to decode.

    Returns:
        The decoded bytes.

    Raises:
        binascii.Error: If the input is not valid base64.
    """
    return base64.b64decode(s, validate=True)
