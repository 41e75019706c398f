"""PKCS#7 style padding to a cipher block size."""

from __future__ import annotations

from ..errors import DecryptionError


def pad(block_size: int, data: bytes) -> bytes:
    """Pad data to a multiple of ``block_size``.

    Between 1 and ``block_size`` bytes are always appended, each holding the
    pad length. Block-aligned input gains a full block of padding.

    Args:
        block_size: Cipher block size in bytes (1-255).
        data: The bytes to pad.

    Returns:
        The padded bytes.
    """
    if not 1 <= block_size <= 255:
        raise ValueError(f"Block size must be between 1 and 255, got {block_size}")
    n = block_size - (len(data) % block_size)
    return bytes(data) + bytes([n]) * n


def unpad(data: bytes) -> bytes:
    """Strip padding added by :func:`pad`.

    The last byte gives the pad length. The pad bytes themselves are not
    checked.

    Args:
        data: Padded bytes.

    Returns:
        The data without its padding.

    Raises:
        DecryptionError: If the data is empty or shorter than its pad length.
    """
    if not data:
        raise DecryptionError("Cannot unpad empty data")
    n = data[-1]
    if n > len(data):
        raise DecryptionError(f"Invalid padding length {n} for {len(data)} bytes of data")
    return bytes(data[: len(data) - n])
