"""Tests for crypto/utils.py module."""

import binascii

import pytest

from credentials_obfuscation.crypto.utils import from_base64, to_base64


class TestBase64:
    """Tests for standard base64 encoding/decoding."""

    def test_to_base64(self) -> None:
        """Test standard base64 encoding."""
        assert to_base64(b"Hello, World!") == "SGVsbG8sIFdvcmxkIQ=="

    def test_from_base64(self) -> None:
        """Test standard base64 decoding."""
        assert from_base64("SGVsbG8sIFdvcmxkIQ==") == b"Hello, World!"

    def test_from_base64_accepts_bytes(self) -> None:
        """Test decoding a bytes envelope."""
        assert from_base64(b"SGVsbG8sIFdvcmxkIQ==") == b"Hello, World!"

    def test_standard_alphabet(self) -> None:
        """Test that encoding uses + and / rather than URL-safe characters."""
        assert to_base64(b"\xfb\xff\xfe") == "+//+"

    def test_from_base64_rejects_invalid_chars(self) -> None:
        """Test that characters outside the alphabet are rejected, not dropped."""
        with pytest.raises(binascii.Error):
            from_base64("SGVs!bG8=")

    def test_from_base64_rejects_bad_padding(self) -> None:
        """Test that incorrectly padded input is rejected."""
        with pytest.raises(binascii.Error):
            from_base64("SGVsbG8")
