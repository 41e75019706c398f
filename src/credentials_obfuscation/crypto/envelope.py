"""Envelope encryption and decryption for credentials_obfuscation.

An envelope is ``base64(salt || iv || ciphertext)``: a 16-byte salt, an IV of
the cipher's IV length, and the padded cleartext encrypted with a PBKDF2 key.
The cipher, hash and iteration count are not stored in the envelope; the
caller must supply the same ones to decrypt.
"""

from __future__ import annotations

import binascii
import logging
import os
from typing import Any

from cryptography.exceptions import UnsupportedAlgorithm

from ..constants import LOGGER_NAME, SALT_LENGTH
from ..errors import DecryptionError
from ..types import (
    CipherName,
    Encrypted,
    EncryptedValue,
    HashName,
    PendingSecret,
    Plaintext,
    SecretLike,
    as_secret,
)
from .kdf import derive_key, validate_iterations
from .padding import pad, unpad
from .registry import build_cipher, cipher_info, hash_info
from .utils import from_base64, to_base64

logger = logging.getLogger(LOGGER_NAME)


def _to_bytes(cleartext: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(cleartext, str):
        return cleartext.encode("utf-8")
    if isinstance(cleartext, (bytes, bytearray, memoryview)):
        return bytes(cleartext)
    raise TypeError(f"Cleartext must be bytes or str, got {type(cleartext).__name__}")


def encrypt(
    cipher: CipherName | str,
    hash_name: HashName | str,
    iterations: int,
    secret: SecretLike,
    cleartext: bytes | str,
) -> EncryptedValue:
    """Encrypt cleartext into an envelope.

    With a pending secret the cleartext is returned untouched as
    :class:`Plaintext`; it must be encrypted again once a secret exists.

    Args:
        cipher: Cipher name, see ``supported_ciphers()``.
        hash_name: Hash for key derivation, see ``supported_hashes()``.
        iterations: PBKDF2 iteration count (>= 1).
        secret: The secret, or ``PENDING_SECRET``.
        cleartext: Bytes to encrypt. ``str`` is UTF-8 encoded.

    Returns:
        ``Encrypted(envelope)``, or ``Plaintext(cleartext)`` for a pending secret.

    Raises:
        UnknownAlgorithmError: If the cipher or hash is unknown or unsupported.
        ValueError: If iterations is < 1.
    """
    resolved = as_secret(secret)
    if isinstance(resolved, PendingSecret):
        logger.debug("Secret is pending, leaving value unencrypted")
        return Plaintext(cleartext)

    info = cipher_info(cipher)
    hash_info(hash_name)
    validate_iterations(iterations)
    data = _to_bytes(cleartext)

    salt = os.urandom(SALT_LENGTH)
    iv = os.urandom(info.iv_length)
    key = derive_key(cipher, hash_name, iterations, resolved.value, salt)

    encryptor = build_cipher(cipher, key, iv).encryptor()
    ciphertext = encryptor.update(pad(info.block_size, data)) + encryptor.finalize()

    return Encrypted(to_base64(salt + iv + ciphertext))


def decrypt(
    cipher: CipherName | str,
    hash_name: HashName | str,
    iterations: int,
    secret: SecretLike,
    value: EncryptedValue,
) -> Any:
    """Decrypt a value produced by :func:`encrypt`.

    ``Plaintext`` payloads are returned as-is without touching the cipher.

    Args:
        cipher: Cipher name used for encryption.
        hash_name: Hash name used for encryption.
        iterations: Iteration count used for encryption.
        secret: The secret used for encryption.
        value: The Plaintext or Encrypted value.

    Returns:
        The cleartext bytes, or the Plaintext payload.

    Raises:
        UnknownAlgorithmError: If the cipher or hash is unknown or unsupported.
        DecryptionError: If the envelope is malformed or cannot be decrypted.
    """
    if isinstance(value, Plaintext):
        return value.payload
    if not isinstance(value, Encrypted):
        raise TypeError(f"Expected Plaintext or Encrypted, got {type(value).__name__}")

    resolved = as_secret(secret)
    if isinstance(resolved, PendingSecret):
        raise DecryptionError("Cannot decrypt an encrypted value with a pending secret")

    info = cipher_info(cipher)
    hash_info(hash_name)
    validate_iterations(iterations)

    try:
        raw = from_base64(value.envelope)
    except (binascii.Error, TypeError, ValueError) as e:
        raise DecryptionError(f"Envelope is not valid base64: {e}") from e

    header_length = SALT_LENGTH + info.iv_length
    if len(raw) < header_length:
        raise DecryptionError(
            f"Envelope too short: {len(raw)} bytes, expected at least {header_length}"
        )

    salt = raw[:SALT_LENGTH]
    iv = raw[SALT_LENGTH:header_length]
    ciphertext = raw[header_length:]
    if not ciphertext or len(ciphertext) % info.block_size:
        raise DecryptionError(
            f"Ciphertext length {len(ciphertext)} is not a positive multiple "
            f"of the block size {info.block_size}"
        )

    try:
        key = derive_key(cipher, hash_name, iterations, resolved.value, salt)
        decryptor = build_cipher(cipher, key, iv).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
    except (UnsupportedAlgorithm, ValueError) as e:
        logger.debug("Cipher rejected envelope for %s: %s", CipherName(cipher).value, e)
        raise DecryptionError(f"Decryption failed: {e}") from e

    return unpad(padded)
