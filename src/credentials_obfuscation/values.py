"""Encryption of structured values for credentials_obfuscation.

Values are serialized to canonical JSON (sorted keys, compact separators,
UTF-8) before encryption. Only values that come back from JSON unchanged are
accepted: ``None``, ``bool``, ``int``, ``float``, ``str``, lists of those, and
dicts with ``str`` keys. Tuples, non-string keys and subclasses are rejected
rather than silently turned into something else.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .constants import LOGGER_NAME
from .crypto.envelope import decrypt, encrypt
from .errors import CorruptDataError
from .types import (
    CipherName,
    Encrypted,
    EncryptedValue,
    HashName,
    PendingSecret,
    Plaintext,
    SecretLike,
    as_secret,
)

logger = logging.getLogger(LOGGER_NAME)


_SCALAR_TYPES = (type(None), bool, int, float, str)


def _check_json_value(value: Any, path: str = "value") -> None:
    kind = type(value)
    if kind in _SCALAR_TYPES:
        return
    if kind is list:
        for index, item in enumerate(value):
            _check_json_value(item, f"{path}[{index}]")
        return
    if kind is dict:
        for key, item in value.items():
            if type(key) is not str:
                raise TypeError(
                    f"{path} has a {type(key).__name__} key {key!r}; only str keys round-trip"
                )
            _check_json_value(item, f"{path}[{key!r}]")
        return
    raise TypeError(f"{path} of type {kind.__name__} does not round-trip through JSON")


def serialize(value: Any) -> bytes:
    """Encode a value as canonical JSON bytes.

    Raises:
        TypeError: If the value would not come back unchanged from
            :func:`deserialize`.
    """
    _check_json_value(value)
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode(
        "utf-8"
    )


def deserialize(data: bytes) -> Any:
    """Decode bytes produced by :func:`serialize`.

    Raises:
        CorruptDataError: If the bytes are not valid UTF-8 JSON.
    """
    try:
        return json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CorruptDataError(f"Failed to deserialize decrypted value: {e}") from e


def encrypt_value(
    cipher: CipherName | str,
    hash_name: HashName | str,
    iterations: int,
    secret: SecretLike,
    value: Any,
) -> EncryptedValue:
    """Serialize and encrypt a structured value.

    With a pending secret the original value (not its serialized form) is
    returned as :class:`Plaintext`.

    Args:
        cipher: Cipher name.
        hash_name: Hash name for key derivation.
        iterations: PBKDF2 iteration count.
        secret: The secret, or ``PENDING_SECRET``.
        value: A JSON value: None, bool, int, float, str, list, or dict with str keys.

    Returns:
        ``Encrypted(envelope)`` or ``Plaintext(value)``.

    Raises:
        TypeError: If the value would not round-trip through JSON.
        UnknownAlgorithmError: If the cipher or hash is unknown or unsupported.
    """
    if isinstance(as_secret(secret), PendingSecret):
        logger.debug("Secret is pending, leaving structured value unencrypted")
        return Plaintext(value)
    return encrypt(cipher, hash_name, iterations, secret, serialize(value))


def decrypt_value(
    cipher: CipherName | str,
    hash_name: HashName | str,
    iterations: int,
    secret: SecretLike,
    value: EncryptedValue,
) -> Any:
    """Decrypt and deserialize a value produced by :func:`encrypt_value`.

    Args:
        cipher: Cipher name used for encryption.
        hash_name: Hash name used for encryption.
        iterations: Iteration count used for encryption.
        secret: The secret used for encryption.
        value: The Plaintext or Encrypted value.

    Returns:
        The original structured value.

    Raises:
        UnknownAlgorithmError: If the cipher or hash is unknown or unsupported.
        DecryptionError: If the envelope cannot be decrypted.
        CorruptDataError: If the decrypted bytes do not deserialize.
    """
    if isinstance(value, Plaintext):
        return value.payload
    if not isinstance(value, Encrypted):
        raise TypeError(f"Expected Plaintext or Encrypted, got {type(value).__name__}")
    return deserialize(decrypt(cipher, hash_name, iterations, secret, value))
