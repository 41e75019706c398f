"""Cryptographic operations for credentials_obfuscation."""

from .envelope import decrypt, encrypt
from .kdf import derive_key, hmac_prf, pbkdf2, split_des3_key
from .padding import pad, unpad
from .registry import (
    build_cipher,
    cipher_info,
    default_cipher,
    default_hash,
    default_iterations,
    hash_algorithm,
    hash_info,
    metadata,
    resolve_cipher,
    resolve_hash,
    supported_ciphers,
    supported_hashes,
)
from .utils import from_base64, to_base64

__all__ = [
    "build_cipher",
    "cipher_info",
    "decrypt",
    "default_cipher",
    "default_hash",
    "default_iterations",
    "derive_key",
    "encrypt",
    "from_base64",
    "hash_algorithm",
    "hash_info",
    "hmac_prf",
    "metadata",
    "pad",
    "pbkdf2",
    "resolve_cipher",
    "resolve_hash",
    "split_des3_key",
    "supported_ciphers",
    "supported_hashes",
    "to_base64",
    "unpad",
]
