"""Cipher and hash registry backed by the ``cryptography`` OpenSSL provider."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import lru_cache
from typing import Any

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.decrepit.ciphers import modes as decrepit_modes
from cryptography.hazmat.decrepit.ciphers.algorithms import RC2, Blowfish, TripleDES
from cryptography.hazmat.primitives import hashes, hmac
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..constants import DEFAULT_CIPHER, DEFAULT_HASH, DEFAULT_ITERATIONS, LOGGER_NAME
from ..errors import UnknownAlgorithmError
from ..types import CipherInfo, CipherName, HashInfo, HashName
from .constants import CIPHER_INFO, DES3_CIPHERS, HASH_INFO, SINGLE_DES_CIPHERS

logger = logging.getLogger(LOGGER_NAME)

_Factory = Callable[[bytes], Any]

# Primitive and mode for each cipher name. DES is TripleDES keyed with
# K1 = K2 = K3, see _new_cipher. CFB, CFB8 and OFB live in decrepit.
_CIPHER_PRIMITIVES: dict[CipherName, tuple[_Factory, _Factory]] = {
    CipherName.DES_CBC: (TripleDES, modes.CBC),
    CipherName.DES_CFB: (TripleDES, decrepit_modes.CFB8),
    CipherName.DES3_CBC: (TripleDES, modes.CBC),
    CipherName.DES3_CFB: (TripleDES, decrepit_modes.CFB8),
    CipherName.DES3_CBF: (TripleDES, decrepit_modes.CFB8),
    CipherName.DES_EDE3: (TripleDES, modes.CBC),
    CipherName.DES_EDE3_CBC: (TripleDES, modes.CBC),
    CipherName.DES_EDE3_CFB: (TripleDES, decrepit_modes.CFB8),
    CipherName.DES_EDE3_CBF: (TripleDES, decrepit_modes.CFB8),
    CipherName.BLOWFISH_CBC: (Blowfish, modes.CBC),
    CipherName.BLOWFISH_CFB64: (Blowfish, decrepit_modes.CFB),
    CipherName.BLOWFISH_OFB64: (Blowfish, decrepit_modes.OFB),
    CipherName.RC2_CBC: (RC2, modes.CBC),
    CipherName.AES_CBC: (algorithms.AES, modes.CBC),
    CipherName.AES_CBC128: (algorithms.AES, modes.CBC),
    CipherName.AES_CBC256: (algorithms.AES, modes.CBC),
    CipherName.AES_CFB8: (algorithms.AES, decrepit_modes.CFB8),
    CipherName.AES_CFB128: (algorithms.AES, decrepit_modes.CFB),
    CipherName.AES_128_CBC: (algorithms.AES, modes.CBC),
    CipherName.AES_192_CBC: (algorithms.AES, modes.CBC),
    CipherName.AES_256_CBC: (algorithms.AES, modes.CBC),
    CipherName.AES_128_CFB8: (algorithms.AES, decrepit_modes.CFB8),
    CipherName.AES_192_CFB8: (algorithms.AES, decrepit_modes.CFB8),
    CipherName.AES_256_CFB8: (algorithms.AES, decrepit_modes.CFB8),
    CipherName.AES_128_CFB128: (algorithms.AES, decrepit_modes.CFB),
    CipherName.AES_192_CFB128: (algorithms.AES, decrepit_modes.CFB),
    CipherName.AES_256_CFB128: (algorithms.AES, decrepit_modes.CFB),
}

# MD4 and RIPEMD-160 have no ``cryptography`` hash class and are never supported.
_HASH_ALGORITHMS: dict[HashName, Callable[[], hashes.HashAlgorithm]] = {
    HashName.MD5: hashes.MD5,
    HashName.SHA: hashes.SHA1,
    HashName.SHA224: hashes.SHA224,
    HashName.SHA256: hashes.SHA256,
    HashName.SHA384: hashes.SHA384,
    HashName.SHA512: hashes.SHA512,
    HashName.SHA3_224: hashes.SHA3_224,
    HashName.SHA3_256: hashes.SHA3_256,
    HashName.SHA3_384: hashes.SHA3_384,
    HashName.SHA3_512: hashes.SHA3_512,
    HashName.BLAKE2B: lambda: hashes.BLAKE2b(64),
    HashName.BLAKE2S: lambda: hashes.BLAKE2s(32),
}

_CIPHER_VALUES = frozenset(c.value for c in CipherName)
_HASH_VALUES = frozenset(h.value for h in HashName)


def resolve_cipher(name: CipherName | str) -> CipherName:
    """Turn a cipher name into a :class:`CipherName`.

    Raises:
        UnknownAlgorithmError: If the name is not a known cipher.
    """
    try:
        return CipherName(name)
    except ValueError as e:
        raise UnknownAlgorithmError(name, "cipher") from e


def resolve_hash(name: HashName | str) -> HashName:
    """Turn a hash name into a :class:`HashName`.

    Raises:
        UnknownAlgorithmError: If the name is not a known hash.
    """
    try:
        return HashName(name)
    except ValueError as e:
        raise UnknownAlgorithmError(name, "hash") from e


def _new_cipher(cipher: CipherName, key: bytes, iv: bytes) -> Cipher:
    algorithm_factory, mode_factory = _CIPHER_PRIMITIVES[cipher]
    if cipher in SINGLE_DES_CIPHERS:
        key = key * 3
    return Cipher(algorithm_factory(key), mode_factory(iv))


def _provider_supports_cipher(cipher: CipherName) -> bool:
    info = CIPHER_INFO[cipher]
    try:
        _new_cipher(cipher, bytes(info.key_length), bytes(info.iv_length)).encryptor()
    except (UnsupportedAlgorithm, ValueError) as e:
        logger.debug("Cipher %s not available from provider: %s", cipher.value, e)
        return False
    return True


def _provider_supports_hash(hash_name: HashName) -> bool:
    factory = _HASH_ALGORITHMS.get(hash_name)
    if factory is None:
        return False
    try:
        hmac.HMAC(b"check", factory())
    except UnsupportedAlgorithm as e:
        logger.debug("Hash %s not available for HMAC: %s", hash_name.value, e)
        return False
    return True


@lru_cache(maxsize=None)
def supported_ciphers() -> frozenset[CipherName]:
    """Return the IV-based block ciphers the crypto provider can run.

    ECB, CTR, GCM/CCM and stream ciphers are never listed.
    """
    supported = frozenset(c for c in CIPHER_INFO if _provider_supports_cipher(c))
    logger.debug("Supported ciphers: %s", sorted(c.value for c in supported))
    return supported


@lru_cache(maxsize=None)
def supported_hashes() -> frozenset[HashName]:
    """Return the hashes the crypto provider can use inside HMAC."""
    supported = frozenset(h for h in HASH_INFO if _provider_supports_hash(h))
    logger.debug("Supported hashes: %s", sorted(h.value for h in supported))
    return supported


def default_cipher() -> CipherName:
    return CipherName(DEFAULT_CIPHER)


def default_hash() -> HashName:
    return HashName(DEFAULT_HASH)


def default_iterations() -> int:
    return DEFAULT_ITERATIONS


def cipher_info(cipher: CipherName | str) -> CipherInfo:
    """Look up key, IV and block sizes for a supported cipher.

    Args:
        cipher: Cipher name.

    Returns:
        The cipher's size metadata.

    Raises:
        UnknownAlgorithmError: If the cipher is unknown or unsupported.
    """
    name = resolve_cipher(cipher)
    if name not in supported_ciphers():
        raise UnknownAlgorithmError(name.value, "cipher")
    return CIPHER_INFO[name]


def hash_info(hash_name: HashName | str) -> HashInfo:
    """Look up the digest length for a supported hash.

    Args:
        hash_name: Hash name.

    Returns:
        The hash's size metadata.

    Raises:
        UnknownAlgorithmError: If the hash is unknown or unsupported.
    """
    name = resolve_hash(hash_name)
    if name not in supported_hashes():
        raise UnknownAlgorithmError(name.value, "hash")
    return HASH_INFO[name]


def metadata(name: CipherName | HashName | str) -> CipherInfo | HashInfo:
    """Look up metadata for either a cipher or a hash name.

    Raises:
        UnknownAlgorithmError: If the name is neither a supported cipher nor hash.
    """
    if isinstance(name, CipherName):
        return cipher_info(name)
    if isinstance(name, HashName):
        return hash_info(name)
    if name in _CIPHER_VALUES:
        return cipher_info(name)
    if name in _HASH_VALUES:
        return hash_info(name)
    raise UnknownAlgorithmError(name)


def hash_algorithm(hash_name: HashName | str) -> hashes.HashAlgorithm:
    """Return a ``cryptography`` hash instance for a supported hash.

    Raises:
        UnknownAlgorithmError: If the hash is unknown or unsupported.
    """
    hash_info(hash_name)
    return _HASH_ALGORITHMS[resolve_hash(hash_name)]()


def build_cipher(cipher: CipherName | str, key: bytes, iv: bytes) -> Cipher:
    """Build a ``cryptography`` Cipher for a supported cipher name.

    Triple-DES keys are split into three 8-byte DES keys first.

    Args:
        cipher: Cipher name.
        key: Key of the cipher's key length.
        iv: IV of the cipher's IV length.

    Returns:
        A Cipher ready for ``encryptor()``/``decryptor()``.

    Raises:
        UnknownAlgorithmError: If the cipher is unknown or unsupported.
        ValueError: If the primitive rejects the key or IV.
    """
    from .kdf import split_des3_key

    name = resolve_cipher(cipher)
    cipher_info(name)
    if name in DES3_CIPHERS:
        # TripleDES takes K1 || K2 || K3
        key = b"".join(split_des3_key(key))
    return _new_cipher(name, key, iv)
