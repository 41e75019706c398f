"""PBKDF2 key derivation for credentials_obfuscation.

PBKDF2 is implemented here rather than delegated to a library so the
pseudo-random function stays pluggable and any digest in the registry can be
used, with output identical to RFC 8018.
"""

from __future__ import annotations

from collections.abc import Callable

from cryptography.hazmat.primitives import hmac

from ..types import CipherName, HashName
from .constants import DES_KEY_LENGTH
from .registry import cipher_info, hash_algorithm, hash_info

# prf(hash, key, message) -> digest
Prf = Callable[[HashName, bytes, bytes], bytes]

# Largest block index that fits the 4-byte big-endian counter
_MAX_BLOCKS = 0xFFFFFFFF


def validate_iterations(iterations: int) -> None:
    """Raise if ``iterations`` is not an integer >= 1."""
    if isinstance(iterations, bool) or not isinstance(iterations, int):
        raise TypeError(f"Iterations must be an integer, got {iterations!r}")
    if iterations < 1:
        raise ValueError(f"Iterations must be >= 1, got {iterations}")


def hmac_prf(hash_name: HashName, key: bytes, message: bytes) -> bytes:
    """HMAC keyed by ``key`` over ``message`` using ``hash_name``."""
    h = hmac.HMAC(key, hash_algorithm(hash_name))
    h.update(message)
    return h.finalize()


def pbkdf2(
    secret: bytes,
    salt: bytes,
    iterations: int,
    output_length: int,
    prf: Prf,
    hash_name: HashName,
    prf_output_length: int,
) -> bytes:
    """Derive ``output_length`` bytes from a secret with PBKDF2.

    Each block is ``U1 ^ U2 ^ ... ^ Uc`` where ``U1 = prf(secret, salt || INT(i))``
    and ``Uj = prf(secret, U(j-1))``. ``INT(i)`` is the 1-based block index as
    a big-endian unsigned 32-bit integer. The last block is truncated.

    Args:
        secret: The password bytes, used as the PRF key.
        salt: The salt.
        iterations: Iteration count (>= 1).
        output_length: Number of bytes to produce.
        prf: Pseudo-random function, see :func:`hmac_prf`.
        hash_name: Hash passed through to ``prf``.
        prf_output_length: Output length of ``prf`` in bytes.

    Returns:
        Exactly ``output_length`` derived bytes.

    Raises:
        ValueError: If iterations or lengths are out of range.
    """
    validate_iterations(iterations)
    if output_length < 1:
        raise ValueError(f"Output length must be >= 1, got {output_length}")
    if prf_output_length < 1:
        raise ValueError(f"PRF output length must be >= 1, got {prf_output_length}")

    num_blocks = -(-output_length // prf_output_length)
    if num_blocks > _MAX_BLOCKS:
        raise ValueError(f"Output length {output_length} is too long for PBKDF2")

    blocks = []
    for index in range(1, num_blocks + 1):
        u = prf(hash_name, secret, salt + index.to_bytes(4, "big"))
        acc = int.from_bytes(u, "big")
        for _ in range(iterations - 1):
            u = prf(hash_name, secret, u)
            acc ^= int.from_bytes(u, "big")
        blocks.append(acc.to_bytes(prf_output_length, "big"))

    return b"".join(blocks)[:output_length]


def derive_key(
    cipher: CipherName | str,
    hash_name: HashName | str,
    iterations: int,
    secret: bytes,
    salt: bytes,
) -> bytes:
    """Derive a key sized for ``cipher`` using PBKDF2 with HMAC-``hash_name``.

    Raises:
        UnknownAlgorithmError: If the cipher or hash is unknown or unsupported.
        ValueError: If iterations is < 1.
    """
    key_length = cipher_info(cipher).key_length
    digest_length = hash_info(hash_name).digest_length
    return pbkdf2(
        secret,
        salt,
        iterations,
        key_length,
        hmac_prf,
        HashName(hash_name),
        digest_length,
    )


def split_des3_key(key: bytes) -> list[bytes]:
    """Split a 24-byte triple-DES key into three 8-byte DES keys, in order.

    Raises:
        ValueError: If the key is not exactly 24 bytes.
    """
    if len(key) != 3 * DES_KEY_LENGTH:
        raise ValueError(f"Triple-DES key must be {3 * DES_KEY_LENGTH} bytes, got {len(key)}")
    return [key[i : i + DES_KEY_LENGTH] for i in range(0, len(key), DES_KEY_LENGTH)]
