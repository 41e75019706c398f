"""Type definitions for credentials_obfuscation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Union

from .constants import DEFAULT_CIPHER, DEFAULT_HASH, DEFAULT_ITERATIONS


class CipherName(str, Enum):
    """Block ciphers in an IV-based mode, named by their persisted identifiers."""

    DES_CBC = "des_cbc"
    DES_CFB = "des_cfb"
    DES3_CBC = "des3_cbc"
    DES3_CFB = "des3_cfb"
    DES3_CBF = "des3_cbf"
    DES_EDE3 = "des_ede3"
    DES_EDE3_CBC = "des_ede3_cbc"
    DES_EDE3_CFB = "des_ede3_cfb"
    DES_EDE3_CBF = "des_ede3_cbf"
    BLOWFISH_CBC = "blowfish_cbc"
    BLOWFISH_CFB64 = "blowfish_cfb64"
    BLOWFISH_OFB64 = "blowfish_ofb64"
    RC2_CBC = "rc2_cbc"
    AES_CBC = "aes_cbc"
    AES_CBC128 = "aes_cbc128"
    AES_CBC256 = "aes_cbc256"
    AES_CFB8 = "aes_cfb8"
    AES_CFB128 = "aes_cfb128"
    AES_128_CBC = "aes_128_cbc"
    AES_192_CBC = "aes_192_cbc"
    AES_256_CBC = "aes_256_cbc"
    AES_128_CFB8 = "aes_128_cfb8"
    AES_192_CFB8 = "aes_192_cfb8"
    AES_256_CFB8 = "aes_256_cfb8"
    AES_128_CFB128 = "aes_128_cfb128"
    AES_192_CFB128 = "aes_192_cfb128"
    AES_256_CFB128 = "aes_256_cfb128"


class HashName(str, Enum):
    """Digest algorithms usable as the PBKDF2 pseudo-random function."""

    MD4 = "md4"
    MD5 = "md5"
    RIPEMD160 = "ripemd160"
    SHA = "sha"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA3_224 = "sha3_224"
    SHA3_256 = "sha3_256"
    SHA3_384 = "sha3_384"
    SHA3_512 = "sha3_512"
    BLAKE2B = "blake2b"
    BLAKE2S = "blake2s"


@dataclass(frozen=True)
class CipherInfo:
    """Size metadata for a cipher.

    Attributes:
        key_length: Key length in bytes.
        iv_length: Initialization vector length in bytes.
        block_size: Padding block size in bytes.
    """

    key_length: int
    iv_length: int
    block_size: int


@dataclass(frozen=True)
class HashInfo:
    """Size metadata for a hash.

    Attributes:
        digest_length: Digest length in bytes.
    """

    digest_length: int


class PendingSecret:
    """Sentinel meaning no real secret has been provisioned yet.

    Encrypting with a pending secret leaves the value as :class:`Plaintext`.
    Use the module-level :data:`PENDING_SECRET` instance.
    """

    _instance: ClassVar[PendingSecret | None] = None

    def __new__(cls) -> PendingSecret:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "PENDING_SECRET"


PENDING_SECRET = PendingSecret()


@dataclass(frozen=True)
class AvailableSecret:
    """A real secret (password or passphrase bytes).

    Attributes:
        value: The secret bytes. Excluded from ``repr``.
    """

    value: bytes = field(repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.value, str):
            object.__setattr__(self, "value", self.value.encode("utf-8"))
        elif isinstance(self.value, (bytearray, memoryview)):
            object.__setattr__(self, "value", bytes(self.value))
        elif not isinstance(self.value, bytes):
            raise TypeError(f"Secret must be bytes or str, got {type(self.value).__name__}")


Secret = Union[AvailableSecret, PendingSecret]

# Anything the public entry points accept as a secret
SecretLike = Union[AvailableSecret, PendingSecret, bytes, bytearray, memoryview, str]


def as_secret(secret: SecretLike) -> Secret:
    """Normalize a caller-supplied secret into the :data:`Secret` sum type.

    Args:
        secret: A Secret, or raw bytes/str shorthand for an available secret.

    Returns:
        Either the pending sentinel or an AvailableSecret.

    Raises:
        TypeError: If the value cannot be used as a secret.
    """
    if isinstance(secret, (AvailableSecret, PendingSecret)):
        return secret
    return AvailableSecret(secret)  # type: ignore[arg-type]


@dataclass(frozen=True)
class Plaintext:
    """A value left unencrypted because the secret was pending.

    Attributes:
        payload: The original value, untouched.
    """

    payload: Any
    tag: ClassVar[str] = "plaintext"

    def to_tuple(self) -> tuple[str, Any]:
        return (self.tag, self.payload)


@dataclass(frozen=True)
class Encrypted:
    """A value protected by a base64 envelope (salt || iv || ciphertext).

    Attributes:
        envelope: The base64-encoded envelope.
    """

    envelope: str
    tag: ClassVar[str] = "encrypted"

    def to_tuple(self) -> tuple[str, str]:
        return (self.tag, self.envelope)


EncryptedValue = Union[Plaintext, Encrypted]


def encrypted_value_from_tuple(pair: tuple[str, Any]) -> EncryptedValue:
    """Rebuild an EncryptedValue from its ``(tag, payload)`` form.

    Args:
        pair: A tuple produced by ``to_tuple()``.

    Returns:
        The matching Plaintext or Encrypted value.

    Raises:
        ValueError: If the tag is not recognized or the pair is malformed.
    """
    try:
        tag, payload = pair
    except (TypeError, ValueError) as e:
        raise ValueError(f"Expected a (tag, payload) pair, got {pair!r}") from e

    if tag == Plaintext.tag:
        return Plaintext(payload)
    if tag == Encrypted.tag:
        if isinstance(payload, bytes):
            payload = payload.decode("ascii")
        return Encrypted(payload)
    raise ValueError(f"Unknown encrypted value tag: {tag!r}")


@dataclass(frozen=True)
class AlgorithmParams:
    """Cipher, hash and iteration count used for one family of envelopes.

    The same parameters must be supplied to decrypt an envelope; they are
    not recorded inside it.

    Attributes:
        cipher: Cipher name.
        hash: Hash used as the PBKDF2 pseudo-random function.
        iterations: PBKDF2 iteration count (>= 1).
    """

    cipher: CipherName = CipherName(DEFAULT_CIPHER)
    hash: HashName = HashName(DEFAULT_HASH)
    iterations: int = DEFAULT_ITERATIONS

    def __post_init__(self) -> None:
        from .crypto.kdf import validate_iterations
        from .crypto.registry import resolve_cipher, resolve_hash

        object.__setattr__(self, "cipher", resolve_cipher(self.cipher))
        object.__setattr__(self, "hash", resolve_hash(self.hash))
        validate_iterations(self.iterations)

    def encrypt(self, secret: SecretLike, cleartext: bytes | str) -> EncryptedValue:
        """Encrypt bytes with these parameters."""
        from .crypto.envelope import encrypt

        return encrypt(self.cipher, self.hash, self.iterations, secret, cleartext)

    def decrypt(self, secret: SecretLike, value: EncryptedValue) -> Any:
        """Decrypt an EncryptedValue produced with these parameters."""
        from .crypto.envelope import decrypt

        return decrypt(self.cipher, self.hash, self.iterations, secret, value)

    def encrypt_value(self, secret: SecretLike, value: Any) -> EncryptedValue:
        """Serialize and encrypt a structured value with these parameters."""
        from .values import encrypt_value

        return encrypt_value(self.cipher, self.hash, self.iterations, secret, value)

    def decrypt_value(self, secret: SecretLike, value: EncryptedValue) -> Any:
        """Decrypt and deserialize a structured value with these parameters."""
        from .values import decrypt_value

        return decrypt_value(self.cipher, self.hash, self.iterations, secret, value)
