"""Password-based encryption for obfuscating credentials at rest.

Derives a key from a secret with PBKDF2 and encrypts bytes or structured
values into a base64 envelope (salt || iv || ciphertext). Until a real secret
is available, values can be tagged as plaintext with ``PENDING_SECRET``.

Example:
    ```python
    from credentials_obfuscation import AlgorithmParams

    params = AlgorithmParams(cipher="aes_256_cbc", iterations=10_000)
    token = params.encrypt(b"s3cr3t", b"guest:guest")
    assert params.decrypt(b"s3cr3t", token) == b"guest:guest"
    ```
"""

from .constants import DEFAULT_CIPHER, DEFAULT_HASH, DEFAULT_ITERATIONS, SALT_LENGTH
from .crypto import (
    cipher_info,
    decrypt,
    default_cipher,
    default_hash,
    default_iterations,
    derive_key,
    encrypt,
    hash_info,
    metadata,
    pad,
    pbkdf2,
    supported_ciphers,
    supported_hashes,
    unpad,
)
from .errors import (
    CorruptDataError,
    CredentialsObfuscationError,
    DecryptionError,
    UnknownAlgorithmError,
)
from .types import (
    PENDING_SECRET,
    AlgorithmParams,
    AvailableSecret,
    CipherInfo,
    CipherName,
    Encrypted,
    EncryptedValue,
    HashInfo,
    HashName,
    PendingSecret,
    Plaintext,
    Secret,
    encrypted_value_from_tuple,
)
from .values import decrypt_value, encrypt_value

__version__ = "0.1.0"

__all__ = [
    # Operations
    "encrypt",
    "decrypt",
    "encrypt_value",
    "decrypt_value",
    "derive_key",
    "pbkdf2",
    "pad",
    "unpad",
    # Registry
    "supported_ciphers",
    "supported_hashes",
    "default_cipher",
    "default_hash",
    "default_iterations",
    "cipher_info",
    "hash_info",
    "metadata",
    # Constants
    "DEFAULT_CIPHER",
    "DEFAULT_HASH",
    "DEFAULT_ITERATIONS",
    "SALT_LENGTH",
    # Types
    "AlgorithmParams",
    "AvailableSecret",
    "CipherInfo",
    "CipherName",
    "Encrypted",
    "EncryptedValue",
    "HashInfo",
    "HashName",
    "PENDING_SECRET",
    "PendingSecret",
    "Plaintext",
    "Secret",
    "encrypted_value_from_tuple",
    # Errors
    "CredentialsObfuscationError",
    "UnknownAlgorithmError",
    "DecryptionError",
    "CorruptDataError",
    # Version
    "__version__",
]
