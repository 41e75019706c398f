"""Error hierarchy for credentials_obfuscation."""

from __future__ import annotations


class CredentialsObfuscationError(Exception):
    """Base exception for all credentials_obfuscation errors."""

    pass


class UnknownAlgorithmError(CredentialsObfuscationError):
    """Cipher or hash name is unknown or not supported by the crypto provider.

    Attributes:
        name: The rejected algorithm name.
    """

    def __init__(self, name: object, kind: str = "algorithm") -> None:
        self.name = name
        self.kind = kind
        super().__init__(f"Unknown or unsupported {kind}: {name!r}")


class DecryptionError(CredentialsObfuscationError):
    """Malformed envelope or cryptographic decryption failure."""

    pass


class CorruptDataError(CredentialsObfuscationError):
    """Decrypted bytes could not be deserialized into a structured value."""

    pass
