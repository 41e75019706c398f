"""Default encryption parameters for credentials_obfuscation."""

# Cipher used when the caller does not pick one
DEFAULT_CIPHER = "aes_128_cbc"

# Hash used as the PBKDF2 pseudo-random function
DEFAULT_HASH = "sha256"

# PBKDF2 iteration count. 1 is weak; callers that need key stretching must raise it.
DEFAULT_ITERATIONS = 1

# Random salt prepended to every envelope, independent of the cipher
SALT_LENGTH = 16

# Logger name shared by all modules
LOGGER_NAME = "credentials_obfuscation"
