"""Static algorithm metadata for credentials_obfuscation.

Key, IV and block sizes are in bytes. Feedback modes (CFB/OFB) behave as
stream modes over the block cipher, so their block size is 1.
"""

from __future__ import annotations

from ..types import CipherInfo, CipherName, HashInfo, HashName

CIPHER_INFO: dict[CipherName, CipherInfo] = {
    # DES family. "cbf" names are misspelled aliases of "cfb" kept for
    # envelopes written under them.
    CipherName.DES_CBC: CipherInfo(key_length=8, iv_length=8, block_size=8),
    CipherName.DES_CFB: CipherInfo(key_length=8, iv_length=8, block_size=1),
    CipherName.DES3_CBC: CipherInfo(key_length=24, iv_length=8, block_size=8),
    CipherName.DES3_CFB: CipherInfo(key_length=24, iv_length=8, block_size=1),
    CipherName.DES3_CBF: CipherInfo(key_length=24, iv_length=8, block_size=1),
    CipherName.DES_EDE3: CipherInfo(key_length=24, iv_length=8, block_size=8),
    CipherName.DES_EDE3_CBC: CipherInfo(key_length=24, iv_length=8, block_size=8),
    CipherName.DES_EDE3_CFB: CipherInfo(key_length=24, iv_length=8, block_size=1),
    CipherName.DES_EDE3_CBF: CipherInfo(key_length=24, iv_length=8, block_size=1),
    # Blowfish
    CipherName.BLOWFISH_CBC: CipherInfo(key_length=16, iv_length=8, block_size=8),
    CipherName.BLOWFISH_CFB64: CipherInfo(key_length=16, iv_length=8, block_size=1),
    CipherName.BLOWFISH_OFB64: CipherInfo(key_length=16, iv_length=8, block_size=1),
    # RC2
    CipherName.RC2_CBC: CipherInfo(key_length=16, iv_length=8, block_size=8),
    # AES, legacy unsized aliases
    CipherName.AES_CBC: CipherInfo(key_length=16, iv_length=16, block_size=16),
    CipherName.AES_CBC128: CipherInfo(key_length=16, iv_length=16, block_size=16),
    CipherName.AES_CBC256: CipherInfo(key_length=32, iv_length=16, block_size=16),
    CipherName.AES_CFB8: CipherInfo(key_length=16, iv_length=16, block_size=1),
    CipherName.AES_CFB128: CipherInfo(key_length=16, iv_length=16, block_size=1),
    # AES, sized names
    CipherName.AES_128_CBC: CipherInfo(key_length=16, iv_length=16, block_size=16),
    CipherName.AES_192_CBC: CipherInfo(key_length=24, iv_length=16, block_size=16),
    CipherName.AES_256_CBC: CipherInfo(key_length=32, iv_length=16, block_size=16),
    CipherName.AES_128_CFB8: CipherInfo(key_length=16, iv_length=16, block_size=1),
    CipherName.AES_192_CFB8: CipherInfo(key_length=24, iv_length=16, block_size=1),
    CipherName.AES_256_CFB8: CipherInfo(key_length=32, iv_length=16, block_size=1),
    CipherName.AES_128_CFB128: CipherInfo(key_length=16, iv_length=16, block_size=1),
    CipherName.AES_192_CFB128: CipherInfo(key_length=24, iv_length=16, block_size=1),
    CipherName.AES_256_CFB128: CipherInfo(key_length=32, iv_length=16, block_size=1),
}

HASH_INFO: dict[HashName, HashInfo] = {
    HashName.MD4: HashInfo(digest_length=16),
    HashName.MD5: HashInfo(digest_length=16),
    HashName.RIPEMD160: HashInfo(digest_length=20),
    HashName.SHA: HashInfo(digest_length=20),
    HashName.SHA224: HashInfo(digest_length=28),
    HashName.SHA256: HashInfo(digest_length=32),
    HashName.SHA384: HashInfo(digest_length=48),
    HashName.SHA512: HashInfo(digest_length=64),
    HashName.SHA3_224: HashInfo(digest_length=28),
    HashName.SHA3_256: HashInfo(digest_length=32),
    HashName.SHA3_384: HashInfo(digest_length=48),
    HashName.SHA3_512: HashInfo(digest_length=64),
    HashName.BLAKE2B: HashInfo(digest_length=64),
    HashName.BLAKE2S: HashInfo(digest_length=32),
}

# Ciphers whose 24-byte key is handed to the primitive as three 8-byte DES keys
DES3_CIPHERS = frozenset(
    {
        CipherName.DES3_CBC,
        CipherName.DES3_CFB,
        CipherName.DES3_CBF,
        CipherName.DES_EDE3,
        CipherName.DES_EDE3_CBC,
        CipherName.DES_EDE3_CFB,
        CipherName.DES_EDE3_CBF,
    }
)

# Triple-DES sub-key size
DES_KEY_LENGTH = 8

# Ciphers whose single 8-byte DES key runs on TripleDES as K1 = K2 = K3
SINGLE_DES_CIPHERS = frozenset({CipherName.DES_CBC, CipherName.DES_CFB})
