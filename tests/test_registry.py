"""Tests for crypto/registry.py module."""

import pytest

from credentials_obfuscation.crypto.constants import CIPHER_INFO, DES3_CIPHERS, HASH_INFO
from credentials_obfuscation.crypto.registry import (
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
from credentials_obfuscation.errors import UnknownAlgorithmError
from credentials_obfuscation.types import CipherInfo, CipherName, HashInfo, HashName


class TestDefaults:
    """Tests for the default parameters."""

    def test_default_cipher(self) -> None:
        """The default cipher is AES-128-CBC."""
        assert default_cipher() == CipherName.AES_128_CBC

    def test_default_hash(self) -> None:
        """The default hash is SHA-256."""
        assert default_hash() == HashName.SHA256

    def test_default_iterations(self) -> None:
        """The default iteration count is 1."""
        assert default_iterations() == 1

    def test_defaults_are_supported(self) -> None:
        """The defaults are always usable."""
        assert default_cipher() in supported_ciphers()
        assert default_hash() in supported_hashes()


class TestSupportedAlgorithms:
    """Tests for provider negotiation."""

    def test_aes_cbc_always_supported(self) -> None:
        """AES-CBC in all key sizes is available from any provider."""
        for cipher in (
            CipherName.AES_128_CBC,
            CipherName.AES_192_CBC,
            CipherName.AES_256_CBC,
            CipherName.AES_CBC,
            CipherName.AES_CBC128,
            CipherName.AES_CBC256,
        ):
            assert cipher in supported_ciphers()

    def test_no_unsafe_modes(self) -> None:
        """ECB, counter, authenticated and stream modes are never offered."""
        forbidden = ("ecb", "ctr", "gcm", "ccm", "rc4", "chacha", "stream")
        for cipher in supported_ciphers():
            assert not any(word in cipher.value for word in forbidden)

    def test_supported_ciphers_are_in_table(self) -> None:
        """Every supported cipher has metadata."""
        assert supported_ciphers() <= set(CIPHER_INFO)

    def test_sha2_supported(self) -> None:
        """The SHA-2 family is available for HMAC."""
        for hash_name in (HashName.SHA224, HashName.SHA256, HashName.SHA384, HashName.SHA512):
            assert hash_name in supported_hashes()

    def test_hashes_without_primitive_not_supported(self) -> None:
        """MD4 and RIPEMD-160 have metadata but no provider implementation."""
        assert HashName.MD4 not in supported_hashes()
        assert HashName.RIPEMD160 not in supported_hashes()
        assert HASH_INFO[HashName.MD4] == HashInfo(digest_length=16)
        assert HASH_INFO[HashName.RIPEMD160] == HashInfo(digest_length=20)

    def test_results_are_cached(self) -> None:
        """Repeated calls return the same frozen set."""
        assert supported_ciphers() is supported_ciphers()
        assert supported_hashes() is supported_hashes()


class TestMetadataTable:
    """Tests for the static metadata tables."""

    def test_table_covers_all_names(self) -> None:
        """Every cipher and hash name has a table entry."""
        assert set(CIPHER_INFO) == set(CipherName)
        assert set(HASH_INFO) == set(HashName)

    @pytest.mark.parametrize("hash_name", sorted(supported_hashes()))
    def test_digest_length_matches_primitive(self, hash_name: HashName) -> None:
        """Table digest lengths agree with the provider's hash objects."""
        assert hash_info(hash_name).digest_length == hash_algorithm(hash_name).digest_size

    @pytest.mark.parametrize("cipher", sorted(supported_ciphers()))
    def test_table_sizes_accepted_by_primitive(self, cipher: CipherName) -> None:
        """The provider accepts keys and IVs of the table sizes."""
        info = cipher_info(cipher)
        encryptor = build_cipher(cipher, bytes(info.key_length), bytes(info.iv_length)).encryptor()
        out = encryptor.update(bytes(info.block_size * 2)) + encryptor.finalize()
        assert len(out) == info.block_size * 2

    def test_triple_des_key_length(self) -> None:
        """Triple-DES ciphers use 24-byte keys."""
        for cipher in DES3_CIPHERS:
            assert CIPHER_INFO[cipher].key_length == 24

    @pytest.mark.parametrize(
        ("cipher", "expected"),
        [
            (CipherName.AES_128_CBC, CipherInfo(key_length=16, iv_length=16, block_size=16)),
            (CipherName.AES_192_CBC, CipherInfo(key_length=24, iv_length=16, block_size=16)),
            (CipherName.AES_256_CBC, CipherInfo(key_length=32, iv_length=16, block_size=16)),
            (CipherName.AES_CBC256, CipherInfo(key_length=32, iv_length=16, block_size=16)),
            (CipherName.DES_CBC, CipherInfo(key_length=8, iv_length=8, block_size=8)),
            (CipherName.DES3_CBC, CipherInfo(key_length=24, iv_length=8, block_size=8)),
            (CipherName.BLOWFISH_CBC, CipherInfo(key_length=16, iv_length=8, block_size=8)),
            (CipherName.RC2_CBC, CipherInfo(key_length=16, iv_length=8, block_size=8)),
        ],
    )
    def test_known_sizes(self, cipher: CipherName, expected: CipherInfo) -> None:
        """Well-known cipher sizes are recorded correctly."""
        assert CIPHER_INFO[cipher] == expected


class TestLookup:
    """Tests for name resolution and metadata lookup."""

    def test_metadata_for_cipher_name(self) -> None:
        """metadata() accepts a cipher name string."""
        assert metadata("aes_128_cbc") == CipherInfo(key_length=16, iv_length=16, block_size=16)

    def test_metadata_for_hash_name(self) -> None:
        """metadata() accepts a hash name string."""
        assert metadata("sha256") == HashInfo(digest_length=32)

    def test_metadata_for_enum(self) -> None:
        """metadata() accepts enum members."""
        assert metadata(HashName.SHA512) == HashInfo(digest_length=64)
        assert metadata(CipherName.AES_256_CBC).key_length == 32

    def test_metadata_unknown(self) -> None:
        """Unknown names raise UnknownAlgorithmError."""
        with pytest.raises(UnknownAlgorithmError) as exc_info:
            metadata("not-a-cipher")
        assert exc_info.value.name == "not-a-cipher"

    def test_metadata_unsupported_hash(self) -> None:
        """A known but unsupported hash raises UnknownAlgorithmError."""
        with pytest.raises(UnknownAlgorithmError, match="md4"):
            metadata("md4")

    def test_cipher_info_rejects_hash_name(self) -> None:
        """A hash name is not a cipher."""
        with pytest.raises(UnknownAlgorithmError, match="cipher"):
            cipher_info("sha256")

    @pytest.mark.parametrize("name", ["aes_128_ecb", "aes_256_gcm", "aes_128_ctr", "rc4", ""])
    def test_resolve_rejects_unsupported_modes(self, name: str) -> None:
        """Names of excluded modes are unknown ciphers."""
        with pytest.raises(UnknownAlgorithmError):
            resolve_cipher(name)

    def test_resolve_accepts_enum_and_string(self) -> None:
        """resolve_* accept both enum members and their string values."""
        assert resolve_cipher("des3_cbc") is CipherName.DES3_CBC
        assert resolve_cipher(CipherName.DES3_CBC) is CipherName.DES3_CBC
        assert resolve_hash("sha") is HashName.SHA

    def test_resolve_hash_unknown(self) -> None:
        """Unknown hash names raise UnknownAlgorithmError."""
        with pytest.raises(UnknownAlgorithmError, match="hash"):
            resolve_hash("sha1024")


class TestBuildCipher:
    """Tests for building cryptography cipher objects."""

    def test_triple_des_matches_concatenated_subkeys(self) -> None:
        """Triple-DES is keyed with the three 8-byte sub-keys in order."""
        if CipherName.DES3_CBC not in supported_ciphers():
            pytest.skip("Triple-DES not available from provider")
        from cryptography.hazmat.decrepit.ciphers.algorithms import TripleDES
        from cryptography.hazmat.primitives.ciphers import Cipher, modes

        key = bytes(range(24))
        iv = b"\x01" * 8
        block = b"8bytes!!"

        ours = build_cipher(CipherName.DES3_CBC, key, iv).encryptor()
        reference = Cipher(TripleDES(key), modes.CBC(iv)).encryptor()
        expected = reference.update(block) + reference.finalize()
        assert ours.update(block) + ours.finalize() == expected

    def test_wrong_iv_length_rejected(self) -> None:
        """The primitive rejects an IV of the wrong length."""
        with pytest.raises(ValueError):
            build_cipher(CipherName.AES_128_CBC, bytes(16), bytes(8))

    def test_wrong_key_length_rejected(self) -> None:
        """The primitive rejects a key of the wrong length."""
        with pytest.raises(ValueError):
            build_cipher(CipherName.AES_128_CBC, bytes(15), bytes(16))

    def test_single_des_matches_repeated_key(self) -> None:
        """Single DES is TripleDES keyed with the 8-byte key three times."""
        if CipherName.DES_CBC not in supported_ciphers():
            pytest.skip("DES not available from provider")
        from cryptography.hazmat.decrepit.ciphers.algorithms import TripleDES
        from cryptography.hazmat.primitives.ciphers import Cipher, modes

        key = bytes(range(8))
        iv = b"\x02" * 8
        block = b"8bytes!!"

        ours = build_cipher(CipherName.DES_CBC, key, iv).encryptor()
        reference = Cipher(TripleDES(key * 3), modes.CBC(iv)).encryptor()
        expected = reference.update(block) + reference.finalize()
        assert ours.update(block) + ours.finalize() == expected

    @pytest.mark.parametrize("cipher", sorted(supported_ciphers()))
    def test_no_deprecation_warnings(self, cipher: CipherName) -> None:
        """Building and running any supported cipher emits no deprecation warning."""
        import warnings

        from cryptography.utils import CryptographyDeprecationWarning

        info = cipher_info(cipher)
        with warnings.catch_warnings():
            warnings.simplefilter("error", CryptographyDeprecationWarning)
            encryptor = build_cipher(
                cipher, bytes(info.key_length), bytes(info.iv_length)
            ).encryptor()
            encryptor.update(bytes(info.block_size))
            encryptor.finalize()


class TestMisspelledAliases:
    """Tests for the ``cbf`` spellings of the triple-DES CFB ciphers."""

    @pytest.mark.parametrize(
        ("alias", "cipher"),
        [
            ("des3_cbf", CipherName.DES3_CFB),
            ("des_ede3_cbf", CipherName.DES_EDE3_CFB),
        ],
    )
    def test_alias_matches_cfb(self, alias: str, cipher: CipherName) -> None:
        """An alias resolves and behaves exactly like its correctly spelled cipher."""
        name = resolve_cipher(alias)
        assert name.value == alias
        assert CIPHER_INFO[name] == CIPHER_INFO[cipher]
        assert name in DES3_CIPHERS
        if cipher not in supported_ciphers():
            pytest.skip("Triple-DES not available from provider")
        assert name in supported_ciphers()

        key = bytes(range(24))
        iv = b"\x03" * 8
        data = b"same keystream"
        ours = build_cipher(name, key, iv).encryptor()
        reference = build_cipher(cipher, key, iv).encryptor()
        assert ours.update(data) + ours.finalize() == reference.update(data) + reference.finalize()
