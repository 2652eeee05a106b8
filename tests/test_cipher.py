"""Tests for the AESCipher facade."""

import random

import pytest

from aes_core import DEFAULT_KEY_HEX, DEFAULT_PT_HEX, DEFAULT_CT_HEX
from aes_core.cipher import AESCipher, encrypt_block, decrypt_block
from aes_core.errors import AESError, InvalidBlockLength, InvalidKeyLength
from aes_core.key import AESKey, KeySize
from aes_core.key_schedule import key_expansion


# (key_hex, plaintext_hex, ciphertext_hex, description)
KNOWN_ANSWERS = [
    (
        "2b7e151628aed2a6abf7158809cf4f3c",
        "3243f6a8885a308d313198a2e0370734",
        "3925841d02dc09fbdc118597196a0b32",
        "FIPS-197 Appendix B",
    ),
    (
        "000102030405060708090a0b0c0d0e0f",
        "00112233445566778899aabbccddeeff",
        "69c4e0d86a7b0430d8cdb78070b4c55a",
        "FIPS-197 Appendix C.1",
    ),
    (
        "000102030405060708090a0b0c0d0e0f1011121314151617",
        "00112233445566778899aabbccddeeff",
        "dda97ca4864cdfe06eaf70a0ec0d7191",
        "FIPS-197 Appendix C.2",
    ),
    (
        "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f",
        "00112233445566778899aabbccddeeff",
        "8ea2b7ca516745bfeafc49904b496089",
        "FIPS-197 Appendix C.3",
    ),
]


def random_bytes(n: int, rng: random.Random) -> bytes:
    return bytes(rng.randint(0, 255) for _ in range(n))


class TestConstruction:
    """Tests for building a cipher."""

    @pytest.mark.parametrize("length,size,rounds", [
        (16, KeySize.AES128, 10),
        (24, KeySize.AES192, 12),
        (32, KeySize.AES256, 14),
    ])
    def test_variant_selects_parameters(self, length, size, rounds):
        cipher = AESCipher(bytes(range(length)))
        assert cipher.key.size is size
        assert cipher.rounds == rounds
        assert len(cipher.schedule) == 4 * (rounds + 1)

    def test_accepts_aes_key(self):
        key = AESKey.from_hex(DEFAULT_KEY_HEX)
        cipher = AESCipher(key)
        assert cipher.key is key

    def test_schedule_matches_key_expansion(self):
        key = AESKey.from_hex(DEFAULT_KEY_HEX)
        assert AESCipher(key).schedule == key_expansion(key)

    @pytest.mark.parametrize("length", [0, 8, 15, 17, 23, 25, 31, 33])
    def test_invalid_key_length(self, length):
        with pytest.raises(InvalidKeyLength):
            AESCipher(bytes(length))

    def test_invalid_key_type(self):
        with pytest.raises(TypeError):
            AESCipher(DEFAULT_KEY_HEX)

    def test_repr_hides_key(self):
        cipher = AESCipher(bytes.fromhex(DEFAULT_KEY_HEX))
        assert repr(cipher) == "AESCipher(size=AES128)"
        assert DEFAULT_KEY_HEX not in repr(cipher)


class TestKnownAnswers:
    """FIPS-197 known-answer tests for all key sizes."""

    @pytest.mark.parametrize("key_hex,pt_hex,ct_hex,desc", KNOWN_ANSWERS)
    def test_encrypt(self, key_hex, pt_hex, ct_hex, desc):
        cipher = AESCipher(bytes.fromhex(key_hex))
        result = cipher.encrypt(bytes.fromhex(pt_hex))
        assert result.hex() == ct_hex, f"Encrypt failed for {desc}"

    @pytest.mark.parametrize("key_hex,pt_hex,ct_hex,desc", KNOWN_ANSWERS)
    def test_decrypt(self, key_hex, pt_hex, ct_hex, desc):
        cipher = AESCipher(bytes.fromhex(key_hex))
        result = cipher.decrypt(bytes.fromhex(ct_hex))
        assert result.hex() == pt_hex, f"Decrypt failed for {desc}"

    def test_package_defaults(self):
        result = encrypt_block(bytes.fromhex(DEFAULT_KEY_HEX), bytes.fromhex(DEFAULT_PT_HEX))
        assert result.hex() == DEFAULT_CT_HEX

    def test_convenience_decrypt(self):
        result = decrypt_block(bytes.fromhex(DEFAULT_KEY_HEX), bytes.fromhex(DEFAULT_CT_HEX))
        assert result.hex() == DEFAULT_PT_HEX


class TestRoundTrip:
    """decrypt(encrypt(x)) == x and encrypt(decrypt(x)) == x."""

    @pytest.mark.parametrize("key_len", [16, 24, 32])
    @pytest.mark.parametrize("seed", range(5))
    def test_round_trip(self, key_len, seed):
        rng = random.Random(seed * 100 + key_len)
        cipher = AESCipher(random_bytes(key_len, rng))
        block = random_bytes(16, rng)

        assert cipher.decrypt(cipher.encrypt(block)) == block
        assert cipher.encrypt(cipher.decrypt(block)) == block

    def test_output_type_and_length(self):
        cipher = AESCipher(bytes(16))
        out = cipher.encrypt(bytearray(16))
        assert isinstance(out, bytes)
        assert len(out) == 16

    def test_accepts_memoryview(self):
        cipher = AESCipher(bytes(16))
        assert cipher.encrypt(memoryview(bytes(16))) == cipher.encrypt(bytes(16))

    def test_encrypt_is_stateless(self):
        cipher = AESCipher(bytes.fromhex(DEFAULT_KEY_HEX))
        pt = bytes.fromhex(DEFAULT_PT_HEX)
        first = cipher.encrypt(pt)
        cipher.encrypt(bytes(16))
        cipher.decrypt(bytes(16))
        assert cipher.encrypt(pt) == first


class TestBlockValidation:
    """Malformed blocks are rejected before any computation."""

    @pytest.mark.parametrize("length", [0, 1, 15, 17, 32])
    def test_encrypt_invalid_block(self, length):
        cipher = AESCipher(bytes(16))
        with pytest.raises(InvalidBlockLength) as exc_info:
            cipher.encrypt(bytes(length))
        assert exc_info.value.length == length

    @pytest.mark.parametrize("length", [0, 15, 17])
    def test_decrypt_invalid_block(self, length):
        cipher = AESCipher(bytes(16))
        with pytest.raises(InvalidBlockLength):
            cipher.decrypt(bytes(length))

    def test_invalid_block_type(self):
        cipher = AESCipher(bytes(16))
        with pytest.raises(TypeError):
            cipher.encrypt("0123456789abcdef")

    def test_errors_share_base_class(self):
        cipher = AESCipher(bytes(16))
        with pytest.raises(AESError):
            cipher.encrypt(bytes(3))
        with pytest.raises(ValueError):
            cipher.decrypt(bytes(3))


class TestSetKey:
    """Tests for key replacement."""

    def test_set_key_replaces_schedule(self):
        key = AESKey.from_hex("2b7e151628aed2a6abf7158809cf4f3c")
        cipher = AESCipher(key)
        original = AESCipher(key)

        assert cipher.key == key
        assert cipher.schedule == key_expansion(key)
        assert cipher == original

        new_key = AESKey.from_hex("000102030405060708090a0b0c0d0e0f")
        cipher.set_key(new_key)
        assert cipher.key == new_key
        assert cipher.schedule == key_expansion(new_key)
        assert cipher != original

        new_key2 = AESKey.from_hex("000102030405060708090a0b0c0d0e0f1011121314151617")
        cipher.set_key(new_key2)
        assert cipher.key == new_key2
        assert cipher.rounds == 12
        assert cipher.schedule == key_expansion(new_key2)

        new_key3 = AESKey(bytes(range(32)))
        cipher.set_key(new_key3)
        assert cipher.key == new_key3
        assert cipher.rounds == 14
        assert cipher.schedule == key_expansion(new_key3)

        cipher.set_key(key)
        assert cipher.key == key
        assert cipher == original
        assert hash(cipher) == hash(original)

    def test_set_key_changes_output(self):
        cipher = AESCipher(bytes.fromhex("000102030405060708090a0b0c0d0e0f"))
        pt = bytes.fromhex("00112233445566778899aabbccddeeff")
        cipher.set_key(bytes.fromhex(
            "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f"
        ))
        assert cipher.encrypt(pt).hex() == "8ea2b7ca516745bfeafc49904b496089"

    def test_failed_set_key_keeps_previous_key(self):
        key = AESKey.from_hex(DEFAULT_KEY_HEX)
        cipher = AESCipher(key)
        schedule = cipher.schedule

        with pytest.raises(InvalidKeyLength):
            cipher.set_key(bytes(20))

        assert cipher.key == key
        assert cipher.schedule is schedule
        assert cipher.encrypt(bytes.fromhex(DEFAULT_PT_HEX)).hex() == DEFAULT_CT_HEX

    def test_key_is_read_only(self):
        cipher = AESCipher(bytes(16))
        with pytest.raises(AttributeError):
            cipher.key = AESKey(bytes(16))

    def test_not_equal_to_other_types(self):
        assert AESCipher(bytes(16)) != bytes(16)
