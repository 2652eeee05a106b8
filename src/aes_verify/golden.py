"""Golden reference AES using PyCryptodome, plus FIPS-197 known answers."""

from aes_core.reference import reference_encrypt, reference_decrypt


def golden_encrypt(key: bytes, plaintext: bytes) -> bytes:
    """Encrypt a single block using PyCryptodome as golden reference.

    Args:
        key: 16, 24 or 32-byte AES key
        plaintext: 16-byte plaintext block

    Returns:
        16-byte ciphertext block

    Raises:
        InvalidKeyLength: If key is not 16, 24 or 32 bytes
        InvalidBlockLength: If plaintext is not 16 bytes
    """
    return reference_encrypt(key, plaintext)


def golden_decrypt(key: bytes, ciphertext: bytes) -> bytes:
    """Decrypt a single block using PyCryptodome as golden reference."""
    return reference_decrypt(key, ciphertext)


def validate_against_golden(
    key: bytes, plaintext: bytes, candidate_ciphertext: bytes
) -> tuple[bool, str]:
    """Validate a candidate ciphertext against the golden reference.

    Args:
        key: AES key
        plaintext: 16-byte plaintext block
        candidate_ciphertext: 16-byte ciphertext to validate

    Returns:
        Tuple of (is_correct, error_detail)
    """
    expected = golden_encrypt(key, plaintext)
    if candidate_ciphertext == expected:
        return True, ""
    else:
        return False, (
            f"Ciphertext mismatch: expected {expected.hex()}, "
            f"got {candidate_ciphertext.hex()}"
        )


# FIPS-197 Appendix B and C known-answer vectors
FIPS_197_TEST_VECTORS = [
    {
        "name": "FIPS-197 Appendix B",
        "key": bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c"),
        "plaintext": bytes.fromhex("3243f6a8885a308d313198a2e0370734"),
        "ciphertext": bytes.fromhex("3925841d02dc09fbdc118597196a0b32"),
    },
    {
        "name": "FIPS-197 Appendix C.1 (AES-128)",
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a"),
    },
    {
        "name": "FIPS-197 Appendix C.2 (AES-192)",
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f1011121314151617"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("dda97ca4864cdfe06eaf70a0ec0d7191"),
    },
    {
        "name": "FIPS-197 Appendix C.3 (AES-256)",
        "key": bytes.fromhex(
            "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f"
        ),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("8ea2b7ca516745bfeafc49904b496089"),
    },
    {
        "name": "All zeros (AES-128)",
        "key": bytes.fromhex("00000000000000000000000000000000"),
        "plaintext": bytes.fromhex("00000000000000000000000000000000"),
        "ciphertext": bytes.fromhex("66e94bd4ef8a2c3b884cfa59ca342b2e"),
    },
    {
        "name": "All ones (AES-128)",
        "key": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "plaintext": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "ciphertext": bytes.fromhex("bcbf217cb280cf30b2517052193ab979"),
    },
]


# FIPS-197 Appendix A: last expanded word for each key size
KEY_SCHEDULE_VECTORS = [
    {
        "name": "FIPS-197 Appendix A.1 (AES-128)",
        "key": bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c"),
        "length": 44,
        "last_word": bytes.fromhex("b6630ca6"),
    },
    {
        "name": "FIPS-197 Appendix A.2 (AES-192)",
        "key": bytes.fromhex("8e73b0f7da0e6452c810f32b809079e562f8ead2522c6b7b"),
        "length": 52,
        "last_word": bytes.fromhex("01002202"),
    },
    {
        "name": "FIPS-197 Appendix A.3 (AES-256)",
        "key": bytes.fromhex(
            "603deb1015ca71be2b73aef0857d77811f352c073b6108d72d9810a30914dff4"
        ),
        "length": 60,
        "last_word": bytes.fromhex("706c631e"),
    },
]
