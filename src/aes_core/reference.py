"""
Reference AES implementation using PyCryptodome for verification.
"""

from Crypto.Cipher import AES

from .errors import InvalidBlockLength, InvalidKeyLength


def _check_lengths(key: bytes, block: bytes) -> None:
    if len(key) not in AES.key_size:
        raise InvalidKeyLength(len(key))
    if len(block) != AES.block_size:
        raise InvalidBlockLength(len(block))


def reference_encrypt(key: bytes, plaintext: bytes) -> bytes:
    """
    Encrypt a single 16-byte block using PyCryptodome AES in ECB mode.

    Args:
        key: 16, 24 or 32-byte AES key
        plaintext: 16-byte plaintext block

    Returns:
        16-byte ciphertext
    """
    _check_lengths(key, plaintext)
    return AES.new(bytes(key), AES.MODE_ECB).encrypt(bytes(plaintext))


def reference_decrypt(key: bytes, ciphertext: bytes) -> bytes:
    """
    Decrypt a single 16-byte block using PyCryptodome AES in ECB mode.

    Args:
        key: 16, 24 or 32-byte AES key
        ciphertext: 16-byte ciphertext block

    Returns:
        16-byte plaintext
    """
    _check_lengths(key, ciphertext)
    return AES.new(bytes(key), AES.MODE_ECB).decrypt(bytes(ciphertext))


def verify_block(computed: bytes, key: bytes, block: bytes, decrypt: bool = False) -> bool:
    """
    Verify a computed block against the PyCryptodome reference.

    Args:
        computed: Output block to verify
        key: AES key used
        block: Input block used
        decrypt: True if `computed` is a decryption of `block`

    Returns:
        True if computed matches reference, False otherwise
    """
    expected = reference_decrypt(key, block) if decrypt else reference_encrypt(key, block)
    return computed == expected
