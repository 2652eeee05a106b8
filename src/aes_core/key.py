"""
AES key variants.

A key is one of three fixed-length byte strings (AES-128/192/256).  The
variant alone determines every algorithm parameter:

  variant   key bytes   Nk   Nr   schedule words
  AES128        16       4   10        44
  AES192        24       6   12        52
  AES256        32       8   14        60
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .errors import InvalidKeyLength, InvalidHex


class KeySize(Enum):
    """Tag of the key variant; the value is the key size in bits."""

    AES128 = 128
    AES192 = 192
    AES256 = 256

    @property
    def key_bytes(self) -> int:
        return self.value // 8

    @property
    def nk(self) -> int:
        """Key length in 32-bit words."""
        return self.value // 32

    @property
    def nr(self) -> int:
        """Number of rounds."""
        return self.nk + 6

    @property
    def schedule_words(self) -> int:
        """Length of the expanded key schedule in words."""
        return 4 * (self.nr + 1)

    @classmethod
    def from_length(cls, length: int) -> KeySize:
        """
        Select the variant for a key of `length` bytes.

        Raises:
            InvalidKeyLength: If length is not 16, 24 or 32
        """
        for size in cls:
            if size.key_bytes == length:
                return size
        raise InvalidKeyLength(length)

    @classmethod
    def from_bits(cls, bits: int) -> KeySize:
        """Select the variant for a key size given in bits (128/192/256)."""
        try:
            return cls(bits)
        except ValueError:
            raise InvalidKeyLength(bits // 8) from None


@dataclass(frozen=True)
class AESKey:
    """
    Immutable AES key.

    Construction validates the length, so an AESKey always holds 16, 24
    or 32 bytes.  Key material is kept out of repr().
    """

    material: bytes = field(repr=False)
    size: KeySize = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.material, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"Key material must be bytes-like, got {type(self.material).__name__}"
            )
        material = bytes(self.material)
        object.__setattr__(self, "material", material)
        object.__setattr__(self, "size", KeySize.from_length(len(material)))

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> AESKey:
        return cls(data)

    @classmethod
    def from_hex(cls, hex_str: str) -> AESKey:
        """Build a key from a hex string (32, 48 or 64 hex chars)."""
        try:
            data = bytes.fromhex(hex_str)
        except ValueError as e:
            raise InvalidHex(hex_str, str(e)) from None
        return cls(data)

    @property
    def nk(self) -> int:
        return self.size.nk

    @property
    def nr(self) -> int:
        return self.size.nr

    def hex(self) -> str:
        return self.material.hex()

    def __len__(self) -> int:
        return len(self.material)

    def __bytes__(self) -> bytes:
        return self.material


KeyLike = Union[AESKey, bytes, bytearray, memoryview]


def coerce_key(key: KeyLike) -> AESKey:
    """Return `key` as an AESKey, validating raw bytes-like input."""
    if isinstance(key, AESKey):
        return key
    if isinstance(key, (bytes, bytearray, memoryview)):
        return AESKey(bytes(key))
    raise TypeError(f"Expected AESKey or bytes-like key, got {type(key).__name__}")
