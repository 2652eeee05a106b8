"""
AES key expansion (FIPS-197 Section 5.2).

The schedule is an ordered sequence of 4-byte words w[0..4*(Nr+1)).
Words are consumed four at a time; word c of a round key is column c of
that round's AddRoundKey.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, overload

from .gf import sub_byte
from .key import KeyLike, KeySize, coerce_key
from .tables import R_CON
from .utils import xor_words


@dataclass(frozen=True)
class RoundKeySchedule:
    """
    Expanded key schedule for one key variant.

    Indexing by position (int) returns one word; indexing by slice
    returns a tuple of words, regardless of the variant.
    """

    size: KeySize
    words: tuple[bytes, ...]

    def __post_init__(self) -> None:
        if len(self.words) != self.size.schedule_words:
            raise ValueError(
                f"{self.size.name} schedule must have {self.size.schedule_words} "
                f"words, got {len(self.words)}"
            )

    @overload
    def __getitem__(self, index: int) -> bytes: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[bytes, ...]: ...

    def __getitem__(self, index):
        return self.words[index]

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.words)

    @property
    def rounds(self) -> int:
        return self.size.nr

    def round_key(self, round_num: int) -> tuple[bytes, ...]:
        """Return the four words used by AddRoundKey in round `round_num`."""
        if not 0 <= round_num <= self.size.nr:
            raise IndexError(
                f"Round must be 0..{self.size.nr} for {self.size.name}, got {round_num}"
            )
        return self.words[4 * round_num:4 * round_num + 4]

    def hex_words(self) -> list[str]:
        return [w.hex() for w in self.words]


def rot_word(word: bytes) -> bytes:
    """Cyclic left rotation by one byte: [a0,a1,a2,a3] -> [a1,a2,a3,a0]."""
    return word[1:] + word[:1]


def sub_word(word: bytes) -> bytes:
    """Apply the S-box to each byte of a word."""
    return bytes(sub_byte(b) for b in word)


def key_expansion(key: KeyLike) -> RoundKeySchedule:
    """
    Expand a key into its round-key schedule.

    Args:
        key: AESKey or raw key bytes (16, 24 or 32)

    Returns:
        RoundKeySchedule with 44, 52 or 60 words

    Raises:
        InvalidKeyLength: If raw key bytes have an unsupported length
    """
    key = coerce_key(key)
    nk = key.size.nk
    total = key.size.schedule_words
    material = key.material

    w = [material[i:i + 4] for i in range(0, 4 * nk, 4)]

    for i in range(nk, total):
        temp = w[i - 1]
        if i % nk == 0:
            temp = sub_word(rot_word(temp))
            rcon = R_CON[i // nk - 1] >> 24
            temp = bytes([temp[0] ^ rcon]) + temp[1:]
        elif nk == 8 and i % nk == 4:
            # AES-256 only
            temp = sub_word(temp)
        w.append(xor_words(w[i - nk], temp))

    return RoundKeySchedule(size=key.size, words=tuple(w))
