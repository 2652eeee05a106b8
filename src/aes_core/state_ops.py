"""
AES round transformations on a 4x4 state.

Each function takes state[row][col] and returns a new state; inputs are
never mutated.  Forward/inverse pairs:

  SubBytes     <-> InvSubBytes
  ShiftRows    <-> InvShiftRows
  MixColumns   <-> InvMixColumns
  AddRoundKey  (self-inverse)
"""

from __future__ import annotations

from typing import Sequence

from .gf import gf_mul, xtime, sub_byte, inv_sub_byte
from .utils import State


INV_MIX_MATRIX = (
    (0x0e, 0x0b, 0x0d, 0x09),
    (0x09, 0x0e, 0x0b, 0x0d),
    (0x0d, 0x09, 0x0e, 0x0b),
    (0x0b, 0x0d, 0x09, 0x0e),
)


def add_round_key(state: State, round_key: Sequence[bytes]) -> State:
    """
    XOR the state with a round key.

    Round-key word c is laid out as state column c, so byte (r, c) is
    XORed with round_key[c][r].

    Args:
        state: 4x4 state
        round_key: Four 4-byte schedule words
    """
    return [
        [state[row][col] ^ round_key[col][row] for col in range(4)]
        for row in range(4)
    ]


def sub_bytes(state: State) -> State:
    return [[sub_byte(b) for b in row] for row in state]


def inv_sub_bytes(state: State) -> State:
    return [[inv_sub_byte(b) for b in row] for row in state]


def shift_rows(state: State) -> State:
    """Rotate row r left by r positions."""
    return [state[row][row:] + state[row][:row] for row in range(4)]


def inv_shift_rows(state: State) -> State:
    """Rotate row r right by r positions."""
    return [state[row][4 - row:] + state[row][:4 - row] for row in range(4)]


def mix_single_column(col: list[int]) -> list[int]:
    """
    Multiply one column by the MixColumns matrix.

      [02 03 01 01]
      [01 02 03 01]
      [01 01 02 03]
      [03 01 01 02]

    {03}*a is computed as xtime(a) ^ a.
    """
    a = col
    d = [xtime(x) for x in a]
    return [
        d[0] ^ (d[1] ^ a[1]) ^ a[2] ^ a[3],
        a[0] ^ d[1] ^ (d[2] ^ a[2]) ^ a[3],
        a[0] ^ a[1] ^ d[2] ^ (d[3] ^ a[3]),
        (d[0] ^ a[0]) ^ a[1] ^ a[2] ^ d[3],
    ]


def inv_mix_single_column(col: list[int]) -> list[int]:
    """
    Multiply one column by the InvMixColumns matrix.

      [0e 0b 0d 09]
      [09 0e 0b 0d]
      [0d 09 0e 0b]
      [0b 0d 09 0e]

    Each product goes through gf_mul(), which sums the {02}, {04}, {08}
    multiples of the byte given by xtime():
      09 = 08 + 01
      0b = 08 + 02 + 01
      0d = 08 + 04 + 01
      0e = 08 + 04 + 02
    """
    return [
        gf_mul(col[0], row[0]) ^ gf_mul(col[1], row[1])
        ^ gf_mul(col[2], row[2]) ^ gf_mul(col[3], row[3])
        for row in INV_MIX_MATRIX
    ]


def _map_columns(state: State, fn) -> State:
    result = [[0] * 4 for _ in range(4)]
    for col in range(4):
        mixed = fn([state[row][col] for row in range(4)])
        for row in range(4):
            result[row][col] = mixed[row]
    return result


def mix_columns(state: State) -> State:
    return _map_columns(state, mix_single_column)


def inv_mix_columns(state: State) -> State:
    return _map_columns(state, inv_mix_single_column)
