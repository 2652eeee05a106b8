"""
Tests for the round transformations.

Intermediate values are taken from FIPS-197 Appendix B (round 1 of
the AES-128 example) and the original unit vectors for each operation.
"""

import random

import pytest

from aes_core.key_schedule import key_expansion
from aes_core.state_ops import (
    add_round_key,
    sub_bytes,
    inv_sub_bytes,
    shift_rows,
    inv_shift_rows,
    mix_columns,
    inv_mix_columns,
    mix_single_column,
    inv_mix_single_column,
)
from aes_core.utils import bytes_to_state, state_to_hex, copy_state


def hex_to_state(hex_str: str) -> list[list[int]]:
    return bytes_to_state(bytes.fromhex(hex_str))


# FIPS-197 Appendix B, round 1
ROUND1_START = "193de3bea0f4e22b9ac68d2ae9f84808"
ROUND1_AFTER_SUB_BYTES = "d42711aee0bf98f1b8b45de51e415230"
ROUND1_AFTER_SHIFT_ROWS = "d4bf5d30e0b452aeb84111f11e2798e5"
ROUND1_AFTER_MIX_COLUMNS = "046681e5e0cb199a48f8d37a2806264c"
ROUND2_START = "a49c7ff2689f352b6b5bea43026a5049"
FIPS_KEY = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")


def random_state(rng: random.Random) -> list[list[int]]:
    return [[rng.randint(0, 255) for _ in range(4)] for _ in range(4)]


class TestAddRoundKey:
    """Tests for AddRoundKey."""

    @pytest.mark.parametrize("key_hex", [
        "000102030405060708090a0b0c0d0e0f",
        "000102030405060708090a0b0c0d0e0f1011121314151617",
        "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f",
    ])
    def test_first_round_key(self, key_hex):
        """Round key words are applied as state columns."""
        original = [
            [0x00, 0x44, 0x88, 0xcc],
            [0x11, 0x55, 0x99, 0xdd],
            [0x22, 0x66, 0xaa, 0xee],
            [0x33, 0x77, 0xbb, 0xff],
        ]
        expected = [
            [0x00, 0x40, 0x80, 0xc0],
            [0x10, 0x50, 0x90, 0xd0],
            [0x20, 0x60, 0xa0, 0xe0],
            [0x30, 0x70, 0xb0, 0xf0],
        ]
        round_key = key_expansion(bytes.fromhex(key_hex)).round_key(0)

        result = add_round_key(original, round_key)
        assert result == expected
        assert add_round_key(result, round_key) == original

    def test_fips_round1(self):
        schedule = key_expansion(FIPS_KEY)
        state = add_round_key(hex_to_state(ROUND1_AFTER_MIX_COLUMNS), schedule.round_key(1))
        assert state_to_hex(state) == ROUND2_START

    @pytest.mark.parametrize("seed", range(5))
    def test_self_inverse(self, seed):
        rng = random.Random(seed)
        state = random_state(rng)
        round_key = tuple(bytes(rng.randint(0, 255) for _ in range(4)) for _ in range(4))
        assert add_round_key(add_round_key(state, round_key), round_key) == state


class TestSubBytes:
    """Tests for SubBytes / InvSubBytes."""

    def test_fips_round1(self):
        state = sub_bytes(hex_to_state(ROUND1_START))
        assert state_to_hex(state) == ROUND1_AFTER_SUB_BYTES

    def test_inverse_fips_round1(self):
        state = inv_sub_bytes(hex_to_state(ROUND1_AFTER_SUB_BYTES))
        assert state_to_hex(state) == ROUND1_START

    @pytest.mark.parametrize("seed", range(5))
    def test_round_trip(self, seed):
        state = random_state(random.Random(seed))
        assert inv_sub_bytes(sub_bytes(state)) == state
        assert sub_bytes(inv_sub_bytes(state)) == state


class TestShiftRows:
    """Tests for ShiftRows / InvShiftRows."""

    def test_rotation_amounts(self):
        original = [
            [0x00, 0x01, 0x02, 0x03],
            [0x10, 0x11, 0x12, 0x13],
            [0x20, 0x21, 0x22, 0x23],
            [0x30, 0x31, 0x32, 0x33],
        ]
        shifted = [
            [0x00, 0x01, 0x02, 0x03],
            [0x11, 0x12, 0x13, 0x10],
            [0x22, 0x23, 0x20, 0x21],
            [0x33, 0x30, 0x31, 0x32],
        ]
        assert shift_rows(original) == shifted
        assert inv_shift_rows(shifted) == original

    def test_fips_round1(self):
        state = shift_rows(hex_to_state(ROUND1_AFTER_SUB_BYTES))
        assert state_to_hex(state) == ROUND1_AFTER_SHIFT_ROWS

    def test_input_not_mutated(self):
        state = hex_to_state(ROUND1_START)
        before = copy_state(state)
        shift_rows(state)
        inv_shift_rows(state)
        assert state == before


class TestMixColumns:
    """Tests for MixColumns / InvMixColumns."""

    def test_known_columns(self):
        original = [
            [0xdb, 0xf2, 0x01, 0xc6],
            [0x13, 0x0a, 0x01, 0xc6],
            [0x53, 0x22, 0x01, 0xc6],
            [0x45, 0x5c, 0x01, 0xc6],
        ]
        mixed = [
            [0x8e, 0x9f, 0x01, 0xc6],
            [0x4d, 0xdc, 0x01, 0xc6],
            [0xa1, 0x58, 0x01, 0xc6],
            [0xbc, 0x9d, 0x01, 0xc6],
        ]
        assert mix_columns(original) == mixed
        assert inv_mix_columns(mixed) == original

    def test_single_column(self):
        assert mix_single_column([0xd4, 0xbf, 0x5d, 0x30]) == [0x04, 0x66, 0x81, 0xe5]
        assert inv_mix_single_column([0x04, 0x66, 0x81, 0xe5]) == [0xd4, 0xbf, 0x5d, 0x30]

    def test_fips_round1(self):
        state = mix_columns(hex_to_state(ROUND1_AFTER_SHIFT_ROWS))
        assert state_to_hex(state) == ROUND1_AFTER_MIX_COLUMNS

    @pytest.mark.parametrize("seed", range(10))
    def test_round_trip(self, seed):
        state = random_state(random.Random(seed))
        assert inv_mix_columns(mix_columns(state)) == state
        assert mix_columns(inv_mix_columns(state)) == state

    def test_input_not_mutated(self):
        state = hex_to_state(ROUND1_AFTER_SHIFT_ROWS)
        before = copy_state(state)
        mix_columns(state)
        assert state == before
