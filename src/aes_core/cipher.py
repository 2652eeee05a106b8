"""
AES block cipher (FIPS-197 Sections 5.1 and 5.3).

An AESCipher binds one key to its expanded schedule.  encrypt() and
decrypt() transform exactly one 16-byte block and keep no per-call state
on the instance.

Round structure (Nr = 10/12/14):

  encrypt:  AddRoundKey(0)
            rounds 1..Nr-1: SubBytes, ShiftRows, MixColumns, AddRoundKey(r)
            round Nr:       SubBytes, ShiftRows, AddRoundKey(Nr)

  decrypt:  AddRoundKey(Nr)
            rounds Nr-1..1: InvShiftRows, InvSubBytes, AddRoundKey(r), InvMixColumns
            round 0:        InvShiftRows, InvSubBytes, AddRoundKey(0)
"""

from __future__ import annotations

from .key import AESKey, KeyLike, coerce_key
from .key_schedule import RoundKeySchedule, key_expansion
from .state_ops import (
    add_round_key,
    sub_bytes,
    inv_sub_bytes,
    shift_rows,
    inv_shift_rows,
    mix_columns,
    inv_mix_columns,
)
from .trace import TraceRecorder
from .utils import State, bytes_to_state, state_to_bytes, copy_state


# Keyless round operations by name; AddRoundKey is handled separately
_OPERATIONS = {
    "SubBytes": sub_bytes,
    "InvSubBytes": inv_sub_bytes,
    "ShiftRows": shift_rows,
    "InvShiftRows": inv_shift_rows,
    "MixColumns": mix_columns,
    "InvMixColumns": inv_mix_columns,
}

ENCRYPT_ROUND = ("SubBytes", "ShiftRows", "MixColumns", "AddRoundKey")
ENCRYPT_FINAL_ROUND = ("SubBytes", "ShiftRows", "AddRoundKey")
DECRYPT_ROUND = ("InvShiftRows", "InvSubBytes", "AddRoundKey", "InvMixColumns")
DECRYPT_FINAL_ROUND = ("InvShiftRows", "InvSubBytes", "AddRoundKey")


class AESCipher:
    """
    AES-128/192/256 single-block cipher.

    The key and its schedule are stored as one pair and replaced together
    by set_key(), so readers always see a matching key and schedule.
    Concurrent encrypt/decrypt calls are safe; set_key() must not overlap
    them if callers need every in-flight call to use the old key.
    """

    def __init__(self, key: KeyLike):
        """
        Args:
            key: AESKey or raw key bytes (16, 24 or 32)

        Raises:
            InvalidKeyLength: If raw key bytes have an unsupported length
        """
        self._keyed: tuple[AESKey, RoundKeySchedule] = self._derive(key)

    @staticmethod
    def _derive(key: KeyLike) -> tuple[AESKey, RoundKeySchedule]:
        key = coerce_key(key)
        return key, key_expansion(key)

    @property
    def key(self) -> AESKey:
        """Currently active key."""
        return self._keyed[0]

    @property
    def schedule(self) -> RoundKeySchedule:
        return self._keyed[1]

    @property
    def rounds(self) -> int:
        return self._keyed[0].nr

    def set_key(self, key: KeyLike) -> None:
        """
        Replace the key and recompute the schedule.

        The new schedule is computed before anything is replaced; on an
        invalid key the previous key stays active.
        """
        self._keyed = self._derive(key)

    def encrypt(self, block: bytes, tracer: TraceRecorder | None = None) -> bytes:
        """
        Encrypt a single 16-byte block.

        Args:
            block: 16-byte plaintext
            tracer: Optional trace recorder for intermediate states

        Returns:
            16-byte ciphertext

        Raises:
            InvalidBlockLength: If block is not 16 bytes
        """
        _, schedule = self._keyed
        nr = schedule.rounds

        state = bytes_to_state(block)
        _trace(tracer, "encrypt", 0, "Input", state)

        state = _run_round(state, 0, ("AddRoundKey",), schedule, tracer, "encrypt")
        for round_num in range(1, nr):
            state = _run_round(state, round_num, ENCRYPT_ROUND, schedule, tracer, "encrypt")
        state = _run_round(state, nr, ENCRYPT_FINAL_ROUND, schedule, tracer, "encrypt")

        return state_to_bytes(state)

    def decrypt(self, block: bytes, tracer: TraceRecorder | None = None) -> bytes:
        """
        Decrypt a single 16-byte block.

        Args:
            block: 16-byte ciphertext
            tracer: Optional trace recorder for intermediate states

        Returns:
            16-byte plaintext

        Raises:
            InvalidBlockLength: If block is not 16 bytes
        """
        _, schedule = self._keyed
        nr = schedule.rounds

        state = bytes_to_state(block)
        _trace(tracer, "decrypt", nr, "Input", state)

        state = _run_round(state, nr, ("AddRoundKey",), schedule, tracer, "decrypt")
        for round_num in range(nr - 1, 0, -1):
            state = _run_round(state, round_num, DECRYPT_ROUND, schedule, tracer, "decrypt")
        state = _run_round(state, 0, DECRYPT_FINAL_ROUND, schedule, tracer, "decrypt")

        return state_to_bytes(state)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AESCipher):
            return NotImplemented
        return self._keyed == other._keyed

    def __hash__(self) -> int:
        return hash(self._keyed)

    def __repr__(self) -> str:
        return f"AESCipher(size={self.key.size.name})"


def _run_round(
    state: State,
    round_num: int,
    operations: tuple[str, ...],
    schedule: RoundKeySchedule,
    tracer: TraceRecorder | None,
    direction: str,
) -> State:
    """Apply `operations` in order, using the schedule words of `round_num`."""
    for op in operations:
        if op == "AddRoundKey":
            round_key = schedule.round_key(round_num)
            state = add_round_key(state, round_key)
            _trace(tracer, direction, round_num, op, state, round_key)
        else:
            state = _OPERATIONS[op](state)
            _trace(tracer, direction, round_num, op, state)
    return state


def _trace(
    tracer: TraceRecorder | None,
    direction: str,
    round_num: int,
    operation: str,
    state: State,
    round_key: tuple[bytes, ...] | None = None,
) -> None:
    if tracer is None:
        return
    fields = {
        "direction": direction,
        "round": round_num,
        "operation": operation,
        "state": copy_state(state),
    }
    if round_key is not None:
        fields["round_key"] = list(round_key)
    tracer.record(**fields)


def encrypt_block(key: KeyLike, block: bytes) -> bytes:
    """Convenience function: encrypt one block under `key`."""
    return AESCipher(key).encrypt(block)


def decrypt_block(key: KeyLike, block: bytes) -> bytes:
    """Convenience function: decrypt one block under `key`."""
    return AESCipher(key).decrypt(block)
