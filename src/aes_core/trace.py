"""
Trace recording and pretty printing for AES operations.

Contains:
- TraceRecorder: JSON Lines trace file + compact verbose stdout
- print_header / print_result: shared formatting helpers
"""

import json
from typing import Any, TextIO

from .utils import state_to_hex


class TraceRecorder:
    """
    Records intermediate states of an encrypt/decrypt call.

    Supports:
    - JSON Lines file output (when trace_file is set)
    - Compact verbose stdout (when verbose is set)
    - In-memory records (always)
    """

    def __init__(self, verbose: bool = False, trace_file: TextIO | None = None):
        self.verbose = verbose
        self.trace_file = trace_file
        self._records: list[dict[str, Any]] = []

    def record(self, **kwargs) -> None:
        """
        Record a trace entry.

        Conventional fields: direction, round, operation, state
        (4x4 list) and, for AddRoundKey, round_key (list of 4-byte words).
        """
        self._records.append(kwargs)

        if self.trace_file:
            self._write_jsonl(kwargs)

        if self.verbose:
            self._print_verbose(kwargs)

    def _write_jsonl(self, record: dict[str, Any]) -> None:
        serializable = self._make_serializable(record)
        self.trace_file.write(json.dumps(serializable) + "\n")
        self.trace_file.flush()

    def _make_serializable(self, obj: Any) -> Any:
        if isinstance(obj, dict):
            return {k: self._make_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [self._make_serializable(item) for item in obj]
        elif isinstance(obj, (bytes, bytearray)):
            return bytes(obj).hex()
        else:
            return obj

    def _print_verbose(self, record: dict[str, Any]) -> None:
        round_num = record.get("round", "?")
        operation = record.get("operation", "unknown")

        line = f"R{round_num:>2} {operation:16s}"
        if "state" in record:
            line += f" STATE:{state_to_hex(record['state'])}"
        if "round_key" in record:
            line += f" KEY:{''.join(bytes(w).hex() for w in record['round_key'])}"
        print(line)

    def get_records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()


def print_header(title: str) -> None:
    """Print a section header."""
    print(f"\n{'#'*70}")
    print(f"# {title}")
    print(f"{'#'*70}")


def print_result(output_hex: str, rounds: int, passed: bool = True) -> None:
    """Print final block result and verification status."""
    print(f"\n{'='*70}")
    print("RESULT")
    print(f"{'='*70}")
    print(f"Output: {output_hex}")
    print(f"Rounds: {rounds}")

    status = "PASS" if passed else "FAIL"
    marker = "[OK]" if passed else "[ERROR]"
    print(f"Verification: {marker} {status}")
    print(f"{'='*70}")
