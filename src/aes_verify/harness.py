"""Cross-checking of aes_core against the golden reference.

Three kinds of checks are run:
- kat:      FIPS-197 known-answer vectors (encrypt, and decrypt if enabled)
- schedule: key-schedule length and final word
- random:   random (key, block) pairs compared with PyCryptodome
"""

from __future__ import annotations

import random
import secrets
from dataclasses import dataclass, field
from typing import Any, Callable

from aes_core.cipher import AESCipher
from aes_core.key import KeySize
from aes_core.key_schedule import key_expansion

from .config import ValidationConfig
from .golden import (
    FIPS_197_TEST_VECTORS,
    KEY_SCHEDULE_VECTORS,
    golden_decrypt,
    validate_against_golden,
)


@dataclass
class CheckResult:
    """Outcome of a single check."""

    kind: str
    name: str
    key_bits: int
    correct: bool
    error_detail: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "name": self.name,
            "key_bits": self.key_bits,
            "correct": self.correct,
            "error_detail": self.error_detail,
        }


@dataclass
class ValidationReport:
    """Collected results of a verification run."""

    config: ValidationConfig
    results: list[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.correct)

    @property
    def failed(self) -> int:
        return len(self.results) - self.passed

    @property
    def all_passed(self) -> bool:
        return self.failed == 0

    def failures(self) -> list[CheckResult]:
        return [r for r in self.results if not r.correct]

    def by_kind(self) -> dict[str, tuple[int, int]]:
        """Map check kind to (passed, total)."""
        summary: dict[str, tuple[int, int]] = {}
        for r in self.results:
            passed, total = summary.get(r.kind, (0, 0))
            summary[r.kind] = (passed + int(r.correct), total + 1)
        return summary

    def to_dict(self) -> dict[str, Any]:
        return {
            "config": {
                "key_sizes": list(self.config.key_sizes),
                "num_random": self.config.num_random,
                "seed": self.config.seed,
                "check_decrypt": self.config.check_decrypt,
            },
            "passed": self.passed,
            "failed": self.failed,
            "all_passed": self.all_passed,
            "results": [r.to_dict() for r in self.results],
        }


def check_block(
    kind: str,
    name: str,
    key: bytes,
    plaintext: bytes,
    expected_ciphertext: bytes | None = None,
    check_decrypt: bool = True,
) -> CheckResult:
    """Encrypt (and optionally decrypt) one block and compare with the reference.

    Args:
        kind: Check kind label
        name: Human readable name
        key: AES key bytes
        plaintext: 16-byte plaintext
        expected_ciphertext: Known answer; if given it must also match
        check_decrypt: Also verify decrypt() and the round trip

    Returns:
        CheckResult
    """
    cipher = AESCipher(key)
    key_bits = len(key) * 8

    ciphertext = cipher.encrypt(plaintext)
    correct, detail = validate_against_golden(key, plaintext, ciphertext)
    if correct and expected_ciphertext is not None and ciphertext != expected_ciphertext:
        correct, detail = False, (
            f"Known answer mismatch: expected {expected_ciphertext.hex()}, "
            f"got {ciphertext.hex()}"
        )

    if correct and check_decrypt:
        recovered = cipher.decrypt(ciphertext)
        if recovered != plaintext:
            correct, detail = False, (
                f"Round trip failed: expected {plaintext.hex()}, got {recovered.hex()}"
            )
        else:
            decrypted = cipher.decrypt(plaintext)
            expected = golden_decrypt(key, plaintext)
            if decrypted != expected:
                correct, detail = False, (
                    f"Plaintext mismatch: expected {expected.hex()}, "
                    f"got {decrypted.hex()}"
                )

    return CheckResult(kind, name, key_bits, correct, detail)


def run_known_answer_tests(config: ValidationConfig) -> list[CheckResult]:
    """Run the FIPS-197 known-answer vectors."""
    return [
        check_block(
            "kat",
            vec["name"],
            vec["key"],
            vec["plaintext"],
            expected_ciphertext=vec["ciphertext"],
            check_decrypt=config.check_decrypt,
        )
        for vec in FIPS_197_TEST_VECTORS
    ]


def run_schedule_tests() -> list[CheckResult]:
    """Check schedule length and final word for each key size."""
    results = []
    for vec in KEY_SCHEDULE_VECTORS:
        schedule = key_expansion(vec["key"])
        detail = ""
        if len(schedule) != vec["length"]:
            detail = f"Schedule length: expected {vec['length']}, got {len(schedule)}"
        elif schedule[-1] != vec["last_word"]:
            detail = (
                f"Last word mismatch: expected {vec['last_word'].hex()}, "
                f"got {schedule[-1].hex()}"
            )
        results.append(
            CheckResult("schedule", vec["name"], len(vec["key"]) * 8, not detail, detail)
        )
    return results


def _byte_source(seed: int | None) -> Callable[[int], bytes]:
    if seed is None:
        return secrets.token_bytes
    rng = random.Random(seed)
    return lambda n: bytes(rng.randint(0, 255) for _ in range(n))


def run_random_tests(config: ValidationConfig) -> list[CheckResult]:
    """Cross-check random vectors for each configured key size."""
    random_bytes = _byte_source(config.seed)
    results = []
    for bits in config.key_sizes:
        size = KeySize.from_bits(bits)
        for i in range(config.num_random):
            key = random_bytes(size.key_bytes)
            pt = random_bytes(16)
            results.append(
                check_block(
                    "random",
                    f"AES-{bits} random #{i + 1} key={key.hex()} pt={pt.hex()}",
                    key,
                    pt,
                    check_decrypt=config.check_decrypt,
                )
            )
    return results


def validate(config: ValidationConfig | None = None) -> ValidationReport:
    """Run every check and collect a report."""
    config = config or ValidationConfig()
    report = ValidationReport(config=config)
    report.results.extend(run_known_answer_tests(config))
    report.results.extend(run_schedule_tests())
    report.results.extend(run_random_tests(config))
    return report
