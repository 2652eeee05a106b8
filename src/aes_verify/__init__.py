"""Verification of the AES core against a golden reference."""

__version__ = "1.0.0"

from .config import ValidationConfig
from .golden import golden_encrypt, golden_decrypt, validate_against_golden
from .harness import CheckResult, ValidationReport, validate

__all__ = [
    "ValidationConfig",
    "golden_encrypt",
    "golden_decrypt",
    "validate_against_golden",
    "CheckResult",
    "ValidationReport",
    "validate",
]
