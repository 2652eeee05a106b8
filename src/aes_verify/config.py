"""Configuration for verification runs."""

from __future__ import annotations

from dataclasses import dataclass, field


SUPPORTED_KEY_SIZES = (128, 192, 256)


@dataclass
class ValidationConfig:
    """Configuration object for a verification run.

    Drives which key sizes are exercised and how many random vectors are
    cross-checked against the golden reference.
    """

    # Key sizes in bits to exercise with random vectors
    key_sizes: tuple[int, ...] = field(default_factory=lambda: SUPPORTED_KEY_SIZES)

    # Number of random (key, block) pairs per key size
    num_random: int = 100

    # Seed for reproducible random vectors (None = secrets module)
    seed: int | None = None

    # Also check decrypt() against the reference and round-trip
    check_decrypt: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        self.key_sizes = tuple(self.key_sizes)
        if not self.key_sizes:
            raise ValueError("key_sizes must not be empty")
        for bits in self.key_sizes:
            if bits not in SUPPORTED_KEY_SIZES:
                raise ValueError(f"key size must be 128, 192 or 256, got {bits}")
        if self.num_random < 0:
            raise ValueError(f"num_random must be >= 0, got {self.num_random}")

    @property
    def total_random(self) -> int:
        """Total random vectors across all key sizes."""
        return self.num_random * len(self.key_sizes)
