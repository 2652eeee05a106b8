"""
Exceptions raised by the AES core.

All errors derive from ValueError so existing `except ValueError`
handlers around key/block parsing keep working.
"""


class AESError(ValueError):
    """Base class for all AES core errors."""


class InvalidKeyLength(AESError):
    """Key material is not 16, 24 or 32 bytes."""

    def __init__(self, length: int):
        super().__init__(f"Key must be 16, 24 or 32 bytes, got {length}")
        self.length = length


class InvalidBlockLength(AESError):
    """Block is not exactly 16 bytes."""

    def __init__(self, length: int):
        super().__init__(f"Block must be 16 bytes, got {length}")
        self.length = length


class InvalidHex(AESError):
    """Input string is not valid hexadecimal."""

    def __init__(self, value: str, reason: str = ""):
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid hex string {value!r}{detail}")
        self.value = value
