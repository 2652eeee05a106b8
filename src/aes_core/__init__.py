"""
AES Core

From-scratch FIPS-197 AES block cipher:
1. Key schedule for 128/192/256-bit keys
2. Forward and inverse round transformations on the 4x4 state
3. Single-block encrypt/decrypt facade
"""

__version__ = "1.0.0"

# Default AES-128 test values from FIPS-197 Appendix B
DEFAULT_KEY_HEX = "2b7e151628aed2a6abf7158809cf4f3c"
DEFAULT_PT_HEX = "3243f6a8885a308d313198a2e0370734"
DEFAULT_CT_HEX = "3925841d02dc09fbdc118597196a0b32"

from .errors import AESError, InvalidKeyLength, InvalidBlockLength, InvalidHex
from .key import AESKey, KeySize
from .key_schedule import RoundKeySchedule, key_expansion
from .cipher import AESCipher, encrypt_block, decrypt_block
from .trace import TraceRecorder

__all__ = [
    "AESError",
    "InvalidKeyLength",
    "InvalidBlockLength",
    "InvalidHex",
    "AESKey",
    "KeySize",
    "RoundKeySchedule",
    "key_expansion",
    "AESCipher",
    "encrypt_block",
    "decrypt_block",
    "TraceRecorder",
]
