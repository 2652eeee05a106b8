"""
Byte/state conversions and hex formatting.

The AES state is a 4x4 matrix of bytes, state[row][col].  A 16-byte
block is loaded column by column (FIPS-197 Section 3.4):

  block[r + 4*c] -> state[r][c]

  block[0]  -> state[0][0]
  block[1]  -> state[1][0]
  block[2]  -> state[2][0]
  block[3]  -> state[3][0]
  block[4]  -> state[0][1]
  ...
  block[15] -> state[3][3]
"""

from .errors import InvalidBlockLength, InvalidHex

BLOCK_SIZE = 16

State = list[list[int]]


def bytes_to_state(block: bytes) -> State:
    """
    Load a 16-byte block into a 4x4 state (column-major).

    Args:
        block: 16 bytes (bytes, bytearray or memoryview)

    Returns:
        4x4 list of ints (0-255)

    Raises:
        TypeError: If block is not bytes-like
        InvalidBlockLength: If block is not 16 bytes
    """
    if not isinstance(block, (bytes, bytearray, memoryview)):
        raise TypeError(f"Block must be bytes-like, got {type(block).__name__}")
    if len(block) != BLOCK_SIZE:
        raise InvalidBlockLength(len(block))

    data = bytes(block)
    return [[data[row + 4 * col] for col in range(4)] for row in range(4)]


def state_to_bytes(state: State) -> bytes:
    """Store a 4x4 state back to 16 bytes (inverse of bytes_to_state)."""
    return bytes(state[row][col] for col in range(4) for row in range(4))


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert a hex string to bytes.

    Raises:
        InvalidHex: If the string is not valid hex
    """
    try:
        return bytes.fromhex(hex_str)
    except ValueError as e:
        raise InvalidHex(hex_str, str(e)) from None


def bytes_to_hex(data: bytes) -> str:
    """Lowercase hex string."""
    return data.hex()


def state_to_hex(state: State) -> str:
    return bytes_to_hex(state_to_bytes(state))


def format_state_grid(state: State) -> str:
    """
    Format state as a readable 4x4 grid.

    Returns multi-line string like:
      19 a0 9a e9
      3d f4 c6 f8
      e3 e2 8d 48
      be 2b 2a 08
    """
    lines = []
    for row in range(4):
        lines.append("  " + " ".join(f"{state[row][col]:02x}" for col in range(4)))
    return "\n".join(lines)


def format_words(words) -> str:
    """Format 4-byte words as space-separated hex."""
    return " ".join(bytes(w).hex() for w in words)


def copy_state(state: State) -> State:
    return [row[:] for row in state]


def xor_words(a: bytes, b: bytes) -> bytes:
    """XOR two byte sequences of equal length."""
    if len(a) != len(b):
        raise ValueError(f"Length mismatch: {len(a)} vs {len(b)}")
    return bytes(x ^ y for x, y in zip(a, b))
