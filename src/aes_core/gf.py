"""
GF(2^8) arithmetic and S-box lookups.

Field elements are ints in 0..255.  Multiplication is reduced modulo
x^8 + x^4 + x^3 + x + 1.  Every constant multiplication used by
(Inv)MixColumns is composed from xtime() and XOR.
"""

from .tables import SBOX, INV_SBOX, REDUCTION_POLY


def xtime(b: int) -> int:
    """Multiply by x (i.e. {02}) in GF(2^8)."""
    if b & 0x80:
        return ((b << 1) ^ REDUCTION_POLY) & 0xff
    return (b << 1) & 0xff


def gf_mul(a: int, b: int) -> int:
    """
    Multiply two field elements by shift-and-add.

    Each set bit of `b` contributes `a * x^i`, where the powers of x are
    produced by repeated xtime().

    Args:
        a: Field element (0..255)
        b: Field element (0..255)

    Returns:
        Product in GF(2^8)
    """
    result = 0
    while b:
        if b & 1:
            result ^= a
        a = xtime(a)
        b >>= 1
    return result


def sub_byte(b: int) -> int:
    """S-box lookup: high nibble selects the row, low nibble the column."""
    return SBOX[b >> 4][b & 0x0f]


def inv_sub_byte(b: int) -> int:
    """Inverse S-box lookup."""
    return INV_SBOX[b >> 4][b & 0x0f]
