"""Representation constants for BigInt.

Centralizes the radix of the internal digit sequence and the default
width of the fixed-width integer conversions.
"""

# Radix of one big digit. Must be a power of ten so that each digit renders
# as a fixed-width group of decimal characters.
RADIX = 1000


def _chunk_width(radix: int) -> int:
    """Number of decimal characters held by one big digit."""
    width = 0
    while radix > 1:
        width += 1
        radix //= 10
    return width


# Decimal characters per big digit (3 for RADIX = 1000)
CHUNK_WIDTH = _chunk_width(RADIX)

# Width of the "machine integer" used by from-int wrapping and to_uint()
DEFAULT_UINT_BITS = 32
