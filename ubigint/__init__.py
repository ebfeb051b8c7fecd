"""Unsigned arbitrary-precision integers on base-1000 digits."""

from ubigint.bigint import BigInt, BigIntError, Underflow
from ubigint.config import DEFAULT_CONFIG, BigIntConfig
from ubigint.constants import CHUNK_WIDTH, RADIX

__version__ = "0.1.0"
__all__ = [
    "BigInt",
    "BigIntConfig",
    "BigIntError",
    "CHUNK_WIDTH",
    "DEFAULT_CONFIG",
    "RADIX",
    "Underflow",
    "__version__",
]
