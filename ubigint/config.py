"""Runtime configuration for BigInt."""

import os
from dataclasses import dataclass

from ubigint.constants import DEFAULT_UINT_BITS

_TRUTHY = ("true", "1", "yes")


@dataclass(frozen=True)
class BigIntConfig:
    """Configuration shared by all BigInt values.

    Attributes:
        uint_bits: Width of the fixed-width unsigned integer that BigInt
            converts from and to. Negative ints wrap modulo 2**uint_bits on
            construction and to_uint() truncates to this width (default: 32).
        check_underflow: If True, subtracting a larger value from a smaller
            one raises Underflow. If False, the borrow chain wraps silently
            and the receiver holds the wrapped value.
    """

    uint_bits: int = DEFAULT_UINT_BITS
    check_underflow: bool = False

    def __post_init__(self) -> None:
        if self.uint_bits < 1:
            raise ValueError(f"uint_bits must be positive, got {self.uint_bits}")

    @property
    def uint_mask(self) -> int:
        """All-ones mask of uint_bits width."""
        return (1 << self.uint_bits) - 1

    @classmethod
    def from_env(cls) -> "BigIntConfig":
        """Build a config from UBIGINT_* environment variables.

        UBIGINT_UINT_BITS: integer width (default: 32)
        UBIGINT_CHECK_UNDERFLOW: "true", "1" or "yes" to enable the check

        Raises:
            ValueError: If UBIGINT_UINT_BITS is not a positive integer
        """
        raw_bits = os.environ.get("UBIGINT_UINT_BITS", str(DEFAULT_UINT_BITS))
        try:
            uint_bits = int(raw_bits)
        except ValueError as err:
            raise ValueError(f"UBIGINT_UINT_BITS must be an integer: '{raw_bits}'") from err
        check_underflow = os.environ.get("UBIGINT_CHECK_UNDERFLOW", "false").lower() in _TRUTHY
        return cls(uint_bits=uint_bits, check_underflow=check_underflow)


# Default configuration instance
DEFAULT_CONFIG = BigIntConfig.from_env()
