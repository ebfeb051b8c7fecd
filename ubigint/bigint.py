"""Unsigned arbitrary-precision integer.

This module provides BigInt, a non-negative integer of unbounded size
held as a little-endian list of base-1000 digits (see ubigint.digits).

Usage pattern:
    from ubigint import BigInt

    a = BigInt("123456789012345678901234567890")
    b = BigInt(999)

    total = a + b        # new value, operands untouched
    a -= 1               # in place
    b.increment()        # ++b
    old = b.post_increment()  # b++

    str(total)           # decimal text
    total.to_uint()      # truncated to the configured width

Nothing here validates its input. Non-digit characters in text are
skipped, subtracting a larger value wraps, and to_uint() truncates. Set
BigIntConfig.check_underflow to turn the wrap into an Underflow error
while debugging.
"""

from __future__ import annotations

from typing import ClassVar

import structlog

from ubigint import digits as digit_ops
from ubigint.config import DEFAULT_CONFIG, BigIntConfig

logger = structlog.get_logger()


class BigIntError(ArithmeticError):
    """Base class for BigInt arithmetic errors."""

    pass


class Underflow(BigIntError):
    """Subtraction would produce a negative result (check_underflow only)."""

    pass


class BigInt:
    """Non-negative integer of arbitrary size.

    Values are compared, added and subtracted digit by digit; a plain
    ``int`` is accepted wherever a BigInt operand is, on either side of
    the operator. ``+=`` and ``-=`` mutate the receiver, so BigInt is
    unhashable.

    Attributes:
        config: Class-wide BigIntConfig (integer width, underflow check)
    """

    config: ClassVar[BigIntConfig] = DEFAULT_CONFIG

    __slots__ = ("_digits",)
    __hash__ = None  # type: ignore[assignment]  # Mutable via += and -=

    _digits: list[int]

    def __init__(self, value: str | int | BigInt = 0) -> None:
        """Create a BigInt from decimal text, an int, or another BigInt.

        Args:
            value: Decimal text (non-digit characters are ignored), an int
                (negative ints wrap to the configured width), or a BigInt
                to copy. Defaults to zero.

        Raises:
            TypeError: If value is not a str, int or BigInt
        """
        if isinstance(value, BigInt):
            self._digits = list(value._digits)
        elif isinstance(value, str):
            self._digits, skipped = digit_ops.parse_decimal(value)
            if skipped:
                logger.debug(
                    "bigint_string_skipped_chars",
                    skipped=skipped,
                    length=len(value),
                )
        elif isinstance(value, int):
            self._digits = digit_ops.from_uint(self._wrap_int(value))
        else:
            raise TypeError(f"BigInt requires str, int or BigInt, got {type(value).__name__}")

    @classmethod
    def _wrap_int(cls, value: int) -> int:
        """Reduce a negative int to the configured unsigned width."""
        if value < 0:
            return value & cls.config.uint_mask
        return value

    @classmethod
    def zero(cls) -> BigInt:
        """Create a BigInt with value 0."""
        return cls(0)

    @classmethod
    def from_str(cls, s: str) -> BigInt:
        """Parse decimal text, skipping any non-digit characters."""
        return cls(s)

    @classmethod
    def from_int(cls, i: int) -> BigInt:
        """Create from an int (negative values wrap to the configured width)."""
        return cls(i)

    def copy(self) -> BigInt:
        """Return an independent copy."""
        return BigInt(self)

    def __copy__(self) -> BigInt:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> BigInt:
        return self.copy()

    @property
    def digits(self) -> tuple[int, ...]:
        """Base-1000 digits, least-significant first."""
        return tuple(self._digits)

    @property
    def digit_count(self) -> int:
        """Number of base-1000 digits (at least 1)."""
        return len(self._digits)

    def __repr__(self) -> str:
        return f"BigInt('{self}')"

    def __str__(self) -> str:
        return digit_ops.to_decimal(self._digits)

    def to_str(self) -> str:
        """Decimal text with no leading zeros ("0" for zero)."""
        return str(self)

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._digits != [0]

    # --- Comparison operations ---

    def _compare(self, other: BigInt) -> int:
        return digit_ops.compare(self._digits, other._digits)

    def __eq__(self, other: object) -> bool:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return self._digits == other_big._digits

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: BigInt | int) -> bool:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return self._compare(other_big) < 0

    def __gt__(self, other: BigInt | int) -> bool:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return other_big._compare(self) < 0

    def __le__(self, other: BigInt | int) -> bool:
        result = self.__gt__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __ge__(self, other: BigInt | int) -> bool:
        result = self.__lt__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    # --- Arithmetic operations ---

    def _add(self, other: BigInt) -> BigInt:
        digit_ops.add_into(self._digits, other._digits)
        return self

    def _sub(self, other: BigInt) -> BigInt:
        """Subtract in place.

        Raises:
            Underflow: If config.check_underflow is set and other > self
        """
        if self.config.check_underflow and self._compare(other) < 0:
            raise Underflow(f"Underflow: {self} - {other}")

        left_count = len(self._digits)
        if digit_ops.sub_into(self._digits, other._digits):
            logger.warning(
                "bigint_subtraction_underflow",
                left_digits=left_count,
                right_digits=len(other._digits),
                reason="Right operand exceeds left, result wrapped",
            )
        return self

    def __iadd__(self, other: BigInt | int) -> BigInt:
        """Add in place."""
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return self._add(other_big)

    def __isub__(self, other: BigInt | int) -> BigInt:
        """Subtract in place. Wraps if other > self (see module docstring)."""
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return self._sub(other_big)

    def __add__(self, other: BigInt | int) -> BigInt:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return self.copy()._add(other_big)

    def __radd__(self, other: int) -> BigInt:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return other_big._add(self)

    def __sub__(self, other: BigInt | int) -> BigInt:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return self.copy()._sub(other_big)

    def __rsub__(self, other: int) -> BigInt:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return other_big._sub(self)

    # --- Increment / decrement ---

    def increment(self) -> BigInt:
        """Add one in place and return self (prefix ++)."""
        return self._add(BigInt(1))

    def decrement(self) -> BigInt:
        """Subtract one in place and return self (prefix --)."""
        return self._sub(BigInt(1))

    def post_increment(self) -> BigInt:
        """Add one in place and return the previous value (postfix ++)."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> BigInt:
        """Subtract one in place and return the previous value (postfix --)."""
        previous = self.copy()
        self.decrement()
        return previous

    # --- Conversion ---

    def to_uint(self, bits: int | None = None) -> int:
        """Convert to a fixed-width unsigned int, dropping high bits.

        Args:
            bits: Target width (default: config.uint_bits)

        Returns:
            The value modulo 2**bits
        """
        width = self.config.uint_bits if bits is None else bits
        value, truncated = digit_ops.to_uint(self._digits, width)
        if truncated:
            logger.debug(
                "bigint_uint_truncated",
                bits=width,
                digit_count=len(self._digits),
                result=value,
            )
        return value

    def __int__(self) -> int:
        """Convert with to_uint() at the configured width."""
        return self.to_uint()


def _coerce(x: object) -> BigInt | None:
    """Return x as a BigInt, or None if it is not a BigInt or int."""
    if isinstance(x, BigInt):
        return x
    if isinstance(x, int):
        return BigInt(x)
    return None
