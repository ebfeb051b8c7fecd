"""Digit-sequence algorithms behind BigInt.

A value is held as a little-endian ``list[int]`` of big digits in base
``RADIX``: index 0 is the least-significant digit. Every function here
expects (and, where it mutates, restores) canonical form:

- the list is never empty (zero is ``[0]``)
- the most-significant digit is non-zero unless the value is zero
- every digit satisfies ``0 <= digit < RADIX``

The functions work on plain lists so they can be tested without the
BigInt wrapper. Only ``add_into`` and ``sub_into`` mutate their first
argument; the right-hand operand is never modified.
"""

from __future__ import annotations

import string
from collections.abc import Sequence

from ubigint.constants import CHUNK_WIDTH, RADIX

__all__ = [
    "canonicalize",
    "parse_decimal",
    "from_uint",
    "compare",
    "add_into",
    "sub_into",
    "to_decimal",
    "to_uint",
]

_DECIMAL_DIGITS = frozenset(string.digits)


def canonicalize(digits: list[int]) -> None:
    """Strip most-significant zero digits, keeping at least one digit."""
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()


def parse_decimal(text: str) -> tuple[list[int], int]:
    """Parse decimal text into canonical digits.

    Characters that are not ASCII decimal digits are skipped without
    consuming a digit position, so "12a3b4" parses as 1234 and text with
    no digits at all parses as zero.

    Returns:
        Tuple of (digits, number of skipped characters)
    """
    digits: list[int] = []
    skipped = 0
    value = 0
    multiplier = 1

    for char in reversed(text):
        if char not in _DECIMAL_DIGITS:
            skipped += 1
            continue
        value += (ord(char) - ord("0")) * multiplier
        multiplier *= 10
        if multiplier == RADIX:
            digits.append(value)
            value = 0
            multiplier = 1

    if value != 0 or not digits:
        digits.append(value)

    canonicalize(digits)
    return digits, skipped


def from_uint(value: int) -> list[int]:
    """Split a non-negative int into digits, least-significant first.

    The loop always runs once, so 0 becomes ``[0]``.
    """
    digits = [value % RADIX]
    value //= RADIX
    while value != 0:
        digits.append(value % RADIX)
        value //= RADIX
    return digits


def compare(left: Sequence[int], right: Sequence[int]) -> int:
    """Three-way compare two canonical digit sequences.

    Returns:
        -1 if left < right, 0 if equal, 1 if left > right
    """
    # Canonical form: more digits always means a larger value
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    for index in range(len(left) - 1, -1, -1):
        if left[index] != right[index]:
            return -1 if left[index] < right[index] else 1
    return 0


def add_into(target: list[int], other: Sequence[int]) -> None:
    """Add ``other`` into ``target`` in place (grade-school, with carry)."""
    if other is target:
        other = list(other)

    if len(other) > len(target):
        target.extend([0] * (len(other) - len(target)))

    carry = 0
    for index in range(len(target)):
        total = target[index] + carry
        if index < len(other):
            total += other[index]
        elif carry == 0:
            break
        if total >= RADIX:
            total -= RADIX
            carry = 1
        else:
            carry = 0
        target[index] = total

    # Carry is at most 1 since both digits are below RADIX
    if carry == 1:
        target.append(1)


def sub_into(target: list[int], other: Sequence[int]) -> bool:
    """Subtract ``other`` from ``target`` in place (grade-school, with borrow).

    Assumes ``target >= other``. This is not checked: when ``other`` is
    larger, the borrow falls off the most-significant digit and ``target``
    is left holding ``target - other + RADIX ** n`` (n being the digit
    count of the longer operand), canonicalized. The result is wrong but
    deterministic.

    Returns:
        True if a borrow was left over (the subtraction wrapped)
    """
    if other is target:
        other = list(other)

    if len(other) > len(target):
        target.extend([0] * (len(other) - len(target)))

    borrow = 0
    for index in range(len(target)):
        digit = target[index]
        if index < len(other):
            subtrahend = borrow + other[index]
            if digit >= subtrahend:
                target[index] = digit - subtrahend
                borrow = 0
            else:
                target[index] = digit + RADIX - subtrahend
                borrow = 1
        elif borrow == 0:
            break
        elif digit != 0:
            target[index] = digit - 1
            borrow = 0
        else:
            target[index] = RADIX - 1

    canonicalize(target)
    return borrow == 1


def to_decimal(digits: Sequence[int]) -> str:
    """Render digits as decimal text with no leading zeros ("0" for zero)."""
    # Every group is padded so embedded zeros survive ("1007" not "17")
    rendered = "".join(f"{digit:0{CHUNK_WIDTH}d}" for digit in reversed(digits))
    return rendered.lstrip("0") or "0"


def to_uint(digits: Sequence[int], bits: int) -> tuple[int, bool]:
    """Sum ``digit * RADIX**index`` with wrapping at ``bits`` width.

    Every step is reduced modulo ``2**bits`` the way fixed-width unsigned
    arithmetic wraps, so the result equals the exact value modulo
    ``2**bits``.

    Returns:
        Tuple of (wrapped value, True if any high bits were dropped)
    """
    mask = (1 << bits) - 1
    result = 0
    multiplier = 1
    multiplier_wrapped = False
    truncated = False

    for digit in digits:
        total = result + digit * multiplier
        if digit != 0 and (multiplier_wrapped or total > mask):
            truncated = True
        result = total & mask
        multiplier *= RADIX
        if multiplier > mask:
            multiplier_wrapped = True
            multiplier &= mask

    return result, truncated
