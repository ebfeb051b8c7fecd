"""Sampled property checks for BigInt against Python's int.

Operands come from a seeded random source (see tests.helpers.values),
so every run checks the same values.
"""

from ubigint import BigInt


def as_int(value: BigInt) -> int:
    """Exact value via the decimal rendering."""
    return int(str(value))


class TestStringRoundTrip:
    """str(BigInt(s)) is s without leading zeros."""

    def test_digit_strings(self, rng):
        for _ in range(200):
            text = "".join(rng.choice("0123456789") for _ in range(rng.randrange(0, 40)))
            expected = text.lstrip("0") or "0"
            assert str(BigInt(text)) == expected

    def test_int_construction_matches_str(self, sample_pairs):
        for a, _ in sample_pairs:
            assert str(BigInt(a)) == str(a)


class TestArithmeticMatchesInt:
    """Addition and non-wrapping subtraction agree with int."""

    def test_addition(self, sample_pairs):
        for a, b in sample_pairs:
            assert as_int(BigInt(a) + BigInt(b)) == a + b

    def test_subtraction(self, sample_pairs):
        for a, b in sample_pairs:
            high, low = max(a, b), min(a, b)
            assert as_int(BigInt(high) - BigInt(low)) == high - low

    def test_commutative(self, sample_pairs):
        for a, b in sample_pairs:
            assert BigInt(a) + BigInt(b) == BigInt(b) + BigInt(a)

    def test_additive_identity(self, sample_pairs):
        for a, _ in sample_pairs:
            assert BigInt(a) + BigInt(0) == BigInt(a)

    def test_inverse(self, sample_pairs):
        for a, b in sample_pairs:
            high, low = BigInt(max(a, b)), BigInt(min(a, b))
            assert (high - low) + low == high

    def test_results_are_canonical(self, sample_pairs):
        for a, b in sample_pairs:
            high, low = max(a, b), min(a, b)
            for result in (BigInt(a) + BigInt(b), BigInt(high) - BigInt(low)):
                assert result.digits == BigInt(as_int(result)).digits


class TestOrdering:
    """Exactly one of <, ==, > holds and it agrees with int."""

    def test_trichotomy(self, sample_pairs):
        for a, b in sample_pairs:
            x, y = BigInt(a), BigInt(b)
            assert [x < y, x == y, x > y].count(True) == 1
            assert (x < y) == (a < b)
            assert (x == y) == (a == b)
            assert (x >= y) == (a >= b)
            assert (x <= y) == (a <= b)


class TestIncrementRoundTrip:
    """++ then -1 gives back the original value."""

    def test_increment_decrement(self, sample_pairs):
        for a, _ in sample_pairs:
            value = BigInt(a)
            assert BigInt(value).increment() - 1 == value
            if a > 0:
                assert BigInt(value).decrement() + 1 == value
