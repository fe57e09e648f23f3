"""Tests for the Euclidean gcd used by Quotient normalization."""

import pytest

from gcd import gcd


class TestGcd:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (1, 1, 1),
            (1, 90, 1),
            (3, 6, 3),
            (6, 9, 3),
            (15, 39, 3),
            (48, 18, 6),
            (17, 17, 17),
        ],
    )
    def test_known_values(self, a: int, b: int, expected: int) -> None:
        assert gcd(a, b) == expected

    @pytest.mark.parametrize("a, b", [(0, 0), (0, 1), (1, 0), (0, 12), (12, 0)])
    def test_zero_operand_returns_zero(self, a: int, b: int) -> None:
        assert gcd(a, b) == 0

    def test_symmetric(self) -> None:
        for a in range(0, 30):
            for b in range(0, 30):
                assert gcd(a, b) == gcd(b, a)

    def test_remainder_step(self) -> None:
        for a in range(1, 30):
            for b in range(1, 60):
                if b % a == 0:
                    continue
                assert gcd(a, b) == gcd(a, b % a)

    def test_large_operands(self) -> None:
        assert gcd(2**64 * 3, 2**64 * 5) == 2**64
