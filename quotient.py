from __future__ import annotations
from typing import Optional, Union
from gcd import gcd

class Quotient:
	"""A fraction in Q, kept in lowest terms with zero always positive.

	Magnitudes are stored unsigned; the sign lives in its own flag.
	"""
	__slots__ = ("_num", "_den", "_positive")
	def __init__(self, dividend: int, divisor: int = 1, positive: bool = True) -> None:
		if divisor == 0:
			raise ValueError("zero divisor")
		if dividend < 0 or divisor < 0:
			raise ValueError("dividend and divisor must be non-negative magnitudes")
		g = gcd(dividend, divisor)
		if g == 0:
			num, den = 0, 1
		else:
			num, den = dividend // g, divisor // g
		self._num = num
		self._den = den
		self._positive = True if num == 0 else bool(positive)
	@staticmethod
	def from_int(i: int) -> Quotient:
		return Quotient(i, 1, True)
	@staticmethod
	def _operand(other: object) -> Optional[Quotient]:
		if isinstance(other, Quotient):
			return other
		if isinstance(other, int) and not isinstance(other, bool):
			return Quotient(abs(other), 1, other >= 0)
		return None
	@staticmethod
	def coerce(other: Quotient | int) -> Quotient:
		q = Quotient._operand(other)
		if q is None:
			raise TypeError(f"cannot combine Quotient with {type(other).__name__}")
		return q
	def numerator(self) -> int:
		return self._num
	def denominator(self) -> int:
		return self._den
	def is_positive(self) -> bool:
		return self._positive
	def is_zero(self) -> bool:
		return self._num == 0
	def is_int(self) -> bool:
		return self._den == 1
	def negative(self) -> Quotient:
		return Quotient(self._num, self._den, not self._positive)
	def inverse(self) -> Quotient:
		if self._num == 0:
			raise ZeroDivisionError("division by zero")
		return Quotient(self._den, self._num, self._positive)
	def __neg__(self) -> Quotient:
		return self.negative()
	def __add__(self, other: Quotient | int) -> Quotient:
		rhs = Quotient._operand(other)
		if rhs is None:
			return NotImplemented
		lhs_num = self._num * rhs._den
		rhs_num = self._den * rhs._num
		common_den = self._den * rhs._den
		if self._positive == rhs._positive:
			return Quotient(lhs_num + rhs_num, common_den, self._positive)
		# differing signs: the larger cross-multiplied side wins, ties keep ours
		if rhs_num <= lhs_num:
			return Quotient(lhs_num - rhs_num, common_den, self._positive)
		return Quotient(rhs_num - lhs_num, common_den, not self._positive)
	def __radd__(self, other: int) -> Quotient:
		lhs = Quotient._operand(other)
		if lhs is None:
			return NotImplemented
		return lhs + self
	def __sub__(self, other: Quotient | int) -> Quotient:
		rhs = Quotient._operand(other)
		if rhs is None:
			return NotImplemented
		return self + rhs.negative()
	def __rsub__(self, other: int) -> Quotient:
		lhs = Quotient._operand(other)
		if lhs is None:
			return NotImplemented
		return lhs - self
	def __mul__(self, other: Quotient | int) -> Quotient:
		rhs = Quotient._operand(other)
		if rhs is None:
			return NotImplemented
		return Quotient(self._num * rhs._num, self._den * rhs._den, self._positive == rhs._positive)
	def __rmul__(self, other: int) -> Quotient:
		lhs = Quotient._operand(other)
		if lhs is None:
			return NotImplemented
		return lhs * self
	def __truediv__(self, other: Quotient | int) -> Quotient:
		rhs = Quotient._operand(other)
		if rhs is None:
			return NotImplemented
		return self * rhs.inverse()
	def __rtruediv__(self, other: int) -> Quotient:
		lhs = Quotient._operand(other)
		if lhs is None:
			return NotImplemented
		return lhs / self
	def __eq__(self, other: object) -> bool:
		rhs = Quotient._operand(other)
		if rhs is None:
			return NotImplemented
		return (self._num, self._den, self._positive) == (rhs._num, rhs._den, rhs._positive)
	def __hash__(self) -> int:
		# integral values hash like the equal int
		if self._den == 1:
			return hash(self._num if self._positive else -self._num)
		return hash((self._num, self._den, self._positive))
	def __lt__(self, other: Quotient | int) -> bool:
		rhs = Quotient._operand(other)
		if rhs is None:
			return NotImplemented
		return not (self - rhs)._positive
	def __le__(self, other: Quotient | int) -> bool:
		rhs = Quotient._operand(other)
		if rhs is None:
			return NotImplemented
		diff = self - rhs
		return diff.is_zero() or not diff._positive
	def __gt__(self, other: Quotient | int) -> bool:
		rhs = Quotient._operand(other)
		if rhs is None:
			return NotImplemented
		return not self <= rhs
	def __ge__(self, other: Quotient | int) -> bool:
		rhs = Quotient._operand(other)
		if rhs is None:
			return NotImplemented
		return not self < rhs
	def to_float(self) -> float:
		value = self._num / self._den
		return value if self._positive else -value
	def __float__(self) -> float:
		return self.to_float()
	def assert_valid(self) -> None:
		"""Raise AssertionError unless the representation is normalized."""
		if self._den == 0:
			raise AssertionError("zero denominator")
		if self._num == 0:
			if self._den != 1:
				raise AssertionError("zero must have denominator 1")
			if not self._positive:
				raise AssertionError("zero must be positive")
		elif gcd(self._num, self._den) != 1:
			raise AssertionError("not in lowest terms")
	def to_string(self) -> str:
		sign = "" if self._positive else "-"
		if self._den == 1:
			return f"{sign}{self._num}"
		return f"{sign}{self._num}/{self._den}"
	def __str__(self) -> str:
		return self.to_string()
	def __repr__(self) -> str:
		return f"Quotient({self._num}, {self._den}, {self._positive})"

QuotientLike = Union[Quotient, int]

ZERO = Quotient(0, 1, True)
ONE = Quotient(1, 1, True)
