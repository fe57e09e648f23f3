from __future__ import annotations


def gcd(a: int, b: int) -> int:
	"""Euclid's algorithm on non-negative ints.

	Returns 0 whenever either argument is 0 (not the other argument);
	Quotient relies on that to spot a zero dividend.
	"""
	larger, smaller = (b, a) if a < b else (a, b)
	if smaller == 0:
		return 0
	while smaller != 0:
		larger, smaller = smaller, larger % smaller
	return larger
