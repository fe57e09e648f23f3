from __future__ import annotations
from typing import List, Sequence, Tuple
from dataclasses import dataclass
import logging
import numpy as np
from quotient import Quotient, QuotientLike, ZERO

logger = logging.getLogger(__name__)

# Coefficient slots, so the maximum degree is TOTAL_COEFFICIENTS - 1.
TOTAL_COEFFICIENTS = 4
INDETERMINATE = "x"
DEFAULT_SAMPLES = 50


@dataclass(frozen=True)
class Polynomial:
    """A polynomial in Q[x] of degree at most TOTAL_COEFFICIENTS - 1.

    coefficients[d] is the coefficient of x^d.
    """

    coefficients: Tuple[Quotient, ...]

    def __post_init__(self):
        coeffs = tuple(self.coefficients)
        if len(coeffs) != TOTAL_COEFFICIENTS:
            raise ValueError(
                f"Polynomial needs exactly {TOTAL_COEFFICIENTS} coefficients, got {len(coeffs)}"
            )
        for c in coeffs:
            if not isinstance(c, Quotient):
                raise TypeError(f"Coefficient must be a Quotient, got {type(c).__name__}")
        object.__setattr__(self, "coefficients", coeffs)

    @staticmethod
    def from_ints(values: Sequence[int]) -> "Polynomial":
        return Polynomial(tuple(Quotient.coerce(v) for v in values))

    @staticmethod
    def zero() -> "Polynomial":
        return Polynomial((ZERO,) * TOTAL_COEFFICIENTS)

    def coefficient(self, degree: int) -> Quotient:
        if not 0 <= degree < TOTAL_COEFFICIENTS:
            raise IndexError(f"degree {degree} out of range")
        return self.coefficients[degree]

    def is_zero(self) -> bool:
        return all(c.is_zero() for c in self.coefficients)

    def degree(self) -> int:
        for d in range(TOTAL_COEFFICIENTS - 1, -1, -1):
            if not self.coefficients[d].is_zero():
                return d
        return 0

    def __add__(self, rhs: "Polynomial") -> "Polynomial":
        return Polynomial(tuple(a + b for a, b in zip(self.coefficients, rhs.coefficients)))

    def __sub__(self, rhs: "Polynomial") -> "Polynomial":
        return Polynomial(tuple(a - b for a, b in zip(self.coefficients, rhs.coefficients)))

    def __neg__(self) -> "Polynomial":
        return Polynomial(tuple(-c for c in self.coefficients))

    def scalar_mul(self, r: QuotientLike) -> "Polynomial":
        return Polynomial(tuple(c * r for c in self.coefficients))

    def differentiate(self) -> "Polynomial":
        """Power rule term by term; the x^3 slot of the result is always zero."""
        new_coeffs: List[Quotient] = [ZERO] * TOTAL_COEFFICIENTS
        for degree in range(TOTAL_COEFFICIENTS - 1):
            new_coeffs[degree] = self.coefficients[degree + 1] * Quotient.from_int(degree + 1)
        result = Polynomial(tuple(new_coeffs))
        logger.debug("d/d%s (%s) = %s", INDETERMINATE, self, result)
        return result

    def integrate(self) -> "Polynomial":
        """Antiderivative with the constant of integration fixed to zero.

        Raises ValueError when the x^3 coefficient is nonzero, since the
        result would need an x^4 slot.
        """
        top = self.coefficients[TOTAL_COEFFICIENTS - 1]
        if top != ZERO:
            logger.debug(
                "cannot integrate %s: %s^%d coefficient is %s",
                self, INDETERMINATE, TOTAL_COEFFICIENTS - 1, top,
            )
            raise ValueError(
                f"Integral exceeds degree {TOTAL_COEFFICIENTS - 1}: leading coefficient must be zero"
            )
        new_coeffs: List[Quotient] = [ZERO] * TOTAL_COEFFICIENTS
        for degree in range(1, TOTAL_COEFFICIENTS):
            new_coeffs[degree] = self.coefficients[degree - 1] / Quotient.from_int(degree)
        result = Polynomial(tuple(new_coeffs))
        logger.debug("I[%s] d%s = %s", self, INDETERMINATE, result)
        return result

    def eval(self, x: QuotientLike) -> Quotient:
        # Horner's rule
        total = ZERO
        for c in reversed(self.coefficients):
            total = total * x + c
        return total

    def eval_float(self, xs) -> np.ndarray:
        """Float approximation at each point of xs."""
        # np.polyval wants the highest degree first
        coeffs = np.array([c.to_float() for c in reversed(self.coefficients)])
        return np.polyval(coeffs, np.asarray(xs, dtype=float))

    def sample(self, a: float, b: float, num: int = DEFAULT_SAMPLES) -> List[Tuple[float, float]]:
        xs = np.linspace(a, b, num)
        return list(zip(xs.tolist(), self.eval_float(xs).tolist()))

    def to_string(self) -> str:
        parts: List[str] = []
        for degree, c in enumerate(self.coefficients):
            if degree == 0:
                parts.append(c.to_string())
            elif degree == 1:
                parts.append(f"{c.to_string()}{INDETERMINATE}")
            else:
                parts.append(f"{c.to_string()}{INDETERMINATE}^{degree}")
        return " + ".join(parts)

    def __str__(self) -> str:
        return self.to_string()
