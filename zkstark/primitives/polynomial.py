"""Univariate polynomials over GF(p) in coefficient form.

Coefficients are stored lowest degree first and trailing zeros are trimmed on
construction, so degree() shrinks as terms cancel. The zero polynomial keeps a
single zero coefficient and has degree 0; FRI folding relies on this to stop.
"""

from typing import List, Sequence, Tuple

import galois
import numpy as np

from zkstark.primitives.field import FieldElement, FieldMismatchError, galois_field

# --- Type Aliases ---

Point = Tuple[FieldElement, FieldElement]


class Polynomial:
    """Immutable polynomial over a prime field."""

    __slots__ = ("_coefficients", "modulus")

    def __init__(self, coefficients: Sequence[FieldElement]) -> None:
        if len(coefficients) == 0:
            raise ValueError("Polynomial needs at least one coefficient")

        modulus = coefficients[0].modulus
        for c in coefficients:
            if c.modulus != modulus:
                raise FieldMismatchError(
                    f"Coefficients mix GF({modulus}) and GF({c.modulus})"
                )

        coeffs = list(coefficients)
        while len(coeffs) > 1 and coeffs[-1].is_zero():
            coeffs.pop()

        self._coefficients: Tuple[FieldElement, ...] = tuple(coeffs)
        self.modulus = modulus

    @property
    def coefficients(self) -> Tuple[FieldElement, ...]:
        return self._coefficients

    @staticmethod
    def zero(modulus: int) -> "Polynomial":
        """Additive identity."""
        return Polynomial([FieldElement.zero(modulus)])

    # --- Queries ---

    def degree(self) -> int:
        """Index of the highest non-zero coefficient (0 for the zero polynomial)."""
        return len(self._coefficients) - 1

    def is_zero(self) -> bool:
        return len(self._coefficients) == 1 and self._coefficients[0].is_zero()

    # --- Evaluation ---

    def evaluate(self, x: FieldElement) -> FieldElement:
        """Evaluate at x using Horner's method."""
        result = FieldElement.zero(self.modulus)
        for coeff in reversed(self._coefficients):
            result = result * x + coeff
        return result

    def evaluate_domain(self, points: Sequence[FieldElement]) -> List[FieldElement]:
        """Evaluate at every point of a domain in one pass.

        Same values as calling evaluate() per point; the Horner loop runs inside
        galois over the whole array instead of element by element.
        """
        if len(points) == 0:
            return []
        for p in points:
            if p.modulus != self.modulus:
                raise FieldMismatchError(
                    f"Cannot evaluate a GF({self.modulus}) polynomial at a GF({p.modulus}) point"
                )

        gf = galois_field(self.modulus)
        # galois takes coefficients highest degree first
        coeffs = gf(np.array([c.value for c in reversed(self._coefficients)], dtype=object))
        xs = gf(np.array([p.value for p in points], dtype=object))
        values = galois.Poly(coeffs, field=gf)(xs)
        return [FieldElement(int(v), self.modulus) for v in values]

    # --- Arithmetic ---

    def add(self, other: "Polynomial") -> "Polynomial":
        """Coefficient-wise sum; the shorter operand is padded with zeros."""
        self._check_same_field(other)
        zero = FieldElement.zero(self.modulus)
        n = max(len(self._coefficients), len(other._coefficients))
        return Polynomial([
            self._coeff_or(i, zero) + other._coeff_or(i, zero)
            for i in range(n)
        ])

    def sub(self, other: "Polynomial") -> "Polynomial":
        return self.add(other.scalar_mul(FieldElement(-1, other.modulus)))

    def mul(self, other: "Polynomial") -> "Polynomial":
        """Schoolbook product."""
        self._check_same_field(other)
        result = [FieldElement.zero(self.modulus)] * (len(self._coefficients) + len(other._coefficients) - 1)
        for i, a in enumerate(self._coefficients):
            if a.is_zero():
                continue
            for j, b in enumerate(other._coefficients):
                result[i + j] = result[i + j] + a * b
        return Polynomial(result)

    def scalar_mul(self, scalar: FieldElement) -> "Polynomial":
        return Polynomial([c * scalar for c in self._coefficients])

    def split_even_odd(self) -> Tuple["Polynomial", "Polynomial"]:
        """Split p(x) = even(x^2) + x * odd(x^2) and return (even, odd)."""
        zero = FieldElement.zero(self.modulus)
        even = list(self._coefficients[0::2]) or [zero]
        odd = list(self._coefficients[1::2]) or [zero]
        return Polynomial(even), Polynomial(odd)

    __add__ = add
    __sub__ = sub
    __mul__ = mul

    # --- Interpolation ---

    @staticmethod
    def interpolate(points: Sequence[Point]) -> "Polynomial":
        """Lagrange interpolation through n points with distinct x coordinates.

        Builds Z(x) = prod(x - x_j) once and divides out (x - x_i) for each basis
        polynomial, so the cost is O(n^2) field operations.

        Args:
            points: (x, y) pairs over one field

        Returns:
            The unique polynomial of degree <= n - 1 through all points

        Raises:
            ValueError: If points is empty or two points share an x coordinate
            FieldMismatchError: If the points mix fields
        """
        if len(points) == 0:
            raise ValueError("Cannot interpolate an empty point set")

        modulus = points[0][0].modulus
        xs = [x for x, _ in points]
        if len({x.value for x in xs}) != len(xs):
            raise ValueError("Interpolation points must have distinct x coordinates")

        zero = FieldElement.zero(modulus)
        vanishing = [FieldElement.one(modulus)]
        for x in xs:
            vanishing = _multiply_by_linear(vanishing, x)

        result = [zero] * len(points)
        for xi, yi in points:
            basis = _divide_by_linear(vanishing, xi)
            # basis(xi) = prod_{j != i} (xi - xj)
            scale = yi / Polynomial(basis).evaluate(xi)
            for k, c in enumerate(basis):
                result[k] = result[k] + c * scale

        return Polynomial(result)

    # --- Dunder ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.modulus == other.modulus and self._coefficients == other._coefficients

    def __hash__(self) -> int:
        return hash((self.modulus, self._coefficients))

    def __repr__(self) -> str:
        return f"Polynomial({[c.value for c in self._coefficients]})"

    # --- Internal ---

    def _coeff_or(self, i: int, default: FieldElement) -> FieldElement:
        return self._coefficients[i] if i < len(self._coefficients) else default

    def _check_same_field(self, other: "Polynomial") -> None:
        if other.modulus != self.modulus:
            raise FieldMismatchError(
                f"Cannot combine polynomials over GF({self.modulus}) and GF({other.modulus})"
            )


def _multiply_by_linear(coeffs: List[FieldElement], root: FieldElement) -> List[FieldElement]:
    """Coefficients of (x - root) * p(x)."""
    result = [FieldElement.zero(root.modulus)] * (len(coeffs) + 1)
    for k, c in enumerate(coeffs):
        result[k] = result[k] - c * root
        result[k + 1] = result[k + 1] + c
    return result


def _divide_by_linear(coeffs: List[FieldElement], root: FieldElement) -> List[FieldElement]:
    """Quotient of p(x) / (x - root) by synthetic division (remainder dropped)."""
    n = len(coeffs) - 1
    quotient = [FieldElement.zero(root.modulus)] * n
    carry = coeffs[n]
    for k in range(n - 1, -1, -1):
        quotient[k] = carry
        carry = coeffs[k] + root * carry
    return quotient
