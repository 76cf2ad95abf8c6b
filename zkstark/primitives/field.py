"""Prime field GF(p) for the proof engine.

Every FieldElement carries its modulus, so elements of different fields cannot be
mixed by accident: binary operators raise FieldMismatchError instead of reducing
modulo whichever prime happens to be on the left.

Scalar arithmetic uses plain Python integers. Bulk work over a whole evaluation
domain goes through galois (see galois_field), which keeps the same values in a
FieldArray.
"""

from functools import lru_cache
from typing import Type

import galois

# --- Field Construction ---

STARK_PRIME = 2**251 + 17 * 2**192 + 1
"""p = 2^251 + 17 * 2^192 + 1. p - 1 = 2^192 * (2^59 + 17), so GF(p)* has
power-of-two subgroups up to order 2^192."""

STARK_GENERATOR = 3
"""Generator of the full multiplicative group of GF(STARK_PRIME)."""

FIELD_ELEMENT_SIZE = 32
"""Bytes in the big-endian encoding of one element."""


class FieldMismatchError(TypeError):
    """Operands belong to fields with different moduli."""


# --- Field Element ---

class FieldElement:
    """Immutable element of GF(modulus).

    Invariant: 0 <= value < modulus. Operations return new elements and never
    touch their operands.
    """

    __slots__ = ("value", "modulus")

    def __init__(self, value: int, modulus: int = STARK_PRIME) -> None:
        object.__setattr__(self, "modulus", modulus)
        object.__setattr__(self, "value", value % modulus)

    def __setattr__(self, name, value):
        raise AttributeError(f"FieldElement is immutable (cannot set {name!r})")

    def __delattr__(self, name):
        raise AttributeError(f"FieldElement is immutable (cannot delete {name!r})")

    # --- Named Operations ---

    def add(self, other: "FieldElement") -> "FieldElement":
        self._check_same_field(other)
        return FieldElement(self.value + other.value, self.modulus)

    def sub(self, other: "FieldElement") -> "FieldElement":
        self._check_same_field(other)
        return FieldElement(self.value - other.value, self.modulus)

    def mul(self, other: "FieldElement") -> "FieldElement":
        self._check_same_field(other)
        return FieldElement(self.value * other.value, self.modulus)

    def div(self, other: "FieldElement") -> "FieldElement":
        self._check_same_field(other)
        return self.mul(other.inverse())

    def pow(self, exponent: int) -> "FieldElement":
        """Square-and-multiply exponentiation; negative exponents invert first."""
        if exponent < 0:
            return self.inverse().pow(-exponent)

        result = 1
        base = self.value
        while exponent > 0:
            if exponent & 1:
                result = result * base % self.modulus
            base = base * base % self.modulus
            exponent >>= 1
        return FieldElement(result, self.modulus)

    def inverse(self) -> "FieldElement":
        """Multiplicative inverse via the extended Euclidean algorithm.

        Raises:
            ZeroDivisionError: If the element is zero (or shares a factor with a
                composite modulus).
        """
        if self.value == 0:
            raise ZeroDivisionError("Cannot invert zero")

        old_r, r = self.value, self.modulus
        old_s, s = 1, 0
        while r != 0:
            quotient = old_r // r
            old_r, r = r, old_r - quotient * r
            old_s, s = s, old_s - quotient * s

        if old_r != 1:
            raise ZeroDivisionError(f"{self.value} is not invertible modulo {self.modulus}")
        return FieldElement(old_s, self.modulus)

    def neg(self) -> "FieldElement":
        return FieldElement(-self.value, self.modulus)

    def equals(self, other: "FieldElement") -> bool:
        return self.value == other.value and self.modulus == other.modulus

    def is_zero(self) -> bool:
        return self.value == 0

    @staticmethod
    def zero(modulus: int = STARK_PRIME) -> "FieldElement":
        return FieldElement(0, modulus)

    @staticmethod
    def one(modulus: int = STARK_PRIME) -> "FieldElement":
        return FieldElement(1, modulus)

    # --- Operator Aliases ---

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __pow__ = pow
    __neg__ = neg

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.value, self.modulus))

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        if self.modulus == STARK_PRIME:
            return f"FieldElement({self.value})"
        return f"FieldElement({self.value}, modulus={self.modulus})"

    def __str__(self) -> str:
        return str(self.value)

    # --- Internal ---

    def _check_same_field(self, other: "FieldElement") -> None:
        if not isinstance(other, FieldElement):
            raise FieldMismatchError(f"Expected FieldElement, got {type(other).__name__}")
        if other.modulus != self.modulus:
            raise FieldMismatchError(
                f"Cannot combine elements of GF({self.modulus}) and GF({other.modulus})"
            )


def create_field(value: int) -> FieldElement:
    """Element of the STARK field."""
    return FieldElement(value, STARK_PRIME)


# --- Byte Encoding ---
# All commitments, leaves and transcript inputs use 32-byte big-endian integers.

def int_to_bytes32(value: int) -> bytes:
    """Encode a non-negative integer below 2^256 as 32 big-endian bytes."""
    return value.to_bytes(FIELD_ELEMENT_SIZE, "big")


def field_element_to_bytes(element: FieldElement) -> bytes:
    return int_to_bytes32(element.value)


def field_element_from_bytes(data: bytes, modulus: int = STARK_PRIME) -> FieldElement:
    """Decode a 32-byte big-endian encoding.

    Raises:
        ValueError: If data is not exactly 32 bytes.
    """
    if len(data) != FIELD_ELEMENT_SIZE:
        raise ValueError(f"Expected {FIELD_ELEMENT_SIZE} bytes, got {len(data)}")
    return FieldElement(int.from_bytes(data, "big"), modulus)


# --- galois Interop ---

@lru_cache(maxsize=None)
def galois_field(modulus: int) -> Type[galois.FieldArray]:
    """galois FieldArray class for GF(modulus), built once per modulus.

    The STARK field is constructed with its known generator and without galois'
    primality/primitivity checks, which would otherwise factor p - 1.
    """
    if modulus == STARK_PRIME:
        return galois.GF(STARK_PRIME, primitive_element=STARK_GENERATOR, verify=False)
    return galois.GF(modulus)
