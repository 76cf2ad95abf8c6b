"""Boolean trace: every step holds 0 or 1.

Constraint v * (v - 1) per step. The public input is the trace length.
"""

from typing import Sequence

from zkstark.primitives.field import STARK_PRIME, FieldElement
from zkstark.protocol.statement import Statement, Witness


def boolean_constraint(values: Sequence[FieldElement]) -> FieldElement:
    v = values[0]
    return v * (v - FieldElement.one(v.modulus))


def boolean_statement(length: int, modulus: int = STARK_PRIME) -> Statement:
    if length < 1:
        raise ValueError(f"length must be positive, got {length}")
    return Statement(
        public_input=(FieldElement(length, modulus),),
        constraints=(boolean_constraint,),
        modulus=modulus,
    )


def boolean_witness(bits: Sequence[int], modulus: int = STARK_PRIME) -> Witness:
    return Witness(trace=tuple(FieldElement(b, modulus) for b in bits))
