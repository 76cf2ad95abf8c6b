"""Counter increment claim: next = prev + 1.

The hosting application proves that a counter moved from prev to next by
exactly one step. The public input is [prev, next]; the trace is the two counter
values. The constraint reads the public input, so it is zero on every trace step
of an honest claim and the composition polynomial is the zero polynomial.
"""

from typing import Optional, Tuple, Union

from zkstark.primitives.field import STARK_PRIME, FieldElement
from zkstark.protocol.config import StarkConfig
from zkstark.protocol.proof import Proof
from zkstark.protocol.prover import StarkProver
from zkstark.protocol.statement import Constraint, Statement, Witness
from zkstark.protocol.verifier import StarkVerifier

CounterValue = Union[int, FieldElement]


def _to_field(value: CounterValue, modulus: int) -> FieldElement:
    if isinstance(value, FieldElement):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Cannot use {type(value).__name__} as a counter value")
    return FieldElement(value, modulus)


def increment_constraint(prev: FieldElement, next_: FieldElement) -> Constraint:
    """next - prev - 1, independent of the step values."""
    def constraint(values):
        return next_ - prev - FieldElement.one(prev.modulus)
    return constraint


def increment_statement(
    prev: CounterValue,
    next_: CounterValue,
    modulus: int = STARK_PRIME,
) -> Statement:
    p, n = _to_field(prev, modulus), _to_field(next_, modulus)
    return Statement(
        public_input=(p, n),
        constraints=(increment_constraint(p, n),),
        modulus=p.modulus,
    )


def increment_witness(
    prev: CounterValue,
    next_: CounterValue,
    modulus: int = STARK_PRIME,
) -> Witness:
    p, n = _to_field(prev, modulus), _to_field(next_, modulus)
    return Witness(trace=(p, n), private_input=(p,))


def prove_increment(
    prev: CounterValue,
    next_: CounterValue,
    config: Optional[StarkConfig] = None,
) -> Tuple[Statement, Proof]:
    """Prove next = prev + 1 and return the statement alongside the proof."""
    statement = increment_statement(prev, next_)
    witness = increment_witness(prev, next_)
    return statement, StarkProver(statement, witness, config=config).generate_proof()


def verify_increment(
    statement: Statement,
    proof: Proof,
    config: Optional[StarkConfig] = None,
) -> bool:
    return StarkVerifier(statement, config=config).verify(proof)
