"""Public statement and private witness."""

from dataclasses import dataclass, field
from typing import Callable, Sequence, Tuple

from zkstark.primitives.field import STARK_PRIME, FieldElement, FieldMismatchError

# --- Type Aliases ---

Constraint = Callable[[Sequence[FieldElement]], FieldElement]
"""Maps the trace values at one step to a field element; zero means satisfied.

The engine is single-register: constraints receive a one-element vector.
"""


def _check_modulus(values: Sequence[FieldElement], modulus: int, what: str) -> None:
    for v in values:
        if not isinstance(v, FieldElement):
            raise TypeError(f"{what} must contain FieldElements, got {type(v).__name__}")
        if v.modulus != modulus:
            raise FieldMismatchError(f"{what} element is in GF({v.modulus}), expected GF({modulus})")


@dataclass(frozen=True)
class Statement:
    """Public input and constraints, shared read-only by prover and verifier."""
    public_input: Tuple[FieldElement, ...]
    constraints: Tuple[Constraint, ...]
    modulus: int = STARK_PRIME

    def __post_init__(self) -> None:
        object.__setattr__(self, "public_input", tuple(self.public_input))
        object.__setattr__(self, "constraints", tuple(self.constraints))
        _check_modulus(self.public_input, self.modulus, "public_input")


@dataclass(frozen=True)
class Witness:
    """Private input and execution trace (one value per step).

    Stays on the prover side; repr hides the values so they never reach logs.
    """
    trace: Tuple[FieldElement, ...] = field(repr=False)
    private_input: Tuple[FieldElement, ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "trace", tuple(self.trace))
        object.__setattr__(self, "private_input", tuple(self.private_input))
        if len(self.trace) == 0:
            raise ValueError("Witness trace must have at least one step")
        _check_modulus(self.trace, self.trace[0].modulus, "trace")

    @property
    def modulus(self) -> int:
        return self.trace[0].modulus
