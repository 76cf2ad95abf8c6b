"""Ready-made statements.

Each entry builds a Statement for one kind of claim; the matching witness builder
lives next to it in the same module.
"""

from typing import Callable

from zkstark.protocol.statement import Statement

from .boolean import boolean_constraint, boolean_statement, boolean_witness
from .counter import (
    increment_constraint,
    increment_statement,
    increment_witness,
    prove_increment,
    verify_increment,
)

# Registry mapping claim names to statement builders
CONSTRAINT_REGISTRY: dict[str, Callable[..., Statement]] = {
    "counter_increment": increment_statement,
    "boolean_trace": boolean_statement,
}


def get_statement_builder(name: str) -> Callable[..., Statement]:
    """Look up a statement builder by claim name.

    Raises:
        KeyError: If no builder is registered under name
    """
    if name in CONSTRAINT_REGISTRY:
        return CONSTRAINT_REGISTRY[name]
    raise KeyError(
        f"No statement builder for '{name}'. "
        f"Available: {list(CONSTRAINT_REGISTRY.keys())}"
    )


__all__ = [
    "CONSTRAINT_REGISTRY",
    "get_statement_builder",
    "increment_constraint",
    "increment_statement",
    "increment_witness",
    "prove_increment",
    "verify_increment",
    "boolean_constraint",
    "boolean_statement",
    "boolean_witness",
]
