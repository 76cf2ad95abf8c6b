"""
Pytest configuration for zkstark tests.

Shared fixtures build the two reference claims used across the suite: the
counter increment 5 -> 6 and a boolean trace.
"""

import pytest

from zkstark.constraints import (
    boolean_statement,
    boolean_witness,
    increment_statement,
    increment_witness,
)
from zkstark.protocol import Proof, StarkProver, Statement, Witness

# Small prime used where hand-checkable values are wanted. 16 = 2^4 divides p - 1.
SMALL_PRIME = 17


@pytest.fixture
def counter_statement() -> Statement:
    return increment_statement(5, 6)


@pytest.fixture
def counter_witness() -> Witness:
    return increment_witness(5, 6)


@pytest.fixture
def counter_proof(counter_statement: Statement, counter_witness: Witness) -> Proof:
    return StarkProver(counter_statement, counter_witness).generate_proof()


@pytest.fixture
def bad_boolean_proof() -> Proof:
    """Proof for the trace [0, 2, 0, 0], which breaks v * (v - 1) = 0 at step 1."""
    statement = boolean_statement(4)
    return StarkProver(statement, boolean_witness([0, 2, 0, 0])).generate_proof()
