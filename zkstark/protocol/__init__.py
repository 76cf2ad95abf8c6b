"""Protocol - STARK prover, verifier and their shared building blocks."""

from zkstark.protocol.config import StarkConfig
from zkstark.protocol.domain import (
    GeneratorNotFoundError,
    domain_size_for_degree,
    evaluation_domain,
    find_subgroup_generator,
    next_power_of_two,
)
from zkstark.protocol.fri import FRI
from zkstark.protocol.proof import (
    Proof,
    proof_from_json,
    proof_size,
    proof_to_json,
    verification_complexity,
)
from zkstark.protocol.prover import StarkProver
from zkstark.protocol.statement import Constraint, Statement, Witness
from zkstark.protocol.verifier import StarkVerifier

__all__ = [
    # Configuration and data structures
    "StarkConfig",
    "Statement",
    "Witness",
    "Constraint",
    "Proof",
    # Domain
    "GeneratorNotFoundError",
    "domain_size_for_degree",
    "evaluation_domain",
    "find_subgroup_generator",
    "next_power_of_two",
    # FRI
    "FRI",
    # STARK
    "StarkProver",
    "StarkVerifier",
    # Proof utilities
    "proof_size",
    "verification_complexity",
    "proof_to_json",
    "proof_from_json",
]
