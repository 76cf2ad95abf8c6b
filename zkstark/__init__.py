"""zkstark - a simplified zkSTARK proof engine.

Two calls make up the public surface:

    proof = StarkProver(statement, witness).generate_proof()
    ok = StarkVerifier(statement).verify(proof)
"""

from zkstark.primitives import (
    STARK_PRIME,
    FieldElement,
    FieldMismatchError,
    MalformedProofError,
    MerkleProof,
    MerkleTree,
    Polynomial,
    create_field,
    field_element_from_bytes,
    field_element_to_bytes,
)
from zkstark.protocol import (
    GeneratorNotFoundError,
    Proof,
    StarkConfig,
    StarkProver,
    StarkVerifier,
    Statement,
    Witness,
)

VERSION = "1.0.0"

__all__ = [
    "FieldElement",
    "FieldMismatchError",
    "STARK_PRIME",
    "create_field",
    "field_element_to_bytes",
    "field_element_from_bytes",
    "Polynomial",
    "MerkleTree",
    "MerkleProof",
    "MalformedProofError",
    "Statement",
    "Witness",
    "Proof",
    "StarkConfig",
    "StarkProver",
    "StarkVerifier",
    "GeneratorNotFoundError",
    "VERSION",
]
