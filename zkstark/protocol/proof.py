"""STARK proof data structure, size accounting and JSON transport."""

import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from zkstark.primitives.field import (
    FIELD_ELEMENT_SIZE,
    STARK_PRIME,
    FieldElement,
)
from zkstark.primitives.merkle_tree import HASH_SIZE, MalformedProofError, MerkleRoot

# Bytes charged per query index and for the degree field
INDEX_SIZE = 4
DEGREE_SIZE = 4


@dataclass(frozen=True)
class Proof:
    """Everything the verifier receives.

    Attributes:
        commitment: Merkle root over the composition polynomial's domain evaluations
        evaluations: Composition polynomial values at the queried positions
        merkle_proofs: Serialized MerkleProof per query (see MerkleProof.serialize)
        query_indices: Queried domain positions, in derivation order
        fri_commitments: One Merkle root per FRI folding round
        polynomial_degree: Claimed degree of the composition polynomial
    """
    commitment: MerkleRoot
    evaluations: Tuple[FieldElement, ...]
    merkle_proofs: Tuple[str, ...]
    query_indices: Tuple[int, ...]
    fri_commitments: Tuple[MerkleRoot, ...]
    polynomial_degree: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "evaluations", tuple(self.evaluations))
        object.__setattr__(self, "merkle_proofs", tuple(self.merkle_proofs))
        object.__setattr__(self, "query_indices", tuple(self.query_indices))
        object.__setattr__(self, "fri_commitments", tuple(self.fri_commitments))


# --- Size Utilities ---

def proof_size(proof: Proof) -> int:
    """Approximate wire size in bytes.

    Commitment, 32 bytes per evaluation, serialized Merkle proof lengths, 4 bytes
    per query index, 32 bytes per FRI root, and 4 bytes for the degree.
    """
    size = HASH_SIZE
    size += len(proof.evaluations) * FIELD_ELEMENT_SIZE
    size += sum(len(p) for p in proof.merkle_proofs)
    size += len(proof.query_indices) * INDEX_SIZE
    size += len(proof.fri_commitments) * HASH_SIZE
    size += DEGREE_SIZE
    return size


def verification_complexity(proof: Proof) -> str:
    """Informational cost estimate: O(queries * log(degree))."""
    n_queries = len(proof.query_indices)
    degree = proof.polynomial_degree
    tree_depth = math.ceil(math.log2(degree * 4)) if degree > 0 else 0
    return f"O({n_queries} * log({degree})) = O({n_queries * tree_depth})"


# --- JSON Serialization ---
# Transport helpers for callers: bytes as hex, field values as decimal strings
# (they exceed the range of JSON numbers in most consumers).

def proof_to_json(proof: Proof) -> Dict[str, Any]:
    """Convert a proof to a JSON-serializable dictionary."""
    return {
        "commitment": proof.commitment.hex(),
        "evaluations": [str(e.value) for e in proof.evaluations],
        "merkleProofs": list(proof.merkle_proofs),
        "queryIndices": list(proof.query_indices),
        "friCommitments": [c.hex() for c in proof.fri_commitments],
        "polynomialDegree": proof.polynomial_degree,
    }


def proof_from_json(data: Dict[str, Any], modulus: int = STARK_PRIME) -> Proof:
    """Inverse of proof_to_json.

    Raises:
        MalformedProofError: On missing keys or undecodable values.
    """
    try:
        return Proof(
            commitment=bytes.fromhex(data["commitment"]),
            evaluations=tuple(FieldElement(int(e), modulus) for e in data["evaluations"]),
            merkle_proofs=tuple(str(p) for p in data["merkleProofs"]),
            query_indices=tuple(int(i) for i in data["queryIndices"]),
            fri_commitments=tuple(bytes.fromhex(c) for c in data["friCommitments"]),
            polynomial_degree=int(data["polynomialDegree"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedProofError(f"Cannot decode proof: {e}") from e
