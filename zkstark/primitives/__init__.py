"""Primitives - field arithmetic, polynomials, Merkle commitments, Fiat-Shamir."""

from zkstark.primitives.field import (
    FIELD_ELEMENT_SIZE,
    STARK_GENERATOR,
    STARK_PRIME,
    FieldElement,
    FieldMismatchError,
    create_field,
    field_element_from_bytes,
    field_element_to_bytes,
    galois_field,
    int_to_bytes32,
)
from zkstark.primitives.merkle_tree import (
    HASH_SIZE,
    LEFT,
    RIGHT,
    MalformedProofError,
    MerkleProof,
    MerkleRoot,
    MerkleTree,
    SiblingHash,
)
from zkstark.primitives.polynomial import Polynomial
from zkstark.primitives.transcript import (
    derive_challenge,
    derive_query_indices,
    query_count,
)

__all__ = [
    # Field
    "FieldElement",
    "FieldMismatchError",
    "STARK_PRIME",
    "STARK_GENERATOR",
    "FIELD_ELEMENT_SIZE",
    "create_field",
    "field_element_to_bytes",
    "field_element_from_bytes",
    "int_to_bytes32",
    "galois_field",
    # Polynomial
    "Polynomial",
    # Merkle Tree
    "MerkleTree",
    "MerkleProof",
    "MerkleRoot",
    "SiblingHash",
    "MalformedProofError",
    "HASH_SIZE",
    "LEFT",
    "RIGHT",
    # Transcript
    "derive_challenge",
    "derive_query_indices",
    "query_count",
]
