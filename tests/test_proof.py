"""Tests for the proof container, size accounting and JSON transport."""

import json

import pytest

from zkstark.primitives.field import FieldElement, create_field
from zkstark.primitives.merkle_tree import MalformedProofError
from zkstark.protocol.proof import (
    Proof,
    proof_from_json,
    proof_size,
    proof_to_json,
    verification_complexity,
)

SMALL_PRIME = 17


def make_proof(n_queries: int = 2, n_rounds: int = 0, degree: int = 0) -> Proof:
    return Proof(
        commitment=bytes(range(32)),
        evaluations=[create_field(10 + i) for i in range(n_queries)],
        merkle_proofs=['{"leaf":[],"proof":[],"root":[]}'] * n_queries,
        query_indices=list(range(n_queries)),
        fri_commitments=[bytes([i]) * 32 for i in range(n_rounds)],
        polynomial_degree=degree,
    )


class TestProofContainer:
    """Tests for the Proof dataclass."""

    def test_sequences_become_tuples(self) -> None:
        """Lists passed in are stored as tuples."""
        proof = make_proof(n_queries=3, n_rounds=2)
        assert isinstance(proof.evaluations, tuple)
        assert isinstance(proof.merkle_proofs, tuple)
        assert isinstance(proof.query_indices, tuple)
        assert isinstance(proof.fri_commitments, tuple)

    def test_frozen(self) -> None:
        """Fields cannot be reassigned."""
        proof = make_proof()
        with pytest.raises(AttributeError):
            proof.polynomial_degree = 5

    def test_equality(self) -> None:
        assert make_proof(3, 1, 2) == make_proof(3, 1, 2)
        assert make_proof(3, 1, 2) != make_proof(3, 1, 3)


class TestProofSize:
    """Tests for proof_size() and verification_complexity()."""

    def test_size_formula(self) -> None:
        """32 + 32 * evals + proof lengths + 4 * indices + 32 * rounds + 4."""
        proof = make_proof(n_queries=3, n_rounds=2)
        serialized = sum(len(p) for p in proof.merkle_proofs)
        assert proof_size(proof) == 32 + 3 * 32 + serialized + 3 * 4 + 2 * 32 + 4

    def test_complexity_string(self) -> None:
        """Tree depth is ceil(log2(4 * degree))."""
        proof = make_proof(n_queries=16, degree=3)
        assert verification_complexity(proof) == "O(16 * log(3)) = O(64)"

    def test_complexity_degree_zero(self) -> None:
        """Degree 0 has no tree depth."""
        assert verification_complexity(make_proof(n_queries=2)) == "O(2 * log(0)) = O(0)"


class TestProofJson:
    """Tests for proof_to_json() and proof_from_json()."""

    def test_round_trip_through_json_text(self) -> None:
        """A proof survives json.dumps / json.loads."""
        proof = make_proof(n_queries=4, n_rounds=3, degree=5)
        text = json.dumps(proof_to_json(proof))
        assert proof_from_json(json.loads(text)) == proof

    def test_encoding(self) -> None:
        """Bytes as hex, field values as decimal strings."""
        obj = proof_to_json(make_proof(n_queries=1, n_rounds=1, degree=2))
        assert obj["commitment"] == bytes(range(32)).hex()
        assert obj["evaluations"] == ["10"]
        assert obj["friCommitments"] == ["00" * 32]
        assert obj["queryIndices"] == [0]
        assert obj["polynomialDegree"] == 2

    def test_modulus_applied(self) -> None:
        """Evaluations are decoded into the requested field."""
        obj = proof_to_json(make_proof(n_queries=1))
        proof = proof_from_json(obj, modulus=SMALL_PRIME)
        assert proof.evaluations == (FieldElement(10, SMALL_PRIME),)

    @pytest.mark.parametrize("key", ["commitment", "evaluations", "merkleProofs", "polynomialDegree"])
    def test_missing_key_raises(self, key: str) -> None:
        obj = proof_to_json(make_proof())
        del obj[key]
        with pytest.raises(MalformedProofError):
            proof_from_json(obj)

    def test_bad_hex_raises(self) -> None:
        obj = proof_to_json(make_proof())
        obj["commitment"] = "zz"
        with pytest.raises(MalformedProofError):
            proof_from_json(obj)

    def test_bad_evaluation_raises(self) -> None:
        obj = proof_to_json(make_proof())
        obj["evaluations"] = ["ten"]
        with pytest.raises(MalformedProofError):
            proof_from_json(obj)
