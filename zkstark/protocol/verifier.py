"""STARK proof verification.

Checks run in a fixed order and stop at the first failure:
1. Commitment shape - exactly 32 bytes
2. Evaluation shape - non-empty, every value a FieldElement of the statement's field
3. Merkle proofs - one per query, each opening the claimed evaluation under the commitment
4. FRI shape - at least ceil(log2(degree)) round commitments of 32 bytes each
5. Constraint spot check - at every queried point on the vanishing set, each
   constraint evaluated at the claimed value must be zero

verify() always returns a bool. Any exception raised while checking is logged and
treated as a rejection.

Known limitation: step 5 is a coarse proxy. It does not rebuild the random linear
combination the prover used for the composition polynomial, and only queried
points where x^n = 1 (n = public input length) constrain anything.

Openings are not tied to their positions either. Step 3 never compares
MerkleProof.index with the matching query index, never checks the path length
against log2 of the domain size, and the query indices themselves are taken from
the proof rather than re-derived from the challenge.
"""

import logging
from dataclasses import replace
from typing import Callable, List, Optional, Tuple

from zkstark.primitives.field import FieldElement, field_element_to_bytes
from zkstark.primitives.merkle_tree import HASH_SIZE, MalformedProofError, MerkleProof
from zkstark.primitives.transcript import derive_challenge
from zkstark.protocol.config import StarkConfig
from zkstark.protocol.domain import domain_size_for_degree, find_subgroup_generator
from zkstark.protocol.fri import FRI
from zkstark.protocol.proof import Proof, proof_size, verification_complexity
from zkstark.protocol.statement import Statement

logger = logging.getLogger(__name__)


class StarkVerifier:
    """Stateless verifier for one statement."""

    def __init__(
        self,
        statement: Statement,
        security_parameter: Optional[int] = None,
        config: Optional[StarkConfig] = None,
    ) -> None:
        config = config or StarkConfig()
        if security_parameter is not None:
            config = replace(config, security_parameter=security_parameter)
        self.statement = statement
        self.config = config
        self.modulus = statement.modulus

    @property
    def security_parameter(self) -> int:
        return self.config.security_parameter

    # --- Main Entry Point ---

    def verify(self, proof: Proof) -> bool:
        """Accept or reject a proof against this verifier's statement."""
        checks: List[Tuple[str, Callable[[Proof], bool]]] = [
            ("Commitment verification failed", self.verify_commitment),
            ("Evaluation verification failed", self.verify_evaluations),
            ("Merkle proof verification failed", self.verify_merkle_proofs),
            ("FRI protocol verification failed", self.verify_fri),
            ("Constraint verification failed", self.verify_constraints),
        ]
        try:
            for message, check in checks:
                if not check(proof):
                    logger.warning(message)
                    return False
        except Exception as e:
            logger.warning("Verification error: %s: %s", type(e).__name__, e)
            return False
        return True

    # --- Checks ---

    def verify_commitment(self, proof: Proof) -> bool:
        return isinstance(proof.commitment, bytes) and len(proof.commitment) == HASH_SIZE

    def verify_evaluations(self, proof: Proof) -> bool:
        if not proof.evaluations:
            return False
        return all(
            isinstance(e, FieldElement) and e.modulus == self.modulus
            for e in proof.evaluations
        )

    def verify_merkle_proofs(self, proof: Proof) -> bool:
        """Each serialized proof must open its evaluation under the commitment.

        The root carried inside a serialized proof is ignored; every path is
        checked against proof.commitment.
        """
        if len(proof.merkle_proofs) != len(proof.query_indices):
            return False
        if len(proof.evaluations) != len(proof.query_indices):
            return False

        for serialized, evaluation in zip(proof.merkle_proofs, proof.evaluations):
            try:
                merkle_proof = MerkleProof.deserialize(serialized)
            except MalformedProofError as e:
                logger.debug("Rejecting undecodable Merkle proof: %s", e)
                return False
            if merkle_proof.leaf != field_element_to_bytes(evaluation):
                return False
            if not merkle_proof.with_root(proof.commitment).verify():
                return False
        return True

    def verify_fri(self, proof: Proof) -> bool:
        if proof.polynomial_degree < 0:
            return False
        if len(proof.fri_commitments) < FRI.expected_rounds(proof.polynomial_degree):
            return False
        return all(
            isinstance(c, bytes) and len(c) == HASH_SIZE
            for c in proof.fri_commitments
        )

    def verify_constraints(self, proof: Proof) -> bool:
        """Spot-check the constraints at the queried points.

        A query fails when some constraint is non-zero at the claimed evaluation
        while the query point lies on the vanishing set x^n - 1 = 0.
        """
        cfg = self.config
        challenge = derive_challenge(proof.commitment, self.modulus)
        domain_size = domain_size_for_degree(
            proof.polynomial_degree, cfg.blowup_factor, cfg.min_domain_size
        )
        generator = find_subgroup_generator(domain_size, self.modulus, cfg.max_generator_candidates)
        logger.debug("Spot check: challenge %d, domain size %d", challenge, domain_size)

        one = FieldElement.one(self.modulus)
        trace_length = len(self.statement.public_input)
        for index, evaluation in zip(proof.query_indices, proof.evaluations):
            point = generator.pow(index)
            for constraint in self.statement.constraints:
                if constraint([evaluation]).is_zero():
                    continue
                if (point.pow(trace_length) - one).is_zero():
                    return False
        return True

    # --- Informational ---

    def get_proof_size(self, proof: Proof) -> int:
        return proof_size(proof)

    def get_verification_complexity(self, proof: Proof) -> str:
        return verification_complexity(proof)
