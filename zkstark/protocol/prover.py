"""STARK proof generation.

Protocol, in order:
1. Interpolate the trace: T(i) = trace[i] for i = 0..n-1
2. Evaluate each constraint at every step on [T(i)] and interpolate the results
3. Combine the constraint polynomials into the composition polynomial C
4. Build the evaluation domain for C (see protocol.domain)
5. Commit to C over the domain (Merkle root = commitment)
6. challenge = sha256(commitment) mod p
7. num_queries = ceil(lambda / log2(D)), capped at D
8. Derive distinct query positions from the challenge
9. Open C at each position with a Merkle inclusion proof
10. FRI: commit and fold C with the challenge until it is constant

Known limitation: the coefficients of the random linear combination in step 3
come from the OS random source, not from the transcript, so they are not bound
to the commitment.
"""

import logging
import secrets
from dataclasses import replace
from typing import List, Optional

from zkstark.primitives.field import FieldElement, FieldMismatchError
from zkstark.primitives.polynomial import Polynomial
from zkstark.primitives.transcript import derive_challenge, derive_query_indices, query_count
from zkstark.protocol.config import StarkConfig
from zkstark.protocol.domain import (
    domain_size_for_degree,
    evaluation_domain,
    find_subgroup_generator,
)
from zkstark.protocol.fri import FRI
from zkstark.protocol.proof import Proof
from zkstark.protocol.statement import Statement, Witness

logger = logging.getLogger(__name__)

# Random bytes drawn per combination coefficient before reduction mod p
RANDOM_COEFFICIENT_BYTES = 32


class StarkProver:
    """Single-use prover for one statement and witness."""

    def __init__(
        self,
        statement: Statement,
        witness: Witness,
        security_parameter: Optional[int] = None,
        config: Optional[StarkConfig] = None,
    ) -> None:
        config = config or StarkConfig()
        if security_parameter is not None:
            config = replace(config, security_parameter=security_parameter)
        if witness.modulus != statement.modulus:
            raise FieldMismatchError(
                f"Witness is in GF({witness.modulus}), statement in GF({statement.modulus})"
            )
        self.statement = statement
        self.witness = witness
        self.config = config
        self.modulus = statement.modulus

    @property
    def security_parameter(self) -> int:
        return self.config.security_parameter

    # --- Main Entry Point ---

    def generate_proof(self) -> Proof:
        """Run the full protocol and return the proof.

        Raises:
            GeneratorNotFoundError: If no domain generator is found.
            ValueError: If the trace is longer than the field, so step coordinates collide.
        """
        cfg = self.config

        # --- Trace and constraints ---
        trace_poly = self.interpolate_trace()
        constraint_polys = self.evaluate_constraints(trace_poly)
        composition = self.combine_constraints(constraint_polys)
        degree = composition.degree()

        # --- Evaluation domain ---
        domain_size = domain_size_for_degree(degree, cfg.blowup_factor, cfg.min_domain_size)
        generator = find_subgroup_generator(domain_size, self.modulus, cfg.max_generator_candidates)
        domain = evaluation_domain(generator, domain_size)

        # --- Commit ---
        evaluations = composition.evaluate_domain(domain)
        commitment, tree = FRI.merkelize(evaluations)

        # --- Fiat-Shamir queries ---
        challenge = derive_challenge(commitment, self.modulus)
        num_queries = query_count(cfg.security_parameter, domain_size)
        query_indices = derive_query_indices(challenge, num_queries, domain_size, self.modulus)
        logger.debug(
            "Composition degree %d, domain size %d, %d queries",
            degree, domain_size, num_queries,
        )

        queried = [evaluations[i] for i in query_indices]
        merkle_proofs = [tree.get_proof(i).serialize() for i in query_indices]

        # --- FRI ---
        fri_commitments = FRI.commit_phase(composition, domain, FieldElement(challenge, self.modulus))
        logger.debug("FRI committed %d rounds", len(fri_commitments))

        return Proof(
            commitment=commitment,
            evaluations=tuple(queried),
            merkle_proofs=tuple(merkle_proofs),
            query_indices=tuple(query_indices),
            fri_commitments=tuple(fri_commitments),
            polynomial_degree=degree,
        )

    # --- Protocol Steps ---

    def interpolate_trace(self) -> Polynomial:
        """T(x) with T(i) = trace[i], using Field(i) as the x coordinate."""
        return Polynomial.interpolate([
            (FieldElement(i, self.modulus), value)
            for i, value in enumerate(self.witness.trace)
        ])

    def evaluate_constraints(self, trace_poly: Polynomial) -> List[Polynomial]:
        """One polynomial per constraint through its values at the trace steps.

        Each step passes the single reconstructed value [T(i)] to the constraint.
        """
        steps = [FieldElement(i, self.modulus) for i in range(len(self.witness.trace))]
        step_values = [trace_poly.evaluate(x) for x in steps]

        constraint_polys = []
        for constraint in self.statement.constraints:
            points = [(x, constraint([v])) for x, v in zip(steps, step_values)]
            constraint_polys.append(Polynomial.interpolate(points))
        return constraint_polys

    def combine_constraints(self, polynomials: List[Polynomial]) -> Polynomial:
        """C = P_0 + sum(r_i * P_i) with a fresh random r_i per additional term."""
        if not polynomials:
            return Polynomial.zero(self.modulus)

        result = polynomials[0]
        for pol in polynomials[1:]:
            result = result.add(pol.scalar_mul(self._random_field_element()))
        return result

    # --- Internal ---

    def _random_field_element(self) -> FieldElement:
        value = int.from_bytes(secrets.token_bytes(RANDOM_COEFFICIENT_BYTES), "big")
        return FieldElement(value, self.modulus)
