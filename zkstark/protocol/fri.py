"""FRI folding protocol."""

import math
from typing import List, Sequence, Tuple

from zkstark.primitives.field import FieldElement, field_element_to_bytes
from zkstark.primitives.merkle_tree import MerkleRoot, MerkleTree
from zkstark.primitives.polynomial import Polynomial


class FRI:
    """FRI protocol: folding, per-round commitment, and expected round count."""

    @staticmethod
    def fold(pol: Polynomial, challenge: FieldElement) -> Polynomial:
        """Fold p = even(x^2) + x * odd(x^2) into even(x) + challenge * odd(x).

        The result has degree floor(deg(p) / 2), so repeated folding reaches
        degree 0.
        """
        even, odd = pol.split_even_odd()
        return even.add(odd.scalar_mul(challenge))

    @staticmethod
    def merkelize(evaluations: Sequence[FieldElement]) -> Tuple[MerkleRoot, MerkleTree]:
        """Commit to evaluations: one 32-byte big-endian leaf per value."""
        tree = MerkleTree([field_element_to_bytes(e) for e in evaluations])
        return tree.get_root(), tree

    @staticmethod
    def commit_phase(
        polynomial: Polynomial,
        domain: Sequence[FieldElement],
        challenge: FieldElement,
    ) -> List[MerkleRoot]:
        """Commit-fold loop.

        While the current polynomial has positive degree: evaluate it over the
        domain, commit to the evaluations, then fold with the challenge. Every
        round reuses the same domain and challenge.

        Returns:
            One Merkle root per round (empty for a constant polynomial)
        """
        roots: List[MerkleRoot] = []
        current = polynomial
        while current.degree() > 0:
            root, _ = FRI.merkelize(current.evaluate_domain(domain))
            roots.append(root)
            current = FRI.fold(current, challenge)
        return roots

    @staticmethod
    def expected_rounds(degree: int) -> int:
        """Minimum number of round commitments the verifier accepts: ceil(log2(degree)).

        Degrees 0 and 1 need none.
        """
        if degree <= 1:
            return 0
        return math.ceil(math.log2(degree))
