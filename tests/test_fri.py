"""
FRI Folding Tests

Tests FRI.fold(), per-round commitment and the expected round count.
Hand-checked values use GF(17) with the size-4 domain [1, 4, 16, 13].
"""

import pytest

from zkstark.primitives.field import FieldElement, create_field, field_element_to_bytes
from zkstark.primitives.merkle_tree import MerkleTree
from zkstark.primitives.polynomial import Polynomial
from zkstark.protocol.domain import evaluation_domain, find_subgroup_generator
from zkstark.protocol.fri import FRI

SMALL_PRIME = 17


def small_poly(*coeffs: int) -> Polynomial:
    return Polynomial([FieldElement(c, SMALL_PRIME) for c in coeffs])


class TestFold:
    """Tests for FRI.fold()."""

    def test_hand_checked(self) -> None:
        """[1, 2, 3, 4] with challenge 5: [1 + 5*2, 3 + 5*4] = [11, 6] mod 17."""
        folded = FRI.fold(small_poly(1, 2, 3, 4), FieldElement(5, SMALL_PRIME))
        assert folded == small_poly(11, 6)

    @pytest.mark.parametrize("degree", [1, 2, 3, 7, 8, 15])
    def test_halves_degree(self, degree: int) -> None:
        """deg(fold(p)) == floor(deg(p) / 2) for non-degenerate coefficients."""
        pol = Polynomial([create_field(i + 1) for i in range(degree + 1)])
        assert FRI.fold(pol, create_field(3)).degree() == degree // 2

    def test_constant_unchanged(self) -> None:
        """Folding a constant returns the constant."""
        assert FRI.fold(small_poly(9), FieldElement(5, SMALL_PRIME)) == small_poly(9)

    def test_fold_identity(self) -> None:
        """fold(p)(x^2) combines p(x) and p(-x) with the challenge."""
        pol = Polynomial([create_field(c) for c in [4, 8, 15, 16, 23, 42]])
        alpha = create_field(1234567)
        x = create_field(98765)
        two = create_field(2)
        even = (pol.evaluate(x) + pol.evaluate(-x)) / two
        odd = (pol.evaluate(x) - pol.evaluate(-x)) / (two * x)
        assert FRI.fold(pol, alpha).evaluate(x * x) == even + alpha * odd


class TestCommitPhase:
    """Tests for FRI.merkelize() and FRI.commit_phase()."""

    def test_merkelize(self) -> None:
        """Leaves are the 32-byte encodings of the evaluations."""
        values = [create_field(v) for v in [3, 1, 4, 1, 5]]
        root, tree = FRI.merkelize(values)
        assert root == MerkleTree([field_element_to_bytes(v) for v in values]).get_root()
        assert tree.get_root() == root

    def test_constant_has_no_rounds(self) -> None:
        g = find_subgroup_generator(4, SMALL_PRIME)
        domain = evaluation_domain(g, 4)
        assert FRI.commit_phase(small_poly(7), domain, FieldElement(5, SMALL_PRIME)) == []

    def test_round_count(self) -> None:
        """Degree 3 -> 1 -> 0 commits two rounds."""
        g = find_subgroup_generator(4, SMALL_PRIME)
        domain = evaluation_domain(g, 4)
        roots = FRI.commit_phase(small_poly(1, 2, 3, 4), domain, FieldElement(5, SMALL_PRIME))
        assert len(roots) == 2
        assert all(len(r) == 32 for r in roots)

    def test_first_round_commits_input(self) -> None:
        """Round 0 is the commitment to the input polynomial's evaluations."""
        g = find_subgroup_generator(4, SMALL_PRIME)
        domain = evaluation_domain(g, 4)
        pol = small_poly(1, 2, 3, 4)
        roots = FRI.commit_phase(pol, domain, FieldElement(5, SMALL_PRIME))
        expected, _ = FRI.merkelize([pol.evaluate(x) for x in domain])
        assert roots[0] == expected
        second, _ = FRI.merkelize([small_poly(11, 6).evaluate(x) for x in domain])
        assert roots[1] == second


class TestExpectedRounds:
    """Tests for FRI.expected_rounds()."""

    @pytest.mark.parametrize("degree, expected", [(0, 0), (1, 0), (2, 1), (3, 2), (4, 2), (5, 3), (1024, 10)])
    def test_values(self, degree: int, expected: int) -> None:
        """ceil(log2(degree)), zero for degree <= 1."""
        assert FRI.expected_rounds(degree) == expected

    @pytest.mark.parametrize("degree", [2, 3, 5, 8, 13])
    def test_commit_phase_meets_expectation(self, degree: int) -> None:
        """An honest commit phase produces at least the expected round count."""
        pol = Polynomial([create_field(i + 2) for i in range(degree + 1)])
        domain = evaluation_domain(find_subgroup_generator(64), 64)
        roots = FRI.commit_phase(pol, domain, create_field(11))
        assert len(roots) >= FRI.expected_rounds(degree)
