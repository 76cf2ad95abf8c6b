"""Evaluation domain construction.

The domain is [g^0, g^1, ..., g^(D-1)] for a power of two D. The generator g is
found by brute force over small field elements: the first candidate with
g^((p-1)/D) == 1 and g^((p-1)/(2D)) != 1. The prover and verifier run the same
search, so both reach the same domain for the same claimed degree.
"""

import logging
from typing import List

from zkstark.primitives.field import STARK_PRIME, FieldElement

logger = logging.getLogger(__name__)

# First candidate tried by the generator search
FIRST_CANDIDATE = 2


class GeneratorNotFoundError(RuntimeError):
    """No domain generator was found within the search limits."""


def next_power_of_two(n: int) -> int:
    power = 1
    while power < n:
        power *= 2
    return power


def domain_size_for_degree(degree: int, blowup_factor: int = 4, min_domain_size: int = 2) -> int:
    """Smallest power of two >= blowup_factor * degree, and at least min_domain_size."""
    return next_power_of_two(max(blowup_factor * degree, min_domain_size))


def find_subgroup_generator(
    order: int,
    modulus: int = STARK_PRIME,
    max_candidates: int = 1 << 16,
) -> FieldElement:
    """Search small field elements for the domain generator of a given order.

    Args:
        order: Domain size D
        modulus: Field modulus p
        max_candidates: Number of candidates tried before giving up

    Returns:
        First candidate g >= 2 with g^((p-1)/D) == 1 and g^((p-1)/(2D)) != 1

    Raises:
        GeneratorNotFoundError: If D does not divide p - 1 or the search is exhausted.
    """
    phi = modulus - 1
    if order < 1 or phi % order != 0:
        raise GeneratorNotFoundError(f"Domain size {order} does not divide p - 1")

    required = phi // order
    one = FieldElement.one(modulus)
    last = min(FIRST_CANDIDATE + max_candidates, modulus)
    for g in range(FIRST_CANDIDATE, last):
        candidate = FieldElement(g, modulus)
        if candidate.pow(required) != one:
            continue
        if candidate.pow(required // 2) != one:
            logger.debug("Domain generator for size %d: %d", order, g)
            return candidate

    raise GeneratorNotFoundError(
        f"No generator for a domain of size {order} among {last - FIRST_CANDIDATE} candidates"
    )


def evaluation_domain(generator: FieldElement, size: int) -> List[FieldElement]:
    """[generator^0, ..., generator^(size-1)]."""
    domain = []
    current = FieldElement.one(generator.modulus)
    for _ in range(size):
        domain.append(current)
        current = current * generator
    return domain
