"""Fiat-Shamir challenge derivation.

The prover and verifier call the same functions here, so both sides derive the
folding challenge and the query positions from the commitment bytes alone.
"""

import hashlib
import math
from typing import List

from zkstark.primitives.field import STARK_PRIME, int_to_bytes32

# --- Type Aliases ---

Challenge = int
QueryIndex = int

# Bytes of each counter hash used to pick a query position
QUERY_HASH_BYTES = 8


def derive_challenge(commitment: bytes, modulus: int = STARK_PRIME) -> Challenge:
    """challenge = sha256(commitment) mod p, read as a big-endian integer."""
    return int.from_bytes(hashlib.sha256(commitment).digest(), "big") % modulus


def query_count(security_parameter: int, domain_size: int) -> int:
    """Number of spot checks: ceil(lambda / log2(domain_size)), at most domain_size.

    Positions are drawn without replacement, so a domain cannot supply more
    queries than it has points.
    """
    if domain_size < 2:
        raise ValueError(f"domain_size must be at least 2, got {domain_size}")
    return min(math.ceil(security_parameter / math.log2(domain_size)), domain_size)


def derive_query_indices(
    seed: Challenge,
    count: int,
    domain_size: int,
    modulus: int = STARK_PRIME,
) -> List[QueryIndex]:
    """Derive distinct query positions in [0, domain_size).

    A counter starts at seed. Each step hashes its 32-byte encoding, reads the
    first 8 digest bytes as a big-endian integer, reduces it modulo domain_size
    and keeps it if not already chosen; the counter then advances mod p.

    Args:
        seed: Starting counter (the Fiat-Shamir challenge)
        count: Number of positions to return
        domain_size: Size of the evaluation domain
        modulus: Field modulus the counter wraps around

    Returns:
        Positions in the order they were drawn
    """
    if count > domain_size:
        raise ValueError(f"Cannot draw {count} distinct positions from a domain of {domain_size}")

    indices: List[QueryIndex] = []
    chosen = set()
    counter = seed
    while len(indices) < count:
        digest = hashlib.sha256(int_to_bytes32(counter)).digest()
        index = int.from_bytes(digest[:QUERY_HASH_BYTES], "big") % domain_size
        if index not in chosen:
            chosen.add(index)
            indices.append(index)
        counter = (counter + 1) % modulus
    return indices
