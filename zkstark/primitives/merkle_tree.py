"""Binary Merkle tree commitment using SHA-256.

Leaves enter the bottom level as-is and each internal node is
sha256(left || right). Before building, the leaf list is padded to the next power
of two (minimum two leaves) by repeating the last leaf, so every level is even and
every inclusion path has exactly log2(padded size) entries.
"""

import hashlib
import hmac
import json
from dataclasses import dataclass, replace
from typing import List, Sequence, Tuple

# --- Constants ---

HASH_SIZE = 32
LEFT = "left"
RIGHT = "right"

# --- Type Aliases ---

MerkleRoot = bytes


class MalformedProofError(ValueError):
    """A serialized proof artifact could not be decoded."""


def hash_pair(left: bytes, right: bytes) -> bytes:
    return hashlib.sha256(left + right).digest()


def _byte_array(value) -> bytes:
    # bytes(n) of a bare integer would allocate n zero bytes
    if not isinstance(value, list):
        raise MalformedProofError(f"Expected a byte array, got {type(value).__name__}")
    return bytes(value)


# --- Inclusion Proof ---

@dataclass(frozen=True)
class SiblingHash:
    """One step of an authentication path.

    Attributes:
        hash: Sibling node at this level
        position: Side the sibling sits on, LEFT or RIGHT
    """
    hash: bytes
    position: str


@dataclass(frozen=True)
class MerkleProof:
    """Leaf, authentication path from leaf to root, and the expected root."""
    leaf: bytes
    path: Tuple[SiblingHash, ...]
    root: MerkleRoot

    @property
    def index(self) -> int:
        """Leaf index implied by the sibling positions."""
        idx = 0
        for level, step in enumerate(self.path):
            if step.position == LEFT:
                idx |= 1 << level
        return idx

    def verify(self) -> bool:
        """Recompute the root from leaf and path and compare with the stored root."""
        current = self.leaf
        for step in self.path:
            if step.position == LEFT:
                current = hash_pair(step.hash, current)
            elif step.position == RIGHT:
                current = hash_pair(current, step.hash)
            else:
                return False
        return hmac.compare_digest(current, self.root)

    def with_root(self, root: MerkleRoot) -> "MerkleProof":
        """Same leaf and path checked against a different root."""
        return replace(self, root=root)

    # --- Serialization ---
    # JSON object with byte strings as integer arrays:
    # {"leaf": [...], "proof": [{"hash": [...], "position": "left"}, ...], "root": [...]}

    def serialize(self) -> str:
        return json.dumps({
            "leaf": list(self.leaf),
            "proof": [{"hash": list(s.hash), "position": s.position} for s in self.path],
            "root": list(self.root),
        }, separators=(",", ":"))

    @classmethod
    def deserialize(cls, data: str) -> "MerkleProof":
        """Parse the output of serialize().

        Raises:
            MalformedProofError: On invalid JSON, missing fields, byte strings that
                are not integer arrays, bytes outside 0..255 or an unknown sibling
                position.
        """
        try:
            obj = json.loads(data)
            path = []
            for step in obj["proof"]:
                if step["position"] not in (LEFT, RIGHT):
                    raise MalformedProofError(f"Unknown sibling position: {step['position']!r}")
                path.append(SiblingHash(hash=_byte_array(step["hash"]), position=step["position"]))
            return cls(leaf=_byte_array(obj["leaf"]), path=tuple(path), root=_byte_array(obj["root"]))
        except MalformedProofError:
            raise
        except (TypeError, ValueError, KeyError) as e:
            raise MalformedProofError(f"Cannot decode Merkle proof: {e}") from e


# --- Merkle Tree ---

class MerkleTree:
    """Merkle tree over fixed-size leaves, built once at construction."""

    def __init__(self, leaves: Sequence[bytes]) -> None:
        if len(leaves) == 0:
            raise ValueError("Merkle tree needs at least one leaf")
        leaf_size = len(leaves[0])
        if any(len(leaf) != leaf_size for leaf in leaves):
            raise ValueError("Merkle leaves must all have the same length")

        self.leaves: List[bytes] = [bytes(leaf) for leaf in leaves]
        self.levels: List[List[bytes]] = self._build(self.leaves)

    def __len__(self) -> int:
        return len(self.leaves)

    @property
    def depth(self) -> int:
        """Number of hashing levels (= length of every authentication path)."""
        return len(self.levels) - 1

    def get_root(self) -> MerkleRoot:
        return self.levels[-1][0]

    def get_proof(self, index: int) -> MerkleProof:
        """Inclusion proof for the leaf at index.

        Raises:
            ValueError: If index is out of range.
        """
        if index < 0 or index >= len(self.leaves):
            raise ValueError(f"Leaf index {index} out of range [0, {len(self.leaves)})")

        path = []
        idx = index
        for level in self.levels[:-1]:
            if idx % 2 == 0:
                path.append(SiblingHash(hash=level[idx + 1], position=RIGHT))
            else:
                path.append(SiblingHash(hash=level[idx - 1], position=LEFT))
            idx //= 2

        return MerkleProof(leaf=self.leaves[index], path=tuple(path), root=self.get_root())

    # --- Internal ---

    @staticmethod
    def _build(leaves: List[bytes]) -> List[List[bytes]]:
        width = 2
        while width < len(leaves):
            width *= 2
        level = leaves + [leaves[-1]] * (width - len(leaves))

        levels = [level]
        while len(level) > 1:
            level = [hash_pair(level[i], level[i + 1]) for i in range(0, len(level), 2)]
            levels.append(level)
        return levels
