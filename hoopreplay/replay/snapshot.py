"""
State fingerprints.

Seeking rebuilds a GameState from zero, so two seeks to the same index must
hash the same. The CLI prints this hash next to the box score.
"""

import hashlib

from ..core.canonical import canonical_json_bytes
from ..core.state import GameState


def serialize_state(state: GameState) -> bytes:
    """Canonical UTF-8 JSON of state.to_dict()."""
    return canonical_json_bytes(state)


def compute_state_hash(state: GameState) -> str:
    """SHA-256 hex digest of serialize_state(state)."""
    return hashlib.sha256(serialize_state(state)).hexdigest()
