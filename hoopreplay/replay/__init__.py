"""
Replay system for deterministic box-score reconstruction.

Replay folds the event list into a fresh GameState.
Must be 100% deterministic: same events -> same state.
"""

from .handlers import build_reducer, register_handlers
from .playtime import PlayingTimeTracker
from .runner import (
    ReplayEngine,
    ReplayResult,
    apply_event,
    initialize_state,
    replay,
    replay_config,
    replay_to,
)
from .snapshot import compute_state_hash, serialize_state

__all__ = [
    "build_reducer",
    "register_handlers",
    "PlayingTimeTracker",
    "ReplayEngine",
    "ReplayResult",
    "apply_event",
    "initialize_state",
    "replay",
    "replay_config",
    "replay_to",
    "compute_state_hash",
    "serialize_state",
]
