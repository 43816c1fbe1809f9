"""
Play-by-play Replay Engine

Parses semi-structured basketball play-by-play transcripts into typed events and
replays them deterministically into box-score statistics and playing time.
"""

from .core import GameEvent, GameEventType, GameState, GameStatus, TeamSide
from .roster import RosterConfig, TeamRoster, load_roster_config
from .parser import TranscriptParser, parse
from .replay import ReplayEngine, initialize_state, apply_event, replay_to

__version__ = "0.1.0"

__all__ = [
    "GameEvent",
    "GameEventType",
    "GameState",
    "GameStatus",
    "TeamSide",
    "RosterConfig",
    "TeamRoster",
    "load_roster_config",
    "TranscriptParser",
    "parse",
    "ReplayEngine",
    "initialize_state",
    "apply_event",
    "replay_to",
]
