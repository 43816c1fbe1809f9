"""
Core replay primitives.

- Events: immutable transcript occurrences
- State: teams, players, stats and the replay clock
- Reducer: per-event-type handlers
- Canonical: deterministic serialization
- Clock: countdown game-clock arithmetic
- IDs: stable identifier generation
"""

from .events import GameEvent, GameEventType, Score, TeamSide, MADE_SHOTS, MISSED_SHOTS
from .state import (
    GameState,
    GameStatus,
    Player,
    PlayerStats,
    PlayerTimeStatus,
    Team,
    TeamStats,
    player_key,
)
from .reducer import Reducer
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str
from .clock import (
    BENCH_CLOCK,
    QUARTER_LENGTH_SECONDS,
    QUARTER_START_CLOCK,
    clock_diff,
    fmt_mmss,
    is_valid_clock,
    seconds_to_minutes,
    to_seconds,
)
from .ids import stable_id
from .errors import HoopReplayError, RosterError, InvalidTransitionError, ClockFormatError

__all__ = [
    "GameEvent",
    "GameEventType",
    "Score",
    "TeamSide",
    "MADE_SHOTS",
    "MISSED_SHOTS",
    "GameState",
    "GameStatus",
    "Player",
    "PlayerStats",
    "PlayerTimeStatus",
    "Team",
    "TeamStats",
    "player_key",
    "Reducer",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "BENCH_CLOCK",
    "QUARTER_LENGTH_SECONDS",
    "QUARTER_START_CLOCK",
    "clock_diff",
    "fmt_mmss",
    "is_valid_clock",
    "seconds_to_minutes",
    "to_seconds",
    "stable_id",
    "HoopReplayError",
    "RosterError",
    "InvalidTransitionError",
    "ClockFormatError",
]
