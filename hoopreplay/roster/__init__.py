"""
Roster configuration: canonical player names, aliases and starting fives.
"""

from .config import (
    GameInfo,
    MAX_STARTERS,
    PlayerEntry,
    RosterConfig,
    TeamRoster,
    load_roster_config,
    squash,
)

__all__ = [
    "GameInfo",
    "MAX_STARTERS",
    "PlayerEntry",
    "RosterConfig",
    "TeamRoster",
    "load_roster_config",
    "squash",
]
