"""
Reducer handlers for box-score statistics.

All handlers are deterministic and mutate the GameState they are given.
Team points, rebounds and shooting splits are not touched here: they are
recomputed from the players after every event (Team.refresh_totals).
Assists, blocks, steals, fouls and turnovers have nothing to derive from,
so handlers increment the player and team counters together.
"""

from typing import Optional

from ..core.events import GameEvent, GameEventType
from ..core.reducer import Reducer
from ..core.state import GameState, Player
from ..logging_config import get_logger

# event type -> (made field, attempted field)
SHOT_FIELDS = {
    GameEventType.TWO_POINTS_MADE: ("two_points_made", "two_points_attempted"),
    GameEventType.TWO_POINTS_MISSED: ("two_points_made", "two_points_attempted"),
    GameEventType.THREE_POINTS_MADE: ("three_points_made", "three_points_attempted"),
    GameEventType.THREE_POINTS_MISSED: ("three_points_made", "three_points_attempted"),
    GameEventType.FREE_THROW_MADE: ("free_throws_made", "free_throws_attempted"),
    GameEventType.FREE_THROW_MISSED: ("free_throws_made", "free_throws_attempted"),
}

COUNTER_FIELDS = {
    GameEventType.ASSIST: "assists",
    GameEventType.BLOCK: "blocks",
    GameEventType.STEAL: "steals",
    GameEventType.FOUL: "fouls",
    GameEventType.TURNOVER: "turnovers",
}

# Clock-only events: they move state.time/quarter (and the playing-time
# clock) but no box-score counter.
NO_STAT_EVENTS = (
    GameEventType.GAME_START,
    GameEventType.GAME_END,
    GameEventType.QUARTER_START,
    GameEventType.QUARTER_END,
    GameEventType.TIMEOUT,
    GameEventType.SUBSTITUTION,
    GameEventType.JUMP_BALL,
    GameEventType.VIOLATION,
    GameEventType.UNKNOWN,
)


def register_handlers(reducer: Reducer) -> None:
    for event_type in (
        GameEventType.TWO_POINTS_MADE,
        GameEventType.THREE_POINTS_MADE,
        GameEventType.FREE_THROW_MADE,
    ):
        reducer.register(event_type, on_shot_made)
    for event_type in (
        GameEventType.TWO_POINTS_MISSED,
        GameEventType.THREE_POINTS_MISSED,
        GameEventType.FREE_THROW_MISSED,
    ):
        reducer.register(event_type, on_shot_missed)
    reducer.register(GameEventType.REBOUND, on_rebound)
    for event_type in COUNTER_FIELDS:
        reducer.register(event_type, on_counter)
    for event_type in NO_STAT_EVENTS:
        reducer.register(event_type, on_clock_only)


def build_reducer() -> Reducer:
    reducer = Reducer()
    register_handlers(reducer)
    return reducer


def _find_player(state: GameState, ev: GameEvent) -> Optional[Player]:
    player = state.find_player(ev.team, ev.player)
    if player is None:
        get_logger(__name__, trace_id=state.id).warning(
            "Player not found",
            extra={"event_id": ev.id, "team": ev.team.value, "player": ev.player},
        )
    return player


def on_shot_made(state: GameState, ev: GameEvent) -> None:
    player = _find_player(state, ev)
    if player is None:
        return

    made, attempted = SHOT_FIELDS[ev.type]
    stats = player.stats
    setattr(stats, made, getattr(stats, made) + 1)
    setattr(stats, attempted, getattr(stats, attempted) + 1)
    stats.points += ev.points


def on_shot_missed(state: GameState, ev: GameEvent) -> None:
    player = _find_player(state, ev)
    if player is None:
        return

    _, attempted = SHOT_FIELDS[ev.type]
    setattr(player.stats, attempted, getattr(player.stats, attempted) + 1)


def on_rebound(state: GameState, ev: GameEvent) -> None:
    player = _find_player(state, ev)
    if player is None:
        return

    stats = player.stats
    if ev.offensive_rebounds is not None and ev.defensive_rebounds is not None:
        # The annotation carries running totals for the game: overwrite.
        stats.offensive_rebounds = ev.offensive_rebounds
        stats.defensive_rebounds = ev.defensive_rebounds
    elif ev.is_offensive:
        stats.offensive_rebounds += 1
    else:
        stats.defensive_rebounds += 1
    stats.rebounds = stats.offensive_rebounds + stats.defensive_rebounds


def on_counter(state: GameState, ev: GameEvent) -> None:
    player = _find_player(state, ev)
    if player is None:
        return

    field_name = COUNTER_FIELDS[ev.type]
    setattr(player.stats, field_name, getattr(player.stats, field_name) + 1)
    team_stats = state.team(ev.team).stats
    setattr(team_stats, field_name, getattr(team_stats, field_name) + 1)


def on_clock_only(state: GameState, ev: GameEvent) -> None:
    return None
