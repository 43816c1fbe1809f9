"""
Replay runner: fold an ordered event list into a GameState.

Seeking is replay-from-zero: the state at step k is always rebuilt from a
freshly zeroed GameState by folding events[0..k]. There is no inverse
application of events.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from ..core.errors import RosterError
from ..core.events import GameEvent, TeamSide
from ..core.reducer import Reducer
from ..core.state import GameState, GameStatus, Player, Team
from ..roster.config import RosterConfig, TeamRoster
from .handlers import build_reducer
from .playtime import PlayingTimeTracker


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: State after applying events
        applied: Number of events applied
    """
    state: GameState
    applied: int


def _build_team(side: TeamSide, roster: TeamRoster) -> Team:
    players = [
        Player(
            name=entry.name,
            team=side,
            number=entry.number,
            position=entry.position,
            starter=roster.is_starter(entry.name),
        )
        for entry in roster.players
    ]
    return Team(side=side, name=roster.name, id=roster.id or side.value, players=players)


def initialize_state(
    home_roster: TeamRoster,
    away_roster: TeamRoster,
    events: Optional[Sequence[GameEvent]] = None,
    game_id: str = "",
) -> GameState:
    """
    Create a zeroed GameState.

    Raises:
        RosterError: If a roster is missing or empty
    """
    for side, roster in ((TeamSide.HOME, home_roster), (TeamSide.AWAY, away_roster)):
        if not isinstance(roster, TeamRoster):
            raise RosterError(f"{side.value} roster must be a TeamRoster, got {type(roster).__name__}")
        if not roster.players:
            raise RosterError(f"{side.value} roster is empty")

    state = GameState(
        id=game_id,
        home_team=_build_team(TeamSide.HOME, home_roster),
        away_team=_build_team(TeamSide.AWAY, away_roster),
        events=list(events or []),
    )
    tracker = PlayingTimeTracker(state)
    tracker.seed(TeamSide.HOME, home_roster.names, home_roster.starters)
    tracker.seed(TeamSide.AWAY, away_roster.names, away_roster.starters)
    return state


class ReplayEngine:
    """
    Applies events to a GameState using a reducer and the playing-time tracker.

    The engine holds no game state of its own; one instance can serve any
    number of independent replays.
    """

    def __init__(self, reducer: Optional[Reducer] = None) -> None:
        self.reducer = reducer or build_reducer()

    def apply_event(self, state: GameState, event: GameEvent) -> None:
        """Fold one event into state in place."""
        if state.status == GameStatus.NOT_STARTED:
            state.status = GameStatus.IN_PROGRESS

        tracker = PlayingTimeTracker(state)
        tracker.observe(event)

        self.reducer.apply(state, event)

        if event.score is not None:
            state.reported_score = event.score
        state.time = event.time
        state.quarter = event.quarter

        tracker.sync_minutes()
        for team in state.teams:
            team.refresh_totals()
        state.applied += 1

    def replay(
        self,
        events: Sequence[GameEvent],
        home_roster: TeamRoster,
        away_roster: TeamRoster,
        to_index: Optional[int] = None,
        game_id: str = "",
    ) -> ReplayResult:
        """
        Replay events from a zeroed state.

        Args:
            events: Full ordered event list
            home_roster / away_roster: Rosters with starting fives
            to_index: Stop after this index (inclusive, None = all). A
                negative index folds nothing; an index past the end is
                clamped to the last event.
            game_id: Identifier stored on the state

        Returns:
            ReplayResult with final state and count
        """
        state = initialize_state(home_roster, away_roster, events, game_id=game_id)

        last = len(events) - 1 if to_index is None else min(to_index, len(events) - 1)
        for ev in events[: max(last, -1) + 1]:
            self.apply_event(state, ev)

        return ReplayResult(state=state, applied=state.applied)

    def replay_to(
        self,
        events: Sequence[GameEvent],
        index: int,
        home_roster: TeamRoster,
        away_roster: TeamRoster,
        game_id: str = "",
    ) -> GameState:
        """State as of events[index], rebuilt from zero."""
        return self.replay(events, home_roster, away_roster, to_index=index, game_id=game_id).state


def apply_event(state: GameState, event: GameEvent) -> None:
    ReplayEngine().apply_event(state, event)


def replay(
    events: Sequence[GameEvent],
    home_roster: TeamRoster,
    away_roster: TeamRoster,
    to_index: Optional[int] = None,
    game_id: str = "",
) -> ReplayResult:
    return ReplayEngine().replay(events, home_roster, away_roster, to_index, game_id)


def replay_to(
    events: Sequence[GameEvent],
    index: int,
    home_roster: TeamRoster,
    away_roster: TeamRoster,
    game_id: str = "",
) -> GameState:
    return ReplayEngine().replay_to(events, index, home_roster, away_roster, game_id)


def replay_config(
    events: Sequence[GameEvent], config: RosterConfig, to_index: Optional[int] = None
) -> ReplayResult:
    """Replay using both rosters and the game id of a RosterConfig."""
    return ReplayEngine().replay(events, config.home, config.away, to_index, config.game.id)

