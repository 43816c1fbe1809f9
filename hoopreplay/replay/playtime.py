"""
Playing-time tracking.

Seconds on court are accrued from gaps between consecutive clock readings,
not from event counts: every in-game player is credited with the countdown
difference between their last update and the current event's clock.
Substitutions flip in/out status at the substitution's clock; a new quarter
resets in-game players to 12:00 without crediting the unobserved tail of the
previous quarter.
"""

from typing import Iterable, Optional

from ..core.clock import (
    BENCH_CLOCK,
    QUARTER_START_CLOCK,
    clock_diff,
    is_valid_clock,
    seconds_to_minutes,
)
from ..core.events import GameEvent, GameEventType, TeamSide
from ..core.state import GameState, PlayerTimeStatus, player_key
from ..logging_config import get_logger


class PlayingTimeTracker:
    """
    Runs in lockstep with the stat fold over the same GameState.

    The per-player status lives on the state (time_status, seconds_played)
    so a state folded one event at a time and a state rebuilt by a full
    replay end up identical.
    """

    def __init__(self, state: GameState) -> None:
        self.state = state
        self.log = get_logger(__name__, trace_id=state.id)

    def seed(self, side: TeamSide, names: Iterable[str], starters: Iterable[str]) -> None:
        """Starters are on court from 12:00; everyone else starts on the bench."""
        starting = set(starters)
        for name in names:
            key = player_key(side, name)
            on_court = name in starting
            self.state.time_status[key] = PlayerTimeStatus(
                in_game=on_court,
                last_time_update=QUARTER_START_CLOCK if on_court else BENCH_CLOCK,
            )
            self.state.seconds_played[key] = 0

    def observe(self, event: GameEvent) -> None:
        """Accrue time up to the event's clock, then apply its status change."""
        if event.quarter != self.state.clock_quarter or event.type == GameEventType.QUARTER_START:
            self.reset_quarter(event.quarter)

        if not is_valid_clock(event.time):
            self.log.warning(
                "Skipping time accrual for invalid clock",
                extra={"event_id": event.id, "clock": event.time},
            )
            return

        self.accrue(event.time)

        if event.type == GameEventType.SUBSTITUTION:
            self.substitute(event.team, event.player, event.replaced_player, event.time)

    def accrue(self, clock: str) -> None:
        for key, status in self.state.time_status.items():
            if not status.in_game:
                continue
            elapsed = clock_diff(status.last_time_update, clock)
            if elapsed > 0:
                self.state.seconds_played[key] += elapsed
                status.last_time_update = clock

    def reset_quarter(self, quarter: int) -> None:
        for status in self.state.time_status.values():
            if status.in_game:
                status.last_time_update = QUARTER_START_CLOCK
        self.state.clock_quarter = quarter

    def substitute(
        self, side: TeamSide, incoming: str, outgoing: Optional[str], clock: str
    ) -> None:
        """
        Swap two players of one team at clock.

        Both players must be on the roster and the outgoing player on court;
        otherwise nothing changes.
        """
        statuses = []
        for name in (outgoing, incoming):
            status = self.state.time_status.get(player_key(side, name)) if name else None
            if status is None:
                self.log.warning(
                    "Substitution references player not on roster",
                    extra={"team": side.value, "player": name, "incoming": incoming},
                )
                return
            statuses.append(status)

        leaving, entering = statuses
        if not leaving.in_game:
            self.log.warning(
                "Substitution takes out a player who is not on court",
                extra={"team": side.value, "player": outgoing, "incoming": incoming},
            )
            return
        leaving.in_game = False
        leaving.last_time_update = clock
        entering.in_game = True
        entering.last_time_update = clock

    def sync_minutes(self) -> None:
        """Write rounded minutes into every player's stats."""
        for team in self.state.teams:
            for player in team.players:
                seconds = self.state.seconds_played.get(player.key, 0)
                player.stats.play_time = seconds_to_minutes(seconds)
