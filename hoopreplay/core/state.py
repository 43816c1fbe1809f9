"""
State model for game replay.

GameState is the aggregate root: both teams with their players, the clock,
the full event list, and the playing-time bookkeeping. It is mutated in place
by the replay engine and rebuilt from zero on every seek.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .clock import QUARTER_START_CLOCK
from .events import GameEvent, Score, TeamSide


class GameStatus(str, Enum):
    NOT_STARTED = "not started"
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


@dataclass
class StatLine:
    """Box-score counters shared by players and teams."""
    points: int = 0
    rebounds: int = 0
    assists: int = 0
    steals: int = 0
    blocks: int = 0
    fouls: int = 0
    turnovers: int = 0
    play_time: int = 0  # minutes
    two_points_made: int = 0
    two_points_attempted: int = 0
    three_points_made: int = 0
    three_points_attempted: int = 0
    free_throws_made: int = 0
    free_throws_attempted: int = 0
    offensive_rebounds: int = 0
    defensive_rebounds: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass
class PlayerStats(StatLine):
    pass


@dataclass
class TeamStats(StatLine):
    pass


# Team fields recomputed as sums over the roster. Everything else on
# TeamStats (assists, steals, blocks, fouls, turnovers) is incremented
# alongside the player counter.
DERIVED_TEAM_FIELDS = (
    "points",
    "offensive_rebounds",
    "defensive_rebounds",
    "rebounds",
    "two_points_made",
    "two_points_attempted",
    "three_points_made",
    "three_points_attempted",
    "free_throws_made",
    "free_throws_attempted",
    "play_time",
)


@dataclass
class Player:
    name: str
    team: TeamSide
    number: str = ""
    position: str = ""
    starter: bool = False
    stats: PlayerStats = field(default_factory=PlayerStats)

    @property
    def key(self) -> str:
        """Playing-time key, e.g. "home-戴维斯"."""
        return player_key(self.team, self.name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "team": self.team.value,
            "number": self.number,
            "position": self.position,
            "starter": self.starter,
            "stats": self.stats.to_dict(),
        }


def player_key(team: TeamSide, name: str) -> str:
    return f"{team.value}-{name}"


@dataclass
class Team:
    side: TeamSide
    name: str
    id: str = ""
    players: List[Player] = field(default_factory=list)
    stats: TeamStats = field(default_factory=TeamStats)

    def player(self, name: str) -> Optional[Player]:
        return next((p for p in self.players if p.name == name), None)

    def refresh_totals(self) -> None:
        """Recompute derived team fields from the players."""
        for name in DERIVED_TEAM_FIELDS:
            setattr(self.stats, name, sum(getattr(p.stats, name) for p in self.players))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "side": self.side.value,
            "id": self.id,
            "name": self.name,
            "players": [p.to_dict() for p in self.players],
            "stats": self.stats.to_dict(),
        }


@dataclass
class PlayerTimeStatus:
    """On-court status used to accrue seconds between clock readings."""
    in_game: bool
    last_time_update: str


@dataclass
class GameState:
    """
    Replay state at one point of the event sequence.

    Attributes:
        id: Game identifier
        home_team / away_team: Teams with rosters and stats
        quarter / time: Values of the last folded event
        events: Full ordered event list (not only the folded prefix)
        status: NOT_STARTED until the first event is folded
        reported_score: Last score printed in the transcript
        time_status: Per player key on-court status
        seconds_played: Per player key accrued seconds
        clock_quarter: Quarter the playing-time clock belongs to
        applied: Number of events folded so far
    """
    home_team: Team
    away_team: Team
    id: str = ""
    quarter: int = 1
    time: str = QUARTER_START_CLOCK
    events: List[GameEvent] = field(default_factory=list)
    status: GameStatus = GameStatus.NOT_STARTED
    reported_score: Optional[Score] = None
    time_status: Dict[str, PlayerTimeStatus] = field(default_factory=dict)
    seconds_played: Dict[str, int] = field(default_factory=dict)
    clock_quarter: int = 1
    applied: int = 0

    def team(self, side: TeamSide) -> Team:
        return self.home_team if side == TeamSide.HOME else self.away_team

    @property
    def teams(self) -> List[Team]:
        return [self.home_team, self.away_team]

    def find_player(self, side: TeamSide, name: str) -> Optional[Player]:
        return self.team(side).player(name)

    def mark_finished(self) -> None:
        """Caller-driven transition once the event slice is exhausted."""
        self.status = GameStatus.FINISHED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "quarter": self.quarter,
            "time": self.time,
            "status": self.status.value,
            "applied": self.applied,
            "reported_score": self.reported_score.to_dict() if self.reported_score else None,
            "home_team": self.home_team.to_dict(),
            "away_team": self.away_team.to_dict(),
            "seconds_played": dict(self.seconds_played),
        }
