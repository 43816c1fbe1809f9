"""
Event model for game replay.

Events are immutable records of one atomic occurrence in the transcript.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class GameEventType(str, Enum):
    """Closed set of event types the replay engine understands."""
    GAME_START = "GAME_START"
    GAME_END = "GAME_END"
    QUARTER_START = "QUARTER_START"
    QUARTER_END = "QUARTER_END"
    TWO_POINTS_MADE = "TWO_POINTS_MADE"
    TWO_POINTS_MISSED = "TWO_POINTS_MISSED"
    THREE_POINTS_MADE = "THREE_POINTS_MADE"
    THREE_POINTS_MISSED = "THREE_POINTS_MISSED"
    FREE_THROW_MADE = "FREE_THROW_MADE"
    FREE_THROW_MISSED = "FREE_THROW_MISSED"
    REBOUND = "REBOUND"
    ASSIST = "ASSIST"
    BLOCK = "BLOCK"
    STEAL = "STEAL"
    FOUL = "FOUL"
    TURNOVER = "TURNOVER"
    TIMEOUT = "TIMEOUT"
    SUBSTITUTION = "SUBSTITUTION"
    JUMP_BALL = "JUMP_BALL"
    VIOLATION = "VIOLATION"
    UNKNOWN = "UNKNOWN"


class TeamSide(str, Enum):
    HOME = "home"
    AWAY = "away"


MADE_SHOTS = frozenset({
    GameEventType.TWO_POINTS_MADE,
    GameEventType.THREE_POINTS_MADE,
    GameEventType.FREE_THROW_MADE,
})

MISSED_SHOTS = frozenset({
    GameEventType.TWO_POINTS_MISSED,
    GameEventType.THREE_POINTS_MISSED,
    GameEventType.FREE_THROW_MISSED,
})


@dataclass(frozen=True)
class Score:
    """Cumulative score as reported by the transcript."""
    home: int
    away: int

    def to_dict(self) -> Dict[str, int]:
        return {"home": self.home, "away": self.away}

    @staticmethod
    def from_dict(data: Optional[Dict[str, Any]]) -> Optional["Score"]:
        if not data:
            return None
        return Score(home=int(data["home"]), away=int(data["away"]))


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable event record.

    Fields:
        id: Deterministic identifier (see core.ids.stable_id)
        type: Event type
        team: Acting team
        player: Canonical player name ("" for team-level markers)
        time: Countdown clock "MM:SS"
        quarter: Quarter number, starting at 1
        points: Points credited by this event (0 unless a make)
        is_offensive: Rebounds only; True for an offensive rebound
        score: Transcript score at this line, authoritative when present
        description: Original action text
        replaced_player: Outgoing player of a substitution
        offensive_rebounds: Cumulative offensive rebounds from the annotation
        defensive_rebounds: Cumulative defensive rebounds from the annotation
        line_no: 1-based transcript line the event came from
    """
    id: str
    type: GameEventType
    team: TeamSide
    player: str
    time: str
    quarter: int
    points: int = 0
    is_offensive: bool = False
    score: Optional[Score] = None
    description: str = ""
    replaced_player: Optional[str] = None
    offensive_rebounds: Optional[int] = None
    defensive_rebounds: Optional[int] = None
    line_no: int = 0

    @property
    def is_made_shot(self) -> bool:
        return self.type in MADE_SHOTS

    @property
    def is_missed_shot(self) -> bool:
        return self.type in MISSED_SHOTS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "team": self.team.value,
            "player": self.player,
            "time": self.time,
            "quarter": self.quarter,
            "points": self.points,
            "is_offensive": self.is_offensive,
            "score": self.score.to_dict() if self.score else None,
            "description": self.description,
            "replaced_player": self.replaced_player,
            "offensive_rebounds": self.offensive_rebounds,
            "defensive_rebounds": self.defensive_rebounds,
            "line_no": self.line_no,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "GameEvent":
        return GameEvent(
            id=data["id"],
            type=GameEventType(data["type"]),
            team=TeamSide(data["team"]),
            player=data.get("player", ""),
            time=data["time"],
            quarter=int(data["quarter"]),
            points=int(data.get("points", 0)),
            is_offensive=bool(data.get("is_offensive", False)),
            score=Score.from_dict(data.get("score")),
            description=data.get("description", ""),
            replaced_player=data.get("replaced_player"),
            offensive_rebounds=data.get("offensive_rebounds"),
            defensive_rebounds=data.get("defensive_rebounds"),
            line_no=int(data.get("line_no", 0)),
        )
