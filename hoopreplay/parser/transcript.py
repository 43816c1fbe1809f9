"""
Transcript parser: tab-delimited play-by-play text -> ordered GameEvents.

Each data row is expected as

    time \t home action \t score \t away action

but rows are tolerated rather than validated: missing columns, stray
whitespace and header/footer rows never raise. Fragments that cannot be
attributed to a rostered player are dropped with a warning.
"""

from typing import List, Optional, Tuple

from ..core.clock import QUARTER_START_CLOCK, is_valid_clock
from ..core.events import GameEvent, GameEventType, Score, TeamSide
from ..core.ids import stable_id
from ..logging_config import get_logger
from ..roster.config import RosterConfig, TeamRoster
from . import rules

FIELD_SEPARATOR = "\t"


class TranscriptParser:
    """
    Stateless parser bound to one game's roster config.

    Usage:
        parser = TranscriptParser(roster)
        events = parser.parse(text)
    """

    def __init__(self, roster: RosterConfig) -> None:
        self.roster = roster
        self.log = get_logger(__name__, trace_id=roster.game.id)

    def parse(self, text: str) -> List[GameEvent]:
        """
        Parse a whole transcript.

        Events keep transcript line order; within a line the home action
        comes first, then the away action.
        """
        events: List[GameEvent] = []
        quarter = 1

        for line_no, raw in enumerate((text or "").splitlines(), start=1):
            if not raw.strip():
                continue

            started = rules.quarter_start(raw)
            if started is not None:
                quarter = started
                events.append(self._quarter_start_event(quarter, line_no))
                continue

            fields = raw.split(FIELD_SEPARATOR)
            if rules.is_header_row(fields[0]) or rules.is_section_marker(raw):
                self.log.debug("Skipping non-data row", extra={"line_no": line_no})
                continue

            events.extend(self.parse_line(raw, quarter, line_no))

        self.log.info(
            "Parsed transcript",
            extra={"events": len(events), "quarters": quarter},
        )
        return events

    def parse_line(self, line: str, quarter: int, line_no: int = 0) -> List[GameEvent]:
        """Parse one data row into zero, one or more events."""
        time, home_action, score_text, away_action = _split_fields(line)

        if not is_valid_clock(time):
            if home_action or away_action:
                self.log.warning(
                    "Invalid clock value, using 12:00",
                    extra={"line_no": line_no, "clock": time},
                )
            time = QUARTER_START_CLOCK

        score = parse_score(score_text)
        events: List[GameEvent] = []
        for side, action in ((TeamSide.HOME, home_action), (TeamSide.AWAY, away_action)):
            if not action or rules.is_section_marker(action):
                continue
            events.extend(
                self.parse_action(action, side, quarter, time, score, line_no)
            )
        return events

    def parse_action(
        self,
        action: str,
        side: TeamSide,
        quarter: int,
        time: str,
        score: Optional[Score] = None,
        line_no: int = 0,
    ) -> List[GameEvent]:
        """
        Parse one team's action text.

        Returns the main event plus, for an assisted make, an ASSIST event.
        Returns an empty list when no rostered player can be extracted.
        """
        team = self.roster.team(side)
        event_type = rules.classify(action)

        replaced: Optional[str] = None
        if event_type == GameEventType.SUBSTITUTION:
            player, replaced = self._substitution_players(action, team, line_no)
        else:
            player = team.resolve_prefix(action)

        if not player:
            self.log.warning(
                "Unresolved player in action",
                extra={"line_no": line_no, "team": side.value, "action": action},
            )
            return []

        offensive, defensive, is_offensive = None, None, False
        if event_type == GameEventType.REBOUND:
            offensive, defensive, is_offensive = parse_rebound(action)

        event = GameEvent(
            id=stable_id(line_no, side.value, 0, event_type.value, player),
            type=event_type,
            team=side,
            player=player,
            time=time,
            quarter=quarter,
            points=self._points(event_type, action, line_no),
            is_offensive=is_offensive,
            score=score,
            description=action,
            replaced_player=replaced,
            offensive_rebounds=offensive,
            defensive_rebounds=defensive,
            line_no=line_no,
        )
        events = [event]

        if event_type in (GameEventType.TWO_POINTS_MADE, GameEventType.THREE_POINTS_MADE):
            assist = self._assist_event(event, team)
            if assist is not None:
                events.append(assist)
        return events

    def _quarter_start_event(self, quarter: int, line_no: int) -> GameEvent:
        return GameEvent(
            id=stable_id(line_no, "quarter", quarter),
            type=GameEventType.QUARTER_START,
            team=TeamSide.HOME,
            player="",
            time=QUARTER_START_CLOCK,
            quarter=quarter,
            description=f"第{quarter}节开始",
            line_no=line_no,
        )

    def _substitution_players(
        self, action: str, team: TeamRoster, line_no: int
    ) -> Tuple[Optional[str], Optional[str]]:
        match = rules.SUBSTITUTION_RE.search(action)
        incoming = team.resolve(match.group(1))
        outgoing = team.resolve(match.group(2))
        if incoming and not outgoing:
            self.log.warning(
                "Unresolved outgoing player in substitution",
                extra={"line_no": line_no, "action": action},
            )
            return None, None
        return incoming, outgoing

    def _points(self, event_type: GameEventType, action: str, line_no: int) -> int:
        # Free throws are always worth one; the parenthesised number next to
        # them is the shooter's running total.
        if event_type == GameEventType.FREE_THROW_MADE:
            return 1
        default = rules.default_points(event_type)
        if not default:
            return 0
        explicit = rules.explicit_points(action)
        if explicit is None or explicit == default:
            return default
        # A number that differs from the shot value is the shooter's running
        # total ("上篮 命中(3分)" after a made free throw is still a two).
        self.log.debug(
            "Ignoring points annotation that is not this shot's value",
            extra={"line_no": line_no, "annotation": explicit, "points": default},
        )
        return default

    def _assist_event(self, scoring: GameEvent, team: TeamRoster) -> Optional[GameEvent]:
        raw_name = parse_assist_name(scoring.description)
        if raw_name is None:
            return None

        name = team.resolve(raw_name)
        if not name or name == scoring.player:
            self.log.warning(
                "Dropping assist with unknown player",
                extra={"line_no": scoring.line_no, "assist": raw_name, "team": scoring.team.value},
            )
            return None

        return GameEvent(
            id=stable_id(scoring.line_no, scoring.team.value, 1, GameEventType.ASSIST.value, name),
            type=GameEventType.ASSIST,
            team=scoring.team,
            player=name,
            time=scoring.time,
            quarter=scoring.quarter,
            score=scoring.score,
            description=scoring.description,
            line_no=scoring.line_no,
        )


def _split_fields(line: str) -> Tuple[str, str, str, str]:
    parts = [p.strip() for p in line.split(FIELD_SEPARATOR)]
    parts += [""] * (4 - len(parts))
    return parts[0], parts[1], parts[2], parts[3]


def parse_score(text: str) -> Optional[Score]:
    match = rules.SCORE_RE.search(text or "")
    if not match:
        return None
    return Score(home=int(match.group(1)), away=int(match.group(2)))


def parse_rebound(action: str) -> Tuple[Optional[int], Optional[int], bool]:
    """
    Cumulative (offensive, defensive) totals and the offensive flag.

    The annotation "(进攻篮板:2 防守篮板:3)" or "(OFF:2 DEF:3)" reports the
    player's totals so far, not the increment of this rebound.
    """
    offensive, defensive = None, None
    remainder = action
    for pattern in rules.REBOUND_RES:
        match = pattern.search(action)
        if match:
            offensive, defensive = int(match.group(1)), int(match.group(2))
            remainder = pattern.sub("", action)
            break

    if "进攻篮板" in remainder:
        is_offensive = True
    elif "防守篮板" in remainder:
        is_offensive = False
    else:
        is_offensive = bool(offensive) and not defensive
    return offensive, defensive, is_offensive


def parse_assist_name(action: str) -> Optional[str]:
    for pattern in rules.ASSIST_RES:
        match = pattern.search(action)
        if match:
            return match.group(1).strip()
    return None


def parse(text: str, roster: RosterConfig) -> List[GameEvent]:
    """Parse transcript text with a fresh parser bound to roster."""
    return TranscriptParser(roster).parse(text)
