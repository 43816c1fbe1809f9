"""
Roster configuration.

A RosterConfig describes the two teams of one game: ordered rosters, the
starting five, and every alias under which a player can appear in the
transcript. It is read-only after construction and safe to share between
parses.
"""

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..core.errors import RosterError
from ..core.events import TeamSide

MAX_STARTERS = 5

_WS_RE = re.compile(r"\s+")


def squash(text: str) -> str:
    """Drop all whitespace so "L. 詹姆斯" and "L.詹姆斯" compare equal."""
    return _WS_RE.sub("", text or "")


@dataclass(frozen=True)
class PlayerEntry:
    name: str
    number: str = ""
    position: str = ""
    aliases: Tuple[str, ...] = ()

    def all_aliases(self) -> List[str]:
        """Canonical name first, then declared aliases, without duplicates."""
        seen = []
        for alias in (self.name,) + tuple(self.aliases):
            if alias and alias not in seen:
                seen.append(alias)
        return seen


@dataclass(frozen=True)
class TeamRoster:
    """
    Ordered roster of one team.

    Fields:
        name: Display name
        players: Ordered player entries, unique by canonical name
        starters: Canonical names of the starting five
        id: Optional team identifier
        side: Home or away, set by RosterConfig
    """
    name: str
    players: Tuple[PlayerEntry, ...]
    starters: Tuple[str, ...] = ()
    id: str = ""
    side: TeamSide = TeamSide.HOME
    _aliases: Tuple[Tuple[str, str], ...] = field(default=(), init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "players", tuple(self.players))
        object.__setattr__(self, "starters", tuple(self.starters))
        self._validate()
        object.__setattr__(self, "_aliases", self._build_alias_table())

    def _validate(self) -> None:
        if not self.players:
            raise RosterError(f"Team {self.name!r} has an empty roster")

        names = [p.name for p in self.players]
        if any(not n or not n.strip() for n in names):
            raise RosterError(f"Team {self.name!r} has a player without a name")
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise RosterError(f"Team {self.name!r} lists players more than once: {dupes}")

        if len(self.starters) > MAX_STARTERS:
            raise RosterError(
                f"Team {self.name!r} has {len(self.starters)} starters (max {MAX_STARTERS})"
            )
        unknown = [s for s in self.starters if s not in names]
        if unknown:
            raise RosterError(f"Team {self.name!r} starters not on roster: {unknown}")

    def _build_alias_table(self) -> Tuple[Tuple[str, str], ...]:
        owners: Dict[str, str] = {}
        for player in self.players:
            for alias in player.all_aliases():
                key = squash(alias)
                owner = owners.get(key)
                if owner is not None and owner != player.name:
                    raise RosterError(
                        f"Alias {alias!r} is claimed by both {owner!r} and {player.name!r}"
                    )
                owners[key] = player.name
        # Longest alias first so "B.詹姆斯" wins over "詹姆斯".
        return tuple(sorted(owners.items(), key=lambda kv: (-len(kv[0]), kv[0])))

    @property
    def names(self) -> List[str]:
        return [p.name for p in self.players]

    def has_player(self, name: str) -> bool:
        return name in self.names

    def is_starter(self, name: str) -> bool:
        return name in self.starters

    def resolve_prefix(self, text: str) -> Optional[str]:
        """
        Canonical name of the player whose alias starts the text.

        Comparison ignores whitespace; the longest matching alias wins.
        Returns None when no alias matches.
        """
        probe = squash(text)
        if not probe:
            return None
        for alias, canonical in self._aliases:
            if probe.startswith(alias):
                return canonical
        return None

    def resolve(self, text: str) -> Optional[str]:
        """Canonical name for an exact alias, falling back to prefix matching."""
        probe = squash(text)
        for alias, canonical in self._aliases:
            if probe == alias:
                return canonical
        return self.resolve_prefix(text)

    @staticmethod
    def from_dict(data: Dict[str, Any], side: TeamSide = TeamSide.HOME) -> "TeamRoster":
        if not isinstance(data, dict):
            raise RosterError(f"{side.value} team must be an object")
        try:
            players = tuple(
                PlayerEntry(
                    name=p["name"],
                    number=str(p.get("number", "") or ""),
                    position=p.get("position", "") or "",
                    aliases=tuple(p.get("aliases", []) or []),
                )
                for p in data.get("players", [])
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise RosterError(f"Invalid player entry for {side.value} team: {e}") from e

        return TeamRoster(
            name=data.get("name", side.value),
            players=players,
            starters=tuple(data.get("starters", []) or []),
            id=data.get("id", side.value),
            side=side,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "players": [
                {
                    "name": p.name,
                    "number": p.number,
                    "position": p.position,
                    "aliases": list(p.aliases),
                }
                for p in self.players
            ],
            "starters": list(self.starters),
        }


@dataclass(frozen=True)
class GameInfo:
    id: str = "game"
    date: str = ""
    venue: str = ""


@dataclass(frozen=True)
class RosterConfig:
    """Both rosters of one game plus descriptive game info."""
    home: TeamRoster
    away: TeamRoster
    game: GameInfo = field(default_factory=GameInfo)

    def __post_init__(self) -> None:
        if self.home.side != TeamSide.HOME:
            object.__setattr__(self, "home", _with_side(self.home, TeamSide.HOME))
        if self.away.side != TeamSide.AWAY:
            object.__setattr__(self, "away", _with_side(self.away, TeamSide.AWAY))

    def team(self, side: TeamSide) -> TeamRoster:
        return self.home if side == TeamSide.HOME else self.away

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "RosterConfig":
        if not isinstance(data, dict):
            raise RosterError("Roster config must be an object")
        for key in ("home", "away"):
            if key not in data:
                raise RosterError(f"Roster config is missing the {key!r} team")
        game = data.get("game") or {}
        return RosterConfig(
            home=TeamRoster.from_dict(data["home"], TeamSide.HOME),
            away=TeamRoster.from_dict(data["away"], TeamSide.AWAY),
            game=GameInfo(
                id=str(game.get("id", "game")),
                date=str(game.get("date", "")),
                venue=str(game.get("venue", "")),
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game": {"id": self.game.id, "date": self.game.date, "venue": self.game.venue},
            "home": self.home.to_dict(),
            "away": self.away.to_dict(),
        }


def _with_side(roster: TeamRoster, side: TeamSide) -> TeamRoster:
    return TeamRoster(
        name=roster.name,
        players=roster.players,
        starters=roster.starters,
        id=roster.id,
        side=side,
    )


def load_roster_config(path: Union[str, Path]) -> RosterConfig:
    """
    Load a roster config from a JSON file.

    Raises:
        FileNotFoundError: If path does not exist
        RosterError: If the document is not a valid roster config
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise RosterError(f"Roster config {path} is not valid JSON: {e}") from e
    return RosterConfig.from_dict(data)
