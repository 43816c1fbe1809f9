"""
Deterministic query helpers for replayed game state.
"""

from typing import Any, Dict, List, Optional

from .core.state import GameState, StatLine, Team


def shooting_line(made: int, attempted: int) -> str:
    return f"{made}-{attempted}"


def percentage(made: int, attempted: int) -> float:
    """Shooting percentage with one decimal; 0.0 when nothing was attempted."""
    if attempted <= 0:
        return 0.0
    return round(made / attempted * 100, 1)


def field_goals(stats: StatLine) -> Dict[str, int]:
    """Two- and three-point attempts combined."""
    return {
        "made": stats.two_points_made + stats.three_points_made,
        "attempted": stats.two_points_attempted + stats.three_points_attempted,
    }


def stat_row(name: str, stats: StatLine) -> Dict[str, Any]:
    fg = field_goals(stats)
    return {
        "name": name,
        "minutes": stats.play_time,
        "points": stats.points,
        "rebounds": stats.rebounds,
        "offensive_rebounds": stats.offensive_rebounds,
        "defensive_rebounds": stats.defensive_rebounds,
        "assists": stats.assists,
        "steals": stats.steals,
        "blocks": stats.blocks,
        "turnovers": stats.turnovers,
        "fouls": stats.fouls,
        "fg": shooting_line(fg["made"], fg["attempted"]),
        "fg_pct": percentage(fg["made"], fg["attempted"]),
        "three": shooting_line(stats.three_points_made, stats.three_points_attempted),
        "three_pct": percentage(stats.three_points_made, stats.three_points_attempted),
        "ft": shooting_line(stats.free_throws_made, stats.free_throws_attempted),
        "ft_pct": percentage(stats.free_throws_made, stats.free_throws_attempted),
    }


def box_score(team: Team) -> Dict[str, Any]:
    """Per-player rows in roster order plus the team totals row."""
    return {
        "team": team.name,
        "side": team.side.value,
        "players": [stat_row(p.name, p.stats) for p in team.players],
        "totals": stat_row(team.name, team.stats),
    }


def score_check(state: GameState) -> Dict[str, Any]:
    """
    Compare points derived from the fold with the transcript's score.

    The reported score is authoritative; a mismatch points at transcript
    fragments that were dropped while parsing.
    """
    derived = {"home": state.home_team.stats.points, "away": state.away_team.stats.points}
    reported: Optional[Dict[str, int]] = (
        state.reported_score.to_dict() if state.reported_score else None
    )
    return {
        "derived": derived,
        "reported": reported,
        "consistent": reported is None or reported == derived,
    }


def leaders(state: GameState, stat: str = "points", limit: int = 5) -> List[Dict[str, Any]]:
    """
    Players sorted by a stat, highest first.

    Ties keep home players before away players and roster order within a team.

    Raises:
        ValueError: If stat is not a box-score field
    """
    if stat not in StatLine.__dataclass_fields__:
        raise ValueError(f"Unknown stat: {stat}")

    rows = [
        {"team": team.side.value, "name": p.name, stat: getattr(p.stats, stat)}
        for team in state.teams
        for p in team.players
    ]
    rows.sort(key=lambda r: -r[stat])
    return rows[:limit]
