"""
Replay command: fold parsed events into a box score
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from hoopreplay.core.state import GameState, Team
from hoopreplay.query import box_score, score_check
from hoopreplay.replay import ReplayEngine, compute_state_hash
from ._load import load_inputs

console = Console()

BOX_COLUMNS = (
    ("MIN", "minutes"),
    ("PTS", "points"),
    ("REB", "rebounds"),
    ("OREB", "offensive_rebounds"),
    ("DREB", "defensive_rebounds"),
    ("AST", "assists"),
    ("STL", "steals"),
    ("BLK", "blocks"),
    ("TOV", "turnovers"),
    ("PF", "fouls"),
    ("FG", "fg"),
    ("3P", "three"),
    ("FT", "ft"),
)


def _team_table(team: Team) -> Table:
    box = box_score(team)
    table = Table(title=f"{box['team']} ({box['side']})")
    table.add_column("Player", style="green")
    for label, _ in BOX_COLUMNS:
        table.add_column(label, justify="right")

    for row in box["players"]:
        table.add_row(row["name"], *[str(row[key]) for _, key in BOX_COLUMNS])

    totals = box["totals"]
    table.add_row(
        "[bold]Totals[/bold]",
        *[f"[bold]{totals[key]}[/bold]" for _, key in BOX_COLUMNS],
    )
    table.add_row(
        "[dim]Pct[/dim]",
        *["" for _ in BOX_COLUMNS[:-3]],
        f"[dim]{totals['fg_pct']}%[/dim]",
        f"[dim]{totals['three_pct']}%[/dim]",
        f"[dim]{totals['ft_pct']}%[/dim]",
    )
    return table


def _summary(state: GameState, state_hash: str, total_events: int) -> dict:
    return {
        "game_id": state.id,
        "status": state.status.value,
        "quarter": state.quarter,
        "time": state.time,
        "events_replayed": state.applied,
        "events_total": total_events,
        "score": score_check(state),
        "state_hash": state_hash,
    }


def replay_command(
    transcript: Path = typer.Argument(..., help="Path to tab-delimited transcript"),
    roster: Path = typer.Option(..., "--roster", "-r", help="Path to roster config (JSON)"),
    until: Optional[int] = typer.Option(None, "--until", "-u", help="Replay until event index (inclusive)"),
    show_events: bool = typer.Option(False, "--show-events", "-e", help="List the folded events"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay a transcript and show the box score at an event index.

    Examples:
        hoopreplay replay game.tsv --roster roster.json
        hoopreplay replay game.tsv -r roster.json --until 120
        hoopreplay replay game.tsv -r roster.json --json
    """
    config, events = load_inputs(transcript, roster, json_output)

    result = ReplayEngine().replay(
        events, config.home, config.away, to_index=until, game_id=config.game.id
    )
    state = result.state
    if events and result.applied == len(events):
        state.mark_finished()
    state_hash = compute_state_hash(state)

    if json_output:
        output = _summary(state, state_hash, len(events))
        output["home"] = box_score(state.home_team)
        output["away"] = box_score(state.away_team)
        if show_events:
            output["events"] = [ev.to_dict() for ev in events[: result.applied]]
        print(json.dumps(output, ensure_ascii=False, indent=2))
        return

    check = score_check(state)
    derived = check["derived"]
    console.print(
        f"[bold]{state.home_team.name} {derived['home']} - {derived['away']} {state.away_team.name}[/bold]"
    )
    if check["reported"] and not check["consistent"]:
        reported = check["reported"]
        console.print(
            f"[yellow]Transcript reports {reported['home']}-{reported['away']}[/yellow]"
        )
    console.print(
        f"  Q{state.quarter} {state.time}  status: [cyan]{state.status.value}[/cyan]  "
        f"events: [cyan]{result.applied}/{len(events)}[/cyan]"
    )
    console.print(f"  State hash: [yellow]{state_hash}[/yellow]")

    console.print(_team_table(state.home_team))
    console.print(_team_table(state.away_team))

    if show_events:
        table = Table(title="Folded events")
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Q", justify="right")
        table.add_column("Time")
        table.add_column("Type", style="green")
        table.add_column("Description")
        for idx, ev in enumerate(events[: result.applied]):
            table.add_row(str(idx), str(ev.quarter), ev.time, ev.type.value, ev.description)
        console.print(table)
