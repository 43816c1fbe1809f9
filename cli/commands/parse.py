"""
Parse command: transcript -> event list
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from hoopreplay.core.events import GameEventType
from ._load import fail, load_inputs

console = Console()


def parse_command(
    transcript: Path = typer.Argument(..., help="Path to tab-delimited transcript"),
    roster: Path = typer.Option(..., "--roster", "-r", help="Path to roster config (JSON)"),
    event_type: Optional[str] = typer.Option(None, "--event-type", "-t", help="Filter by event type"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Parse a transcript and list the events.

    Examples:
        hoopreplay parse game.tsv --roster roster.json
        hoopreplay parse game.tsv -r roster.json --event-type REBOUND
        hoopreplay parse game.tsv -r roster.json --json
    """
    config, events = load_inputs(transcript, roster, json_output)

    if event_type:
        try:
            wanted = GameEventType(event_type.upper())
        except ValueError:
            fail(f"Unknown event type: {event_type}", json_output)
        events = [ev for ev in events if ev.type == wanted]

    if json_output:
        out = {
            "game_id": config.game.id,
            "count": len(events),
            "events": [ev.to_dict() for ev in events],
        }
        print(json.dumps(out, ensure_ascii=False, indent=2))
        return

    table = Table(title=f"Events: {transcript}")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Q", justify="right")
    table.add_column("Time")
    table.add_column("Team", style="yellow")
    table.add_column("Type", style="green")
    table.add_column("Player")
    table.add_column("Pts", justify="right")
    table.add_column("Score", style="dim")

    for idx, ev in enumerate(events):
        table.add_row(
            str(idx),
            str(ev.quarter),
            ev.time,
            ev.team.value,
            ev.type.value,
            ev.player,
            str(ev.points) if ev.points else "",
            f"{ev.score.home}-{ev.score.away}" if ev.score else "",
        )

    console.print(table)
    console.print(f"\n[bold]Total events:[/bold] {len(events)}")
