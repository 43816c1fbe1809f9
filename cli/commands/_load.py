"""
Shared input loading for CLI commands.
"""

import json
from pathlib import Path
from typing import List, Tuple

import typer
from rich.console import Console

from hoopreplay.core.errors import RosterError
from hoopreplay.core.events import GameEvent
from hoopreplay.parser import TranscriptParser
from hoopreplay.roster import RosterConfig, load_roster_config

console = Console()


def fail(message: str, json_output: bool, **details) -> None:
    """Print an error (JSON or rich) and exit with code 2."""
    if json_output:
        print(json.dumps({"error": message, **details}, ensure_ascii=False))
    else:
        console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(2)


def load_inputs(
    transcript: Path, roster: Path, json_output: bool
) -> Tuple[RosterConfig, List[GameEvent]]:
    """Load the roster config and parse the transcript, exiting on bad input."""
    try:
        config = load_roster_config(roster)
    except FileNotFoundError:
        fail("Roster file not found", json_output, path=str(roster))
    except RosterError as e:
        fail(str(e), json_output, path=str(roster))

    try:
        text = transcript.read_text(encoding="utf-8")
    except FileNotFoundError:
        fail("Transcript file not found", json_output, path=str(transcript))

    return config, TranscriptParser(config).parse(text)
