"""Transcript and event building helpers for tests."""

import itertools
from pathlib import Path

from hoopreplay.core.events import GameEvent, TeamSide

SAMPLES_DIR = Path(__file__).resolve().parents[2] / "samples" / "lakers_vs_wolves"

_ids = itertools.count(1)


def row(time="", home="", score="", away=""):
    """One tab-delimited transcript row."""
    return "\t".join([time, home, score, away])


def transcript(*rows):
    return "\n".join(rows) + "\n"


def event(event_type, player="", time="12:00", team=TeamSide.HOME, quarter=1, **fields):
    """GameEvent with a throwaway id, for reducer-level tests."""
    return GameEvent(
        id=f"ev-{next(_ids)}",
        type=event_type,
        team=team,
        player=player,
        time=time,
        quarter=quarter,
        **fields,
    )
