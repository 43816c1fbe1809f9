"""
Transcript parsing: raw play-by-play text -> ordered, typed events.
"""

from .rules import RULES, Rule, classify
from .transcript import TranscriptParser, parse, parse_score, parse_rebound, parse_assist_name

__all__ = [
    "RULES",
    "Rule",
    "classify",
    "TranscriptParser",
    "parse",
    "parse_score",
    "parse_rebound",
    "parse_assist_name",
]
