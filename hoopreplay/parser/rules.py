"""
Keyword rules for classifying transcript action text.

Classification is an ordered list of (predicate, event type) rules evaluated
top to bottom; the first match wins. Shot rules come before the generic
keyword rules so that "投篮 命中 (助攻：X)" is a make and not an assist.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..core.events import GameEventType

MADE = "命中"
MISSED = "不中"
THREE_POINT = "三分"
FREE_THROW_KEYWORDS = ("罚球", "两罚", "三罚")

SUBSTITUTION_RE = re.compile(r"换人\s*[：:]\s*(.+?)\s*替换\s*(.+?)\s*$")
SCORE_RE = re.compile(r"(\d+)\s*-\s*(\d+)")
POINTS_RE = re.compile(r"[（(]\s*(\d+)\s*(?:分|pts?)\s*[)）]", re.IGNORECASE)
REBOUND_RES = (
    re.compile(r"[（(]\s*进攻篮板\s*[:：]\s*(\d+)\s*防守篮板\s*[:：]\s*(\d+)\s*[)）]"),
    re.compile(r"[（(]\s*OFF\s*[:：]\s*(\d+)\s*DEF\s*[:：]\s*(\d+)\s*[)）]", re.IGNORECASE),
)
ASSIST_RES = (
    re.compile(r"[（(]\s*助攻\s*[:：]\s*([^)）]+?)\s*[)）]"),
    re.compile(r"assisted by\s+([^)）]+?)\s*(?:[)）]|$)", re.IGNORECASE),
)

_CN_DIGITS = {"一": 1, "二": 2, "三": 3, "四": 4, "五": 5, "六": 6, "七": 7, "八": 8, "九": 9}
QUARTER_START_RES = (
    re.compile(r"第\s*([0-9一二三四五六七八九]+)\s*节\s*开始"),
    re.compile(r"\bquarter\s*(\d+)\s*start", re.IGNORECASE),
)
SECTION_MARKER_RES = (
    re.compile(r"第\s*[0-9一二三四五六七八九]+\s*节\s*结束"),
    re.compile(r"比赛\s*(?:开始|结束)"),
    re.compile(r"\bquarter\s*\d+\s*end", re.IGNORECASE),
)
HEADER_KEYWORD = "时间"


def _has_any(text: str, keywords: Tuple[str, ...]) -> bool:
    return any(k in text for k in keywords)


def is_substitution(text: str) -> bool:
    return SUBSTITUTION_RE.search(text) is not None


def is_free_throw(text: str) -> bool:
    return _has_any(text, FREE_THROW_KEYWORDS)


def is_three(text: str) -> bool:
    return THREE_POINT in text


def is_made(text: str) -> bool:
    return MADE in text


def is_missed(text: str) -> bool:
    return MISSED in text


def _keyword(*keywords: str) -> Callable[[str], bool]:
    return lambda text: _has_any(text, keywords)


@dataclass(frozen=True)
class Rule:
    name: str
    predicate: Callable[[str], bool]
    event_type: GameEventType


RULES: Tuple[Rule, ...] = (
    Rule("substitution", is_substitution, GameEventType.SUBSTITUTION),
    Rule("free_throw_made", lambda t: is_free_throw(t) and is_made(t), GameEventType.FREE_THROW_MADE),
    Rule("free_throw_missed", lambda t: is_free_throw(t) and is_missed(t), GameEventType.FREE_THROW_MISSED),
    Rule("three_made", lambda t: is_three(t) and is_made(t), GameEventType.THREE_POINTS_MADE),
    Rule("three_missed", lambda t: is_three(t) and is_missed(t), GameEventType.THREE_POINTS_MISSED),
    # A made/missed marker without a free-throw or three-point keyword is a
    # two-point attempt (投篮, 上篮, 扣篮, 勾手, 补篮, 打板, 挑篮 all land here).
    Rule("two_made", is_made, GameEventType.TWO_POINTS_MADE),
    Rule("two_missed", is_missed, GameEventType.TWO_POINTS_MISSED),
    Rule("rebound", _keyword("篮板"), GameEventType.REBOUND),
    Rule("assist", _keyword("助攻"), GameEventType.ASSIST),
    Rule("block", _keyword("封盖", "盖帽"), GameEventType.BLOCK),
    Rule("steal", _keyword("抢断"), GameEventType.STEAL),
    Rule("foul", _keyword("犯规"), GameEventType.FOUL),
    Rule("turnover", _keyword("失误"), GameEventType.TURNOVER),
    Rule("violation", _keyword("违例"), GameEventType.VIOLATION),
    Rule("jump_ball", _keyword("跳球"), GameEventType.JUMP_BALL),
    Rule("timeout", _keyword("暂停"), GameEventType.TIMEOUT),
)


def classify(text: str, rules: Tuple[Rule, ...] = RULES) -> GameEventType:
    """Return the event type of the first matching rule, or UNKNOWN."""
    for rule in rules:
        if rule.predicate(text):
            return rule.event_type
    return GameEventType.UNKNOWN


SHOT_VALUES = {
    GameEventType.TWO_POINTS_MADE: 2,
    GameEventType.THREE_POINTS_MADE: 3,
    GameEventType.FREE_THROW_MADE: 1,
}


def default_points(event_type: GameEventType) -> int:
    return SHOT_VALUES.get(event_type, 0)


def explicit_points(text: str) -> Optional[int]:
    """Number in a "(N分)" / "(N pts)" annotation, if any."""
    match = POINTS_RE.search(text)
    return int(match.group(1)) if match else None


def quarter_start(line: str) -> Optional[int]:
    """Quarter number of a "第N节开始" marker line, else None."""
    for pattern in QUARTER_START_RES:
        match = pattern.search(line)
        if match:
            raw = match.group(1)
            if raw.isdigit():
                return int(raw)
            return _CN_DIGITS.get(raw)
    return None


def is_section_marker(text: str) -> bool:
    return any(p.search(text) for p in SECTION_MARKER_RES) or quarter_start(text) is not None


def is_header_row(first_field: str) -> bool:
    return HEADER_KEYWORD in first_field
