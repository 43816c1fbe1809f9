"""
Canonical serialization for deterministic hashing.

Two replays of the same events compare equal exactly when their canonical
bytes do, so every snapshot of a GameState is serialized here.
"""

import json
from enum import Enum
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Normalize a nested value for hashing.

    - dict keys sorted
    - tuples become lists
    - enums become their value
    - objects with to_dict() (events, scores, state) are expanded
    """
    if isinstance(obj, Enum):
        return obj.value
    if hasattr(obj, "to_dict"):
        return canonicalize(obj.to_dict())
    if isinstance(obj, dict):
        return {str(k): canonicalize(v) for k, v in sorted(obj.items(), key=lambda kv: str(kv[0]))}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    # Player names are Chinese: keep them as UTF-8 rather than \u escapes.
    text = json.dumps(canonicalize(obj), separators=(",", ":"), ensure_ascii=False)
    return text.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    return canonical_json_bytes(obj).decode("utf-8")
