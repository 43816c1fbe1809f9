"""
Stable identifier generation.

Provides deterministic ID generation without randomness.
"""

import hashlib

EVENT_ID_LENGTH = 16


def stable_id(*parts: object, length: int = EVENT_ID_LENGTH) -> str:
    """
    Generate stable ID derived from inputs (no randomness).

    Parsing the same transcript twice must give the same event ids, so
    ids are hashed from the event's position and content.

    Args:
        *parts: Parts to combine into ID (converted with str())
        length: Number of hex characters to keep

    Returns:
        Truncated SHA-256 hash as hex string

    Example:
        stable_id(12, "home", "REBOUND", "戴维斯") -> "5b0c..."
    """
    raw = "|".join(str(p) for p in parts).encode("utf-8")
    return hashlib.sha256(raw).hexdigest()[:length]
