"""
Exception types for the replay engine.
"""


class HoopReplayError(Exception):
    """Base class for engine errors."""
    pass


class RosterError(HoopReplayError):
    """Raised when a roster or roster config is structurally invalid."""
    pass


class InvalidTransitionError(HoopReplayError):
    """Raised when no handler is registered for an event type."""
    pass


class ClockFormatError(HoopReplayError, ValueError):
    """Raised when a game clock string is not MM:SS."""
    pass
