"""
Reducer: registry of per-event-type state updates.

Handlers must be deterministic: same state and event in, same mutation out.
They own the GameState they are given for the duration of one fold and
mutate it in place.
"""

from typing import Callable, Dict

from .errors import InvalidTransitionError
from .events import GameEvent, GameEventType
from .state import GameState

# Handler signature: (state, event) -> None
Handler = Callable[[GameState, GameEvent], None]


class Reducer:
    """
    Registry of event handlers for state transitions.

    Usage:
        reducer = Reducer()
        reducer.register(GameEventType.STEAL, handle_steal)
        reducer.apply(state, event)
    """

    def __init__(self) -> None:
        self._handlers: Dict[GameEventType, Handler] = {}

    def register(self, event_type: GameEventType, handler: Handler) -> None:
        """
        Register event handler.

        Args:
            event_type: Event type
            handler: Function (state, event) -> None
        """
        self._handlers[event_type] = handler

    def handles(self, event_type: GameEventType) -> bool:
        return event_type in self._handlers

    def apply(self, state: GameState, event: GameEvent) -> None:
        """
        Apply event to state using registered handler.

        Raises:
            InvalidTransitionError: If no handler registered for event type
        """
        if event.type not in self._handlers:
            raise InvalidTransitionError(f"No handler for event type: {event.type.value}")

        self._handlers[event.type](state, event)
