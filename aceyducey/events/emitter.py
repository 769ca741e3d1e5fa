"""
Event emitter for the Acey Ducey engine.

A game owns one emitter and publishes its lifecycle events on it. Observers
subscribe per event type. A failing observer is logged and skipped, so it can
never break a round in progress.
"""

import logging
from collections import defaultdict
from enum import Enum
from typing import Any, Callable, Dict, List

logger = logging.getLogger("aceyducey.events")

EventHandler = Callable[[Dict[str, Any]], None]


class EngineEventType(Enum):
    """
    Event types published by the Acey Ducey engine.
    """

    # Game lifecycle
    GAME_CREATED = "game_created"
    GAME_STARTED = "game_started"
    GAME_ENDED = "game_ended"
    ROUND_STARTED = "round_started"
    ROUND_ENDED = "round_ended"

    # Card events
    CARD_DEALT = "card_dealt"

    # Money events
    PLAYER_BET = "player_bet"
    BANKROLL_UPDATED = "bankroll_updated"
    PLAYER_RUINED = "player_ruined"
    BANKROLL_RESET = "bankroll_reset"


class EventEmitter:
    """
    Dispatches engine events to the callbacks subscribed to them.

    Callbacks for one event type run in the order they subscribed.
    """

    def __init__(self):
        self._handlers: Dict[EngineEventType, List[EventHandler]] = defaultdict(list)

    def on(self, event_type: EngineEventType, callback: EventHandler) -> Callable:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to subscribe to
            callback: Function called with the event data

        Returns:
            Function that removes this subscription
        """
        self._handlers[event_type].append(callback)

        def unsubscribe():
            if callback in self._handlers[event_type]:
                self._handlers[event_type].remove(callback)

        return unsubscribe

    def emit(self, event_type: EngineEventType, data: Dict[str, Any]) -> None:
        """
        Publish an event to its subscribers.

        Args:
            event_type: The type of event
            data: The event payload
        """
        logger.debug("%s %s", event_type.name, data)
        for callback in list(self._handlers[event_type]):
            try:
                callback(data)
            except Exception:
                logger.exception("Error in event handler for %s", event_type.name)
