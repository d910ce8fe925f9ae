"""
Event system for the solojack engine.

The engine announces what happens during a round (cards dealt, dealer and
player actions, busts, results) on a process-wide event bus. Statistics
collectors, tracing and tests subscribe to the events they care about.

Events are keyed by name, so ``EngineEventType.CARD_DEALT`` and the string
``"CARD_DEALT"`` address the same subscribers.
"""

import bisect
import itertools
import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

logger = logging.getLogger("solojack.events")

EventKey = Union[str, Enum]
Unsubscribe = Callable[[], None]

# Subscriptions stored under this key receive every event
_ALL_EVENTS = None


class EventPriority(Enum):
    """Priority levels for event handlers."""

    LOW = 0
    NORMAL = 1
    HIGH = 2
    CRITICAL = 3


class EngineEventType(Enum):
    """
    Event types emitted while a round of blackjack is played.
    """

    ROUND_STARTED = "round_started"
    ROUND_ENDED = "round_ended"

    CARD_DEALT = "card_dealt"
    CARD_REVEALED = "card_revealed"

    DEALER_ACTION = "dealer_action"
    PLAYER_ACTION = "player_action"
    HAND_BUSTED = "hand_busted"

    DECK_EXHAUSTED = "deck_exhausted"


def _event_name(event_type: EventKey) -> str:
    return event_type.name if isinstance(event_type, Enum) else event_type


@dataclass(order=True)
class _Subscription:
    # (negated priority, registration number): higher priority first, then FIFO
    sort_key: Tuple[int, int]
    callback: Callable = field(compare=False)
    once: bool = field(default=False, compare=False)


class EventEmitter:
    """
    Synchronous event emitter with priority-ordered subscriptions.

    Handlers are plain callables taking the event payload; handlers
    registered with ``on_any`` get an ``(event_name, payload)`` tuple instead.
    A handler that raises is logged and skipped, the remaining handlers still
    run.
    """

    def __init__(self):
        self._subscriptions: Dict[Optional[str], List[_Subscription]] = {}
        self._sequence = itertools.count()
        self._lock = threading.RLock()

    def _subscribe(
        self,
        key: Optional[str],
        callback: Callable,
        priority: EventPriority,
        once: bool = False,
    ) -> Unsubscribe:
        subscription = _Subscription(
            (-priority.value, next(self._sequence)), callback, once
        )
        with self._lock:
            bisect.insort(self._subscriptions.setdefault(key, []), subscription)

        def unsubscribe() -> None:
            self._discard(key, subscription)

        return unsubscribe

    def _discard(self, key: Optional[str], subscription: _Subscription) -> None:
        with self._lock:
            subscriptions = self._subscriptions.get(key, [])
            for index, existing in enumerate(subscriptions):
                if existing is subscription:
                    del subscriptions[index]
                    return

    def on(
        self,
        event_type: EventKey,
        callback: Callable[[Dict[str, Any]], None],
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Unsubscribe:
        """
        Subscribe to an event type.

        Args:
            event_type: Event name or EngineEventType member
            callback: Called with the event payload dict
            priority: Handlers with a higher priority are called first

        Returns:
            A function that removes this subscription
        """
        return self._subscribe(_event_name(event_type), callback, priority)

    def once(
        self,
        event_type: EventKey,
        callback: Callable[[Dict[str, Any]], None],
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Unsubscribe:
        """Like ``on``, but the subscription is dropped after the first event."""
        return self._subscribe(_event_name(event_type), callback, priority, once=True)

    def on_any(
        self,
        callback: Callable[[Tuple[str, Dict[str, Any]]], None],
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Unsubscribe:
        """Subscribe to every event; the callback gets ``(event_name, payload)``."""
        return self._subscribe(_ALL_EVENTS, callback, priority)

    def emit(self, event_type: EventKey, data: Dict[str, Any]) -> None:
        """
        Deliver ``data`` to the subscribers of ``event_type``, then to the
        catch-all subscribers.
        """
        name = _event_name(event_type)

        with self._lock:
            targeted = list(self._subscriptions.get(name, []))
            catch_all = list(self._subscriptions.get(_ALL_EVENTS, []))
            for subscription in targeted:
                if subscription.once:
                    self._discard(name, subscription)

        calls = [(s.callback, data) for s in targeted]
        calls += [(s.callback, (name, data)) for s in catch_all]

        # Handlers run outside the lock so they may subscribe or emit themselves
        for callback, payload in calls:
            try:
                callback(payload)
            except Exception as e:
                logger.error(f"Error in event handler for {name}: {e}", exc_info=True)

    def listener_count(self, event_type: Optional[EventKey] = None) -> int:
        """Number of subscribers for ``event_type``, or catch-all ones if None."""
        key = _ALL_EVENTS if event_type is None else _event_name(event_type)
        with self._lock:
            return len(self._subscriptions.get(key, []))

    def remove_all_listeners(self, event_type: Optional[EventKey] = None) -> None:
        """Drop the subscribers of one event type, or every subscription if None."""
        with self._lock:
            if event_type is None:
                self._subscriptions.clear()
            else:
                self._subscriptions.pop(_event_name(event_type), None)


class EventBus:
    """
    Process-wide holder of the EventEmitter the engine publishes on.

    Tests reset it by setting ``EventBus._instance = None``.
    """

    _instance: Optional[EventEmitter] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> EventEmitter:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = EventEmitter()
        return cls._instance
