"""
Synchronous publish/subscribe channel.

ONLY handles subscriber bookkeeping and delivery of one event type.
"""

import inspect
import logging
from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")

Handler = Callable[[T], None]

logger = logging.getLogger(__name__)


class Subscription(Generic[T]):
    """Handle returned by Emitter.subscribe, used to unsubscribe."""

    __slots__ = ("_emitter", "handler")

    def __init__(self, emitter: "Emitter[T]", handler: Handler):
        self._emitter: Optional[Emitter[T]] = emitter
        self.handler = handler

    @property
    def active(self) -> bool:
        """Check if the subscription still receives events."""
        return self._emitter is not None

    def dispose(self) -> None:
        """Stop receiving events. Safe to call more than once."""
        if self._emitter is not None:
            self._emitter.unsubscribe(self)

    def __enter__(self) -> "Subscription[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def _detach(self) -> None:
        self._emitter = None


class Event(Generic[T]):
    """Subscribe-only view of an Emitter handed out to consumers."""

    __slots__ = ("_emitter",)

    def __init__(self, emitter: "Emitter[T]"):
        self._emitter = emitter

    def subscribe(self, handler: Handler) -> Subscription[T]:
        return self._emitter.subscribe(handler)

    def unsubscribe(self, subscription: Subscription[T]) -> bool:
        return self._emitter.unsubscribe(subscription)

    __call__ = subscribe


class Emitter(Generic[T]):
    """
    Emitter for a single event type.

    Handlers run synchronously in subscription order. The subscriber list is
    snapshotted when fire() starts, so handlers added during delivery wait
    for the next fire and handlers removed during delivery still receive the
    in-flight payload. A failing handler is logged and skipped.
    """

    def __init__(self, name: str = "event"):
        self.name = name
        self._subscriptions: List[Subscription[T]] = []
        self._event: Optional[Event[T]] = None

    @property
    def event(self) -> Event[T]:
        """Subscribe-only view of this emitter."""
        if self._event is None:
            self._event = Event(self)
        return self._event

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, handler: Handler) -> Subscription[T]:
        """
        Register a handler.

        Args:
            handler: Callable invoked with each fired payload

        Returns:
            Subscription handle for unsubscribing
        """
        if not callable(handler):
            raise TypeError(f"Handler for '{self.name}' must be callable")
        if inspect.iscoroutinefunction(handler):
            raise TypeError(
                f"Handler for '{self.name}' must be synchronous; schedule async work from a plain callable"
            )

        subscription = Subscription(self, handler)
        self._subscriptions.append(subscription)
        logger.debug(f"Subscribed handler to '{self.name}' ({len(self._subscriptions)} total)")
        return subscription

    def unsubscribe(self, subscription: Subscription[T]) -> bool:
        """
        Remove a subscription.

        Returns:
            True if the subscription was found and removed
        """
        for i, candidate in enumerate(self._subscriptions):
            if candidate is subscription:
                self._subscriptions.pop(i)
                subscription._detach()
                return True
        return False

    def fire(self, payload: T) -> int:
        """
        Deliver payload to every current subscriber.

        Args:
            payload: Object passed unchanged to each handler

        Returns:
            Number of handlers that completed without raising
        """
        snapshot = list(self._subscriptions)
        if not snapshot:
            return 0

        delivered = 0
        for subscription in snapshot:
            try:
                subscription.handler(payload)
                delivered += 1
            except Exception as e:
                logger.error(f"Handler for '{self.name}' failed: {str(e)}", exc_info=True)

        return delivered

    def dispose(self) -> int:
        """
        Drop every subscriber.

        Returns:
            Number of subscriptions removed
        """
        removed = len(self._subscriptions)
        for subscription in self._subscriptions:
            subscription._detach()
        self._subscriptions.clear()
        return removed
