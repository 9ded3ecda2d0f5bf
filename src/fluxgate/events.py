"""State-changed notifications.

A :class:`StateChangedChannel` is an ordered list of subscriber callbacks.
Publishing is synchronous: every subscriber registered when ``publish`` is
called runs, in registration order, before ``publish`` returns.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fluxgate.models._base import FluxGateAction
from fluxgate.models.result import ChangeMarker, StoreStatus

_logger = logging.getLogger(__name__)

S = TypeVar("S")


@dataclass(frozen=True, slots=True)
class StateChangedEvent(Generic[S]):
    """Payload delivered to subscribers after a dispatch."""

    state: S
    action: FluxGateAction
    sender: Any
    status: StoreStatus
    marker: ChangeMarker | None = None
    success: bool = True
    key: Any = None


Subscriber = Callable[[StateChangedEvent[Any]], None]


class Subscription:
    """Handle returned by :meth:`StateChangedChannel.subscribe`.

    Usable as a context manager; leaving the block unsubscribes.
    """

    __slots__ = ("_channel", "_callback")

    def __init__(self, channel: StateChangedChannel, callback: Subscriber) -> None:
        self._channel: StateChangedChannel | None = channel
        self._callback = callback

    @property
    def callback(self) -> Subscriber:
        return self._callback

    @property
    def active(self) -> bool:
        return self._channel is not None

    def unsubscribe(self) -> bool:
        channel = self._channel
        if channel is None:
            return False
        self._channel = None
        return channel._remove(self)  # noqa: SLF001

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.unsubscribe()


class StateChangedChannel:
    """Multicast subscription point for one store (or one keyspace)."""

    def __init__(self, name: str = "", *, isolate_errors: bool = False) -> None:
        self.name = name
        self._isolate_errors = isolate_errors
        self._subscriptions: list[Subscription] = []

    def __len__(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, fn: Subscriber) -> Subscription:
        subscription = Subscription(self, fn)
        self._subscriptions.append(subscription)
        _logger.debug("subscribed channel=%s fn=%s", self.name, getattr(fn, "__name__", repr(fn)))
        return subscription

    def unsubscribe(self, target: Subscription | Subscriber) -> bool:
        """Remove a subscription, or the first subscription of a callback."""
        if isinstance(target, Subscription):
            return target.unsubscribe()
        for subscription in self._subscriptions:
            if subscription.callback == target:
                return subscription.unsubscribe()
        return False

    def _remove(self, subscription: Subscription) -> bool:
        try:
            self._subscriptions.remove(subscription)
        except ValueError:
            return False
        return True

    def publish(self, event: StateChangedEvent[Any]) -> None:
        # Snapshot so callbacks may (un)subscribe during fan-out.
        for subscription in list(self._subscriptions):
            if not subscription.active:
                continue
            if not self._isolate_errors:
                subscription.callback(event)
                continue
            try:
                subscription.callback(event)
            except Exception:
                _logger.warning(
                    "state-changed subscriber failed channel=%s fn=%s",
                    self.name,
                    getattr(subscription.callback, "__name__", repr(subscription.callback)),
                    exc_info=True,
                )
