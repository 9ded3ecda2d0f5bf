"""Single-state store.

A :class:`FluxGateStore` owns exactly one live state instance.  The only
way to change it is :meth:`FluxGateStore.dispatch`, which runs the shared
dispatcher and then notifies subscribers synchronously.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, Protocol, TypeVar

from fluxgate._redact import describe_action
from fluxgate.config import FluxGateConfig
from fluxgate.dispatcher import Dispatcher
from fluxgate.events import StateChangedChannel, StateChangedEvent, Subscriber, Subscription
from fluxgate.exceptions import FluxGateConfigError
from fluxgate.models._base import FluxGateAction, FluxGateState
from fluxgate.models.result import DispatchResult, StoreStatus

_logger = logging.getLogger(__name__)

S = TypeVar("S", bound=FluxGateState)


class StoreProtocol(Protocol[S]):
    """Read, dispatch and subscribe surface of a store."""

    @property
    def item(self) -> S: ...

    @property
    def status(self) -> StoreStatus: ...

    def dispatch(self, action: FluxGateAction) -> DispatchResult[S]: ...

    def subscribe(self, fn: Subscriber) -> Subscription: ...

    def unsubscribe(self, target: Subscription | Subscriber) -> bool: ...


class FluxGateStore(Generic[S]):
    """Mutable cell holding one state value and its dispatcher.

    Parameters
    ----------
    dispatcher : Dispatcher
        Reducer for the state type.  May be shared with other stores.
    initial_state : FluxGateState or None
        Seed value; ``None`` uses ``dispatcher.default_state()``.
    config : FluxGateConfig or None
        Behaviour switches; defaults to ``FluxGateConfig()``.
    """

    def __init__(
        self,
        dispatcher: Dispatcher[S] | None,
        initial_state: S | None = None,
        *,
        config: FluxGateConfig | None = None,
        name: str = "",
    ) -> None:
        if dispatcher is None:
            raise FluxGateConfigError("A dispatcher is required to build a store")
        state_type = getattr(dispatcher, "state_type", None)
        if state_type is None:
            raise FluxGateConfigError(f"{type(dispatcher).__name__} does not declare a state_type")
        if initial_state is None:
            initial_state = dispatcher.default_state()
        elif not isinstance(initial_state, state_type):
            raise FluxGateConfigError(
                f"Initial state {type(initial_state).__name__} does not match "
                f"{type(dispatcher).__name__} ({state_type.__name__})"
            )

        self._config = config or FluxGateConfig()
        self._dispatcher = dispatcher
        self._item: S = initial_state
        self._status = StoreStatus()
        self.name = name or state_type.__name__
        self.state_changed = StateChangedChannel(
            self.name,
            isolate_errors=self._config.isolate_subscriber_errors,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, item={self._item!r}, version={self._status.version})"

    @property
    def item(self) -> S:
        return self._item

    @property
    def status(self) -> StoreStatus:
        return self._status

    @property
    def dispatcher(self) -> Dispatcher[S]:
        return self._dispatcher

    def subscribe(self, fn: Subscriber) -> Subscription:
        return self.state_changed.subscribe(fn)

    def unsubscribe(self, target: Subscription | Subscriber) -> bool:
        return self.state_changed.unsubscribe(target)

    def dispatch(self, action: FluxGateAction) -> DispatchResult[S]:
        """Apply *action* and notify subscribers.

        Exactly one notification is published per call that returns, even
        when the new state equals the old one or the dispatcher rejected
        the action.  If the dispatcher raises, the store is left untouched
        and nobody is notified.
        """
        if self._config.trace_dispatch:
            _logger.debug(
                "dispatch store=%s action=%s",
                self.name,
                describe_action(action, max_string=self._config.trace_max_string),
            )

        result = self._dispatcher.dispatch(self._item, action)
        if not isinstance(result, DispatchResult):
            raise FluxGateConfigError(
                f"{type(self._dispatcher).__name__}.dispatch returned {type(result).__name__}, "
                "expected DispatchResult"
            )

        self._item = result.item
        if result.marker is not None:
            self._status = self._status.modified()

        self.state_changed.publish(self._make_event(action, result))
        return result

    def _make_event(self, action: FluxGateAction, result: DispatchResult[S]) -> StateChangedEvent[S]:
        return StateChangedEvent(
            state=self._item,
            action=action,
            sender=action.sender if action.sender is not None else action,
            status=self._status,
            marker=result.marker,
            success=result.success,
        )


StoreFactory = Callable[[Any], FluxGateStore[Any]]
"""Builds a store from an optional initial state (``None`` = default)."""


def store_factory_for(
    dispatcher: Dispatcher[Any],
    *,
    config: FluxGateConfig | None = None,
) -> StoreFactory:
    """Return a factory that builds stores sharing *dispatcher*."""

    def _factory(initial_state: Any = None) -> FluxGateStore[Any]:
        return FluxGateStore(dispatcher, initial_state, config=config)

    return _factory
