"""Explicit dispatcher registry for the composition layer.

The wiring code registers exactly one dispatcher per state type and then
builds stores and keyed containers from the registry.  Every builder
resolves its dispatcher immediately, so a missing registration fails when
the store is constructed rather than on its first dispatch.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any, TypeVar

from fluxgate.collection import KeyedStoreCollection
from fluxgate.config import FluxGateConfig
from fluxgate.dispatcher import Dispatcher
from fluxgate.exceptions import FluxGateConfigError
from fluxgate.keyed import KeyedStore
from fluxgate.models._base import FluxGateState
from fluxgate.store import FluxGateStore, StoreFactory, store_factory_for

_logger = logging.getLogger(__name__)

S = TypeVar("S", bound=FluxGateState)
K = TypeVar("K", bound=Hashable)


class DispatcherRegistry:
    """State type → shared dispatcher instance."""

    def __init__(self, config: FluxGateConfig | None = None) -> None:
        self.config = config or FluxGateConfig()
        self._dispatchers: dict[type[FluxGateState], Dispatcher[Any]] = {}

    def __contains__(self, state_type: object) -> bool:
        return state_type in self._dispatchers

    def register(
        self,
        dispatcher: Dispatcher[Any],
        state_type: type[FluxGateState] | None = None,
    ) -> Dispatcher[Any]:
        """Register *dispatcher* for *state_type* (default: ``dispatcher.state_type``)."""
        if state_type is None:
            state_type = getattr(dispatcher, "state_type", None)
        if state_type is None:
            raise FluxGateConfigError(f"{type(dispatcher).__name__} does not declare a state_type")
        existing = self._dispatchers.get(state_type)
        if existing is not None:
            raise FluxGateConfigError(
                f"{state_type.__name__} already has a dispatcher ({type(existing).__name__})"
            )
        self._dispatchers[state_type] = dispatcher
        _logger.debug("registered dispatcher %s for %s", type(dispatcher).__name__, state_type.__name__)
        return dispatcher

    def resolve(self, state_type: type[S]) -> Dispatcher[S]:
        dispatcher = self._dispatchers.get(state_type)
        if dispatcher is None:
            raise FluxGateConfigError(f"No dispatcher registered for {state_type.__name__}")
        return dispatcher

    def create_store(self, state_type: type[S], initial_state: S | None = None) -> FluxGateStore[S]:
        return FluxGateStore(self.resolve(state_type), initial_state, config=self.config)

    def store_factory(self, state_type: type[S]) -> StoreFactory:
        return store_factory_for(self.resolve(state_type), config=self.config)

    def keyed_store(self, state_type: type[S]) -> KeyedStore[S, Any]:
        return KeyedStore(self.resolve(state_type), config=self.config)

    def keyed_collection(self, state_type: type[S]) -> KeyedStoreCollection[S, Any]:
        return KeyedStoreCollection(self.resolve(state_type), config=self.config)
