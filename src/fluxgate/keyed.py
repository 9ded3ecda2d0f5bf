"""Keyed stores: many independent stores addressed by an external key.

Per-key stores are created lazily on first :meth:`get_or_create_store` (or
:meth:`dispatch`) using a store factory.  When only a dispatcher is given,
the factory builds a :class:`FluxGateStore` sharing that dispatcher.

These maps assume a single writer; concurrent insert/remove from several
threads needs external locking.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Hashable, Iterator
from typing import Any, Generic, TypeVar

from fluxgate.config import FluxGateConfig
from fluxgate.dispatcher import Dispatcher
from fluxgate.events import StateChangedChannel, StateChangedEvent, Subscriber, Subscription
from fluxgate.exceptions import FluxGateConfigError
from fluxgate.models._base import FluxGateAction, FluxGateState
from fluxgate.models.result import DispatchResult
from fluxgate.store import FluxGateStore, StoreFactory, store_factory_for

_logger = logging.getLogger(__name__)

S = TypeVar("S", bound=FluxGateState)
K = TypeVar("K", bound=Hashable)


class _KeyedStoreBase(Generic[S, K]):
    """Key → store map with lazy creation and silent removal."""

    def __init__(
        self,
        dispatcher: Dispatcher[S] | None = None,
        *,
        store_factory: StoreFactory | None = None,
        config: FluxGateConfig | None = None,
    ) -> None:
        if store_factory is None:
            if dispatcher is None:
                raise FluxGateConfigError(f"{type(self).__name__} needs a dispatcher or a store factory")
            store_factory = store_factory_for(dispatcher, config=config)
        self._config = config or FluxGateConfig()
        self._dispatcher = dispatcher
        self._store_factory = store_factory
        self._items: dict[K, FluxGateStore[S]] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._items))

    def keys(self) -> list[K]:
        return list(self._items)

    def get_store(self, key: K) -> FluxGateStore[S] | None:
        """Return the store for *key*, or ``None``.  Never creates."""
        return self._items.get(key)

    def get_or_create_store(self, key: K, initial_state: S | None = None) -> FluxGateStore[S]:
        """Return the store for *key*, creating and registering it if missing.

        *initial_state* only applies when the store is created.
        """
        store = self._items.get(key)
        if store is not None:
            return store

        store = self._build_store(initial_state)
        self._register(key, store)
        _logger.debug("created store key=%r container=%s", key, type(self).__name__)
        return store

    def remove_store(self, key: K) -> bool:
        """Drop *key*'s store.  Returns whether anything was removed."""
        store = self._items.pop(key, None)
        if store is None:
            return False
        self._unregister(key, store)
        _logger.debug("removed store key=%r container=%s", key, type(self).__name__)
        return True

    def dispatch(self, key: K, action: FluxGateAction) -> DispatchResult[S]:
        """Forward *action* to *key*'s store, creating it with default state if needed."""
        return self.get_or_create_store(key).dispatch(action)

    def _build_store(self, initial_state: S | None) -> FluxGateStore[S]:
        store = self._store_factory(initial_state)
        if store is None:
            raise FluxGateConfigError(f"Store factory for {type(self).__name__} returned no store")
        return store

    def _register(self, key: K, store: FluxGateStore[S]) -> None:
        self._items[key] = store

    def _unregister(self, key: K, store: FluxGateStore[S]) -> None:
        """Hook for subclasses; called after *key* has been removed."""


class KeyedStore(_KeyedStoreBase[S, K]):
    """Flat keyed store sharing one dispatcher and one notification stream.

    Subscribers registered on the keyed store see every dispatch for every
    key; each event carries the key it was dispatched to.  Subscribe to
    an individual store from :meth:`get_store` to watch a single key.
    """

    def __init__(
        self,
        dispatcher: Dispatcher[S] | None = None,
        *,
        store_factory: StoreFactory | None = None,
        config: FluxGateConfig | None = None,
    ) -> None:
        super().__init__(dispatcher, store_factory=store_factory, config=config)
        self.state_changed = StateChangedChannel(
            type(self).__name__,
            isolate_errors=self._config.isolate_subscriber_errors,
        )
        self._forwarders: dict[K, Subscription] = {}

    def subscribe(self, fn: Subscriber) -> Subscription:
        return self.state_changed.subscribe(fn)

    def unsubscribe(self, target: Subscription | Subscriber) -> bool:
        return self.state_changed.unsubscribe(target)

    def get_item(self, key: K) -> S | None:
        """Current state for *key*, or ``None`` when the key is absent.

        Returns the state value itself.  ``KeyedStoreCollection.get_item``
        returns the store instead; use :meth:`get_store` here for that.
        """
        store = self._items.get(key)
        return store.item if store is not None else None

    def _register(self, key: K, store: FluxGateStore[S]) -> None:
        super()._register(key, store)

        def _forward(event: StateChangedEvent[Any]) -> None:
            self.state_changed.publish(dataclasses.replace(event, key=key))

        self._forwarders[key] = store.subscribe(_forward)

    def _unregister(self, key: K, store: FluxGateStore[S]) -> None:
        forwarder = self._forwarders.pop(key, None)
        if forwarder is not None:
            forwarder.unsubscribe()
