"""Keyed store collection: one fully independent store per key.

Unlike :class:`fluxgate.keyed.KeyedStore` there is no keyspace-wide
notification stream.  Observers subscribe to the store of the key they
care about, and a dispatch to key A never reaches key B's subscribers.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import TypeVar

from fluxgate.keyed import _KeyedStoreBase
from fluxgate.models._base import FluxGateState
from fluxgate.store import StoreProtocol

S = TypeVar("S", bound=FluxGateState)
K = TypeVar("K", bound=Hashable)


class KeyedStoreCollection(_KeyedStoreBase[S, K]):
    """Map of key → independent :class:`FluxGateStore`."""

    def get_item(self, key: K) -> StoreProtocol[S] | None:
        """Return the store for *key*, or ``None``.  Never creates.

        Unlike ``KeyedStore.get_item``, which returns the state value, this
        returns the store so callers can read ``item`` and subscribe to it.
        """
        return self.get_store(key)

    def add_store(self, key: K, state: S | None = None) -> bool:
        """Insert a store seeded with *state*.

        Returns ``False`` (and leaves the existing entry alone) when *key*
        is already present.
        """
        if key in self._items:
            return False
        self._register(key, self._build_store(state))
        return True
