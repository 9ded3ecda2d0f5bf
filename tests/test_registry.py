"""Tests for DispatcherRegistry wiring."""

from __future__ import annotations

import pytest

from fluxgate import DispatcherRegistry, FluxGateConfig, KeyedStore, KeyedStoreCollection
from fluxgate.exceptions import FluxGateConfigError
from fluxgate.states.counter import CounterIncrementAction, CounterState, CounterStateDispatcher
from fluxgate.states.grid import GridState, GridStateDispatcher, UpdateGridPaging


def _registry() -> DispatcherRegistry:
    registry = DispatcherRegistry()
    registry.register(CounterStateDispatcher())
    registry.register(GridStateDispatcher())
    return registry


def test_resolve_registered_dispatcher() -> None:
    registry = _registry()
    assert isinstance(registry.resolve(CounterState), CounterStateDispatcher)
    assert CounterState in registry


def test_missing_registration_fails_at_construction() -> None:
    registry = DispatcherRegistry()

    with pytest.raises(FluxGateConfigError, match="CounterState"):
        registry.create_store(CounterState)
    with pytest.raises(FluxGateConfigError):
        registry.keyed_store(CounterState)
    with pytest.raises(FluxGateConfigError):
        registry.keyed_collection(GridState)
    with pytest.raises(FluxGateConfigError):
        registry.store_factory(GridState)


def test_duplicate_registration_is_config_error() -> None:
    registry = _registry()
    with pytest.raises(FluxGateConfigError):
        registry.register(CounterStateDispatcher())


def test_explicit_state_type_registration() -> None:
    registry = DispatcherRegistry()
    dispatcher = GridStateDispatcher()

    assert registry.register(dispatcher, GridState) is dispatcher
    assert registry.resolve(GridState) is dispatcher


def test_stores_share_the_registered_dispatcher() -> None:
    registry = _registry()

    first = registry.create_store(CounterState)
    second = registry.create_store(CounterState, CounterState(counter=5))
    first.dispatch(CounterIncrementAction(increment_by=1))

    assert first.dispatcher is second.dispatcher
    assert first.item.counter == 1
    assert second.item.counter == 5


def test_keyed_containers_from_registry() -> None:
    registry = _registry()

    keyed = registry.keyed_store(CounterState)
    collection = registry.keyed_collection(GridState)
    keyed.dispatch("session-1", CounterIncrementAction(increment_by=2))
    collection.dispatch("grid-1", UpdateGridPaging(start_index=20, page_size=10))

    assert isinstance(keyed, KeyedStore)
    assert isinstance(collection, KeyedStoreCollection)
    assert keyed.get_item("session-1") == CounterState(counter=2)
    store = collection.get_item("grid-1")
    assert store is not None
    assert store.item.page == 2


def test_factory_from_registry() -> None:
    registry = _registry()
    factory = registry.store_factory(CounterState)

    assert factory(None).item == CounterState()
    assert factory(CounterState(counter=3)).item.counter == 3


def test_registry_config_flows_to_stores() -> None:
    registry = DispatcherRegistry(FluxGateConfig(isolate_subscriber_errors=True))
    registry.register(CounterStateDispatcher())
    store = registry.create_store(CounterState)
    seen: list[int] = []

    def boom(event: object) -> None:
        raise RuntimeError("boom")

    store.subscribe(boom)
    store.subscribe(lambda e: seen.append(e.state.counter))
    store.dispatch(CounterIncrementAction(increment_by=1))

    assert seen == [1]
