"""Tests for state/action base models and the bundled state types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fluxgate.models import ChangeMarker, DispatchResult, FluxGateAction, FluxGateState, StoreStatus
from fluxgate.states.counter import CounterDecrementAction, CounterIncrementAction, CounterState
from fluxgate.states.grid import GridItemsRequest, GridState, UpdateGridPaging


class _ProfileState(FluxGateState):
    name: str = "anonymous"
    visits: int = 0
    tags: tuple[str, ...] = ()


# ------------------------------------------------------------------
# FluxGateState
# ------------------------------------------------------------------


class TestFluxGateState:
    def test_default_constructible(self) -> None:
        assert CounterState().counter == 0
        assert _ProfileState() == _ProfileState(name="anonymous", visits=0, tags=())

    def test_equality_is_by_value(self) -> None:
        assert CounterState(counter=3) == CounterState(counter=3)
        assert CounterState(counter=3) is not CounterState(counter=3)

    def test_fields_are_frozen(self) -> None:
        state = CounterState(counter=1)
        with pytest.raises(ValidationError):
            state.counter = 2  # type: ignore[misc]

    def test_with_replaces_only_given_fields(self) -> None:
        state = _ProfileState(name="ada", visits=4, tags=("admin",))
        updated = state.with_(visits=5)

        assert updated.visits == 5
        assert updated.name == state.name
        assert updated.tags == state.tags
        assert state.visits == 4

    def test_with_revalidates(self) -> None:
        with pytest.raises(ValidationError):
            GridState().with_(page_size=0)

    def test_with_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            CounterState().with_(total=1)


# ------------------------------------------------------------------
# FluxGateAction
# ------------------------------------------------------------------


class TestFluxGateAction:
    def test_sender_defaults_to_none(self) -> None:
        assert CounterIncrementAction(increment_by=1).sender is None

    def test_sender_excluded_from_dump(self) -> None:
        action = CounterIncrementAction(increment_by=2, sender=object())
        assert action.model_dump() == {"increment_by": 2}

    def test_actions_are_frozen(self) -> None:
        action = CounterIncrementAction(increment_by=2)
        with pytest.raises(ValidationError):
            action.increment_by = 3  # type: ignore[misc]

    def test_base_action_has_no_payload(self) -> None:
        assert FluxGateAction().model_dump() == {}

    def test_sender_ignored_by_equality(self) -> None:
        first = CounterIncrementAction(increment_by=1, sender="button-a")
        second = CounterIncrementAction(increment_by=1, sender="button-b")

        assert first == second
        assert hash(first) == hash(second)
        assert first != CounterIncrementAction(increment_by=2, sender="button-a")

    def test_unhashable_sender_keeps_action_hashable(self) -> None:
        action = CounterIncrementAction(increment_by=1, sender={"page": "counter"})
        assert action in {CounterIncrementAction(increment_by=1)}

    def test_same_payload_different_variant_not_equal(self) -> None:
        assert CounterIncrementAction(increment_by=1) != CounterDecrementAction(decrement_by=1)


# ------------------------------------------------------------------
# Results
# ------------------------------------------------------------------


class TestResults:
    def test_status_modified_advances_version(self) -> None:
        status = StoreStatus()
        assert status.version == 0
        assert status.is_modified is False

        modified = status.modified().modified()
        assert modified.version == 2
        assert modified.is_modified is True
        assert status.version == 0

    def test_dispatch_result_defaults(self) -> None:
        result = DispatchResult(item=CounterState())
        assert result.success is True
        assert result.marker is None
        assert result.changed is False

    def test_dispatch_result_with_marker_is_changed(self) -> None:
        result = DispatchResult(item=CounterState(), marker=ChangeMarker(action_type="X"))
        assert result.changed is True


# ------------------------------------------------------------------
# GridState
# ------------------------------------------------------------------


class TestGridState:
    def test_default_page_is_zero(self) -> None:
        state = GridState()
        assert state.start_index == 0
        assert state.page_size == 10
        assert state.page == 0

    @pytest.mark.parametrize(
        ("start_index", "page_size", "page"),
        [(20, 10, 2), (25, 10, 2), (9, 10, 0), (100, 25, 4)],
    )
    def test_page_is_derived(self, start_index: int, page_size: int, page: int) -> None:
        assert GridState(start_index=start_index, page_size=page_size).page == page

    def test_page_size_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            GridState(page_size=0)

    def test_from_grid_request(self) -> None:
        state = GridState.from_grid_request(GridItemsRequest(start_index=30, count=15))
        assert state == GridState(start_index=30, page_size=15)
        assert state.page == 2

    def test_from_grid_request_without_count(self) -> None:
        state = GridState.from_grid_request(GridItemsRequest(start_index=40))
        assert state.page_size == 1000
        assert state.page == 0

    @pytest.mark.parametrize(
        ("start_index", "page_size"),
        [(-5, 10), (0, 0), (-5, 0), (10, -1)],
    )
    def test_update_paging_rejects_invalid_window(self, start_index: int, page_size: int) -> None:
        with pytest.raises(ValidationError):
            UpdateGridPaging(start_index=start_index, page_size=page_size)

    def test_update_action_from_grid_request(self) -> None:
        action = UpdateGridPaging.from_grid_request(GridItemsRequest(start_index=20, count=10))
        assert action == UpdateGridPaging(start_index=20, page_size=10)
