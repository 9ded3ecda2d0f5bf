"""Paging state for a data grid.

The grid's data source asks for a window of rows (start offset + count).
That request is turned into an :class:`UpdateGridPaging` action so the
current window survives re-rendering and can be restored per grid key.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from fluxgate.dispatcher import Dispatcher
from fluxgate.models._base import FluxGateAction, FluxGateState
from fluxgate.models.result import DispatchResult

# Page size used when a grid request does not say how many rows it wants.
DEFAULT_REQUEST_COUNT = 1000


class GridItemsRequest(BaseModel):
    """A window request from a grid's items provider."""

    model_config = ConfigDict(frozen=True)

    start_index: int = Field(default=0, ge=0)
    count: int | None = Field(default=None, gt=0)


class GridState(FluxGateState):
    start_index: int = Field(default=0, ge=0)
    page_size: int = Field(default=10, gt=0)

    @property
    def page(self) -> int:
        """Zero-based index of the page starting at :attr:`start_index`."""
        return self.start_index // self.page_size

    @classmethod
    def from_grid_request(cls, request: GridItemsRequest) -> GridState:
        return cls(start_index=request.start_index, page_size=request.count or DEFAULT_REQUEST_COUNT)


class UpdateGridPaging(FluxGateAction):
    start_index: int = Field(ge=0)
    page_size: int = Field(gt=0)

    @classmethod
    def from_grid_request(cls, request: GridItemsRequest) -> UpdateGridPaging:
        state = GridState.from_grid_request(request)
        return cls(start_index=state.start_index, page_size=state.page_size)


class GridStateDispatcher(Dispatcher[GridState]):
    state_type = GridState

    def dispatch(self, state: GridState, action: FluxGateAction) -> DispatchResult[GridState]:
        match action:
            case UpdateGridPaging():
                new_state = state.with_(start_index=action.start_index, page_size=action.page_size)
                return self.mutated(new_state, action)
            case _:
                self.unhandled(action)
