"""Ready-made state types: a counter and a paging grid."""

from fluxgate.states.counter import (
    CounterDecrementAction,
    CounterIncrementAction,
    CounterState,
    CounterStateDispatcher,
)
from fluxgate.states.grid import GridItemsRequest, GridState, GridStateDispatcher, UpdateGridPaging

__all__ = [
    "CounterDecrementAction",
    "CounterIncrementAction",
    "CounterState",
    "CounterStateDispatcher",
    "GridItemsRequest",
    "GridState",
    "GridStateDispatcher",
    "UpdateGridPaging",
]
