"""State, action, and dispatch result models."""

from fluxgate.models._base import FluxGateAction, FluxGateState
from fluxgate.models.result import ChangeMarker, DispatchResult, StoreStatus

__all__ = [
    "ChangeMarker",
    "DispatchResult",
    "FluxGateAction",
    "FluxGateState",
    "StoreStatus",
]
