"""fluxgate - Action-dispatch state container with keyed stores."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fluxgate")
except PackageNotFoundError:
    __version__ = "0+local"
from fluxgate.collection import KeyedStoreCollection
from fluxgate.config import FluxGateConfig
from fluxgate.dispatcher import Dispatcher
from fluxgate.events import StateChangedChannel, StateChangedEvent, Subscription
from fluxgate.exceptions import FluxGateConfigError, FluxGateError, UnhandledActionError
from fluxgate.keyed import KeyedStore
from fluxgate.models import ChangeMarker, DispatchResult, FluxGateAction, FluxGateState, StoreStatus
from fluxgate.registry import DispatcherRegistry
from fluxgate.store import FluxGateStore, StoreFactory, StoreProtocol, store_factory_for

__all__ = [
    "__version__",
    "ChangeMarker",
    "Dispatcher",
    "DispatcherRegistry",
    "DispatchResult",
    "FluxGateAction",
    "FluxGateConfig",
    "FluxGateConfigError",
    "FluxGateError",
    "FluxGateState",
    "FluxGateStore",
    "KeyedStore",
    "KeyedStoreCollection",
    "StateChangedChannel",
    "StateChangedEvent",
    "StoreFactory",
    "StoreProtocol",
    "StoreStatus",
    "Subscription",
    "UnhandledActionError",
    "store_factory_for",
]
