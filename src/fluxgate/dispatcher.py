"""Dispatcher (reducer) base class.

A dispatcher maps ``(state, action)`` to a :class:`DispatchResult`.  There is
one dispatcher per state type and it must be a pure function of its inputs:
no mutable attributes touched during ``dispatch`` and no I/O.  That is what
allows a single instance to be shared by every store of its state type.

Implementations match on the closed set of action variants for their state
and fall through to :meth:`Dispatcher.unhandled`::

    class CounterStateDispatcher(Dispatcher[CounterState]):
        state_type = CounterState

        def dispatch(self, state, action):
            match action:
                case CounterIncrementAction():
                    return self.mutated(state.with_(counter=state.counter + action.increment_by), action)
                case _:
                    self.unhandled(action)
"""

from __future__ import annotations

import abc
from typing import ClassVar, Generic, NoReturn, TypeVar

from fluxgate.exceptions import UnhandledActionError
from fluxgate.models._base import FluxGateAction, FluxGateState
from fluxgate.models.result import ChangeMarker, DispatchResult

S = TypeVar("S", bound=FluxGateState)


class Dispatcher(abc.ABC, Generic[S]):
    """Stateless reducer for one state type."""

    state_type: ClassVar[type[FluxGateState]]
    """The state type this dispatcher reduces.  Subclasses must set it."""

    @abc.abstractmethod
    def dispatch(self, state: S, action: FluxGateAction) -> DispatchResult[S]:
        """Compute the next state for *action* applied to *state*."""

    def default_state(self) -> S:
        """Return a fresh initial state for :attr:`state_type`."""
        return self.state_type()  # type: ignore[return-value]

    def mutated(self, item: S, action: FluxGateAction) -> DispatchResult[S]:
        """Successful result carrying a change marker."""
        return DispatchResult(item=item, marker=ChangeMarker(action_type=type(action).__name__))

    def rejected(self, state: S) -> DispatchResult[S]:
        """Non-fatal rejection: the state is returned unchanged and unmarked."""
        return DispatchResult(item=state, success=False)

    def unhandled(self, action: FluxGateAction) -> NoReturn:
        """Raise for an action variant this dispatcher does not know."""
        action_type = type(action).__name__
        state_type = getattr(self, "state_type", None)
        state_name = state_type.__name__ if state_type is not None else "?"
        raise UnhandledActionError(
            f"No mutation defined for {action_type} in {type(self).__name__} ({state_name})",
            action_type=action_type,
            state_type=state_name,
        )
