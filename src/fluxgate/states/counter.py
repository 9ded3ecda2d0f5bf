"""Counter state and its actions."""

from __future__ import annotations

from fluxgate.dispatcher import Dispatcher
from fluxgate.models._base import FluxGateAction, FluxGateState
from fluxgate.models.result import DispatchResult


class CounterState(FluxGateState):
    counter: int = 0


class CounterIncrementAction(FluxGateAction):
    increment_by: int


class CounterDecrementAction(FluxGateAction):
    decrement_by: int


class CounterStateDispatcher(Dispatcher[CounterState]):
    state_type = CounterState

    def dispatch(self, state: CounterState, action: FluxGateAction) -> DispatchResult[CounterState]:
        match action:
            case CounterIncrementAction():
                return self.mutated(state.with_(counter=state.counter + action.increment_by), action)
            case CounterDecrementAction():
                return self.mutated(state.with_(counter=state.counter - action.decrement_by), action)
            case _:
                self.unhandled(action)
