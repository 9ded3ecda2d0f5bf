"""Custom exception hierarchy for fluxgate."""

from __future__ import annotations


class FluxGateError(Exception):
    """Base exception for all fluxgate errors."""


class FluxGateConfigError(FluxGateError):
    """Invalid or missing wiring/configuration.

    Raised when a store or keyed container cannot be built: no dispatcher
    registered for a state type, a store factory that returns nothing, or an
    initial state of the wrong type.  These are raised at construction time
    so misconfiguration surfaces before the first dispatch.
    """


class UnhandledActionError(FluxGateError, NotImplementedError):
    """A dispatcher received an action variant it has no mutation for.

    This is a programming error (wrong dispatcher paired with wrong action),
    not a retryable condition.  The store never catches it.
    """

    def __init__(
        self,
        message: str,
        *,
        action_type: str = "",
        state_type: str = "",
    ) -> None:
        self.action_type = action_type
        self.state_type = state_type
        super().__init__(message)
