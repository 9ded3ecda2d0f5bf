"""Base models for states and actions.

Every application state inherits from :class:`FluxGateState` and every
action variant from :class:`FluxGateAction`.  Both are frozen pydantic
models, so:

* equality is by value, not identity;
* fields cannot be reassigned after construction;
* a mutation always produces a new instance (see :meth:`FluxGateState.with_`).

A state subclass must give every field a default so ``State()`` yields
its initial value; stores rely on that to start without an explicit seed.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field


class FluxGateState(BaseModel):
    """Base for immutable application state snapshots."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

    def with_(self, **changes: Any) -> Self:
        """Return a copy with *changes* applied and every other field kept.

        Unlike ``model_copy(update=...)`` the result is re-validated, so
        field constraints still hold on the new instance.  Untouched field
        values are carried over as-is (no deep copy).
        """
        data = dict(self)
        data.update(changes)
        return type(self)(**data)


class FluxGateAction(BaseModel):
    """Base for action variants.

    The concrete subclass *is* the variant tag; its fields carry the
    parameters of one mutation.  ``sender`` optionally identifies whoever
    raised the action and is forwarded to state-changed subscribers.
    It takes no part in equality or hashing, so any object may be used.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

    sender: Any = Field(default=None, exclude=True, repr=False)
    """Originator of the action (component, session, ...), if known."""

    def _payload(self) -> dict[str, Any]:
        return {name: value for name, value in self.__dict__.items() if name != "sender"}

    def __eq__(self, other: object) -> bool:
        # ``sender`` is metadata: actions compare by variant and payload only.
        if not isinstance(other, FluxGateAction):
            return NotImplemented
        return type(self) is type(other) and self._payload() == other._payload()

    def __hash__(self) -> int:
        return hash((type(self), tuple(self._payload().items())))
