"""Dispatch result and change-tracking models."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

S = TypeVar("S")


class ChangeMarker(BaseModel):
    """Marks a transition as an effective change.

    Only a successful mutation produces one; a result without a marker
    means nothing changed.
    """

    model_config = ConfigDict(frozen=True)

    action_type: str = ""
    """Name of the action variant that produced the change."""


class StoreStatus(BaseModel):
    """Dirty-tracking metadata kept by a store alongside its state."""

    model_config = ConfigDict(frozen=True)

    version: int = Field(default=0, ge=0)
    is_modified: bool = False

    def modified(self) -> StoreStatus:
        return StoreStatus(version=self.version + 1, is_modified=True)


class DispatchResult(BaseModel, Generic[S]):
    """Output of one dispatch.

    Parameters
    ----------
    item : S
        The next state.  For a rejected action this is the input state.
    marker : ChangeMarker or None
        Present when the action changed the state.
    success : bool
        ``False`` when the dispatcher rejected the action without it being
        a programming error.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    item: S
    marker: ChangeMarker | None = None
    success: bool = True

    @property
    def changed(self) -> bool:
        return self.marker is not None
