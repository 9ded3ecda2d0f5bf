"""Action payload rendering for dispatch traces.

Actions declare which of their fields must never reach a log.  A field is
hidden when its value is a pydantic ``SecretStr``/``SecretBytes`` or when
it is declared with ``Field(json_schema_extra={"sensitive": True})``::

    class Login(FluxGateAction):
        user: str
        otp: str = Field(json_schema_extra={"sensitive": True})
        password: SecretStr

Long strings are truncated so a large payload cannot flood the log.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, SecretBytes, SecretStr
from pydantic.fields import FieldInfo

REDACTED = "<redacted>"


def is_sensitive(field: FieldInfo) -> bool:
    extra = field.json_schema_extra
    return isinstance(extra, dict) and extra.get("sensitive") is True


def _render(value: Any, max_string: int) -> Any:
    if isinstance(value, (SecretStr, SecretBytes)):
        return REDACTED
    if isinstance(value, BaseModel):
        return trace_payload(value, max_string=max_string)
    if isinstance(value, str):
        return value if len(value) <= max_string else f"{value[:max_string]}…<truncated>"
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, Mapping):
        return {str(k): _render(v, max_string) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_render(v, max_string) for v in value]
    return f"<{type(value).__name__}>"


def trace_payload(model: BaseModel, *, max_string: int = 256) -> dict[str, Any]:
    """Field values of *model* with sensitive fields hidden.

    Fields excluded from serialization (such as an action's ``sender``)
    are left out entirely.
    """
    rendered: dict[str, Any] = {}
    for name, field in type(model).model_fields.items():
        if field.exclude:
            continue
        if is_sensitive(field):
            rendered[name] = REDACTED
            continue
        rendered[name] = _render(getattr(model, name), max_string)
    return rendered


def describe_action(action: BaseModel, *, max_string: int = 256) -> dict[str, Any]:
    """Return ``{"type": ..., "payload": ...}`` for tracing a dispatched action."""
    return {
        "type": type(action).__name__,
        "payload": trace_payload(action, max_string=max_string),
    }
