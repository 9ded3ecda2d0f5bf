"""Store configuration for fluxgate."""

from __future__ import annotations

import dataclasses
import os
from typing import Any


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class FluxGateConfig:
    """Runtime behaviour shared by stores and keyed containers.

    Parameters
    ----------
    isolate_subscriber_errors : bool
        When ``True`` an exception raised by a state-changed subscriber is
        logged and the remaining subscribers are still notified.  When
        ``False`` (default) the exception propagates out of ``dispatch``.
    trace_dispatch : bool
        Emit one DEBUG record per dispatch including the (redacted)
        action payload.
    trace_max_string : int
        Maximum length of string values in traced action payloads.
    """

    isolate_subscriber_errors: bool = False
    trace_dispatch: bool = False
    trace_max_string: int = 256

    @classmethod
    def from_env(cls, **overrides: Any) -> FluxGateConfig:
        """Create configuration from environment variables.

        Reads ``FLUXGATE_ISOLATE_SUBSCRIBER_ERRORS``,
        ``FLUXGATE_TRACE_DISPATCH`` and ``FLUXGATE_TRACE_MAX_STRING``.
        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        FluxGateConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "isolate_subscriber_errors" not in overrides:
            config_kwargs["isolate_subscriber_errors"] = _env_bool(
                env.get("FLUXGATE_ISOLATE_SUBSCRIBER_ERRORS"),
                False,
            )

        if "trace_dispatch" not in overrides:
            config_kwargs["trace_dispatch"] = _env_bool(env.get("FLUXGATE_TRACE_DISPATCH"), False)

        max_string_env = env.get("FLUXGATE_TRACE_MAX_STRING")
        if max_string_env is not None and "trace_max_string" not in overrides:
            config_kwargs["trace_max_string"] = int(max_string_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
