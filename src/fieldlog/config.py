"""
Logger configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping, Optional

from .datetime_utils import Timestamp, now_utc
from .errors import ConfigurationError

_UNSET: Any = object()


@dataclass(frozen=True)
class LoggerConfig:
    """
    Configuration for a `fieldlog.Logger`.

    Unset values fall back to the environment:

    - ``service``: ``OTEL_SERVICE_NAME`` (only when not supplied at all)
    - ``trace_context``: ``FIELDLOG_TRACE_CONTEXT`` (``"true"``/``"false"``)

    ``now`` defaults to the UTC wall clock and ``output`` to standard output.
    """

    service: Any = _UNSET
    now: Optional[Callable[[], Timestamp]] = None
    output: Any = None
    trace_context: Optional[bool] = None

    def __post_init__(self) -> None:
        if self.service is _UNSET:
            object.__setattr__(self, "service", os.getenv("OTEL_SERVICE_NAME"))
        if self.now is None:
            object.__setattr__(self, "now", now_utc)
        if self.trace_context is None:
            enabled = os.getenv("FIELDLOG_TRACE_CONTEXT", "false").lower() == "true"
            object.__setattr__(self, "trace_context", enabled)
        self.validate()

    def validate(self) -> None:
        if not isinstance(self.service, str) or not self.service.strip():
            raise ConfigurationError("configuration must have a service name")
        if not callable(self.now):
            raise ConfigurationError("now must be a zero-argument callable returning the current time")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "LoggerConfig":
        if not isinstance(mapping, Mapping):
            raise ConfigurationError("configuration must be a mapping")
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in mapping if k not in known)
        if unknown:
            raise ConfigurationError(f"unknown configuration keys: {', '.join(unknown)}")
        return cls(**dict(mapping))


__all__ = ["LoggerConfig"]
