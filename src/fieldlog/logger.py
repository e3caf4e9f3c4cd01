"""
Structured JSON logger emitting one common-schema record per line.
"""

from __future__ import annotations

import copy
import json
import traceback
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional, Union

from .config import LoggerConfig
from .datetime_utils import coerce_timestamp, isoformat_utc
from .errors import ConfigurationError, InvalidEventError, SinkWriteError
from .fields import FieldTree, to_nested
from .levels import Level
from .sinks import LineSink, coerce_sink
from .tracing import trace_fields


@dataclass(frozen=True)
class ErrorDetails:
    """What the ``error`` call needs to know about a failure."""

    description: str
    stack_trace: List[str] = field(default_factory=list)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ErrorDetails":
        frames = traceback.extract_tb(exc.__traceback__)
        return cls(
            description=str(exc) or type(exc).__name__,
            stack_trace=[f"{frame.filename}:{frame.lineno}:in {frame.name}" for frame in frames],
        )

    @classmethod
    def adapt(cls, error: Any) -> "ErrorDetails":
        if isinstance(error, cls):
            return error
        if isinstance(error, BaseException):
            return cls.from_exception(error)
        raise InvalidEventError(f"error must be an exception or ErrorDetails, got {type(error).__name__}")


class Logger:
    """
    Emit log events as newline-delimited JSON.

    Every record carries ``service.name``, ``@timestamp`` and ``log.level``,
    then the logger's scoped properties, then the fields of the call itself.
    Later layers win on conflicting paths. Dotted and nested field names are
    interchangeable and end up nested in the output.

    Example:
        log = Logger(service="checkout")
        request_log = log.with_({"trace.id": "126bb6fa"})
        request_log.info({"message": "order placed", "event.action": "order"})
    """

    def __init__(
        self,
        config: Union[LoggerConfig, Mapping[str, Any], None] = None,
        *,
        scoped_properties: Optional[Mapping[str, Any]] = None,
        **options: Any,
    ) -> None:
        if config is None:
            config = LoggerConfig.from_mapping(options)
        elif options:
            raise ConfigurationError("pass either a config object or keyword options, not both")
        elif not isinstance(config, LoggerConfig):
            config = LoggerConfig.from_mapping(config)

        self._config = config
        self._output: LineSink = coerce_sink(config.output)
        self._scope = _bind_scope(scoped_properties or {})

    @classmethod
    def from_config(cls, config: Union[LoggerConfig, Mapping[str, Any]]) -> "Logger":
        return cls(config)

    @property
    def service(self) -> str:
        return self._config.service

    @property
    def output(self) -> LineSink:
        return self._output

    @property
    def scoped_properties(self) -> FieldTree:
        return copy.deepcopy(self._scope)

    def with_(self, scoped_properties: Mapping[str, Any]) -> "Logger":
        """
        Return a child logger sharing service, clock and output.

        The child's scope is exactly ``scoped_properties``; it is not merged
        with this logger's scope. This logger is left unchanged.
        """
        child = copy.copy(self)
        child._scope = _bind_scope(scoped_properties)
        return child

    def debug(self, event: Mapping[str, Any]) -> None:
        self._emit(Level.DEBUG, event)

    def info(self, event: Mapping[str, Any]) -> None:
        self._emit(Level.INFO, event)

    def warning(self, event: Mapping[str, Any]) -> None:
        self._emit(Level.WARNING, event)

    def error(self, event: Mapping[str, Any], error: Any = None) -> None:
        """
        Log at error level.

        When ``error`` is given (an exception or `ErrorDetails`), its
        description and stack trace are added as ``error_name`` and
        ``backtrace``, replacing any fields of those names in ``event``.
        """
        if error is not None:
            _check_event(event)
            details = ErrorDetails.adapt(error)
            event = {**event, "error_name": details.description, "backtrace": list(details.stack_trace)}
        self._emit(Level.ERROR, event)

    def critical(self, event: Mapping[str, Any]) -> None:
        self._emit(Level.CRITICAL, event)

    def log(self, level: Union[Level, str], event: Mapping[str, Any]) -> None:
        try:
            parsed = Level.parse(level)
        except ValueError as exc:
            raise InvalidEventError(str(exc)) from exc
        self._emit(parsed, event)

    def _emit(self, level: Level, event: Mapping[str, Any]) -> None:
        _check_event(event)
        header = {
            "service": {"name": self._config.service},
            "@timestamp": isoformat_utc(coerce_timestamp(self._config.now())),
            "log": {"level": level.value},
        }
        layers: List[Mapping[str, Any]] = [header]
        if self._config.trace_context:
            layers.append(trace_fields())
        layers.extend([self._scope, event])

        line = _serialize(to_nested(*layers))
        try:
            self._output.write_line(line)
        except OSError as exc:
            raise SinkWriteError(f"failed to write log line: {exc}") from exc


def _check_event(event: Any) -> None:
    if not isinstance(event, Mapping):
        raise InvalidEventError("log event must be a mapping")
    if "message" not in event:
        raise InvalidEventError("log event must have a 'message' property")
    message = event["message"]
    if not isinstance(message, str) or not message.strip():
        raise InvalidEventError("the 'message' property of a log event must be a non-empty string")


def _bind_scope(scoped_properties: Any) -> FieldTree:
    if not isinstance(scoped_properties, Mapping):
        raise ConfigurationError("scoped properties must be a mapping")
    return copy.deepcopy(to_nested(scoped_properties))


def _serialize(record: Dict[str, Any]) -> str:
    try:
        return json.dumps(
            record,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_json_default,
        )
    except (TypeError, ValueError) as exc:
        raise InvalidEventError(f"log event is not JSON serializable: {exc}") from exc


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return isoformat_utc(value)
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


__all__ = ["ErrorDetails", "Logger"]
