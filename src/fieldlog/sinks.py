"""
Line sinks: destinations that accept one serialized log line at a time.
"""

from __future__ import annotations

import logging
import sys
import threading
from pathlib import Path
from typing import Any, Callable, Optional, Protocol, TextIO, Union, runtime_checkable

from .errors import ConfigurationError, SinkWriteError


@runtime_checkable
class LineSink(Protocol):
    def write_line(self, line: str) -> None: ...


class StreamSink:
    """
    Write each line to a text stream followed by a newline.

    When no stream is given, ``sys.stdout`` is looked up on every write so the
    sink follows stream redirection (pytest's ``capsys`` included).
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, line: str) -> None:
        with self._lock:
            try:
                self.stream.write(line + "\n")
                self.stream.flush()
            except (OSError, ValueError) as exc:
                raise SinkWriteError(f"failed to write log line: {exc}") from exc


class FileSink(StreamSink):
    """Append lines to a newline-delimited JSON file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(self.path.open("a", encoding="utf-8"))

    def close(self) -> None:
        with self._lock:
            self.stream.close()

    def __enter__(self) -> "FileSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class CallableSink:
    """Adapt a plain ``func(line)`` callable."""

    def __init__(self, func: Callable[[str], Any]) -> None:
        self._func = func

    def write_line(self, line: str) -> None:
        self._func(line)


class LoggingSink:
    """Forward each line as the message of a stdlib ``logging`` record."""

    def __init__(self, target: Union[logging.Logger, str], level: int = logging.INFO) -> None:
        self.logger = target if isinstance(target, logging.Logger) else logging.getLogger(target)
        self.level = level

    def write_line(self, line: str) -> None:
        self.logger.log(self.level, line)


def configure_logging(name: str, level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        logging.basicConfig(level=level, format='%(message)s')
    return logger


def coerce_sink(output: Any) -> LineSink:
    """
    Resolve the ``output`` configuration value into a `LineSink`.

    Accepts ``None`` (standard output), a `LineSink`, a `logging.Logger`,
    a writable text stream, or a callable taking one line.
    """
    if output is None:
        return StreamSink()
    if isinstance(output, LineSink):
        return output
    if isinstance(output, logging.Logger):
        return LoggingSink(output)
    if callable(getattr(output, "write", None)):
        return StreamSink(output)
    if callable(output):
        return CallableSink(output)
    raise ConfigurationError(f"output must be a line sink, stream, logger or callable, got {type(output).__name__}")


__all__ = [
    "LineSink",
    "StreamSink",
    "FileSink",
    "CallableSink",
    "LoggingSink",
    "configure_logging",
    "coerce_sink",
]
