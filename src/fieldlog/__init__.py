"""
fieldlog - structured JSON logging with common-schema field names
"""

__version__ = "0.1.0"

from .errors import (
    FieldLogError,
    ConfigurationError,
    InvalidEventError,
    KeyFormatError,
    SinkWriteError,
)

from .fields import (
    split_key,
    merge_into,
    to_nested,
)

from .levels import Level

from .datetime_utils import (
    now_utc,
    isoformat_utc,
)

from .sinks import (
    LineSink,
    StreamSink,
    FileSink,
    CallableSink,
    LoggingSink,
    configure_logging,
    coerce_sink,
)

from .tracing import trace_fields

from .config import LoggerConfig

from .logger import (
    ErrorDetails,
    Logger,
)

__all__ = [
    "FieldLogError",
    "ConfigurationError",
    "InvalidEventError",
    "KeyFormatError",
    "SinkWriteError",
    "split_key",
    "merge_into",
    "to_nested",
    "Level",
    "now_utc",
    "isoformat_utc",
    "LineSink",
    "StreamSink",
    "FileSink",
    "CallableSink",
    "LoggingSink",
    "configure_logging",
    "coerce_sink",
    "trace_fields",
    "LoggerConfig",
    "ErrorDetails",
    "Logger",
]
