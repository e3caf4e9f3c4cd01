class FieldLogError(Exception):
    pass


class ConfigurationError(FieldLogError, ValueError):
    """Raised when a logger is built from an invalid configuration."""
    pass


class InvalidEventError(FieldLogError, ValueError):
    """Raised when a log call receives a malformed event."""
    pass


class KeyFormatError(FieldLogError, ValueError):
    """Raised when a field name cannot be split into a dotted path."""
    pass


class SinkWriteError(FieldLogError):
    """Raised when the output sink fails to accept a line."""
    pass
