"""
OpenTelemetry correlation fields for log records.
"""

from typing import Dict

from opentelemetry import trace


def trace_fields() -> Dict[str, str]:
    """Return ``trace.id``/``span.id`` for the current OpenTelemetry span, if any."""
    fields: Dict[str, str] = {}
    span = trace.get_current_span()
    ctx = span.get_span_context() if span else None
    if ctx and ctx.is_valid:
        fields["trace.id"] = format(ctx.trace_id, '032x')
        fields["span.id"] = format(ctx.span_id, '016x')
    return fields


__all__ = ["trace_fields"]
