import json

from opentelemetry.sdk.trace import TracerProvider

from fieldlog import Logger, trace_fields

tracer = TracerProvider().get_tracer(__name__)


def test_no_fields_outside_a_span():
    assert trace_fields() == {}


def test_fields_from_current_span():
    with tracer.start_as_current_span("op") as span:
        fields = trace_fields()
        ctx = span.get_span_context()
    assert fields == {
        "trace.id": format(ctx.trace_id, "032x"),
        "span.id": format(ctx.span_id, "016x"),
    }


def test_logger_enriches_when_enabled():
    lines = []
    log = Logger(service="svc", output=lines.append, trace_context=True)
    with tracer.start_as_current_span("op") as span:
        log.info({"message": "inside"})
        trace_id = format(span.get_span_context().trace_id, "032x")
    log.info({"message": "outside"})

    inside, outside = [json.loads(line) for line in lines]
    assert inside["trace"]["id"] == trace_id
    assert len(inside["span"]["id"]) == 16
    assert "trace" not in outside


def test_scope_overrides_trace_fields():
    lines = []
    log = Logger(service="svc", output=lines.append, trace_context=True).with_({"trace.id": "fixed"})
    with tracer.start_as_current_span("op"):
        log.info({"message": "m"})
    rec = json.loads(lines[0])
    assert rec["trace"]["id"] == "fixed"
    assert "id" in rec["span"]


def test_enrichment_is_off_by_default(monkeypatch):
    monkeypatch.delenv("FIELDLOG_TRACE_CONTEXT", raising=False)
    lines = []
    log = Logger(service="svc", output=lines.append)
    with tracer.start_as_current_span("op"):
        log.info({"message": "m"})
    assert "trace" not in json.loads(lines[0])
