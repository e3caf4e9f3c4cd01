import io
import json
import logging

import pytest

from fieldlog import (
    CallableSink,
    ConfigurationError,
    FileSink,
    LineSink,
    Logger,
    LoggingSink,
    SinkWriteError,
    StreamSink,
    coerce_sink,
    configure_logging,
)


def test_stream_sink_appends_newline():
    buf = io.StringIO()
    sink = StreamSink(buf)
    sink.write_line('{"a":1}')
    sink.write_line('{"a":2}')
    assert buf.getvalue() == '{"a":1}\n{"a":2}\n'


def test_stream_sink_wraps_stream_errors():
    buf = io.StringIO()
    buf.close()
    with pytest.raises(SinkWriteError):
        StreamSink(buf).write_line("x")


def test_file_sink_writes_ndjson(tmp_path):
    path = tmp_path / "logs" / "app.ndjson"
    with FileSink(path) as sink:
        log = Logger(service="svc", output=sink)
        log.info({"message": "one"})
        log.info({"message": "two"})

    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["message"] for line in lines] == ["one", "two"]

    with pytest.raises(SinkWriteError):
        sink.write_line("late")


def test_logging_sink_forwards_lines(caplog):
    caplog.set_level(logging.INFO)
    logger = configure_logging("fieldlog-test")
    log = Logger(service="svc", output=logger)
    log.warning({"message": "via logging"})

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["message"] == "via logging"
    assert payload["log"]["level"] == "warning"


def test_logging_sink_by_name_and_level(caplog):
    caplog.set_level(logging.DEBUG)
    LoggingSink("fieldlog-named", level=logging.DEBUG).write_line("line")
    rec = caplog.records[-1]
    assert rec.name == "fieldlog-named"
    assert rec.levelno == logging.DEBUG
    assert rec.getMessage() == "line"


def test_coerce_sink_variants():
    buf = io.StringIO()
    seen = []
    assert isinstance(coerce_sink(None), StreamSink)
    assert isinstance(coerce_sink(buf), StreamSink)
    assert isinstance(coerce_sink(seen.append), CallableSink)
    assert isinstance(coerce_sink(logging.getLogger("x")), LoggingSink)

    sink = StreamSink(buf)
    assert coerce_sink(sink) is sink
    assert isinstance(sink, LineSink)

    with pytest.raises(ConfigurationError):
        coerce_sink(42)


def test_unusable_output_fails_construction():
    with pytest.raises(ConfigurationError):
        Logger(service="svc", output=object())
