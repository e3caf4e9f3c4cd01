import pytest

from fieldlog import ConfigurationError, LoggerConfig, now_utc


def test_service_from_environment(monkeypatch):
    monkeypatch.setenv("OTEL_SERVICE_NAME", "svc-env")
    assert LoggerConfig().service == "svc-env"


def test_explicit_service_ignores_environment(monkeypatch):
    monkeypatch.setenv("OTEL_SERVICE_NAME", "svc-env")
    assert LoggerConfig(service="svc").service == "svc"
    with pytest.raises(ConfigurationError):
        LoggerConfig(service="")


def test_defaults(monkeypatch):
    monkeypatch.delenv("FIELDLOG_TRACE_CONTEXT", raising=False)
    config = LoggerConfig(service="svc")
    assert config.now is now_utc
    assert config.output is None
    assert config.trace_context is False


def test_trace_context_from_environment(monkeypatch):
    monkeypatch.setenv("FIELDLOG_TRACE_CONTEXT", "TRUE")
    assert LoggerConfig(service="svc").trace_context is True
    assert LoggerConfig(service="svc", trace_context=False).trace_context is False


def test_now_must_be_callable():
    with pytest.raises(ConfigurationError):
        LoggerConfig(service="svc", now="2024-01-01")


def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(ConfigurationError):
        LoggerConfig.from_mapping({"service": "svc", "level": "info"})
    with pytest.raises(ConfigurationError):
        LoggerConfig.from_mapping("svc")
