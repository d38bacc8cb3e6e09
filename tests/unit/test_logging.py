from __future__ import annotations

import json
import logging

import pytest

from envresolve.observability.logging import JsonFormatter, KVLogger, get_logger


def _record(**extra: object) -> logging.LogRecord:
    rec = logging.LogRecord("envresolve.env", logging.WARNING, __file__, 1, "env_default_used", None, None)
    for k, v in extra.items():
        setattr(rec, k, v)
    return rec


def test_json_formatter_includes_extra_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record(env_name="PORT", env_value=8080, _private=1)))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "envresolve.env"
    assert payload["message"] == "env_default_used"
    assert payload["env_name"] == "PORT"
    assert payload["env_value"] == 8080
    assert "_private" not in payload
    assert "ts" in payload


def test_json_formatter_reprs_unserializable_values() -> None:
    payload = json.loads(JsonFormatter().format(_record(fields={1, 2})))
    assert payload["fields"].startswith("{")


def test_kv_logger_passes_kwargs_as_extra(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="envresolve.test")
    log = get_logger("envresolve.test")
    assert isinstance(log, KVLogger)

    log.info("config_resolved", fields=["PORT"], extra={"source": "env"})

    rec = caplog.records[-1]
    assert rec.getMessage() == "config_resolved"
    assert rec.fields == ["PORT"]
    assert rec.source == "env"
