import json
import logging

import pytest

from yql_query import Builder, ErrorCode, YqlQueryError
from yql_query.logging.logger import CustomJsonFormatter, setup_logging
from yql_query.settings import _reload_settings


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, CustomJsonFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="yql_query.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg="rendered %s",
        args=("statement",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_emits_core_fields():
    payload = json.loads(CustomJsonFormatter().format(_record()))
    assert payload["message"] == "rendered statement"
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "yql_query.test"
    assert "timestamp" in payload
    assert "trace_id" not in payload


def test_json_formatter_includes_extra_fields():
    payload = json.loads(CustomJsonFormatter().format(_record(statement="select * from t")))
    assert payload["statement"] == "select * from t"


def test_setup_logging_installs_json_handler(restore_root_logger):
    setup_logging("debug")
    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert any(isinstance(h.formatter, CustomJsonFormatter) for h in root.handlers)


def test_setup_logging_defaults_to_settings(restore_root_logger, monkeypatch):
    monkeypatch.setenv("YQL_LOG_LEVEL", "warning")
    _reload_settings()
    setup_logging()
    assert restore_root_logger.level == logging.WARNING


def test_setup_logging_rejects_unknown_level(restore_root_logger):
    with pytest.raises(YqlQueryError) as exc_info:
        setup_logging("chatty")
    assert exc_info.value.error_code == ErrorCode.CONFIG_ERROR


def test_rendered_statements_logged_when_enabled(monkeypatch, caplog):
    monkeypatch.setenv("YQL_LOG_RENDERED_STATEMENTS", "true")
    _reload_settings()
    with caplog.at_level(logging.DEBUG, logger="yql_query.builder.builder"):
        Builder().table("music").render()
    assert caplog.records[-1].statement == "select * from music"


def test_rendered_statements_not_logged_by_default(caplog):
    with caplog.at_level(logging.DEBUG, logger="yql_query.builder.builder"):
        Builder().table("music").render()
    assert not [r for r in caplog.records if r.name == "yql_query.builder.builder"]
