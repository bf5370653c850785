import pytest

from yql_query.settings import _reload_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test against default settings."""
    for name in ("YQL_STRICT_CONDITIONS", "YQL_LOG_LEVEL", "YQL_LOG_RENDERED_STATEMENTS"):
        monkeypatch.delenv(name, raising=False)
    _reload_settings()
    yield
    monkeypatch.undo()
    _reload_settings()
