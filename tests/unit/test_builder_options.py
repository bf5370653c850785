"""Unit tests for the construction-time configuration bundle."""

import pytest

from yql_query import Builder, BuilderOptions, ErrorCode, Source, YqlQueryError


class TestBuilderOptions:
    """Options are equivalent to calling the corresponding setters."""

    def test_no_options_is_empty(self):
        assert Builder().render() == Builder(None).render() == "select * from"

    def test_options_match_setter_calls(self):
        options = {
            "table": "music",
            "select": ["name", "genre"],
            "uses": [("http://host/music.xml", "music")],
            "conditions": {"genre": "jazz"},
            "limit": 5,
            "offset": 10,
            "remote_limit": 20,
            "remote_offset": 40,
            "sort_descending": "name",
            "tail": 3,
            "truncate": 2,
            "reverse": True,
            "unique": "name",
            "sanitize": "genre",
        }
        chained = (
            Builder()
            .table("music")
            .select(["name", "genre"])
            .use("http://host/music.xml", "music")
            .conditions({"genre": "jazz"})
            .limit(5)
            .offset(10)
            .remote(20, 40)
            .sort_descending("name")
            .tail(3)
            .truncate(2)
            .reverse()
            .unique("name")
            .sanitize("genre")
        )
        assert Builder(options).render() == chained.render()

    def test_keyword_arguments(self):
        assert Builder(table="music", limit=5).render() == "select * from music limit 5"

    def test_keyword_arguments_override_options(self):
        base = Builder({"table": "music", "limit": 5}, limit=10)
        assert base.query.limit == 10

    def test_options_model(self):
        options = BuilderOptions(table="music", uses=[Source(locator="http://host/a.xml", alias="a")])
        assert Builder(options).render() == "use http://host/a.xml as a; select * from music"

    def test_options_model_with_overrides(self):
        options = BuilderOptions(table="music", limit=5)
        assert Builder(options, table="artists").render() == "select * from artists limit 5"

    def test_where_alias(self):
        assert Builder(table="music", where="genre = 'jazz'").query.conditions == ["genre = 'jazz'"]

    def test_nested_builder_in_options(self):
        inner = Builder().table("users").select("guid")
        base = Builder(table="actions", conditions={"guid": inner})
        assert base.render() == "select * from actions where guid in (select guid from users)"

    def test_remote_limit_without_offset(self):
        assert Builder(table="tablename", remote_limit=5).render() == "select * from tablename(5)"

    def test_remote_offset_without_limit_not_rendered(self):
        base = Builder(table="tablename", remote_offset=10)
        assert base.query.remote_offset == 10
        assert base.render() == "select * from tablename"

    def test_sanitize_true(self):
        assert Builder(table="t", sanitize=True).render() == "select * from t | sanitize()"

    def test_unknown_keys_ignored(self):
        assert Builder(table="music", colour="blue").render() == "select * from music"

    def test_invalid_options_raise(self):
        with pytest.raises(YqlQueryError) as exc_info:
            Builder(table="music", uses=["not-a-pair"])
        assert exc_info.value.error_code == ErrorCode.VALIDATION_ERROR
        assert exc_info.value.cause is not None


class TestFromOptions:
    """Test Builder.from_options."""

    def test_from_mapping(self):
        assert Builder.from_options({"table": "music"}).render() == "select * from music"

    def test_rejects_non_mapping(self):
        with pytest.raises(YqlQueryError, match="must be a mapping"):
            Builder.from_options(["table", "music"])
