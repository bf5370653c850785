"""Fluent statement builder.

:class:`Builder` wraps a :class:`~yql_query.statement.Query` and exposes one
chainable method per configurable aspect of the statement. Setters store what
they are given; interpretation is left to rendering.
"""

from collections.abc import Mapping
from typing import Any, Optional, Sequence, Union

from pydantic import ValidationError

from yql_query.builder.conditions import normalize_conditions
from yql_query.builder.options import BuilderOptions
from yql_query.builder.values import as_count, as_projection, as_text
from yql_query.common.exceptions import validation_error
from yql_query.logging import get_logger
from yql_query.settings import get_settings
from yql_query.statement import Count, Query, Sanitize, Source

logger = get_logger(__name__)


class Builder:
    """Fluent builder for query statements.

    Every setter mutates the owned :class:`Query` and returns the builder, so
    calls chain. The rendered statement is produced on demand by
    :meth:`render` and reflects the state at the time of the call.

    Example:
        >>> guid_query = Builder().table("users").select("guid").where("role = 'admin'")
        >>> Builder().table("actions").where({"guid": guid_query}).render()
        "select * from actions where guid in (select guid from users where role = 'admin')"
    """

    def __init__(
        self,
        options: Optional[Union[BuilderOptions, Mapping]] = None,
        **kwargs: Any
    ):
        """Create a builder, optionally applying an initial configuration.

        Args:
            options: Configuration bundle, as BuilderOptions or a mapping
                with the same keys
            **kwargs: Configuration keys merged over ``options``

        Raises:
            YqlQueryError: If the configuration bundle cannot be parsed
        """
        self.query = Query()
        if options is None and not kwargs:
            return
        self._options(options, kwargs).apply_to(self)

    @classmethod
    def from_options(cls, options: Mapping) -> "Builder":
        """Create a builder from a plain configuration mapping."""
        if not isinstance(options, Mapping):
            raise validation_error(
                "Builder options must be a mapping",
                field="options",
                value=type(options).__name__,
            )
        return cls(options)

    @staticmethod
    def _options(options: Optional[Union[BuilderOptions, Mapping]], overrides: Mapping) -> BuilderOptions:
        if isinstance(options, BuilderOptions) and not overrides:
            return options
        if isinstance(options, BuilderOptions):
            data = {**options.model_dump(exclude_unset=True), **overrides}
        else:
            data = {**(options or {}), **overrides}
        try:
            return BuilderOptions.model_validate(data)
        except ValidationError as e:
            raise validation_error(
                f"Invalid builder options: {e.error_count()} validation error(s)",
                field="options",
                cause=e,
            ) from e

    def table(self, table: Any) -> "Builder":
        """Set the table the statement selects from."""
        self.query.table = as_text(table)
        return self

    def limit(self, limit: Count) -> "Builder":
        """Set the local row limit.

        The limit may be passed as a number or a string; it is rendered as
        given.
        """
        self.query.limit = as_count(limit)
        return self

    def offset(self, offset: Count) -> "Builder":
        """Set the local row offset, as a number or a string."""
        self.query.offset = as_count(offset)
        return self

    def remote(self, remote_limit: Count, remote_offset: Count = 0) -> "Builder":
        """Set pagination applied when the remote source is fetched.

        Renders as ``table(<offset>,<limit>)`` for a positive offset and as
        ``table(<limit>)`` otherwise.

        Args:
            remote_limit: Number of rows to fetch from the remote source
            remote_offset: Rows to skip at the remote source

        Returns:
            The builder
        """
        self.query.remote_limit = as_count(remote_limit)
        self.query.remote_offset = as_count(remote_offset)
        return self

    def select(self, select: Union[None, str, Sequence[Any]]) -> "Builder":
        """Set the projection.

        ``None`` selects every column; non-string columns are stored as text.

        Example:
            >>> Builder().table("people").select(["name", "age"]).render()
            'select name, age from people'
        """
        self.query.select = as_projection(select)
        return self

    def use(self, locator: Any, alias: Any) -> "Builder":
        """Declare an additional data source.

        Sources accumulate; each is rendered as ``use <locator> as <alias>;``
        ahead of the select clause.

        Example:
            >>> Builder().table("tablename").use("http://host/table.xml", "t").render()
            'use http://host/table.xml as t; select * from tablename'
        """
        self.query.uses.append(Source(locator=as_text(locator) or "", alias=as_text(alias) or ""))
        return self

    def conditions(self, conditions: Any) -> "Builder":
        """Add filter conditions; conditions are combined with ``and``.

        Accepts a condition string, a list or tuple of condition strings, or
        a mapping of column to value. A mapping value that can render itself,
        such as another builder, becomes a sub-select using ``in``.

        Unsupported input is ignored with a warning, or raises when the
        ``strict_conditions`` setting is enabled.

        Example:
            >>> Builder().table("music").conditions({"genre": "jazz"}).render()
            "select * from music where genre = 'jazz'"
        """
        strict = get_settings().strict_conditions
        self.query.conditions.extend(normalize_conditions(conditions, strict=strict))
        return self

    where = conditions

    def sort(self, sort: Any) -> "Builder":
        """Sort ascending by a column."""
        self.query.sort = as_text(sort)
        self.query.sort_descending = False
        return self

    def sort_descending(self, sort: Any) -> "Builder":
        """Sort descending by a column."""
        self.query.sort = as_text(sort)
        self.query.sort_descending = True
        return self

    def tail(self, tail: Count) -> "Builder":
        """Keep only the last N rows."""
        self.query.tail = as_count(tail)
        return self

    def truncate(self, truncate: Count) -> "Builder":
        """Keep only the first N rows.

        Example:
            >>> Builder().table("tablename").truncate(5).render()
            'select * from tablename | truncate(count=5)'
        """
        self.query.truncate = as_count(truncate)
        return self

    def reverse(self) -> "Builder":
        self.query.reverse = True
        return self

    def unique(self, unique: Any) -> "Builder":
        """Drop rows with a duplicate value in a column."""
        self.query.unique = as_text(unique)
        return self

    def sanitize(self, sanitize: Any = True) -> "Builder":
        """Sanitize every field (``True``) or a single named field.

        Passing ``False`` removes the sanitize filter.
        """
        self.query.sanitize = Sanitize.from_value(sanitize)
        return self

    def render(self) -> str:
        """Render the statement from the current state."""
        statement = self.query.render()
        if get_settings().log_rendered_statements:
            logger.debug("Rendered statement", extra={"statement": statement})
        return statement

    to_query = render

    def reset(self) -> "Builder":
        """Discard all configuration; the builder itself is kept."""
        self.query = Query()
        return self

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.query.render()!r})"
