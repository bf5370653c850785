"""Statement state.

A :class:`Query` holds every configurable aspect of a statement and renders
itself on demand. It is pure data: builders mutate it, ``render()`` reads it.
"""

import re
from typing import List, Optional, Union

from pydantic import Field

from yql_query.statement.clauses import (
    render_conditions,
    render_filters,
    render_limit_offset,
    render_select,
    render_uses,
)
from yql_query.statement.types import Count, Sanitize, Source
from yql_query.types.base import YqlBaseModel


_SPACE_RUN = re.compile(r" {2,}")


class Query(YqlBaseModel):
    """Mutable statement state rendered into query text.

    Attributes:
        table: Primary data source, rendered after ``from``
        select: Projection; None renders ``*``, a string renders verbatim,
            a list renders comma separated
        uses: Source declarations rendered before the select clause
        conditions: Condition strings combined with ``and``
        sort: Column for the sort filter
        sort_descending: Sort direction, only rendered when ``sort`` is set
        limit: Local row limit
        offset: Local row offset
        remote_limit: Row limit applied when fetching the remote source
        remote_offset: Row offset applied when fetching the remote source
        tail: Keep only the last N rows
        truncate: Keep only the first N rows
        reverse: Reverse row order
        unique: Column used to drop duplicate rows
        sanitize: Sanitize filter state
    """
    table: Optional[str] = Field(default=None)
    select: Optional[Union[str, List[str]]] = Field(default=None)  # None = select *
    uses: List[Source] = Field(default_factory=list)
    conditions: List[str] = Field(default_factory=list)

    sort: Optional[str] = Field(default=None)
    sort_descending: bool = Field(default=False)

    limit: Optional[Count] = Field(default=None)
    offset: Optional[Count] = Field(default=None)
    remote_limit: Optional[Count] = Field(default=None)
    remote_offset: Optional[Count] = Field(default=None)

    tail: Optional[Count] = Field(default=None)
    truncate: Optional[Count] = Field(default=None)
    reverse: bool = Field(default=False)
    unique: Optional[str] = Field(default=None)
    sanitize: Sanitize = Field(default_factory=Sanitize)

    def render(self) -> str:
        """Render the statement from the current state.

        Clause groups are emitted in a fixed order (sources, selection,
        conditions, pagination, filters) regardless of how the state was
        assembled. Calling this repeatedly without mutation yields the same
        string.
        """
        clauses = [
            render_uses(self),
            render_select(self),
            render_conditions(self),
            render_limit_offset(self),
            render_filters(self),
        ]
        return _SPACE_RUN.sub(" ", " ".join(clauses)).strip()

    def __str__(self) -> str:
        return self.render()
