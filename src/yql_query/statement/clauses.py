"""Clause renderers for statements.

Each function renders one clause group of a :class:`Query` and returns an
empty string when the clause does not apply. None of them raise: absent or
odd configuration degrades to an empty or partial fragment.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from yql_query.constants import (
    ALL_COLUMNS,
    COLUMN_JOINER,
    CONDITION_JOINER,
    FILTER_JOINER,
    FilterType,
    SanitizeMode,
)

if TYPE_CHECKING:
    from yql_query.statement.query import Query


_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


def _as_count(value: Any) -> int:
    """Read the integer prefix of a count, or 0 when there is none."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    match = _LEADING_INTEGER.match(str(value))
    return int(match.group(1)) if match else 0


def render_uses(query: "Query") -> str:
    return " ".join(f"use {source.locator} as {source.alias};" for source in query.uses)


def render_projection(query: "Query") -> str:
    if query.select is None:
        return ALL_COLUMNS
    if isinstance(query.select, str):
        return query.select
    return COLUMN_JOINER.join(query.select)


def render_remote(query: "Query") -> str:
    """Render the remote pagination suffix appended to the table name.

    Both remote fields must be present; an offset alone renders nothing.
    """
    if query.remote_limit is None or query.remote_offset is None:
        return ""
    if _as_count(query.remote_offset) > 0:
        return f"({query.remote_offset},{query.remote_limit})"
    return f"({query.remote_limit})"


def render_select(query: "Query") -> str:
    table = query.table or ""
    return f"select {render_projection(query)} from {table}{render_remote(query)}"


def unique_conditions(query: "Query") -> List[str]:
    """Conditions with duplicates removed, keeping first-seen order."""
    return list(dict.fromkeys(query.conditions))


def render_conditions(query: "Query") -> str:
    conditions = unique_conditions(query)
    if not conditions:
        return ""
    return f"where {CONDITION_JOINER.join(conditions)}"


def render_limit_offset(query: "Query") -> str:
    fragments = []
    if query.limit is not None:
        fragments.append(f"limit {query.limit}")
    if query.offset is not None:
        fragments.append(f"offset {query.offset}")
    return " ".join(fragments)


def _sort_filter(query: "Query") -> Optional[str]:
    if query.sort is None:
        return None
    if query.sort_descending:
        return f"sort(field='{query.sort}', descending='true')"
    return f"sort(field='{query.sort}')"


def _tail_filter(query: "Query") -> Optional[str]:
    return f"tail(count={query.tail})" if query.tail is not None else None


def _truncate_filter(query: "Query") -> Optional[str]:
    return f"truncate(count={query.truncate})" if query.truncate is not None else None


def _reverse_filter(query: "Query") -> Optional[str]:
    return "reverse()" if query.reverse else None


def _unique_filter(query: "Query") -> Optional[str]:
    return f"unique(field='{query.unique}')" if query.unique is not None else None


def _sanitize_filter(query: "Query") -> Optional[str]:
    if query.sanitize.mode == SanitizeMode.ALL:
        return "sanitize()"
    if query.sanitize.mode == SanitizeMode.FIELD:
        return f"sanitize(field='{query.sanitize.field}')"
    return None


# Iterated in FilterType member order
_FILTER_RENDERERS: Dict[FilterType, Callable[["Query"], Optional[str]]] = {
    FilterType.SORT: _sort_filter,
    FilterType.TAIL: _tail_filter,
    FilterType.TRUNCATE: _truncate_filter,
    FilterType.REVERSE: _reverse_filter,
    FilterType.UNIQUE: _unique_filter,
    FilterType.SANITIZE: _sanitize_filter,
}


def active_filters(query: "Query") -> List[str]:
    """Rendered post-processing filters in their fixed order."""
    rendered = (_FILTER_RENDERERS[filter_type](query) for filter_type in FilterType)
    return [fragment for fragment in rendered if fragment]


def render_filters(query: "Query") -> str:
    filters = active_filters(query)
    if not filters:
        return ""
    return f"| {FILTER_JOINER.join(filters)}"
