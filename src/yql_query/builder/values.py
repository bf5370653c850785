"""Normalization of setter input into statement field values.

Setters do not validate what they are given; these helpers only coerce it to
the text or count shape the statement stores, so any scalar is accepted.
"""

from typing import Any, List, Optional, Union

from yql_query.statement.types import Count


def as_text(value: Any) -> Optional[str]:
    """Names are stored as text; None stays unset."""
    return value if value is None or isinstance(value, str) else str(value)


def as_count(value: Any) -> Optional[Count]:
    """Numbers and strings are stored as given, anything else as text."""
    if value is None or isinstance(value, (int, float, str)):
        return value
    return str(value)


def as_projection(value: Any) -> Optional[Union[str, List[str]]]:
    """None selects every column, a list or tuple is kept as columns, anything else is one column."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return [as_text(item) for item in value]
    return str(value)
