"""Statement state and rendering.

Architecture:
    - types.py: Source declarations and the tagged Sanitize state
    - clauses.py: one renderer per clause group
    - query.py: Query, the mutable state that renders itself

Example:
    >>> from yql_query.statement import Query
    >>> query = Query(table="music.artists", conditions=["name = 'Miles Davis'"])
    >>> query.render()
    "select * from music.artists where name = 'Miles Davis'"
"""

from yql_query.statement.query import Query
from yql_query.statement.types import Count, Sanitize, Source

__all__ = [
    "Query",
    "Count",
    "Sanitize",
    "Source",
]
