"""Fluent builders for query statements.

Architecture:
    - builder.py: Builder, the chainable facade over a Query
    - conditions.py: normalization of condition input shapes
    - options.py: BuilderOptions, the construction-time configuration bundle

Example:
    >>> from yql_query.builder import Builder
    >>> Builder().table("music.artists").select(["name", "genre"]).limit(5).render()
    'select name, genre from music.artists limit 5'
"""

from yql_query.builder.builder import Builder
from yql_query.builder.conditions import Renderable, normalize_conditions
from yql_query.builder.options import BuilderOptions

__all__ = [
    "Builder",
    "BuilderOptions",
    "Renderable",
    "normalize_conditions",
]
