from yql_query.__version__ import __version__

from yql_query.builder import Builder, BuilderOptions, Renderable
from yql_query.statement import Query, Sanitize, Source
from yql_query.constants import FilterType, SanitizeMode

from yql_query.common.exceptions import YqlQueryError, ErrorCode

from yql_query.logging import setup_logging


__all__ = [
    "__version__",

    "Builder",
    "BuilderOptions",
    "Renderable",

    "Query",
    "Sanitize",
    "Source",

    "FilterType",
    "SanitizeMode",

    # Exceptions (public API)
    "YqlQueryError",
    "ErrorCode",

    "setup_logging",
]
