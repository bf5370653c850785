"""Constants shared across the statement and builder layers."""

from yql_query.constants.core import LOG_LEVELS
from yql_query.constants.query import (
    ALL_COLUMNS,
    COLUMN_JOINER,
    CONDITION_JOINER,
    FILTER_JOINER,
    FilterType,
    SanitizeMode,
)

__all__ = [
    "LOG_LEVELS",
    "ALL_COLUMNS",
    "COLUMN_JOINER",
    "CONDITION_JOINER",
    "FILTER_JOINER",
    "FilterType",
    "SanitizeMode",
]
