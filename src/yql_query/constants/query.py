"""Query language constants.

This module contains the enums and literal tokens used when rendering
statements. They sit at the bottom of the package so that the statement
and builder layers can share them without circular imports.
"""

from enum import Enum


ALL_COLUMNS = "*"
"""Projection rendered when no columns were selected."""

CONDITION_JOINER = " and "
COLUMN_JOINER = ", "
FILTER_JOINER = " | "


class SanitizeMode(str, Enum):
    """Sanitize filter state.

    The sanitize filter has three distinct states and they must not be
    collapsed into a single optional value:
    - NONE: no sanitize filter is rendered
    - ALL: ``sanitize()`` over every field
    - FIELD: ``sanitize(field='<name>')`` over one field
    """

    NONE = "none"
    ALL = "all"
    FIELD = "field"


class FilterType(str, Enum):
    """Post-processing filters in render order.

    Member order is the order filters appear in a rendered statement,
    independent of the order the builder methods were called in.
    """

    SORT = "sort"
    TAIL = "tail"
    TRUNCATE = "truncate"
    REVERSE = "reverse"
    UNIQUE = "unique"
    SANITIZE = "sanitize"
