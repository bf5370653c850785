"""Condition input normalization.

Builders accept conditions in several shapes. Everything is normalized to a
list of condition strings here, before it reaches the statement state.
"""

from collections.abc import Mapping
from typing import Any, List, Protocol, runtime_checkable

from yql_query.common.exceptions import invalid_condition_shape_error
from yql_query.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class Renderable(Protocol):
    """Anything that renders to statement text, such as a nested builder."""

    def render(self) -> str:
        ...


def _mapping_condition(key: Any, value: Any) -> str:
    if isinstance(value, Renderable):
        return f"{key} in ({value.render()})"
    if value is None:
        value = ""
    return f"{key} = '{value}'"


def normalize_conditions(value: Any, strict: bool = False) -> List[str]:
    """Normalize condition input to a list of condition strings.

    Args:
        value: A condition string, a list or tuple of condition strings, or a
            mapping of column to value. Mapping values that expose
            ``render()`` become sub-selects (``key in (...)``); any other
            value becomes an equality against the quoted value.
        strict: Raise instead of ignoring unsupported input.

    Returns:
        Condition strings in input order; empty for unsupported input.

    Raises:
        YqlQueryError: If ``strict`` is set and the input shape is unsupported

    Example:
        >>> normalize_conditions({"genre": "jazz"})
        ["genre = 'jazz'"]
    """
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [item if isinstance(item, str) else str(item) for item in value]
    if isinstance(value, Mapping):
        return [_mapping_condition(key, item) for key, item in value.items()]

    if strict:
        raise invalid_condition_shape_error(value)
    logger.warning(
        "Ignoring condition input of unsupported type %s",
        type(value).__name__,
        extra={"value_type": type(value).__name__},
    )
    return []
