"""Construction-time configuration for builders."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Tuple, Union

from pydantic import AliasChoices, ConfigDict, Field

from yql_query.builder.values import as_count
from yql_query.statement.types import Source
from yql_query.types.base import YqlBaseModel

if TYPE_CHECKING:
    from yql_query.builder.builder import Builder


class BuilderOptions(YqlBaseModel):
    """Configuration bundle applied once when a builder is created.

    Values are not validated here; the builder setters store them as given.
    Every key maps onto the builder setter of the same name. Applying the
    bundle is equivalent to calling those setters in the order the fields
    are declared. Unknown keys are ignored.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    table: Any = None
    select: Any = None
    uses: List[Union[Source, Tuple[str, str]]] = Field(default_factory=list)
    conditions: Any = Field(
        default=None,
        validation_alias=AliasChoices("conditions", "where"),
    )
    limit: Any = None
    offset: Any = None
    remote_limit: Any = None
    remote_offset: Any = None
    sort: Any = None
    sort_descending: Any = Field(
        default=None,
        description="Column to sort descending; takes precedence over 'sort'",
    )
    tail: Any = None
    truncate: Any = None
    reverse: bool = False
    unique: Any = None
    sanitize: Any = None

    def apply_to(self, builder: "Builder") -> "Builder":
        """Apply every configured option to ``builder`` through its setters."""
        if self.table is not None:
            builder.table(self.table)
        if self.select is not None:
            builder.select(self.select)
        for source in self.uses:
            if isinstance(source, Source):
                builder.use(source.locator, source.alias)
            else:
                builder.use(*source)
        if self.conditions is not None:
            builder.conditions(self.conditions)
        if self.limit is not None:
            builder.limit(self.limit)
        if self.offset is not None:
            builder.offset(self.offset)
        if self.remote_limit is not None:
            builder.remote(self.remote_limit, 0 if self.remote_offset is None else self.remote_offset)
        elif self.remote_offset is not None:
            builder.query.remote_offset = as_count(self.remote_offset)
        if self.sort is not None:
            builder.sort(self.sort)
        if self.sort_descending is not None:
            builder.sort_descending(self.sort_descending)
        if self.tail is not None:
            builder.tail(self.tail)
        if self.truncate is not None:
            builder.truncate(self.truncate)
        if self.reverse:
            builder.reverse()
        if self.unique is not None:
            builder.unique(self.unique)
        if self.sanitize is not None:
            builder.sanitize(self.sanitize)
        return builder
