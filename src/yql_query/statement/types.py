"""Value types held by a statement."""

from typing import Any, Optional, Union

from pydantic import Field, model_validator

from yql_query.constants import SanitizeMode
from yql_query.types.base import YqlBaseModel


Count = Union[int, float, str]
"""Row count given as a number or a numeric-looking string, rendered verbatim."""


class Source(YqlBaseModel):
    """A data source declared with ``use <locator> as <alias>;``.

    Attributes:
        locator: URL or name of the source definition
        alias: Name the source is referenced as within the statement
    """
    locator: str
    alias: str


class Sanitize(YqlBaseModel):
    """Tagged sanitize filter state: none, all fields, or one named field."""
    mode: SanitizeMode = Field(default=SanitizeMode.NONE)
    field: Optional[str] = Field(default=None)

    @model_validator(mode='after')
    def validate_field(self):
        """A field name is required in FIELD mode and rejected otherwise."""
        if self.mode == SanitizeMode.FIELD and self.field is None:
            raise ValueError("Sanitize in field mode requires a field name")
        if self.mode != SanitizeMode.FIELD and self.field is not None:
            raise ValueError(f"Sanitize in {self.mode} mode does not take a field name")
        return self

    @classmethod
    def disabled(cls) -> "Sanitize":
        return cls(mode=SanitizeMode.NONE)

    @classmethod
    def all_fields(cls) -> "Sanitize":
        return cls(mode=SanitizeMode.ALL)

    @classmethod
    def for_field(cls, name: str) -> "Sanitize":
        return cls(mode=SanitizeMode.FIELD, field=name)

    @classmethod
    def from_value(cls, value: Any) -> "Sanitize":
        """Map builder input to a sanitize state.

        ``None`` and ``False`` disable the filter, ``True`` sanitizes every
        field and any other value names the single field to sanitize.
        """
        if isinstance(value, Sanitize):
            return value
        if value is None or value is False:
            return cls.disabled()
        if value is True:
            return cls.all_fields()
        return cls.for_field(str(value))

    @property
    def enabled(self) -> bool:
        return self.mode != SanitizeMode.NONE
