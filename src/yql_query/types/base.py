"""Base model class for all yql-query models with serialization support."""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict


class YqlBaseModel(BaseModel):
    """Base model for all yql-query models with built-in serialization."""
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        use_enum_values=True,
        validate_assignment=True
    )

    def to_dict(self) -> Dict[str, Any]:
        """Dump to plain JSON-compatible values, dropping unset fields."""
        return self.model_dump(mode="json", exclude_none=True)
