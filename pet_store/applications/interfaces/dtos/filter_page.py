import re
from typing import Any, Dict, Iterable, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

_BRACKET_PARAM = re.compile(r"^(?P<field>\w+)\[(?P<operator>\w+)\]$")


class FilterPage(BaseModel):
    """Raw pagination input. Bounds are applied later by the query resolver."""

    offset: Optional[int] = Field(default=None, description="Number of items to skip")
    limit: Optional[int] = Field(default=None, description="Maximum number of items to return, capped at 100")

    @field_validator("offset", "limit", mode="before")
    @classmethod
    def _lenient_int(cls, value: Any) -> Optional[int]:
        # unparseable values count as absent instead of failing the request
        if value is None or value == "":
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None


class PetListQuery(FilterPage):
    filters: Dict[str, Dict[str, str]] = Field(default_factory=dict)
    sort: Optional[str] = Field(default=None, description="Field name, prefixed with '-' for descending")

    @classmethod
    def from_query_params(cls, params: Iterable[Tuple[str, str]]) -> "PetListQuery":
        """Read ``field[operator]=value`` pairs plus offset/limit/sort. Repeated keys keep the last value."""
        filters: Dict[str, Dict[str, str]] = {}
        values: Dict[str, str] = {}
        for key, value in params:
            match = _BRACKET_PARAM.match(key)
            if match:
                filters.setdefault(match.group("field"), {})[match.group("operator")] = value
            elif key in ("offset", "limit", "sort"):
                values[key] = value
        return cls(filters=filters, **values)
