from enum import Enum
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

# Page size ceiling. Fixed on purpose; callers asking for more get this many.
MAX_LIMIT = 100


class FilterOperator(str, Enum):
    EQ = "eq"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"


class FilterableField(str, Enum):
    AGE = "age"
    COST = "cost"
    TYPE = "type"
    NAME = "name"


class NumericValue(BaseModel):
    """Constraint value that parsed as a number. ``raw`` keeps the request text."""

    model_config = ConfigDict(frozen=True)

    value: Union[int, float]
    raw: str


class TextValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str


FilterValue = Union[NumericValue, TextValue]


class FieldFilter(BaseModel):
    """Comparison constraints on a single field, ANDed together."""

    eq: Optional[FilterValue] = None
    gt: Optional[FilterValue] = None
    gte: Optional[FilterValue] = None
    lt: Optional[FilterValue] = None
    lte: Optional[FilterValue] = None

    def constraints(self) -> List[Tuple[FilterOperator, FilterValue]]:
        result = []
        for operator in FilterOperator:
            value = getattr(self, operator.value)
            if value is not None:
                result.append((operator, value))
        return result

    def is_empty(self) -> bool:
        return not self.constraints()


class QueryFilterSet(BaseModel):
    """Per-field filters. A missing field means no constraint on it."""

    age: Optional[FieldFilter] = None
    cost: Optional[FieldFilter] = None
    type: Optional[FieldFilter] = None
    name: Optional[FieldFilter] = None

    def fields(self) -> List[Tuple[FilterableField, FieldFilter]]:
        result = []
        for field in FilterableField:
            field_filter = getattr(self, field.value)
            if field_filter is not None and not field_filter.is_empty():
                result.append((field, field_filter))
        return result


class SortableField(str, Enum):
    COST = "cost"
    AGE = "age"
    NAME = "name"
    TYPE = "type"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortDirective(BaseModel):
    field: SortableField
    direction: SortDirection = SortDirection.ASC


class SortResolution(BaseModel):
    directive: Optional[SortDirective] = None
    timestamp_sort_requested: bool = False


class PageRequest(BaseModel):
    offset: int = 0
    limit: int = MAX_LIMIT


class PetQuery(BaseModel):
    filters: QueryFilterSet
    page: PageRequest
    sort: Optional[SortDirective] = None
    timestamp_sort_requested: bool = False
