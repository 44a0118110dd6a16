import math
from typing import Any, Mapping, Optional

from pet_store.domain.models.pet_query import (
    FieldFilter,
    FilterableField,
    FilterOperator,
    FilterValue,
    NumericValue,
    QueryFilterSet,
    TextValue,
)


def parse_filter_value(raw: Any) -> FilterValue:
    """Type a raw request value: numeric if the whole text is a finite number, text otherwise."""
    if isinstance(raw, (int, float)) and not isinstance(raw, bool) and math.isfinite(raw):
        return NumericValue(value=raw, raw=str(raw))

    raw = str(raw)
    text = raw.strip()
    # int()/float() accept digit separators, query strings should not
    if not text or "_" in text:
        return TextValue(value=raw)

    try:
        return NumericValue(value=int(text), raw=raw)
    except ValueError:
        pass

    try:
        number = float(text)
    except ValueError:
        return TextValue(value=raw)

    if not math.isfinite(number):
        return TextValue(value=raw)
    return NumericValue(value=number, raw=raw)


def parse_field_filter(raw: Optional[Mapping[str, Any]]) -> FieldFilter:
    if not raw:
        return FieldFilter()

    values = {}
    for operator in FilterOperator:
        raw_value = raw.get(operator.value)
        if raw_value is not None:
            values[operator.value] = parse_filter_value(raw_value)
    return FieldFilter(**values)


def parse_filter_set(raw: Optional[Mapping[str, Mapping[str, Any]]]) -> QueryFilterSet:
    """Build the filter set, keeping only filterable fields with at least one constraint."""
    raw = raw or {}
    fields = {}
    for field in FilterableField:
        field_filter = parse_field_filter(raw.get(field.value))
        if not field_filter.is_empty():
            fields[field.value] = field_filter
    return QueryFilterSet(**fields)
