from typing import Any, Mapping, Optional, Tuple

from pet_store.domain.models.pet_query import (
    MAX_LIMIT,
    PageRequest,
    PetQuery,
    SortableField,
    SortDirection,
    SortDirective,
    SortResolution,
)
from pet_store.domain.services.filter_parser import parse_filter_set

# Accepted as sort tokens but never turned into an ordering
TIMESTAMP_SORT_FIELDS = frozenset({"createdAt", "updatedAt"})

SORTABLE_FIELDS = frozenset(field.value for field in SortableField)


def resolve_limit(limit: Optional[int]) -> int:
    if limit is None or limit < 1:
        return MAX_LIMIT
    return min(limit, MAX_LIMIT)


def resolve_offset(offset: Optional[int]) -> int:
    # negative offsets are passed through as-is
    return offset or 0


def parse_sort_token(token: str) -> Tuple[str, SortDirection]:
    if token.startswith("-"):
        return token[1:], SortDirection.DESC
    return token, SortDirection.ASC


def resolve_sort(token: Optional[str]) -> SortResolution:
    if not token:
        return SortResolution()

    field, direction = parse_sort_token(token)
    if field in TIMESTAMP_SORT_FIELDS:
        return SortResolution(timestamp_sort_requested=True)
    if field in SORTABLE_FIELDS:
        return SortResolution(directive=SortDirective(field=SortableField(field), direction=direction))
    return SortResolution()


def resolve_query(
    filters: Optional[Mapping[str, Mapping[str, Any]]],
    offset: Optional[int] = None,
    limit: Optional[int] = None,
    sort: Optional[str] = None,
) -> PetQuery:
    sort_resolution = resolve_sort(sort)
    return PetQuery(
        filters=parse_filter_set(filters),
        page=PageRequest(offset=resolve_offset(offset), limit=resolve_limit(limit)),
        sort=sort_resolution.directive,
        timestamp_sort_requested=sort_resolution.timestamp_sort_requested,
    )
