import asyncio

from pet_store.applications.interfaces.dtos.filter_page import PetListQuery
from pet_store.applications.interfaces.dtos.pet import PetListWithCounts
from pet_store.applications.services.pet_dto_mapper import PetDtoMapper
from pet_store.domain.ports.repositories.pet_repository import PetRepository
from pet_store.domain.ports.services.logger import LoggerPort
from pet_store.domain.services.query_resolver import resolve_query
from pet_store.domain.services.result_ordering import suppress_timestamp_ordering


class ListPetsUseCase:
    """Filtered, paginated and counted listing of pets.

    The total count, the filtered count and the page are fetched concurrently;
    a failure in any of them fails the whole call. When the caller sorts by
    ``createdAt`` or ``updatedAt`` the page is shuffled before it is returned.
    """

    def __init__(self, pet_repository: PetRepository, logger: LoggerPort):
        self.pet_repository = pet_repository
        self.logger = logger

    async def execute(self, list_query: PetListQuery) -> PetListWithCounts:
        query = resolve_query(
            list_query.filters,
            offset=list_query.offset,
            limit=list_query.limit,
            sort=list_query.sort,
        )
        self.logger.debug(
            f"Listing pets: filters={[field.value for field, _ in query.filters.fields()]} "
            f"offset={query.page.offset} limit={query.page.limit} sort={query.sort}"
        )

        total_count, filtered_count, pets = await asyncio.gather(
            self.pet_repository.count_all(),
            self.pet_repository.count(query.filters),
            self.pet_repository.find(
                query.filters,
                offset=query.page.offset,
                limit=query.page.limit,
                sort=query.sort,
            ),
        )

        data = [PetDtoMapper.to_public(pet) for pet in pets]
        suppress_timestamp_ordering(data, query.timestamp_sort_requested)

        self.logger.info(f"Listed {len(data)} pets ({filtered_count} matching of {total_count})")
        return PetListWithCounts(total_count=total_count, filtered_count=filtered_count, data=data)
