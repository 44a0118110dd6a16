import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from pet_store.domain.models.pet import Pet
from pet_store.domain.models.pet_query import QueryFilterSet, SortDirective


class PetRepository(ABC):
    @abstractmethod
    async def count_all(self) -> int:
        pass

    @abstractmethod
    async def count(self, filters: QueryFilterSet) -> int:
        pass

    @abstractmethod
    async def find(
        self,
        filters: QueryFilterSet,
        offset: int = 0,
        limit: int = 100,
        sort: Optional[SortDirective] = None,
    ) -> List[Pet]:
        pass

    @abstractmethod
    async def create(self, pet: Pet) -> Pet:
        pass

    @abstractmethod
    async def update(self, pet_id: uuid.UUID, changes: Dict[str, Any]) -> Optional[Pet]:
        """Apply ``changes`` and return the updated pet, or None if ``pet_id`` does not exist."""

    @abstractmethod
    async def delete(self, pet_id: uuid.UUID) -> Optional[Pet]:
        """Remove the pet and return it as it was, or None if ``pet_id`` does not exist."""
