import uuid
from typing import Optional

from pet_store.applications.interfaces.dtos.pet import PetPublic
from pet_store.applications.services.pet_dto_mapper import PetDtoMapper
from pet_store.domain.ports.repositories.pet_repository import PetRepository


class DeletePetUseCase:
    def __init__(self, pet_repository: PetRepository):
        self.pet_repository = pet_repository

    async def execute(self, pet_id: uuid.UUID) -> Optional[PetPublic]:
        # unlike update, a missing pet is not an error here
        deleted_pet = await self.pet_repository.delete(pet_id)
        return PetDtoMapper.to_public(deleted_pet) if deleted_pet else None
