import uuid

from pet_store.applications.interfaces.dtos.pet import PetPublic, PetUpdateSchema
from pet_store.applications.services.pet_dto_mapper import PetDtoMapper
from pet_store.domain.exceptions import NotFoundError
from pet_store.domain.ports.repositories.pet_repository import PetRepository


class UpdatePetUseCase:
    def __init__(self, pet_repository: PetRepository):
        self.pet_repository = pet_repository

    async def execute(self, pet_id: uuid.UUID, pet_data: PetUpdateSchema) -> PetPublic:
        updated_pet = await self.pet_repository.update(pet_id, PetDtoMapper.to_changes(pet_data))
        if updated_pet is None:
            raise NotFoundError(f"Pet with id {pet_id} not found")

        return PetDtoMapper.to_public(updated_pet)
