from pet_store.applications.interfaces.dtos.pet import PetPublic, PetSchema
from pet_store.applications.services.pet_dto_mapper import PetDtoMapper
from pet_store.domain.ports.repositories.pet_repository import PetRepository


class CreatePetUseCase:
    def __init__(self, pet_repository: PetRepository):
        self.pet_repository = pet_repository

    async def execute(self, pet_data: PetSchema) -> PetPublic:
        created_pet = await self.pet_repository.create(PetDtoMapper.to_domain(pet_data))
        if created_pet.id is None:
            raise RuntimeError("Pet creation failed - no ID assigned")

        return PetDtoMapper.to_public(created_pet)
