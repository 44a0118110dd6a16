from typing import Any, Dict

from pet_store.applications.interfaces.dtos.pet import PetPublic, PetSchema, PetUpdateSchema
from pet_store.domain.models.pet import Pet


class PetDtoMapper:
    """Maps between the pet domain model and its DTOs"""

    @staticmethod
    def to_public(pet: Pet) -> PetPublic:
        if pet.id is None:
            raise RuntimeError("Pet has no id assigned")
        return PetPublic(
            id=pet.id,
            name=pet.name,
            type=pet.type,
            age=pet.age,
            cost=pet.cost,
            created_at=pet.created_at,
            updated_at=pet.updated_at,
        )

    @staticmethod
    def to_domain(pet_data: PetSchema) -> Pet:
        return Pet(name=pet_data.name, type=pet_data.type, age=pet_data.age, cost=pet_data.cost)

    @staticmethod
    def to_changes(pet_data: PetUpdateSchema) -> Dict[str, Any]:
        """Only the fields the caller actually sent"""
        return pet_data.model_dump(exclude_unset=True, exclude_none=True)
