import uuid
from http import HTTPStatus
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from pet_store.applications.interfaces.dtos.filter_page import PetListQuery
from pet_store.applications.interfaces.dtos.pet import (
    PetListWithCounts,
    PetPublic,
    PetSchema,
    PetUpdateSchema,
)
from pet_store.applications.use_cases.pet.create_pet import CreatePetUseCase
from pet_store.applications.use_cases.pet.delete_pet import DeletePetUseCase
from pet_store.applications.use_cases.pet.list_pets import ListPetsUseCase
from pet_store.applications.use_cases.pet.update_pet import UpdatePetUseCase
from pet_store.domain.exceptions import NotFoundError
from pet_store.domain.ports.repositories.pet_repository import PetRepository
from pet_store.domain.ports.services.logger import LoggerPort
from pet_store.infrastructure.config.dependencies import get_logger, get_pet_repository

router = APIRouter(prefix="/api/v1/pet", tags=["pets"])

PetRepositoryDep = Annotated[PetRepository, Depends(get_pet_repository)]
LoggerDep = Annotated[LoggerPort, Depends(get_logger)]


def get_pet_list_query(request: Request) -> PetListQuery:
    # bracket params such as age[gte]=5 cannot be declared as regular query parameters
    return PetListQuery.from_query_params(request.query_params.multi_items())


@router.get("", response_model=PetListWithCounts)
async def read_pets(
    list_query: Annotated[PetListQuery, Depends(get_pet_list_query)],
    pet_repository: PetRepositoryDep,
    logger: LoggerDep,
):
    use_case = ListPetsUseCase(pet_repository, logger)
    return await use_case.execute(list_query)


@router.post("", status_code=HTTPStatus.CREATED, response_model=PetPublic)
async def create_pet(pet: PetSchema, pet_repository: PetRepositoryDep):
    use_case = CreatePetUseCase(pet_repository)
    return await use_case.execute(pet)


@router.put("/{pet_id}", response_model=PetPublic)
async def update_pet(pet_id: uuid.UUID, pet: PetUpdateSchema, pet_repository: PetRepositoryDep):
    try:
        use_case = UpdatePetUseCase(pet_repository)
        return await use_case.execute(pet_id, pet)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))


@router.delete("/{pet_id}", response_model=Optional[PetPublic])
async def delete_pet(pet_id: uuid.UUID, pet_repository: PetRepositoryDep):
    use_case = DeletePetUseCase(pet_repository)
    return await use_case.execute(pet_id)
