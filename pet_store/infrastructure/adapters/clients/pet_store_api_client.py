from typing import Any, Dict, Mapping, Optional

import httpx

from pet_store.applications.interfaces.dtos.pet import PetListWithCounts, PetPublic, PetSchema
from pet_store.infrastructure.config.settings import ClientSettings

PET_API_V1_PATH = "/api/v1/pet"


def encode_list_params(
    filters: Optional[Mapping[str, Mapping[str, Any]]] = None,
    offset: Optional[int] = None,
    limit: Optional[int] = None,
    sort: Optional[str] = None,
) -> Dict[str, Any]:
    """Flatten ``{"age": {"gte": 5}}`` into ``{"age[gte]": 5}`` plus the paging params."""
    params: Dict[str, Any] = {}
    for field, constraints in (filters or {}).items():
        for op, value in constraints.items():
            params[f"{field}[{op}]"] = value
    if offset is not None:
        params["offset"] = offset
    if limit is not None:
        params["limit"] = limit
    if sort:
        params["sort"] = sort
    return params


class PetStoreApiClient:
    """Async client for the pet list and create endpoints."""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    @classmethod
    def from_settings(cls, settings: Optional[ClientSettings] = None) -> "PetStoreApiClient":
        settings = settings or ClientSettings()
        return cls(httpx.AsyncClient(base_url=settings.base_url, timeout=settings.timeout))

    async def __aenter__(self) -> "PetStoreApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def list_pets(
        self,
        filters: Optional[Mapping[str, Mapping[str, Any]]] = None,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> PetListWithCounts:
        response = await self._client.get(PET_API_V1_PATH, params=encode_list_params(filters, offset, limit, sort))
        response.raise_for_status()
        return PetListWithCounts.model_validate(response.json())

    async def create_pet(self, pet: PetSchema) -> PetPublic:
        response = await self._client.post(PET_API_V1_PATH, json=pet.model_dump(mode="json"))
        response.raise_for_status()
        return PetPublic.model_validate(response.json())
