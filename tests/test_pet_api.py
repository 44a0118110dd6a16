import uuid

import pytest
import pytest_asyncio
from fastapi import status

from factories import pet_factory

from conftest import BaseIntegrationTest

PETS_URL = "/api/v1/pet"


class TestPetAPI(BaseIntegrationTest):
    """Integration tests for pet API endpoints"""

    @pytest_asyncio.fixture
    async def four_pets(self, client):
        rows = [("Tweety", "bird", 2, 1000), ("Tom", "cat", 5, 2000), ("Rex", "dog", 7, 500), ("Iggy", "reptile", 1, 1500)]
        created = []
        for name, pet_type, age, cost in rows:
            response = await client.post(PETS_URL, json=pet_factory.create_pet_data(name=name, type=pet_type, age=age, cost=cost))
            assert response.status_code == status.HTTP_201_CREATED
            created.append(response.json())
        return created

    @pytest.mark.asyncio
    async def test_read_root(self, client):
        response = await client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert "message" in response.json()

    @pytest.mark.asyncio
    async def test_create_pet(self, client):
        response = await client.post(PETS_URL, json=pet_factory.create_pet_data(name="Kiwi", type="bird"))

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["name"] == "Kiwi"
        assert data["type"] == "bird"
        assert {"id", "age", "cost", "createdAt", "updatedAt"} <= set(data)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "Nemo", "type": "fish", "age": 1, "cost": 100},
            {"name": "Rex", "type": "dog", "age": -1, "cost": 100},
            {"name": "Rex", "type": "dog"},
        ],
    )
    async def test_create_pet_invalid_payload(self, client, payload):
        response = await client.post(PETS_URL, json=payload)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio
    async def test_list_pets(self, client, four_pets):
        response = await client.get(PETS_URL)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["totalCount"] == 4
        assert data["filteredCount"] == 4
        assert len(data["data"]) == 4

    @pytest.mark.asyncio
    async def test_old_cats_with_zero_limit(self, client, four_pets):
        response = await client.get(PETS_URL, params={"type[eq]": "cat", "age[gte]": 5, "limit": 0})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["totalCount"] == 4
        assert data["filteredCount"] == 1
        assert [pet["name"] for pet in data["data"]] == ["Tom"]

    @pytest.mark.asyncio
    async def test_filtered_count_ignores_limit(self, client, four_pets):
        response = await client.get(PETS_URL, params={"cost[lt]": 9000, "limit": 1, "sort": "-cost"})

        data = response.json()
        assert data["filteredCount"] == 4
        assert [pet["cost"] for pet in data["data"]] == [2000]

    @pytest.mark.asyncio
    async def test_sort_and_offset(self, client, four_pets):
        response = await client.get(PETS_URL, params={"sort": "age", "offset": 1, "limit": 2})

        assert [pet["age"] for pet in response.json()["data"]] == [2, 5]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("sort", ["-updatedAt", "updatedAt", "createdAt", "foo"])
    async def test_unapplied_sorts_return_everything(self, client, four_pets, sort):
        response = await client.get(PETS_URL, params={"sort": sort})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["filteredCount"] == 4
        assert sorted(pet["name"] for pet in data["data"]) == ["Iggy", "Rex", "Tom", "Tweety"]

    @pytest.mark.asyncio
    async def test_invalid_paging_values_do_not_fail(self, client, four_pets):
        response = await client.get(PETS_URL, params={"limit": "many", "offset": "x"})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()["data"]) == 4

    @pytest.mark.asyncio
    async def test_update_pet(self, client, four_pets):
        tom = four_pets[1]

        response = await client.put(f"{PETS_URL}/{tom['id']}", json={"age": 6})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == tom["id"]
        assert data["age"] == 6
        assert data["name"] == "Tom"

    @pytest.mark.asyncio
    async def test_update_missing_pet(self, client):
        response = await client.put(f"{PETS_URL}/{uuid.uuid4()}", json={"age": 6})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_pet(self, client, four_pets):
        rex = four_pets[2]

        response = await client.delete(f"{PETS_URL}/{rex['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Rex"
        listing = await client.get(PETS_URL)
        assert listing.json()["totalCount"] == 3

    @pytest.mark.asyncio
    async def test_delete_missing_pet_returns_null(self, client):
        response = await client.delete(f"{PETS_URL}/{uuid.uuid4()}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() is None
