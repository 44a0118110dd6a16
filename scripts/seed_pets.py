import argparse
import asyncio
import random
import sys
from typing import List

import httpx

from pet_store.applications.interfaces.dtos.pet import PetSchema
from pet_store.domain.models.pet import PetType
from pet_store.infrastructure.adapters.clients.pet_store_api_client import PetStoreApiClient
from pet_store.infrastructure.config.settings import ClientSettings

NAMES = ["Biscuit", "Pepper", "Mango", "Ziggy", "Olive", "Rex", "Nugget", "Luna", "Tofu", "Kiwi"]


def random_pets(count: int, rng: random.Random) -> List[PetSchema]:
    return [
        PetSchema(
            name=f"{rng.choice(NAMES)} {i}",
            type=rng.choice(list(PetType)),
            age=rng.randint(0, 20),
            cost=rng.randint(500, 50000),
        )
        for i in range(count)
    ]


async def seed_pets(client: PetStoreApiClient, pets: List[PetSchema]) -> int:
    created = 0
    for pet in pets:
        try:
            await client.create_pet(pet)
            created += 1
        except httpx.HTTPError as e:
            print(f"Failed to insert pet {pet.name}: {e}", file=sys.stderr)
    return created


async def main_async(args: argparse.Namespace) -> None:
    settings = ClientSettings()
    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port

    pets = random_pets(args.count, random.Random(args.seed))
    async with PetStoreApiClient.from_settings(settings) as client:
        created = await seed_pets(client, pets)
        summary = await client.list_pets(limit=1)
    print(f"Created {created} pets, store now holds {summary.total_count}")


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--host", type=str, default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--count", type=int, default=50)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()
    asyncio.run(main_async(args))


if __name__ == "__main__":
    main()
