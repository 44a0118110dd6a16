import os
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Settings must be constructible before the app module is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from pet_store.app import app  # noqa: E402
from pet_store.domain.ports.repositories.pet_repository import PetRepository  # noqa: E402
from pet_store.domain.ports.services.logger import LoggerPort  # noqa: E402
from pet_store.infrastructure.persistence.database import get_session_factory  # noqa: E402
from pet_store.infrastructure.persistence.models import table_registry  # noqa: E402


class BaseIntegrationTest:
    """Base class for integration tests with common setup"""

    @pytest_asyncio.fixture
    async def engine(self, tmp_path):
        """File-backed SQLite engine, so concurrent sessions get their own connections"""
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'pets.db'}")

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.create_all)

        yield engine

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.drop_all)
        await engine.dispose()

    @pytest.fixture
    def session_factory(self, engine):
        return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    @pytest_asyncio.fixture
    async def client(self, session_factory):
        """Create test HTTP client with database override"""
        app.dependency_overrides[get_session_factory] = lambda: session_factory

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()


@pytest.fixture
def mock_pet_repository():
    """Mock pet repository for use case testing"""
    return AsyncMock(spec=PetRepository)


@pytest.fixture
def mock_logger():
    return Mock(spec=LoggerPort)
