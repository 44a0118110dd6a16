from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from pet_store.infrastructure.config.settings import Settings
from pet_store.infrastructure.persistence.models import table_registry


class _EngineStore:
    engine: Optional[AsyncEngine] = None
    session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def set_engine(engine: AsyncEngine) -> None:
    _EngineStore.engine = engine
    _EngineStore.session_factory = async_sessionmaker(engine, expire_on_commit=False)


def get_engine() -> AsyncEngine:
    if _EngineStore.engine is None:
        settings = Settings()
        set_engine(create_async_engine(settings.DATABASE_URL))
    return _EngineStore.engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the current engine.

    Repositories that run statements concurrently open one session per statement from it.
    """
    if _EngineStore.session_factory is None:
        get_engine()
    return _EngineStore.session_factory


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(table_registry.metadata.create_all)


async def dispose_engine() -> None:
    if _EngineStore.engine is not None:
        await _EngineStore.engine.dispose()
        _EngineStore.engine = None
        _EngineStore.session_factory = None
