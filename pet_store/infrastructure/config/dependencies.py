from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pet_store.domain.ports.repositories.pet_repository import PetRepository
from pet_store.domain.ports.services.logger import LoggerPort
from pet_store.infrastructure.adapters.repositories.sqlalchemy_pet_repository import SQLAlchemyPetRepository
from pet_store.infrastructure.config.settings import Settings
from pet_store.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from pet_store.infrastructure.persistence.database import get_session_factory


def get_logger() -> LoggerPort:
    return StdLoggerAdapter(__name__)


def get_settings() -> Settings:
    return Settings()


def get_pet_repository(
    session_factory: Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)],
) -> PetRepository:
    return SQLAlchemyPetRepository(session_factory)
