from http import HTTPStatus

from contextlib import asynccontextmanager
from fastapi import FastAPI

from pet_store.applications.interfaces.dtos.message import Message
from pet_store.infrastructure.config.dependencies import get_settings
from pet_store.infrastructure.logging.logger import setup_logging
from pet_store.infrastructure.persistence.database import create_tables, dispose_engine, get_engine
from pet_store.presentation.routers import pets

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine()
    if get_settings().CREATE_TABLES_ON_STARTUP:
        await create_tables(engine)
    try:
        yield
    finally:
        await dispose_engine()


app = FastAPI(lifespan=lifespan)

app.include_router(pets.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Pet store is running"}
