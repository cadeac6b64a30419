from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from landing.core import config
from landing.database import open_store


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    config.validate_runtime_config()
    with open_store() as store:
        app.state.store = store
        yield


app = FastAPI(lifespan=lifespan)


@app.get('/')
def root():
    return {'status': 'Landing API Running'}
