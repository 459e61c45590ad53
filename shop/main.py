# shop/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from shop.api.routers import graphql_api, health
from shop.data.database import init_db
from shop.utils.settings import DB_CREATE_ALL
from shop.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if DB_CREATE_ALL:
        logger.info("Initializing database...")
        init_db()
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Shop GraphQL API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(health.router)
    app.include_router(graphql_api.router, prefix="/graphql")

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
