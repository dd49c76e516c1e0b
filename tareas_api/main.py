"""FastAPI application entrypoint."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from tareas_api.config import get_settings
from tareas_api.api.v1.router import api_router
from tareas_api.core.exceptions import InternalError
from tareas_api.db.mongo import create_client, ensure_indexes

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle: open the MongoDB client unless one was injected."""
    settings = get_settings()
    logger.info("Starting %s (env=%s)", settings.app_name, settings.environment)
    owns_client = getattr(app.state, "mongo_client", None) is None
    if owns_client:
        app.state.mongo_client = create_client(settings)
    ensure_indexes(app.state.mongo_client[settings.mongodb_db])
    yield
    if owns_client:
        app.state.mongo_client.close()
        app.state.mongo_client = None
    logger.info("Shutting down %s", settings.app_name)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid data", "errors": jsonable_encoder(exc.errors())},
    )


async def internal_exception_handler(request: Request, exc: Exception):
    logger.exception("Internal error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(mongo_client: Optional[MongoClient] = None) -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Task CRUD and password authentication over MongoDB",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.mongo_client = mongo_client
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(InternalError, internal_exception_handler)
    app.add_exception_handler(PyMongoError, internal_exception_handler)
    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_app()


def run() -> None:
    configure_logging()
    settings = get_settings()
    uvicorn.run("tareas_api.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
