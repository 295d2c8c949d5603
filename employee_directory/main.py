# main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from . import auth
from .config import Settings, configure_logging, get_settings
from .database import InMemoryDatabase, create_database
from .graphql_api import create_graphql_app

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    db = app.state.db
    logger.info(
        "Directory ready with %d employees and %d users",
        len(db.employees),
        len(db.users),
    )
    yield
    logger.info("Shutting down; in-memory directory discarded")


def create_app(settings: Optional[Settings] = None, db: Optional[InMemoryDatabase] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="Employee Directory API",
        description="GraphQL employee directory with JWT login and admin-only mutations.",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = db or create_database()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("request %s %s", request.method, request.url.path)
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("error handling %s %s", request.method, request.url.path)
            raise
        logger.info(
            "response %s %s status %s",
            request.method,
            request.url.path,
            response.status_code,
        )
        return response

    app.include_router(auth.router)

    graphql_app = create_graphql_app(settings)

    @app.get("/")
    def read_root():
        return {"message": "Welcome to the Employee Directory API."}

    @app.get("/graphql", tags=["GraphQL"])
    async def handle_graphql_explorer(request: Request):
        return await graphql_app.handle_request(request)

    @app.post("/graphql", tags=["GraphQL"])
    async def handle_graphql_query(request: Request):
        return await graphql_app.handle_request(request)

    return app


app = create_app()


def run():
    """Console entry point: serve the API with uvicorn."""
    settings = get_settings()
    configure_logging(settings)
    logger.info("Server running at http://%s:%s/graphql", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
