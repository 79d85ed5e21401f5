import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from sqlalchemy import text

from app.api.errors import register_exception_handlers
from app.api.routes import github, health
from app.config import get_settings
from app.database import SessionLocal, engine
from app.services.github_client import GitHubSearchClient
from app.services.schema import ensure_schema

SERVICE_NAME = "github-repository-finder"
SERVICE_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    ensure_schema(engine)
    with SessionLocal() as db:
        db.execute(text("SELECT 1"))
    app.state.github_client = GitHubSearchClient.from_settings(settings)
    try:
        yield
    finally:
        app.state.github_client.close()


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="GitHub Repository Finder",
        version=SERVICE_VERSION,
        description="Searches GitHub repositories, stores them, and serves filtered views.",
        lifespan=lifespan,
    )
    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(github.router)

    @app.get("/meta")
    def meta() -> dict:
        return {
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "timestamp": datetime.now(UTC).isoformat(),
        }

    return app


app = create_app()
