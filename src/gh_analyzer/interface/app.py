"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from gh_analyzer.interface.dependencies import shutdown, startup
from gh_analyzer.interface.error_handlers import register_error_handlers
from gh_analyzer.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of the shared HTTP client."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="GitHub Repository Analyzer",
        version="1.0.0",
        description=(
            "Takes an owner/name repository reference and returns its "
            "metadata, statistics, language breakdown and the contents of "
            "well-known root files."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
