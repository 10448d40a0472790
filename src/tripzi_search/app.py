"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from tripzi_search.api import router
from tripzi_search.logging_config import configure_logging


def create_app() -> FastAPI:
    """Create and configure FastAPI application instance."""
    configure_logging()
    app = FastAPI(title="Tripzi Flight Search", version="0.1.0")
    app.include_router(router)

    @app.get("/health", tags=["health"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
