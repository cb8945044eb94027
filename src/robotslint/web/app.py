"""FastAPI application factory for the robotslint HTTP API."""

from __future__ import annotations

from fastapi import FastAPI

from robotslint import __version__
from robotslint.config import RobotsLintConfig


def create_app(
    config: RobotsLintConfig | None = None,
) -> FastAPI:
    """Build and return the FastAPI application."""
    config = config or RobotsLintConfig.load()

    app = FastAPI(
        title="robotslint",
        version=__version__,
        docs_url="/api/docs",
    )

    app.state.config = config

    from robotslint.web.api.validate import router as validate_router

    app.include_router(validate_router, prefix="/api")

    @app.get("/api/health")
    async def health() -> dict:
        return {"status": "ok", "version": __version__}

    return app
