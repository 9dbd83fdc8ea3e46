"""PredictStore - HTTP application entry point.

The prediction store is built in the lifespan hook. Bad credentials abort
startup, so the application never serves requests without a working store.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI

from predictstore.core.config import get_settings
from predictstore.core.container import create_prediction_store
from predictstore.core.logging_config import setup_logging
from predictstore.version import get_version

if TYPE_CHECKING:
    from predictstore.ports.storage import PredictionStoragePort

logger = logging.getLogger(__name__)


def _make_lifespan(store: PredictionStoragePort | None):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Build the store on startup and release it on shutdown."""
        if store is not None:
            app.state.store = store
        else:
            settings = get_settings()
            setup_logging(settings)
            try:
                app.state.store = create_prediction_store(settings)
            except Exception:
                logger.exception("Prediction store initialization failed")
                raise

        logger.info("PredictStore started")

        yield

        logger.info("Shutting down PredictStore...")
        await app.state.store.close()
        app.state.store = None

    return lifespan


def create_app(store: PredictionStoragePort | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        store: Pre-built store to serve; when omitted, one is constructed from
            settings during startup
    """
    app = FastAPI(
        title="PredictStore",
        description="Firestore-backed prediction document store",
        version=get_version(),
        lifespan=_make_lifespan(store),
    )

    from predictstore.api.v1.router import api_router  # noqa: PLC0415

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Basic health check endpoint."""
        return {"status": "healthy", "version": get_version()}

    return app


def run() -> None:
    """Serve the application with uvicorn using configured host and port."""
    import uvicorn  # noqa: PLC0415

    settings = get_settings()
    setup_logging(settings)
    logger.info("Starting PredictStore on %s:%s", settings.host, settings.port)
    uvicorn.run(create_app(), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
