"""Application bootstrap: builds the FastAPI app and starts the HTTP server."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from greeting_service.config import Settings, get_settings
from greeting_service.interfaces.api.routes import register_routes
from greeting_service.logging_config import configure_logging

logger = logging.getLogger(__name__)


def _build_lifespan(app_name: str):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Log the application start and stop."""

        logger.info("Starting %s", app_name)
        yield
        logger.info("Stopping %s", app_name)

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings or get_settings()
    app = FastAPI(title=settings.app_name, lifespan=_build_lifespan(settings.app_name))
    register_routes(app)
    return app


app = create_app()


def run() -> None:
    """Start the HTTP server with the configured host, port and log level."""

    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()
