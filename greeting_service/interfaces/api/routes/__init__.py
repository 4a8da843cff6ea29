from fastapi import FastAPI

from .greeting import router as greeting_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(greeting_router)
