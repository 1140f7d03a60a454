from fastapi import FastAPI

from .chores import router as chores_router
from .notifications import router as notifications_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(chores_router)
    app.include_router(notifications_router)
