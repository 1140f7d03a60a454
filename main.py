from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from choremarket.config import get_settings
from choremarket.infrastructure.database import engine, initialize_database
from choremarket.infrastructure.notifications import shutdown_notification_publisher
from choremarket.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup; drain pending deliveries and release the pool on exit."""

    initialize_database()
    yield
    shutdown_notification_publisher(wait=True)
    engine.dispose()


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""

    app = FastAPI(title="Chore Marketplace", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origin_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
