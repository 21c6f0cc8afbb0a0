from fastapi import FastAPI

from .feed import router as feed_router
from .items import router as items_router
from .notifications import router as notifications_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(feed_router)
    app.include_router(items_router)
    app.include_router(users_router)
    app.include_router(notifications_router)
