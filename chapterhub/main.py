"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from chapterhub.application.use_cases.notifications import (
    NotificationDispatcher,
    PushSender,
)
from chapterhub.config import Settings, get_settings
from chapterhub.domain.exceptions import (
    RecordConflictError,
    RecordNotFoundError,
    StoreUnavailableError,
)
from chapterhub.infrastructure import database
from chapterhub.infrastructure.cache import EventRangeCache, FeedCache
from chapterhub.infrastructure.notifications import (
    ExpoPushClient,
    start_dispatch_scheduler,
)
from chapterhub.infrastructure.user_directory import UserDirectory
from chapterhub.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the tables, warm the user directory and run the dispatcher."""

    state = app.state
    database.initialize_database(state.engine)
    state.user_directory.initialize()

    scheduler = None
    if state.settings.dispatch_enabled:
        scheduler = start_dispatch_scheduler(
            state.dispatcher,
            interval_seconds=state.settings.dispatch_interval_seconds,
        )
    try:
        yield
    finally:
        if scheduler is not None:
            scheduler.shutdown(wait=False)
        close = getattr(state.push_client, "close", None)
        if close is not None:
            close()
        if state.owns_engine:
            state.engine.dispose()


async def _store_unavailable_handler(request: Request, exc: StoreUnavailableError):
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"detail": str(exc)}
    )


async def _record_not_found_handler(request: Request, exc: RecordNotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def _record_conflict_handler(request: Request, exc: RecordConflictError):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


def create_app(
    settings: Settings | None = None,
    *,
    engine: Engine | None = None,
    push_client: PushSender | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``engine`` and ``push_client`` replace the configured record store and
    Expo client; an engine passed in is left open on shutdown.
    """

    settings = settings or get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())

    owns_engine = engine is None
    if engine is None:
        engine = database.build_engine(
            settings.database_url, timeout=settings.store_timeout_seconds
        )
    session_factory = database.build_session_factory(engine)

    if push_client is None:
        push_client = ExpoPushClient(
            url=settings.expo_push_url,
            access_token=settings.expo_access_token,
            timeout=settings.push_timeout_seconds,
        )
    user_directory = UserDirectory(session_factory)

    app = FastAPI(title="ChapterHub API", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.owns_engine = owns_engine
    app.state.session_factory = session_factory
    app.state.feed_cache = FeedCache(keyed=settings.feed_cache_keyed)
    app.state.event_cache = EventRangeCache()
    app.state.user_directory = user_directory
    app.state.push_client = push_client
    app.state.dispatcher = NotificationDispatcher(
        session_factory,
        user_directory,
        push_client,
        batch_size=settings.dispatch_batch_size,
    )

    app.add_exception_handler(StoreUnavailableError, _store_unavailable_handler)
    app.add_exception_handler(RecordNotFoundError, _record_not_found_handler)
    app.add_exception_handler(RecordConflictError, _record_conflict_handler)

    register_routes(app)
    logger.debug("Application created for %s", engine.url.render_as_string(hide_password=True))
    return app
