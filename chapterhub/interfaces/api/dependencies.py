"""FastAPI dependency utilities."""

from collections.abc import Generator

from fastapi import Request
from sqlalchemy.orm import Session, sessionmaker

from chapterhub.application.use_cases.notifications import NotificationDispatcher
from chapterhub.config import Settings
from chapterhub.infrastructure.cache import EventRangeCache, FeedCache
from chapterhub.infrastructure.user_directory import UserDirectory


def get_session_factory(request: Request) -> sessionmaker[Session]:
    """Return the session factory bound to the application's record store."""

    return request.app.state.session_factory


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = get_session_factory(request)()
    try:
        yield db
    finally:
        db.close()


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_feed_cache(request: Request) -> FeedCache:
    return request.app.state.feed_cache


def get_event_cache(request: Request) -> EventRangeCache:
    return request.app.state.event_cache


def get_user_directory(request: Request) -> UserDirectory:
    return request.app.state.user_directory


def get_dispatcher(request: Request) -> NotificationDispatcher:
    return request.app.state.dispatcher
