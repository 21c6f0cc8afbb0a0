"""Database configuration and session management."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from chapterhub.domain.exceptions import RecordConflictError, StoreUnavailableError


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


logger = logging.getLogger(__name__)

_F = TypeVar("_F", bound=Callable[..., Any])


def build_engine(database_url: str, *, timeout: float | None = None) -> Engine:
    """Create an engine for ``database_url`` bounding connection waits by ``timeout``."""

    if database_url.startswith("sqlite"):
        connect_args: dict[str, Any] = {"check_same_thread": False}
        if timeout is not None:
            connect_args["timeout"] = timeout
        return create_engine(database_url, connect_args=connect_args)

    options: dict[str, Any] = {"pool_pre_ping": True}
    if timeout is not None:
        options["pool_timeout"] = timeout
    return create_engine(database_url, **options)


def build_session_factory(bind: Engine) -> sessionmaker[Session]:
    """Return the session factory used by repositories bound to ``bind``."""

    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=bind)


def initialize_database(bind: Engine) -> None:
    """Ensure all ORM models have corresponding database tables."""

    from chapterhub.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=bind, checkfirst=True)


def store_operation(operation: str) -> Callable[[_F], _F]:
    """Translate SQLAlchemy failures raised by a repository method.

    The decorated method must belong to an object exposing ``session``. The
    session is rolled back so it can be reused after the failure.
    """

    def decorator(func: _F) -> _F:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except IntegrityError as exc:
                self.session.rollback()
                msg = f"{operation} conflicts with an existing record"
                raise RecordConflictError(msg) from exc
            except SQLAlchemyError as exc:
                self.session.rollback()
                logger.error("Record store call failed during %s: %s", operation, exc)
                raise StoreUnavailableError(operation, str(exc.__class__.__name__)) from exc

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "initialize_database",
    "store_operation",
]
