"""Shared fixtures backed by a throwaway SQLite record store."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from chapterhub.domain.entities import User  # noqa: E402
from chapterhub.domain.exceptions import PushDeliveryFailedError  # noqa: E402
from chapterhub.infrastructure.cache import EventRangeCache, FeedCache  # noqa: E402
from chapterhub.infrastructure.database import (  # noqa: E402
    build_engine,
    build_session_factory,
    initialize_database,
)
from chapterhub.infrastructure.user_directory import UserDirectory  # noqa: E402

BASE_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


class RecordingPushClient:
    """Push client double remembering every message it was asked to send."""

    def __init__(self, failing_tokens: set[str] | None = None) -> None:
        self.failing_tokens = failing_tokens or set()
        self.sent: list[tuple[str, str, str]] = []
        self.closed = False

    def send(self, token: str, title: str, body: str) -> str | None:
        if token in self.failing_tokens:
            raise PushDeliveryFailedError(f"device {token} not registered")
        self.sent.append((token, title, body))
        return f"ticket-{len(self.sent)}"

    def close(self) -> None:
        self.closed = True


def _make_user(
    user_id: str, *, first_name: str = "Ada", last_name: str = "Lovelace", push_token=None
) -> User:
    return User(
        id=user_id,
        first_name=first_name,
        last_name=last_name,
        email=f"{user_id}@example.com",
        birth_date=None,
        pledging_session="Fall 2023",
        nickname="",
        status="Actif",
        role="None",
        created_at=None,
        last_login_at=None,
        push_token=push_token,
    )


@pytest.fixture()
def base_time() -> datetime:
    return BASE_TIME


@pytest.fixture()
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'chapterhub.db'}", timeout=5)
    initialize_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture()
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def feed_cache() -> FeedCache:
    return FeedCache()


@pytest.fixture()
def event_cache() -> EventRangeCache:
    return EventRangeCache()


@pytest.fixture()
def user_directory(session_factory) -> UserDirectory:
    return UserDirectory(session_factory)


@pytest.fixture()
def push_client() -> RecordingPushClient:
    return RecordingPushClient()


@pytest.fixture()
def make_user():
    """Return a factory building unsaved user profiles."""

    return _make_user


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"
