"""Read-through, process-wide cache of user profiles."""

from __future__ import annotations

import logging
import threading
from dataclasses import fields as dataclass_fields, replace
from typing import Any

from sqlalchemy.orm import Session, sessionmaker

from chapterhub.domain.entities import User
from chapterhub.domain.exceptions import RecordConflictError, RecordNotFoundError
from chapterhub.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)

UNKNOWN_USER_NAME = "Unknown User"

_IMMUTABLE_USER_FIELDS = frozenset({"id", "created_at"})
_USER_FIELDS = frozenset(field.name for field in dataclass_fields(User))


class UserDirectory:
    """Serve user profiles from memory, falling back to the record store.

    The cache is never evicted except by :meth:`clear` or :meth:`initialize`,
    so profiles changed by other processes stay stale, and users created
    elsewhere only appear once :meth:`get_user` reads them through.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._lock = threading.Lock()
        self._users: dict[str, User] = {}

    def initialize(self) -> int:
        """Load every user from the store, replacing the cached profiles."""

        with self._session_factory() as session:
            users = UserRepository(session).list_all()
        with self._lock:
            self._users = {user.id: user for user in users}
        logger.info("User directory initialized with %d users", len(users))
        return len(users)

    def get_user(self, user_id: str) -> User | None:
        with self._lock:
            cached = self._users.get(user_id)
        if cached is not None:
            return cached

        with self._session_factory() as session:
            user = UserRepository(session).get(user_id)
        if user is None:
            return None
        with self._lock:
            return self._users.setdefault(user.id, user)

    def create_user(self, user: User) -> User:
        with self._session_factory() as session:
            repository = UserRepository(session)
            if repository.get(user.id) is not None:
                msg = f"User '{user.id}' already exists"
                raise RecordConflictError(msg)
            created = repository.create(user)
        with self._lock:
            self._users[created.id] = created
        logger.info("Created user %s", created.id)
        return created

    def update_user(self, user_id: str, fields: dict[str, Any]) -> User:
        """Apply ``fields`` in the store, then merge them into the cached copy."""

        forbidden = _IMMUTABLE_USER_FIELDS.intersection(fields)
        if forbidden:
            msg = f"Fields cannot be updated: {', '.join(sorted(forbidden))}"
            raise ValueError(msg)
        unknown = set(fields) - _USER_FIELDS
        if unknown:
            msg = f"Unknown user fields: {', '.join(sorted(unknown))}"
            raise ValueError(msg)

        with self._session_factory() as session:
            repository = UserRepository(session)
            current = repository.get(user_id)
            if current is None:
                raise RecordNotFoundError("users", user_id)
            updated = repository.update(replace(current, **fields))

        with self._lock:
            cached = self._users.get(user_id)
            if cached is not None:
                self._users[user_id] = replace(cached, **fields)
        return updated

    def get_user_full_name(self, user_id: str) -> str:
        """Return the cached user's full name without reading the store."""

        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            return UNKNOWN_USER_NAME
        return user.full_name

    def list_cached_users(self) -> list[User]:
        with self._lock:
            return list(self._users.values())

    def clear(self) -> None:
        with self._lock:
            self._users.clear()


__all__ = ["UNKNOWN_USER_NAME", "UserDirectory"]
