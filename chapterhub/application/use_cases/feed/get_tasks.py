"""Use case listing the tasks assigned to a member."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from chapterhub.domain.entities import Task, TaskStatus
from chapterhub.infrastructure.repositories import FeedItemRepository


def get_tasks(
    session: Session, *, user_id: str, status: TaskStatus | str | None = None
) -> Sequence[Task]:
    """Return the tasks assigned to ``user_id`` ordered by deadline."""

    return FeedItemRepository(session).list_tasks_for_member(user_id, status=status)


__all__ = ["get_tasks"]
