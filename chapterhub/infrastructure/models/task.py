"""SQLAlchemy models for the tasks collection and its member list."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from chapterhub.infrastructure.database import Base

from .feed_item import FeedItemColumns


class TaskMemberModel(Base):
    """Membership of a user in a task, keeping the assignment order."""

    __tablename__ = "task_member"

    task_id = Column(
        String(32),
        ForeignKey("task.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id = Column(String(128), primary_key=True, index=True)
    position = Column(Integer, nullable=False, default=0)


class TaskModel(FeedItemColumns, Base):
    """Database representation of a task."""

    __tablename__ = "task"

    deadline = Column(DateTime(), nullable=True, index=True)
    status = Column(String(20), nullable=False, default="pending")

    members = relationship(
        TaskMemberModel,
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=TaskMemberModel.position,
        lazy="selectin",
    )


__all__ = ["TaskMemberModel", "TaskModel"]
