"""Columns shared by the feed item collections."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, String, Text

from chapterhub.utils import now_utc_naive


def new_record_id() -> str:
    """Return a store-assigned document identifier."""

    return uuid4().hex


class FeedItemColumns:
    """Mixin declaring the columns every feed item table carries."""

    id = Column(String(32), primary_key=True, default=new_record_id)
    author_id = Column(String(128), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    channel = Column(String(30), nullable=False, index=True)
    created_at = Column(DateTime(), nullable=False, default=now_utc_naive, index=True)
    updated_at = Column(
        DateTime(), nullable=False, default=now_utc_naive, onupdate=now_utc_naive
    )


__all__ = ["FeedItemColumns", "new_record_id"]
