"""Use case for deleting a feed item."""

from sqlalchemy.orm import Session

from chapterhub.domain.entities import FeedItemKind
from chapterhub.infrastructure.repositories import FeedItemRepository


def delete_item(session: Session, kind: FeedItemKind | str, item_id: str) -> None:
    """Delete the specified item; callers invalidate the feed cache afterwards."""

    FeedItemRepository(session).delete(FeedItemKind.parse(kind), item_id)
