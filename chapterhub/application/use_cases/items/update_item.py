"""Use case for partially updating a feed item."""

from dataclasses import fields, replace
from typing import Any

from sqlalchemy.orm import Session

from chapterhub.domain.entities import FeedItem, FeedItemKind
from chapterhub.domain.exceptions import RecordNotFoundError
from chapterhub.infrastructure.repositories import FeedItemRepository
from chapterhub.utils import now_utc

_IMMUTABLE_FIELDS = frozenset({"id", "kind", "author_id", "created_at", "updated_at"})


def update_item(
    session: Session,
    kind: FeedItemKind | str,
    item_id: str,
    changes: dict[str, Any],
) -> FeedItem:
    """Apply ``changes`` to the item and return the stored result.

    Caches are not invalidated; callers clear them when they need fresh reads.
    """

    item_kind = FeedItemKind.parse(kind)
    forbidden = _IMMUTABLE_FIELDS.intersection(changes)
    if forbidden:
        msg = f"Fields cannot be updated: {', '.join(sorted(forbidden))}"
        raise ValueError(msg)

    repository = FeedItemRepository(session)
    current = repository.get(item_kind, item_id)
    if current is None:
        raise RecordNotFoundError(item_kind.collection, item_id)

    allowed = {field.name for field in fields(current)} - _IMMUTABLE_FIELDS
    unknown = set(changes) - allowed
    if unknown:
        msg = f"Unknown {item_kind.value} fields: {', '.join(sorted(unknown))}"
        raise ValueError(msg)

    updated = replace(current, **changes, updated_at=now_utc())
    return repository.update(updated)
