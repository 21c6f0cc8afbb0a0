"""Tests for updating and deleting feed items."""

from __future__ import annotations

from datetime import timedelta

import pytest

from chapterhub.application.use_cases.items import (
    create_announcement,
    create_event,
    create_task,
    delete_item,
    update_item,
)
from chapterhub.domain.entities import Channel, FeedItemKind, TaskStatus
from chapterhub.domain.exceptions import RecordNotFoundError
from chapterhub.infrastructure.repositories import FeedItemRepository


@pytest.fixture()
def task_id(session, feed_cache, base_time):
    return create_task(
        session,
        feed_cache,
        author_id="author-1",
        title="Plan retreat",
        description="",
        channel=Channel.GENERAL,
        deadline=base_time + timedelta(days=3),
        assigned_members=["member-1", "member-2"],
        created_at=base_time,
    )


def test_update_applies_partial_changes(session, task_id, base_time):
    updated = update_item(
        session,
        "tasks",
        task_id,
        {"status": TaskStatus.IN_PROGRESS, "assigned_members": ["member-2", "member-3"]},
    )

    assert updated.status is TaskStatus.IN_PROGRESS
    assert updated.assigned_members == ["member-2", "member-3"]
    assert updated.title == "Plan retreat"
    assert updated.created_at == base_time
    assert updated.updated_at > base_time

    stored = FeedItemRepository(session).get(FeedItemKind.TASK, task_id)
    assert stored.assigned_members == ["member-2", "member-3"]


def test_update_does_not_touch_the_feed_cache(session, feed_cache, task_id):
    feed_cache.store(object(), ["sentinel"])

    update_item(session, FeedItemKind.TASK, task_id, {"title": "Plan fall retreat"})

    assert feed_cache.is_populated


@pytest.mark.parametrize(
    "changes",
    [
        {"id": "other"},
        {"author_id": "someone-else"},
        {"created_at": None},
        {"start_date": None},
    ],
)
def test_update_rejects_immutable_and_foreign_fields(session, task_id, changes):
    with pytest.raises(ValueError):
        update_item(session, FeedItemKind.TASK, task_id, changes)


def test_update_rejects_inverted_event_dates(session, feed_cache, base_time):
    event_id = create_event(
        session,
        feed_cache,
        author_id="author-1",
        title="Car wash",
        description="",
        channel=Channel.PHILANTHROPY,
        start_date=base_time + timedelta(days=1),
        end_date=base_time + timedelta(days=1, hours=3),
        now=base_time,
    )

    with pytest.raises(ValueError):
        update_item(
            session, FeedItemKind.EVENT, event_id, {"end_date": base_time}
        )


def test_update_of_missing_item_raises_not_found(session):
    with pytest.raises(RecordNotFoundError) as exc_info:
        update_item(session, FeedItemKind.ANNOUNCEMENT, "missing", {"title": "x"})

    assert exc_info.value.collection == "announcements"


def test_unknown_kind_is_rejected(session):
    with pytest.raises(ValueError):
        update_item(session, "polls", "anything", {"title": "x"})


def test_delete_removes_the_item(session, feed_cache, task_id):
    announcement_id = create_announcement(
        session,
        feed_cache,
        author_id="author-1",
        title="Welcome",
        description="",
        channel=Channel.GENERAL,
    )

    delete_item(session, "task", task_id)
    delete_item(session, FeedItemKind.ANNOUNCEMENT, announcement_id)

    repository = FeedItemRepository(session)
    assert repository.get(FeedItemKind.TASK, task_id) is None
    assert repository.get(FeedItemKind.ANNOUNCEMENT, announcement_id) is None


def test_delete_of_missing_item_raises_not_found(session):
    with pytest.raises(RecordNotFoundError):
        delete_item(session, FeedItemKind.EVENT, "missing")
