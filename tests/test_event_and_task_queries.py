"""Tests for calendar range reads and assigned task queries."""

from __future__ import annotations

from datetime import timedelta

import pytest

from chapterhub.application.use_cases.feed import get_events, get_tasks
from chapterhub.application.use_cases.items import create_event, create_task
from chapterhub.domain.entities import Channel, TaskStatus


def _create_event(session, feed_cache, base_time, *, title, start_offset, hours=2):
    start = base_time + start_offset
    return create_event(
        session,
        feed_cache,
        author_id="author-1",
        title=title,
        description="",
        channel=Channel.GENERAL,
        start_date=start,
        end_date=start + timedelta(hours=hours),
        now=base_time,
    )


@pytest.fixture()
def calendar(session, feed_cache, base_time):
    return {
        "before": _create_event(
            session, feed_cache, base_time, title="Rush week", start_offset=timedelta(days=-1)
        ),
        "late": _create_event(
            session, feed_cache, base_time, title="Study hall", start_offset=timedelta(days=3)
        ),
        "early": _create_event(
            session, feed_cache, base_time, title="Volunteering", start_offset=timedelta(days=1)
        ),
        "after": _create_event(
            session, feed_cache, base_time, title="Alumni dinner", start_offset=timedelta(days=30)
        ),
    }


def test_events_in_range_are_ordered_by_start(session, event_cache, calendar, base_time):
    events = get_events(
        session, event_cache, start=base_time, end=base_time + timedelta(days=7)
    )

    assert [event.id for event in events] == [calendar["early"], calendar["late"]]


def test_range_bounds_are_inclusive_on_start_date(session, event_cache, calendar, base_time):
    events = get_events(
        session,
        event_cache,
        start=base_time + timedelta(days=1),
        end=base_time + timedelta(days=3),
    )

    assert [event.id for event in events] == [calendar["early"], calendar["late"]]


def test_event_ranges_are_cached_per_exact_bounds(
    session, feed_cache, event_cache, calendar, base_time
):
    start, end = base_time, base_time + timedelta(days=7)
    first = get_events(session, event_cache, start=start, end=end)

    new_id = _create_event(
        session, feed_cache, base_time, title="Game night", start_offset=timedelta(days=2)
    )

    cached = get_events(session, event_cache, start=start, end=end)
    assert cached is first
    assert new_id not in [event.id for event in cached]

    other_range = get_events(session, event_cache, start=start, end=end + timedelta(seconds=1))
    assert new_id in [event.id for event in other_range]
    assert len(event_cache) == 2

    refreshed = get_events(session, event_cache, start=start, end=end, force_refresh=True)
    assert [event.id for event in refreshed] == [calendar["early"], new_id, calendar["late"]]
    assert get_events(session, event_cache, start=start, end=end) is refreshed


def test_empty_range_returns_empty_list(session, event_cache, calendar, base_time):
    start = base_time + timedelta(days=10)

    assert get_events(session, event_cache, start=start, end=start + timedelta(days=1)) == []


def test_tasks_are_filtered_by_member_and_ordered_by_deadline(session, feed_cache, base_time):
    def _task(title, deadline, members, status=TaskStatus.PENDING):
        return create_task(
            session,
            feed_cache,
            author_id="author-1",
            title=title,
            description="",
            channel=Channel.EXECUTIVE,
            deadline=deadline,
            status=status,
            assigned_members=members,
        )

    no_deadline = _task("Update roster", None, ["member-1"])
    later = _task("File taxes", base_time + timedelta(days=10), ["member-1", "member-2"])
    sooner = _task("Order shirts", base_time + timedelta(days=2), ["member-1"])
    _task("Clean house", base_time + timedelta(days=1), ["member-2"])
    done = _task("Pay dues", base_time, ["member-1"], status=TaskStatus.COMPLETED)

    tasks = get_tasks(session, user_id="member-1")
    assert [task.id for task in tasks] == [done, sooner, later, no_deadline]

    pending = get_tasks(session, user_id="member-1", status="pending")
    assert [task.id for task in pending] == [sooner, later, no_deadline]

    assert get_tasks(session, user_id="member-3") == []


def test_task_queries_are_not_cached(session, feed_cache):
    assert get_tasks(session, user_id="member-1") == []

    task_id = create_task(
        session,
        feed_cache,
        author_id="author-1",
        title="Reserve the bus",
        description="",
        channel=Channel.GENERAL,
        assigned_members=["member-1"],
    )

    assert [task.id for task in get_tasks(session, user_id="member-1")] == [task_id]
