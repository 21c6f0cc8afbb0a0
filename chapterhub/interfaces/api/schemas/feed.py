"""Pydantic models describing feed items."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from chapterhub.domain.entities import Channel, FeedItemKind, TaskStatus


class FeedItemBaseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    author_id: str
    title: str
    description: str
    channel: Channel
    created_at: datetime
    updated_at: datetime


class AnnouncementRead(FeedItemBaseRead):
    kind: Literal[FeedItemKind.ANNOUNCEMENT] = FeedItemKind.ANNOUNCEMENT


class EventRead(FeedItemBaseRead):
    kind: Literal[FeedItemKind.EVENT] = FeedItemKind.EVENT
    start_date: datetime
    end_date: datetime
    location: str | None = None
    required_members: int | None = None
    assigned_members: list[str] = Field(default_factory=list)


class TaskRead(FeedItemBaseRead):
    kind: Literal[FeedItemKind.TASK] = FeedItemKind.TASK
    deadline: datetime | None = None
    status: TaskStatus
    assigned_members: list[str] = Field(default_factory=list)


FeedItemRead = Annotated[
    Union[AnnouncementRead, EventRead, TaskRead], Field(discriminator="kind")
]


class FeedItemCreateBase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    author_id: str = Field(..., min_length=1, max_length=128)
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    channel: Channel = Channel.GENERAL


class AnnouncementCreate(FeedItemCreateBase):
    pass


class EventCreate(FeedItemCreateBase):
    start_date: datetime
    end_date: datetime
    location: str | None = Field(default=None, max_length=255)
    required_members: int | None = Field(default=None, ge=0)
    assigned_members: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_dates(self) -> "EventCreate":
        if self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self


class TaskCreate(FeedItemCreateBase):
    deadline: datetime | None = None
    status: TaskStatus = TaskStatus.PENDING
    assigned_members: list[str] = Field(default_factory=list)


class FeedItemUpdate(BaseModel):
    """Partial update; fields that do not apply to the item kind are rejected."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    channel: Channel | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    location: str | None = Field(default=None, max_length=255)
    required_members: int | None = Field(default=None, ge=0)
    assigned_members: list[str] | None = None
    deadline: datetime | None = None
    status: TaskStatus | None = None


class ItemCreatedResponse(BaseModel):
    id: str
