"""User schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from chapterhub.domain.entities import ExecRole, UserStatus


class UserBase(BaseModel):
    first_name: str = Field(..., max_length=80)
    last_name: str = Field(..., max_length=80)
    email: EmailStr
    birth_date: date | None = None
    pledging_session: str = Field(default="", max_length=80)
    nickname: str = Field(default="", max_length=80)
    status: UserStatus = UserStatus.PLEDGE
    role: ExecRole = ExecRole.NONE


class UserCreate(UserBase):
    id: str = Field(..., min_length=1, max_length=128)
    push_token: str | None = Field(default=None, max_length=255)


class UserUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    first_name: str | None = Field(default=None, max_length=80)
    last_name: str | None = Field(default=None, max_length=80)
    email: EmailStr | None = None
    birth_date: date | None = None
    pledging_session: str | None = Field(default=None, max_length=80)
    nickname: str | None = Field(default=None, max_length=80)
    status: UserStatus | None = None
    role: ExecRole | None = None
    last_login_at: datetime | None = None
    push_token: str | None = Field(default=None, max_length=255)


class UserRead(UserBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    created_at: datetime | None
    last_login_at: datetime | None
    push_token: str | None = None


class UserFullNameRead(BaseModel):
    id: str
    full_name: str
