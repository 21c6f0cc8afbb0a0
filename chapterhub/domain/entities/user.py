"""Domain entity representing a chapter member."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class UserStatus(str, Enum):
    """Membership standing of a user."""

    ACTIF = "Actif"
    ACTIF_SPECIAL = "Actif Special"
    ALUMNUS = "Alumnus"
    PLEDGE = "Pledge"


class ExecRole(str, Enum):
    """Executive role held by a user."""

    NONE = "None"
    ADMINISTRATIVE = "Administrative"
    OPERATIONAL = "Operational"
    GENERAL = "General"


@dataclass
class User:
    """Core attributes describing a chapter member profile."""

    id: str
    first_name: str
    last_name: str
    email: str
    birth_date: date | None
    pledging_session: str
    nickname: str
    status: UserStatus
    role: ExecRole
    created_at: datetime | None
    last_login_at: datetime | None
    push_token: str | None = None

    def __post_init__(self) -> None:
        self.status = UserStatus(self.status)
        self.role = ExecRole(self.role)

    @property
    def full_name(self) -> str:
        """Return the first and last name joined by a space."""

        return f"{self.first_name} {self.last_name}".strip()


__all__ = ["ExecRole", "User", "UserStatus"]
