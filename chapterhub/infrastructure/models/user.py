"""SQLAlchemy model for the user table."""

from sqlalchemy import Column, Date, DateTime, String, func

from chapterhub.infrastructure.database import Base


class UserModel(Base):
    """Database representation of a chapter member profile."""

    __tablename__ = "user"

    id = Column(String(128), primary_key=True, index=True)
    first_name = Column(String(80), nullable=False)
    last_name = Column(String(80), nullable=False)
    email = Column(String(120), nullable=False, index=True)
    birth_date = Column(Date, nullable=True)
    pledging_session = Column(String(80), nullable=False, default="")
    nickname = Column(String(80), nullable=False, default="")
    status = Column(String(30), nullable=False)
    role = Column(String(30), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    last_login_at = Column(DateTime, nullable=True)
    push_token = Column(String(255), nullable=True)


__all__ = ["UserModel"]
