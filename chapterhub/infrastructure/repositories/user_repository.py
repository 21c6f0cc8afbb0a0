"""Persistence layer for user profiles."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from chapterhub.domain.entities import User
from chapterhub.domain.exceptions import RecordNotFoundError
from chapterhub.infrastructure.database import store_operation
from chapterhub.infrastructure.models import UserModel
from chapterhub.utils import ensure_utc, ensure_utc_naive, now_utc


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    @store_operation("user listing")
    def list_all(self) -> Sequence[User]:
        query = self.session.query(UserModel).order_by(UserModel.created_at.asc())
        return [self._to_entity(model) for model in query.all()]

    @store_operation("user lookup")
    def get(self, user_id: str) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    @store_operation("user create")
    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user, include_creation_fields=True)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @store_operation("user update")
    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if not model:
            raise RecordNotFoundError("users", user.id)
        self._apply_entity_to_model(model, user, include_creation_fields=False)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            birth_date=model.birth_date,
            pledging_session=model.pledging_session,
            nickname=model.nickname,
            status=model.status,
            role=model.role,
            created_at=ensure_utc(model.created_at),
            last_login_at=ensure_utc(model.last_login_at),
            push_token=model.push_token,
        )

    @staticmethod
    def _apply_entity_to_model(
        model: UserModel, user: User, *, include_creation_fields: bool
    ) -> None:
        if include_creation_fields:
            model.id = user.id
            model.created_at = ensure_utc_naive(user.created_at) or ensure_utc_naive(
                now_utc()
            )
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.email = user.email
        model.birth_date = user.birth_date
        model.pledging_session = user.pledging_session
        model.nickname = user.nickname
        model.status = user.status.value
        model.role = user.role.value
        model.last_login_at = ensure_utc_naive(user.last_login_at)
        model.push_token = user.push_token


__all__ = ["UserRepository"]
