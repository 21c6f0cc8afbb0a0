"""Routes serving member profiles through the user directory."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from chapterhub.domain.entities import User
from chapterhub.domain.exceptions import RecordConflictError, RecordNotFoundError
from chapterhub.infrastructure.user_directory import UserDirectory
from chapterhub.interfaces.api.dependencies import get_user_directory
from chapterhub.interfaces.api.schemas import (
    UserCreate,
    UserFullNameRead,
    UserRead,
    UserUpdate,
)

router = APIRouter(prefix="/users", tags=["users"])


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(
    user_in: UserCreate,
    directory: UserDirectory = Depends(get_user_directory),
):
    """Create the profile of a member who just signed up."""

    user = User(
        **user_in.model_dump(),
        created_at=None,
        last_login_at=None,
    )
    try:
        created = directory.create_user(user)
    except RecordConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return _to_read_model(created)


@router.get("/", response_model=list[UserRead])
def list_users(directory: UserDirectory = Depends(get_user_directory)):
    """Return every profile currently held by the directory."""

    return [_to_read_model(user) for user in directory.list_cached_users()]


@router.get("/{user_id}", response_model=UserRead)
def read_user(user_id: str, directory: UserDirectory = Depends(get_user_directory)):
    user = directory.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return _to_read_model(user)


@router.patch("/{user_id}", response_model=UserRead)
def update_user(
    user_id: str,
    user_in: UserUpdate,
    directory: UserDirectory = Depends(get_user_directory),
):
    try:
        user = directory.update_user(user_id, user_in.model_dump(exclude_unset=True))
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(user)


@router.get("/{user_id}/full-name", response_model=UserFullNameRead)
def read_user_full_name(
    user_id: str, directory: UserDirectory = Depends(get_user_directory)
):
    """Return the display name of a cached user, or ``Unknown User``."""

    return UserFullNameRead(id=user_id, full_name=directory.get_user_full_name(user_id))
