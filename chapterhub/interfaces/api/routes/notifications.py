"""Endpoint triggering the notification dispatcher on demand."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from chapterhub.application.use_cases.notifications import NotificationDispatcher
from chapterhub.interfaces.api.dependencies import get_dispatcher
from chapterhub.interfaces.api.schemas import SweepReportRead

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.post("/dispatch", response_model=SweepReportRead)
def dispatch_due_notifications(
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
):
    """Run one dispatcher sweep immediately and report what it delivered."""

    return SweepReportRead.model_validate(dispatcher.sweep())
