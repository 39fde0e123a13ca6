"""Endpoints for reminders, test pushes and the notification history."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from duewise.application.ports import PushSender
from duewise.application.use_cases.notifications import (
    DueReminderSweepError,
    NoPushSubscriptionsError,
    SweepAlreadyRunningError,
    list_notifications as list_notifications_uc,
    mark_notifications_read,
    run_scheduled_due_reminder_sweep,
    send_test_notification as send_test_notification_uc,
)
from duewise.config import get_settings
from duewise.domain.entities import User
from duewise.infrastructure.database import get_db
from duewise.infrastructure.reminder_store import SqlReminderStore
from duewise.interfaces.api.dependencies import (
    get_current_active_user,
    get_push_sender,
    verify_scheduler_token,
)
from duewise.interfaces.api.schemas import (
    DueReminderSweepRead,
    NotificationCheckRead,
    NotificationMarkReadRequest,
    NotificationMarkReadResponse,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    unread_only: bool = Query(False),
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[NotificationRead]:
    """Return the most recent notifications for the authenticated user."""

    notifications = list_notifications_uc(
        db, user_id=current_user.id, unread_only=unread_only, limit=limit
    )
    return [NotificationRead.model_validate(notification) for notification in notifications]


@router.post("/read", response_model=NotificationMarkReadResponse)
def mark_read(
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationMarkReadResponse:
    updated = mark_notifications_read(db, payload.ids, user_id=current_user.id)
    return NotificationMarkReadResponse(updated=updated)


@router.post(
    "/due-reminders",
    response_model=DueReminderSweepRead,
    dependencies=[Depends(verify_scheduler_token)],
)
def run_due_reminders(
    db: Session = Depends(get_db),
    sender: PushSender = Depends(get_push_sender),
) -> DueReminderSweepRead:
    """Remind every user about bills due today, tomorrow or in two days.

    Meant to be called once a day by an external scheduler.
    """

    try:
        result = run_scheduled_due_reminder_sweep(db, sender)
    except SweepAlreadyRunningError as exc:
        logger.warning("Rejected overlapping due reminder sweep request")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except DueReminderSweepError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc
    return DueReminderSweepRead(**asdict(result))


@router.post("/test", response_model=NotificationCheckRead)
def send_test_notification(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    sender: PushSender = Depends(get_push_sender),
) -> NotificationCheckRead:
    """Send a sample push to every device of the authenticated user."""

    try:
        counts = send_test_notification_uc(
            SqlReminderStore(db),
            sender,
            user_id=current_user.id,
            max_workers=get_settings().push_max_workers,
        )
    except NoPushSubscriptionsError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return NotificationCheckRead(sent=counts.sent, failed=counts.failed)
