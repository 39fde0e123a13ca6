"""Entry point used by the scheduler to run the due reminder sweep."""

from __future__ import annotations

from datetime import date

from sqlalchemy.orm import Session

from duewise.application.ports import PushSender
from duewise.config import Settings, get_settings
from duewise.domain.due_dates import RoundingPolicy
from duewise.infrastructure.locks import SweepLock, due_reminder_lock
from duewise.infrastructure.reminder_store import SqlReminderStore

from .due_reminders import DueReminderSweepResult, run_due_reminder_sweep


class SweepAlreadyRunningError(RuntimeError):
    """Raised when another due reminder sweep holds the lock."""


def run_scheduled_due_reminder_sweep(
    session: Session,
    sender: PushSender,
    *,
    settings: Settings | None = None,
    today: date | None = None,
    lock: SweepLock = due_reminder_lock,
) -> DueReminderSweepResult:
    """Run one sweep against the database using the configured policies."""

    settings = settings or get_settings()
    with lock.hold(settings.sweep_lock_ttl_seconds) as acquired:
        if not acquired:
            raise SweepAlreadyRunningError("A due reminder sweep is already running")
        return run_due_reminder_sweep(
            SqlReminderStore(session),
            sender,
            today=today,
            rounding=RoundingPolicy(settings.due_day_rounding),
            dedupe_daily=settings.dedupe_daily_reminders,
            prune_expired=settings.prune_expired_subscriptions,
            max_workers=settings.push_max_workers,
        )


__all__ = ["SweepAlreadyRunningError", "run_scheduled_due_reminder_sweep"]
