"""Use cases around reminders, push delivery and notification history."""

from .due_reminders import (
    REMINDER_TITLE,
    DueReminder,
    DueReminderSweepError,
    DueReminderSweepResult,
    group_by_owner,
    run_due_reminder_sweep,
    select_due_reminders,
)
from .history import list_notifications, mark_notifications_read
from .scheduled_sweep import SweepAlreadyRunningError, run_scheduled_due_reminder_sweep
from .send_test_notification import (
    TEST_NOTIFICATION,
    DeliveryCounts,
    NoPushSubscriptionsError,
    send_test_notification,
)

__all__ = [
    "REMINDER_TITLE",
    "TEST_NOTIFICATION",
    "DeliveryCounts",
    "DueReminder",
    "DueReminderSweepError",
    "DueReminderSweepResult",
    "NoPushSubscriptionsError",
    "SweepAlreadyRunningError",
    "group_by_owner",
    "list_notifications",
    "mark_notifications_read",
    "run_due_reminder_sweep",
    "run_scheduled_due_reminder_sweep",
    "select_due_reminders",
    "send_test_notification",
]
