"""Aggregate application use cases."""

from .notifications import run_due_reminder_sweep, send_test_notification
from .users import authenticate_user, create_user

__all__ = [
    "authenticate_user",
    "create_user",
    "run_due_reminder_sweep",
    "send_test_notification",
]
