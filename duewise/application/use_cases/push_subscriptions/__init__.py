"""Use cases for registering the devices that receive push reminders."""

from .manage_subscriptions import register_push_subscription, remove_push_subscription

__all__ = ["register_push_subscription", "remove_push_subscription"]
