"""Repository implementations for infrastructure layer."""

from .fixed_account_repository import FixedAccountRepository
from .notification_repository import NotificationRepository
from .push_subscription_repository import PushSubscriptionRepository
from .transaction_repository import TransactionRepository
from .user_repository import UserRepository

__all__ = [
    "FixedAccountRepository",
    "NotificationRepository",
    "PushSubscriptionRepository",
    "TransactionRepository",
    "UserRepository",
]
