"""ORM models used by the application infrastructure."""

from .user import UserModel
from .fixed_account import FixedAccountModel
from .transaction import TransactionModel
from .push_subscription import PushSubscriptionModel
from .notification import NotificationModel

__all__ = [
    "UserModel",
    "FixedAccountModel",
    "TransactionModel",
    "PushSubscriptionModel",
    "NotificationModel",
]
