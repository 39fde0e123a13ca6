from .auth import Token
from .fixed_account import FixedAccountCreate, FixedAccountRead, FixedAccountUpdate
from .notification import (
    DueReminderSweepRead,
    NotificationMarkReadRequest,
    NotificationMarkReadResponse,
    NotificationRead,
    NotificationCheckRead,
)
from .push_subscription import (
    PushSubscriptionCreate,
    PushSubscriptionKeys,
    PushSubscriptionRead,
    VapidPublicKeyRead,
)
from .transaction import (
    PeriodBalanceRead,
    TransactionCreate,
    TransactionRead,
    TransactionUpdate,
)
from .user import UserCreate, UserRead

__all__ = [
    "DueReminderSweepRead",
    "FixedAccountCreate",
    "FixedAccountRead",
    "FixedAccountUpdate",
    "NotificationMarkReadRequest",
    "NotificationMarkReadResponse",
    "NotificationRead",
    "PeriodBalanceRead",
    "PushSubscriptionCreate",
    "PushSubscriptionKeys",
    "PushSubscriptionRead",
    "NotificationCheckRead",
    "Token",
    "TransactionCreate",
    "TransactionRead",
    "TransactionUpdate",
    "UserCreate",
    "UserRead",
    "VapidPublicKeyRead",
]
