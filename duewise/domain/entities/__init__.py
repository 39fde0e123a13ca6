"""Domain entities exposed by the application."""

from .fixed_account import FixedAccount, FixedAccountCategory
from .notification import Notification
from .push_subscription import PushDeliveryResult, PushMessage, PushSubscription
from .transaction import (
    ExpenseCategory,
    IncomeCategory,
    Transaction,
    TransactionCategory,
    TransactionType,
    parse_transaction_category,
)
from .user import User

__all__ = [
    "ExpenseCategory",
    "FixedAccount",
    "FixedAccountCategory",
    "IncomeCategory",
    "Notification",
    "PushDeliveryResult",
    "PushMessage",
    "PushSubscription",
    "Transaction",
    "TransactionCategory",
    "TransactionType",
    "User",
    "parse_transaction_category",
]
