"""Use cases for wallet transactions and balances."""

from .manage_transactions import (
    create_transaction,
    delete_transaction,
    list_transactions,
    update_transaction,
)
from .period_balance import PeriodBalance, calculate_balance, get_period_balance

__all__ = [
    "PeriodBalance",
    "calculate_balance",
    "create_transaction",
    "delete_transaction",
    "get_period_balance",
    "list_transactions",
    "update_transaction",
]
