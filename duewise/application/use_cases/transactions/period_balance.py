"""Balance of a user's wallet over a trailing window of days."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal

from sqlalchemy.orm import Session

from duewise.domain.entities import Transaction
from duewise.infrastructure.repositories import TransactionRepository
from duewise.utils import start_of_day, today_in_app_timezone


@dataclass(frozen=True)
class PeriodBalance:
    days: int
    since: datetime
    balance: Decimal
    transaction_count: int


def calculate_balance(transactions: Iterable[Transaction]) -> Decimal:
    """Sum incomes minus expenses."""

    return sum((transaction.signed_amount for transaction in transactions), Decimal("0"))


def get_period_balance(
    session: Session,
    *,
    user_id: int,
    days: int = 1,
    today: date | None = None,
) -> PeriodBalance:
    """Return the balance of the last ``days`` calendar days, today included.

    ``days=1`` covers transactions dated since local midnight.
    """

    if days < 1:
        raise ValueError("days must be at least 1")
    today = today or today_in_app_timezone()
    since = start_of_day(today - timedelta(days=days - 1))
    transactions = TransactionRepository(session).list_since(user_id, since)
    return PeriodBalance(
        days=days,
        since=since,
        balance=calculate_balance(transactions),
        transaction_count=len(transactions),
    )
