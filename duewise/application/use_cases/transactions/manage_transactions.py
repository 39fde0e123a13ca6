"""Use cases for recording and editing wallet transactions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from sqlalchemy.orm import Session

from duewise.domain.entities import Transaction, TransactionType, parse_transaction_category
from duewise.infrastructure.repositories import TransactionRepository
from duewise.utils import now_in_app_timezone


def _validate_amount(amount: Decimal) -> Decimal:
    amount = Decimal(amount)
    if amount <= 0:
        raise ValueError("Amount must be greater than zero")
    return amount


def _get_owned(session: Session, transaction_id: int, *, user_id: int) -> Transaction:
    transaction = TransactionRepository(session).get(transaction_id)
    if transaction is None or transaction.user_id != user_id:
        raise ValueError("Transaction not found")
    return transaction


def create_transaction(
    session: Session,
    *,
    user_id: int,
    name: str,
    amount: Decimal,
    type: TransactionType | str,
    category: str,
    date: datetime | None = None,
) -> Transaction:
    """Record an income or expense; ``date`` defaults to now."""

    kind = TransactionType(type)
    if not name.strip():
        raise ValueError("Name is required")
    transaction = Transaction(
        id=None,
        user_id=user_id,
        name=name.strip(),
        amount=_validate_amount(amount),
        type=kind,
        category=parse_transaction_category(kind, category),
        date=date or now_in_app_timezone(),
    )
    return TransactionRepository(session).create(transaction)


def list_transactions(
    session: Session, *, user_id: int, limit: int | None = 50
) -> Sequence[Transaction]:
    """Return the latest transactions of ``user_id``, newest first."""

    return TransactionRepository(session).list_for_user(user_id, limit=limit)


def update_transaction(
    session: Session,
    transaction_id: int,
    *,
    user_id: int,
    name: str | None = None,
    amount: Decimal | None = None,
    type: TransactionType | str | None = None,
    category: str | None = None,
    date: datetime | None = None,
) -> Transaction:
    """Edit a transaction. Changing ``type`` requires a matching ``category``."""

    transaction = _get_owned(session, transaction_id, user_id=user_id)
    kind = TransactionType(type) if type is not None else transaction.type
    category_value = category if category is not None else transaction.category.value
    updated = replace(
        transaction,
        name=name.strip() if name is not None else transaction.name,
        amount=_validate_amount(amount) if amount is not None else transaction.amount,
        type=kind,
        category=parse_transaction_category(kind, category_value),
        date=date or transaction.date,
    )
    return TransactionRepository(session).update(updated)


def delete_transaction(session: Session, transaction_id: int, *, user_id: int) -> None:
    _get_owned(session, transaction_id, user_id=user_id)
    TransactionRepository(session).delete(transaction_id)
