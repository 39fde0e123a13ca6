"""Domain entity representing an income or expense entry."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class IncomeCategory(str, Enum):
    SALARY = "salary"
    FREELANCE = "freelance"
    CASHBACK = "cashback"
    PIX = "pix"
    OTHER_INCOME = "other_income"


class ExpenseCategory(str, Enum):
    GROCERIES = "groceries"
    TRANSPORT = "transport"
    HEALTH = "health"
    PETS = "pets"
    CLOTHING = "clothing"
    OTHER_EXPENSE = "other_expense"


TransactionCategory = IncomeCategory | ExpenseCategory

_CATEGORIES_BY_TYPE: dict[TransactionType, type[Enum]] = {
    TransactionType.INCOME: IncomeCategory,
    TransactionType.EXPENSE: ExpenseCategory,
}


def parse_transaction_category(
    transaction_type: TransactionType | str, value: str
) -> TransactionCategory:
    """Return the category enum member for ``value`` within ``transaction_type``.

    Raises ``ValueError`` when the category does not belong to the set allowed
    for the transaction type.
    """

    kind = TransactionType(transaction_type)
    enum_cls = _CATEGORIES_BY_TYPE[kind]
    try:
        return enum_cls(value)  # type: ignore[return-value]
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        msg = f"Category {value!r} is not valid for {kind.value}; expected one of: {allowed}"
        raise ValueError(msg) from exc


@dataclass
class Transaction:
    """Money that entered or left the user's wallet.

    ``amount`` is always a positive magnitude; ``type`` gives the sign.
    """

    id: int | None
    user_id: int
    name: str
    amount: Decimal
    type: TransactionType
    category: TransactionCategory
    date: datetime

    @property
    def signed_amount(self) -> Decimal:
        """Return ``amount`` with the sign implied by ``type``."""

        if self.type is TransactionType.INCOME:
            return self.amount
        return -self.amount


__all__ = [
    "ExpenseCategory",
    "IncomeCategory",
    "Transaction",
    "TransactionCategory",
    "TransactionType",
    "parse_transaction_category",
]
