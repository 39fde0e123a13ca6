"""Validation helpers shared by fixed account use cases."""

from decimal import Decimal

from duewise.domain.entities import FixedAccountCategory


def validate_due_day(due_day: int) -> int:
    if not 1 <= due_day <= 31:
        raise ValueError("Due day must be between 1 and 31")
    return due_day


def validate_amount(amount: Decimal) -> Decimal:
    amount = Decimal(amount)
    if amount <= 0:
        raise ValueError("Amount must be greater than zero")
    return amount


def validate_name(name: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise ValueError("Name is required")
    return cleaned


def parse_category(value: FixedAccountCategory | str) -> FixedAccountCategory:
    try:
        return FixedAccountCategory(value)
    except ValueError as exc:
        raise ValueError(f"Unknown fixed account category {value!r}") from exc
