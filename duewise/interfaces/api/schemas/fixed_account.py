"""Pydantic models describing fixed account payloads."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from duewise.domain.due_dates import FixedAccountDue
from duewise.domain.entities import FixedAccount, FixedAccountCategory


class FixedAccountCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    due_day: int = Field(..., ge=1, le=31, description="Day of the month the bill is due")
    category: FixedAccountCategory = FixedAccountCategory.OTHER


class FixedAccountUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    amount: Decimal | None = Field(default=None, gt=0, max_digits=12, decimal_places=2)
    due_day: int | None = Field(default=None, ge=1, le=31)
    category: FixedAccountCategory | None = None
    is_active: bool | None = None

    model_config = ConfigDict(extra="forbid")


class FixedAccountRead(BaseModel):
    """A bill together with its next occurrence."""

    id: int
    name: str
    amount: Decimal
    category: FixedAccountCategory
    due_day: int
    is_active: bool
    days_until_due: int
    next_due_date: date
    badge_text: str | None = Field(
        default=None, description="Short label shown when the bill is due within 3 days"
    )

    @classmethod
    def from_due(cls, item: FixedAccountDue[FixedAccount]) -> "FixedAccountRead":
        account = item.account
        return cls(
            id=account.id or 0,
            name=account.name,
            amount=account.amount,
            category=account.category,
            due_day=account.due_day,
            is_active=account.is_active,
            days_until_due=item.days_until_due,
            next_due_date=item.due_date,
            badge_text=item.badge_text,
        )


__all__ = ["FixedAccountCreate", "FixedAccountRead", "FixedAccountUpdate"]
