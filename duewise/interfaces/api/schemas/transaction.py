"""Pydantic models describing transaction payloads."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from duewise.domain.entities import TransactionType, parse_transaction_category


class TransactionCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    type: TransactionType
    category: str
    date: datetime | None = None

    @model_validator(mode="after")
    def _check_category(self) -> "TransactionCreate":
        parse_transaction_category(self.type, self.category)
        return self


class TransactionUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    amount: Decimal | None = Field(default=None, gt=0, max_digits=12, decimal_places=2)
    type: TransactionType | None = None
    category: str | None = None
    date: datetime | None = None

    model_config = ConfigDict(extra="forbid")


class TransactionRead(BaseModel):
    id: int
    name: str
    amount: Decimal
    type: TransactionType
    category: str
    date: datetime

    model_config = ConfigDict(from_attributes=True)


class PeriodBalanceRead(BaseModel):
    days: int
    since: datetime
    balance: Decimal
    transaction_count: int

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "PeriodBalanceRead",
    "TransactionCreate",
    "TransactionRead",
    "TransactionUpdate",
]
