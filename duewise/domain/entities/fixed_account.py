"""Domain entity representing a recurring monthly bill."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class FixedAccountCategory(str, Enum):
    """Kinds of bills a user can track."""

    RENT = "rent"
    CONDO = "condo"
    WATER = "water"
    ELECTRICITY = "electricity"
    INTERNET = "internet"
    STREAMING = "streaming"
    GYM = "gym"
    PHONE = "phone"
    CARD = "card"
    OTHER = "other"


@dataclass
class FixedAccount:
    """A bill that recurs every month on ``due_day``.

    ``due_day`` is stored as entered (1-31) and is not checked against the
    length of any particular month; see :mod:`duewise.domain.due_dates`.
    """

    id: int | None
    user_id: int
    name: str
    amount: Decimal
    due_day: int
    category: FixedAccountCategory = FixedAccountCategory.OTHER
    is_active: bool = True
    created_at: datetime | None = None


__all__ = ["FixedAccount", "FixedAccountCategory"]
