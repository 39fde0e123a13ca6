"""Due-date arithmetic for bills that recur on a day of the month.

A bill stores only its ``due_day``. The next occurrence is built on today's
month with calendar overflow, the way ``Date(year, month, day)`` behaves in a
browser: day 31 of a 30-day month is the 1st of the following month and is
never clamped to the month end. When today's day-of-month is already past
``due_day`` the occurrence moves to the next month.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Generic, Protocol, TypeVar

DUE_REMINDER_LOOKAHEAD_DAYS = 2

_ONE_DAY = timedelta(days=1)
_BADGE_TEXTS: dict[int, str] = {
    0: "due today",
    1: "due tomorrow",
    2: "due in 2 days",
    3: "due in 3 days",
}


class RoundingPolicy(str, Enum):
    """How a fractional day count becomes a whole number of days."""

    CEIL = "ceil"
    ROUND = "round"

    def apply(self, days: float) -> int:
        if self is RoundingPolicy.CEIL:
            return math.ceil(days)
        # Half-up, matching Math.round.
        return math.floor(days + 0.5)


class HasDueDay(Protocol):
    due_day: int


T = TypeVar("T", bound=HasDueDay)


@dataclass(frozen=True)
class FixedAccountDue(Generic[T]):
    """An account annotated with its next occurrence."""

    account: T
    due_date: date
    days_until_due: int

    @property
    def badge_text(self) -> str | None:
        return due_badge_text(self.days_until_due)


def _as_calendar_date(today: date | datetime) -> date:
    if isinstance(today, datetime):
        return today.date()
    return today


def _overflowing_date(year: int, month: int, day: int) -> date:
    """Build a date letting ``month`` and ``day`` overflow into later ones."""

    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return date(year, month, 1) + timedelta(days=day - 1)


def due_date_for(due_day: int, *, today: date | datetime) -> date:
    """Return the next occurrence of a bill due on ``due_day``."""

    current = _as_calendar_date(today)
    if current.day > due_day:
        return _overflowing_date(current.year, current.month + 1, due_day)
    return _overflowing_date(current.year, current.month, due_day)


def days_until_due(
    due_day: int,
    *,
    today: date | datetime,
    rounding: RoundingPolicy = RoundingPolicy.CEIL,
) -> int:
    """Return how many days remain until the next occurrence of ``due_day``.

    ``today`` is normalized to its calendar date first, so the time of day has
    no influence. ``0`` means the bill is due today; the result is never
    negative.
    """

    current = _as_calendar_date(today)
    candidate = due_date_for(due_day, today=current)
    return rounding.apply((candidate - current) / _ONE_DAY)


def due_badge_text(days: int) -> str | None:
    """Return the badge shown next to a bill, or ``None`` when not imminent."""

    return _BADGE_TEXTS.get(days)


def reminder_message(name: str, days: int) -> str:
    """Compose the body of a reminder for the bill called ``name``."""

    if days == 0:
        return f"Your bill {name} is due today!"
    if days == 1:
        return f"Your bill {name} is due tomorrow"
    return f"Your bill {name} is due in {days} days"


def is_within_reminder_window(days: int) -> bool:
    return 0 <= days <= DUE_REMINDER_LOOKAHEAD_DAYS


def annotate_due_dates(
    accounts: Iterable[T],
    *,
    today: date | datetime,
    rounding: RoundingPolicy = RoundingPolicy.CEIL,
) -> list[FixedAccountDue[T]]:
    """Pair every account with its next due date, preserving input order."""

    current = _as_calendar_date(today)
    annotated: list[FixedAccountDue[T]] = []
    for account in accounts:
        due_date = due_date_for(account.due_day, today=current)
        annotated.append(
            FixedAccountDue(
                account=account,
                due_date=due_date,
                days_until_due=rounding.apply((due_date - current) / _ONE_DAY),
            )
        )
    return annotated


def sort_by_due_date(
    accounts: Sequence[T],
    *,
    today: date | datetime,
    rounding: RoundingPolicy = RoundingPolicy.CEIL,
) -> list[FixedAccountDue[T]]:
    """Return ``accounts`` ordered by ascending days until due.

    The sort is stable: accounts due on the same day keep their input order.
    """

    annotated = annotate_due_dates(accounts, today=today, rounding=rounding)
    return sorted(annotated, key=lambda item: item.days_until_due)


__all__ = [
    "DUE_REMINDER_LOOKAHEAD_DAYS",
    "FixedAccountDue",
    "RoundingPolicy",
    "annotate_due_dates",
    "days_until_due",
    "due_badge_text",
    "due_date_for",
    "is_within_reminder_window",
    "reminder_message",
    "sort_by_due_date",
]
