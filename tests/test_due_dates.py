import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta

import pytest

from duewise.domain.due_dates import (
    RoundingPolicy,
    annotate_due_dates,
    days_until_due,
    due_badge_text,
    due_date_for,
    is_within_reminder_window,
    reminder_message,
    sort_by_due_date,
)


@dataclass
class Bill:
    name: str
    due_day: int


def _every_day(year: int):
    current = date(year, 1, 1)
    while current.year == year:
        yield current
        current += timedelta(days=1)


@pytest.mark.parametrize(
    ("today", "due_day", "expected_date", "expected_days"),
    [
        (date(2024, 3, 29), 31, date(2024, 3, 31), 2),
        (date(2024, 4, 29), 31, date(2024, 5, 1), 2),
        (date(2024, 3, 15), 10, date(2024, 4, 10), 26),
        (date(2024, 3, 10), 10, date(2024, 3, 10), 0),
    ],
)
def test_documented_examples(today, due_day, expected_date, expected_days):
    assert due_date_for(due_day, today=today) == expected_date
    assert days_until_due(due_day, today=today) == expected_days


def test_due_today_shows_badge():
    days = days_until_due(10, today=date(2024, 3, 10))

    assert due_badge_text(days) == "due today"


def test_day_past_short_month_end_overflows_instead_of_clamping():
    assert due_date_for(30, today=date(2023, 2, 27)) == date(2023, 3, 2)
    assert due_date_for(31, today=date(2024, 2, 27)) == date(2024, 3, 2)
    assert days_until_due(31, today=date(2024, 2, 27)) == 4


def test_rollover_crosses_year_boundary():
    assert due_date_for(5, today=date(2024, 12, 20)) == date(2025, 1, 5)
    assert days_until_due(5, today=date(2024, 12, 20)) == 16


def test_rollover_into_short_month_overflows_again():
    # Day 30 has passed, so the due date rolls into February and overflows into March.
    assert due_date_for(31, today=date(2025, 1, 31)) == date(2025, 1, 31)
    assert due_date_for(30, today=date(2025, 1, 31)) == date(2025, 3, 2)


def test_time_of_day_is_ignored():
    morning = datetime(2024, 3, 29, 0, 5)
    evening = datetime(2024, 3, 29, 23, 55)

    assert days_until_due(31, today=morning) == 2
    assert days_until_due(31, today=evening) == 2


def test_due_dates_follow_calendar_rules_for_a_whole_year():
    for today in _every_day(2024):
        last_day = calendar.monthrange(today.year, today.month)[1]
        for due_day in range(1, 32):
            days = days_until_due(due_day, today=today)
            assert days >= 0

            if today.day <= due_day <= last_day:
                assert days == due_day - today.day
            if today.day == due_day:
                assert days == 0
            if today.day > due_day:
                candidate = due_date_for(due_day, today=today)
                assert days > 0
                assert (candidate.year, candidate.month) >= (
                    today.year + today.month // 12,
                    today.month % 12 + 1,
                )


@pytest.mark.parametrize("policy", list(RoundingPolicy))
def test_rounding_policy_has_no_effect_on_whole_days(policy):
    for today in (date(2024, 1, 31), date(2024, 2, 29), date(2024, 11, 30)):
        for due_day in range(1, 32):
            assert days_until_due(due_day, today=today, rounding=policy) == days_until_due(
                due_day, today=today
            )


def test_rounding_policy_on_fractions():
    assert RoundingPolicy.CEIL.apply(1.2) == 2
    assert RoundingPolicy.ROUND.apply(1.2) == 1
    assert RoundingPolicy.ROUND.apply(1.5) == 2
    assert RoundingPolicy.CEIL.apply(2.0) == 2


@pytest.mark.parametrize(
    ("days", "badge"),
    [
        (0, "due today"),
        (1, "due tomorrow"),
        (2, "due in 2 days"),
        (3, "due in 3 days"),
        (4, None),
        (30, None),
    ],
)
def test_badge_text(days, badge):
    assert due_badge_text(days) == badge


def test_reminder_messages():
    assert reminder_message("Rent", 0) == "Your bill Rent is due today!"
    assert reminder_message("Rent", 1) == "Your bill Rent is due tomorrow"
    assert reminder_message("Rent", 2) == "Your bill Rent is due in 2 days"


def test_reminder_window():
    assert [days for days in range(-1, 5) if is_within_reminder_window(days)] == [0, 1, 2]


def test_annotate_preserves_input_order():
    bills = [Bill("a", 20), Bill("b", 5), Bill("c", 12)]

    annotated = annotate_due_dates(bills, today=date(2024, 3, 10))

    assert [item.account.name for item in annotated] == ["a", "b", "c"]
    assert [item.days_until_due for item in annotated] == [10, 26, 2]
    assert annotated[2].badge_text == "due in 2 days"


def test_sort_is_non_decreasing_and_stable():
    bills = [
        Bill("late", 9),
        Bill("first-tie", 12),
        Bill("today", 10),
        Bill("second-tie", 12),
        Bill("third-tie", 12),
    ]

    ordered = sort_by_due_date(bills, today=date(2024, 3, 10))

    assert [item.account.name for item in ordered] == [
        "today",
        "first-tie",
        "second-tie",
        "third-tie",
        "late",
    ]
    days = [item.days_until_due for item in ordered]
    assert days == sorted(days)
