"""Daily sweep that reminds users about bills due in the next days."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date

from duewise.application.ports import PushSender, ReminderStore
from duewise.domain.due_dates import (
    RoundingPolicy,
    annotate_due_dates,
    is_within_reminder_window,
    reminder_message,
)
from duewise.domain.entities import (
    FixedAccount,
    Notification,
    PushDeliveryResult,
    PushMessage,
    PushSubscription,
)
from duewise.utils import today_in_app_timezone

logger = logging.getLogger(__name__)

REMINDER_TITLE = "Bill Reminder"


class DueReminderSweepError(RuntimeError):
    """Raised when the sweep cannot even enumerate the active bills."""


@dataclass(frozen=True)
class DueReminder:
    """A bill selected for a reminder in the current sweep."""

    account: FixedAccount
    days_until_due: int

    @property
    def message(self) -> str:
        return reminder_message(self.account.name, self.days_until_due)


@dataclass
class DueReminderSweepResult:
    """Counters reported back to the scheduler."""

    bills_checked: int = 0
    bills_selected: int = 0
    notifications_sent: int = 0
    deliveries_failed: int = 0
    records_created: int = 0
    reminders_deduplicated: int = 0
    owners_without_subscriptions: int = 0
    owners_failed: int = 0
    subscriptions_pruned: int = 0


def select_due_reminders(
    accounts: Iterable[FixedAccount],
    *,
    today: date,
    rounding: RoundingPolicy = RoundingPolicy.CEIL,
) -> list[DueReminder]:
    """Return the active bills whose next occurrence falls in the reminder window."""

    active = [account for account in accounts if account.is_active]
    selected: list[DueReminder] = []
    for item in annotate_due_dates(active, today=today, rounding=rounding):
        logger.debug(
            "Fixed account %s due on day %s: %s day(s) left",
            item.account.id,
            item.account.due_day,
            item.days_until_due,
        )
        if is_within_reminder_window(item.days_until_due):
            selected.append(DueReminder(item.account, item.days_until_due))
    return selected


def group_by_owner(reminders: Iterable[DueReminder]) -> dict[int, list[DueReminder]]:
    """Partition ``reminders`` by owner keeping first-seen order."""

    groups: dict[int, list[DueReminder]] = {}
    for reminder in reminders:
        groups.setdefault(reminder.account.user_id, []).append(reminder)
    return groups


def reminder_key(account: FixedAccount, today: date) -> str:
    """Identify the reminder of ``account`` for the calendar day ``today``."""

    return f"{account.id}:{today.isoformat()}"


def deliver(
    sender: PushSender, subscription: PushSubscription, message: PushMessage
) -> PushDeliveryResult:
    """Send ``message`` turning any transport exception into a failed result."""

    try:
        return sender.send(subscription, message)
    except Exception as exc:
        logger.exception(
            "Unexpected error delivering push to subscription %s of user %s",
            subscription.id,
            subscription.user_id,
        )
        return PushDeliveryResult(success=False, error=str(exc))


def deliver_to_all(
    sender: PushSender,
    subscriptions: Sequence[PushSubscription],
    message: PushMessage,
    *,
    max_workers: int = 1,
) -> list[PushDeliveryResult]:
    """Deliver ``message`` to every subscription, one result per subscription."""

    if max_workers <= 1 or len(subscriptions) <= 1:
        return [deliver(sender, subscription, message) for subscription in subscriptions]

    with ThreadPoolExecutor(max_workers=min(max_workers, len(subscriptions))) as executor:
        return list(
            executor.map(
                lambda subscription: deliver(sender, subscription, message),
                subscriptions,
            )
        )


def run_due_reminder_sweep(
    store: ReminderStore,
    sender: PushSender,
    *,
    today: date | None = None,
    rounding: RoundingPolicy = RoundingPolicy.CEIL,
    dedupe_daily: bool = False,
    prune_expired: bool = True,
    max_workers: int = 1,
) -> DueReminderSweepResult:
    """Remind every user about their bills due today, tomorrow or in two days.

    Only a failure to load the active bills aborts the sweep
    (:class:`DueReminderSweepError`). Problems with a single owner or a single
    endpoint are logged and reflected in the returned counters.

    Each selected bill gets exactly one history record, written before any
    delivery attempt. Running the sweep twice on the same day reminds twice
    unless ``dedupe_daily`` is set.
    """

    today = today or today_in_app_timezone()
    logger.info("Starting due reminder sweep for %s", today.isoformat())

    try:
        accounts = list(store.list_active_fixed_accounts())
    except Exception as exc:
        logger.exception("Could not load active fixed accounts")
        raise DueReminderSweepError(f"Could not load active fixed accounts: {exc}") from exc

    result = DueReminderSweepResult(bills_checked=len(accounts))
    logger.info("Found %s active fixed accounts", result.bills_checked)

    reminders = select_due_reminders(accounts, today=today, rounding=rounding)
    result.bills_selected = len(reminders)
    logger.info("%s fixed accounts need a reminder", result.bills_selected)

    for user_id, owner_reminders in group_by_owner(reminders).items():
        try:
            subscriptions = list(store.list_push_subscriptions(user_id))
        except Exception:
            logger.exception("Error fetching push subscriptions for user %s", user_id)
            result.owners_failed += 1
            continue

        if not subscriptions:
            logger.info("No push subscriptions found for user %s", user_id)
            result.owners_without_subscriptions += 1
            continue

        for reminder in owner_reminders:
            subscriptions = _remind(
                store,
                sender,
                reminder,
                subscriptions,
                result,
                today=today,
                dedupe_daily=dedupe_daily,
                prune_expired=prune_expired,
                max_workers=max_workers,
            )

    logger.info(
        "Due reminder sweep finished: %s sent, %s failed, %s record(s) created",
        result.notifications_sent,
        result.deliveries_failed,
        result.records_created,
    )
    return result


def _remind(
    store: ReminderStore,
    sender: PushSender,
    reminder: DueReminder,
    subscriptions: list[PushSubscription],
    result: DueReminderSweepResult,
    *,
    today: date,
    dedupe_daily: bool,
    prune_expired: bool,
    max_workers: int,
) -> list[PushSubscription]:
    """Record and deliver one reminder; return the subscriptions still valid."""

    account = reminder.account
    notification = Notification(
        id=None,
        user_id=account.user_id,
        title=REMINDER_TITLE,
        message=reminder.message,
        fixed_account_id=account.id,
        reminder_key=reminder_key(account, today) if dedupe_daily else None,
    )

    try:
        saved = store.record_notification(notification)
    except Exception:
        # The reminder is still delivered; only the history entry is lost.
        logger.exception("Error saving reminder for fixed account %s", account.id)
    else:
        if saved is None:
            logger.info(
                "Fixed account %s was already reminded on %s", account.id, today.isoformat()
            )
            result.reminders_deduplicated += 1
            return subscriptions
        result.records_created += 1

    message = PushMessage(title=REMINDER_TITLE, body=reminder.message)
    outcomes = deliver_to_all(sender, subscriptions, message, max_workers=max_workers)

    remaining: list[PushSubscription] = []
    for subscription, outcome in zip(subscriptions, outcomes):
        if outcome.success:
            result.notifications_sent += 1
            remaining.append(subscription)
            continue

        result.deliveries_failed += 1
        logger.warning(
            "Reminder for fixed account %s not delivered to subscription %s (status %s)",
            account.id,
            subscription.id,
            outcome.status_code,
        )
        if not (prune_expired and outcome.expired):
            remaining.append(subscription)
            continue
        try:
            store.remove_push_subscription(subscription)
        except Exception:
            logger.exception("Error removing expired subscription %s", subscription.id)
            remaining.append(subscription)
        else:
            logger.info(
                "Removed expired subscription %s of user %s",
                subscription.id,
                subscription.user_id,
            )
            result.subscriptions_pruned += 1
    return remaining


__all__ = [
    "REMINDER_TITLE",
    "DueReminder",
    "DueReminderSweepError",
    "DueReminderSweepResult",
    "deliver",
    "deliver_to_all",
    "group_by_owner",
    "reminder_key",
    "run_due_reminder_sweep",
    "select_due_reminders",
]
