"""Shared fixtures: environment, temporary database and push/storage fakes."""

from __future__ import annotations

import os
import tempfile
import threading
from collections.abc import Iterator
from decimal import Decimal
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "duewise_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ["VAPID_PUBLIC_KEY"] = "BPublicTestKey"
for _name in ("VAPID_PRIVATE_KEY", "VAPID_SUBJECT", "SCHEDULER_TOKEN", "DEDUPE_DAILY_REMINDERS"):
    os.environ.pop(_name, None)

from duewise.config import get_settings  # noqa: E402

get_settings.cache_clear()

from duewise.domain.entities import (  # noqa: E402
    FixedAccount,
    Notification,
    PushDeliveryResult,
    PushMessage,
    PushSubscription,
)


class RecordingPushSender:
    """Push transport double that records deliveries.

    Endpoints listed in ``failing`` return a failed result, ``expired`` ones a
    410 and ``raising`` ones raise ``ConnectionError``.
    """

    def __init__(self, events: list | None = None) -> None:
        self.sent: list[tuple[str, PushMessage]] = []
        self.failing: set[str] = set()
        self.expired: set[str] = set()
        self.raising: set[str] = set()
        self.events = events if events is not None else []
        self._lock = threading.Lock()

    def send(self, subscription: PushSubscription, message: PushMessage) -> PushDeliveryResult:
        with self._lock:
            self.sent.append((subscription.endpoint, message))
            self.events.append(("send", subscription.endpoint, message.body))
        if subscription.endpoint in self.raising:
            raise ConnectionError("push service unreachable")
        if subscription.endpoint in self.expired:
            return PushDeliveryResult(success=False, status_code=410, expired=True)
        if subscription.endpoint in self.failing:
            return PushDeliveryResult(success=False, status_code=500)
        return PushDeliveryResult(success=True, status_code=201)

    def endpoints_for(self, body: str) -> list[str]:
        return [endpoint for endpoint, message in self.sent if message.body == body]


class InMemoryReminderStore:
    """Reminder storage double backed by plain lists."""

    def __init__(self, events: list | None = None) -> None:
        self.accounts: list[FixedAccount] = []
        self.subscriptions: dict[int, list[PushSubscription]] = {}
        self.notifications: list[Notification] = []
        self.failing_owners: set[int] = set()
        self.fail_load = False
        self.fail_record = False
        self.events = events if events is not None else []
        self._next_id = 1

    def add_account(
        self, account_id: int, user_id: int, due_day: int, *, name: str | None = None, is_active: bool = True
    ) -> FixedAccount:
        account = FixedAccount(
            id=account_id,
            user_id=user_id,
            name=name or f"Bill {account_id}",
            amount=Decimal("100.00"),
            due_day=due_day,
            is_active=is_active,
        )
        self.accounts.append(account)
        return account

    def add_subscription(self, user_id: int, endpoint: str) -> PushSubscription:
        subscriptions = self.subscriptions.setdefault(user_id, [])
        subscription = PushSubscription(
            id=len(subscriptions) + 1 + 100 * user_id,
            user_id=user_id,
            endpoint=endpoint,
            p256dh="p256dh-key",
            auth="auth-secret",
        )
        subscriptions.append(subscription)
        return subscription

    # ReminderStore protocol

    def list_active_fixed_accounts(self):
        if self.fail_load:
            raise RuntimeError("database unavailable")
        return [account for account in self.accounts if account.is_active]

    def list_push_subscriptions(self, user_id: int):
        if user_id in self.failing_owners:
            raise RuntimeError(f"cannot read subscriptions of {user_id}")
        return list(self.subscriptions.get(user_id, []))

    def record_notification(self, notification: Notification):
        if self.fail_record:
            raise RuntimeError("insert failed")
        if notification.reminder_key is not None and any(
            existing.reminder_key == notification.reminder_key
            for existing in self.notifications
        ):
            return None
        notification.id = self._next_id
        self._next_id += 1
        self.notifications.append(notification)
        self.events.append(("record", notification.fixed_account_id))
        return notification

    def remove_push_subscription(self, subscription: PushSubscription) -> None:
        self.subscriptions[subscription.user_id] = [
            existing
            for existing in self.subscriptions.get(subscription.user_id, [])
            if existing.endpoint != subscription.endpoint
        ]


@pytest.fixture()
def events() -> list:
    return []


@pytest.fixture()
def store(events) -> InMemoryReminderStore:
    return InMemoryReminderStore(events)


@pytest.fixture()
def sender(events) -> RecordingPushSender:
    return RecordingPushSender(events)


@pytest.fixture()
def db_session() -> Iterator:
    """Yield a session bound to a freshly created schema."""

    from duewise.infrastructure import models  # noqa: F401
    from duewise.infrastructure.database import Base, SessionLocal, engine, initialize_database

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(sender) -> Iterator:
    """Return a test client whose push transport is ``sender``."""

    from fastapi.testclient import TestClient

    from duewise.infrastructure import models  # noqa: F401
    from duewise.infrastructure.database import Base, engine
    from duewise.interfaces.api.dependencies import get_push_sender
    from duewise.main import create_app

    Base.metadata.drop_all(bind=engine)
    app = create_app()
    app.dependency_overrides[get_push_sender] = lambda: sender
    with TestClient(app) as test_client:
        yield test_client
    Base.metadata.drop_all(bind=engine)


def signup_and_login(client, email: str, password: str = "Secret123!") -> dict[str, str]:
    """Create an account and return its authorization headers."""

    response = client.post(
        "/auth/signup", json={"name": email.split("@")[0], "email": email, "password": password}
    )
    assert response.status_code == 201, response.text
    token_response = client.post(
        "/auth/token", data={"username": email, "password": password}
    )
    assert token_response.status_code == 200, token_response.text
    return {"Authorization": f"Bearer {token_response.json()['access_token']}"}


@pytest.fixture()
def auth_headers(client):
    """Factory returning authorization headers for a new user."""

    return lambda email: signup_and_login(client, email)
