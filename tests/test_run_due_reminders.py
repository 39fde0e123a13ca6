import importlib.util
import json
from datetime import date
from pathlib import Path

import pytest

from duewise.application.use_cases.notifications import (
    DueReminderSweepError,
    DueReminderSweepResult,
)
from duewise.infrastructure.web_push import PushConfigurationError

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "run_due_reminders.py"


class FakeSession:
    def __init__(self) -> None:
        self.closed = False

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def script(monkeypatch):
    spec = importlib.util.spec_from_file_location("run_due_reminders", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    session = FakeSession()
    module.session = session
    monkeypatch.setattr(module, "WebPushSender", lambda: "sender")
    monkeypatch.setattr(module, "SessionLocal", lambda: session)
    monkeypatch.setattr(module, "initialize_database", lambda: None)
    monkeypatch.setattr("sys.argv", ["run_due_reminders.py", "--date", "2024-03-10"])
    return module


def test_prints_sweep_counters_as_json(script, monkeypatch, capsys):
    calls = []

    def fake_sweep(session, sender, *, today=None):
        calls.append((session, sender, today))
        return DueReminderSweepResult(
            bills_checked=3, bills_selected=2, notifications_sent=1, records_created=2
        )

    monkeypatch.setattr(script, "run_scheduled_due_reminder_sweep", fake_sweep)

    script.main()

    output = json.loads(capsys.readouterr().out)
    assert output["success"] is True
    assert output["bills_checked"] == 3
    assert output["bills_selected"] == 2
    assert output["notifications_sent"] == 1
    assert output["records_created"] == 2
    assert output["deliveries_failed"] == 0
    assert calls == [(script.session, "sender", date(2024, 3, 10))]
    assert script.session.closed is True


def test_sweep_failure_exits(script, monkeypatch, capsys):
    def failing_sweep(session, sender, *, today=None):
        raise DueReminderSweepError("database unavailable")

    monkeypatch.setattr(script, "run_scheduled_due_reminder_sweep", failing_sweep)

    with pytest.raises(SystemExit) as excinfo:
        script.main()

    assert "database unavailable" in str(excinfo.value.code)
    assert capsys.readouterr().out == ""
    assert script.session.closed is True


def test_missing_push_keys_exit_before_touching_the_database(script, monkeypatch):
    def unconfigured_sender():
        raise PushConfigurationError("VAPID keys are not configured")

    def unexpected_session():
        raise AssertionError("session opened")

    monkeypatch.setattr(script, "WebPushSender", unconfigured_sender)
    monkeypatch.setattr(script, "SessionLocal", unexpected_session)

    with pytest.raises(SystemExit) as excinfo:
        script.main()

    assert str(excinfo.value.code) == "Cannot send reminders: VAPID keys are not configured"
