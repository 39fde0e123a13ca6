import pytest
from pydantic import ValidationError

from duewise.config import Settings


def _settings(**overrides) -> Settings:
    values = {"database_url": "sqlite://", "secret_key": "test-secret"}
    values.update(overrides)
    return Settings(**values)


def test_defaults(monkeypatch):
    monkeypatch.delenv("VAPID_PUBLIC_KEY", raising=False)

    settings = _settings()

    assert settings.due_day_rounding == "ceil"
    assert settings.dedupe_daily_reminders is False
    assert settings.prune_expired_subscriptions is True
    assert settings.push_configured is False
    assert settings.vapid_public_key is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DEDUPE_DAILY_REMINDERS", "true")
    monkeypatch.setenv("DUE_DAY_ROUNDING", "round")
    monkeypatch.setenv("PUSH_MAX_WORKERS", "8")

    settings = _settings()

    assert settings.dedupe_daily_reminders is True
    assert settings.due_day_rounding == "round"
    assert settings.push_max_workers == 8


def test_vapid_private_key_requires_subject():
    with pytest.raises(ValidationError):
        _settings(vapid_private_key="private-test-key")


def test_vapid_subject_must_be_contact_uri():
    with pytest.raises(ValidationError):
        _settings(vapid_private_key="private-test-key", vapid_subject="ops@example.com")


def test_push_configured_with_complete_pair():
    settings = _settings(
        vapid_private_key="private-test-key", vapid_subject="https://example.com/contact"
    )

    assert settings.push_configured is True


def test_unknown_rounding_is_rejected():
    with pytest.raises(ValidationError):
        _settings(due_day_rounding="floor")
