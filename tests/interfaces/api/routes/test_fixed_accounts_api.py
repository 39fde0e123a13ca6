import importlib
from datetime import date
from decimal import Decimal

import pytest

from duewise.interfaces.api.routes import fixed_accounts as fixed_accounts_routes

TODAY = date(2024, 4, 29)

list_fixed_accounts = importlib.import_module(
    "duewise.application.use_cases.fixed_accounts.list_fixed_accounts"
)


@pytest.fixture(autouse=True)
def _fixed_today(monkeypatch):
    monkeypatch.setattr(list_fixed_accounts, "today_in_app_timezone", lambda: TODAY)
    monkeypatch.setattr(fixed_accounts_routes, "today_in_app_timezone", lambda: TODAY)


def _create(client, headers, name, due_day, **extra):
    payload = {"name": name, "amount": "89.90", "due_day": due_day, **extra}
    response = client.post("/fixed-accounts/", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_returns_next_occurrence(client, auth_headers):
    ana = auth_headers("ana@example.com")

    body = _create(client, ana, "Rent", 31, category="rent")

    assert body["next_due_date"] == "2024-05-01"
    assert body["days_until_due"] == 2
    assert body["badge_text"] == "due in 2 days"
    assert body["category"] == "rent"
    assert body["is_active"] is True
    assert Decimal(body["amount"]) == Decimal("89.90")


def test_list_is_sorted_by_due_date_and_stable(client, auth_headers):
    ana = auth_headers("ana@example.com")
    _create(client, ana, "Internet", 15)
    _create(client, ana, "Water", 30)
    _create(client, ana, "Phone", 29)
    _create(client, ana, "Power", 30)

    body = client.get("/fixed-accounts/", headers=ana).json()

    assert [item["name"] for item in body] == ["Phone", "Water", "Power", "Internet"]
    assert [item["days_until_due"] for item in body] == [0, 1, 1, 16]
    assert [item["badge_text"] for item in body] == [
        "due today",
        "due tomorrow",
        "due tomorrow",
        None,
    ]


def test_deactivated_bills_are_hidden_by_default(client, auth_headers):
    ana = auth_headers("ana@example.com")
    bill = _create(client, ana, "Gym", 5)

    response = client.patch(f"/fixed-accounts/{bill['id']}", json={"is_active": False}, headers=ana)

    assert response.status_code == 200
    assert response.json()["is_active"] is False
    assert client.get("/fixed-accounts/", headers=ana).json() == []
    listed = client.get("/fixed-accounts/?include_inactive=true", headers=ana).json()
    assert [item["id"] for item in listed] == [bill["id"]]


def test_update_due_day(client, auth_headers):
    ana = auth_headers("ana@example.com")
    bill = _create(client, ana, "Card", 5)

    response = client.patch(f"/fixed-accounts/{bill['id']}", json={"due_day": 30}, headers=ana)

    assert response.json()["days_until_due"] == 1


@pytest.mark.parametrize("due_day", [0, 32])
def test_due_day_must_be_a_day_of_the_month(client, auth_headers, due_day):
    ana = auth_headers("ana@example.com")

    response = client.post(
        "/fixed-accounts/", json={"name": "Rent", "amount": "10", "due_day": due_day}, headers=ana
    )

    assert response.status_code == 422


def test_unknown_fields_are_rejected_on_update(client, auth_headers):
    ana = auth_headers("ana@example.com")
    bill = _create(client, ana, "Rent", 5)

    response = client.patch(f"/fixed-accounts/{bill['id']}", json={"owner": 2}, headers=ana)

    assert response.status_code == 422


def test_bills_of_other_users_are_not_found(client, auth_headers):
    ana = auth_headers("ana@example.com")
    bia = auth_headers("bia@example.com")
    bill = _create(client, ana, "Rent", 5)

    assert client.patch(
        f"/fixed-accounts/{bill['id']}", json={"name": "Mine"}, headers=bia
    ).status_code == 404
    assert client.delete(f"/fixed-accounts/{bill['id']}", headers=bia).status_code == 404
    assert client.delete(f"/fixed-accounts/{bill['id']}", headers=ana).status_code == 204
    assert client.get("/fixed-accounts/", headers=ana).json() == []
