from datetime import datetime, timedelta, timezone
from decimal import Decimal


def _create(client, headers, **overrides):
    payload = {
        "name": "Salary",
        "amount": "1500.00",
        "type": "income",
        "category": "salary",
        **overrides,
    }
    response = client.post("/transactions/", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_and_list_newest_first(client, auth_headers):
    ana = auth_headers("ana@example.com")
    now = datetime.now(timezone.utc)
    _create(client, ana, date=(now - timedelta(hours=2)).isoformat())
    _create(
        client,
        ana,
        name="Market",
        amount="80.25",
        type="expense",
        category="groceries",
        date=now.isoformat(),
    )

    body = client.get("/transactions/", headers=ana).json()

    assert [item["name"] for item in body] == ["Market", "Salary"]
    assert Decimal(body[0]["amount"]) == Decimal("80.25")


def test_balance_of_today(client, auth_headers):
    ana = auth_headers("ana@example.com")
    _create(client, ana)
    _create(client, ana, name="Bus", amount="4.40", type="expense", category="transport")
    _create(
        client,
        ana,
        name="Old",
        amount="999.00",
        type="expense",
        category="health",
        date=(datetime.now(timezone.utc) - timedelta(days=3)).isoformat(),
    )

    today = client.get("/transactions/balance", headers=ana).json()
    week = client.get("/transactions/balance?days=7", headers=ana).json()

    assert Decimal(today["balance"]) == Decimal("1495.60")
    assert today["transaction_count"] == 2
    assert Decimal(week["balance"]) == Decimal("496.60")
    assert week["days"] == 7


def test_category_must_belong_to_type(client, auth_headers):
    ana = auth_headers("ana@example.com")

    response = client.post(
        "/transactions/",
        json={"name": "Oops", "amount": "10", "type": "expense", "category": "salary"},
        headers=ana,
    )

    assert response.status_code == 422


def test_update_and_delete(client, auth_headers):
    ana = auth_headers("ana@example.com")
    bia = auth_headers("bia@example.com")
    created = _create(client, ana)

    updated = client.put(
        f"/transactions/{created['id']}", json={"amount": "1600.00"}, headers=ana
    )
    invalid = client.put(
        f"/transactions/{created['id']}", json={"type": "expense"}, headers=ana
    )
    foreign = client.delete(f"/transactions/{created['id']}", headers=bia)

    assert Decimal(updated.json()["amount"]) == Decimal("1600.00")
    assert invalid.status_code == 400
    assert foreign.status_code == 404
    assert client.delete(f"/transactions/{created['id']}", headers=ana).status_code == 204


def test_balance_window_is_bounded(client, auth_headers):
    ana = auth_headers("ana@example.com")

    assert client.get("/transactions/balance?days=0", headers=ana).status_code == 422
