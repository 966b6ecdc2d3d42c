"""Mini README: Tests for the FastAPI control panel.

Drives the routes through ``TestClient`` to confirm ledger errors map to the
right status codes and that responses carry recomputed balances.
"""

from __future__ import annotations

from urllib.parse import quote

import pytest
from fastapi.testclient import TestClient

from expense_splitter.interface import create_application
from expense_splitter.ledger import ExpenseLedger
from expense_splitter.notifications.providers import LoggingGateway


@pytest.fixture()
def gateway() -> LoggingGateway:
    return LoggingGateway()


@pytest.fixture()
def client(gateway: LoggingGateway) -> TestClient:
    ledger = ExpenseLedger(participants=["A", "B"])
    return TestClient(create_application(ledger=ledger, gateway=gateway))


def test_dashboard_renders_group(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert "No expenses logged yet." in response.text
    assert "A: Owes ₹0.00" in response.text


def test_dashboard_offers_ledger_controls(client: TestClient) -> None:
    """The page carries the forms and buttons that drive every ledger operation."""

    page = client.get("/").text
    assert 'id="participant-form" action="/participants"' in page
    assert 'id="expense-form" action="/expenses"' in page
    for field in ('name="description"', 'name="amount"', 'name="payer"'):
        assert field in page
    assert 'class="remove-participant" data-name="A"' in page
    assert 'id="clear-expenses"' in page
    assert 'id="notify-balances"' in page


def test_default_application_uses_seeded_group() -> None:
    client = TestClient(create_application())
    assert client.get("/state").json()["participants"] == ["Ayush", "Harsh", "Laxmikant", "Mudassir"]


def test_add_participant_and_reject_duplicate(client: TestClient) -> None:
    response = client.post("/participants", data={"name": "C"})
    assert response.status_code == 201
    assert response.json()["participants"] == ["A", "B", "C"]

    duplicate = client.post("/participants", data={"name": "C"})
    assert duplicate.status_code == 400
    assert duplicate.json()["detail"] == "Participant name is empty or already exists."


def test_add_expense_returns_balances(client: TestClient) -> None:
    """Recording an expense responds with the expense and fresh balances."""

    response = client.post("/expenses", data={"description": "lunch", "amount": "100", "payer": "A"})

    assert response.status_code == 201
    payload = response.json()
    assert payload["expense"]["summary"] == "lunch: ₹100.00 paid by A"
    assert payload["balances"] == pytest.approx({"A": 50.0, "B": -50.0})


@pytest.mark.parametrize(
    "form",
    [
        {"description": "", "amount": "10", "payer": "A"},
        {"description": "taxi", "amount": "-1", "payer": "A"},
        {"description": "taxi", "amount": "ten", "payer": "A"},
        {"description": "taxi", "amount": "10", "payer": "Z"},
    ],
)
def test_add_expense_validation_errors(client: TestClient, form: dict) -> None:
    response = client.post("/expenses", data=form)
    assert response.status_code == 400
    assert client.get("/state").json()["expenses"] == []


def test_remove_payer_conflicts(client: TestClient) -> None:
    """Removing a payer is refused with 409 and the group is unchanged."""

    client.post("/expenses", data={"description": "lunch", "amount": "100", "payer": "A"})

    response = client.delete("/participants/A")

    assert response.status_code == 409
    assert response.json()["detail"] == "A is involved in an expense and cannot be removed."
    assert client.get("/state").json()["participants"] == ["A", "B"]


def test_remove_participant_with_slash_in_name(client: TestClient) -> None:
    """Any name accepted on creation can also be removed, including ones with slashes."""

    assert client.post("/participants", data={"name": "Ann/Bob"}).status_code == 201
    encoded = "/participants/" + quote("Ann/Bob", safe="")

    client.post("/expenses", data={"description": "cab", "amount": "30", "payer": "Ann/Bob"})
    assert client.delete(encoded).status_code == 409

    client.delete("/expenses")
    response = client.delete(encoded)
    assert response.status_code == 200
    assert response.json()["participants"] == ["A", "B"]


def test_remove_participant(client: TestClient) -> None:
    response = client.delete("/participants/B")
    assert response.status_code == 200
    assert response.json()["participants"] == ["A"]

    assert client.delete("/participants/B").status_code == 400


def test_clear_expenses(client: TestClient) -> None:
    client.post("/expenses", data={"description": "lunch", "amount": "100", "payer": "A"})

    response = client.delete("/expenses")

    assert response.status_code == 200
    assert response.json()["removed"] == 1
    assert client.get("/balances").json() == {"balances": {"A": 0.0, "B": 0.0}}


def test_notify_fans_out(client: TestClient, gateway: LoggingGateway) -> None:
    client.post("/expenses", data={"description": "lunch", "amount": "100", "payer": "B"})

    response = client.post("/notify")

    assert response.status_code == 200
    assert response.json()["delivered_count"] == 2
    assert [body for _, body in gateway.outbox] == ["A owes ₹50.00", "B is owed ₹50.00"]
