"""Mini README: Tests for the FastAPI tracker page.

These tests drive the application through FastAPI's TestClient: accepted
submissions redirect back to a page showing the new row and totals, rejected
ones re-render with the error dialog and the user's input intact, and the
menu actions open the about dialog or call the injected exit handler.
"""

from __future__ import annotations

from typing import List

import pytest
from fastapi.testclient import TestClient

from fintracker.configuration import TrackerSettings
from fintracker.finance import TrackerSession
from fintracker.interface import create_application


@pytest.fixture()
def session() -> TrackerSession:
    return TrackerSession()


@pytest.fixture()
def exit_calls() -> List[str]:
    return []


@pytest.fixture()
def client(session: TrackerSession, exit_calls: List[str]) -> TestClient:
    app = create_application(
        session=session,
        settings=TrackerSettings(currency_symbol="₱"),
        on_exit=lambda: exit_calls.append("exit"),
    )
    return TestClient(app)


def test_empty_page_shows_zero_totals(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert "Total Income: ₱0.00" in response.text
    assert "Total Expenses: ₱0.00" in response.text
    assert "Balance: ₱0.00" in response.text
    assert "Add Transaction" in response.text
    assert "error-dialog" not in response.text


def test_accepted_submission_redirects_and_renders_row(client: TestClient, session: TrackerSession) -> None:
    """Post/redirect/get clears the form and the page shows the fresh state."""

    response = client.post(
        "/transactions",
        data={"description": "Salary", "amount": "1000", "kind": "Income"},
        follow_redirects=False,
    )
    assert response.status_code == 303
    assert response.headers["location"] == "/"

    page = client.get("/")
    assert "<td>Salary</td>" in page.text
    assert "<td>Income</td>" in page.text
    assert "₱1000.00" in page.text
    assert "Balance: ₱1000.00" in page.text
    assert 'name="description" placeholder="Description" value=""' in page.text
    assert len(session.ledger) == 1


def test_summary_follows_each_submission(client: TestClient) -> None:
    client.post("/transactions", data={"description": "Salary", "amount": "1000", "kind": "Income"})
    page = client.post("/transactions", data={"description": "Rent", "amount": "300", "kind": "Expense"})

    assert page.status_code == 200
    assert "Total Income: ₱1000.00" in page.text
    assert "Total Expenses: ₱300.00" in page.text
    assert "Balance: ₱700.00" in page.text
    assert page.text.index("<td>Salary</td>") < page.text.index("<td>Rent</td>")


def test_missing_field_shows_validation_dialog(client: TestClient, session: TrackerSession) -> None:
    response = client.post("/transactions", data={"description": "", "amount": "50", "kind": "Income"})

    assert response.status_code == 400
    assert "error-dialog" in response.text
    assert "Validation Error" in response.text
    assert "All fields are required!" in response.text
    assert 'value="50"' in response.text
    assert len(session.ledger) == 0


def test_absent_kind_shows_validation_dialog(client: TestClient, session: TrackerSession) -> None:
    response = client.post("/transactions", data={"description": "Lunch", "amount": "12"})

    assert response.status_code == 400
    assert "All fields are required!" in response.text
    assert 'value="Lunch"' in response.text
    assert len(session.ledger) == 0


def test_invalid_amount_keeps_input_and_state(client: TestClient, session: TrackerSession) -> None:
    client.post("/transactions", data={"description": "Salary", "amount": "1000", "kind": "Income"})

    response = client.post("/transactions", data={"description": "Snack", "amount": "xx", "kind": "Expense"})

    assert response.status_code == 400
    assert "Invalid Input" in response.text
    assert "Amount must be a number!" in response.text
    assert 'value="Snack"' in response.text
    assert 'value="xx"' in response.text
    assert '<option value="Expense" selected>' in response.text
    assert "Balance: ₱1000.00" in response.text
    assert len(session.ledger) == 1


def test_about_dialog(client: TestClient) -> None:
    response = client.get("/about")

    assert response.status_code == 200
    assert "about-dialog" in response.text
    assert "Enhanced Financial Tracker v1.0" in response.text


def test_exit_invokes_handler_after_response(client: TestClient, exit_calls: List[str]) -> None:
    response = client.post("/exit")

    assert response.status_code == 200
    assert "has been closed" in response.text
    assert exit_calls == ["exit"]


def test_snapshot_reports_rows_and_totals(client: TestClient) -> None:
    client.post("/transactions", data={"description": "Salary", "amount": "1000", "kind": "Income"})
    client.post("/transactions", data={"description": "Rent", "amount": "-300", "kind": "Expense"})

    payload = client.get("/api/snapshot").json()

    assert payload["currency_symbol"] == "₱"
    assert payload["transactions"] == [
        {"description": "Salary", "kind": "Income", "amount": 1000.0},
        {"description": "Rent", "kind": "Expense", "amount": 300.0},
    ]
    assert payload["summary"] == {"total_income": 1000.0, "total_expenses": 300.0, "balance": 700.0}


def test_sessions_are_isolated_between_applications() -> None:
    first = TestClient(create_application(settings=TrackerSettings(), on_exit=lambda: None))
    second = TestClient(create_application(settings=TrackerSettings(), on_exit=lambda: None))

    first.post("/transactions", data={"description": "Salary", "amount": "10", "kind": "Income"})

    assert second.get("/api/snapshot").json()["transactions"] == []
