"""
E2E tests for user personas scored through the full HTTP stack.

User personas:
- reliable_payer: Every recurring bill paid, stable amounts, wide variety
- late_payer: Recurring bills but frequently overdue
- newcomer: Only one bill tracked so far
- irregular_spender: Paid on time but amounts swing wildly
"""

import pytest
from fastapi.testclient import TestClient


def expense(expense_id, expense_type, amount, status, day="2024-01-01"):
    return {"id": expense_id, "type": expense_type, "amount": amount, "date": day, "status": status}


def score(client: TestClient, expenses: list[dict]) -> dict:
    response = client.post("/v1/score", json={"expenses": expenses})
    assert response.status_code == 200
    return response.json()


def test_reliable_payer_excellent(client: TestClient):
    """
    reliable_payer: 8 recurring types, identical monthly amounts, all paid
    Expected: top of the range with only the keep-going message
    """
    bills = [
        ("Mobile Recharge", 399),
        ("Electricity Bill", 1250),
        ("House Rent", 15000),
        ("Internet Bill", 899),
        ("Water Bill", 450),
        ("Gas Bill", 800),
        ("Insurance", 2500),
        ("Other", 300),
    ]
    expenses = [
        expense(f"{name}-{month}", name, amount, "paid", f"2024-0{month}-05")
        for name, amount in bills
        for month in (1, 2, 3)
    ]

    data = score(client, expenses)

    assert data["score"] == 850
    assert data["band"]["label"] == "Excellent"
    assert data["recommendations"] == ["Excellent! Keep maintaining your payment habits"]


def test_late_payer_penalized(client: TestClient):
    """
    late_payer: half of the bills overdue
    Expected: payment history wiped out, advice to pay on time
    """
    expenses = [
        expense(1, "Electricity Bill", 1250, "paid"),
        expense(2, "Electricity Bill", 1250, "overdue"),
        expense(3, "House Rent", 15000, "paid"),
        expense(4, "House Rent", 15000, "overdue"),
    ]

    data = score(client, expenses)

    assert data["factors"]["payment_history"] == 0
    assert data["score"] < 650
    assert "Pay your bills on time to improve payment history" in data["recommendations"]


def test_newcomer_neutral_stability(client: TestClient):
    """
    newcomer: a single pending bill
    Expected: neutral stability, low score, every weak-factor hint
    """
    data = score(client, [expense(1, "Mobile Recharge", 399, "pending")])

    assert data["factors"]["amount_stability"] == pytest.approx(0.5)
    # 0.25 * 0.5 + 0.15 * 0.125 = 0.14375 -> 379.06
    assert data["score"] == 379
    assert data["band"]["label"] == "Very Poor"
    assert len(data["recommendations"]) == 4


def test_irregular_spender_stability_hint(client: TestClient):
    """
    irregular_spender: pays on time, amounts vary a lot within each type
    Expected: stability advice even though payment history is perfect
    """
    expenses = [
        expense(1, "Electricity Bill", 200, "paid"),
        expense(2, "Electricity Bill", 2000, "paid"),
        expense(3, "Mobile Recharge", 99, "paid"),
        expense(4, "Mobile Recharge", 999, "paid"),
    ]

    data = score(client, expenses)

    assert data["factors"]["payment_history"] == pytest.approx(1.0)
    assert data["factors"]["amount_stability"] < 0.6
    assert "Try to maintain consistent payment amounts" in data["recommendations"]
    assert "Pay your bills on time to improve payment history" not in data["recommendations"]
