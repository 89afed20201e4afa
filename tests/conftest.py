"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from tcs_gateway.api.main import create_app
from tcs_gateway.domain.models import ExpenseRecord


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def sample_expenses() -> list[ExpenseRecord]:
    """Six paid bills across five types, Mobile Recharge recurring"""
    return [
        ExpenseRecord(1, "Mobile Recharge", 399, "2024-01-15", "paid"),
        ExpenseRecord(2, "Mobile Recharge", 399, "2024-02-15", "paid"),
        ExpenseRecord(3, "Electricity Bill", 1250, "2024-01-10", "paid"),
        ExpenseRecord(4, "House Rent", 15000, "2024-01-01", "paid"),
        ExpenseRecord(5, "Internet Bill", 899, "2024-01-08", "paid"),
        ExpenseRecord(6, "Water Bill", 450, "2024-01-20", "paid"),
    ]


@pytest.fixture
def sample_expense_payload(sample_expenses: list[ExpenseRecord]) -> dict:
    """Same history as sample_expenses, shaped as a request body"""
    return {
        "expenses": [
            {
                "id": e.id,
                "type": e.type,
                "amount": e.amount,
                "date": e.date,
                "status": e.status,
            }
            for e in sample_expenses
        ]
    }
