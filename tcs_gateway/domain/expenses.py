"""Expense tracker operations over an explicit list of expense records"""

from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple
from tcs_gateway.domain.models import ExpenseRecord, ExpenseSummary
from tcs_gateway.domain.exceptions import InvalidExpenseDataError

PAID = "paid"
PENDING = "pending"
OVERDUE = "overdue"
PAYMENT_STATUSES = (PAID, PENDING, OVERDUE)

STATUS_COLORS = {
    PAID: "#10b981",
    PENDING: "#f59e0b",
    OVERDUE: "#ef4444",
}

# Palette offered when adding an expense. Scoring accepts any label.
EXPENSE_TYPES = (
    "Mobile Recharge",
    "Electricity Bill",
    "House Rent",
    "Internet Bill",
    "Water Bill",
    "Gas Bill",
    "Insurance",
    "Other",
)


def group_by_type(expenses: Sequence[ExpenseRecord]) -> Dict[str, List[ExpenseRecord]]:
    """Group records by their type label, preserving first-seen order"""
    groups: Dict[str, List[ExpenseRecord]] = {}
    for expense in expenses:
        groups.setdefault(expense.type, []).append(expense)
    return groups


def next_expense_id(expenses: Sequence[ExpenseRecord]) -> int:
    """Highest integer id plus one; string ids are ignored"""
    int_ids = [e.id for e in expenses if isinstance(e.id, int) and not isinstance(e.id, bool)]
    return max(int_ids, default=0) + 1


def add_expense(
    expenses: Sequence[ExpenseRecord],
    expense_type: str,
    amount: float,
    description: str = "",
    on: Optional[date] = None,
) -> Tuple[ExpenseRecord, ...]:
    """
    Record a new pending expense.

    The new entry is placed first (newest first) and dated today unless
    `on` is given. Returns a new tuple; `expenses` is left untouched.
    """
    if not expense_type or not expense_type.strip():
        raise InvalidExpenseDataError("Expense type is required")
    if amount is None or amount <= 0:
        raise InvalidExpenseDataError("Expense amount must be greater than zero")

    expense = ExpenseRecord(
        id=next_expense_id(expenses),
        type=expense_type.strip(),
        amount=amount,
        date=(on or date.today()).isoformat(),
        status=PENDING,
        description=description,
    )
    return (expense, *expenses)


def summarize_expenses(expenses: Sequence[ExpenseRecord]) -> ExpenseSummary:
    """Totals by status for the tracker header"""
    amount_by_status = {status: 0.0 for status in PAYMENT_STATUSES}
    count_by_status = {status: 0 for status in PAYMENT_STATUSES}

    for expense in expenses:
        if expense.status in amount_by_status:
            amount_by_status[expense.status] += expense.amount
            count_by_status[expense.status] += 1

    return ExpenseSummary(
        expense_count=len(expenses),
        total_amount=sum(e.amount for e in expenses),
        paid_amount=amount_by_status[PAID],
        pending_amount=amount_by_status[PENDING],
        overdue_amount=amount_by_status[OVERDUE],
        distinct_types=len(group_by_type(expenses)),
        count_by_status=count_by_status,
    )
