"""Expense tracker endpoints"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from tcs_gateway.api.v1.schemas import ExpenseListRequest, ExpenseSummaryResponse, ExpenseTypesResponse
from tcs_gateway.api.dependencies import get_request_id, get_settings
from tcs_gateway.config import Settings
from tcs_gateway.domain.expenses import EXPENSE_TYPES, STATUS_COLORS, summarize_expenses
from tcs_gateway.domain.exceptions import ExpenseLimitExceededError

router = APIRouter()


@router.post("/expenses/summary", response_model=ExpenseSummaryResponse)
def summarize_expense_list(
    request_body: ExpenseListRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """Totals by status for the submitted expense list"""
    request_id = get_request_id(request)

    try:
        expense_count = len(request_body.expenses)
        if expense_count > app_settings.max_expenses_per_request:
            raise ExpenseLimitExceededError(expense_count, app_settings.max_expenses_per_request)

        summary = summarize_expenses(request_body.to_domain())
        return ExpenseSummaryResponse.model_validate(summary)

    except ExpenseLimitExceededError as e:
        logging.warning(f"Expense limit exceeded: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=413, detail=str(e))


@router.get("/expenses/types", response_model=ExpenseTypesResponse)
def list_expense_types():
    """Expense type palette and status badge colors"""
    return ExpenseTypesResponse(types=list(EXPENSE_TYPES), status_colors=dict(STATUS_COLORS))
