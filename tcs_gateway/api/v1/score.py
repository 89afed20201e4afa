"""TCS score endpoints"""

import time
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request

from tcs_gateway.api.v1.schemas import (
    BandSchema,
    ExpenseListRequest,
    FactorDetailSchema,
    RecommendationRequest,
    RecommendationResponse,
    ScoreResponse,
)
from tcs_gateway.api.dependencies import get_request_id, get_settings
from tcs_gateway.config import Settings
from tcs_gateway.domain.models import ScoreFactors
from tcs_gateway.domain.scoring import (
    FACTOR_DETAILS,
    SCORE_BANDS,
    build_score_report,
    classify_score,
    recommend,
)
from tcs_gateway.domain.exceptions import ExpenseLimitExceededError
from tcs_gateway.infrastructure.observability.metrics import record_score
from tcs_gateway.infrastructure.observability.logging import log_score

router = APIRouter()


@router.post("/score", response_model=ScoreResponse)
def calculate_tcs_score(
    request_body: ExpenseListRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Score the submitted expense history.

    Flow:
    1. Enforce the per-request expense limit
    2. Calculate factors, score and band
    3. Record metrics and log the outcome
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        expense_count = len(request_body.expenses)
        if expense_count > app_settings.max_expenses_per_request:
            raise ExpenseLimitExceededError(expense_count, app_settings.max_expenses_per_request)

        report = build_score_report(request_body.to_domain())

        duration_ms = (time.time() - start_time) * 1000
        record_score(report.score, report.band.label, expense_count)
        log_score(request_id, expense_count, report.score, report.band.label, duration_ms)

        return ScoreResponse.model_validate(report)

    except ExpenseLimitExceededError as e:
        logging.warning(f"Expense limit exceeded: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=413, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/score/bands", response_model=List[BandSchema])
def list_score_bands():
    """All score bands, highest first"""
    return [BandSchema.model_validate(band) for band in SCORE_BANDS]


@router.get("/score/factors", response_model=List[FactorDetailSchema])
def list_score_factors():
    """Factor catalogue with weights and tips"""
    return [FactorDetailSchema.model_validate(detail) for detail in FACTOR_DETAILS]


@router.get("/score/{score}/classification", response_model=BandSchema)
def get_score_classification(score: int):
    """Band for an arbitrary score"""
    return BandSchema.model_validate(classify_score(score))


@router.post("/recommendations", response_model=RecommendationResponse)
def get_recommendations(request_body: RecommendationRequest):
    """Recommendations for a score and its factors"""
    factors = ScoreFactors(**request_body.factors.model_dump())
    return RecommendationResponse(recommendations=recommend(request_body.score, factors))
