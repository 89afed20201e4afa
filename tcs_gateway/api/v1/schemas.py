"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Literal, Union

from tcs_gateway.domain.models import ExpenseRecord

MAX_EXPENSE_AMOUNT = 1e12


class ExpenseSchema(BaseModel):
    """Single expense record as submitted by the client"""

    id: Union[int, str] = Field(..., description="Caller-assigned identifier")
    type: str = Field(..., min_length=1, description="Expense category label")
    amount: float = Field(..., ge=0, le=MAX_EXPENSE_AMOUNT, description="Amount in the user's currency")
    date: str = Field("", description="Calendar date, stored as given")
    status: Literal["paid", "pending", "overdue"]
    description: str = ""

    def to_domain(self) -> ExpenseRecord:
        return ExpenseRecord(
            id=self.id,
            type=self.type,
            amount=self.amount,
            date=self.date,
            status=self.status,
            description=self.description,
        )


class ExpenseListRequest(BaseModel):
    """Request body carrying the caller's current expense list"""

    expenses: List[ExpenseSchema] = Field(default_factory=list)

    def to_domain(self) -> List[ExpenseRecord]:
        return [expense.to_domain() for expense in self.expenses]


class FactorsSchema(BaseModel):
    """The four score factors"""

    model_config = ConfigDict(from_attributes=True)

    payment_history: float
    expense_consistency: float
    amount_stability: float
    diversity_bonus: float


class BandSchema(BaseModel):
    """Score band with display metadata"""

    model_config = ConfigDict(from_attributes=True)

    min_score: int
    max_score: int
    label: str
    color: str
    description: str
    suggestions: List[str]


class FactorScoreSchema(BaseModel):
    """One factor's value with display metadata and health level"""

    model_config = ConfigDict(from_attributes=True)

    key: str
    name: str
    weight: float
    value: float
    percent: int
    level: str
    color: str


class ScoreResponse(BaseModel):
    """Response for POST /v1/score"""

    model_config = ConfigDict(from_attributes=True)

    score: int
    factors: FactorsSchema
    band: BandSchema
    progress_percent: float
    recommendations: List[str]
    breakdown: List[FactorScoreSchema]


class FactorDetailSchema(BaseModel):
    """Display metadata for one factor"""

    model_config = ConfigDict(from_attributes=True)

    key: str
    name: str
    weight: float
    description: str
    tip: str


class RecommendationRequest(BaseModel):
    """Request body for POST /v1/recommendations"""

    score: int
    factors: FactorsSchema


class RecommendationResponse(BaseModel):
    """Response for POST /v1/recommendations"""

    recommendations: List[str]


class ExpenseSummaryResponse(BaseModel):
    """Response for POST /v1/expenses/summary"""

    model_config = ConfigDict(from_attributes=True)

    expense_count: int
    total_amount: float
    paid_amount: float
    pending_amount: float
    overdue_amount: float
    distinct_types: int
    count_by_status: Dict[str, int]


class ExpenseTypesResponse(BaseModel):
    """Response for GET /v1/expenses/types"""

    types: List[str]
    status_colors: Dict[str, str]
