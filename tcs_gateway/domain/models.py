"""Domain models - pure Python dataclasses representing expenses and score outputs"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Union


@dataclass(frozen=True)
class ExpenseRecord:
    """Single bill or expense entry tracked by the user"""

    id: Union[int, str]
    type: str  # free-text category, e.g. "Mobile Recharge"
    amount: float
    date: str  # not parsed, not used for scoring
    status: str  # "paid", "pending" or "overdue"
    description: str = ""


@dataclass
class ScoreFactors:
    """Normalized sub-scores feeding the TCS"""

    payment_history: float
    expense_consistency: float
    amount_stability: float
    diversity_bonus: float


@dataclass
class ScoreResult:
    """Output of the TCS calculator"""

    score: int
    factors: ScoreFactors


@dataclass(frozen=True)
class ScoreBand:
    """Closed score interval with its display label and color"""

    min_score: int
    max_score: int
    label: str
    color: str
    description: str
    suggestions: Tuple[str, ...] = ()

    def contains(self, score: int) -> bool:
        return self.min_score <= score <= self.max_score


@dataclass(frozen=True)
class FactorDetail:
    """Display metadata for a single score factor"""

    key: str
    name: str
    weight: float
    description: str
    tip: str


@dataclass
class FactorScore:
    """One factor's value with its display metadata and health level"""

    key: str
    name: str
    weight: float
    value: float
    percent: int
    level: str  # "strong", "moderate" or "weak"
    color: str


@dataclass
class ScoreReport:
    """Everything the score screen needs: score, breakdown, band and advice"""

    score: int
    factors: ScoreFactors
    band: ScoreBand
    progress_percent: float
    recommendations: List[str]
    breakdown: List[FactorScore]


@dataclass
class ExpenseSummary:
    """Aggregated totals shown on the expense tracker"""

    expense_count: int
    total_amount: float
    paid_amount: float
    pending_amount: float
    overdue_amount: float
    distinct_types: int
    count_by_status: Dict[str, int] = field(default_factory=dict)
