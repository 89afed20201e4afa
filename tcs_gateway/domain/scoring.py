"""TCS calculator - turns an expense history into a 300-850 trust score"""

import math
from statistics import fmean, pstdev
from typing import List, Sequence, Tuple
from tcs_gateway.domain.models import (
    ExpenseRecord,
    FactorDetail,
    FactorScore,
    ScoreBand,
    ScoreFactors,
    ScoreReport,
    ScoreResult,
)
from tcs_gateway.domain.expenses import PAID, OVERDUE, group_by_type

BASE_SCORE = 300
MAX_SCORE = 850

FACTOR_WEIGHTS = {
    "payment_history": 0.35,
    "expense_consistency": 0.25,
    "amount_stability": 0.25,
    "diversity_bonus": 0.15,
}

OVERDUE_PENALTY = 2.0
RECURRING_MIN_COUNT = 2
NEUTRAL_STABILITY = 0.5
DIVERSITY_SATURATION = 8

# Highest first; classification walks this in order.
SCORE_BANDS: Tuple[ScoreBand, ...] = (
    ScoreBand(
        750, 850, "Excellent", "#10b981", "Outstanding financial behavior",
        (
            "Excellent! You're in the top tier of TCS scores",
            "Keep maintaining your consistent payment habits",
            "Continue diversifying your tracked expenses",
            "Your score puts you ahead of 90% of users",
        ),
    ),
    ScoreBand(
        700, 749, "Very Good", "#22c55e", "Great payment history",
        (
            "Very Good! You're close to excellent territory",
            "Focus on payment consistency to reach 750+",
            "Track more expense types for diversity bonus",
            "Maintain timely payments for the next 2-3 months",
        ),
    ),
    ScoreBand(
        650, 699, "Good", "#84cc16", "Good financial habits",
        (
            "Good progress! You're on the right track",
            "Pay all bills before due dates this month",
            "Add more regular expenses like mobile recharge",
            "Include rent and utility payments consistently",
        ),
    ),
    ScoreBand(
        600, 649, "Fair", "#eab308", "Room for improvement",
        (
            "Fair score - significant improvement possible",
            "Focus on eliminating any overdue payments",
            "Upload and track at least 5 different expense types",
            "Set payment reminders to avoid late payments",
        ),
    ),
    ScoreBand(
        550, 599, "Poor", "#f59e0b", "Needs attention",
        (
            "Poor score - immediate action needed",
            "Clear any overdue payments immediately",
            "Complete KYC verification for score boost",
            "Start with 2-3 regular monthly payments",
        ),
    ),
    ScoreBand(
        300, 549, "Very Poor", "#ef4444", "Requires immediate action",
        (
            "Very Poor - urgent improvement required",
            "Address all overdue payments first",
            "Begin by tracking just 1-2 regular expenses",
            "Complete basic KYC for immediate 50+ point boost",
        ),
    ),
)

FACTOR_DETAILS: Tuple[FactorDetail, ...] = (
    FactorDetail(
        key="payment_history",
        name="Payment History",
        weight=FACTOR_WEIGHTS["payment_history"],
        description="Your track record of paying bills on time",
        tip="Always pay bills before due date to maintain good history",
    ),
    FactorDetail(
        key="expense_consistency",
        name="Expense Consistency",
        weight=FACTOR_WEIGHTS["expense_consistency"],
        description="Regular pattern of expense payments",
        tip="Make regular payments for utilities and subscriptions",
    ),
    FactorDetail(
        key="amount_stability",
        name="Amount Stability",
        weight=FACTOR_WEIGHTS["amount_stability"],
        description="Consistency in payment amounts",
        tip="Maintain similar payment amounts for recurring expenses",
    ),
    FactorDetail(
        key="diversity_bonus",
        name="Expense Diversity",
        weight=FACTOR_WEIGHTS["diversity_bonus"],
        description="Variety of different expense types",
        tip="Track different types of expenses to show financial responsibility",
    ),
)

RECOMMEND_PAY_ON_TIME = "Pay your bills on time to improve payment history"
RECOMMEND_REGULAR_PAYMENTS = "Make regular payments for consistent expense tracking"
RECOMMEND_STABLE_AMOUNTS = "Try to maintain consistent payment amounts"
RECOMMEND_MORE_TYPES = "Track more types of expenses to show financial responsibility"
RECOMMEND_KEEP_GOING = "Excellent! Keep maintaining your payment habits"


def payment_history(expenses: Sequence[ExpenseRecord]) -> float:
    """
    Share of paid entries minus twice the share of overdue entries, floored at 0.

    Pending entries are neutral.
    """
    if not expenses:
        return 0.0

    total = len(expenses)
    paid_rate = sum(1 for e in expenses if e.status == PAID) / total
    overdue_rate = sum(1 for e in expenses if e.status == OVERDUE) / total

    return max(0.0, paid_rate - OVERDUE_PENALTY * overdue_rate)


def expense_consistency(expenses: Sequence[ExpenseRecord]) -> float:
    """Fraction of distinct expense types that recur (2+ entries)"""
    groups = group_by_type(expenses)
    if not groups:
        return 0.0

    recurring = sum(1 for records in groups.values() if len(records) >= RECURRING_MIN_COUNT)
    return recurring / len(groups)


def type_stability(amounts: Sequence[float]) -> float:
    """1 - coefficient of variation, floored at 0. Zero mean counts as unstable."""
    largest = max(amounts)
    if largest <= 0:
        return 0.0

    # CV is scale-free; dividing by the largest amount keeps sums finite
    scaled = [amount / largest for amount in amounts]
    mean = fmean(scaled)
    if mean <= 0:
        return 0.0

    coefficient_of_variation = pstdev(scaled, mu=mean) / mean
    return max(0.0, 1.0 - coefficient_of_variation)


def amount_stability(expenses: Sequence[ExpenseRecord]) -> float:
    """
    Average stability of amounts across recurring expense types.

    Returns the neutral 0.5 when there is not enough repetition to judge:
    fewer than 2 records overall, or no type with 2+ records.
    """
    if len(expenses) < RECURRING_MIN_COUNT:
        return NEUTRAL_STABILITY

    stabilities = [
        type_stability([e.amount for e in records])
        for records in group_by_type(expenses).values()
        if len(records) >= RECURRING_MIN_COUNT
    ]

    return fmean(stabilities) if stabilities else NEUTRAL_STABILITY


def diversity_bonus(expenses: Sequence[ExpenseRecord]) -> float:
    """Linear ramp on distinct types, saturating at 8"""
    distinct_types = len({e.type for e in expenses})
    return min(distinct_types / DIVERSITY_SATURATION, 1.0)


def calculate_factors(expenses: Sequence[ExpenseRecord]) -> ScoreFactors:
    """Derive all four factors. Empty history scores zero everywhere."""
    if not expenses:
        return ScoreFactors(
            payment_history=0.0,
            expense_consistency=0.0,
            amount_stability=0.0,
            diversity_bonus=0.0,
        )

    return ScoreFactors(
        payment_history=payment_history(expenses),
        expense_consistency=expense_consistency(expenses),
        amount_stability=amount_stability(expenses),
        diversity_bonus=diversity_bonus(expenses),
    )


def weighted_sum(factors: ScoreFactors) -> float:
    return sum(getattr(factors, name) * weight for name, weight in FACTOR_WEIGHTS.items())


def scale_score(weighted: float) -> int:
    """
    Map a [0, 1] composite onto the 300-850 range.

    Halves round up, then the result is clamped to the range.
    """
    raw = BASE_SCORE + weighted * (MAX_SCORE - BASE_SCORE)
    score = math.floor(raw + 0.5)
    return min(max(score, BASE_SCORE), MAX_SCORE)


def calculate_score(expenses: Sequence[ExpenseRecord]) -> ScoreResult:
    """
    Calculate the Trust & Credit Score for an expense history.

    Scoring weights:
    - 35%: Payment history (paid vs overdue)
    - 25%: Expense consistency (recurring types)
    - 25%: Amount stability (low variation within a type)
    - 15%: Diversity (number of distinct types, up to 8)

    Never raises; an empty history scores 300.
    """
    factors = calculate_factors(expenses)
    return ScoreResult(score=scale_score(weighted_sum(factors)), factors=factors)


def classify_score(score: int) -> ScoreBand:
    """
    Map a score to its band.

    Bands are checked highest first by lower bound, so anything under 300
    falls through to the lowest band.
    """
    for band in SCORE_BANDS:
        if score >= band.min_score:
            return band
    return SCORE_BANDS[-1]


def score_status(score: int) -> str:
    return classify_score(score).label


def score_color(score: int) -> str:
    return classify_score(score).color


def score_progress(score: int) -> float:
    """Position of the score within 300-850 as a percentage"""
    return (score - BASE_SCORE) / (MAX_SCORE - BASE_SCORE) * 100


def factor_health(value: float) -> Tuple[str, str]:
    """Qualitative level and display color for a factor value"""
    if value > 0.7:
        return "strong", "#10b981"
    if value > 0.4:
        return "moderate", "#f59e0b"
    return "weak", "#ef4444"


def factor_breakdown(factors: ScoreFactors) -> List[FactorScore]:
    """Per-factor values as whole percentages with health level, in catalogue order"""
    breakdown = []
    for detail in FACTOR_DETAILS:
        value = getattr(factors, detail.key)
        level, color = factor_health(value)
        breakdown.append(
            FactorScore(
                key=detail.key,
                name=detail.name,
                weight=detail.weight,
                value=value,
                percent=math.floor(value * 100 + 0.5),
                level=level,
                color=color,
            )
        )
    return breakdown


def recommend(score: int, factors: ScoreFactors) -> List[str]:
    """Advice driven by weak factors; each threshold is checked independently"""
    recommendations = []

    if factors.payment_history < 0.8:
        recommendations.append(RECOMMEND_PAY_ON_TIME)

    if factors.expense_consistency < 0.6:
        recommendations.append(RECOMMEND_REGULAR_PAYMENTS)

    if factors.amount_stability < 0.6:
        recommendations.append(RECOMMEND_STABLE_AMOUNTS)

    if factors.diversity_bonus < 0.5:
        recommendations.append(RECOMMEND_MORE_TYPES)

    if score >= 750:
        recommendations.append(RECOMMEND_KEEP_GOING)

    return recommendations


def build_score_report(expenses: Sequence[ExpenseRecord]) -> ScoreReport:
    """
    Main entry point: score an expense history and assemble the full report.

    Returns ScoreReport with score, factors, band, progress, recommendations
    and the per-factor breakdown.
    """
    result = calculate_score(expenses)

    return ScoreReport(
        score=result.score,
        factors=result.factors,
        band=classify_score(result.score),
        progress_percent=score_progress(result.score),
        recommendations=recommend(result.score, result.factors),
        breakdown=factor_breakdown(result.factors),
    )
