"""Financing eligibility scoring engine - core business logic for credit decisions"""

import math
from typing import Callable, Dict, List, NamedTuple
from moro_scoring.domain.models import (
    ApplicantProfile,
    Recommendation,
    RiskLevel,
    ScoringFactors,
    ScoringResult,
)
from moro_scoring.domain.exceptions import InvalidInputError

# Normalization baselines (XOF amounts, counts, days)
BALANCE_BASELINE = 100_000
AVERAGE_TRANSACTION_BASELINE = 50_000
SAVINGS_BASELINE = 500_000
TRANSACTION_FREQUENCY_BASELINE = 50
OPERATIONS_BASELINE = 100
ACCOUNT_MATURITY_DAYS = 365

# Neutral score when the applicant has no project history
NEUTRAL_PROJECT_SCORE = 50.0
SAVINGS_PRESENCE_BONUS = 40.0

FACTOR_WEIGHTS: Dict[str, float] = {
    "financial_stability": 0.30,
    "business_activity": 0.25,
    "savings_behavior": 0.20,
    "project_success_rate": 0.15,
    "account_maturity": 0.10,
}

# (ratio strictly above, multiplier), checked in order; first match wins
AMOUNT_PENALTY_BANDS = [
    (3.0, 0.7),
    (2.0, 0.85),
]
REASONABLE_AMOUNT_RATIO = 0.5
REASONABLE_AMOUNT_BONUS = 1.1

LOW_RISK_THRESHOLD = 70
MEDIUM_RISK_THRESHOLD = 50

RECOMMENDATION_BY_RISK: Dict[RiskLevel, Recommendation] = {
    RiskLevel.LOW: Recommendation.APPROVE,
    RiskLevel.MEDIUM: Recommendation.REVIEW,
    RiskLevel.HIGH: Recommendation.REJECT,
}


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores (22.5 -> 23)"""
    return int(math.floor(value + 0.5))


def calculate_financial_stability(profile: ApplicantProfile) -> float:
    """
    Balance and income/expense ratio, 50 points each.

    A negative balance subtracts from the ratio score; only the sum is clamped.
    With no expenses the ratio is taken as 1 (25 points).
    """
    balance = profile.total_income - profile.total_expenses
    balance_score = min(50.0, (balance / BALANCE_BASELINE) * 50)

    income_expense_ratio = (
        profile.total_income / profile.total_expenses if profile.total_expenses > 0 else 1.0
    )
    ratio_score = min(50.0, income_expense_ratio * 25)

    return clamp(balance_score + ratio_score)


def calculate_business_activity(profile: ApplicantProfile) -> float:
    frequency_score = min(40.0, (profile.transaction_frequency / TRANSACTION_FREQUENCY_BASELINE) * 40)
    amount_score = min(30.0, (profile.average_transaction_amount / AVERAGE_TRANSACTION_BASELINE) * 30)
    operations_score = min(30.0, (profile.operations_count / OPERATIONS_BASELINE) * 30)
    return clamp(frequency_score + amount_score + operations_score)


def calculate_savings_behavior(profile: ApplicantProfile) -> float:
    savings_amount_score = min(60.0, (profile.savings_amount / SAVINGS_BASELINE) * 60)
    presence_score = SAVINGS_PRESENCE_BONUS if profile.savings_amount > 0 else 0.0
    return clamp(savings_amount_score + presence_score)


def calculate_project_success_rate(profile: ApplicantProfile) -> float:
    if profile.projects_count == 0:
        return NEUTRAL_PROJECT_SCORE
    return clamp((profile.completed_projects_count / profile.projects_count) * 100)


def calculate_account_maturity(profile: ApplicantProfile) -> float:
    return clamp((profile.account_age_days / ACCOUNT_MATURITY_DAYS) * 100)


def calculate_factors(profile: ApplicantProfile) -> ScoringFactors:
    return ScoringFactors(
        financial_stability=calculate_financial_stability(profile),
        business_activity=calculate_business_activity(profile),
        savings_behavior=calculate_savings_behavior(profile),
        project_success_rate=calculate_project_success_rate(profile),
        account_maturity=calculate_account_maturity(profile),
    )


def calculate_base_score(factors: ScoringFactors) -> float:
    """Weighted sum of the five factors, before any amount adjustment"""
    return sum(getattr(factors, name) * weight for name, weight in FACTOR_WEIGHTS.items())


def adjust_for_requested_amount(base_score: float, requested_amount: float, total_income: float) -> float:
    """
    Scale the base score by how large the request is relative to income.

    Bands: ratio > 3 -> x0.7, > 2 -> x0.85, < 0.5 -> x1.1, otherwise unchanged.
    Skipped entirely when the applicant has no recorded income.
    """
    if total_income <= 0:
        return base_score

    amount_ratio = requested_amount / total_income
    for threshold, multiplier in AMOUNT_PENALTY_BANDS:
        if amount_ratio > threshold:
            return base_score * multiplier
    if amount_ratio < REASONABLE_AMOUNT_RATIO:
        return base_score * REASONABLE_AMOUNT_BONUS
    return base_score


def determine_risk_level(total_score: int) -> RiskLevel:
    if total_score >= LOW_RISK_THRESHOLD:
        return RiskLevel.LOW
    if total_score >= MEDIUM_RISK_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


def recommend(risk_level: RiskLevel) -> Recommendation:
    return RECOMMENDATION_BY_RISK[risk_level]


class ReasoningRule(NamedTuple):
    subject: str  # factor name, or "total_score"
    applies: Callable[[float], bool]
    message: str


def _strong(value: float) -> bool:
    return value >= LOW_RISK_THRESHOLD


def _weak(value: float) -> bool:
    return value < MEDIUM_RISK_THRESHOLD


REASONING_RULES: List[ReasoningRule] = [
    ReasoningRule("financial_stability", _strong, "Solid financial stability with a healthy income/expense balance"),
    ReasoningRule("financial_stability", _weak, "Financial stability needs improvement, income/expense imbalance detected"),
    ReasoningRule("business_activity", _strong, "Regular and sustained business activity"),
    ReasoningRule("business_activity", _weak, "Limited business activity, more recorded transactions needed"),
    ReasoningRule("savings_behavior", _strong, "Good savings behavior demonstrated"),
    ReasoningRule("savings_behavior", _weak, "Insufficient savings, improvement recommended"),
    ReasoningRule("project_success_rate", _strong, "High project completion rate"),
    ReasoningRule("project_success_rate", _weak, "Project completion rate needs improvement"),
    ReasoningRule("total_score", _strong, "Excellent overall score, low default risk"),
    ReasoningRule("total_score", _weak, "Low overall score, high risk identified"),
]


def generate_reasoning(factors: ScoringFactors, total_score: int) -> List[str]:
    """Evaluate REASONING_RULES in order; account maturity has no rules"""
    values = {
        "financial_stability": factors.financial_stability,
        "business_activity": factors.business_activity,
        "savings_behavior": factors.savings_behavior,
        "project_success_rate": factors.project_success_rate,
        "total_score": total_score,
    }
    return [rule.message for rule in REASONING_RULES if rule.applies(values[rule.subject])]


def validate_requested_amount(requested_amount: float) -> None:
    """Raise InvalidInputError unless the amount is a finite positive number"""
    if isinstance(requested_amount, bool) or not isinstance(requested_amount, (int, float)):
        raise InvalidInputError("Requested amount must be a number")
    if not math.isfinite(requested_amount) or requested_amount <= 0:
        raise InvalidInputError("Requested amount must be a finite positive number")


def score_profile(profile: ApplicantProfile, requested_amount: float) -> ScoringResult:
    """
    Main entry point: score an applicant profile for a requested amount.

    Deterministic and side-effect free; identical inputs give identical results.
    """
    factors = calculate_factors(profile)
    base_score = calculate_base_score(factors)
    adjusted = adjust_for_requested_amount(base_score, requested_amount, profile.total_income)
    total_score = round_half_up(clamp(adjusted))
    risk_level = determine_risk_level(total_score)

    return ScoringResult(
        total_score=total_score,
        factors=factors,
        risk_level=risk_level,
        recommendation=recommend(risk_level),
        reasoning=generate_reasoning(factors, total_score),
    )
