"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Recommendation(str, Enum):
    APPROVE = "approve"
    REVIEW = "review"
    REJECT = "reject"


class ApplicationStatus(str, Enum):
    """Initial routing of a submitted financing application"""

    SUBMITTED_TO_COOP = "submitted_to_coop"
    SUBMITTED_TO_ADMIN = "submitted_to_admin"


@dataclass
class Account:
    """Applicant identity record from the auth store"""

    applicant_id: str
    created_at: Optional[datetime]


@dataclass
class Operation:
    """Recorded income or expense transaction"""

    type: str  # "income" or "expense"
    amount: float


@dataclass
class Project:
    """Tracked funding goal"""

    status: str


@dataclass
class SavingsGoal:
    """Savings accumulation target; amount is the current balance"""

    amount: float


@dataclass(frozen=True)
class ApplicantProfile:
    """Activity snapshot assembled for a single scoring request"""

    operations_count: int = 0
    total_income: float = 0.0
    total_expenses: float = 0.0
    projects_count: int = 0
    completed_projects_count: int = 0
    savings_amount: float = 0.0
    account_age_days: int = 0
    transaction_frequency: int = 0
    average_transaction_amount: float = 0.0


@dataclass(frozen=True)
class ScoringFactors:
    """Weighted sub-scores, each within [0, 100]"""

    financial_stability: float
    business_activity: float
    savings_behavior: float
    project_success_rate: float
    account_maturity: float


@dataclass(frozen=True)
class ScoringResult:
    """Output of the financing eligibility assessment"""

    total_score: int
    factors: ScoringFactors
    risk_level: RiskLevel
    recommendation: Recommendation
    reasoning: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_score": self.total_score,
            "factors": asdict(self.factors),
            "risk_level": self.risk_level.value,
            "recommendation": self.recommendation.value,
            "reasoning": list(self.reasoning),
        }
