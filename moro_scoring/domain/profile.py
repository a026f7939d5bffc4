"""Applicant profile aggregation from raw activity records"""

from datetime import datetime
from typing import List
from moro_scoring.domain.models import Account, ApplicantProfile, Operation, Project, SavingsGoal
from moro_scoring.utils.date_utils import whole_days_between

INCOME = "income"
EXPENSE = "expense"
PROJECT_COMPLETED = "completed"


def build_profile(
    account: Account,
    operations: List[Operation],
    projects: List[Project],
    savings: List[SavingsGoal],
    evaluated_at: datetime,
) -> ApplicantProfile:
    """
    Fold an applicant's records into an ApplicantProfile.

    Rules:
    - Income and expense totals come from operation type; other types only count
    - Only projects with status "completed" count as completed
    - Savings is the sum of current goal amounts, not targets
    - Missing account creation date yields an account age of 0 days
    """
    total_income = sum(o.amount for o in operations if o.type == INCOME)
    total_expenses = sum(o.amount for o in operations if o.type == EXPENSE)
    operations_count = len(operations)

    average_transaction_amount = (
        (total_income + total_expenses) / operations_count if operations_count > 0 else 0.0
    )

    account_age_days = (
        whole_days_between(account.created_at, evaluated_at)
        if account.created_at is not None
        else 0
    )

    return ApplicantProfile(
        operations_count=operations_count,
        total_income=float(total_income),
        total_expenses=float(total_expenses),
        projects_count=len(projects),
        completed_projects_count=sum(1 for p in projects if p.status == PROJECT_COMPLETED),
        savings_amount=float(sum(s.amount for s in savings)),
        account_age_days=account_age_days,
        transaction_frequency=operations_count,
        average_transaction_amount=float(average_transaction_amount),
    )
