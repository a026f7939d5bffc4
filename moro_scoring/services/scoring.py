"""Scoring operation: validate, aggregate, score"""

from moro_scoring.domain.models import ScoringResult
from moro_scoring.domain.scoring import score_profile, validate_requested_amount
from moro_scoring.services.aggregator import ProfileAggregator


async def score_applicant(
    aggregator: ProfileAggregator,
    applicant_id: str,
    requested_amount: float,
) -> ScoringResult:
    """
    Score an applicant for a requested financing amount.

    The amount is validated before any data store read. Aggregator errors
    (ApplicantNotFoundError, DataAccessError) propagate unchanged.
    """
    validate_requested_amount(requested_amount)
    profile = await aggregator.aggregate(applicant_id)
    return score_profile(profile, requested_amount)
