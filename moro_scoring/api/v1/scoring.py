"""POST /v1/scoring - financing eligibility score"""

import time
from fastapi import APIRouter, Depends, Request

from moro_scoring.api.v1.schemas import ScoringRequest, ScoringResponse
from moro_scoring.api.dependencies import get_profile_aggregator, get_request_id
from moro_scoring.api.errors import to_http_exception
from moro_scoring.services.aggregator import ProfileAggregator
from moro_scoring.services.scoring import score_applicant
from moro_scoring.domain.exceptions import DomainException
from moro_scoring.infrastructure.observability.metrics import record_scoring
from moro_scoring.infrastructure.observability.logging import log_scoring

router = APIRouter()


@router.post("/scoring", response_model=ScoringResponse)
async def compute_score(
    request_body: ScoringRequest,
    request: Request,
    aggregator: ProfileAggregator = Depends(get_profile_aggregator),
):
    """
    Score an applicant for a requested amount without persisting anything.

    Used by the application form to preview the score before submission.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = await score_applicant(aggregator, request_body.applicant_id, request_body.requested_amount)
    except DomainException as e:
        raise to_http_exception(e, request_id) from e

    duration_ms = (time.time() - start_time) * 1000
    record_scoring(result.total_score, result.recommendation.value)
    log_scoring(
        request_id,
        request_body.applicant_id,
        result.total_score,
        result.risk_level.value,
        result.recommendation.value,
        duration_ms,
    )

    return ScoringResponse.from_result(result)
