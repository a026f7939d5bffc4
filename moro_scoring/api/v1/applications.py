"""Financing application intake and lookup"""

import time
import uuid
import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from moro_scoring.api.v1.schemas import (
    ApplicationListResponse,
    ApplicationRequest,
    ApplicationResponse,
    ScoringResponse,
)
from moro_scoring.api.dependencies import get_data_store_client, get_profile_aggregator, get_request_id
from moro_scoring.api.errors import to_http_exception
from moro_scoring.config import settings
from moro_scoring.domain.applications import determine_initial_status
from moro_scoring.infrastructure.clients.data_store import DataStoreClient
from moro_scoring.infrastructure.database.models import FinancingApplication
from moro_scoring.infrastructure.database.repositories import ApplicationRepository
from moro_scoring.infrastructure.database.session import get_db
from moro_scoring.infrastructure.observability.logging import log_scoring
from moro_scoring.infrastructure.observability.metrics import application_counter, record_scoring
from moro_scoring.services.aggregator import ProfileAggregator
from moro_scoring.services.scoring import score_applicant

router = APIRouter()


def _to_response(application: FinancingApplication) -> ApplicationResponse:
    return ApplicationResponse(
        application_id=str(application.id),
        entrepreneur_id=application.entrepreneur_id,
        amount=application.amount,
        description=application.description,
        status=application.status,
        score=application.score,
        scoring=ScoringResponse.model_validate(application.ai_score),
        created_at=application.created_at.isoformat(),
    )


@router.post("/applications", response_model=ApplicationResponse, status_code=201)
async def submit_application(
    request_body: ApplicationRequest,
    request: Request,
    db: Session = Depends(get_db),
    client: DataStoreClient = Depends(get_data_store_client),
    aggregator: ProfileAggregator = Depends(get_profile_aggregator),
):
    """
    Submit a financing application.

    Flow:
    1. Score the entrepreneur for the requested amount
    2. Route to the cooperative if the entrepreneur is a member, else to admins
    3. Persist the application with the full scoring snapshot
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = await score_applicant(aggregator, request_body.entrepreneur_id, request_body.amount)
        is_member = await client.is_cooperative_member(request_body.entrepreneur_id)
        status = determine_initial_status(is_member)

        repo = ApplicationRepository(db)
        application = repo.create_application(
            entrepreneur_id=request_body.entrepreneur_id,
            amount=request_body.amount,
            description=request_body.description,
            result=result,
            status=status,
        )
        db.commit()
        db.refresh(application)

    except Exception as e:
        db.rollback()
        raise to_http_exception(e, request_id) from e

    duration_ms = (time.time() - start_time) * 1000
    record_scoring(result.total_score, result.recommendation.value)
    application_counter.labels(status=status.value).inc()
    log_scoring(
        request_id,
        request_body.entrepreneur_id,
        result.total_score,
        result.risk_level.value,
        result.recommendation.value,
        duration_ms,
    )
    logging.info(
        "Financing application submitted",
        extra={"request_id": request_id, "application_id": str(application.id), "status": status.value},
    )

    return _to_response(application)


@router.get("/applications/{application_id}", response_model=ApplicationResponse)
def get_application(application_id: str, db: Session = Depends(get_db)):
    try:
        application_uuid = uuid.UUID(application_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid application ID format")

    application = ApplicationRepository(db).get_application_by_id(application_uuid)
    if not application:
        raise HTTPException(status_code=404, detail="Application not found")

    return _to_response(application)


@router.get("/applications", response_model=ApplicationListResponse)
def list_applications(
    entrepreneur_id: str = Query(..., min_length=1, description="Entrepreneur identifier"),
    db: Session = Depends(get_db),
):
    """Recent applications for an entrepreneur, newest first"""
    applications = ApplicationRepository(db).get_applications_by_entrepreneur(
        entrepreneur_id, limit=settings.history_limit
    )
    return ApplicationListResponse(
        entrepreneur_id=entrepreneur_id,
        applications=[_to_response(a) for a in applications],
    )
