"""Translation of domain errors into HTTP responses"""

import logging
from fastapi import HTTPException
from moro_scoring.config import settings
from moro_scoring.domain.exceptions import ApplicantNotFoundError, DataAccessError, InvalidInputError
from moro_scoring.infrastructure.observability.metrics import (
    applicant_not_found_counter,
    data_store_failures_counter,
)


def to_http_exception(error: Exception, request_id: str) -> HTTPException:
    """
    Map a failure raised while scoring to the response the client should see.

    - InvalidInputError: 422, caller must fix the request
    - ApplicantNotFoundError: 404, terminal
    - DataAccessError: 503 with Retry-After, infrastructure state not creditworthiness
    - anything else: 500
    """
    if isinstance(error, InvalidInputError):
        logging.warning(f"Invalid input: {error}", extra={"request_id": request_id})
        return HTTPException(status_code=422, detail=str(error))

    if isinstance(error, ApplicantNotFoundError):
        applicant_not_found_counter.inc()
        logging.warning(f"Applicant not found: {error.applicant_id}", extra={"request_id": request_id})
        return HTTPException(status_code=404, detail="Applicant not found")

    if isinstance(error, DataAccessError):
        data_store_failures_counter.inc()
        logging.error(f"Data store error: {error}", extra={"request_id": request_id})
        return HTTPException(
            status_code=503,
            detail="Data store unavailable, please retry",
            headers={"Retry-After": str(settings.data_store_retry_after_seconds)},
        )

    logging.error(f"Unexpected error: {error}", extra={"request_id": request_id})
    return HTTPException(status_code=500, detail="Internal server error")
