"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import List

from moro_scoring.domain.models import ScoringResult


class ScoringRequest(BaseModel):
    """Request body for POST /v1/scoring"""

    applicant_id: str = Field(..., min_length=1, description="Applicant identifier")
    requested_amount: float = Field(..., gt=0, allow_inf_nan=False, description="Requested financing amount (XOF)")


class ScoringFactorsSchema(BaseModel):
    financial_stability: float
    business_activity: float
    savings_behavior: float
    project_success_rate: float
    account_maturity: float


class ScoringResponse(BaseModel):
    """Response for POST /v1/scoring"""

    total_score: int
    factors: ScoringFactorsSchema
    risk_level: str
    recommendation: str
    reasoning: List[str]

    @classmethod
    def from_result(cls, result: ScoringResult) -> "ScoringResponse":
        return cls.model_validate(result.to_dict())


class ApplicationRequest(BaseModel):
    """Request body for POST /v1/applications"""

    entrepreneur_id: str = Field(..., min_length=1, description="Entrepreneur identifier")
    amount: float = Field(..., gt=0, allow_inf_nan=False, description="Requested financing amount (XOF)")
    description: str = Field(..., min_length=1, description="Purpose of the financing")


class ApplicationResponse(BaseModel):
    """Single financing application"""

    application_id: str
    entrepreneur_id: str
    amount: float
    description: str
    status: str
    score: int
    scoring: ScoringResponse
    created_at: str


class ApplicationListResponse(BaseModel):
    """Response for GET /v1/applications"""

    entrepreneur_id: str
    applications: List[ApplicationResponse]
