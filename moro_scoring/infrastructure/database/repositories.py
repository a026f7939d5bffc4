"""Data access layer for financing applications"""

import uuid
from typing import List, Optional
from sqlalchemy.orm import Session
from moro_scoring.infrastructure.database.models import FinancingApplication
from moro_scoring.domain.models import ApplicationStatus, ScoringResult


class ApplicationRepository:
    """Repository for financing applications"""

    def __init__(self, db: Session):
        self.db = db

    def create_application(
        self,
        entrepreneur_id: str,
        amount: float,
        description: str,
        result: ScoringResult,
        status: ApplicationStatus,
    ) -> FinancingApplication:
        """Persist a scored application to the database"""
        db_application = FinancingApplication(
            entrepreneur_id=entrepreneur_id,
            amount=amount,
            description=description,
            score=result.total_score,
            ai_score=result.to_dict(),
            risk_level=result.risk_level.value,
            recommendation=result.recommendation.value,
            status=status.value,
        )
        self.db.add(db_application)
        self.db.flush()  # Get ID without committing
        return db_application

    def get_application_by_id(self, application_id: uuid.UUID) -> Optional[FinancingApplication]:
        return (
            self.db.query(FinancingApplication)
            .filter(FinancingApplication.id == application_id)
            .first()
        )

    def get_applications_by_entrepreneur(self, entrepreneur_id: str, limit: int = 20) -> List[FinancingApplication]:
        """Fetch recent applications for an entrepreneur, newest first"""
        return (
            self.db.query(FinancingApplication)
            .filter(FinancingApplication.entrepreneur_id == entrepreneur_id)
            .order_by(FinancingApplication.created_at.desc(), FinancingApplication.id.desc())
            .limit(limit)
            .all()
        )
