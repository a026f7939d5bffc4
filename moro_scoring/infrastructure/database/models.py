"""SQLAlchemy ORM models for financing applications"""

import uuid
from sqlalchemy import Column, Float, DateTime, Integer, Text, JSON
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import declarative_base
from moro_scoring.utils.date_utils import utc_now

Base = declarative_base()


class FinancingApplication(Base):
    """Financing request with the score computed at submission"""

    __tablename__ = "financing_applications"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    entrepreneur_id = Column(Text, nullable=False, index=True)
    amount = Column(Float, nullable=False)
    description = Column(Text, nullable=False)
    score = Column(Integer, nullable=False)
    ai_score = Column(JSON, nullable=False)
    risk_level = Column(Text, nullable=False)
    recommendation = Column(Text, nullable=False)
    status = Column(Text, nullable=False)
    # Microsecond resolution; primary sort key for listings
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)
