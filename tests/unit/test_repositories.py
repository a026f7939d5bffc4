"""Unit tests for the financing application repository"""

from datetime import datetime, timedelta, timezone
from sqlalchemy.orm import Session
from moro_scoring.domain.models import ApplicantProfile, ApplicationStatus
from moro_scoring.domain.scoring import score_profile
from moro_scoring.infrastructure.database.models import FinancingApplication
from moro_scoring.infrastructure.database.repositories import ApplicationRepository


def create(repo: ApplicationRepository, amount: float) -> FinancingApplication:
    return repo.create_application(
        entrepreneur_id="ent_1",
        amount=amount,
        description="Inventory",
        result=score_profile(ApplicantProfile(), amount),
        status=ApplicationStatus.SUBMITTED_TO_ADMIN,
    )


def test_create_application_sets_creation_time(db: Session):
    application = create(ApplicationRepository(db), 50_000)

    assert application.created_at is not None


def test_applications_listed_newest_first(db: Session):
    repo = ApplicationRepository(db)
    base = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
    created = []
    for offset_us, amount in ((0, 10_000), (250, 20_000), (500, 30_000)):
        application = create(repo, amount)
        application.created_at = base + timedelta(microseconds=offset_us)
        created.append(application.id)
    db.commit()

    listed = [a.id for a in repo.get_applications_by_entrepreneur("ent_1")]

    assert listed == list(reversed(created))


def test_listing_respects_limit(db: Session):
    repo = ApplicationRepository(db)
    for amount in (10_000, 20_000, 30_000):
        create(repo, amount)
    db.commit()

    assert len(repo.get_applications_by_entrepreneur("ent_1", limit=2)) == 2


def test_application_table_columns():
    assert set(FinancingApplication.__table__.columns.keys()) == {
        "id",
        "entrepreneur_id",
        "amount",
        "description",
        "score",
        "ai_score",
        "risk_level",
        "recommendation",
        "status",
        "created_at",
    }
