"""Pytest fixtures for testing"""

import pytest
from datetime import timedelta
from typing import Generator, List, Optional
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from moro_scoring.api.main import create_app
from moro_scoring.api.dependencies import get_data_store_client
from moro_scoring.infrastructure.database.models import Base
from moro_scoring.infrastructure.database.session import get_db
from moro_scoring.domain.models import Account, Operation, Project, SavingsGoal
from moro_scoring.utils.date_utils import utc_now


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeDataStoreClient:
    """In-memory stand-in for DataStoreClient"""

    def __init__(
        self,
        account: Optional[Account] = None,
        operations: Optional[List[Operation]] = None,
        projects: Optional[List[Project]] = None,
        savings: Optional[List[SavingsGoal]] = None,
        cooperative_member: bool = False,
        error: Optional[Exception] = None,
    ):
        self.account = account
        self.operations = operations or []
        self.projects = projects or []
        self.savings = savings or []
        self.cooperative_member = cooperative_member
        self.error = error
        self.calls: List[str] = []

    async def _read(self, name: str, value):
        self.calls.append(name)
        if self.error is not None:
            raise self.error
        return value

    async def get_account(self, applicant_id: str) -> Optional[Account]:
        return await self._read("account", self.account)

    async def get_operations(self, applicant_id: str) -> List[Operation]:
        return await self._read("operations", self.operations)

    async def get_projects(self, applicant_id: str) -> List[Project]:
        return await self._read("projects", self.projects)

    async def get_savings(self, applicant_id: str) -> List[SavingsGoal]:
        return await self._read("savings", self.savings)

    async def is_cooperative_member(self, applicant_id: str) -> bool:
        return await self._read("cooperative_members", self.cooperative_member)


@pytest.fixture
def strong_store() -> FakeDataStoreClient:
    """
    Established entrepreneur: 1,000,000 income vs 200,000 expenses over 80
    operations, 4/4 projects completed, 600,000 saved, account 400 days old.
    """
    operations = [Operation(type="income", amount=25_000) for _ in range(40)]
    operations += [Operation(type="expense", amount=5_000) for _ in range(40)]
    return FakeDataStoreClient(
        account=Account(applicant_id="ent_strong", created_at=utc_now() - timedelta(days=400)),
        operations=operations,
        projects=[Project(status="completed") for _ in range(4)],
        savings=[SavingsGoal(amount=300_000), SavingsGoal(amount=300_000)],
    )


@pytest.fixture
def new_store() -> FakeDataStoreClient:
    """Account that exists but has no recorded activity"""
    return FakeDataStoreClient(account=Account(applicant_id="ent_new", created_at=utc_now()))


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def make_client(db: Session):
    """Build a TestClient whose data store is the given fake"""

    def _make(store: FakeDataStoreClient) -> TestClient:
        app = create_app()

        def override_get_db():
            yield db

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_data_store_client] = lambda: store
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client, strong_store: FakeDataStoreClient) -> TestClient:
    return make_client(strong_store)
