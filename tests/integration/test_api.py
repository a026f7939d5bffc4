"""Integration tests for API endpoints"""

from fastapi.testclient import TestClient
from conftest import FakeDataStoreClient
from moro_scoring.domain.models import Account
from moro_scoring.domain.exceptions import DataAccessError


def test_health_endpoint(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "moro_scoring_total" in response.text
    assert "moro_data_store_failures_total" in response.text


def test_request_id_header_is_echoed(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_scoring_endpoint_strong_applicant(client: TestClient):
    response = client.post("/v1/scoring", json={"applicant_id": "ent_strong", "requested_amount": 200_000})

    assert response.status_code == 200
    data = response.json()
    assert data["total_score"] == 100
    assert data["risk_level"] == "low"
    assert data["recommendation"] == "approve"
    assert data["factors"]["project_success_rate"] == 100.0
    assert len(data["reasoning"]) == 5


def test_scoring_endpoint_new_applicant(make_client, new_store: FakeDataStoreClient):
    client = make_client(new_store)

    response = client.post("/v1/scoring", json={"applicant_id": "ent_new", "requested_amount": 100_000})

    assert response.status_code == 200
    data = response.json()
    assert data["total_score"] == 15
    assert data["risk_level"] == "high"
    assert data["recommendation"] == "reject"


def test_scoring_endpoint_unknown_applicant(make_client):
    client = make_client(FakeDataStoreClient(account=None))

    response = client.post("/v1/scoring", json={"applicant_id": "ghost", "requested_amount": 100_000})

    assert response.status_code == 404
    assert response.json()["detail"] == "Applicant not found"


def test_scoring_endpoint_data_store_outage(make_client):
    store = FakeDataStoreClient(
        account=Account(applicant_id="ent_1", created_at=None),
        error=DataAccessError("Data store timeout after 5.0s"),
    )
    client = make_client(store)

    response = client.post("/v1/scoring", json={"applicant_id": "ent_1", "requested_amount": 100_000})

    assert response.status_code == 503
    assert "Retry-After" in response.headers


def test_scoring_endpoint_rejects_non_positive_amount(make_client, strong_store: FakeDataStoreClient):
    client = make_client(strong_store)

    response = client.post("/v1/scoring", json={"applicant_id": "ent_strong", "requested_amount": 0})

    assert response.status_code == 422
    assert strong_store.calls == []


def test_submit_application_routes_member_to_cooperative(make_client, strong_store: FakeDataStoreClient):
    strong_store.cooperative_member = True
    client = make_client(strong_store)

    response = client.post(
        "/v1/applications",
        json={"entrepreneur_id": "ent_strong", "amount": 200_000, "description": "Second sewing machine"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "submitted_to_coop"
    assert data["score"] == 100
    assert data["scoring"]["recommendation"] == "approve"
    assert data["application_id"]


def test_submit_application_routes_others_to_admin(make_client, new_store: FakeDataStoreClient):
    client = make_client(new_store)

    response = client.post(
        "/v1/applications",
        json={"entrepreneur_id": "ent_new", "amount": 50_000, "description": "Market stall stock"},
    )

    assert response.status_code == 201
    assert response.json()["status"] == "submitted_to_admin"


def test_get_application_endpoint(client: TestClient):
    created = client.post(
        "/v1/applications",
        json={"entrepreneur_id": "ent_strong", "amount": 200_000, "description": "Cold room"},
    ).json()

    response = client.get(f"/v1/applications/{created['application_id']}")

    assert response.status_code == 200
    data = response.json()
    assert data["application_id"] == created["application_id"]
    assert data["amount"] == 200_000
    assert data["scoring"]["total_score"] == 100
    assert data["scoring"]["reasoning"] == created["scoring"]["reasoning"]


def test_get_application_not_found(client: TestClient):
    response = client.get("/v1/applications/00000000-0000-0000-0000-000000000000")
    assert response.status_code == 404


def test_get_application_invalid_id(client: TestClient):
    response = client.get("/v1/applications/not-a-uuid")
    assert response.status_code == 400


def test_list_applications_endpoint_newest_first(client: TestClient):
    created_ids = []
    for amount in (100_000, 250_000, 150_000):
        response = client.post(
            "/v1/applications",
            json={"entrepreneur_id": "ent_strong", "amount": amount, "description": "Inventory"},
        )
        created_ids.append(response.json()["application_id"])

    response = client.get("/v1/applications?entrepreneur_id=ent_strong")

    assert response.status_code == 200
    data = response.json()
    assert data["entrepreneur_id"] == "ent_strong"
    assert [a["application_id"] for a in data["applications"]] == list(reversed(created_ids))
    assert [a["amount"] for a in data["applications"]] == [150_000, 250_000, 100_000]


def test_failed_submission_persists_nothing(make_client):
    client = make_client(FakeDataStoreClient(account=None))

    response = client.post(
        "/v1/applications",
        json={"entrepreneur_id": "ghost", "amount": 100_000, "description": "Inventory"},
    )

    assert response.status_code == 404
    listing = client.get("/v1/applications?entrepreneur_id=ghost").json()
    assert listing["applications"] == []
