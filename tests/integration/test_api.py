"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient
from loan_compare.api.main import create_app
from loan_compare.api.dependencies import get_offer_source
from loan_compare.domain.exceptions import OfferSourceError


class UnavailableOfferSource:
    async def fetch_offers(self, application):
        raise OfferSourceError("No lender returned an offer")


@pytest.fixture
def application_body() -> dict:
    return {
        "full_name": "Jane Tan",
        "email": "jane@example.com",
        "phone": "91234567",
        "income": 6000,
        "loan_amount": 20000,
        "loan_purpose": "education",
        "employment_status": "full-time",
    }


@pytest.fixture
def offer_catalogue() -> list[dict]:
    return [
        {"id": "offer1", "bank_name": "First Bank", "amount": 15000, "interest_rate": 4.5,
         "monthly_payment": 445, "term": 36, "processing_fee": 150, "is_promoted": True},
        {"id": "offer2", "bank_name": "Metro Finance", "amount": 20000, "interest_rate": 4.8,
         "monthly_payment": 600, "term": 60, "processing_fee": 100},
        {"id": "offer4", "bank_name": "Global Loans", "amount": 25000, "interest_rate": 4.3,
         "monthly_payment": 740, "term": 24, "processing_fee": 175, "is_promoted": True,
         "minimum_credit_score": 800},
    ]


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "loan_compare_bundles_total" in response.text


def test_request_id_header_is_echoed(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"

    generated = client.get("/health")
    assert generated.headers["X-Request-ID"]


def test_offers_endpoint_returns_individual_and_bundles(client: TestClient, application_body: dict):
    """Test POST /v1/offers with four approved lenders"""
    response = client.post("/v1/offers", json=application_body)

    assert response.status_code == 200
    data = response.json()
    assert len(data["individual"]) == 4
    assert [b["name"] for b in data["bundles"]] == ["Max Value Bundle", "Low Rate Bundle"]
    assert data["bundles"][0]["total_loan_amount"] == 79050


def test_offers_endpoint_lenders_unavailable(client: TestClient, application_body: dict):
    """Offer source failure maps to 503"""
    client.app.dependency_overrides[get_offer_source] = lambda: UnavailableOfferSource()

    response = client.post("/v1/offers", json=application_body)

    assert response.status_code == 503


def test_offers_endpoint_validates_application(client: TestClient, application_body: dict):
    application_body["loan_amount"] = 0
    response = client.post("/v1/offers", json=application_body)
    assert response.status_code == 422


def test_sort_endpoint_by_interest_rate(client: TestClient, offer_catalogue: list[dict]):
    offers = client.post("/v1/offers", json={
        "full_name": "Jane Tan", "email": "jane@example.com", "income": 6000, "loan_amount": 20000,
    }).json()

    response = client.post(
        "/v1/offers/sort",
        json={
            "offers": offer_catalogue,
            "individual": offers["individual"],
            "bundles": offers["bundles"],
            "filter": "interestRate",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["filter"] == "interestRate"
    assert [o["id"] for o in data["offers"]] == ["offer4", "offer1", "offer2"]
    assert [o["lender"] for o in data["individual"]][0] == "Standard Chartered"
    assert [b["name"] for b in data["bundles"]] == ["Low Rate Bundle", "Max Value Bundle"]


def test_sort_endpoint_without_filter(client: TestClient, offer_catalogue: list[dict]):
    response = client.post("/v1/offers/sort", json={"offers": offer_catalogue})

    assert response.status_code == 200
    assert [o["id"] for o in response.json()["offers"]] == ["offer1", "offer4", "offer2"]


def test_sort_endpoint_rejects_unknown_filter(client: TestClient):
    response = client.post("/v1/offers/sort", json={"filter": "rating"})
    assert response.status_code == 422


def test_recommendations_endpoint(client: TestClient, offer_catalogue: list[dict]):
    """Ineligible offers are dropped, the rest ranked by score"""
    response = client.post(
        "/v1/recommendations",
        json={
            "profile": {"user_id": "user_1", "credit_score": 720, "monthly_income": 6000,
                        "employment_duration_months": 24},
            "desired_amount": 20000,
            "purpose": "education",
            "preferences": {"prioritize_low_interest": True, "preferred_banks": ["Metro Finance"]},
            "offers": offer_catalogue,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["user_id"] == "user_1"
    ranked = data["recommendations"]
    assert {r["offer_id"] for r in ranked} == {"offer1", "offer2"}
    scores = [r["score"] for r in ranked]
    assert scores == sorted(scores, reverse=True)
    assert all(0 <= s <= 100 for s in scores)
    assert ranked[0]["offer"]["id"] == ranked[0]["offer_id"]


def test_recommendations_require_a_preference(client: TestClient, offer_catalogue: list[dict]):
    response = client.post(
        "/v1/recommendations",
        json={
            "profile": {"user_id": "user_1"},
            "desired_amount": 20000,
            "preferences": {},
            "offers": offer_catalogue,
        },
    )

    assert response.status_code == 422


def test_recommendations_reject_duplicate_offer_ids(client: TestClient, offer_catalogue: list[dict]):
    """Two offers sharing an id cannot be told apart in the response"""
    offers = offer_catalogue + [dict(offer_catalogue[0], bank_name="Copy Bank")]

    response = client.post(
        "/v1/recommendations",
        json={
            "profile": {"user_id": "user_1", "credit_score": 720, "monthly_income": 6000},
            "desired_amount": 20000,
            "preferences": {"prioritize_low_interest": True},
            "offers": offers,
        },
    )

    assert response.status_code == 422
    assert "offer1" in response.text


def test_schedule_and_list_appointments(client: TestClient):
    body = {
        "offer_id": 102,
        "is_bundle": True,
        "appointment_date": "2026-11-02",
        "appointment_time": "10:30",
        "user": {"name": "Jane Tan", "email": "jane@example.com", "phone": "91234567", "user_id": "user_1"},
    }

    created = client.post("/v1/appointments", json=body)

    assert created.status_code == 200
    appointment = created.json()
    assert appointment["status"] == "confirmed"
    assert appointment["offer_id"] == "102"
    assert appointment["id"].startswith("APT-")

    listed = client.get("/v1/appointments", params={"user_id": "user_1"}).json()
    assert [a["id"] for a in listed["appointments"]] == [appointment["id"]]

    fetched = client.get(f"/v1/appointments/{appointment['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["appointment_date"] == "2026-11-02"


def test_appointment_missing_fields(client: TestClient):
    response = client.post("/v1/appointments", json={"offer_id": 1, "appointment_time": "10:30"})
    assert response.status_code == 422


def test_unknown_appointment_returns_404(client: TestClient):
    assert client.get("/v1/appointments/APT-0-0").status_code == 404


def test_appointments_require_user_id():
    client = TestClient(create_app())
    assert client.get("/v1/appointments").status_code == 422
