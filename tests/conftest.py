"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from loan_compare.api.main import create_app
from loan_compare.api.dependencies import get_appointment_repository, get_offer_source
from loan_compare.domain.models import IndividualOffer, LoanOffer, PreferenceWeights, RecommendationCriteria
from loan_compare.infrastructure.clients.offers import StaticOfferSource
from loan_compare.infrastructure.storage.repositories import AppointmentRepository


def make_individual_offer(offer_id: int, lender: str, rate: float, effective: float,
                          installment: float, max_amount: float, approved: bool = True,
                          fee: str = "2%") -> IndividualOffer:
    return IndividualOffer(
        id=offer_id,
        lender=lender,
        logo=lender[:3].upper(),
        interest_rate=rate,
        effective_interest_rate=effective,
        monthly_installment=installment,
        tenure_months=36,
        max_loan_amount=max_amount,
        approved=approved,
        processing_fee=fee,
        special_feature="",
    )


@pytest.fixture
def individual_offers() -> list[IndividualOffer]:
    """One offer per lender, all approved"""
    return [
        make_individual_offer(1, "DBS Bank", 3.88, 7.9, 458, 30000, fee="2%"),
        make_individual_offer(2, "OCBC", 4.28, 8.5, 465, 28000, fee="2.5%"),
        make_individual_offer(3, "Standard Chartered", 3.48, 6.9, 443, 35000, fee="1.8%"),
        make_individual_offer(4, "UOB", 4.68, 8.8, 475, 25000, fee="2.8%"),
    ]


@pytest.fixture
def loan_offers() -> list[LoanOffer]:
    """Catalogue of offers as shown on the comparison page"""
    return [
        LoanOffer("offer1", "First Bank", 15000, 4.5, 4.9, 445, 36, 150, is_promoted=True),
        LoanOffer("offer2", "Metro Finance", 20000, 4.8, 5.2, 600, 60, 100),
        LoanOffer("offer3", "Unity Credit", 15000, 4.6, 5.0, 447, 48, 125),
        LoanOffer("offer4", "Global Loans", 25000, 4.3, 4.7, 740, 24, 175, is_promoted=True),
        LoanOffer("offer5", "Apex Capital", 18000, 4.7, 5.1, 520, 42, 100),
    ]


@pytest.fixture
def criteria() -> RecommendationCriteria:
    """Applicant with a solid profile who cares about every factor"""
    return RecommendationCriteria(
        desired_amount=20000,
        purpose="home renovation",
        credit_score=720,
        monthly_income=6000,
        employment_duration_months=36,
        weights=PreferenceWeights(low_interest=1.0, long_term=1.0, low_monthly_payment=1.0),
        preferred_banks=[],
    )


@pytest.fixture
def appointment_repository() -> AppointmentRepository:
    return AppointmentRepository()


@pytest.fixture
def client(individual_offers: list[IndividualOffer], appointment_repository: AppointmentRepository) -> TestClient:
    """Create FastAPI test client with a fixed offer source and empty appointment store"""
    app = create_app()

    app.dependency_overrides[get_offer_source] = lambda: StaticOfferSource(individual_offers)
    app.dependency_overrides[get_appointment_repository] = lambda: appointment_repository
    return TestClient(app)
