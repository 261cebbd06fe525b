"""Pydantic schemas for API request/response validation"""

from datetime import date
from typing import List, Optional, Union
from pydantic import BaseModel, Field, field_validator

from loan_compare.domain.models import (
    AppointmentContact,
    BundleOffer,
    IndividualOffer,
    LoanApplication,
    LoanOffer,
    PreferenceFlags,
    UserProfile,
)
from loan_compare.domain.sorting import SortKey
from loan_compare.utils.numbers import coerce_number


class LoanApplicationRequest(BaseModel):
    """Request body for POST /v1/offers"""

    full_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: str = ""
    income: float = Field(..., ge=0, description="Monthly income")
    loan_amount: float = Field(..., gt=0)
    loan_purpose: str = ""
    employment_status: str = ""
    credit_score: Optional[float] = None
    additional_info: Optional[str] = None

    def to_domain(self) -> LoanApplication:
        return LoanApplication(**self.model_dump())


class IndividualOfferSchema(BaseModel):
    """Single lender offer"""

    id: int
    lender: str
    logo: str = ""
    interest_rate: float
    effective_interest_rate: float
    monthly_installment: float
    tenure_months: int
    max_loan_amount: float
    approved: bool
    processing_fee: str = "0%"
    special_feature: str = ""

    def to_domain(self) -> IndividualOffer:
        return IndividualOffer(**self.model_dump())


class BundleOfferSchema(BaseModel):
    """Bundle synthesized from several lenders"""

    id: int
    name: str
    lenders: List[str]
    total_loan_amount: int
    average_interest_rate: float
    effective_interest_rate: float
    monthly_installment: int
    tenure_months: int
    processing_fee: str
    special_feature: str = ""

    def to_domain(self) -> BundleOffer:
        return BundleOffer(**self.model_dump())


class OffersResponse(BaseModel):
    """Response for POST /v1/offers"""

    individual: List[IndividualOfferSchema]
    bundles: List[BundleOfferSchema]


class LoanOfferSchema(BaseModel):
    """Loan product; missing numeric fields are read as 0"""

    id: str
    bank_name: str
    amount: Optional[float] = None
    interest_rate: Optional[float] = None
    effective_interest_rate: Optional[float] = None
    monthly_payment: Optional[float] = None
    term: Optional[int] = None
    processing_fee: Optional[float] = None
    approved: bool = True
    minimum_credit_score: Optional[float] = None
    minimum_income: Optional[float] = None
    minimum_employment_duration: Optional[float] = None
    features: List[str] = []
    conditions: List[str] = []
    is_promoted: bool = False

    def to_domain(self) -> LoanOffer:
        return LoanOffer(
            id=self.id,
            bank_name=self.bank_name,
            amount=coerce_number(self.amount),
            interest_rate=coerce_number(self.interest_rate),
            effective_interest_rate=coerce_number(self.effective_interest_rate),
            monthly_payment=coerce_number(self.monthly_payment),
            term=int(coerce_number(self.term)),
            processing_fee=coerce_number(self.processing_fee),
            approved=self.approved,
            minimum_credit_score=coerce_number(self.minimum_credit_score),
            minimum_income=coerce_number(self.minimum_income),
            minimum_employment_duration=coerce_number(self.minimum_employment_duration),
            features=list(self.features),
            conditions=list(self.conditions),
            is_promoted=self.is_promoted,
        )


class SortRequest(BaseModel):
    """Request body for POST /v1/offers/sort"""

    offers: List[LoanOfferSchema] = []
    individual: List[IndividualOfferSchema] = []
    bundles: List[BundleOfferSchema] = []
    filter: Optional[SortKey] = None


class SortResponse(BaseModel):
    """Response for POST /v1/offers/sort"""

    filter: Optional[SortKey]
    offers: List[LoanOfferSchema]
    individual: List[IndividualOfferSchema]
    bundles: List[BundleOfferSchema]


class UserProfileSchema(BaseModel):
    user_id: str = Field(..., min_length=1)
    name: str = ""
    credit_score: Optional[float] = None
    monthly_income: Optional[float] = None
    employment_duration_months: Optional[float] = None

    def to_domain(self) -> UserProfile:
        return UserProfile(**self.model_dump())


class PreferencesSchema(BaseModel):
    prioritize_low_interest: bool = False
    prioritize_long_term: bool = False
    prioritize_low_monthly_payment: bool = False
    preferred_banks: List[str] = []

    def to_domain(self) -> PreferenceFlags:
        return PreferenceFlags(**self.model_dump())


class RecommendationRequest(BaseModel):
    """Request body for POST /v1/recommendations"""

    profile: UserProfileSchema
    desired_amount: float = Field(..., ge=0)
    purpose: str = ""
    preferences: PreferencesSchema
    offers: List[LoanOfferSchema] = []

    @field_validator("offers")
    @classmethod
    def offer_ids_unique(cls, offers: List[LoanOfferSchema]) -> List[LoanOfferSchema]:
        ids = [offer.id for offer in offers]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"duplicate offer ids: {', '.join(duplicates)}")
        return offers


class RecommendationItem(BaseModel):
    """Scored offer paired with the offer itself"""

    offer_id: str
    score: int
    match_reason: List[str]
    offer: LoanOfferSchema


class RecommendationResponse(BaseModel):
    """Response for POST /v1/recommendations"""

    user_id: str
    recommendations: List[RecommendationItem]


class AppointmentContactSchema(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: str = Field(..., min_length=1)
    user_id: Optional[str] = None

    def to_domain(self) -> AppointmentContact:
        return AppointmentContact(**self.model_dump())


class AppointmentRequest(BaseModel):
    """Request body for POST /v1/appointments"""

    offer_id: Union[int, str]
    is_bundle: bool = False
    appointment_date: date
    appointment_time: str = Field(..., min_length=1)
    user: AppointmentContactSchema


class AppointmentSchema(BaseModel):
    """Appointment as returned to the client"""

    id: str
    offer_id: str
    is_bundle: bool
    appointment_date: date
    appointment_time: str
    status: str


class AppointmentListResponse(BaseModel):
    """Response for GET /v1/appointments"""

    user_id: str
    appointments: List[AppointmentSchema]
