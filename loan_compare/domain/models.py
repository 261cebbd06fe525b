"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional


@dataclass(frozen=True)
class LoanOffer:
    """Loan product offered by a bank, as used for recommendations"""

    id: str
    bank_name: str
    amount: float
    interest_rate: float
    effective_interest_rate: float
    monthly_payment: float
    term: int  # months
    processing_fee: float
    approved: bool = True
    minimum_credit_score: float = 0
    minimum_income: float = 0  # annual
    minimum_employment_duration: float = 0  # months
    features: List[str] = field(default_factory=list)
    conditions: List[str] = field(default_factory=list)
    is_promoted: bool = False

    @property
    def total_interest(self) -> float:
        return max(0.0, self.monthly_payment * self.term - self.amount)


@dataclass(frozen=True)
class IndividualOffer:
    """Single lender's answer to a loan application"""

    id: int
    lender: str
    logo: str
    interest_rate: float
    effective_interest_rate: float
    monthly_installment: float
    tenure_months: int
    max_loan_amount: float
    approved: bool
    processing_fee: str  # e.g. "2.5%"
    special_feature: str

    @property
    def total_interest(self) -> float:
        return max(0.0, self.monthly_installment * self.tenure_months - self.max_loan_amount)


@dataclass(frozen=True)
class BundleOffer:
    """Composite offer synthesized from several approved individual offers"""

    id: int
    name: str
    lenders: List[str]
    total_loan_amount: int
    average_interest_rate: float
    effective_interest_rate: float
    monthly_installment: int
    tenure_months: int
    processing_fee: str
    special_feature: str

    @property
    def total_interest(self) -> float:
        return max(0.0, self.monthly_installment * self.tenure_months - self.total_loan_amount)


@dataclass
class LoanApplication:
    """Details the applicant submits to receive lender offers"""

    full_name: str
    email: str
    phone: str
    income: float  # monthly
    loan_amount: float
    loan_purpose: str
    employment_status: str
    credit_score: Optional[float] = None
    additional_info: Optional[str] = None


@dataclass
class PreferenceFlags:
    """What the user told us matters to them"""

    prioritize_low_interest: bool = False
    prioritize_long_term: bool = False
    prioritize_low_monthly_payment: bool = False
    preferred_banks: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class PreferenceWeights:
    low_interest: float
    long_term: float
    low_monthly_payment: float


@dataclass
class UserProfile:
    """Financial profile submitted by the user"""

    user_id: str
    name: str = ""
    credit_score: Optional[float] = None
    monthly_income: Optional[float] = None
    employment_duration_months: Optional[float] = None


@dataclass(frozen=True)
class RecommendationCriteria:
    """Normalized inputs for a single scoring pass"""

    desired_amount: float
    purpose: str
    credit_score: float
    monthly_income: float
    employment_duration_months: float
    weights: PreferenceWeights
    preferred_banks: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ScoredOffer:
    """Output of the offer scorer"""

    offer_id: str
    score: int
    match_reason: List[str]


@dataclass
class AppointmentContact:
    name: str
    email: str
    phone: str
    user_id: Optional[str] = None


@dataclass
class Appointment:
    """Meeting booked with a lender for an offer or bundle"""

    id: str
    offer_id: str
    is_bundle: bool
    appointment_date: date
    appointment_time: str
    user: AppointmentContact
    status: str
    created_at: datetime
