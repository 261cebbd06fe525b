"""Recommendation criteria extraction from a user profile"""

from typing import Optional
from loan_compare.domain.models import (
    PreferenceFlags,
    PreferenceWeights,
    RecommendationCriteria,
    UserProfile,
)
from loan_compare.domain.exceptions import InvalidCriteriaError
from loan_compare.utils.numbers import coerce_number

# Weight contributed by each enabled preference flag
PREFERENCE_WEIGHT = 1.0


def derive_weights(preferences: PreferenceFlags) -> PreferenceWeights:
    """
    Map boolean preference flags to a weighting vector.

    Raises:
        InvalidCriteriaError: If no preference is enabled, since every offer
            would then collapse to the same baseline score
    """
    weights = PreferenceWeights(
        low_interest=PREFERENCE_WEIGHT if preferences.prioritize_low_interest else 0.0,
        long_term=PREFERENCE_WEIGHT if preferences.prioritize_long_term else 0.0,
        low_monthly_payment=PREFERENCE_WEIGHT if preferences.prioritize_low_monthly_payment else 0.0,
    )
    if not (weights.low_interest or weights.long_term or weights.low_monthly_payment):
        raise InvalidCriteriaError("At least one loan preference must be enabled")
    return weights


def extract_criteria(
    profile: UserProfile,
    desired_amount: float,
    purpose: str,
    preferences: Optional[PreferenceFlags] = None,
) -> RecommendationCriteria:
    """
    Build the criteria for one scoring pass.

    Missing or malformed numeric profile fields are treated as 0, which makes
    the eligibility gate conservative rather than failing the request.
    """
    preferences = preferences or PreferenceFlags()

    return RecommendationCriteria(
        desired_amount=coerce_number(desired_amount),
        purpose=purpose or "",
        credit_score=coerce_number(profile.credit_score),
        monthly_income=coerce_number(profile.monthly_income),
        employment_duration_months=coerce_number(profile.employment_duration_months),
        weights=derive_weights(preferences),
        preferred_banks=list(preferences.preferred_banks or []),
    )
