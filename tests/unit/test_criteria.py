"""Unit tests for recommendation criteria extraction"""

import pytest
from loan_compare.domain.criteria import derive_weights, extract_criteria
from loan_compare.domain.exceptions import InvalidCriteriaError
from loan_compare.domain.models import PreferenceFlags, PreferenceWeights, UserProfile


def test_extract_criteria_copies_profile_fields():
    profile = UserProfile(
        user_id="user_1",
        name="Jane Tan",
        credit_score=720,
        monthly_income=6000,
        employment_duration_months=36,
    )
    preferences = PreferenceFlags(prioritize_low_interest=True, preferred_banks=["DBS Bank"])

    criteria = extract_criteria(profile, 20000, "education", preferences)

    assert criteria.desired_amount == 20000
    assert criteria.purpose == "education"
    assert criteria.credit_score == 720
    assert criteria.monthly_income == 6000
    assert criteria.employment_duration_months == 36
    assert criteria.preferred_banks == ["DBS Bank"]


def test_missing_and_malformed_numbers_default_to_zero():
    """Partial profiles are accepted; gaps read as the most conservative value"""
    profile = UserProfile(user_id="user_2", credit_score=None, monthly_income="n/a", employment_duration_months=float("nan"))

    criteria = extract_criteria(profile, None, "", PreferenceFlags(prioritize_long_term=True))

    assert criteria.desired_amount == 0
    assert criteria.credit_score == 0
    assert criteria.monthly_income == 0
    assert criteria.employment_duration_months == 0


def test_weights_are_one_per_enabled_flag():
    weights = derive_weights(
        PreferenceFlags(prioritize_low_interest=True, prioritize_long_term=False, prioritize_low_monthly_payment=True)
    )

    assert weights == PreferenceWeights(low_interest=1.0, long_term=0.0, low_monthly_payment=1.0)


def test_all_preferences_disabled_is_rejected():
    """A ranking with no active preference would score every offer the same"""
    with pytest.raises(InvalidCriteriaError):
        extract_criteria(UserProfile(user_id="user_3"), 10000, "travel", PreferenceFlags())


def test_no_preferences_given_is_rejected():
    with pytest.raises(InvalidCriteriaError):
        extract_criteria(UserProfile(user_id="user_4"), 10000, "travel")
