"""Bundle synthesis - combines approved lender offers into composite offers"""

import math
from statistics import fmean
from typing import List
from loan_compare.domain.models import BundleOffer, IndividualOffer
from loan_compare.utils.numbers import round_half_up

MAX_VALUE_BUNDLE_ID = 101
LOW_RATE_BUNDLE_ID = 102
BUNDLE_TENURE_MONTHS = 36


def _max_value_bundle(approved: List[IndividualOffer]) -> BundleOffer:
    """Three largest credit lines, with a 15% haircut on the combined amount"""
    top_three = sorted(approved, key=lambda o: o.max_loan_amount, reverse=True)[:3]

    return BundleOffer(
        id=MAX_VALUE_BUNDLE_ID,
        name="Max Value Bundle",
        lenders=[o.lender for o in top_three],
        total_loan_amount=math.floor(sum(o.max_loan_amount for o in top_three) * 0.85),
        average_interest_rate=round_half_up(fmean(o.interest_rate for o in top_three), 2),
        effective_interest_rate=round_half_up(fmean(o.effective_interest_rate for o in top_three), 1),
        monthly_installment=math.floor(sum(o.monthly_installment for o in top_three) * 0.90),
        tenure_months=BUNDLE_TENURE_MONTHS,
        processing_fee="2.2%",
        special_feature="Higher loan amount, consolidated payments",
    )


def _low_rate_bundle(approved: List[IndividualOffer]) -> BundleOffer:
    """Two cheapest lenders, with a bundling discount on the rates"""
    lowest_two = sorted(approved, key=lambda o: o.interest_rate)[:2]

    return BundleOffer(
        id=LOW_RATE_BUNDLE_ID,
        name="Low Rate Bundle",
        lenders=[o.lender for o in lowest_two],
        total_loan_amount=math.floor(sum(o.max_loan_amount for o in lowest_two) * 0.90),
        average_interest_rate=round_half_up(fmean(o.interest_rate for o in lowest_two) - 0.1, 2),
        effective_interest_rate=round_half_up(fmean(o.effective_interest_rate for o in lowest_two) - 0.2, 1),
        monthly_installment=math.floor(sum(o.monthly_installment for o in lowest_two) * 0.85),
        tenure_months=BUNDLE_TENURE_MONTHS,
        processing_fee="2%",
        special_feature="Lowest overall interest rate",
    )


def synthesize_bundles(individual_offers: List[IndividualOffer]) -> List[BundleOffer]:
    """
    Generate bundle offers from individual lender offers.

    Rules:
    - Only approved offers take part
    - Fewer than 2 approved: no bundles
    - Max Value Bundle needs at least 3 approved offers and is listed first
    - Low Rate Bundle is always produced once 2 offers are approved

    Example:
        max_loan_amount [30000, 28000, 35000, 25000] (all approved)
        Max Value total = floor((35000 + 30000 + 28000) * 0.85) = 79050
    """
    approved = [offer for offer in individual_offers if offer.approved]

    if len(approved) < 2:
        return []

    bundles = []
    if len(approved) >= 3:
        bundles.append(_max_value_bundle(approved))
    bundles.append(_low_rate_bundle(approved))

    return bundles
