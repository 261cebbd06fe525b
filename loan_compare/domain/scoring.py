"""Offer scoring engine - ranks loan offers against a user's preferences"""

from statistics import median
from typing import List, Tuple
from loan_compare.domain.models import LoanOffer, RecommendationCriteria, ScoredOffer
from loan_compare.utils.numbers import ratio

BASE_SCORE = 50.0
INTEREST_POINTS = 20.0
TERM_POINTS = 15.0
PAYMENT_POINTS = 15.0
PREFERRED_BANK_BONUS = 10.0
AMOUNT_MATCH_POINTS = 15.0

# Share of a component's point budget it must reach to earn a match reason
REASON_SHARE = 0.5

RankedOffer = Tuple[LoanOffer, ScoredOffer]


def is_eligible(criteria: RecommendationCriteria, offer: LoanOffer) -> bool:
    """Hard gate: the applicant must meet every minimum the lender sets"""
    return (
        offer.minimum_credit_score <= criteria.credit_score
        and offer.minimum_income <= criteria.monthly_income * 12
        and offer.minimum_employment_duration <= criteria.employment_duration_months
    )


def _score_offer(
    criteria: RecommendationCriteria,
    offer: LoanOffer,
    candidates: List[LoanOffer],
) -> ScoredOffer:
    """
    Score one eligible offer relative to the other eligible candidates.

    Adjustments, applied to a base of 50 in this order:
    - Interest rate: +/- up to 20 points against the median candidate rate
    - Term: up to 15 points, proportional to the longest candidate term
    - Monthly payment: up to 15 points for the cheapest installment
    - Preferred bank: flat +10
    - Amount match: up to 15 points, inverse of the relative deviation

    A component earns its match reason once it reaches half its budget.
    """
    weights = criteria.weights
    rates = [c.interest_rate for c in candidates]
    payments = [c.monthly_payment for c in candidates]
    longest_term = max(c.term for c in candidates)

    adjustments = []

    interest = weights.low_interest * INTEREST_POINTS * ratio(
        median(rates) - offer.interest_rate, max(rates) - min(rates)
    )
    adjustments.append((interest, INTEREST_POINTS, "Lower interest rate than average"))

    term = weights.long_term * TERM_POINTS * ratio(offer.term, longest_term)
    adjustments.append((term, TERM_POINTS, f"Longer repayment term of {offer.term} months"))

    payment = weights.low_monthly_payment * PAYMENT_POINTS * ratio(
        max(payments) - offer.monthly_payment, max(payments) - min(payments)
    )
    adjustments.append((payment, PAYMENT_POINTS, "Lower monthly payment than most offers"))

    preferred = PREFERRED_BANK_BONUS if offer.bank_name in criteria.preferred_banks else 0.0
    adjustments.append((preferred, PREFERRED_BANK_BONUS, "Matches your preferred bank"))

    amount = 0.0
    if criteria.desired_amount > 0:
        deviation = abs(offer.amount - criteria.desired_amount) / criteria.desired_amount
        amount = AMOUNT_MATCH_POINTS * max(0.0, 1 - deviation)
    adjustments.append((
        amount,
        AMOUNT_MATCH_POINTS,
        f"Matches your requested loan amount of ${criteria.desired_amount:,.0f}",
    ))

    total = BASE_SCORE + sum(points for points, _, _ in adjustments)
    score = int(round(min(100.0, max(0.0, total))))

    return ScoredOffer(
        offer_id=offer.id,
        score=score,
        match_reason=[
            reason for points, budget, reason in adjustments if points >= budget * REASON_SHARE
        ],
    )


def score_offers(criteria: RecommendationCriteria, offers: List[LoanOffer]) -> List[ScoredOffer]:
    """
    Score every eligible offer, preserving input order.

    Ineligible offers are dropped entirely. Reference values (median rate,
    longest term, payment range) are computed over the eligible set only.
    """
    return [scored for _, scored in score_eligible(criteria, offers)]


def score_eligible(criteria: RecommendationCriteria, offers: List[LoanOffer]) -> List[RankedOffer]:
    """Like score_offers, but keeps each score paired with its offer"""
    eligible = [offer for offer in offers if is_eligible(criteria, offer)]
    if not eligible:
        return []

    return [(offer, _score_offer(criteria, offer, eligible)) for offer in eligible]


def rank_scored_offers(pairs: List[RankedOffer]) -> List[RankedOffer]:
    """Order by score (desc), then interest rate (asc), then bank name"""
    return sorted(pairs, key=lambda pair: (-pair[1].score, pair[0].interest_rate, pair[0].bank_name))


def rank_offers(criteria: RecommendationCriteria, offers: List[LoanOffer]) -> List[RankedOffer]:
    """Score eligible offers and order them for display, offers attached"""
    return rank_scored_offers(score_eligible(criteria, offers))


def recommend(criteria: RecommendationCriteria, offers: List[LoanOffer]) -> List[ScoredOffer]:
    """
    Main entry point: score eligible offers and order them for display.

    Pure and deterministic; identical inputs always give identical output.
    """
    return [scored for _, scored in rank_offers(criteria, offers)]
