"""POST /v1/recommendations - personalised offer ranking"""

import logging
from dataclasses import asdict
from fastapi import APIRouter, HTTPException, Request

from loan_compare.api.v1.schemas import (
    LoanOfferSchema,
    RecommendationItem,
    RecommendationRequest,
    RecommendationResponse,
)
from loan_compare.api.dependencies import get_request_id
from loan_compare.domain.criteria import extract_criteria
from loan_compare.domain.scoring import rank_offers
from loan_compare.domain.exceptions import InvalidCriteriaError
from loan_compare.infrastructure.observability.metrics import recommendation_score_histogram
from loan_compare.infrastructure.observability.logging import log_recommendation

router = APIRouter()


@router.post("/recommendations", response_model=RecommendationResponse)
def create_recommendations(request_body: RecommendationRequest, request: Request):
    """
    Rank candidate offers against the user's profile and preferences.

    Offers the user is not eligible for are left out of the response.
    """
    request_id = get_request_id(request)
    profile = request_body.profile.to_domain()

    try:
        criteria = extract_criteria(
            profile,
            request_body.desired_amount,
            request_body.purpose,
            request_body.preferences.to_domain(),
        )
    except InvalidCriteriaError as e:
        logging.warning(f"Invalid criteria: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    offers = [o.to_domain() for o in request_body.offers]
    ranked = rank_offers(criteria, offers)

    top = ranked[0][1] if ranked else None
    if top is not None:
        recommendation_score_histogram.observe(top.score)
    log_recommendation(
        request_id,
        profile.user_id,
        candidate_count=len(offers),
        eligible_count=len(ranked),
        top_offer_id=top.offer_id if top else None,
        top_score=top.score if top else None,
    )

    return RecommendationResponse(
        user_id=profile.user_id,
        recommendations=[
            RecommendationItem(
                offer_id=scored.offer_id,
                score=scored.score,
                match_reason=scored.match_reason,
                offer=LoanOfferSchema(**asdict(offer)),
            )
            for offer, scored in ranked
        ],
    )
