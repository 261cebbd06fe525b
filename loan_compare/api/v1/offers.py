"""POST /v1/offers and POST /v1/offers/sort - lender offers and bundles"""

import time
import logging
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Request

from loan_compare.api.v1.schemas import (
    BundleOfferSchema,
    IndividualOfferSchema,
    LoanApplicationRequest,
    LoanOfferSchema,
    OffersResponse,
    SortRequest,
    SortResponse,
)
from loan_compare.api.dependencies import get_offer_source, get_request_id
from loan_compare.infrastructure.clients.offers import OfferSource
from loan_compare.domain.bundles import synthesize_bundles
from loan_compare.domain.sorting import sort_items, sort_offers
from loan_compare.domain.exceptions import OfferSourceError
from loan_compare.infrastructure.observability.metrics import record_offers
from loan_compare.infrastructure.observability.logging import log_offer_batch

router = APIRouter()


@router.post("/offers", response_model=OffersResponse)
async def create_offers(
    request_body: LoanApplicationRequest,
    request: Request,
    offer_source: OfferSource = Depends(get_offer_source),
):
    """
    Collect lender offers for an application and bundle the approved ones.

    Flow:
    1. Fetch one offer per lender from the offer source
    2. Synthesize bundle offers from the approved offers
    3. Return both lists in lender order
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        individual = await offer_source.fetch_offers(request_body.to_domain())
    except OfferSourceError as e:
        logging.error(f"Offer source error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Lender services unavailable")

    bundles = synthesize_bundles(individual)

    duration_ms = (time.time() - start_time) * 1000
    record_offers(individual, bundles)
    log_offer_batch(
        request_id,
        individual_count=len(individual),
        approved_count=sum(1 for o in individual if o.approved),
        bundle_count=len(bundles),
        duration_ms=duration_ms,
    )

    return OffersResponse(
        individual=[IndividualOfferSchema(**asdict(o)) for o in individual],
        bundles=[BundleOfferSchema(**asdict(b)) for b in bundles],
    )


@router.post("/offers/sort", response_model=SortResponse)
def sort_offer_lists(request_body: SortRequest):
    """
    Order offers and bundles by the selected filter.

    No filter puts promoted offers first, then longest tenure.
    """
    offers, bundles = sort_offers(
        [o.to_domain() for o in request_body.offers],
        [b.to_domain() for b in request_body.bundles],
        request_body.filter,
    )
    individual = sort_items([o.to_domain() for o in request_body.individual], request_body.filter)

    return SortResponse(
        filter=request_body.filter,
        offers=[LoanOfferSchema(**asdict(o)) for o in offers],
        individual=[IndividualOfferSchema(**asdict(o)) for o in individual],
        bundles=[BundleOfferSchema(**asdict(b)) for b in bundles],
    )
