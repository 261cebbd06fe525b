"""Offer sources - where candidate lender offers come from"""

import asyncio
import logging
from dataclasses import asdict
from typing import Any, Dict, List, Protocol
import httpx
from loan_compare.domain.models import IndividualOffer, LoanApplication
from loan_compare.domain.exceptions import OfferSourceError
from loan_compare.config import settings
from loan_compare.infrastructure.observability.metrics import lender_fetch_failures_counter
from loan_compare.utils.numbers import coerce_number

logger = logging.getLogger(__name__)


class OfferSource(Protocol):
    """Anything that can supply candidate offers for an application"""

    async def fetch_offers(self, application: LoanApplication) -> List[IndividualOffer]:
        ...


def parse_individual_offer(offer_id: int, data: Dict[str, Any]) -> IndividualOffer:
    """
    Build an IndividualOffer from a lender payload.

    Numeric fields that are missing or malformed become 0 so one sloppy
    lender cannot break the comparison.

    Raises:
        TypeError: If the payload is not a JSON object
    """
    if not isinstance(data, dict):
        raise TypeError(f"expected object, got {type(data).__name__}")

    return IndividualOffer(
        id=offer_id,
        lender=str(data.get("lender", "")),
        logo=str(data.get("logo", "")),
        interest_rate=coerce_number(data.get("interestRate")),
        effective_interest_rate=coerce_number(data.get("effectiveInterestRate")),
        monthly_installment=coerce_number(data.get("monthlyInstallment")),
        tenure_months=int(coerce_number(data.get("tenureMonths"))),
        max_loan_amount=coerce_number(data.get("maxLoanAmount")),
        approved=data.get("approved") is True,
        processing_fee=str(data.get("processingFee", "0%")),
        special_feature=str(data.get("specialFeature", "")),
    )


class StaticOfferSource:
    """Offer source backed by a fixed list, independent of the application"""

    def __init__(self, offers: List[IndividualOffer]):
        self.offers = list(offers)

    async def fetch_offers(self, application: LoanApplication) -> List[IndividualOffer]:
        return list(self.offers)


class HttpOfferSource:
    """Client for the lender offer API"""

    def __init__(
        self,
        base_url: str | None = None,
        lender_codes: List[str] | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.offer_source_base
        self.lender_codes = lender_codes or list(settings.lender_codes)
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def _fetch_one(
        self,
        client: httpx.AsyncClient,
        offer_id: int,
        lender_code: str,
        payload: Dict[str, Any],
    ) -> IndividualOffer:
        """
        Request one lender's offer.

        Raises:
            OfferSourceError: On timeout, HTTP errors, or invalid response
        """
        try:
            response = await client.post(f"{self.base_url}/lenders/{lender_code}/offers", json=payload)
            response.raise_for_status()
            return parse_individual_offer(offer_id, response.json())

        except httpx.TimeoutException as e:
            raise OfferSourceError(f"{lender_code} timeout after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise OfferSourceError(f"{lender_code} error: {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise OfferSourceError(f"{lender_code} unreachable: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise OfferSourceError(f"Invalid offer data from {lender_code}: {e}") from e

    async def fetch_offers(self, application: LoanApplication) -> List[IndividualOffer]:
        """
        Query every configured lender concurrently.

        Lenders that fail are logged and left out; ids follow the configured
        lender order so they stay stable when one lender is down.

        Raises:
            OfferSourceError: If no lender returned an offer
        """
        payload = asdict(application)

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            results = await asyncio.gather(
                *(
                    self._fetch_one(client, index, code, payload)
                    for index, code in enumerate(self.lender_codes, start=1)
                ),
                return_exceptions=True,
            )

        offers = []
        for code, result in zip(self.lender_codes, results):
            if isinstance(result, OfferSourceError):
                lender_fetch_failures_counter.labels(lender=code).inc()
                logger.warning(f"Skipping lender: {result}", extra={"lender": code})
                continue
            if isinstance(result, BaseException):
                raise result
            offers.append(result)

        if not offers:
            raise OfferSourceError("No lender returned an offer")

        return offers
