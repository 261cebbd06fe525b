"""Offer and bundle ordering by the filter the user selects"""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Type
from loan_compare.domain.models import BundleOffer, IndividualOffer, LoanOffer
from loan_compare.utils.numbers import parse_percentage


class SortKey(str, Enum):
    AMOUNT = "amount"
    TENURE = "tenure"
    INTEREST_RATE = "interestRate"
    MONTHLY_PAYMENT = "monthlyPayment"
    TOTAL_INTEREST = "totalInterest"
    PROCESSING_FEE = "processingFee"


# Largest first for these keys, cheapest first for everything else
DESCENDING_KEYS = {SortKey.AMOUNT, SortKey.TENURE}

Getter = Callable[[Any], float]

FIELD_GETTERS: Dict[Type, Dict[SortKey, Getter]] = {
    LoanOffer: {
        SortKey.AMOUNT: lambda o: o.amount,
        SortKey.TENURE: lambda o: o.term,
        SortKey.INTEREST_RATE: lambda o: o.interest_rate,
        SortKey.MONTHLY_PAYMENT: lambda o: o.monthly_payment,
        SortKey.TOTAL_INTEREST: lambda o: o.total_interest,
        SortKey.PROCESSING_FEE: lambda o: o.processing_fee,
    },
    IndividualOffer: {
        SortKey.AMOUNT: lambda o: o.max_loan_amount,
        SortKey.TENURE: lambda o: o.tenure_months,
        SortKey.INTEREST_RATE: lambda o: o.interest_rate,
        SortKey.MONTHLY_PAYMENT: lambda o: o.monthly_installment,
        SortKey.TOTAL_INTEREST: lambda o: o.total_interest,
        SortKey.PROCESSING_FEE: lambda o: parse_percentage(o.processing_fee),
    },
    BundleOffer: {
        SortKey.AMOUNT: lambda b: b.total_loan_amount,
        SortKey.TENURE: lambda b: b.tenure_months,
        SortKey.INTEREST_RATE: lambda b: b.average_interest_rate,
        SortKey.MONTHLY_PAYMENT: lambda b: b.monthly_installment,
        SortKey.TOTAL_INTEREST: lambda b: b.total_interest,
        SortKey.PROCESSING_FEE: lambda b: parse_percentage(b.processing_fee),
    },
}


def field_value(item: Any, key: SortKey) -> float:
    """Read the value a filter key refers to on any offer-like record"""
    return FIELD_GETTERS[type(item)][key](item)


def _sort_by_key(items: Sequence[Any], key: SortKey) -> List[Any]:
    # sorted() stays stable with reverse=True, so ties keep input order
    return sorted(items, key=lambda item: field_value(item, key), reverse=key in DESCENDING_KEYS)


def _default_order(items: Sequence[Any]) -> List[Any]:
    """Promoted offers first, then longest tenure first"""
    return sorted(
        items,
        key=lambda item: (
            not getattr(item, "is_promoted", False),
            -field_value(item, SortKey.TENURE),
        ),
    )


def sort_items(items: Sequence[Any], filter_key: Optional[SortKey]) -> List[Any]:
    if filter_key is None:
        return _default_order(items)
    return _sort_by_key(items, SortKey(filter_key))


def sort_offers(
    offers: Sequence[Any],
    bundles: Sequence[BundleOffer],
    filter_key: Optional[SortKey] = None,
) -> Tuple[List[Any], List[BundleOffer]]:
    """
    Sort individual offers and bundles under the same filter.

    Direction per key:
    - amount, tenure: descending
    - interestRate, monthlyPayment, totalInterest, processingFee: ascending
    - None: promoted offers first (stable), then tenure descending

    Inputs are never modified; new lists are returned.
    """
    return sort_items(offers, filter_key), sort_items(bundles, filter_key)
