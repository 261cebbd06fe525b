"""Prometheus metrics for monitoring offer volumes, recommendation quality, and lender health"""

from typing import List
from prometheus_client import Counter, Histogram
from loan_compare.domain.models import BundleOffer, IndividualOffer

# Offer metrics
offers_fetched_counter = Counter(
    "loan_compare_offers_total",
    "Individual lender offers received",
    ["lender", "outcome"],  # approved | declined
)

bundles_generated_counter = Counter(
    "loan_compare_bundles_total",
    "Bundle offers synthesized",
    ["bundle"],
)

# Lender metrics
lender_fetch_failures_counter = Counter(
    "lender_fetch_failures_total",
    "Failed lender API calls",
    ["lender"],
)

# Recommendation metrics
recommendation_score_histogram = Histogram(
    "loan_compare_recommendation_score",
    "Match score of the top recommended offer",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

# Appointment metrics
appointments_counter = Counter(
    "loan_compare_appointments_total",
    "Appointments scheduled",
    ["kind"],  # offer | bundle
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_offers(individual: List[IndividualOffer], bundles: List[BundleOffer]) -> None:
    """Record offer and bundle volumes for approval-rate monitoring"""
    for offer in individual:
        outcome = "approved" if offer.approved else "declined"
        offers_fetched_counter.labels(lender=offer.lender, outcome=outcome).inc()

    for bundle in bundles:
        bundles_generated_counter.labels(bundle=bundle.name).inc()
