"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from loan_compare.infrastructure.clients.offers import HttpOfferSource, OfferSource
from loan_compare.infrastructure.storage.repositories import AppointmentRepository, appointment_repository


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_offer_source() -> OfferSource:
    """Provide lender offer source instance"""
    return HttpOfferSource()


def get_appointment_repository() -> AppointmentRepository:
    """Provide the process-wide appointment store"""
    return appointment_repository
