"""Appointment booking with a lender for a chosen offer or bundle"""

import random
import time
from datetime import date, datetime, timezone
from loan_compare.domain.models import Appointment, AppointmentContact


def generate_appointment_id() -> str:
    """APT-<epoch millis>-<0..999>"""
    return f"APT-{int(time.time() * 1000)}-{random.randint(0, 999)}"


def create_appointment(
    offer_id: str,
    is_bundle: bool,
    appointment_date: date,
    appointment_time: str,
    user: AppointmentContact,
    appointment_id: str | None = None,
) -> Appointment:
    """Build a confirmed appointment; lenders accept every requested slot"""
    return Appointment(
        id=appointment_id or generate_appointment_id(),
        offer_id=str(offer_id),
        is_bundle=is_bundle,
        appointment_date=appointment_date,
        appointment_time=appointment_time,
        user=user,
        status="confirmed",
        created_at=datetime.now(timezone.utc),
    )
