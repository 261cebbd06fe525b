"""POST/GET /v1/appointments - book and look up lender appointments"""

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from loan_compare.api.v1.schemas import (
    AppointmentListResponse,
    AppointmentRequest,
    AppointmentSchema,
)
from loan_compare.api.dependencies import get_appointment_repository, get_request_id
from loan_compare.domain.appointments import create_appointment
from loan_compare.domain.exceptions import AppointmentNotFoundError
from loan_compare.domain.models import Appointment
from loan_compare.infrastructure.storage.repositories import AppointmentRepository
from loan_compare.infrastructure.observability.metrics import appointments_counter
from loan_compare.infrastructure.observability.logging import log_appointment_confirmation

router = APIRouter()


def _to_schema(appointment: Appointment) -> AppointmentSchema:
    return AppointmentSchema(
        id=appointment.id,
        offer_id=appointment.offer_id,
        is_bundle=appointment.is_bundle,
        appointment_date=appointment.appointment_date,
        appointment_time=appointment.appointment_time,
        status=appointment.status,
    )


@router.post("/appointments", response_model=AppointmentSchema)
def schedule_appointment(
    request_body: AppointmentRequest,
    request: Request,
    repository: AppointmentRepository = Depends(get_appointment_repository),
):
    """Book a confirmed appointment for an individual offer or a bundle"""
    request_id = get_request_id(request)

    appointment = repository.add(
        create_appointment(
            offer_id=str(request_body.offer_id),
            is_bundle=request_body.is_bundle,
            appointment_date=request_body.appointment_date,
            appointment_time=request_body.appointment_time,
            user=request_body.user.to_domain(),
        )
    )

    appointments_counter.labels(kind="bundle" if appointment.is_bundle else "offer").inc()
    log_appointment_confirmation(
        request_id,
        appointment.id,
        appointment.user.name,
        f"{appointment.appointment_date.isoformat()} {appointment.appointment_time}",
    )

    return _to_schema(appointment)


@router.get("/appointments", response_model=AppointmentListResponse)
def list_appointments(
    user_id: str = Query(..., description="User identifier"),
    repository: AppointmentRepository = Depends(get_appointment_repository),
):
    """Retrieve every appointment booked by a user"""
    appointments = repository.list_by_user(user_id)
    return AppointmentListResponse(
        user_id=user_id,
        appointments=[_to_schema(a) for a in appointments],
    )


@router.get("/appointments/{appointment_id}", response_model=AppointmentSchema)
def get_appointment(
    appointment_id: str,
    repository: AppointmentRepository = Depends(get_appointment_repository),
):
    try:
        return _to_schema(repository.get(appointment_id))
    except AppointmentNotFoundError:
        raise HTTPException(status_code=404, detail="Appointment not found")
