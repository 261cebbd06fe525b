"""In-process storage for appointments"""

import threading
from typing import List
from loan_compare.domain.models import Appointment
from loan_compare.domain.exceptions import AppointmentNotFoundError


class AppointmentRepository:
    """Repository for appointments, held in memory for the life of the process"""

    def __init__(self):
        self._appointments: List[Appointment] = []
        self._lock = threading.Lock()

    def add(self, appointment: Appointment) -> Appointment:
        with self._lock:
            self._appointments.append(appointment)
        return appointment

    def get(self, appointment_id: str) -> Appointment:
        """
        Raises:
            AppointmentNotFoundError: If no appointment has that id
        """
        with self._lock:
            for appointment in self._appointments:
                if appointment.id == appointment_id:
                    return appointment
        raise AppointmentNotFoundError(f"Appointment {appointment_id} not found")

    def list_by_user(self, user_id: str) -> List[Appointment]:
        """Fetch a user's appointments, oldest first"""
        with self._lock:
            return [a for a in self._appointments if a.user.user_id == user_id]


appointment_repository = AppointmentRepository()
