# app/lifecycle.py
"""Appointment status transitions.

Stored statuses are pending, confirmed and canceled. "completed" is only
ever computed for display and never written back.
"""

import logging
from datetime import datetime

from sqlmodel import Session

from app import repository
from app.errors import ForbiddenError, InvalidTransitionError, NotFoundError
from app.models import Appointment
from app.slots import scheduled_at

logger = logging.getLogger(__name__)

PENDING = "pending"
CONFIRMED = "confirmed"
CANCELED = "canceled"
COMPLETED = "completed"


def starts_at(appt: Appointment) -> datetime:
    return scheduled_at(appt.date, appt.time)


def can_cancel(appt: Appointment, now: datetime) -> bool:
    return appt.status in (PENDING, CONFIRMED) and starts_at(appt) > now


def can_confirm(appt: Appointment, now: datetime) -> bool:
    return appt.status == PENDING and now >= starts_at(appt)


def display_status(appt: Appointment, now: datetime) -> str:
    if appt.status == PENDING and starts_at(appt) < now:
        return COMPLETED
    return appt.status


def cancel_appointment(
    session: Session,
    appointment_id: int,
    customer_id: int,
    now: datetime,
) -> Appointment:
    appt = repository.get_appointment(session, appointment_id)
    if appt is None:
        raise NotFoundError("Appointment not found")
    if appt.customer_id != customer_id:
        raise ForbiddenError("This appointment belongs to someone else")

    if appt.status == CANCELED:
        raise InvalidTransitionError("Appointment already canceled")
    if not can_cancel(appt, now):
        raise InvalidTransitionError("Appointments can only be canceled before they start")

    appt = repository.set_status(session, appt, CANCELED)
    logger.info("Appointment %s canceled by customer %s", appt.code, customer_id)
    return appt


def confirm_appointment(session: Session, appointment_id: int, now: datetime) -> Appointment:
    appt = repository.get_appointment(session, appointment_id)
    if appt is None:
        raise NotFoundError("Appointment not found")

    if appt.status != PENDING:
        raise InvalidTransitionError(f"Only pending appointments can be confirmed (status is {appt.status})")
    if not can_confirm(appt, now):
        raise InvalidTransitionError("Appointments can only be confirmed once their time has come")

    appt = repository.set_status(session, appt, CONFIRMED)
    logger.info("Appointment %s confirmed", appt.code)
    return appt
