# app/booking.py

import logging
import secrets
import string
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app import repository
from app.errors import (
    BackendError,
    BarberInactiveError,
    NotFoundError,
    SlotIneligibleError,
    SlotTakenError,
    ValidationError,
)
from app.models import Appointment
from app.slots import SlotRules, candidate_times, is_grid_time, scheduled_at

logger = logging.getLogger(__name__)

CODE_ALPHABET = string.ascii_uppercase + string.digits
CODE_LENGTH = 6
CODE_ATTEMPTS = 3


@dataclass
class BookingRequest:
    customer_id: int
    barber_id: Optional[int]
    date: Optional[date]
    time: Optional[str]


def generate_code() -> str:
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(CODE_LENGTH))


def validate_request(request: BookingRequest, rules: SlotRules) -> None:
    missing = [
        name for name in ("barber_id", "date", "time")
        if getattr(request, name) is None
    ]
    if missing:
        raise ValidationError(f"Select a barber, a date and a time (missing: {', '.join(missing)})")
    if not is_grid_time(request.time, rules):
        raise ValidationError(f"{request.time} is not a bookable time")


def commit_booking(
    session: Session,
    request: BookingRequest,
    now: datetime,
    rules: SlotRules,
) -> Appointment:
    """Persist a pending appointment for ``request``.

    The unique slot index decides races: if another booking for the same
    barber/date/time got there first the insert is rejected and this
    raises ``SlotTakenError``.
    """
    # 1) Reject incomplete selections before touching the store
    validate_request(request, rules)

    # 2) Barber must exist and take new bookings
    barber = repository.get_barber(session, request.barber_id)
    if barber is None:
        raise NotFoundError("Barber not found")
    if not barber.active:
        raise BarberInactiveError(f"{barber.name} is not taking new appointments")

    # 3) The slot must still be offered by the calendar at this instant
    if (
        request.time not in candidate_times(request.date, now, rules)
        or scheduled_at(request.date, request.time) <= now
    ):
        raise SlotIneligibleError("That date and time can no longer be booked")

    # 4) Insert; the store rejects a second active booking of the slot
    for attempt in range(CODE_ATTEMPTS):
        code = generate_code()
        try:
            appt = repository.insert_appointment(
                session,
                customer_id=request.customer_id,
                barber_id=request.barber_id,
                on_date=request.date,
                time=request.time,
                code=code,
            )
        except IntegrityError as exc:
            taken = repository.occupied_times(session, request.barber_id, request.date)
            if request.time in taken:
                logger.info(
                    "Slot %s %s for barber %s already taken",
                    request.date, request.time, request.barber_id,
                )
                raise SlotTakenError("That time was just booked by someone else, pick another one")
            if not repository.code_exists(session, code):
                # some other constraint, a new code will not help
                logger.error("Appointment insert rejected: %s", exc.orig)
                raise ValidationError("The appointment could not be saved with these details") from exc
            logger.warning("Appointment code collision, retrying (attempt %d)", attempt + 1)
            continue

        logger.info(
            "Booked %s: barber %s on %s at %s for customer %s",
            appt.code, appt.barber_id, appt.date, appt.time, appt.customer_id,
        )
        return appt

    raise BackendError("Could not save the appointment, please try again")
