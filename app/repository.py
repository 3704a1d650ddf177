# app/repository.py
"""Queries and writes against the appointment store.

Store failures surface as ``BackendError``; a rejected insert on the slot
index surfaces as ``sqlalchemy.exc.IntegrityError`` for the caller to
interpret. Nothing here turns an error into an empty result.
"""

import logging
from contextlib import contextmanager
from datetime import date
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from app.errors import BackendError
from app.models import Appointment, Barber

logger = logging.getLogger(__name__)

ACTIVE_STATUSES = ("pending", "confirmed")


@contextmanager
def backend_call(session: Session, action: str):
    try:
        yield
    except IntegrityError:
        raise
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Store failure while trying to %s: %s", action, exc)
        raise BackendError(f"Could not {action}, please try again") from exc


# --- appointments ---------------------------------------------------------

def list_customer_appointments(session: Session, customer_id: int) -> List[Appointment]:
    with backend_call(session, "load appointments"):
        return list(session.exec(
            select(Appointment)
            .where(Appointment.customer_id == customer_id)
            .order_by(Appointment.date, Appointment.time)
        ).all())


def list_appointments(
    session: Session,
    on_date: Optional[date] = None,
    barber_id: Optional[int] = None,
    status: Optional[str] = None,
) -> List[Appointment]:
    stmt = select(Appointment)
    if on_date is not None:
        stmt = stmt.where(Appointment.date == on_date)
    if barber_id is not None:
        stmt = stmt.where(Appointment.barber_id == barber_id)
    if status is not None:
        stmt = stmt.where(Appointment.status == status)
    stmt = stmt.order_by(Appointment.date, Appointment.time)

    with backend_call(session, "load appointments"):
        return list(session.exec(stmt).all())


def occupied_times(session: Session, barber_id: int, on_date: date) -> set:
    with backend_call(session, "load booked times"):
        rows = session.exec(
            select(Appointment.time)
            .where(Appointment.barber_id == barber_id)
            .where(Appointment.date == on_date)
            .where(Appointment.status != "canceled")
        ).all()
    return set(rows)


def code_exists(session: Session, code: str) -> bool:
    with backend_call(session, "check the appointment code"):
        return session.exec(
            select(Appointment.id).where(Appointment.code == code)
        ).first() is not None


def get_appointment(session: Session, appointment_id: int) -> Optional[Appointment]:
    with backend_call(session, "load the appointment"):
        return session.get(Appointment, appointment_id)


def insert_appointment(
    session: Session,
    customer_id: int,
    barber_id: int,
    on_date: date,
    time: str,
    code: str,
) -> Appointment:
    appt = Appointment(
        customer_id=customer_id,
        barber_id=barber_id,
        date=on_date,
        time=time,
        code=code,
        status="pending",
    )
    session.add(appt)
    with backend_call(session, "save the appointment"):
        try:
            session.commit()
        except IntegrityError:
            session.rollback()
            raise
        session.refresh(appt)  # fills appt.id
    return appt


def set_status(session: Session, appt: Appointment, status: str) -> Appointment:
    appt.status = status
    session.add(appt)
    with backend_call(session, "update the appointment"):
        session.commit()
        session.refresh(appt)
    return appt


# --- barbers --------------------------------------------------------------

def list_barbers(session: Session, active_only: bool = False) -> List[Barber]:
    stmt = select(Barber)
    if active_only:
        stmt = stmt.where(Barber.active == True)  # noqa: E712
    stmt = stmt.order_by(Barber.name)

    with backend_call(session, "load barbers"):
        return list(session.exec(stmt).all())


def get_barber(session: Session, barber_id: int) -> Optional[Barber]:
    with backend_call(session, "load the barber"):
        return session.get(Barber, barber_id)


def create_barber(session: Session, name: str, active: bool = True) -> Barber:
    barber = Barber(name=name, active=active)
    session.add(barber)
    with backend_call(session, "save the barber"):
        session.commit()
        session.refresh(barber)
    return barber


def update_barber(
    session: Session,
    barber: Barber,
    name: Optional[str] = None,
    active: Optional[bool] = None,
) -> Barber:
    if name is not None:
        barber.name = name
    if active is not None:
        barber.active = active
    session.add(barber)
    with backend_call(session, "update the barber"):
        session.commit()
        session.refresh(barber)
    return barber
