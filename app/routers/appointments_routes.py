# app/routers/appointments_routes.py

from datetime import datetime, date
from typing import Optional, List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app import repository
from app.booking import BookingRequest, commit_booking
from app.clock import get_now, get_rules
from app.db import get_session
from app.deps import get_admin, get_customer
from app.lifecycle import cancel_appointment, confirm_appointment, display_status
from app.models import Appointment
from app.schemas import AppointmentCreate, AppointmentPublic, AppointmentStatus
from app.slots import SlotRules

router = APIRouter(
    tags=["appointments"],
)


def to_public(appt: Appointment, now: datetime) -> dict:
    return {
        "id": appt.id,
        "code": appt.code,
        "customer_id": appt.customer_id,
        "barber_id": appt.barber_id,
        "date": appt.date,
        "time": appt.time,
        "status": appt.status,
        "display_status": display_status(appt, now),
        "created_at": appt.created_at,
    }


@router.post("/appointments", response_model=AppointmentPublic, status_code=201)
def book_appointment(
    appt: AppointmentCreate,
    session: Session = Depends(get_session),
    customer: dict = Depends(get_customer),
    now: datetime = Depends(get_now),
    rules: SlotRules = Depends(get_rules),
):
    request = BookingRequest(
        customer_id=customer["id"],
        barber_id=appt.barber_id,
        date=appt.date,
        time=appt.time,
    )
    return to_public(commit_booking(session, request, now, rules), now)


@router.get("/appointments/me", response_model=List[AppointmentPublic])
def list_my_appointments(
    session: Session = Depends(get_session),
    customer: dict = Depends(get_customer),
    now: datetime = Depends(get_now),
):
    appts = repository.list_customer_appointments(session, customer["id"])
    return [to_public(a, now) for a in appts]


@router.patch("/appointments/{appt_id}/cancel", response_model=AppointmentPublic)
def cancel_my_appointment(
    appt_id: int,
    session: Session = Depends(get_session),
    customer: dict = Depends(get_customer),
    now: datetime = Depends(get_now),
):
    return to_public(cancel_appointment(session, appt_id, customer["id"], now), now)


@router.get("/admin/appointments", response_model=List[AppointmentPublic])
def list_all_appointments(
    on_date: Optional[date] = None,
    barber_id: Optional[int] = None,
    status: Optional[AppointmentStatus] = None,
    session: Session = Depends(get_session),
    admin: dict = Depends(get_admin),
    now: datetime = Depends(get_now),
):
    appts = repository.list_appointments(
        session,
        on_date=on_date,
        barber_id=barber_id,
        status=status.value if status is not None else None,
    )
    return [to_public(a, now) for a in appts]


@router.patch("/admin/appointments/{appt_id}/confirm", response_model=AppointmentPublic)
def confirm(
    appt_id: int,
    session: Session = Depends(get_session),
    admin: dict = Depends(get_admin),
    now: datetime = Depends(get_now),
):
    return to_public(confirm_appointment(session, appt_id, now), now)
