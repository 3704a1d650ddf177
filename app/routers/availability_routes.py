# app/routers/availability_routes.py

from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.availability import resolve_availability
from app.clock import get_now, get_rules
from app.db import get_session
from app.schemas import AvailabilityResponse, DateSelectableResponse
from app.slots import SlotRules, is_date_selectable

router = APIRouter(
    tags=["availability"],
)


@router.get("/availability", response_model=AvailabilityResponse)
def availability(
    barber_id: Optional[int] = None,
    date: Optional[date] = None,
    session: Session = Depends(get_session),
    now: datetime = Depends(get_now),
    rules: SlotRules = Depends(get_rules),
):
    times = resolve_availability(session, barber_id, date, now, rules)
    if times is None:
        return {"selected": False, "barber_id": barber_id, "date": date, "times": None}
    return {"selected": True, "barber_id": barber_id, "date": date, "times": times}


@router.get("/dates/{day}/selectable", response_model=DateSelectableResponse)
def date_selectable(
    day: date,
    now: datetime = Depends(get_now),
    rules: SlotRules = Depends(get_rules),
):
    return {"date": day, "selectable": is_date_selectable(day, now, rules)}
