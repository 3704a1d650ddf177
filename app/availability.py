# app/availability.py

import logging
from datetime import date, datetime
from typing import List, Optional

from sqlmodel import Session

from app import repository
from app.errors import AvailabilityUnknownError, BackendError
from app.slots import SlotRules, candidate_times, scheduled_at

logger = logging.getLogger(__name__)


def resolve_availability(
    session: Session,
    barber_id: Optional[int],
    day: Optional[date],
    now: datetime,
    rules: SlotRules,
) -> Optional[List[str]]:
    """Bookable times for a barber on a day, in grid order.

    Returns ``None`` while barber or date is still unselected, which is not
    the same as an empty list (nothing left to book). The barber is not
    looked up here.
    """
    if barber_id is None or day is None:
        return None

    # 1) Grid values the day allows at all
    candidates = candidate_times(day, now, rules)
    if not candidates:
        return []

    # 2) Times already held by pending/confirmed bookings
    try:
        taken = repository.occupied_times(session, barber_id, day)
    except BackendError as exc:
        raise AvailabilityUnknownError(
            "Could not check which times are booked, please try again"
        ) from exc

    # 3) Subtract bookings and anything not strictly in the future
    available = [
        t for t in candidates
        if t not in taken and scheduled_at(day, t) > now
    ]

    logger.debug(
        "Barber %s on %s: %d candidates, %d taken, %d available",
        barber_id, day, len(candidates), len(taken), len(available),
    )
    return available
