# app/slots.py
"""Daily time grid and day-level booking rules.

Nothing here touches the database. Every check takes ``now`` as an argument
so callers decide what the current instant is.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import FrozenSet, List, Optional

from app.config import Settings, settings as default_settings

TIME_FORMAT = "%H:%M"


def _step(start: time, end: time, minutes: int) -> List[str]:
    """Grid values from ``start`` to ``end`` inclusive, ``minutes`` apart."""
    anchor = date(2000, 1, 1)
    current = datetime.combine(anchor, start)
    last = datetime.combine(anchor, end)
    delta = timedelta(minutes=minutes)

    values = []
    while current <= last:
        values.append(current.strftime(TIME_FORMAT))
        current += delta
    return values


def parse_time(value: str) -> time:
    return datetime.strptime(value, TIME_FORMAT).time()


def scheduled_at(day: date, value: str) -> datetime:
    """The naive local instant an appointment at ``day``/``value`` starts."""
    return datetime.combine(day, parse_time(value))


@dataclass(frozen=True)
class SlotRules:
    morning: tuple
    afternoon: tuple
    closed_weekdays: FrozenSet[int]
    half_day_weekdays: FrozenSet[int]
    same_day_cutoff: time

    @classmethod
    def from_settings(cls, s: Optional[Settings] = None) -> "SlotRules":
        s = s or default_settings
        return cls(
            morning=tuple(_step(s.MORNING_START, s.MORNING_END, s.SLOT_MINUTES)),
            afternoon=tuple(_step(s.AFTERNOON_START, s.AFTERNOON_END, s.SLOT_MINUTES)),
            closed_weekdays=frozenset(s.CLOSED_WEEKDAYS),
            half_day_weekdays=frozenset(s.HALF_DAY_WEEKDAYS),
            same_day_cutoff=s.SAME_DAY_CUTOFF,
        )


def all_times(rules: SlotRules) -> List[str]:
    return list(rules.morning) + list(rules.afternoon)


def is_grid_time(value: str, rules: SlotRules) -> bool:
    return value in rules.morning or value in rules.afternoon


def is_date_selectable(day: date, now: datetime, rules: SlotRules) -> bool:
    """Whether ``day`` can be picked at all, ignoring bookings.

    Closed weekdays and past dates are never selectable. Today stops being
    selectable once the wall clock reaches the same-day cutoff.
    """
    if day.weekday() in rules.closed_weekdays:
        return False

    today = now.date()
    if day < today:
        return False
    if day == today and now.time() >= rules.same_day_cutoff:
        return False

    return True


def candidate_times(day: date, now: datetime, rules: SlotRules) -> List[str]:
    """Ordered grid values offered on ``day`` before bookings are subtracted."""
    if not is_date_selectable(day, now, rules):
        return []

    times = list(rules.morning)
    # half days drop the afternoon block entirely
    if day.weekday() not in rules.half_day_weekdays:
        times.extend(rules.afternoon)

    if day == now.date():
        current = now.time()
        times = [t for t in times if parse_time(t) >= current]

    return times
