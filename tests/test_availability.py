from datetime import date, datetime

import pytest
from sqlalchemy.exc import OperationalError

from app.availability import resolve_availability
from app.errors import AvailabilityUnknownError
from app.models import Appointment
from app.slots import all_times
from tests.conftest import MONDAY

TUESDAY = date(2026, 3, 10)
SATURDAY = date(2026, 3, 14)
SUNDAY = date(2026, 3, 15)


def _book(session, customer, barber, day, time, status="pending", code=None):
    appt = Appointment(
        customer_id=customer.id,
        barber_id=barber.id,
        date=day,
        time=time,
        code=code or f"T{day.day:02d}{time.replace(':', '')}",
        status=status,
    )
    session.add(appt)
    session.commit()
    session.refresh(appt)
    return appt


def test_free_weekday_returns_whole_grid(session, rules, barber):
    times = resolve_availability(session, barber.id, TUESDAY, MONDAY, rules)
    assert times == all_times(rules)
    assert len(times) == 18


def test_pending_booking_blocks_its_time(session, rules, barber, customer):
    _book(session, customer, barber, TUESDAY, "10:00")

    times = resolve_availability(session, barber.id, TUESDAY, MONDAY, rules)
    assert "10:00" not in times
    assert len(times) == len(all_times(rules)) - 1
    # order is preserved around the gap
    assert times[3:6] == ["09:30", "10:30", "11:00"]


def test_confirmed_booking_blocks_its_time(session, rules, barber, customer):
    _book(session, customer, barber, TUESDAY, "14:00", status="confirmed")
    assert "14:00" not in resolve_availability(session, barber.id, TUESDAY, MONDAY, rules)


def test_canceled_booking_never_blocks(session, rules, barber, customer):
    _book(session, customer, barber, TUESDAY, "10:00", status="canceled")
    assert "10:00" in resolve_availability(session, barber.id, TUESDAY, MONDAY, rules)


def test_bookings_are_per_barber_and_date(session, rules, barber, inactive_barber, customer):
    _book(session, customer, inactive_barber, TUESDAY, "10:00")
    _book(session, customer, barber, date(2026, 3, 11), "10:00")

    assert "10:00" in resolve_availability(session, barber.id, TUESDAY, MONDAY, rules)


def test_saturday_has_only_morning(session, rules, barber):
    times = resolve_availability(session, barber.id, SATURDAY, MONDAY, rules)
    assert times == list(rules.morning)
    assert len(times) == 8


def test_sunday_is_empty_even_with_no_bookings(session, rules, barber):
    assert resolve_availability(session, barber.id, SUNDAY, MONDAY, rules) == []


def test_today_after_cutoff_is_empty(session, rules, barber):
    evening = datetime(2026, 3, 9, 19, 0)
    assert resolve_availability(session, barber.id, evening.date(), evening, rules) == []


def test_slot_starting_now_is_not_offered(session, rules, barber):
    now = datetime(2026, 3, 9, 10, 0)
    times = resolve_availability(session, barber.id, now.date(), now, rules)
    assert times[0] == "10:30"


def test_missing_selection_is_not_an_empty_list(session, rules, barber):
    assert resolve_availability(session, None, TUESDAY, MONDAY, rules) is None
    assert resolve_availability(session, barber.id, None, MONDAY, rules) is None


def test_store_failure_is_not_treated_as_free(session, rules, barber, monkeypatch):
    def broken_exec(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is down"))

    monkeypatch.setattr(session, "exec", broken_exec)

    with pytest.raises(AvailabilityUnknownError) as excinfo:
        resolve_availability(session, barber.id, TUESDAY, MONDAY, rules)
    assert excinfo.value.kind == "availability_unknown"
    assert excinfo.value.retryable
