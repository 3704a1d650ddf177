from datetime import date, datetime, time

import pytest
from pydantic import ValidationError as PydanticValidationError

from app.config import Settings
from app.slots import (
    SlotRules,
    all_times,
    candidate_times,
    is_date_selectable,
    is_grid_time,
    scheduled_at,
)
from tests.conftest import MONDAY

TUESDAY = date(2026, 3, 10)
SATURDAY = date(2026, 3, 14)
SUNDAY = date(2026, 3, 15)

MORNING = ["08:00", "08:30", "09:00", "09:30", "10:00", "10:30", "11:00", "11:30"]
AFTERNOON = [
    "14:00", "14:30", "15:00", "15:30", "16:00",
    "16:30", "17:00", "17:30", "18:00", "18:30",
]


def test_grid_is_morning_then_afternoon(rules):
    assert list(rules.morning) == MORNING
    assert list(rules.afternoon) == AFTERNOON
    assert all_times(rules) == MORNING + AFTERNOON


def test_weekday_offers_full_grid(rules):
    assert candidate_times(TUESDAY, MONDAY, rules) == MORNING + AFTERNOON


def test_sundays_are_closed(rules):
    assert not is_date_selectable(SUNDAY, MONDAY, rules)
    assert candidate_times(SUNDAY, MONDAY, rules) == []
    # every Sunday for a couple of months
    for offset in range(0, 63, 7):
        day = date.fromordinal(SUNDAY.toordinal() + offset)
        assert candidate_times(day, MONDAY, rules) == []


def test_saturdays_only_offer_morning(rules):
    assert is_date_selectable(SATURDAY, MONDAY, rules)
    times = candidate_times(SATURDAY, MONDAY, rules)
    assert times == MORNING
    assert not set(times) & set(AFTERNOON)


def test_past_dates_are_not_selectable(rules):
    friday_before = date(2026, 3, 6)
    assert not is_date_selectable(friday_before, MONDAY, rules)
    assert candidate_times(friday_before, MONDAY, rules) == []


def test_same_day_drops_earlier_times(rules):
    now = datetime(2026, 3, 9, 15, 10)
    assert candidate_times(now.date(), now, rules) == [
        "15:30", "16:00", "16:30", "17:00", "17:30", "18:00", "18:30",
    ]


def test_same_day_closes_at_cutoff(rules):
    at_cutoff = datetime(2026, 3, 9, 18, 30)
    evening = datetime(2026, 3, 9, 19, 0)

    assert not is_date_selectable(at_cutoff.date(), at_cutoff, rules)
    assert candidate_times(evening.date(), evening, rules) == []
    # tomorrow is unaffected by today's cutoff
    assert candidate_times(TUESDAY, evening, rules) == MORNING + AFTERNOON


def test_rules_come_from_settings():
    rules = SlotRules.from_settings(Settings(
        SLOT_MINUTES=60,
        MORNING_START=time(9, 0),
        MORNING_END=time(11, 0),
        AFTERNOON_START=time(13, 0),
        AFTERNOON_END=time(15, 0),
        CLOSED_WEEKDAYS=[0, 6],
        HALF_DAY_WEEKDAYS=[],
        SAME_DAY_CUTOFF=time(17, 0),
    ))

    assert all_times(rules) == ["09:00", "10:00", "11:00", "13:00", "14:00", "15:00"]
    assert candidate_times(MONDAY.date(), datetime(2026, 3, 8, 12, 0), rules) == []
    assert candidate_times(SATURDAY, MONDAY, rules) == all_times(rules)


def test_grid_time_and_scheduled_instant(rules):
    assert is_grid_time("09:30", rules)
    assert not is_grid_time("09:15", rules)
    assert not is_grid_time("12:00", rules)
    assert scheduled_at(TUESDAY, "14:30") == datetime(2026, 3, 10, 14, 30)


def test_slot_length_must_be_positive():
    with pytest.raises(PydanticValidationError):
        Settings(SLOT_MINUTES=0)
    with pytest.raises(PydanticValidationError):
        Settings(SLOT_MINUTES=-30)
