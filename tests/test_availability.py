from datetime import date

import pytest

from bookit.availability import (
    available_slots, booking_window, compute_availability, is_within_window, taken_slots,
)
from bookit.data import TIME_SLOTS

from conftest import make_booking

JUNE_1 = date(2025, 6, 1)


def test_canonical_enumeration():
    assert len(TIME_SLOTS) == 19
    assert TIME_SLOTS[0] == "09:00 AM"
    assert TIME_SLOTS[-1] == "06:00 PM"


def test_booked_slot_excluded_others_offered():
    bookings = [make_booking(service_id="svc_1", date=JUNE_1, time="10:00 AM")]
    free = available_slots("svc_1", JUNE_1, bookings)
    assert "10:00 AM" not in free
    assert len(free) == 18
    assert free == [s for s in TIME_SLOTS if s != "10:00 AM"]


def test_order_is_canonical():
    bookings = [make_booking(time="09:30 AM"), make_booking(id="b2", time="05:00 PM")]
    result = compute_availability("svc_1", JUNE_1, bookings)
    assert [s.label for s in result] == TIME_SLOTS
    assert [s.label for s in result if not s.bookable] == ["09:30 AM", "05:00 PM"]


def test_cancelled_booking_does_not_hold_slot():
    bookings = [make_booking(status="cancelled")]
    assert "10:00 AM" in available_slots("svc_1", JUNE_1, bookings)


@pytest.mark.parametrize("override", [
    {"service_id": "svc_other"},
    {"date": date(2025, 6, 2)},
])
def test_other_service_or_date_ignored(override):
    bookings = [make_booking(**override)]
    assert taken_slots("svc_1", JUNE_1, bookings) == set()


def test_no_date_means_no_slots():
    assert compute_availability("svc_1", None, [make_booking()]) == []


def test_availability_equals_canonical_minus_taken():
    bookings = [
        make_booking(id="a", time="09:00 AM"),
        make_booking(id="b", time="12:00 PM"),
        make_booking(id="c", time="12:00 PM", status="cancelled"),
        make_booking(id="d", time="03:00 PM", service_id="svc_2"),
    ]
    expected = [s for s in TIME_SLOTS if s not in {"09:00 AM", "12:00 PM"}]
    assert available_slots("svc_1", JUNE_1, bookings) == expected


def test_window_is_inclusive_sixty_days():
    today = date(2025, 5, 20)
    first, last = booking_window(today)
    assert first == today
    assert last == date(2025, 7, 19)
    assert is_within_window(today, today)
    assert is_within_window(last, today)
    assert not is_within_window(date(2025, 5, 19), today)
    assert not is_within_window(date(2025, 7, 20), today)
