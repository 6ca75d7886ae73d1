# bookit/availability.py

from datetime import date, timedelta
from typing import Iterable, List, NamedTuple, Optional, Sequence, Set, Tuple

from bookit.data import BOOKING_WINDOW_DAYS, TIME_SLOTS
from bookit.schemas import Booking, BookingStatus


class Slot(NamedTuple):
    label: str
    bookable: bool


def taken_slots(service_id: str, on_date: date, bookings: Iterable[Booking]) -> Set[str]:
    return {
        b.time
        for b in bookings
        if b.service_id == service_id
        and b.date == on_date
        and b.status == BookingStatus.confirmed
    }


def compute_availability(
    service_id: str,
    on_date: Optional[date],
    bookings: Iterable[Booking],
    slots: Sequence[str] = TIME_SLOTS,
) -> List[Slot]:
    """Every canonical slot, in canonical order, flagged bookable or not.

    Returns an empty list when no date has been chosen yet.  Computed from
    the current bookings on every call, so a cancelled booking frees its
    slot as soon as its status changes.
    """
    if on_date is None:
        return []
    taken = taken_slots(service_id, on_date, bookings)
    return [Slot(label, label not in taken) for label in slots]


def available_slots(
    service_id: str,
    on_date: Optional[date],
    bookings: Iterable[Booking],
    slots: Sequence[str] = TIME_SLOTS,
) -> List[str]:
    return [s.label for s in compute_availability(service_id, on_date, bookings, slots) if s.bookable]


def booking_window(today: date, days: int = BOOKING_WINDOW_DAYS) -> Tuple[date, date]:
    return today, today + timedelta(days=days)


def is_within_window(on_date: date, today: date, days: int = BOOKING_WINDOW_DAYS) -> bool:
    first, last = booking_window(today, days)
    return first <= on_date <= last
