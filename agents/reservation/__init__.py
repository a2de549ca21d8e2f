"""Reservation Agent - Read reservations from screenshots and keep trip timelines in order."""

from .models import (
    FlightReservation,
    HotelReservation,
    TrainReservation,
    UnknownReservation,
    ParsedReservation,
    Reservation,
    TimelineItem,
)
from .dates import to_short_display, to_long_display, from_display_or_iso, days_between
from .times import to_12_hour, to_24_hour
from .validator import validate, interpret_response
from .timeline import sort_by_date_and_time, group_by_date

__all__ = [
    "FlightReservation",
    "HotelReservation",
    "TrainReservation",
    "UnknownReservation",
    "ParsedReservation",
    "Reservation",
    "TimelineItem",
    "to_short_display",
    "to_long_display",
    "from_display_or_iso",
    "days_between",
    "to_12_hour",
    "to_24_hour",
    "validate",
    "interpret_response",
    "sort_by_date_and_time",
    "group_by_date",
]
