"""Build reservation and timeline records from confirmed reservation details.

These are the records the app saves once a traveler confirms a parsed or
manually entered reservation. Saving them is the caller's job.
"""

from __future__ import annotations

import re
from typing import Optional

from .dates import from_display_or_iso, to_long_display
from .models import (
    DEFAULT_CHECK_IN_TIME,
    DEFAULT_CHECK_OUT_TIME,
    NO_CONFIRMATION,
    TBD,
    FlightReservation,
    HotelReservation,
    ParsedReservation,
    Reservation,
    TimelineItem,
    TrainReservation,
)
from .times import to_12_hour

Booking = tuple[Reservation, TimelineItem]


def _display_date(value: str) -> str:
    iso = from_display_or_iso(value or "")
    return to_long_display(iso) if iso else TBD


def _display_time(value: str) -> str:
    trimmed = (value or "").strip()
    return to_12_hour(trimmed) if trimmed else TBD


def _route(origin: str, destination: str) -> str:
    stops = [stop.strip() for stop in (origin, destination) if stop and stop.strip()]
    return " → ".join(stops) or TBD


def _conf_metadata(code: str) -> Optional[str]:
    return f"Conf: #{code}" if code else None


def _transit_booking(
    kind: str,
    trip_id: str,
    provider: str,
    number: str,
    origin: str,
    destination: str,
    departure_date: str,
    departure_time: str,
    confirmation_number: str,
    action_label: str,
    action_icon: str,
) -> Booking:
    route = _route(origin, destination)
    number = (number or "").strip()
    title = f"{provider} {number}" if number else provider
    date = _display_date(departure_date)
    code = (confirmation_number or "").strip()

    reservation = Reservation(
        trip_id=trip_id,
        type=kind,
        provider_name=provider,
        route=route,
        date=date,
        confirmation_code=code or NO_CONFIRMATION,
        status_text="On Time",
    )
    item = TimelineItem(
        trip_id=trip_id,
        type=kind,
        date=date,
        time=_display_time(departure_time),
        title=title,
        subtitle=route,
        metadata=_conf_metadata(code),
        action_label=action_label,
        action_icon=action_icon,
    )
    return reservation, item


def flight_booking(
    trip_id: str,
    airline: str,
    departure_airport: str,
    arrival_airport: str,
    departure_date: str,
    departure_time: str,
    flight_number: str = "",
    confirmation_number: str = "",
) -> Booking:
    """Reservation plus timeline row for a flight."""
    return _transit_booking(
        "flight",
        trip_id,
        (airline or "").strip() or "Flight",
        flight_number,
        departure_airport,
        arrival_airport,
        departure_date,
        departure_time,
        confirmation_number,
        action_label="Boarding Pass",
        action_icon="qr-code-scanner",
    )


def train_booking(
    trip_id: str,
    operator: str,
    departure_station: str,
    arrival_station: str,
    departure_date: str,
    departure_time: str,
    train_number: str = "",
    confirmation_number: str = "",
) -> Booking:
    """Reservation plus timeline row for a train."""
    return _transit_booking(
        "train",
        trip_id,
        (operator or "").strip() or "Train",
        train_number,
        departure_station,
        arrival_station,
        departure_date,
        departure_time,
        confirmation_number,
        action_label="View Ticket",
        action_icon="qr-code",
    )


def stay_range_display(check_in_date: str, check_out_date: str) -> str:
    """Long-display stay range, or a single date for a same-day stay."""
    check_in = from_display_or_iso(check_in_date or "")
    check_out = from_display_or_iso(check_out_date or "")
    if not check_in or not check_out:
        return TBD
    if check_in == check_out:
        return to_long_display(check_in)
    return f"{to_long_display(check_in)} - {to_long_display(check_out)}"


def lodging_booking(
    trip_id: str,
    property_name: str,
    check_in_date: str,
    check_out_date: str,
    address: str = "",
    confirmation_number: str = "",
) -> Booking:
    """Reservation plus check-in timeline row for a hotel stay."""
    name = (property_name or "").strip() or "Hotel"
    code = (confirmation_number or "").strip()
    stay = stay_range_display(check_in_date, check_out_date)

    reservation = Reservation(
        trip_id=trip_id,
        type="hotel",
        provider_name=name,
        route=name,
        date=_display_date(check_in_date),
        duration=stay,
        confirmation_code=code or NO_CONFIRMATION,
        status_text="Confirmed",
        address=(address or "").strip() or None,
    )
    item = TimelineItem(
        trip_id=trip_id,
        type="hotel",
        date=_display_date(check_in_date),
        time=DEFAULT_CHECK_IN_TIME,
        title=name,
        subtitle=f"Check-in {DEFAULT_CHECK_IN_TIME}",
        metadata=f"Check-out {DEFAULT_CHECK_OUT_TIME}",
        action_label="Get Directions",
        action_icon="directions",
    )
    return reservation, item


def booking_from_parsed(parsed: ParsedReservation, trip_id: str) -> Optional[Booking]:
    """Records for a parsed reservation; None when the type was not identified."""
    if isinstance(parsed, FlightReservation):
        return flight_booking(
            trip_id,
            parsed.airline,
            parsed.departure_airport,
            parsed.arrival_airport,
            parsed.departure_date,
            parsed.departure_time,
            flight_number=parsed.flight_number,
            confirmation_number=parsed.confirmation_code,
        )
    if isinstance(parsed, HotelReservation):
        return lodging_booking(
            trip_id,
            parsed.property_name,
            parsed.check_in_date,
            parsed.check_out_date,
            address=parsed.address,
            confirmation_number=parsed.confirmation_code,
        )
    if isinstance(parsed, TrainReservation):
        return train_booking(
            trip_id,
            parsed.operator,
            parsed.departure_station,
            parsed.arrival_station,
            parsed.departure_date,
            parsed.departure_time,
            train_number=parsed.train_number,
            confirmation_number=parsed.confirmation_code,
        )
    return None


# Reading stored records back into form fields

def split_route(route: str) -> tuple[str, str]:
    """("JFK", "LAX") from "JFK → LAX", "JFK - LAX" or "JFK to LAX"."""
    parts = [part.strip() for part in re.split(r"\s*[→\-–—]\s*|\s+to\s+", route or "", flags=re.IGNORECASE)]
    if len(parts) >= 2:
        return parts[0], parts[1]
    return (parts[0] if parts else ""), ""


def split_stay_range(duration: str, fallback_date: str = "") -> tuple[Optional[str], Optional[str]]:
    """Check-in and check-out ISO dates from a stored stay range."""
    check_in = check_out = None
    duration = (duration or "").strip()
    if duration:
        # Spaced dashes only, so ISO dates stay whole
        parts = re.split(r"\s+[-–—]\s+", duration)
        if len(parts) >= 2:
            check_in = from_display_or_iso(parts[0])
            check_out = from_display_or_iso(parts[1])
        else:
            check_in = check_out = from_display_or_iso(duration)
    if not check_in and fallback_date:
        check_in = check_out = from_display_or_iso(fallback_date)
    return check_in, check_out


def split_title(title: str, provider_name: str) -> tuple[str, str]:
    """(provider, number) from a timeline title like "Delta DL 123"."""
    title = (title or "").strip()
    provider = (provider_name or "").strip()

    if provider and title.lower().startswith(provider.lower()):
        return provider, title[len(provider):].strip()

    last_space = title.rfind(" ")
    if last_space > 0:
        candidate = title[last_space + 1:]
        if re.search(r"\d", candidate):
            return title[:last_space], candidate

    return title, ""


# Display helpers

def reservation_date_display(reservation: Reservation) -> str:
    """Date line for a reservation card, with the duration when it adds anything."""
    duration = (reservation.duration or "").strip()
    has_duration = bool(duration) and duration not in ("—", "-")

    if reservation.type == "hotel":
        if " - " in duration:
            return duration
        if duration == reservation.date:
            return reservation.date

    return f"{reservation.date} • {duration}" if has_duration else reservation.date


def reservation_display_address(reservation: Reservation) -> Optional[str]:
    if reservation.address:
        return reservation.address
    if reservation.type == "hotel" and reservation.route:
        return reservation.route
    return None
