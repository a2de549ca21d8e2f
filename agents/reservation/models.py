"""Data models for reservation parsing and the trip timeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal, Optional, Union

from .times import to_12_hour

# Marks a date or time the traveler has not filled in yet
TBD = "TBD"

# Placeholder shown when a reservation has no confirmation code
NO_CONFIRMATION = "—"

DEFAULT_HEADER_IMAGE = "https://images.unsplash.com/photo-1488646953014-85cb44e25828?w=800"
DEFAULT_CHECK_IN_TIME = "3:00 PM"
DEFAULT_CHECK_OUT_TIME = "11:00 AM"


@dataclass(frozen=True)
class FlightReservation:
    """A flight read off a confirmation screenshot."""

    airline: str = ""
    flight_number: str = ""
    departure_airport: str = ""
    arrival_airport: str = ""
    departure_date: str = ""  # YYYY-MM-DD
    departure_time: str = ""  # HH:MM (24hr)
    confirmation_code: str = ""
    type: Literal["flight"] = field(default="flight", init=False)

    WIRE_FIELDS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("airline", "airline"),
        ("flight_number", "flightNumber"),
        ("departure_airport", "departureAirport"),
        ("arrival_airport", "arrivalAirport"),
        ("departure_date", "departureDate"),
        ("departure_time", "departureTime"),
        ("confirmation_code", "confirmationCode"),
    )

    def to_dict(self) -> dict:
        return _wire_dict(self)


@dataclass(frozen=True)
class HotelReservation:
    """A hotel stay read off a confirmation screenshot."""

    property_name: str = ""
    address: str = ""
    check_in_date: str = ""  # YYYY-MM-DD
    check_out_date: str = ""  # YYYY-MM-DD
    confirmation_code: str = ""
    type: Literal["hotel"] = field(default="hotel", init=False)

    WIRE_FIELDS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("property_name", "propertyName"),
        ("address", "address"),
        ("check_in_date", "checkInDate"),
        ("check_out_date", "checkOutDate"),
        ("confirmation_code", "confirmationCode"),
    )

    def to_dict(self) -> dict:
        return _wire_dict(self)


@dataclass(frozen=True)
class TrainReservation:
    """A train journey read off a confirmation screenshot."""

    operator: str = ""
    train_number: str = ""
    departure_station: str = ""
    arrival_station: str = ""
    departure_date: str = ""  # YYYY-MM-DD
    departure_time: str = ""  # HH:MM (24hr)
    confirmation_code: str = ""
    type: Literal["train"] = field(default="train", init=False)

    WIRE_FIELDS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("operator", "operator"),
        ("train_number", "trainNumber"),
        ("departure_station", "departureStation"),
        ("arrival_station", "arrivalStation"),
        ("departure_date", "departureDate"),
        ("departure_time", "departureTime"),
        ("confirmation_code", "confirmationCode"),
    )

    def to_dict(self) -> dict:
        return _wire_dict(self)


@dataclass(frozen=True)
class UnknownReservation:
    """Anything the model could not classify, with a short diagnostic."""

    raw_text: str = ""
    type: Literal["unknown"] = field(default="unknown", init=False)

    WIRE_FIELDS: ClassVar[tuple[tuple[str, str], ...]] = (("raw_text", "rawText"),)

    def to_dict(self) -> dict:
        return _wire_dict(self)


ParsedReservation = Union[
    FlightReservation, HotelReservation, TrainReservation, UnknownReservation
]

# Reservation classes keyed by the model's "type" tag
RESERVATION_TYPES: dict[str, type] = {
    "flight": FlightReservation,
    "hotel": HotelReservation,
    "train": TrainReservation,
}


def _wire_dict(reservation) -> dict:
    data = {"type": reservation.type}
    for attr, key in reservation.WIRE_FIELDS:
        data[key] = getattr(reservation, attr)
    return data


@dataclass
class Reservation:
    """A confirmed booking, shaped the way the reservations table stores it."""

    trip_id: str
    type: str  # flight, hotel, train
    provider_name: str
    route: str
    date: str
    duration: str = ""
    status: str = "confirmed"
    confirmation_code: str = NO_CONFIRMATION
    status_text: str = ""
    header_image_url: str = DEFAULT_HEADER_IMAGE
    address: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "trip_id": self.trip_id,
            "type": self.type,
            "provider_name": self.provider_name,
            "route": self.route,
            "date": self.date,
            "duration": self.duration,
            "status": self.status,
            "confirmation_code": self.confirmation_code,
            "status_text": self.status_text,
            "header_image_url": self.header_image_url,
            "address": self.address,
        }


@dataclass
class TimelineItem:
    """A single row on a trip's timeline."""

    trip_id: str
    type: str
    date: str
    time: str
    title: str
    subtitle: str = ""
    metadata: Optional[str] = None
    action_label: str = ""
    action_icon: str = ""

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "TimelineItem":
        """Build an item from a stored timeline row, showing its time in 12hr form."""
        return cls(
            trip_id=row.get("trip_id") or "",
            type=row.get("type") or "",
            date=row.get("date") or "",
            time=to_12_hour(row.get("time") or ""),
            title=row.get("title") or "",
            subtitle=row.get("subtitle") or "",
            metadata=row.get("metadata"),
            action_label=row.get("action_label") or "",
            action_icon=row.get("action_icon") or "",
        )

    def to_dict(self) -> dict:
        return {
            "trip_id": self.trip_id,
            "type": self.type,
            "date": self.date,
            "time": self.time,
            "title": self.title,
            "subtitle": self.subtitle,
            "metadata": self.metadata,
            "action_label": self.action_label,
            "action_icon": self.action_icon,
        }
