"""Tests for turning model replies into typed reservations."""

import json

import pytest

from agents.reservation.models import (
    FlightReservation,
    HotelReservation,
    TrainReservation,
    UnknownReservation,
)
from agents.reservation.validator import (
    coerce_text,
    interpret_response,
    repair_json,
    strip_code_fences,
    validate,
)


def _deeply_nested(depth):
    value = {"type": "flight"}
    for _ in range(depth):
        value = {"type": "flight", "airline": value}
    return value


def test_flight(flight_payload):
    result = validate(flight_payload)
    assert isinstance(result, FlightReservation)
    assert result.to_dict() == flight_payload


def test_hotel_missing_fields_default_to_empty():
    result = validate({"type": "hotel", "propertyName": "Hilton", "checkInDate": "2026-02-26"})
    assert result.to_dict() == {
        "type": "hotel",
        "propertyName": "Hilton",
        "address": "",
        "checkInDate": "2026-02-26",
        "checkOutDate": "",
        "confirmationCode": "",
    }


def test_train_ignores_extra_fields():
    result = validate({"type": "train", "operator": "Amtrak", "trainNumber": 2150, "coach": "B"})
    assert isinstance(result, TrainReservation)
    assert result.operator == "Amtrak"
    assert result.train_number == "2150"
    assert result.departure_station == ""
    assert not hasattr(result, "coach")


def test_non_string_values_are_stringified():
    result = validate({"type": "flight", "airline": 7, "flightNumber": 12.0, "departureTime": None,
                       "departureAirport": True, "arrivalAirport": 1.5})
    assert result.airline == "7"
    assert result.flight_number == "12"
    assert result.departure_time == ""
    assert result.departure_airport == "true"
    assert result.arrival_airport == "1.5"


def test_not_an_object():
    assert validate("not an object") == UnknownReservation(raw_text="Invalid response from AI")


def test_unknown_type_uses_raw_text():
    result = validate({"type": "unknown", "rawText": "A photo of a cat"})
    assert result == UnknownReservation(raw_text="A photo of a cat")


@pytest.mark.parametrize("payload", [{}, {"type": "car"}, {"type": "Flight"}, {"type": ["flight"]}, {"rawText": None}])
def test_unidentified_type(payload):
    assert validate(payload) == UnknownReservation(raw_text="Could not identify reservation type")


@pytest.mark.parametrize(
    "raw",
    [None, 42, "string", [], {}, {"type": "flight"}, {"type": "flight", "airline": 7}, _deeply_nested(50)],
)
def test_validate_never_raises(raw):
    result = validate(raw)
    assert result.type in ("flight", "hotel", "train", "unknown")
    for value in result.to_dict().values():
        assert isinstance(value, str)


def test_reservations_are_immutable(flight_payload):
    result = validate(flight_payload)
    with pytest.raises(AttributeError):
        result.airline = "United"


def test_coerce_text_nested_value():
    assert coerce_text({"a": [1, 2]}) == '{"a":[1,2]}'
    assert coerce_text(False) == "false"


def test_strip_code_fences():
    assert strip_code_fences('```json\n{"type":"hotel"}\n```') == '{"type":"hotel"}'
    assert strip_code_fences('```\n{"type":"hotel"}\n```') == '{"type":"hotel"}'
    assert strip_code_fences('  {"type":"hotel"}  ') == '{"type":"hotel"}'


def test_repair_json_trailing_commas():
    assert json.loads(repair_json('{"type": "hotel", "address": "",}')) == {"type": "hotel", "address": ""}


def test_interpret_fenced_response(flight_payload):
    text = "```json\n" + json.dumps(flight_payload) + "\n```"
    assert interpret_response(text).to_dict() == flight_payload


def test_interpret_repairs_trailing_comma():
    result = interpret_response('{"type": "hotel", "propertyName": "Ritz",}')
    assert isinstance(result, HotelReservation)
    assert result.property_name == "Ritz"


def test_interpret_empty_response():
    assert interpret_response("") == UnknownReservation(raw_text="AI returned empty response")
    assert interpret_response("   \n") == UnknownReservation(raw_text="AI returned empty response")
    assert interpret_response(None) == UnknownReservation(raw_text="AI returned empty response")


def test_interpret_invalid_json_keeps_excerpt():
    text = "I could not read this image. " * 40
    result = interpret_response(text)
    assert isinstance(result, UnknownReservation)
    assert result.raw_text == text[:500]
    assert len(result.raw_text) == 500


def test_interpret_non_object_json():
    assert interpret_response("[1, 2, 3]") == UnknownReservation(raw_text="Invalid response from AI")
