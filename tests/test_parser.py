"""Tests for the screenshot/PDF reservation parser, with the model stubbed out."""

import base64
import json
from types import SimpleNamespace

import pytest

from agents.reservation.models import FlightReservation, UnknownReservation
from agents.reservation.parser import ReservationParser, get_mime_type


class StubMessages:
    """Stands in for client.messages, replying with canned text."""

    def __init__(self, reply):
        self.reply = reply
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        return SimpleNamespace(content=[SimpleNamespace(type="text", text=self.reply)])


@pytest.fixture
def make_parser(monkeypatch):
    monkeypatch.delenv("RESERVATION_MODEL", raising=False)

    def _make(reply):
        parser = ReservationParser(api_key="test-key")
        parser.client = SimpleNamespace(messages=StubMessages(reply))
        return parser

    return _make


def test_requires_api_key(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    with pytest.raises(ValueError, match="API key"):
        ReservationParser()


def test_mime_type():
    assert get_mime_type("shot.PNG") == "image/png"
    assert get_mime_type("shot.webp") == "image/webp"
    assert get_mime_type("shot.gif") == "image/gif"
    assert get_mime_type("shot.heic") == "image/jpeg"


def test_parse_image(tmp_path, make_parser, flight_payload):
    image = tmp_path / "boarding_pass.png"
    image.write_bytes(b"\x89PNG fake image")
    parser = make_parser("```json\n" + json.dumps(flight_payload) + "\n```")

    result = parser.parse_file(image)

    assert isinstance(result, FlightReservation)
    assert result.flight_number == "DL 123"

    call = parser.client.messages.calls[0]
    assert call["model"] == "claude-sonnet-4-20250514"
    image_block = call["messages"][0]["content"][1]
    assert image_block["source"]["media_type"] == "image/png"
    assert base64.b64decode(image_block["source"]["data"]) == b"\x89PNG fake image"


def test_parse_text_with_unreadable_reply(make_parser):
    parser = make_parser("Sorry, I can't help with that.")
    result = parser.parse_text("Your booking is confirmed")
    assert result == UnknownReservation(raw_text="Sorry, I can't help with that.")
    prompt = parser.client.messages.calls[0]["messages"][0]["content"][0]["text"]
    assert prompt.endswith("Your booking is confirmed")


def test_parse_empty_reply(make_parser):
    parser = make_parser("")
    assert parser.parse_text("anything") == UnknownReservation(raw_text="AI returned empty response")


def test_parse_file_missing(make_parser, tmp_path):
    with pytest.raises(FileNotFoundError):
        make_parser("{}").parse_file(tmp_path / "missing.png")


def test_parse_file_unsupported(make_parser, tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("hello")
    with pytest.raises(ValueError, match="Unsupported file format"):
        make_parser("{}").parse_file(path)


def test_parse_url_image(make_parser, monkeypatch, flight_payload):
    response = SimpleNamespace(
        content=b"jpeg bytes",
        headers={"Content-Type": "image/jpeg; charset=binary"},
        raise_for_status=lambda: None,
    )
    monkeypatch.setattr("agents.reservation.parser.requests.get", lambda url, timeout: response)
    parser = make_parser(json.dumps(flight_payload))

    result = parser.parse_url("https://example.com/pass")

    assert result.airline == "Delta"
    image_block = parser.client.messages.calls[0]["messages"][0]["content"][1]
    assert image_block["source"]["media_type"] == "image/jpeg"
