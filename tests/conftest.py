"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add the repo root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def flight_payload():
    """Model reply for a flight confirmation, as decoded JSON."""
    return {
        "type": "flight",
        "airline": "Delta",
        "flightNumber": "DL 123",
        "departureAirport": "JFK",
        "arrivalAirport": "LAX",
        "departureDate": "2026-02-26",
        "departureTime": "06:54",
        "confirmationCode": "ABC123",
    }


@pytest.fixture
def timeline_entries():
    """Mixed timeline rows the way they come back from storage."""
    return [
        {"title": "Hilton Lisbon", "type": "hotel", "date": "October 16, 2024", "time": "3:00 PM"},
        {"title": "TAP 202", "type": "flight", "date": "2024-10-15", "time": "TBD"},
        {"title": "CP Alfa Pendular", "type": "train", "date": "Oct 15, 2024", "time": "14:00"},
        {"title": "Dinner", "type": "other", "date": "TBD", "time": "19:30"},
    ]
