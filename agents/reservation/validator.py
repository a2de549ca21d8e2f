"""Turn a vision model's reply into a typed reservation.

The model is asked for strict JSON but nothing guarantees it complies, so
everything here tolerates arbitrary input: a bad reply becomes an
UnknownReservation, never an exception.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from .models import RESERVATION_TYPES, ParsedReservation, UnknownReservation

# Characters of an unparseable reply kept for diagnostics
RAW_TEXT_EXCERPT_LENGTH = 500

INVALID_RESPONSE = "Invalid response from AI"
EMPTY_RESPONSE = "AI returned empty response"
UNIDENTIFIED_TYPE = "Could not identify reservation type"


def coerce_text(value: Any) -> str:
    """Stringify a JSON value the way the forms expect; missing becomes ""."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    try:
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (int, float)):
            return str(value)
        return json.dumps(value, separators=(",", ":"), default=str)
    except (TypeError, ValueError, RecursionError):
        return ""


def validate(raw: Any) -> ParsedReservation:
    """Build a reservation from a decoded JSON value of unknown shape."""
    if not isinstance(raw, Mapping):
        return UnknownReservation(raw_text=INVALID_RESPONSE)

    reservation_cls = None
    tag = raw.get("type")
    if isinstance(tag, str):
        reservation_cls = RESERVATION_TYPES.get(tag)

    if reservation_cls is None:
        raw_text = raw.get("rawText")
        if raw_text is None:
            raw_text = UNIDENTIFIED_TYPE
        return UnknownReservation(raw_text=coerce_text(raw_text))

    values = {attr: coerce_text(raw.get(key)) for attr, key in reservation_cls.WIRE_FIELDS}
    return reservation_cls(**values)


def strip_code_fences(text: str) -> str:
    """Remove a ```json ... ``` wrapper around the reply, if there is one."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        first_newline = cleaned.find("\n")
        if first_newline != -1:
            cleaned = cleaned[first_newline + 1:]
        if cleaned.endswith("```"):
            cleaned = cleaned[:-3]
        cleaned = cleaned.strip()
    return cleaned


def repair_json(json_str: str) -> str:
    """Fix common JSON issues models produce."""
    # Remove trailing commas before ] or }
    json_str = re.sub(r",\s*([}\]])", r"\1", json_str)

    # Remove control characters except newlines and tabs
    json_str = re.sub(r"[\x00-\x08\x0b\x0c\x0e-\x1f]", "", json_str)

    return json_str


def interpret_response(text: str | None) -> ParsedReservation:
    """Validate a raw model reply, falling back to an excerpt when it isn't JSON."""
    if not text or not text.strip():
        return UnknownReservation(raw_text=EMPTY_RESPONSE)

    cleaned = strip_code_fences(text)
    try:
        data = json.loads(cleaned)
    except (ValueError, RecursionError):
        try:
            data = json.loads(repair_json(cleaned))
        except (ValueError, RecursionError):
            return UnknownReservation(raw_text=text[:RAW_TEXT_EXCERPT_LENGTH])

    return validate(data)
