"""Convert clock times between 24-hour and 12-hour text."""

from __future__ import annotations

import re

TIME_24H_RE = re.compile(r"^(\d{1,2}):(\d{2})$")
TIME_12H_RE = re.compile(r"^(\d{1,2}):(\d{2})\s*([AaPp][Mm])$")

# Where a "TBD" time sorts within its day
END_OF_DAY_MINUTES = 24 * 60


def to_12_hour(value: str) -> str:
    """Normalize a time for display, e.g. "15:00" -> "3:00 PM", "06:54am" -> "6:54 AM".

    "TBD", empty strings and anything unrecognized are returned unchanged.
    """
    if not value or value == "TBD":
        return value
    trimmed = value.strip()

    match = TIME_12H_RE.match(trimmed)
    if match:
        hours = int(match.group(1))
        if not 1 <= hours <= 12:
            return value
        return f"{hours}:{match.group(2)} {match.group(3).upper()}"

    match = TIME_24H_RE.match(trimmed)
    if match:
        hours = int(match.group(1))
        if not 0 <= hours <= 23:
            return value
        period = "AM" if hours < 12 else "PM"
        display_hours = hours % 12 or 12
        return f"{display_hours}:{match.group(2)} {period}"

    return value


def to_24_hour(value: str) -> str:
    """Convert "2:30 PM" to "14:30" for the time picker.

    Values without an am/pm marker are assumed to be 24hr already and are
    returned unchanged, as is anything that doesn't look like a 12hr time.
    """
    if not value:
        return ""
    if not re.search(r"[ap]m", value, re.IGNORECASE):
        return value

    match = TIME_12H_RE.match(value.strip())
    if not match:
        return value

    hours = int(match.group(1))
    period = match.group(3).upper()
    if period == "PM" and hours != 12:
        hours += 12
    elif period == "AM" and hours == 12:
        hours = 0
    return f"{hours:02d}:{match.group(2)}"


def minutes_since_midnight(value: str) -> int:
    """Sort key for a time within its day.

    "TBD" and empty times go to the end of the day; times that can't be
    read at all go to the start.
    """
    trimmed = (value or "").strip()
    if not trimmed or trimmed == "TBD":
        return END_OF_DAY_MINUTES

    match = TIME_24H_RE.match(trimmed)
    if match:
        return int(match.group(1)) * 60 + int(match.group(2))

    match = TIME_12H_RE.match(trimmed)
    if match:
        hours = int(match.group(1)) % 12
        if match.group(3).upper() == "PM":
            hours += 12
        return hours * 60 + int(match.group(2))

    return 0
