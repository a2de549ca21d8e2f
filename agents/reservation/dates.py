"""Convert calendar dates between ISO and the app's display formats.

Dates are civil calendar days with no time zone. Three shapes are used:

    ISO            2026-02-26
    short display  Feb 26, 2026
    long display   February 26, 2026

Formatting never raises: input that is not ISO-shaped comes back unchanged.
Parsing returns None when no date can be determined.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
MONTH_NAMES_LONG = ("January", "February", "March", "April", "May", "June",
                    "July", "August", "September", "October", "November", "December")

ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")
DISPLAY_DATE_RE = re.compile(r"^([A-Za-z]+)\s+(\d{1,2}),?\s+(\d{2,4})$")


def _split_iso(value: str) -> Optional[tuple[int, int, int]]:
    parts = value.split("-")
    if len(parts) != 3:
        return None
    try:
        year, month, day = (int(part) for part in parts)
    except ValueError:
        return None
    if not 1 <= month <= 12:
        return None
    return year, month, day


def to_short_display(iso_date: str) -> str:
    """Format YYYY-MM-DD as e.g. "Oct 15, 2024"."""
    parts = _split_iso(iso_date)
    if parts is None:
        return iso_date
    year, month, day = parts
    return f"{MONTH_NAMES[month - 1]} {day}, {year}"


def to_long_display(iso_date: str) -> str:
    """Format YYYY-MM-DD as e.g. "February 26, 2026"."""
    parts = _split_iso(iso_date)
    if parts is None:
        return iso_date
    year, month, day = parts
    return f"{MONTH_NAMES_LONG[month - 1]} {day}, {year}"


def _month_index(name: str) -> Optional[int]:
    lowered = name.lower()
    for table in (MONTH_NAMES, MONTH_NAMES_LONG):
        for index, month in enumerate(table):
            if month.lower() == lowered:
                return index
    return None


def from_display_or_iso(text: str) -> Optional[str]:
    """Resolve an ISO or display date string to YYYY-MM-DD.

    Accepts "2024-10-15", "Oct 15, 2024", "January 15, 2026" and two-digit
    years ("January 15, 26" is 2026). Day ranges are checked against 1-31
    only, not against the month's length. An ISO input is returned as given.
    """
    trimmed = text.strip()
    if not trimmed:
        return None

    iso = ISO_DATE_RE.match(trimmed)
    if iso:
        month = int(iso.group(2))
        day = int(iso.group(3))
        if 1 <= month <= 12 and 1 <= day <= 31:
            return trimmed

    display = DISPLAY_DATE_RE.match(trimmed)
    if display:
        month_name, day_str, year_str = display.groups()
        month_index = _month_index(month_name)
        if month_index is None:
            return None
        year = int(year_str)
        if year < 100:
            year += 2000
        day = int(day_str)
        if not 1 <= day <= 31:
            return None
        return f"{year:04d}-{month_index + 1:02d}-{day:02d}"

    return None


def days_between(start_date: str, end_date: str) -> int:
    """Number of calendar days a trip spans, counting both ends.

    Returns 0 if either date cannot be resolved to a real day.
    """
    start_iso = from_display_or_iso(start_date)
    end_iso = from_display_or_iso(end_date)
    if start_iso is None or end_iso is None:
        return 0
    try:
        start = datetime.strptime(start_iso, "%Y-%m-%d").date()
        end = datetime.strptime(end_iso, "%Y-%m-%d").date()
    except ValueError:
        # Passed the 1-31 check but not a real day, e.g. Feb 30
        return 0
    return max(0, (end - start).days) + 1
