"""Order itinerary entries into a single chronological timeline."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Optional, TypeVar

from .dates import from_display_or_iso
from .times import minutes_since_midnight

# Sort key for entries whose date can't be resolved (they go last)
UNRESOLVED_DATE = "9999-12-31"

T = TypeVar("T")


def entry_field(entry: Any, name: str) -> str:
    if isinstance(entry, Mapping):
        value = entry.get(name)
    else:
        value = getattr(entry, name, None)
    return value if isinstance(value, str) else ""


def timeline_key(entry: Any) -> tuple[str, int]:
    """(resolved ISO date, minutes since midnight) for one entry."""
    iso = from_display_or_iso(entry_field(entry, "date")) or UNRESOLVED_DATE
    return iso, minutes_since_midnight(entry_field(entry, "time"))


def sort_by_date_and_time(entries: Iterable[T]) -> list[T]:
    """Return entries ordered by date, then time of day.

    Entries with the same date and time keep their input order. The input
    is not modified.
    """
    return sorted(entries, key=timeline_key)


def group_by_date(entries: Iterable[T]) -> list[tuple[Optional[str], list[T]]]:
    """Sort entries and bucket them by day.

    Returns (iso_date, entries) pairs in chronological order; entries
    without a usable date are collected under None at the end.
    """
    groups: list[tuple[Optional[str], list[T]]] = []
    for entry in sort_by_date_and_time(entries):
        iso = from_display_or_iso(entry_field(entry, "date"))
        if groups and groups[-1][0] == iso:
            groups[-1][1].append(entry)
        else:
            groups.append((iso, [entry]))
    return groups
