"""Generate text summaries of a trip timeline."""

from typing import Any, Iterable, Optional

from .dates import to_long_display
from .models import TBD
from .timeline import entry_field, group_by_date
from .times import to_12_hour


def quick_summary(entries: Iterable[Any], title: Optional[str] = None) -> str:
    """Markdown summary of the timeline, one section per day."""
    lines = []

    if title:
        lines.append(f"# {title}")
        lines.append("")

    lines.append("## Timeline")

    groups = group_by_date(entries)
    if not groups:
        lines.append("\nNothing scheduled yet.")
        return "\n".join(lines)

    for iso, day_entries in groups:
        heading = to_long_display(iso) if iso else "Unscheduled"
        lines.append(f"\n### {heading}")
        for entry in day_entries:
            lines.append(format_entry(entry))

    return "\n".join(lines)


def format_entry(entry: Any) -> str:
    """Format a single timeline entry as a bullet."""
    entry_title = entry_field(entry, "title") or entry_field(entry, "type").capitalize() or "Untitled"
    time = entry_field(entry, "time").strip() or TBD
    parts = [f"- **{entry_title}** ({to_12_hour(time)})"]

    subtitle = entry_field(entry, "subtitle")
    if subtitle:
        parts.append(f"  - {subtitle}")
    metadata = entry_field(entry, "metadata")
    if metadata:
        parts.append(f"  - {metadata}")

    return "\n".join(parts)
