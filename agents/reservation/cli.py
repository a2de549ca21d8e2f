"""Command-line interface for the reservation agent."""

import argparse
import json
import sys
from pathlib import Path

from .dates import from_display_or_iso, to_long_display, to_short_display
from .summarizer import quick_summary
from .timeline import sort_by_date_and_time
from .times import TIME_12H_RE, TIME_24H_RE, to_12_hour, to_24_hour


def _write_json(path: str, data) -> None:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    print(f"JSON data saved to: {path}")


def run_extract(args) -> None:
    from .parser import ReservationParser

    reservation_parser = ReservationParser(api_key=args.api_key)
    source = args.source

    if source.startswith(("http://", "https://")):
        print(f"Downloading {source}...")
        reservation = reservation_parser.parse_url(source)
    else:
        print(f"Parsing {Path(source).name}...")
        reservation = reservation_parser.parse_file(source)

    print(json.dumps(reservation.to_dict(), indent=2, ensure_ascii=False))

    if args.json:
        _write_json(args.json, reservation.to_dict())


def run_timeline(args) -> None:
    input_path = Path(args.entries)
    if not input_path.exists():
        raise FileNotFoundError(f"File not found: {input_path}")

    with open(input_path) as f:
        entries = json.load(f)
    if not isinstance(entries, list):
        raise ValueError("Timeline file must contain a JSON list of entries")

    print(quick_summary(entries, title=args.title))

    if args.json:
        _write_json(args.json, sort_by_date_and_time(entries))


def run_convert(args) -> None:
    value = args.value.strip()

    iso = from_display_or_iso(value)
    if iso:
        print(f"ISO:   {iso}")
        print(f"Short: {to_short_display(iso)}")
        print(f"Long:  {to_long_display(iso)}")
        return

    if TIME_12H_RE.match(value) or TIME_24H_RE.match(value):
        print(f"12-hour: {to_12_hour(value)}")
        print(f"24-hour: {to_24_hour(to_12_hour(value))}")
        return

    raise ValueError(f"Not a recognized date or time: {args.value}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Extract reservations and order trip timelines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Read a boarding pass screenshot
  python -m agents.reservation.cli extract boarding_pass.png

  # Read a hotel confirmation PDF and save the result
  python -m agents.reservation.cli extract hotel.pdf --json hotel.json

  # Print a trip's timeline in chronological order
  python -m agents.reservation.cli timeline entries.json --title "Lisbon"

  # Show a date or time in every supported format
  python -m agents.reservation.cli convert "Oct 15, 2024"
  python -m agents.reservation.cli convert 15:30
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    extract = subparsers.add_parser("extract", help="Extract a reservation from a screenshot, PDF or URL")
    extract.add_argument("source", help="Path or URL of the screenshot or PDF")
    extract.add_argument("--json", type=str, metavar="OUTPUT_PATH", help="Save the parsed reservation as JSON")
    extract.add_argument("--api-key", type=str, help="Anthropic API key (or set ANTHROPIC_API_KEY env var)")
    extract.set_defaults(func=run_extract)

    timeline = subparsers.add_parser("timeline", help="Order timeline entries from a JSON file")
    timeline.add_argument("entries", help="JSON file with a list of entries having date and time")
    timeline.add_argument("--title", type=str, help="Heading for the summary")
    timeline.add_argument("--json", type=str, metavar="OUTPUT_PATH", help="Save the sorted entries as JSON")
    timeline.set_defaults(func=run_timeline)

    convert = subparsers.add_parser("convert", help="Show a date or time in every supported format")
    convert.add_argument("value", help='e.g. "2026-02-26", "Feb 26, 2026" or "6:54pm"')
    convert.set_defaults(func=run_convert)

    args = parser.parse_args(argv)

    try:
        args.func(args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
