#!/usr/bin/env python3
"""
readplan — Build a day-by-day reading plan with an even number of words per day.

Input: a chapter table (CSV or JSON) with index, title, chapter and length
(word count) for every chapter.
Output: one line per date, e.g. "Feb  3, 2025 Genesis 12-15".

Quick start:
  python readplan.py bible.csv --start 2025-01-31 --end 2025-12-31 --dry-run
  python readplan.py bible.csv --start 2025-01-01 --end 2025-12-31

Two tracks read side by side (Old and New Testament) with daily word counts:
  python readplan.py bible.csv --books 1-39 --books 40-66 --lengths
"""

import argparse
import logging
import os
import sys
import time
from datetime import date
from pathlib import Path

from dotenv import load_dotenv


def parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD")


def parse_book_range(range_str: str) -> list[int]:
    """Parse '1-39', '19' or '19-20,44' into a list of book indices (inclusive)."""
    indices: list[int] = []
    for part in range_str.split(","):
        part = part.strip()
        if not part:
            continue
        if "-" in part:
            start, end = part.split("-", 1)
            indices.extend(range(int(start), int(end) + 1))
        else:
            indices.append(int(part))
    if not indices:
        raise ValueError(f"Empty book range '{range_str}'")
    return indices


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Spread a corpus of books over a date range, evenly by word count",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Whole Bible, print instead of writing a file:
  python readplan.py bible.csv --start 2025-01-31 --end 2025-12-31 --dry-run

  # New Testament only (books 40-66):
  python readplan.py bible.csv --books 40-66 --start 2025-01-01 --end 2025-06-30

  # Psalms & Proverbs alongside the rest, with words per day:
  python readplan.py bible.csv --books 1-18,21-66 --books 19-20 --lengths

  # Custom seam where a catch-up day is preferred:
  python readplan.py bible.csv --seam "Malachi>Matthew" --seam "John>Acts"
        """,
    )
    parser.add_argument("corpus", type=Path, help="Chapter table (.csv or .json)")
    parser.add_argument(
        "--start", type=parse_date, default=None, metavar="DATE",
        help="First reading day, YYYY-MM-DD (default: READPLAN_START from .env)",
    )
    parser.add_argument(
        "--end", type=parse_date, default=None, metavar="DATE",
        help="Last reading day, YYYY-MM-DD (default: READPLAN_END from .env)",
    )
    parser.add_argument(
        "--books", action="append", default=None, metavar="RANGE",
        help="Book indices for one track, e.g. '1-39'. Repeat for parallel tracks (default: all books)",
    )
    parser.add_argument(
        "--lengths", action="store_true",
        help="Append the number of words read to every line",
    )
    parser.add_argument(
        "--seam", action="append", default=None, metavar="LEAD>TRAIL",
        help="Adjacent titles where a catch-up day is inserted first (default: READPLAN_SEAMS or Malachi>Matthew)",
    )
    parser.add_argument(
        "--catch-up-label", type=str, default=None, metavar="TEXT",
        help="Text used for catch-up days (default: 'Catch-up day')",
    )
    parser.add_argument(
        "--output", type=Path, default=None, metavar="PATH",
        help="Output file path (default: <output-dir>/reading_plan_<timestamp>)",
    )
    parser.add_argument(
        "--output-dir", type=Path, default=Path("."), metavar="DIR",
        help="Directory for the generated plan (default: current directory)",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Print the plan instead of writing it to a file",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log allocation and repair decisions",
    )
    return parser.parse_args(argv)


def resolve_dates(args: argparse.Namespace) -> tuple[date, date]:
    start = args.start or _env_date("READPLAN_START")
    end = args.end or _env_date("READPLAN_END")
    if start is None or end is None:
        print("ERROR: --start and --end are required (or READPLAN_START / READPLAN_END in .env)")
        sys.exit(1)
    return start, end


def _env_date(name: str) -> date | None:
    value = os.getenv(name, "").strip()
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        print(f"ERROR: {name}={value!r} is not a YYYY-MM-DD date")
        sys.exit(1)


def print_plan_summary(result, start: date, end: date) -> None:
    print(f"Plan: {start} → {end}")
    for i, entries in enumerate(result.tracks, start=1):
        catch_ups = sum(1 for e in entries if e.is_catch_up)
        titles = {t for e in entries if not e.is_catch_up for t in e.titles}
        last = entries[-1].date if entries else start
        print(f"  Track {i}: {len(titles)} books, {len(entries)} days, {catch_ups} catch-up days, ends {last}")
    if result.daily_lengths:
        reading = [d.length for d in result.daily_lengths if d.length]
        if reading:
            print(f"  Words/day: min {min(reading):,}  max {max(reading):,}  avg {sum(reading) // len(reading):,}")
    print()


def main(argv: list[str] | None = None):
    args = parse_args(argv)
    load_dotenv()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from corpus import load_corpus
    from errors import ReadPlanError
    from plan_config import PlanConfig, parse_seams
    from plan_writer import plan_filename, render_plan, write_plan
    from planner import build_plan

    start, end = resolve_dates(args)

    try:
        config = PlanConfig.from_env()
        if args.seam:
            config.seams = parse_seams(args.seam)
        if args.catch_up_label:
            config.catch_up_label = args.catch_up_label
        selections = [parse_book_range(r) for r in args.books] if args.books else [None]
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    print(f"Reading corpus: {args.corpus}")
    try:
        tracks = [load_corpus(args.corpus, selection) for selection in selections]
        result = build_plan(tracks, start, end, config, include_lengths=args.lengths)
    except (ReadPlanError, ValueError) as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    print_plan_summary(result, start, end)
    lines = render_plan(result)

    if args.dry_run:
        print("\n".join(lines))
        return

    if args.output:
        path = write_plan(lines, args.output.parent, args.output.name)
    else:
        path = write_plan(lines, args.output_dir, plan_filename(int(time.time())))
    print(f"Successfully wrote {len(lines)} days to {path}")


if __name__ == "__main__":
    main()
