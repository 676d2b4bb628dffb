"""plan_writer.py — Render a finished plan as one text line per date."""

from collections import defaultdict
from datetime import date
from pathlib import Path

from models import PlanResult, ScheduleEntry

TRACK_SEPARATOR = " | "


def format_date(d: date) -> str:
    """Format a date like 'Jan  1, 2025' (day padded to two columns)."""
    return f"{d:%b} {d.day:2d}, {d.year}"


def format_track(entries: list[ScheduleEntry]) -> list[tuple[date, str]]:
    """Describe each entry as '<titles> <chapters>' for one track."""
    lines = []
    previous_titles: list[str] = []
    last_chapter = 0
    catch_up_num = 1

    for entry in entries:
        titles = ", ".join(entry.titles)
        if entry.is_merged:
            chapters = "all"
        elif entry.is_catch_up:
            chapters = str(catch_up_num)
            catch_up_num += 1
        elif entry.titles == previous_titles:
            if last_chapter in (entry.chapters, entry.chapters - 1):
                chapters = str(entry.chapters)
            else:
                chapters = f"{last_chapter + 1}-{entry.chapters}"
        elif entry.chapters == 1:
            chapters = "1"
        else:
            chapters = f"1-{entry.chapters}"

        lines.append((entry.date, f"{titles} {chapters}"))
        if not entry.is_catch_up:
            previous_titles = entry.titles
            last_chapter = entry.chapters

    return lines


def render_plan(result: PlanResult) -> list[str]:
    """Merge every track's readings by date, adding word totals when present."""
    readings: dict[date, list[str]] = defaultdict(list)
    for entries in result.tracks:
        for day, text in format_track(entries):
            readings[day].append(text)

    words = {daily.date: daily.length for daily in result.daily_lengths}
    lines = []
    for day in sorted(readings):
        line = f"{format_date(day)} {TRACK_SEPARATOR.join(readings[day])}"
        if day in words:
            line += f" ({words[day]:,} words)"
        lines.append(line)
    return lines


def plan_filename(timestamp: int) -> str:
    return f"reading_plan_{timestamp}"


def write_plan(lines: list[str], output_dir: Path, filename: str) -> Path:
    """Write the rendered plan to output_dir/filename and return the path."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
