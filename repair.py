"""repair.py — Stretch an assigned schedule so it finishes on the end date.

The allocator rounds long books down, so the naive assignment usually stops a
few days early. The slack is absorbed by, in order:

  1. catch-up days at configured seams (e.g. between the two Testaments)
  2. one catch-up day at the end of the plan
  3. splitting merged readings of short books into one day per book
  4. catch-up days spread evenly between books
"""

import logging
from datetime import date, timedelta

from models import BookRecord, ScheduleEntry
from plan_config import PlanConfig

logger = logging.getLogger(__name__)


def days_left(entries: list[ScheduleEntry], end: date) -> int:
    if not entries:
        return 0
    return (end - entries[-1].date).days


def shift_dates(entries: list[ScheduleEntry], start_index: int, days: int) -> None:
    """Move every entry from start_index onwards `days` days later."""
    delta = timedelta(days=days)
    for entry in entries[start_index:]:
        entry.date += delta


def catch_up_entry(label: str, on: date) -> ScheduleEntry:
    return ScheduleEntry(titles=[label], chapters=0, date=on, is_catch_up=True)


def insert_catch_up(entries: list[ScheduleEntry], index: int, label: str) -> None:
    """Insert a catch-up day right after entries[index], pushing the rest back a day."""
    entries.insert(index + 1, catch_up_entry(label, entries[index + 1].date))
    shift_dates(entries, index + 2, 1)


def split_merged_entry(
    entries: list[ScheduleEntry],
    index: int,
    books: dict[str, BookRecord],
) -> int:
    """
    Replace the merged entry at index with one whole-book entry per title on
    consecutive days. Returns the number of titles split out.
    """
    merged = entries.pop(index)
    for offset, title in enumerate(merged.titles):
        entries.insert(index + offset, ScheduleEntry(
            titles=[title],
            chapters=books[title].chapter_count,
            date=merged.date + timedelta(days=offset),
        ))
    count = len(merged.titles)
    shift_dates(entries, index + count, count - 1)
    return count


def _is_seam(first: ScheduleEntry, second: ScheduleEntry, seams: list[tuple[str, str]]) -> bool:
    if first.is_catch_up or second.is_catch_up:
        return False
    return any(lead in first.titles and trail in second.titles for lead, trail in seams)


def _largest_merged(entries: list[ScheduleEntry], room: int) -> int | None:
    """Index of the merged entry with most chapters that fits in `room` days (last on ties)."""
    best = None
    for i, entry in enumerate(entries):
        if not entry.is_merged or len(entry.titles) - 1 > room:
            continue
        if best is None or entry.chapters >= entries[best].chapters:
            best = i
    return best


def fill_seams(entries: list[ScheduleEntry], end: date, config: PlanConfig) -> int:
    """Insert a catch-up day at each seam found in one pass while slack remains."""
    slack = days_left(entries, end)
    inserted = 0
    i = 0
    while i < len(entries) - 1 and slack > 0:
        if _is_seam(entries[i], entries[i + 1], config.seams):
            logger.debug("Catch-up day at seam %s / %s", entries[i].titles[-1], entries[i + 1].titles[0])
            insert_catch_up(entries, i, config.catch_up_label)
            slack -= 1
            inserted += 1
        i += 1
    return inserted


def fill_tail(entries: list[ScheduleEntry], end: date, config: PlanConfig) -> int:
    if not entries or days_left(entries, end) <= 0:
        return 0
    entries.append(catch_up_entry(config.catch_up_label, entries[-1].date + timedelta(days=1)))
    return 1


def split_merged_groups(entries: list[ScheduleEntry], end: date, books: dict[str, BookRecord]) -> int:
    """Split merged readings, largest first, while more than one day of slack is left."""
    slack = days_left(entries, end)
    splits = 0
    while slack > 1:
        index = _largest_merged(entries, days_left(entries, end))
        if index is None:
            break
        logger.debug("Splitting %s over separate days", ", ".join(entries[index].titles))
        slack -= split_merged_entry(entries, index, books)
        splits += 1
    return splits


def spread_catch_ups(entries: list[ScheduleEntry], end: date, config: PlanConfig) -> int:
    """Insert the remaining catch-up days at regular intervals between books."""
    remaining = days_left(entries, end)
    if remaining <= 0:
        return 0

    span = (entries[-1].date - entries[0].date).days
    spacing = span // (remaining + 1)
    n = 1
    inserted = 0
    i = 0
    while i < len(entries) - 1 and remaining > 0:
        # never interrupt a book spread over several days
        if i > spacing * n and entries[i].titles != entries[i + 1].titles:
            insert_catch_up(entries, i, config.catch_up_label)
            remaining -= 1
            inserted += 1
            n += 1
        i += 1
    return inserted


def repair_schedule(
    entries: list[ScheduleEntry],
    books: list[BookRecord],
    end: date,
    config: PlanConfig | None = None,
) -> list[ScheduleEntry]:
    """Absorb the slack between the last reading and the end date. Mutates entries."""
    config = config or PlanConfig()
    if not entries:
        return entries

    by_title = {book.title: book for book in books}
    logger.debug("Repairing schedule with %d day(s) of slack", days_left(entries, end))

    fill_seams(entries, end, config)
    fill_tail(entries, end, config)
    split_merged_groups(entries, end, by_title)
    spread_catch_ups(entries, end, config)

    remaining = days_left(entries, end)
    if remaining > 0:
        logger.warning("Plan ends %d day(s) before %s; no place left for catch-up days", remaining, end)
    return entries
