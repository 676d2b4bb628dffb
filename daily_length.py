"""daily_length.py — Words read per day, summed across parallel tracks."""

from collections import defaultdict
from datetime import date

from models import ChapterRecord, DailyLength, ScheduleEntry


def _length_index(chapters: list[ChapterRecord]) -> dict[str, dict[int, int]]:
    index: dict[str, dict[int, int]] = defaultdict(dict)
    for c in chapters:
        index[c.title][c.chapter] = c.length
    return index


def entry_lengths(entries: list[ScheduleEntry], chapters: list[ChapterRecord]) -> list[DailyLength]:
    """
    Words read on each entry of one track.

    A single-title entry covers the chapters after the previous reading's
    ending chapter when that reading had the same title, otherwise from
    chapter 1. Merged entries cover their books completely; catch-up days
    read nothing and do not break a running title.
    """
    lengths = _length_index(chapters)
    result = []
    previous: ScheduleEntry | None = None

    for entry in entries:
        if entry.is_catch_up:
            words = 0
        elif entry.is_merged:
            words = sum(sum(lengths[title].values()) for title in entry.titles)
        else:
            title = entry.titles[0]
            first = 1
            if previous is not None and previous.titles == entry.titles:
                first = previous.chapters + 1
            words = sum(lengths[title].get(n, 0) for n in range(first, entry.chapters + 1))
        result.append(DailyLength(date=entry.date, length=words))
        if not entry.is_catch_up:
            previous = entry

    return result


def aggregate_daily_lengths(
    tracks: list[list[ScheduleEntry]],
    chapters: list[ChapterRecord],
) -> list[DailyLength]:
    """Sum the words read on each date across every track, in date order."""
    totals: dict[date, int] = defaultdict(int)
    for entries in tracks:
        for daily in entry_lengths(entries, chapters):
            totals[daily.date] += daily.length
    return [DailyLength(date=d, length=totals[d]) for d in sorted(totals)]
