from __future__ import annotations

from datetime import date, timedelta

import pytest

from models import ChapterRecord, ScheduleEntry


def make_chapters(title: str, lengths: list[int], book_index: int = 1) -> list[ChapterRecord]:
    return [
        ChapterRecord(title=title, chapter=n, length=length, book_index=book_index)
        for n, length in enumerate(lengths, start=1)
    ]


def make_corpus(*books: tuple[str, list[int]]) -> list[ChapterRecord]:
    records: list[ChapterRecord] = []
    for index, (title, lengths) in enumerate(books, start=1):
        records.extend(make_chapters(title, lengths, book_index=index))
    return records


def day(n: int) -> date:
    """Day n of January 2025 (n may run past the end of the month)."""
    return date(2025, 1, 1) + timedelta(days=n - 1)


def entry(titles: str | list[str], chapters: int, n: int, catch_up: bool = False) -> ScheduleEntry:
    if isinstance(titles, str):
        titles = [titles]
    return ScheduleEntry(titles=list(titles), chapters=chapters, date=day(n), is_catch_up=catch_up)


@pytest.fixture
def small_bible() -> list[ChapterRecord]:
    """
    1024 words over 16 days: Genesis gets 7 days, Obadiah and Jonah share one,
    Malachi 3 and Matthew 4, leaving one day for the Malachi/Matthew seam.
    """
    return make_corpus(
        ("Genesis", [70, 70, 70, 70, 70, 70, 60]),
        ("Obadiah", [32]),
        ("Jonah", [32]),
        ("Malachi", [75, 75, 74]),
        ("Matthew", [64, 64, 64, 64]),
    )
