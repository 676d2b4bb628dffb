"""models.py — Shared data types for readplan."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class ChapterRecord:
    title: str
    chapter: int          # 1-based, contiguous per title
    length: int           # words
    book_index: int = 0   # index column of the corpus table


@dataclass(frozen=True)
class BookRecord:
    title: str
    chapter_count: int
    total_length: int


@dataclass
class DayGroup:
    """One or more titles sharing a number of reading days."""
    titles: list[str]
    chapters: int
    days: int

    @property
    def is_merged(self) -> bool:
        return len(self.titles) > 1


@dataclass
class ScheduleEntry:
    titles: list[str]
    chapters: int         # ending chapter reached that day, 0 for catch-up days
    date: date
    is_catch_up: bool = False

    @property
    def is_merged(self) -> bool:
        return len(self.titles) > 1


@dataclass(frozen=True)
class DailyLength:
    date: date
    length: int


@dataclass
class PlanResult:
    tracks: list[list[ScheduleEntry]]
    daily_lengths: list[DailyLength] = field(default_factory=list)
