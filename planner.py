"""planner.py — Run allocation, assignment and repair for one or more tracks."""

import logging
from datetime import date

from allocator import allocate_days
from assigner import assign_dates
from corpus.base import summarize_books
from daily_length import aggregate_daily_lengths
from errors import CorpusError, InvalidDateRangeError
from models import ChapterRecord, PlanResult, ScheduleEntry
from plan_config import PlanConfig
from repair import repair_schedule

logger = logging.getLogger(__name__)


def day_budget(start: date, end: date) -> int:
    """Number of calendar days from start to end, both included."""
    if end <= start:
        raise InvalidDateRangeError(f"End date {end} must come after start date {start}")
    return (end - start).days + 1


def build_schedule(
    chapters: list[ChapterRecord],
    start: date,
    end: date,
    config: PlanConfig | None = None,
) -> list[ScheduleEntry]:
    """Build the finalized schedule for a single track of chapters."""
    config = config or PlanConfig()
    total_days = day_budget(start, end)
    books = summarize_books(chapters)
    logger.info("Scheduling %d book(s), %d chapter(s) over %d day(s)", len(books), len(chapters), total_days)

    groups = allocate_days(books, total_days, config)
    entries = assign_dates(groups, chapters, start, end, config)
    return repair_schedule(entries, books, end, config)


def build_plan(
    tracks: list[list[ChapterRecord]],
    start: date,
    end: date,
    config: PlanConfig | None = None,
    include_lengths: bool = False,
) -> PlanResult:
    """
    Schedule every track independently over the same date range.
    Daily word totals are summed across tracks when include_lengths is set.
    """
    if not tracks:
        raise CorpusError("No reading tracks given")
    config = config or PlanConfig()

    schedules = [build_schedule(chapters, start, end, config) for chapters in tracks]
    result = PlanResult(tracks=schedules)
    if include_lengths:
        every_chapter = [c for chapters in tracks for c in chapters]
        result.daily_lengths = aggregate_daily_lengths(schedules, every_chapter)
    return result
