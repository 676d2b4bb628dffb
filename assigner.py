"""assigner.py — Stamp day groups with consecutive calendar dates."""

import logging
from datetime import date, timedelta

from corpus.base import chapters_of
from errors import DateOverflowError, PlanError
from models import ChapterRecord, DayGroup, ScheduleEntry
from partitioner import partition_chapters
from plan_config import PlanConfig

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


def assign_dates(
    groups: list[DayGroup],
    chapters: list[ChapterRecord],
    start: date,
    end: date,
    config: PlanConfig | None = None,
) -> list[ScheduleEntry]:
    """Walk day groups in order, one ScheduleEntry per reading day from start."""
    config = config or PlanConfig()
    entries: list[ScheduleEntry] = []
    current = start

    def emit(titles: list[str], chapter: int) -> None:
        nonlocal current
        if current > end:
            raise DateOverflowError(
                f"Reading for {', '.join(titles)} falls on {current}, after the end date {end}"
            )
        entries.append(ScheduleEntry(titles=list(titles), chapters=chapter, date=current))
        current += ONE_DAY

    for group in groups:
        if group.days == 1:
            emit(group.titles, group.chapters)
            continue

        if group.is_merged:
            raise PlanError(f"Multiple books for more than one day: {', '.join(group.titles)}")

        title = group.titles[0]
        endings = partition_chapters(
            chapters_of(chapters, title), group.days, config.max_partition_steps
        )
        for ending in endings:
            emit(group.titles, ending)

    logger.debug("Assigned %d reading day(s), last on %s", len(entries), current - ONE_DAY)
    return entries
