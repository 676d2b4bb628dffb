"""allocator.py — Split a day budget across books in proportion to their length."""

import logging
import math

from errors import CorpusError, OverAllocationError
from models import BookRecord, DayGroup
from plan_config import PlanConfig, TRUNCATE_DIVISOR

logger = logging.getLogger(__name__)


def round_share(share: float, total_days: int, divisor: int = TRUNCATE_DIVISOR) -> int:
    """
    Round a real-valued day share to whole days.

    Shares larger than total_days / divisor are truncated so long books lean
    towards fewer days; smaller ones round half away from zero. Never below 1.
    """
    if share > total_days / divisor:
        days = int(share)
    else:
        days = math.floor(share + 0.5)
    return max(days, 1)


def allocate_days(
    books: list[BookRecord],
    total_days: int,
    config: PlanConfig | None = None,
) -> list[DayGroup]:
    """Group books into DayGroups whose day counts follow their word share."""
    config = config or PlanConfig()

    if not books:
        raise CorpusError("No books to allocate")

    total_chapters = sum(b.chapter_count for b in books)
    if total_days > total_chapters:
        raise OverAllocationError(
            f"The number of days may not exceed the number of chapters: "
            f"{total_days} > {total_chapters}"
        )

    total_words = sum(b.total_length for b in books)
    if total_words <= 0:
        raise CorpusError("Corpus contains no words")

    groups: list[DayGroup] = []
    pending_titles: list[str] = []
    pending_chapters = 0
    pending_share = 0.0

    def push(titles: list[str], chapters: int, share: float) -> None:
        days = round_share(share, total_days, config.truncate_divisor)
        logger.debug("Allocated %d day(s) to %s (share %.3f)", days, ", ".join(titles), share)
        groups.append(DayGroup(titles=titles, chapters=chapters, days=days))

    for book in books:
        share = book.total_length / total_words * total_days

        if share >= config.standalone_share or not config.may_merge(book.title):
            if pending_titles:
                push(pending_titles, pending_chapters, pending_share)
                pending_titles, pending_chapters, pending_share = [], 0, 0.0
            push([book.title], book.chapter_count, share)
            continue

        # Short book: combine with its neighbours until they fill a day
        pending_titles.append(book.title)
        pending_chapters += book.chapter_count
        pending_share += share
        if pending_share >= config.flush_share:
            push(pending_titles, pending_chapters, pending_share)
            pending_titles, pending_chapters, pending_share = [], 0, 0.0

    if pending_titles:
        push(pending_titles, pending_chapters, pending_share)

    return groups
