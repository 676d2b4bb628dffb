"""partitioner.py — Split one book's chapters into near-equal daily readings."""

import logging

from errors import InsufficientChaptersError, PartitionNotConvergedError
from models import ChapterRecord
from plan_config import MAX_PARTITION_STEPS

logger = logging.getLogger(__name__)


def group_chapters(chapters: list[ChapterRecord], days: int, threshold: float) -> list[list[int]]:
    """
    Scan chapters in order and close a group once the words still missing to
    reach the daily average fall to threshold * average or less.
    Chapters left over at the end form a final, possibly short, group.
    """
    total = sum(c.length for c in chapters)
    average = total / days

    groups: list[list[int]] = []
    current: list[int] = []
    running = 0.0
    for chapter in chapters:
        running += chapter.length
        current.append(chapter.chapter)
        slack = (average - running) / average if average else 0.0
        if slack <= threshold:
            groups.append(current)
            current = []
            running = 0.0

    if current:
        groups.append(current)
    return groups


def partition_chapters(
    chapters: list[ChapterRecord],
    days: int,
    max_steps: int = MAX_PARTITION_STEPS,
) -> list[int]:
    """
    Return the ending chapter number of each of `days` contiguous readings.

    Bisects the threshold between 0 (fewest groups) and 1 (one group per
    chapter) until the scan produces exactly `days` groups.
    """
    if not chapters:
        raise InsufficientChaptersError("No chapters to partition")
    if days == 1:
        return [chapters[-1].chapter]
    if len(chapters) < days:
        raise InsufficientChaptersError(
            f"{chapters[0].title} has {len(chapters)} chapter(s) but was given {days} days"
        )

    low, high = 0.0, 1.0
    threshold = 0.0
    for step in range(max_steps):
        groups = group_chapters(chapters, days, threshold)
        if len(groups) == days:
            logger.debug(
                "Partitioned %s into %d days after %d step(s) (threshold %.6f)",
                chapters[0].title, days, step + 1, threshold,
            )
            return [group[-1] for group in groups]
        if len(groups) < days:
            low = threshold
        else:
            high = threshold
        threshold = (low + high) / 2

    raise PartitionNotConvergedError(
        f"Could not split {chapters[0].title} ({len(chapters)} chapters) "
        f"into {days} days within {max_steps} steps"
    )
