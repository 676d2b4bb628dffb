"""corpus/base.py — Shared corpus utilities."""

from typing import Any, Iterable, Mapping

from errors import CorpusError
from models import BookRecord, ChapterRecord

FIELDS = ("index", "title", "chapter", "length")


def record_from_row(row: Mapping[str, Any], line: int) -> ChapterRecord:
    """Build a ChapterRecord from a mapping with index/title/chapter/length keys."""
    missing = [key for key in FIELDS if row.get(key) in (None, "")]
    if missing:
        raise CorpusError(f"Row {line}: missing {', '.join(missing)}")
    try:
        return ChapterRecord(
            title=str(row["title"]).strip(),
            chapter=int(row["chapter"]),
            length=int(row["length"]),
            book_index=int(row["index"]),
        )
    except (TypeError, ValueError) as e:
        raise CorpusError(f"Row {line}: {e}") from e


def select_books(records: list[ChapterRecord], book_indices: Iterable[int]) -> list[ChapterRecord]:
    """Keep only chapters whose book index is in book_indices, preserving order."""
    wanted = set(book_indices)
    return [r for r in records if r.book_index in wanted]


def check_structure(records: list[ChapterRecord]) -> None:
    """
    Verify each title's chapters are adjacent, start at 1 and count up by one,
    and that lengths are non-negative.
    """
    if not records:
        raise CorpusError("Corpus contains no chapters")

    finished: set[str] = set()
    current = None
    expected = 1
    for r in records:
        if r.length < 0:
            raise CorpusError(f"{r.title} {r.chapter}: negative length {r.length}")
        if r.title != current:
            if r.title in finished:
                raise CorpusError(f"Chapters of '{r.title}' are not contiguous in the corpus")
            if current is not None:
                finished.add(current)
            current = r.title
            expected = 1
        if r.chapter != expected:
            raise CorpusError(f"{r.title}: expected chapter {expected}, found {r.chapter}")
        expected += 1


def summarize_books(records: list[ChapterRecord]) -> list[BookRecord]:
    """Combine chapter records into one BookRecord per title, in corpus order."""
    counts: dict[str, int] = {}
    lengths: dict[str, int] = {}
    for r in records:
        counts[r.title] = counts.get(r.title, 0) + 1
        lengths[r.title] = lengths.get(r.title, 0) + r.length
    return [
        BookRecord(title=title, chapter_count=counts[title], total_length=lengths[title])
        for title in counts
    ]


def chapters_of(records: list[ChapterRecord], title: str) -> list[ChapterRecord]:
    return [r for r in records if r.title == title]
