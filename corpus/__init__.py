"""corpus/ — Chapter table loaders."""

from pathlib import Path
from typing import Iterable

from corpus.base import check_structure, select_books, summarize_books
from models import ChapterRecord

SUPPORTED_EXTENSIONS = {".csv", ".json"}

__all__ = ["load_corpus", "summarize_books", "check_structure", "select_books"]


def load_corpus(file_path: Path, book_indices: Iterable[int] | None = None) -> list[ChapterRecord]:
    """Dispatch to the appropriate loader based on file extension."""
    file_path = Path(file_path)
    suffix = file_path.suffix.lower()

    if suffix == ".csv":
        from corpus.csv_loader import load_csv
        records = load_csv(file_path)
    elif suffix == ".json":
        from corpus.json_loader import load_json
        records = load_json(file_path)
    else:
        raise ValueError(
            f"Unsupported corpus format: '{suffix}'. "
            f"Supported: {', '.join(sorted(SUPPORTED_EXTENSIONS))}"
        )

    if book_indices is not None:
        records = select_books(records, book_indices)
    check_structure(records)
    return records
