"""corpus/csv_loader.py — Read the chapter table from CSV."""

import csv
from pathlib import Path

from corpus.base import FIELDS, record_from_row
from errors import CorpusError
from models import ChapterRecord


def load_csv(file_path: Path) -> list[ChapterRecord]:
    """Parse a CSV with an 'index,title,chapter,length' header."""
    with Path(file_path).open(newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        header = [name.strip().lower() for name in (reader.fieldnames or [])]
        absent = [key for key in FIELDS if key not in header]
        if absent:
            raise CorpusError(f"{file_path}: missing column(s) {', '.join(absent)}")
        reader.fieldnames = header
        # line 1 is the header
        return [record_from_row(row, line) for line, row in enumerate(reader, start=2)]
