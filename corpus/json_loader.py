"""corpus/json_loader.py — Read the chapter table from a JSON array."""

import json
from pathlib import Path

from corpus.base import record_from_row
from errors import CorpusError
from models import ChapterRecord


def load_json(file_path: Path) -> list[ChapterRecord]:
    """Parse a JSON list of {index, title, chapter, length} objects."""
    with Path(file_path).open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if isinstance(data, dict):
        data = data.get("chapters")
    if not isinstance(data, list):
        raise CorpusError(f"{file_path}: expected a list of chapter objects")
    records = []
    for i, row in enumerate(data, start=1):
        if not isinstance(row, dict):
            raise CorpusError(f"{file_path}: item {i} is not an object")
        records.append(record_from_row(row, i))
    return records
