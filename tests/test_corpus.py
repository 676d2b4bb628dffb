from __future__ import annotations

import json

import pytest

from corpus import check_structure, load_corpus, summarize_books
from errors import CorpusError
from models import BookRecord
from tests.conftest import make_chapters, make_corpus

CSV_TEXT = """index,title,chapter,length
1,Genesis,1,797
1,Genesis,2,632
1,Genesis,3,695
2,Exodus,1,433
2,Exodus,2,553
3,Leviticus,1,520
"""


def test_load_csv_keeps_corpus_order(tmp_path) -> None:
    path = tmp_path / "bible.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")

    records = load_corpus(path)

    assert [(r.title, r.chapter, r.length, r.book_index) for r in records[:4]] == [
        ("Genesis", 1, 797, 1),
        ("Genesis", 2, 632, 1),
        ("Genesis", 3, 695, 1),
        ("Exodus", 1, 433, 2),
    ]
    assert len(records) == 6


def test_load_csv_filters_book_indices(tmp_path) -> None:
    path = tmp_path / "bible.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")

    records = load_corpus(path, [2, 3])

    assert {r.title for r in records} == {"Exodus", "Leviticus"}


def test_load_json(tmp_path) -> None:
    rows = [
        {"index": 40, "title": "Matthew", "chapter": 1, "length": 500},
        {"index": 40, "title": "Matthew", "chapter": 2, "length": 600},
    ]
    path = tmp_path / "nt.json"
    path.write_text(json.dumps(rows), encoding="utf-8")

    records = load_corpus(path)

    assert [r.length for r in records] == [500, 600]
    assert records[0].book_index == 40


def test_missing_column_is_reported(tmp_path) -> None:
    path = tmp_path / "bad.csv"
    path.write_text("index,title,chapter\n1,Genesis,1\n", encoding="utf-8")

    with pytest.raises(CorpusError, match="length"):
        load_corpus(path)


def test_non_numeric_length_is_reported(tmp_path) -> None:
    path = tmp_path / "bad.csv"
    path.write_text("index,title,chapter,length\n1,Genesis,1,many\n", encoding="utf-8")

    with pytest.raises(CorpusError, match="Row 2"):
        load_corpus(path)


def test_unsupported_suffix(tmp_path) -> None:
    path = tmp_path / "bible.xlsx"
    path.write_text("", encoding="utf-8")

    with pytest.raises(ValueError, match="Unsupported"):
        load_corpus(path)


def test_missing_file_surfaces_unchanged(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_corpus(tmp_path / "absent.csv")


def test_selection_matching_nothing_is_an_error(tmp_path) -> None:
    path = tmp_path / "bible.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")

    with pytest.raises(CorpusError):
        load_corpus(path, [99])


def test_structure_requires_contiguous_chapters() -> None:
    gap = make_chapters("Ruth", [10, 10])[:1] + [make_chapters("Ruth", [10, 10, 10])[2]]
    with pytest.raises(CorpusError, match="expected chapter 2"):
        check_structure(gap)

    split = make_corpus(("Ruth", [10]), ("Esther", [10])) + make_chapters("Ruth", [10])
    with pytest.raises(CorpusError, match="not contiguous"):
        check_structure(split)


def test_summarize_books() -> None:
    records = make_corpus(("Ruth", [10, 20, 30, 40]), ("Esther", [5, 5]))

    assert summarize_books(records) == [
        BookRecord(title="Ruth", chapter_count=4, total_length=100),
        BookRecord(title="Esther", chapter_count=2, total_length=10),
    ]
