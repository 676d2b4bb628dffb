from __future__ import annotations

from datetime import date

from models import DailyLength, PlanResult
from plan_writer import format_date, format_track, plan_filename, render_plan, write_plan
from tests.conftest import day, entry


def test_format_date_pads_the_day() -> None:
    assert format_date(date(2025, 1, 1)) == "Jan  1, 2025"
    assert format_date(date(2025, 12, 31)) == "Dec 31, 2025"


def test_chapter_ranges() -> None:
    entries = [
        entry("Genesis", 3, 1),
        entry("Genesis", 4, 2),
        entry("Genesis", 9, 3),
        entry("Exodus", 1, 4),
        entry(["Obadiah", "Jonah"], 5, 5),
        entry("Catch-up day", 0, 6, catch_up=True),
        entry("Micah", 7, 7),
        entry("Catch-up day", 0, 8, catch_up=True),
    ]

    texts = [text for _, text in format_track(entries)]

    assert texts == [
        "Genesis 1-3",
        "Genesis 4",
        "Genesis 5-9",
        "Exodus 1",
        "Obadiah, Jonah all",
        "Catch-up day 1",
        "Micah 1-7",
        "Catch-up day 2",
    ]


def test_render_merges_tracks_by_date() -> None:
    result = PlanResult(
        tracks=[
            [entry("Genesis", 2, 1), entry("Genesis", 4, 2)],
            [entry("Psalms", 1, 1), entry("Psalms", 2, 2)],
        ],
        daily_lengths=[DailyLength(date=day(1), length=1500), DailyLength(date=day(2), length=20)],
    )

    assert render_plan(result) == [
        "Jan  1, 2025 Genesis 1-2 | Psalms 1 (1,500 words)",
        "Jan  2, 2025 Genesis 3-4 | Psalms 2 (20 words)",
    ]


def test_write_plan_uses_the_given_directory_and_name(tmp_path) -> None:
    name = plan_filename(1735689600)

    path = write_plan(["Jan  1, 2025 Ruth 1-4"], tmp_path / "plans", name)

    assert name == "reading_plan_1735689600"
    assert path == tmp_path / "plans" / name
    assert path.read_text(encoding="utf-8") == "Jan  1, 2025 Ruth 1-4\n"
