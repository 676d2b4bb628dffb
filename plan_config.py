"""plan_config.py — Tunable constants and title tables for the planner."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

CATCH_UP_LABEL = "Catch-up day"

# Old Testament → New Testament transition of the default Bible corpus
DEFAULT_SEAMS = [("Malachi", "Matthew")]

STANDALONE_SHARE = 0.66
FLUSH_SHARE = 1.0
TRUNCATE_DIVISOR = 30
MAX_PARTITION_STEPS = 200


@dataclass
class PlanConfig:
    seams: list[tuple[str, str]] = field(default_factory=lambda: list(DEFAULT_SEAMS))
    catch_up_label: str = CATCH_UP_LABEL
    standalone_share: float = STANDALONE_SHARE   # books above this never merge
    flush_share: float = FLUSH_SHARE             # merged buffer closes at this share
    truncate_divisor: int = TRUNCATE_DIVISOR
    merge_eligible: frozenset[str] | None = None  # None: any short book may merge
    max_partition_steps: int = MAX_PARTITION_STEPS

    def may_merge(self, title: str) -> bool:
        return self.merge_eligible is None or title in self.merge_eligible

    @classmethod
    def from_env(cls) -> "PlanConfig":
        """Build a config from READPLAN_* variables, reading .env first."""
        load_dotenv()
        config = cls()

        seams = os.getenv("READPLAN_SEAMS", "").strip()
        if seams:
            config.seams = parse_seams(seams.split(";"))

        label = os.getenv("READPLAN_CATCH_UP_LABEL", "").strip()
        if label:
            config.catch_up_label = label

        eligible = os.getenv("READPLAN_MERGE_ELIGIBLE", "").strip()
        if eligible:
            config.merge_eligible = frozenset(t.strip() for t in eligible.split(",") if t.strip())

        steps = os.getenv("READPLAN_MAX_PARTITION_STEPS", "").strip()
        if steps:
            config.max_partition_steps = int(steps)

        return config


def parse_seams(values: list[str]) -> list[tuple[str, str]]:
    """Parse 'Malachi>Matthew' strings into (leading, trailing) title pairs."""
    seams = []
    for value in values:
        value = value.strip()
        if not value:
            continue
        lead, sep, trail = value.partition(">")
        if not sep or not lead.strip() or not trail.strip():
            raise ValueError(f"Invalid seam '{value}', expected 'Leading>Trailing'")
        seams.append((lead.strip(), trail.strip()))
    return seams
