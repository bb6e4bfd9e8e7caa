"""
plan_service.py: Plan Engine
Classifies a score into a level and picks up to three catalog activities
for that level.
"""

import re

from errors import ValidationError

LEVEL_LOW = "low"
LEVEL_MODERATE = "moderate"
LEVEL_HIGH = "high"
ALL_LEVELS = "all"

HIGH_THRESHOLD = 10
MODERATE_THRESHOLD = 5
MAX_RECOMMENDATIONS = 3

SCORE_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_score(raw: str) -> int:
    """Parse a path segment as a base-10 integer, or raise ValidationError."""
    text = str(raw).strip()
    # ASCII digits only; int() alone also takes "1_0" and non-Latin digits
    if not SCORE_PATTERN.fullmatch(text):
        raise ValidationError("Invalid score")
    return int(text, 10)


def classify_level(score: int) -> str:
    if score >= HIGH_THRESHOLD:
        return LEVEL_HIGH
    if score >= MODERATE_THRESHOLD:
        return LEVEL_MODERATE
    return LEVEL_LOW


def build_plan(score: int, catalog: list[dict]) -> dict:
    """
    Filter the catalog (already in ascending id order) down to entries whose
    priority list names the level or "all", keeping at most three.
    The unfiltered catalog is returned alongside as fullTable.
    """
    level = classify_level(score)
    matches = [
        entry for entry in catalog
        if level in entry["priority"] or ALL_LEVELS in entry["priority"]
    ]
    return {
        "recommendations": matches[:MAX_RECOMMENDATIONS],
        "fullTable": list(catalog),
        "level": level,
        "score": score,
    }
