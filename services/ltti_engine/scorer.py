# services/ltti_engine/scorer.py
# Scoring, code derivation and profile lookup for the LTTI questionnaire.

import logging
from typing import Dict, Iterable, Mapping, Optional

from .definitions import AXIS_LETTERS, LIKERT_MAX, LIKERT_MIN, OPPOSITE_LETTER, PROFILE_LABELS
from .models import AxisBreakdown, AxisScoreTable, ProfileEntry, QuestionItem

logger = logging.getLogger(__name__)

# Code letter order and the symbols emitted for each axis: (axis, winner-on-tie, other side).
# The action axis is scored as S/T but rendered as S/O in the code.
CODE_LETTERS = (
    ("action", "S", "O"),
    ("energy", "I", "E"),
    ("cognition", "R", "X"),
    ("control", "D", "C"),
)


def empty_score_table() -> AxisScoreTable:
    return {axis: {letter: 0 for letter in letters} for axis, letters in AXIS_LETTERS.items()}


def clamp_answer(value: int) -> int:
    return min(LIKERT_MAX, max(LIKERT_MIN, value))


def score(ordered_items: Iterable[QuestionItem], answers: Mapping[int, Optional[int]]) -> AxisScoreTable:
    """
    Computes per-axis letter totals from a sparse answer map.

    Each answered item adds its (clamped) value ``v`` to its target letter and
    ``6 - v`` to the opposite letter of the same axis. Unanswered items add
    nothing, and answers for ids that are not in ``ordered_items`` are ignored.
    The table is always rebuilt from zero.
    """
    table = empty_score_table()
    for item in ordered_items:
        raw = answers.get(item.id)
        if raw is None:
            continue
        value = clamp_answer(raw)
        opposite = OPPOSITE_LETTER[item.target]
        table[item.axis][item.target] += value
        table[item.axis][opposite] += (LIKERT_MAX + 1) - value
    logger.debug(f"Scored {len(answers)} answers: {table}")
    return table


def derive_code(table: Mapping[str, Mapping[str, int]]) -> str:
    """
    Builds the 4-letter code. Ties resolve to the first letter of each pair,
    so an all-zero table yields "SIRD".
    """
    code = []
    for axis, first, other in CODE_LETTERS:
        totals = table.get(axis, {})
        first_letter, second_letter = AXIS_LETTERS[axis]
        first_total = totals.get(first_letter, 0)
        second_total = totals.get(second_letter, 0)
        code.append(first if first_total >= second_total else other)
    return "".join(code)


def resolve_profile(code: str) -> ProfileEntry:
    """Looks up the profile for a code, echoing the code as title when unknown."""
    entry = PROFILE_LABELS.get(code)
    if entry is None:
        logger.warning(f"No profile defined for code '{code}', using fallback")
        return ProfileEntry(title=code, family="", tagline="")
    return ProfileEntry(**entry)


def percent(part: int, whole: int) -> int:
    """Integer percentage rounded half up."""
    if not whole:
        return 0
    return (part * 200 + whole) // (whole * 2)


def axis_breakdown(table: Mapping[str, Mapping[str, int]]) -> Dict[str, AxisBreakdown]:
    """
    Per-axis totals with the share of each letter in percent.

    The first letter's share is rounded and the second letter takes the
    remainder; an axis with no answers reports 0/0.
    """
    breakdown = {}
    for axis, (first, second) in AXIS_LETTERS.items():
        totals = table.get(axis, {})
        a = totals.get(first, 0)
        b = totals.get(second, 0)
        a_pct = percent(a, a + b)
        b_pct = 100 - a_pct if a + b else 0
        breakdown[axis] = AxisBreakdown(
            letters=[first, second],
            totals={first: a, second: b},
            percentages={first: a_pct, second: b_pct},
        )
    return breakdown
