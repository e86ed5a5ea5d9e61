"""
Question catalog: the 120 LTTI statements as immutable QuestionItem records.
"""
import logging
from collections import Counter
from typing import Dict, Iterable, Optional, Tuple

from .definitions import AXIS_LETTERS, QUESTIONS, QUESTIONS_PER_AXIS, TOTAL_QUESTIONS
from .models import CatalogIntegrityError, QuestionItem

logger = logging.getLogger(__name__)


def validate_catalog(items: Iterable[QuestionItem]) -> None:
    """
    Checks the structural invariants of a question bank.

    Raises:
        CatalogIntegrityError: on a wrong item count, a duplicate or out-of-range id,
            an axis without exactly QUESTIONS_PER_AXIS items, or a target letter
            that does not belong to its axis.
    """
    items = list(items)
    if len(items) != TOTAL_QUESTIONS:
        raise CatalogIntegrityError(f"Expected {TOTAL_QUESTIONS} questions, found {len(items)}")

    seen_ids = set()
    for item in items:
        if item.id in seen_ids:
            raise CatalogIntegrityError(f"Duplicate question ID found: {item.id}")
        if not 1 <= item.id <= TOTAL_QUESTIONS:
            raise CatalogIntegrityError(f"Question ID {item.id} outside 1..{TOTAL_QUESTIONS}")
        if item.target not in AXIS_LETTERS[item.axis]:
            raise CatalogIntegrityError(
                f"Question {item.id} targets '{item.target}' which is not a letter of axis '{item.axis}'"
            )
        seen_ids.add(item.id)

    per_axis = Counter(item.axis for item in items)
    for axis in AXIS_LETTERS:
        if per_axis[axis] != QUESTIONS_PER_AXIS:
            raise CatalogIntegrityError(
                f"Axis '{axis}' has {per_axis[axis]} questions, expected {QUESTIONS_PER_AXIS}"
            )


def _build_catalog() -> Tuple[QuestionItem, ...]:
    items = tuple(QuestionItem.model_validate(raw) for raw in QUESTIONS)
    validate_catalog(items)
    logger.debug(f"Question catalog loaded with {len(items)} items")
    return items


_CATALOG = _build_catalog()
_BY_ID: Dict[int, QuestionItem] = {item.id: item for item in _CATALOG}


def get_catalog() -> Tuple[QuestionItem, ...]:
    """Returns all questions in their authored order."""
    return _CATALOG


def get_question(question_id: int) -> Optional[QuestionItem]:
    return _BY_ID.get(question_id)
