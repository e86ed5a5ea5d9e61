import logging
import math
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .catalog import get_catalog
from .definitions import TOTAL_QUESTIONS
from .models import QuestionItem
from .scorer import axis_breakdown, derive_code, percent, resolve_profile, score
from .shuffle import shuffle

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 12


class LttiEngine:
    """
    Serves the question catalog in a seeded order, split into pages, and turns
    answer maps into LTTI results.
    """
    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE):
        """
        Args:
            page_size: Number of questions per page (12 gives 10 pages of 120 items).
        """
        if page_size < 1:
            raise ValueError(f"page_size must be at least 1, got {page_size}")
        self.page_size = page_size
        self.catalog = get_catalog()
        self.question_ids = frozenset(q.id for q in self.catalog)

    def get_catalog(self) -> Tuple[QuestionItem, ...]:
        return self.catalog

    def get_questions(self, seed: int) -> List[QuestionItem]:
        """Returns the full catalog in the order determined by ``seed``."""
        return shuffle(self.catalog, seed)

    def page_count(self) -> int:
        return math.ceil(len(self.catalog) / self.page_size)

    def get_page(self, seed: int, page: int) -> Dict[str, Any]:
        """
        Returns one page of the seeded order. Out-of-range page numbers are
        clamped to the first or last page.
        """
        pages = self.page_count()
        page = min(max(page, 0), pages - 1)
        start = page * self.page_size
        items = self.get_questions(seed)[start:start + self.page_size]
        return {
            "page": page,
            "pages": pages,
            "page_size": self.page_size,
            "items": items,
        }

    def count_answered(self, answers: Mapping[int, Optional[int]]) -> int:
        return sum(1 for qid, value in answers.items() if qid in self.question_ids and value is not None)

    def calculate(self, answers: Mapping[int, Optional[int]], seed: Optional[int] = None) -> Dict[str, Any]:
        """
        Calculates the (possibly provisional) result for an answer map.

        Args:
            answers: Sparse map of question id to Likert value.
            seed: Order in which items are visited; totals do not depend on it.

        Returns:
            A dictionary with the code, profile, raw axis totals, per-axis
            percentages and completion progress.
        """
        items = self.get_questions(seed) if seed is not None else self.catalog
        table = score(items, answers)
        code = derive_code(table)
        profile = resolve_profile(code)
        answered = self.count_answered(answers)

        logger.info(f"Calculated LTTI code {code} from {answered}/{TOTAL_QUESTIONS} answers")
        return {
            "code": code,
            "profile": profile,
            "scores": table,
            "breakdown": axis_breakdown(table),
            "answered": answered,
            "total": len(self.catalog),
            "progress": percent(answered, len(self.catalog)),
            "complete": answered == len(self.catalog),
        }
