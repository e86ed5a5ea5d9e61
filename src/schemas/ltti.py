from typing import Dict, List, Optional
from pydantic import BaseModel

from services.ltti_engine.models import AxisBreakdown, ProfileEntry, QuestionItem

class ScoreRequest(BaseModel):
    answers: Dict[int, int]  # question_id → Likert value (1..5, clamped when scored)
    seed: Optional[int] = None

class AnswerRequest(BaseModel):
    value: int

class QuestionPage(BaseModel):
    page: int
    pages: int
    page_size: int
    items: List[QuestionItem]

class AssessmentResult(BaseModel):
    code: str
    profile: ProfileEntry
    scores: Dict[str, Dict[str, int]]
    breakdown: Dict[str, AxisBreakdown]
    answered: int
    total: int
    progress: int
    complete: bool

class SessionView(BaseModel):
    session_id: str
    seed: int
    answers: Dict[int, int]
    result: AssessmentResult
