from pydantic import BaseModel, ConfigDict
from typing import Dict, List, Literal

Axis = Literal["energy", "action", "cognition", "control"]
Letter = Literal["I", "E", "S", "T", "R", "X", "D", "C"]

# Axis -> letter -> running total
AxisScoreTable = Dict[str, Dict[str, int]]

class QuestionItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    text: str
    axis: Axis
    # Letter credited with the raw Likert value; its opposite gets 6 - value
    target: Letter

class ProfileEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    family: str
    tagline: str

class AxisBreakdown(BaseModel):
    letters: List[str]
    totals: Dict[str, int]
    percentages: Dict[str, int]

# Custom Error Classes
class CatalogIntegrityError(ValueError):
    """Raised when the question bank breaks one of its structural invariants."""
    pass

class InvalidSubmissionError(ValueError):
    """Custom exception for invalid submission data (e.g., unknown question ids)."""
    pass
