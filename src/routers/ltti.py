from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List
import logging

from src.core.config import get_settings
from src.schemas.ltti import (
    AnswerRequest,
    AssessmentResult,
    QuestionPage,
    ScoreRequest,
    SessionView,
)
from src.services.session_store import (
    SessionNotFoundError,
    SessionState,
    SessionStore,
    SessionStoreError,
)
from services.ltti_engine.engine import LttiEngine
from services.ltti_engine.models import InvalidSubmissionError, QuestionItem

router = APIRouter()
logger = logging.getLogger(__name__)


def get_ltti_engine() -> LttiEngine:
    return LttiEngine(page_size=get_settings().page_size)

def get_session_store() -> SessionStore:
    return SessionStore(get_settings().session_dir)


def _session_view(state: SessionState, engine: LttiEngine) -> SessionView:
    result = engine.calculate(state.answers, seed=state.seed)
    return SessionView(
        session_id=state.session_id,
        seed=state.seed,
        answers=state.answers,
        result=AssessmentResult(**result),
    )

def _load_session(store: SessionStore, session_id: str) -> SessionState:
    try:
        return store.load(session_id)
    except SessionNotFoundError as e:
        logger.warning(f"Session lookup failed: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except SessionStoreError as e:
        logger.exception(f"Session store failure: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.get("/ltti/catalog", response_model=List[QuestionItem])
def get_catalog(engine: LttiEngine = Depends(get_ltti_engine)):
    """Returns the 120 questions in their canonical order."""
    return list(engine.get_catalog())

@router.get("/ltti/questions", response_model=QuestionPage)
def get_questions(
    seed: int,
    page: int = Query(0),
    engine: LttiEngine = Depends(get_ltti_engine),
):
    """Returns one page of the question order selected by ``seed``."""
    return engine.get_page(seed, page)

@router.post("/ltti/score", response_model=AssessmentResult)
def score_answers(request: ScoreRequest, engine: LttiEngine = Depends(get_ltti_engine)):
    """
    Stateless scoring: unanswered questions are skipped, out-of-range values
    are clamped and unknown question ids are ignored.
    """
    try:
        result = engine.calculate(request.answers, seed=request.seed)
        return AssessmentResult(**result)
    except Exception as e:
        logger.exception(f"Unexpected error during LTTI scoring: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.post("/ltti/sessions", response_model=SessionView, status_code=201)
def create_session(
    engine: LttiEngine = Depends(get_ltti_engine),
    store: SessionStore = Depends(get_session_store),
):
    try:
        state = store.create()
    except SessionStoreError as e:
        logger.exception(f"Could not create session: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")
    return _session_view(state, engine)

@router.get("/ltti/sessions/{session_id}", response_model=SessionView)
def get_session(
    session_id: str,
    engine: LttiEngine = Depends(get_ltti_engine),
    store: SessionStore = Depends(get_session_store),
):
    """Session state with the provisional result for the answers given so far."""
    return _session_view(_load_session(store, session_id), engine)

@router.get("/ltti/sessions/{session_id}/pages/{page}", response_model=QuestionPage)
def get_session_page(
    session_id: str,
    page: int,
    engine: LttiEngine = Depends(get_ltti_engine),
    store: SessionStore = Depends(get_session_store),
):
    state = _load_session(store, session_id)
    return engine.get_page(state.seed, page)

@router.put("/ltti/sessions/{session_id}/answers/{question_id}", response_model=SessionView)
def put_answer(
    session_id: str,
    question_id: int,
    request: AnswerRequest,
    engine: LttiEngine = Depends(get_ltti_engine),
    store: SessionStore = Depends(get_session_store),
):
    try:
        if question_id not in engine.question_ids:
            raise InvalidSubmissionError(f"Unknown question id: {question_id}")
        state = store.set_answer(session_id, question_id, request.value)
    except InvalidSubmissionError as e:
        logger.error(f"Invalid submission: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except SessionNotFoundError as e:
        logger.warning(f"Session lookup failed: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except SessionStoreError as e:
        logger.exception(f"Could not store answer: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")
    return _session_view(state, engine)

@router.delete("/ltti/sessions/{session_id}/answers/{question_id}", response_model=SessionView)
def delete_answer(
    session_id: str,
    question_id: int,
    engine: LttiEngine = Depends(get_ltti_engine),
    store: SessionStore = Depends(get_session_store),
):
    try:
        state = store.clear_answer(session_id, question_id)
    except SessionNotFoundError as e:
        logger.warning(f"Session lookup failed: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except SessionStoreError as e:
        logger.exception(f"Could not clear answer: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")
    return _session_view(state, engine)

@router.post("/ltti/sessions/{session_id}/reset", response_model=SessionView)
def reset_session(
    session_id: str,
    engine: LttiEngine = Depends(get_ltti_engine),
    store: SessionStore = Depends(get_session_store),
):
    """Clears all answers; the question order is kept."""
    try:
        state = store.reset(session_id)
    except SessionNotFoundError as e:
        logger.warning(f"Session lookup failed: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except SessionStoreError as e:
        logger.exception(f"Could not reset session: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")
    return _session_view(state, engine)

@router.post("/ltti/sessions/{session_id}/reshuffle", response_model=SessionView)
def reshuffle_session(
    session_id: str,
    engine: LttiEngine = Depends(get_ltti_engine),
    store: SessionStore = Depends(get_session_store),
):
    """Draws a new question order and restarts the questionnaire."""
    try:
        state = store.reshuffle(session_id)
    except SessionNotFoundError as e:
        logger.warning(f"Session lookup failed: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except SessionStoreError as e:
        logger.exception(f"Could not reshuffle session: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")
    return _session_view(state, engine)
