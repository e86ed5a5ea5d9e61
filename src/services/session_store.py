import logging
import os
import re
import uuid
from pathlib import Path
from typing import Callable, Dict, Optional

from pydantic import BaseModel, Field, ValidationError

from services.ltti_engine.shuffle import new_seed

logger = logging.getLogger(__name__)

_SESSION_ID_PATTERN = re.compile(r"[0-9a-f]{32}")


class SessionStoreError(Exception):
    """Raised when a session file cannot be read or written."""
    pass

class SessionNotFoundError(SessionStoreError):
    """Raised for an unknown or malformed session id."""
    pass


class SessionState(BaseModel):
    session_id: str
    seed: int
    answers: Dict[int, int] = Field(default_factory=dict)


class SessionStore:
    """
    Persists the question-order seed and the sparse answer map of each
    questionnaire session as one JSON file per session.
    """
    def __init__(self, base_dir: str, seed_factory: Callable[[], int] = new_seed):
        self.base_dir = Path(base_dir)
        self.seed_factory = seed_factory

    def _path(self, session_id: str) -> Path:
        if not _SESSION_ID_PATTERN.fullmatch(session_id):
            raise SessionNotFoundError(f"Invalid session id: {session_id!r}")
        return self.base_dir / f"{session_id}.json"

    def create(self) -> SessionState:
        state = SessionState(session_id=uuid.uuid4().hex, seed=self.seed_factory())
        self.save(state)
        logger.info(f"Created session {state.session_id} with seed {state.seed}")
        return state

    def load(self, session_id: str) -> SessionState:
        path = self._path(session_id)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise SessionNotFoundError(f"Session not found: {session_id}")
        except OSError as e:
            raise SessionStoreError(f"Error reading session {session_id}: {e}")
        try:
            return SessionState.model_validate_json(raw)
        except ValidationError as e:
            raise SessionStoreError(f"Corrupt session file for {session_id}: {e}")

    def save(self, state: SessionState) -> None:
        """
        Writes the session to a temporary file in ``base_dir`` and swaps it in,
        so a failed write leaves the previous state readable.
        """
        path = self._path(state.session_id)
        tmp_path = self.base_dir / f".{state.session_id}.{uuid.uuid4().hex}.tmp"
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(state.model_dump_json(), encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise SessionStoreError(f"Error writing session {state.session_id}: {e}")

    def delete(self, session_id: str) -> None:
        path = self._path(session_id)
        try:
            path.unlink()
        except FileNotFoundError:
            raise SessionNotFoundError(f"Session not found: {session_id}")
        logger.info(f"Deleted session {session_id}")

    def set_answer(self, session_id: str, question_id: int, value: int) -> SessionState:
        """Records or overwrites one answer. Values are stored as given."""
        state = self.load(session_id)
        state.answers[question_id] = value
        self.save(state)
        return state

    def clear_answer(self, session_id: str, question_id: int) -> SessionState:
        state = self.load(session_id)
        state.answers.pop(question_id, None)
        self.save(state)
        return state

    def reset(self, session_id: str) -> SessionState:
        """Clears every answer and keeps the current question order."""
        state = self.load(session_id)
        state.answers = {}
        self.save(state)
        logger.info(f"Reset answers for session {session_id}")
        return state

    def reshuffle(self, session_id: str, seed: Optional[int] = None) -> SessionState:
        """
        Draws a new question order. A new order is a full restart, so all
        answers are cleared as well.
        """
        state = self.load(session_id)
        state.seed = seed if seed is not None else self.seed_factory()
        state.answers = {}
        self.save(state)
        logger.info(f"Reshuffled session {session_id} with new seed {state.seed}")
        return state
