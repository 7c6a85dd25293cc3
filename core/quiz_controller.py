"""
Application Controller

Owns the master word list and the active session, and runs the
setup -> playing -> results -> review loop. The presentation layer calls the
transition methods and renders StateSnapshot objects; it never mutates
ApplicationState directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Sequence

from core import session_engine
from core.errors import WordSourceError
from core.schemas import SessionResult, Word
from core.session_engine import AnswerOutcome, QuizSession, SessionState
from core.word_export import export_words
from core.word_sources import load_from_document, load_from_remote


logger = logging.getLogger(__name__)


class Phase(str, Enum):
    SETUP = "setup"
    PLAYING = "playing"
    RESULTS = "results"


@dataclass
class ApplicationState:
    """
    Everything the controller owns. A fresh instance is the empty state.
    """
    phase: Phase = Phase.SETUP
    master_words: list[Word] = field(default_factory=list)
    session: Optional[QuizSession] = None
    last_result: Optional[SessionResult] = None
    failed_words: list[Word] = field(default_factory=list)
    error: Optional[str] = None
    source_label: Optional[str] = None


@dataclass(frozen=True)
class StateSnapshot:
    """
    Read-only view of ApplicationState handed to observers.
    """
    phase: Phase
    master_words: tuple[Word, ...]
    failed_words: tuple[Word, ...]
    current_word: Optional[Word]
    session_state: Optional[SessionState]
    position: int
    total_words: int
    score: int
    last_outcome: Optional[AnswerOutcome]
    last_result: Optional[SessionResult]
    error: Optional[str]
    source_label: Optional[str]


StateListener = Callable[[StateSnapshot], None]


# ---- Pure Operations ----

def merge_session_result(master: Sequence[Word], result: SessionResult) -> list[Word]:
    """
    Fold a finished session's fail counts back into the master list.

    Master order is preserved; entries absent from the session are kept as-is;
    session words with no master match are dropped.
    """
    updates = {word.key: word for word in result.final_working_set}
    return [updates.get(word.key, word) for word in master]


def begin_review(failed_words: Sequence[Word]) -> QuizSession:
    """
    Start a review session over the words failed in the last session.
    """
    if not failed_words:
        raise ValueError("No failed words to review")
    return session_engine.start(failed_words)


# ---- Controller ----

class QuizController:
    """
    Mediates between word sources, the session engine and the presentation.
    """

    def __init__(
        self,
        state: Optional[ApplicationState] = None,
        start_session: Callable[[Sequence[Word]], QuizSession] = session_engine.start,
    ):
        self.state = state or ApplicationState()
        self._start_session = start_session
        self._listeners: list[StateListener] = []

    # ---- Observers ----

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with a snapshot after every transition.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def snapshot(self) -> StateSnapshot:
        state = self.state
        session = state.session
        return StateSnapshot(
            phase=state.phase,
            master_words=tuple(state.master_words),
            failed_words=tuple(state.failed_words),
            current_word=session.current_word() if session else None,
            session_state=session.state if session else None,
            position=session.position if session else 0,
            total_words=session.total_words if session else 0,
            score=session.score if session else 0,
            last_outcome=session.last_outcome if session else None,
            last_result=state.last_result,
            error=state.error,
            source_label=state.source_label,
        )

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    # ---- Loading ----

    def load_remote(self, url: str, **loader_options) -> bool:
        """
        Load a published sheet and start a quiz over it.

        Returns:
            True on success; False when the load failed (state.error is set
            and the previous master list is untouched)
        """
        if not url or not url.strip():
            return self._record_error("Please enter a Google Sheet URL.")
        return self._load(lambda: load_from_remote(url.strip(), **loader_options), url.strip())

    def load_document(self, data: bytes, filename: Optional[str] = None) -> bool:
        """
        Load an uploaded workbook and start a quiz over it.
        """
        return self._load(lambda: load_from_document(data), filename or "uploaded file")

    def _load(self, loader: Callable[[], list[Word]], label: str) -> bool:
        self.state.error = None
        try:
            words = loader()
        except WordSourceError as exc:
            logger.warning("Could not load words from %s: %s", label, exc)
            return self._record_error(str(exc))

        self.state.source_label = label
        self.start_quiz(words)
        return True

    def _record_error(self, message: str) -> bool:
        self.state.error = message
        self._notify()
        return False

    # ---- Session Transitions ----

    def start_quiz(self, words: Sequence[Word]) -> QuizSession:
        """
        Make words the master list and start a full session over them.
        """
        master = list(words)
        session = self._start_session(master)
        self.state.master_words = master
        self.state.session = session
        self.state.failed_words = []
        self.state.last_result = None
        self.state.error = None
        self.state.phase = Phase.PLAYING
        logger.info("Quiz started with %d words", len(master))
        self._notify()
        return session

    def _active_session(self) -> QuizSession:
        if self.state.session is None:
            raise RuntimeError("No active session")
        return self.state.session

    def current_word(self) -> Optional[Word]:
        session = self.state.session
        return session.current_word() if session else None

    def submit_answer(self, raw_input: str) -> AnswerOutcome:
        """Evaluate the current round. Session guard errors propagate."""
        outcome = self._active_session().submit_answer(raw_input)
        self._notify()
        return outcome

    def next_round(self) -> SessionState:
        """
        Advance after the reveal pause; finishes the session on the last round.
        """
        session = self._active_session()
        state = session.next_round()
        if state == SessionState.FINISHED:
            self.finish_session()
        else:
            self._notify()
        return state

    def finish_session(self) -> SessionResult:
        """
        Finish the active session and merge its fail counts into the master list.
        """
        result = self._active_session().finish()
        self.state.master_words = merge_session_result(self.state.master_words, result)
        self.state.last_result = result
        self.state.failed_words = list(result.failed_words)
        self.state.phase = Phase.RESULTS
        logger.info(
            "Merged session into master list: %d/%d correct, %d failed",
            result.score, result.total_words, len(result.failed_words),
        )
        self._notify()
        return result

    def review(self) -> QuizSession:
        """
        Re-drill the failed words of the last session.

        Raises:
            ValueError: there are no failed words (the UI must hide review)
        """
        session = begin_review(self.state.failed_words)
        self.state.session = session
        self.state.failed_words = []
        self.state.last_result = None
        self.state.phase = Phase.PLAYING
        logger.info("Review started with %d words", session.total_words)
        self._notify()
        return session

    def export_workbook(self, **export_options) -> bytes:
        """Serialize the current master list as an .xlsx workbook."""
        return export_words(self.state.master_words, **export_options)

    def restart(self) -> None:
        """Drop all controller state and return to setup."""
        self.state = ApplicationState()
        logger.info("Quiz state reset")
        self._notify()
