"""
Session Engine - quiz session state machine

One session is a single pass over a shuffled working set. Each round is
evaluated exactly once; a wrong answer bumps the word's fail count.

States:
    NOT_STARTED -> IN_ROUND -> ROUND_EVALUATED -> (IN_ROUND | FINISHED)

Answering is two-phase so the caller can pause between them:
    outcome = session.submit_answer(text)   # evaluate + reveal, consumes the round
    session.next_round()                    # after the display pause

Quick start:
    from core import session_engine

    session = session_engine.start(words)
    while session.current_word() is not None:
        outcome = session.submit_answer(input())
        session.next_round()
    result = session.finish()
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from core.constants import CORRECT_REVEAL_SECONDS, INCORRECT_REVEAL_SECONDS
from core.errors import AlreadyEvaluated, NoActiveWord, SessionNotComplete
from core.schemas import SessionResult, Word


logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """Lifecycle state of a quiz session."""
    NOT_STARTED = "not_started"
    IN_ROUND = "in_round"
    ROUND_EVALUATED = "round_evaluated"
    FINISHED = "finished"


class Verdict(str, Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass(frozen=True)
class AnswerOutcome:
    """
    Result of evaluating one round.

    expected is always attached so an incorrect answer can be revealed.
    word is the word as it stands after this round (fail count included).
    """
    verdict: Verdict
    expected: str
    user_answer: str
    word: Word

    @property
    def is_correct(self) -> bool:
        return self.verdict == Verdict.CORRECT


@dataclass(frozen=True)
class RoundRecord:
    """
    One consumed round within a session.
    """
    position: int
    word: Word
    outcome: AnswerOutcome


def is_correct_answer(raw_input: str, target: str) -> bool:
    """
    Trimmed, case-folded exact comparison.

    No partial credit, accent folding or internal whitespace normalization.
    """
    return raw_input.strip().lower() == target.lower()


def reveal_delay(
    outcome: AnswerOutcome,
    correct_seconds: float = CORRECT_REVEAL_SECONDS,
    incorrect_seconds: float = INCORRECT_REVEAL_SECONDS,
) -> float:
    """Seconds to keep an evaluated round on screen before advancing."""
    return correct_seconds if outcome.is_correct else incorrect_seconds


class QuizSession:
    """
    A single quiz pass over a fixed working set.

    The working set is a snapshot taken at start: words are never added or
    removed, only replaced by copies with an updated fail count.
    """

    def __init__(self, working_set: Sequence[Word]):
        self.working_set: list[Word] = list(working_set)
        self.position = 0
        self.score = 0
        self.failed_this_session: list[Word] = []
        self.rounds: list[RoundRecord] = []
        self.last_outcome: Optional[AnswerOutcome] = None
        self.state = SessionState.NOT_STARTED

    @property
    def total_words(self) -> int:
        return len(self.working_set)

    @property
    def is_exhausted(self) -> bool:
        return self.position >= len(self.working_set)

    def begin(self) -> None:
        """Reset counters and enter the first round."""
        self.position = 0
        self.score = 0
        self.failed_this_session = []
        self.rounds = []
        self.last_outcome = None
        self.state = SessionState.FINISHED if self.is_exhausted else SessionState.IN_ROUND

    def current_word(self) -> Optional[Word]:
        """Word at the current position, or None once every round is consumed."""
        if self.is_exhausted:
            return None
        return self.working_set[self.position]

    def submit_answer(self, raw_input: str) -> AnswerOutcome:
        """
        Evaluate the answer for the current round and consume it.

        Raises:
            AlreadyEvaluated: the round already has an outcome (waiting for next_round)
            NoActiveWord: the session is not started or has no rounds left
        """
        if self.state == SessionState.ROUND_EVALUATED:
            raise AlreadyEvaluated(f"Round {self.position} has already been evaluated")
        if self.state != SessionState.IN_ROUND or self.is_exhausted:
            raise NoActiveWord("No word is waiting for an answer")

        word = self.working_set[self.position]
        if is_correct_answer(raw_input, word.target):
            self.score += 1
            outcome = AnswerOutcome(
                verdict=Verdict.CORRECT,
                expected=word.target,
                user_answer=raw_input,
                word=word,
            )
        else:
            updated = word.with_failure()
            self.working_set[self.position] = updated
            self.failed_this_session.append(updated)
            outcome = AnswerOutcome(
                verdict=Verdict.INCORRECT,
                expected=word.target,
                user_answer=raw_input,
                word=updated,
            )

        self.rounds.append(RoundRecord(position=self.position, word=outcome.word, outcome=outcome))
        self.last_outcome = outcome
        self.position += 1
        self.state = SessionState.ROUND_EVALUATED
        return outcome

    def next_round(self) -> SessionState:
        """
        Leave the evaluated round: enter the next one, or FINISHED when exhausted.

        Raises:
            NoActiveWord: there is no evaluated round to leave
        """
        if self.state != SessionState.ROUND_EVALUATED:
            raise NoActiveWord(f"Cannot advance from state {self.state.value}")
        self.last_outcome = None
        self.state = SessionState.FINISHED if self.is_exhausted else SessionState.IN_ROUND
        return self.state

    def finish(self) -> SessionResult:
        """
        Summarize the session once every round is consumed.

        Raises:
            SessionNotComplete: rounds remain
        """
        if not self.is_exhausted:
            raise SessionNotComplete(
                f"Session finished at {self.position}/{len(self.working_set)}"
            )
        self.state = SessionState.FINISHED
        logger.info(
            "Session finished: %d/%d correct, %d failed",
            self.score, len(self.working_set), len(self.failed_this_session),
        )
        return SessionResult(
            score=self.score,
            total_words=len(self.working_set),
            failed_words=list(self.failed_this_session),
            final_working_set=list(self.working_set),
        )


def start(words: Sequence[Word], rng: Optional[random.Random] = None) -> QuizSession:
    """
    Start a session over a uniformly shuffled copy of the words.

    Args:
        words: Non-empty list of words (callers must not start empty sessions)
        rng: Random source; defaults to the OS-seeded SystemRandom

    Returns:
        Session in the IN_ROUND state
    """
    if not words:
        raise ValueError("Cannot start a session without words")

    working_set = list(words)
    (rng or random.SystemRandom()).shuffle(working_set)

    session = QuizSession(working_set)
    session.begin()
    logger.info("Session started with %d words", len(working_set))
    return session
