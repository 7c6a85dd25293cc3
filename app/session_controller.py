"""
Session lifecycle helpers for Streamlit app.

Each function handles one user event by calling a QuizController transition,
then adjusts the UI-only flags kept in st.session_state.
"""

from __future__ import annotations

import logging
import time

import streamlit as st

from app import config
from app.state import get_controller, reset_round_flags
from core.errors import AlreadyEvaluated, NoActiveWord
from core.session_engine import AnswerOutcome, SessionState, reveal_delay


logger = logging.getLogger(__name__)


def load_from_url(url: str) -> bool:
    """
    Load a published sheet and start the quiz.
    """
    controller = get_controller()
    with st.spinner("Loading sheet..."):
        loaded = controller.load_remote(
            url,
            timeout=config.SHEET_FETCH_TIMEOUT,
            export_url_template=config.SHEET_EXPORT_URL_TEMPLATE,
        )
    if loaded:
        reset_round_flags()
    return loaded


def load_from_upload(uploaded_file) -> bool:
    """
    Load an uploaded workbook and start the quiz.
    """
    if uploaded_file is None:
        return False
    controller = get_controller()
    with st.spinner("Reading file..."):
        loaded = controller.load_document(uploaded_file.getvalue(), filename=uploaded_file.name)
    if loaded:
        reset_round_flags()
    return loaded


def submit_answer(raw_input: str) -> AnswerOutcome | None:
    """
    Evaluate the typed answer.

    A second submission during the reveal pause is rejected and ignored.
    """
    try:
        return get_controller().submit_answer(raw_input)
    except AlreadyEvaluated:
        logger.debug("Ignored duplicate submission during reveal pause")
        return None


def advance_after_pause(outcome: AnswerOutcome) -> None:
    """
    Hold the evaluated round on screen, then move to the next round (or results).
    """
    delay = reveal_delay(
        outcome,
        correct_seconds=config.CORRECT_REVEAL_SECONDS,
        incorrect_seconds=config.INCORRECT_REVEAL_SECONDS,
    )
    time.sleep(delay)

    controller = get_controller()
    try:
        state = controller.next_round()
    except NoActiveWord:
        # Another rerun already advanced this round
        logger.debug("Round already advanced")
        return
    if state != SessionState.FINISHED:
        reset_round_flags()
    st.rerun()


def start_review() -> None:
    """
    Re-drill the failed words of the last session.
    """
    get_controller().review()
    reset_round_flags()


def restart() -> None:
    """
    Drop everything and go back to setup.
    """
    get_controller().restart()
    reset_round_flags()
    st.session_state.sheet_url = ""
