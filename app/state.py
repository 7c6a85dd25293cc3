"""
Streamlit session state and logging initialization helpers.
"""

from __future__ import annotations

import logging

import streamlit as st

from app import config
from core.quiz_controller import QuizController


def init_logging() -> None:
    """
    Configure the root logger (cached, runs once per server process).
    """
    @st.cache_resource
    def _init_logging() -> None:
        logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
        logging.getLogger(__name__).info("Logging configured at %s", config.LOG_LEVEL)

    _init_logging()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "controller" not in st.session_state:
        st.session_state.controller = QuizController()
    if "show_source_word" not in st.session_state:
        st.session_state.show_source_word = False
    if "answer_round" not in st.session_state:
        st.session_state.answer_round = 0
    if "sheet_url" not in st.session_state:
        st.session_state.sheet_url = ""


def get_controller() -> QuizController:
    return st.session_state.controller


def reset_round_flags() -> None:
    """Hide the source word and hand the next round a fresh answer box."""
    st.session_state.show_source_word = False
    st.session_state.answer_round += 1
