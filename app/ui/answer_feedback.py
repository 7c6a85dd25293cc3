"""
Answer Feedback UI

Renders the correct / incorrect banner shown during the reveal pause.
"""

import streamlit as st

from core.session_engine import AnswerOutcome


def render_answer_feedback(outcome: AnswerOutcome) -> None:
    """
    Show the verdict; an incorrect answer reveals the expected translation.
    """
    if outcome.is_correct:
        st.success("✅ Correct!")
        return

    st.error(f"❌ Not quite. The correct answer is **{outcome.expected}**.")
    if outcome.word.note:
        st.caption(f"Note: {outcome.word.note}")
