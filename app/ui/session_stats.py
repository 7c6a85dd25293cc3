"""
Session Statistics UI

Renders progress metrics for the active session and the end-of-session summary.
"""

from __future__ import annotations

import streamlit as st

from core.quiz_controller import StateSnapshot
from core.schemas import SessionResult


FEEDBACK_TIERS = (
    (90, "Excellent work! You're a vocabulary master!"),
    (70, "Great job! Keep practicing to get even better."),
    (50, "Good effort! A little more practice will make a big difference."),
)
FALLBACK_FEEDBACK = "Keep trying! Every attempt is a step forward."


def feedback_message(percentage: int) -> str:
    """Encouragement line for a score percentage."""
    for threshold, message in FEEDBACK_TIERS:
        if percentage >= threshold:
            return message
    return FALLBACK_FEEDBACK


def source_caption(source_label: str | None) -> str | None:
    """Caption naming where the word list came from, if known."""
    if not source_label:
        return None
    return f"Words from: {source_label}"


def render_session_stats(snapshot: StateSnapshot) -> bool:
    """
    Render session progress metrics and the quit button.

    Returns:
        True if quit button was clicked, False otherwise
    """
    if snapshot.total_words == 0:
        return False

    col1, col2, col3 = st.columns([3, 3, 1])

    with col1:
        current = min(snapshot.position + (0 if snapshot.last_outcome else 1), snapshot.total_words)
        st.metric("Word", f"{current} / {snapshot.total_words}")

    with col2:
        st.metric("Score", snapshot.score)

    with col3:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        if st.button("❌", help="Quit and start over", use_container_width=True):
            return True

    st.progress(snapshot.position / snapshot.total_words)
    st.divider()
    return False


def render_session_complete(result: SessionResult, source_label: str | None = None) -> None:
    """Render the score summary of a finished session."""
    caption = source_caption(source_label)
    if caption:
        st.caption(caption)
    st.success(f"🎉 Quiz complete! You got {result.score} of {result.total_words} right.")
    st.metric("Score", f"{result.percentage}%")
    st.info(feedback_message(result.percentage))
