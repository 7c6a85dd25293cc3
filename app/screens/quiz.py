"""
Quiz page rendering (active session).
"""

from __future__ import annotations

import streamlit as st

from app.activities import RecallActivity
from app.session_controller import advance_after_pause, restart, submit_answer
from app.ui import render_answer_feedback, render_audio_cue, render_session_stats
from core.quiz_controller import StateSnapshot


def render_quiz_page(snapshot: StateSnapshot) -> None:
    """
    Render the current round, or the reveal of the round just evaluated.
    """
    if render_session_stats(snapshot):
        restart()
        st.rerun()

    outcome = snapshot.last_outcome
    if outcome is not None:
        _render_reveal(outcome)
        return

    word = snapshot.current_word
    if word is None:
        return
    activity = RecallActivity(word)

    render_audio_cue(word.audio_ref)

    col1, col2 = st.columns(2)
    with col1:
        if st.button("🔁 Repeat audio", use_container_width=True):
            st.rerun()
    with col2:
        if not st.session_state.show_source_word:
            if st.button("👁 Show word", use_container_width=True):
                st.session_state.show_source_word = True
                st.rerun()

    activity.render_card_front(show_source=st.session_state.show_source_word)
    st.markdown("<br>", unsafe_allow_html=True)

    with st.form(key=f"answer_form_{st.session_state.answer_round}", clear_on_submit=True):
        answer = st.text_input("Your answer", placeholder="Type the translation")
        submitted = st.form_submit_button("Check", type="primary", use_container_width=True)

    if submitted:
        submit_answer(answer)
        st.rerun()


def _render_reveal(outcome) -> None:
    activity = RecallActivity(outcome.word)
    activity.render_card_back(outcome)
    st.markdown("<br>", unsafe_allow_html=True)

    with st.form(key=f"answer_form_{st.session_state.answer_round}_locked"):
        st.text_input("Your answer", value=outcome.user_answer, disabled=True)
        st.form_submit_button("Check", disabled=True, use_container_width=True)

    render_answer_feedback(outcome)
    advance_after_pause(outcome)
