"""
Results page rendering: score, failed words, review / download / restart.
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from app import config
from app.session_controller import restart, start_review
from app.state import get_controller
from app.ui import render_session_complete
from core.quiz_controller import StateSnapshot
from core.schemas import Word


def _failed_words_table(words: tuple[Word, ...]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"Word": w.source, "Translation": w.target, "Times Failed": w.fail_count}
            for w in words
        ]
    )


def render_results_page(snapshot: StateSnapshot) -> None:
    """
    Render the end-of-session screen.
    """
    result = snapshot.last_result
    if result is not None:
        render_session_complete(result, snapshot.source_label)

    failed = snapshot.failed_words
    if failed:
        st.markdown(f"### Words to review ({len(failed)})")
        st.dataframe(_failed_words_table(failed), hide_index=True, use_container_width=True)
        label = f"Review {len(failed)} Failed Word{'s' if len(failed) > 1 else ''}"
        if st.button(label, type="primary", use_container_width=True):
            start_review()
            st.rerun()

    st.download_button(
        "Download Updated File",
        data=get_controller().export_workbook(
            header=config.EXPORT_HEADER,
            sheet_name=config.EXPORT_SHEET_NAME,
        ),
        file_name=config.EXPORT_FILENAME,
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        use_container_width=True,
    )

    if st.button("Start New Quiz", use_container_width=True):
        restart()
        st.rerun()
