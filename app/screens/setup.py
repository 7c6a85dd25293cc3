"""
Setup page rendering: choose a word source.
"""

from __future__ import annotations

import streamlit as st

from app import config
from app.session_controller import load_from_upload, load_from_url
from core.quiz_controller import StateSnapshot


INSTRUCTIONS = """
**Instructions:**
1. Your file/sheet should have 5 columns: Word, Translation, Audio URL, Notes (optional), Times Failed.
2. The first row is a header and is skipped.
3. If using Google Sheets, remember to publish it to the web first.
"""


def render_setup_page(snapshot: StateSnapshot) -> None:
    """
    Render the source selection screen.
    """
    st.title(f"{config.PAGE_ICON} {config.APP_TITLE}")
    st.markdown("Load your vocabulary from a public Google Sheet or an XLSX file.")

    st.text_input(
        "Google Sheet URL",
        key="sheet_url",
        placeholder="https://docs.google.com/spreadsheets/d/...",
    )
    if st.button("Start from URL", type="primary", use_container_width=True):
        load_from_url(st.session_state.sheet_url)
        st.rerun()

    st.markdown(
        "<div style='text-align: center; color: #94a3b8; margin: 1rem 0;'>OR</div>",
        unsafe_allow_html=True,
    )

    uploaded_file = st.file_uploader("Upload XLSX File", type=["xlsx"])
    if st.button("Start from file", type="primary", use_container_width=True, disabled=uploaded_file is None):
        load_from_upload(uploaded_file)
        st.rerun()

    if snapshot.error:
        st.error(snapshot.error)

    st.markdown("<br>", unsafe_allow_html=True)
    st.caption(INSTRUCTIONS)
