"""
Vocab Quiz - Main App

Streamlit UI for the audio vocabulary quiz. Run with:

    pip install -e .
    streamlit run app/streamlit_app.py
"""

import streamlit as st

from app import config
from app.router import get_page
from app.state import ensure_session_state, get_controller, init_logging


# ---- Page Setup ----

st.set_page_config(
    page_title=config.APP_TITLE,
    page_icon=config.PAGE_ICON,
    layout="centered"
)

init_logging()
ensure_session_state()


# ---- Main App ----

def main():
    """Main app entry point."""
    snapshot = get_controller().snapshot()
    get_page(snapshot.phase).render(snapshot)


if __name__ == "__main__":
    main()
