"""
Audio Cue UI

Plays the audio reference of the current word.
"""

import streamlit as st


def render_audio_cue(audio_ref: str, autoplay: bool = True) -> None:
    """
    Render an audio player for an opaque audio reference.

    The reference (usually a URL) is handed to the player untouched. With
    autoplay on, every rerun of the round plays the cue again, which is how
    "Repeat audio" works.
    """
    st.audio(audio_ref, autoplay=autoplay)
