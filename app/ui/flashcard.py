"""
Flashcard UI Component

Renders the prompt / reveal card for a round.
"""

from __future__ import annotations

import html

import streamlit as st
from app.ui.flashcard_style import (
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    DEFAULT_FLASHCARD_STYLE,
    FlashcardStyle,
)


def build_flashcard_html(
    main_text: str,
    subtitle: str = "",
    corner_text: str = "",
    style: FlashcardStyle | None = None,
) -> str:
    """
    Build the card markup. All text is HTML-escaped (it comes from user sheets).

    Args:
        main_text: Primary text (center, large)
        subtitle: Optional secondary text (below main, smaller)
        corner_text: Optional text in top-right corner
        style: Style preset (defaults to DEFAULT_FLASHCARD_STYLE)
    """
    s = style or DEFAULT_FLASHCARD_STYLE

    corner_html = ""
    if corner_text:
        corner_html = (
            f'<div style="position: absolute; top: 15px; right: 20px; '
            f'font-size: {s.corner_font_size}; color: {s.corner_color}; '
            f'font-style: {s.corner_style};">{html.escape(corner_text)}</div>'
        )

    white_space = "normal" if s.wrap_text else "nowrap"
    main_html = (
        f'<h1 style="font-size: {s.main_font_size}; color: {s.main_color}; '
        f'font-weight: {s.main_weight}; margin: 0; white-space: {white_space}; '
        'text-align: center; line-height: 1.4; max-width: 100%; '
        'overflow-wrap: anywhere; word-break: break-word;">'
        f"{html.escape(main_text)}</h1>"
    )

    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            f'<p style="font-size: {s.subtitle_font_size}; color: {s.subtitle_color}; '
            f'font-style: {s.subtitle_style}; margin: 15px 0 0 0; text-align: center; '
            'line-height: 1.4; max-width: 100%; overflow-wrap: anywhere; '
            f'word-break: break-word;">{html.escape(subtitle)}</p>'
        )

    return (
        f'<div style="background-color: {s.bg_color}; padding: {CARD_PADDING}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {CARD_MIN_HEIGHT}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center; '
        f'position: relative;">{corner_html}{main_html}{subtitle_html}</div>'
    )


def render_flashcard(
    main_text: str,
    subtitle: str = "",
    corner_text: str = "",
    style: FlashcardStyle | None = None,
) -> None:
    st.markdown(
        build_flashcard_html(main_text, subtitle=subtitle, corner_text=corner_text, style=style),
        unsafe_allow_html=True,
    )
