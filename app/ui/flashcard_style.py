"""
Flashcard style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "35px 24px"
CARD_MIN_HEIGHT = "210px"
FRONT_BG_COLOR = "#f0f2f6"
BACK_BG_COLOR = "#e8f4f8"
CORRECT_BG_COLOR = "#e7f6ec"
INCORRECT_BG_COLOR = "#fdecec"


# ---- Shared Typography Defaults ----

DEFAULT_MAIN_FONT_SIZE = "3em"
DEFAULT_MAIN_COLOR = "#1f1f1f"
DEFAULT_MAIN_WEIGHT = "normal"
DEFAULT_SUBTITLE_FONT_SIZE = "1.2em"
DEFAULT_SUBTITLE_COLOR = "#666"
DEFAULT_SUBTITLE_STYLE = "italic"
DEFAULT_CORNER_FONT_SIZE = "0.9em"
DEFAULT_CORNER_COLOR = "#666"
DEFAULT_CORNER_STYLE = "italic"


@dataclass(frozen=True)
class FlashcardStyle:
    """
    Visual style preset for flashcards.
    """
    main_font_size: str = DEFAULT_MAIN_FONT_SIZE
    main_color: str = DEFAULT_MAIN_COLOR
    main_weight: str = DEFAULT_MAIN_WEIGHT
    subtitle_font_size: str = DEFAULT_SUBTITLE_FONT_SIZE
    subtitle_color: str = DEFAULT_SUBTITLE_COLOR
    subtitle_style: str = DEFAULT_SUBTITLE_STYLE
    corner_font_size: str = DEFAULT_CORNER_FONT_SIZE
    corner_color: str = DEFAULT_CORNER_COLOR
    corner_style: str = DEFAULT_CORNER_STYLE
    wrap_text: bool = False
    bg_color: str = FRONT_BG_COLOR


DEFAULT_FLASHCARD_STYLE = FlashcardStyle()


# ---- Recall Presets ----

PROMPT_HIDDEN_STYLE = FlashcardStyle(
    main_font_size="2.2em",
    main_color="#9aa0a6",
    bg_color=FRONT_BG_COLOR,
)

PROMPT_VISIBLE_STYLE = FlashcardStyle(
    main_font_size="2.5em",
    wrap_text=True,
    bg_color=FRONT_BG_COLOR,
)

REVEAL_CORRECT_STYLE = FlashcardStyle(
    main_font_size="2.4em",
    main_color="#15803d",
    subtitle_font_size="1.0em",
    wrap_text=True,
    bg_color=CORRECT_BG_COLOR,
)

REVEAL_INCORRECT_STYLE = FlashcardStyle(
    main_font_size="2.4em",
    main_color="#b91c1c",
    subtitle_font_size="1.0em",
    wrap_text=True,
    bg_color=INCORRECT_BG_COLOR,
)
