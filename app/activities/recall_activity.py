"""
Recall Activity

Quiz mode: hear the audio cue, type the translation.
"""

from app.activities.base import AbstractActivity
from app.ui.flashcard import render_flashcard
from app.ui.flashcard_style import (
    PROMPT_HIDDEN_STYLE,
    PROMPT_VISIBLE_STYLE,
    REVEAL_CORRECT_STYLE,
    REVEAL_INCORRECT_STYLE,
)
from core.session_engine import AnswerOutcome


HIDDEN_SOURCE_TEXT = "🎧 Listen and type the translation"


class RecallActivity(AbstractActivity):
    """
    Recall activity - the source word stays hidden unless the user asks for it.

    Renders the (optionally hidden) source word on front, the expected
    translation on back.
    """

    def render_card_front(self, show_source: bool) -> None:
        """Render the source word, or a placeholder while it is hidden."""
        if show_source:
            render_flashcard(main_text=self.word.source, style=PROMPT_VISIBLE_STYLE)
        else:
            render_flashcard(main_text=HIDDEN_SOURCE_TEXT, style=PROMPT_HIDDEN_STYLE)

    def render_card_back(self, outcome: AnswerOutcome) -> None:
        """Render the expected translation with the source word in the corner."""
        style = REVEAL_CORRECT_STYLE if outcome.is_correct else REVEAL_INCORRECT_STYLE
        render_flashcard(
            main_text=outcome.expected,
            subtitle=outcome.word.note,
            corner_text=self.word.source,
            style=style,
        )

    def get_presentation_mode(self) -> str:
        """Return presentation mode."""
        return "recall"
