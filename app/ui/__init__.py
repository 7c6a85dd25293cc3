"""UI Components for the Vocab Quiz"""

from app.ui.flashcard import render_flashcard
from app.ui.session_stats import render_session_stats, render_session_complete
from app.ui.answer_feedback import render_answer_feedback
from app.ui.audio_cue import render_audio_cue

__all__ = [
    "render_flashcard",
    "render_session_stats",
    "render_session_complete",
    "render_answer_feedback",
    "render_audio_cue",
]
