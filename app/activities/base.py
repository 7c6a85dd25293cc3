"""
Abstract Base Activity

Defines the interface for quiz activities.
"""

from abc import ABC, abstractmethod

from core.schemas import Word
from core.session_engine import AnswerOutcome


class AbstractActivity(ABC):
    """
    Abstract base class for quiz activities.

    Subclasses should implement:
    - render_card_front()
    - render_card_back()
    - get_presentation_mode()
    """

    def __init__(self, word: Word):
        """
        Initialize activity.

        Args:
            word: Word being asked this round
        """
        self.word = word

    @abstractmethod
    def render_card_front(self, show_source: bool) -> None:
        """Render the prompt side of the card."""
        pass

    @abstractmethod
    def render_card_back(self, outcome: AnswerOutcome) -> None:
        """Render the reveal side of the card after evaluation."""
        pass

    @abstractmethod
    def get_presentation_mode(self) -> str:
        """Return the presentation mode identifier (e.g., 'recall')."""
        pass
