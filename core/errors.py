"""
Error taxonomy for the quiz trainer.

Word source errors are expected at runtime and are shown to the user.
Session state errors mean the caller drove the state machine incorrectly.
"""

from __future__ import annotations

from typing import Optional


class QuizError(Exception):
    """Base class for all quiz trainer errors."""


# ---- Word Source Errors ----

class WordSourceError(QuizError):
    """A word list could not be loaded. The message is user-facing."""


class InvalidSourceReference(WordSourceError):
    """The sheet URL does not contain a /spreadsheets/d/<id>/ segment."""

    def __init__(self, reference: str = ""):
        self.reference = reference
        super().__init__("Invalid Google Sheet URL. Could not find the Sheet ID.")


class SourceUnavailable(WordSourceError):
    """The remote export could not be fetched."""

    def __init__(self, status: Optional[int] = None, reason: str = ""):
        self.status = status
        if status is not None:
            message = (
                f"Failed to fetch sheet. Status: {status}. "
                "Make sure it's published to the web."
            )
        else:
            message = f"Could not reach the sheet export. {reason}".strip()
        super().__init__(message)


class MalformedDocument(WordSourceError):
    """The payload is not a readable spreadsheet or CSV document."""

    def __init__(self, message: str = "Could not parse the file. Please ensure it is a valid .xlsx file."):
        super().__init__(message)


class EmptySource(WordSourceError):
    """The document parsed, but no row produced a valid word."""

    def __init__(self):
        super().__init__(
            "No valid data found. Ensure it has at least 3 columns: "
            "word, translation, audio URL."
        )


# ---- Session State Errors ----

class SessionStateError(QuizError):
    """The session state machine was used out of order."""


class AlreadyEvaluated(SessionStateError):
    """The current round already has an outcome."""


class NoActiveWord(SessionStateError):
    """There is no round left to answer."""


class SessionNotComplete(SessionStateError):
    """finish() was called before every round was consumed."""
