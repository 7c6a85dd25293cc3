"""
Pydantic models for vocabulary words and session results.

Words are frozen: a failed answer produces an updated copy rather than
mutating the instance shared with the master list.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


WordKey = tuple[str, str]


class Word(BaseModel):
    """
    A single vocabulary entry.

    Identity for merging is (source, target); fail_count is the only field
    that changes during the app's lifetime.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    source: str = Field(..., min_length=1, description="Prompt term")
    target: str = Field(..., min_length=1, description="Expected answer")
    audio_ref: str = Field(..., min_length=1, description="Opaque audio cue reference (usually a URL)")
    note: str = Field(default="", description="Free-text annotation, passed through untouched")
    fail_count: int = Field(default=0, ge=0, description="Times answered incorrectly")

    @property
    def key(self) -> WordKey:
        return (self.source, self.target)

    def with_failure(self) -> "Word":
        """Return a copy with one more recorded failure."""
        return self.model_copy(update={"fail_count": self.fail_count + 1})


class SessionResult(BaseModel):
    """
    Summary of a finished session.

    final_working_set carries the updated fail counts to merge back into the
    master list.
    """
    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0)
    total_words: int = Field(..., ge=0)
    failed_words: list[Word] = Field(default_factory=list)
    final_working_set: list[Word] = Field(default_factory=list)

    @property
    def percentage(self) -> int:
        if self.total_words == 0:
            return 0
        return round(self.score / self.total_words * 100)
