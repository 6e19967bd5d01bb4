"""
Result of a single submission.

An Outcome either accepts the word (reason is None) or rejects it with one
of the Rejection reasons. Rejections are plain values: the session never
raises for a bad word, it hands the reason back for the caller to display.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Rejection(str, Enum):
    ALREADY_USED = "already_used"
    NOT_COMPOSABLE = "not_composable"
    NOT_REAL = "not_real"


# (title, message) pairs shown to the player; {root_word} is filled in.
_ERROR_TEXT = {
    Rejection.ALREADY_USED: ("Word already in use", "Be more original"),
    Rejection.NOT_COMPOSABLE: ("Word not in dictionary",
                               "Try again with a different word from {root_word}"),
    Rejection.NOT_REAL: ("Word is not real", "Try again with a different word"),
}


@dataclass(frozen=True)
class Outcome:
    word: str
    reason: Optional[Rejection] = None

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @classmethod
    def accept(cls, word: str) -> "Outcome":
        return cls(word=word)

    @classmethod
    def reject(cls, word: str, reason: Rejection) -> "Outcome":
        return cls(word=word, reason=reason)


def error_text(reason: Rejection, root_word: str) -> Tuple[str, str]:
    """
    Title and message for a rejection, as an alert would show them.

    Example:
      error_text(Rejection.NOT_COMPOSABLE, "garden")
        -> ("Word not in dictionary", "Try again with a different word from garden")
    """
    title, message = _ERROR_TEXT[Rejection(reason)]
    return title, message.format(root_word=root_word)
