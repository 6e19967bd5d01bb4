from .outcome import Outcome, Rejection, error_text
from .rules import GameRules, DEFAULT_ROOT_WORD, MIN_WORD_LENGTH, DEFAULT_LANGUAGE
from .validation import normalize, is_original, is_possible, is_real
from .session import GameSession

__all__ = [
    "GameSession", "GameRules", "Outcome", "Rejection", "error_text",
    "normalize", "is_original", "is_possible", "is_real",
    "DEFAULT_ROOT_WORD", "MIN_WORD_LENGTH", "DEFAULT_LANGUAGE",
]
