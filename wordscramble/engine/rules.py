"""
Game rules and their defaults.

A round is always playable: if no start word can be picked, the session
falls back to DEFAULT_ROOT_WORD. Words shorter than MIN_WORD_LENGTH are
rejected as "not real" before the dictionary is ever consulted.
"""

from __future__ import annotations

from dataclasses import dataclass

# Single source of truth for the rule defaults.
DEFAULT_ROOT_WORD = "silkworm"
MIN_WORD_LENGTH = 3
DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class GameRules:
    """Tunable knobs for a GameSession."""
    fallback_root_word: str = DEFAULT_ROOT_WORD   # used when no start word is available
    min_word_length: int = MIN_WORD_LENGTH        # shorter submissions are "not real"
    language: str = DEFAULT_LANGUAGE              # tag passed to the spell checker

    def __post_init__(self) -> None:
        if not self.fallback_root_word.strip():
            raise ValueError("fallback_root_word must be a non-empty string")
        if self.min_word_length < 1:
            raise ValueError(f"min_word_length must be >= 1; got {self.min_word_length}")
        if not self.language:
            raise ValueError("language must be a non-empty tag")
