"""
Submission validation predicates.

This module answers the question: "Can this word be played right now?"
A word is playable iff:
  - it has not been played already this round        (is_original)
  - it can be spelled from the root word's letters   (is_possible)
  - it is long enough and correctly spelled          (is_real)

All predicates are pure: they never mutate their arguments. Callers are
expected to pass words already normalized with `normalize`.
"""

from typing import Iterable, List

from wordscramble.engine.rules import DEFAULT_LANGUAGE, MIN_WORD_LENGTH


def normalize(raw: str) -> str:
    """Lowercase and trim surrounding whitespace (the game is case-insensitive)."""
    return raw.strip().lower()


def is_original(word: str, used_words: Iterable[str]) -> bool:
    """True if `word` has not been accepted yet (exact match)."""
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    """
    True if `word` can be formed from the letters of `root_word`.

    Each letter of the candidate consumes one matching letter from a copy
    of the root word, so multiplicity is respected:
      is_possible("silk", "silkworm")  -> True
      is_possible("silkk", "silkworm") -> False  (only one 'k')

    Note that the root word itself is always possible.
    """
    remaining: List[str] = list(root_word.lower())

    for letter in word:
        try:
            remaining.remove(letter)  # drops the first occurrence only
        except ValueError:
            return False
    return True


def is_real(word: str, spell_checker, *, language: str = DEFAULT_LANGUAGE,
            min_length: int = MIN_WORD_LENGTH) -> bool:
    """
    True if `word` is long enough and the spell checker knows it.

    Args:
      word          : normalized candidate
      spell_checker : any object with is_correctly_spelled(word, language)
      language      : language tag forwarded to the spell checker
      min_length    : very short words are refused without a lookup
    """
    if len(word) < min_length:
        return False
    return bool(spell_checker.is_correctly_spelled(word, language))
