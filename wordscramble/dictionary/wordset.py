"""
Word-set spell checkers.

A word is "correctly spelled" iff it is in a fixed set of known words for
the checker's language. Deterministic, which makes it the checker of choice
for tests.

  - wordset  : words given directly (any iterable of strings)
  - wordfile : words loaded from a UTF-8 file, one per line
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Set

from wordscramble.datasets.io import read_lines
from wordscramble.engine.rules import DEFAULT_LANGUAGE
from .base import SpellChecker, register

log = logging.getLogger(__name__)


@register
class WordSetSpellChecker(SpellChecker):
    id = "wordset"
    name = "Fixed word set"

    def __init__(self, words: Iterable[str], language: str = DEFAULT_LANGUAGE):
        self.language = language
        # Case-normalized; blanks never count as words.
        self.words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: str) -> bool:
        return word.strip().lower() in self.words

    def is_correctly_spelled(self, word: str, language: str) -> bool:
        # One dictionary, one language: other tags know no words.
        if language != self.language:
            return False
        return word in self


@register
class WordFileSpellChecker(WordSetSpellChecker):
    id = "wordfile"
    name = "Word list file"

    def __init__(self, path: Path | str, language: str = DEFAULT_LANGUAGE):
        # read_lines raises FileNotFoundError: without a dictionary nothing
        # could ever be accepted, so this is a setup error, not a fallback.
        super().__init__(read_lines(path), language=language)
        self.path = str(path)
        log.info("loaded %d %s words from %s", len(self.words), language, self.path)
