"""
One player's game state.

A round = (root_word, used_words). `start_new_round` picks a fresh root word
and clears the used list; `submit_word` validates a guess and, if accepted,
puts it at the front of `used_words` (newest first).

The session is playable straight after construction: the root word starts
out as the fallback word, so `submit_word` never runs against an empty root.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional

from wordscramble.engine.outcome import Outcome, Rejection
from wordscramble.engine.rules import GameRules
from wordscramble.engine.validation import normalize, is_original, is_possible, is_real

log = logging.getLogger(__name__)


class GameSession:
    """
    Holds the current round and applies the submission rules.

    Args:
      spell_checker : object with is_correctly_spelled(word, language) -> bool
      rules         : GameRules (fallback root word, min length, language)
      seed          : RNG seed so root-word picks are reproducible
    """

    def __init__(self, spell_checker, *, rules: GameRules | None = None,
                 seed: int | None = None):
        self.spell_checker = spell_checker
        self.rules = rules or GameRules()
        self.rng = random.Random(seed)

        self._root_word: str = normalize(self.rules.fallback_root_word)
        self._used_words: List[str] = []

    @property
    def root_word(self) -> str:
        return self._root_word

    @property
    def used_words(self) -> List[str]:
        """Accepted words this round, most recent first (a copy)."""
        return list(self._used_words)

    def start_new_round(self, candidates: Optional[Iterable[str]]) -> str:
        """
        Pick a new root word uniformly at random and clear the used list.

        Blank candidates are ignored. With nothing left to pick from (or no
        word list at all), the fallback root word is used so the game stays
        playable.
        """
        pool = [normalize(c) for c in candidates or ()]
        pool = [c for c in pool if c]

        if pool:
            self._root_word = self.rng.choice(pool)
            log.debug("picked root word %r from %d candidates", self._root_word, len(pool))
        else:
            self._root_word = normalize(self.rules.fallback_root_word)
            log.warning("no start words available; using fallback %r", self._root_word)

        self._used_words = []
        return self._root_word

    def submit_word(self, raw: str) -> Optional[Outcome]:
        """
        Validate one submission against the current round.

        Returns None for an empty submission (ignored, nothing changes).
        Otherwise returns an Outcome; checks run in order and the first
        failure wins: already used, not composable, not real.
        """
        word = normalize(raw)
        if not word:
            return None

        if not is_original(word, self._used_words):
            return self._reject(word, Rejection.ALREADY_USED)

        if not is_possible(word, self._root_word):
            return self._reject(word, Rejection.NOT_COMPOSABLE)

        if not is_real(word, self.spell_checker, language=self.rules.language,
                       min_length=self.rules.min_word_length):
            return self._reject(word, Rejection.NOT_REAL)

        self._used_words.insert(0, word)
        return Outcome.accept(word)

    def _reject(self, word: str, reason: Rejection) -> Outcome:
        log.debug("rejected %r against %r: %s", word, self._root_word, reason.value)
        return Outcome.reject(word, reason)
