from __future__ import annotations
from typing import List
from .base import SpellChecker, REGISTRY, register

from . import wordset  # noqa: F401
from .wordset import WordSetSpellChecker, WordFileSpellChecker


def create_spell_checker(checker_id: str, **kwargs) -> SpellChecker:
    """
    Factory: instantiate a registered spell checker by id.
    """
    try:
        cls = REGISTRY[checker_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown spell checker id: {checker_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_spell_checker_ids() -> List[str]:
    """
    Return all registered spell checker ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["SpellChecker", "WordSetSpellChecker", "WordFileSpellChecker",
           "create_spell_checker", "get_spell_checker_ids", "register"]
