from __future__ import annotations
from typing import Dict, Type

# ---- Global spell-checker registry ----
REGISTRY: Dict[str, Type["SpellChecker"]] = {}


def register(cls: Type["SpellChecker"]) -> Type["SpellChecker"]:
    """
    Decorator: @register on a spell-checker class adds it to REGISTRY by its `id`.
    """
    cid = getattr(cls, "id", None)
    if not cid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if cid in REGISTRY:
        raise ValueError(f"Duplicate spell checker id: {cid}")
    REGISTRY[cid] = cls
    return cls


# ---- Base class that spell checkers inherit ----
class SpellChecker:
    """
    The only thing a GameSession asks of a dictionary: is this word spelled
    correctly in this language? Implementations must be side-effect free.
    """
    id = "base"
    name = "Base"

    def is_correctly_spelled(self, word: str, language: str) -> bool:
        raise NotImplementedError("Override in subclass")
