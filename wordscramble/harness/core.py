"""
Round survey primitives.

- playable_words: every vocabulary word a fresh round would accept.
- run_case:       survey one root word.
- run_batch:      survey many root words in sequence (optionally a sample prefix).
- summarize:      aggregate stats over a batch (numpy).

Answers "is this start word any fun?": a root word that admits only a
handful of playable words makes for a short game. Like the session, these
functions are UI-agnostic so a CLI or a notebook can reuse them.
"""

from __future__ import annotations
import time
from typing import Callable, Dict, Iterable, List

import numpy as np

from wordscramble.engine import GameRules, normalize, is_possible, is_real


def playable_words(
        root_word: str,
        vocabulary: Iterable[str],
        spell_checker,
        *,
        rules: GameRules | None = None,
) -> List[str]:
    """
    Words from `vocabulary` that `GameSession.submit_word` would accept as the
    first submission of a round with this root word.

    Returns:
        Unique words, longest first, ties broken alphabetically.
    """
    rules = rules or GameRules()
    root = normalize(root_word)

    found = set()
    for w in vocabulary:
        w = normalize(w)
        if not w or w in found:
            continue
        # Cheap letter check first; the spell checker may be slower.
        if is_possible(w, root) and is_real(w, spell_checker, language=rules.language,
                                            min_length=rules.min_word_length):
            found.add(w)

    return sorted(found, key=lambda w: (-len(w), w))


def run_case(
        root_word: str,
        vocabulary: Iterable[str],
        spell_checker,
        *,
        rules: GameRules | None = None,
) -> Dict:
    """
    Survey a single root word.

    Returns:
        dict with keys:
            root_word (str), num_playable (int), longest (str),
            words (list[str]), time_ms (float)
    """
    t0 = time.perf_counter_ns()
    words = playable_words(root_word, vocabulary, spell_checker, rules=rules)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0
    return {
        "root_word": normalize(root_word),
        "num_playable": len(words),
        "longest": words[0] if words else "",
        "words": words,
        "time_ms": dt,
    }


def run_batch(
        root_words: Iterable[str],
        vocabulary: List[str],
        spell_checker,
        *,
        rules: GameRules | None = None,
        sample: int | None = None,
        on_case: Callable[[int, Dict], None] | None = None,
) -> List[Dict]:
    """
    Survey many root words back-to-back. If 'sample' is provided, only the
    first K non-blank root words are used to speed up quick checks.

    `root_words` is consumed lazily, so a progress wrapper (e.g. tqdm) ticks
    per case. `on_case(idx, result)` is called after each case, idx from 1.
    """
    out: List[Dict] = []
    if sample is not None and sample <= 0:
        return out

    for w in root_words:
        if not w.strip():
            continue
        r = run_case(w, vocabulary, spell_checker, rules=rules)
        out.append(r)
        if on_case is not None:
            on_case(len(out), r)
        if sample is not None and len(out) >= sample:
            break  # don't pull more root words than needed
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate `num_playable` across a batch.

    Returns zeros for an empty batch so manifests always have the same keys.
    """
    counts = np.array([r["num_playable"] for r in results], dtype=float)
    if counts.size == 0:
        return {"count": 0, "mean": 0.0, "median": 0.0, "min": 0, "max": 0, "p10": 0.0,
                "thinnest": ""}

    return {
        "count": int(counts.size),
        "mean": round(float(counts.mean()), 3),
        "median": float(np.median(counts)),
        "min": int(counts.min()),
        "max": int(counts.max()),
        "p10": float(np.percentile(counts, 10)),
        # root word offering the fewest playable words (worth pruning from start.txt)
        "thinnest": results[int(counts.argmin())]["root_word"],
    }
