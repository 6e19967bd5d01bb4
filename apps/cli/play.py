# apps/cli/play.py
"""
Terminal front end for wordscramble.

This script:
  1) Loads the start word list (falls back to the default root word if missing)
     and the dictionary used to decide which words are real.
  2) Starts a round and reads guesses line by line.
  3) Shows each rejection as an alert-style title + message, and the accepted
     words newest first, each with its letter count.

Commands at the prompt:
  :new   start a new round with a fresh root word
  :quit  exit (so does EOF / Ctrl-D)

Usage:
    python -m apps.cli.play --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List

from wordscramble.datasets.io import (
    DEFAULT_DICTIONARY_PATH, DEFAULT_START_PATH, load_start_words,
)
from wordscramble.dictionary import create_spell_checker
from wordscramble.engine import GameRules, GameSession, error_text
from wordscramble.engine.rules import DEFAULT_LANGUAGE, MIN_WORD_LENGTH

NEW_ROUND = ":new"
QUIT = ":quit"


def render_round(session: GameSession) -> List[str]:
    """
    Lines describing the current round: the root word as a title, then the
    accepted words (newest first) with their letter counts.
    """
    lines = [f"== {session.root_word} =="]
    for w in session.used_words:
        lines.append(f"  ({len(w)}) {w}")
    return lines


def play(
        session: GameSession,
        candidates: List[str],
        *,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
) -> GameSession:
    """
    Run the read/submit/show loop until :quit or EOF.

    The session is returned so callers (and tests) can inspect the final round.
    """
    session.start_new_round(candidates)
    for line in render_round(session):
        output_fn(line)

    while True:
        try:
            raw = input_fn("word> ")
        except EOFError:
            break

        cmd = raw.strip().lower()
        if cmd == QUIT:
            break
        if cmd == NEW_ROUND:
            session.start_new_round(candidates)
            for line in render_round(session):
                output_fn(line)
            continue

        outcome = session.submit_word(raw)
        if outcome is None:
            continue  # empty submission, nothing to show

        if outcome.accepted:
            for line in render_round(session):
                output_fn(line)
        else:
            title, message = error_text(outcome.reason, session.root_word)
            output_fn(f"[{title}] {message}")

    return session


def main():
    """
    Parse CLI args, load the word lists and play until the player quits.
    """
    ap = argparse.ArgumentParser(description="wordscramble — make words from a root word")
    ap.add_argument("--start", default=str(DEFAULT_START_PATH),
                    help="path to root word candidates (one per line)")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY_PATH),
                    help="path to the dictionary of real words (one per line)")
    ap.add_argument("--seed", type=int, help="RNG seed for root word picks")
    ap.add_argument("--min-length", type=int, default=MIN_WORD_LENGTH,
                    help="shortest word that counts as real")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language tag")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        checker = create_spell_checker("wordfile", path=args.dictionary, language=args.language)
    except FileNotFoundError:
        print(f"Dictionary not found: {args.dictionary}", file=sys.stderr)
        sys.exit(2)

    rules = GameRules(min_word_length=args.min_length, language=args.language)
    session = GameSession(checker, rules=rules, seed=args.seed)
    candidates = load_start_words(args.start)

    play(session, candidates)
    print(f"Found {len(session.used_words)} word(s) in '{session.root_word}'.")


if __name__ == "__main__":
    main()
