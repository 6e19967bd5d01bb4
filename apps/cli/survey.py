# apps/cli/survey.py
"""
CLI entry point for surveying start words.

This script:
  1) Validates the word lists (prints counts + SHA, ensures start ⊆ dictionary).
  2) For every start word, finds all words a fresh round would accept.
  3) Runs with a live progress indicator and writes:
       - CSV:  one row per root word (count, longest, all playable words)
       - JSON: manifest with config, wordlist hashes, summary stats, git commit
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordscramble.datasets import validate_wordlists, pretty_summary
from wordscramble.datasets.io import (
    DEFAULT_DICTIONARY_PATH, DEFAULT_START_PATH, load_start_words, read_lines,
)
from wordscramble.dictionary import WordSetSpellChecker
from wordscramble.engine import GameRules
from wordscramble.engine.rules import MIN_WORD_LENGTH
from wordscramble.harness import run_batch, summarize
from wordscramble.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def main():
    """
    Parse CLI args, validate datasets, survey the start words with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordscramble — survey playable words per root word")
    ap.add_argument("--start", default=str(DEFAULT_START_PATH),
                    help="path to root word candidates")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY_PATH),
                    help="path to the dictionary (also the vocabulary searched)")
    ap.add_argument("--min-length", type=int, default=MIN_WORD_LENGTH,
                    help="shortest word that counts as real")
    ap.add_argument("--sample", type=int,
                    help="survey only a subset of start words (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for sampling")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate wordlists and print a one-liner summary (counts, SHAs, subset check)
    rep = validate_wordlists(args.start, args.dictionary, min_length=args.min_length)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")

    if not Path(args.dictionary).exists():
        print("Nothing to survey without a dictionary.", file=sys.stderr)
        sys.exit(2)

    # 2) Load lists into memory; the dictionary doubles as the vocabulary searched
    start_words = load_start_words(args.start)
    vocabulary = [w.strip().lower() for w in read_lines(args.dictionary) if w.strip()]
    checker = WordSetSpellChecker(vocabulary)
    rules = GameRules(min_word_length=args.min_length)

    # 3) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(start_words):
        pool = list(start_words)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(start_words)

    total = len(cases)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    start = time.time()
    last_print = 0.0

    def _plain_progress(idx: int, _result: dict) -> None:
        nonlocal last_print
        now = time.time()
        if (now - last_print >= 1.0) or (idx == total):
            elapsed = now - start
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
            sys.stderr.flush()
            last_print = now

    iterator = tqdm(cases, ncols=80, desc="Surveying", unit="word") if mode == "bar" else cases
    results = run_batch(iterator, vocabulary, checker, rules=rules,
                        on_case=_plain_progress if mode == "plain" else None)

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 5) Write outputs (CSV + manifest)
    stats = summarize(results)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"survey_{run_id}.csv"
    manifest_path = outdir / f"survey_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "summary": stats,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Surveyed {stats['count']} root word(s): mean={stats['mean']} "
          f"median={stats['median']} min={stats['min']} ({stats['thinnest']}) max={stats['max']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
