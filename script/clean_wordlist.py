"""
Repair a local word list so validate_wordlists passes on it.

Fixes what the validator reports: mixed case, stray whitespace, blank lines,
non a–z entries, words shorter than the minimum length, duplicates. Source
order is kept unless --sort is given. Prints the report before and after
when a dictionary is supplied.

Usage:
    python -m script.clean_wordlist --in wordscramble/datasets/data/start.txt \
        --dictionary wordscramble/datasets/data/dictionary.txt
"""

import argparse
from pathlib import Path

from wordscramble.datasets import validate_wordlists, pretty_summary
from wordscramble.datasets.io import clean_words, read_lines, write_lines
from wordscramble.engine.rules import MIN_WORD_LENGTH


def main():
    ap = argparse.ArgumentParser(description="Normalize and de-duplicate a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--dictionary", help="dictionary to validate the cleaned list against")
    ap.add_argument("--min-len", type=int, default=MIN_WORD_LENGTH)
    ap.add_argument("--max-len", type=int)
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after cleaning")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)  # FileNotFoundError if missing
    if args.dictionary:
        print("before:", pretty_summary(validate_wordlists(str(inp), args.dictionary,
                                                           min_length=args.min_len)))

    words = clean_words(lines, min_len=args.min_len, max_len=args.max_len)
    if args.sort:
        words = sorted(words)

    write_lines(words, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(words)} words)")

    if args.dictionary:
        rep = validate_wordlists(str(outp), args.dictionary, min_length=args.min_len)
        print("after: ", pretty_summary(rep))
        for issue in rep["issues"]:
            print(f"  - {issue}")

if __name__ == "__main__":
    main()
