"""
Download a plain-text word list and write a clean one for wordscramble.

What it does:
- Downloads a newline-separated word list over HTTP.
- Keeps only a–z tokens within the requested length bounds.
- Lowercases, de-duplicates while preserving source order, and writes to file.

Typical uses:
    # dictionary of every word the game should accept as real
    python -m script.fetch_wordlist --url <list-url> --min-len 3 \
        --out wordscramble/datasets/data/dictionary.txt --sort
    # root word candidates: exactly eight letters
    python -m script.fetch_wordlist --url <list-url> --min-len 8 --max-len 8 \
        --out wordscramble/datasets/data/start.txt
"""

import argparse

import requests

from wordscramble.datasets.io import clean_words, write_lines
from wordscramble.engine.rules import MIN_WORD_LENGTH

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return r.text.splitlines()


def main():
    ap = argparse.ArgumentParser(description="Fetch and clean a word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", required=True)
    ap.add_argument("--min-len", type=int, default=MIN_WORD_LENGTH)
    ap.add_argument("--max-len", type=int)
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = clean_words(fetch_words(args.url), min_len=args.min_len, max_len=args.max_len)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")

if __name__ == "__main__":
    main()
