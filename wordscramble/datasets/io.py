from __future__ import annotations
import logging
import re
from pathlib import Path
from typing import Iterable, List

from wordscramble.engine.rules import MIN_WORD_LENGTH
from wordscramble.engine.validation import normalize

log = logging.getLogger(__name__)

# Bundled word lists (start words + dictionary) live next to this module.
DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_START_PATH = DATA_DIR / "start.txt"
DEFAULT_DICTIONARY_PATH = DATA_DIR / "dictionary.txt"

# Word lists hold plain lowercase a–z words only.
WORD_RE = re.compile(r"^[a-z]+$")


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_start_words(p: Path | str = DEFAULT_START_PATH) -> List[str]:
    """
    Load candidate root words: stripped, lowercased, blank lines dropped.

    Never raises. A missing or unreadable file yields [] so the game can
    fall back to its default root word.
    """
    try:
        lines = read_lines(p)
    except (OSError, UnicodeDecodeError) as e:
        log.warning("start word list unavailable (%s): %s", p, e)
        return []
    return [ln.strip().lower() for ln in lines if ln.strip()]


def clean_words(lines: Iterable[str], *, min_len: int = MIN_WORD_LENGTH,
                max_len: int | None = None) -> List[str]:
    """
    Turn raw lines into a word list validate_wordlists would accept.

    Each line is normalized (trimmed, lowercased); blanks, anything that is
    not plain a–z, and words outside [min_len, max_len] are dropped. Duplicates
    are removed keeping the first occurrence, so source order survives.
    """
    seen = set()
    out: List[str] = []
    for ln in lines:
        w = normalize(ln)
        if not WORD_RE.match(w) or len(w) < min_len:
            continue
        if max_len is not None and len(w) > max_len:
            continue
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out
