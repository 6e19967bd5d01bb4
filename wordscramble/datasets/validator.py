"""
Dataset validator for wordscramble.

What this module does:
- Validate a pair of word lists: start.txt (root word candidates) and dictionary.txt
  (every word the game accepts as real).
- Enforce formatting rules (lowercase, a–z only, one per line).
- Start words must also be at least `min_length` long and appear in the dictionary.
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Blank lines are tolerated in the start list (the game skips them) but are
counted, so a noisy file still shows up in the report.

Typical use:
    from wordscramble.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("wordscramble/datasets/data/start.txt",
                             "wordscramble/datasets/data/dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordscramble.engine.rules import MIN_WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    blank_lines: int     # empty/whitespace-only lines (skipped, not invalid)


@dataclass
class ValidationReport:
    """Top-level validation result for the (start, dictionary) pair."""
    min_length: int
    start: FileReport
    dictionary: FileReport
    start_subset_dictionary: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int, int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have at least `min_length` letters
      - empty/whitespace-only lines are skipped and counted separately

    Returns:
      (valid_words, invalid_count, blank_count)
    """
    valid: List[str] = []
    invalid = 0
    blank = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                blank += 1
                continue
            # require already-lowercase & alphabetic & long enough
            if w == w.lower() and w.isascii() and w.isalpha() and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid, blank


def _as_dict(rep: ValidationReport) -> Dict:
    """Dataclass → plain dict (stable ordering)."""
    return asdict(rep)


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(start_path: str, dictionary_path: str, *,
                       min_length: int = MIN_WORD_LENGTH) -> Dict:
    """
    Validate the start/dictionary word lists.

    Parameters
    ----------
    start_path : str
        Path to the root word candidates (one word per line).
    dictionary_path : str
        Path to the dictionary (should be a superset of the start words).
    min_length : int
        Shortest word either list may contain.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid/blank diagnostics
          - start ⊆ dictionary check
          - `passed` boolean (strict: requires non-empty, no invalids, subset OK)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    start_p = Path(start_path)
    dict_p = Path(dictionary_path)

    start_exists = start_p.exists()
    dict_exists = dict_p.exists()

    # Early return if either file is missing
    if not start_exists or not dict_exists:
        if not start_exists:
            issues.append(f"start file not found: {start_path}")
        if not dict_exists:
            issues.append(f"dictionary file not found: {dictionary_path}")
        rep = ValidationReport(
            min_length=min_length,
            start=FileReport(start_path, start_exists, 0, "", 0, 0, 0),
            dictionary=FileReport(dictionary_path, dict_exists, 0, "", 0, 0, 0),
            start_subset_dictionary=False,
            passed=False,
            issues=issues,
        )
        return _as_dict(rep)

    # Load and validate content
    start, start_invalid, start_blank = _load_and_check(start_p, min_length)
    words, dict_invalid, dict_blank = _load_and_check(dict_p, min_length)

    start_set = set(start)
    dict_set = set(words)

    # Build file reports
    start_report = FileReport(
        path=str(start_p),
        exists=True,
        count=len(start),
        sha256=_sha256_file(start_p),
        unique_count=len(start_set),
        invalid_lines=start_invalid,
        blank_lines=start_blank,
    )
    dict_report = FileReport(
        path=str(dict_p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(dict_p),
        unique_count=len(dict_set),
        invalid_lines=dict_invalid,
        blank_lines=dict_blank,
    )

    # Logical checks & issue collection
    subset_ok = start_set.issubset(dict_set)
    if not subset_ok:
        # A few examples are enough to debug (limit to 5, sorted for stable output)
        missing = sorted(start_set - dict_set)[:5]
        issues.append(f"start words not subset of dictionary (e.g., {missing})")

    # Empty-file guardrails
    if start_report.count == 0:
        issues.append("start file contains 0 valid words")
    if dict_report.count == 0:
        issues.append("dictionary file contains 0 valid words")

    # Invalid-line diagnostics
    if start_invalid:
        issues.append(f"start has {start_invalid} invalid line(s)")
    if dict_invalid:
        issues.append(f"dictionary has {dict_invalid} invalid line(s)")

    # Duplicate diagnostics (count vs unique_count mismatch)
    if start_report.count != start_report.unique_count:
        issues.append("start contains duplicate lines")
    if dict_report.count != dict_report.unique_count:
        issues.append("dictionary contains duplicate lines")

    # Strict pass criteria: non-empty + no invalids + subset ok
    passed = (
            subset_ok
            and start_invalid == 0
            and dict_invalid == 0
            and start_report.count > 0
            and dict_report.count > 0
    )

    rep = ValidationReport(
        min_length=min_length,
        start=start_report,
        dictionary=dict_report,
        start_subset_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    return _as_dict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        min_len=3 | start=120 (uniq=120, sha=abc123...) | dictionary=900 (uniq=900, sha=def456...) | start⊆dictionary=True | OK
    """
    a = report["start"]
    b = report["dictionary"]
    subset = report["start_subset_dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"min_len={report['min_length']} | start={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| dictionary={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| start⊆dictionary={subset} | {status}"
    )
