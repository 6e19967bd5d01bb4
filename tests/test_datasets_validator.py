from pathlib import Path

import pytest
from wordscramble.datasets import (
    validate_wordlists, pretty_summary, load_start_words, clean_words, write_lines,
)
from wordscramble.datasets.io import DEFAULT_DICTIONARY_PATH, DEFAULT_START_PATH


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    start = tmp_path / "start.txt"
    dictionary = tmp_path / "dictionary.txt"
    _write(start, ["garden", "", "silkworm"])   # blank lines are tolerated
    _write(dictionary, ["garden", "grade", "silkworm", "silk", "worm"])

    rep = validate_wordlists(str(start), str(dictionary))
    assert rep["passed"] is True
    assert rep["start_subset_dictionary"] is True
    assert rep["start"]["blank_lines"] == 1
    assert rep["start"]["count"] == 2
    s = pretty_summary(rep)
    assert "min_len=3" in s and "start⊆dictionary=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    start = tmp_path / "start.txt"
    dictionary = tmp_path / "dictionary.txt"
    # 'ox' too short, 'Garden' not lowercase, '???' invalid chars
    start.write_text("garden\nox\nGarden\n???\n", encoding="utf-8")
    dictionary.write_text("garden\ngarden\nox\n", encoding="utf-8")

    rep = validate_wordlists(str(start), str(dictionary))
    assert rep["passed"] is False
    assert rep["start"]["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    start = tmp_path / "start.txt"
    dictionary = tmp_path / "dictionary.txt"
    _write(start, ["garden", "silkworm"])
    _write(dictionary, ["garden", "grade"])  # missing 'silkworm'

    rep = validate_wordlists(str(start), str(dictionary))
    assert rep["passed"] is False
    assert rep["start_subset_dictionary"] is False
    assert any("subset" in msg and "silkworm" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_file(tmp_path: Path):
    dictionary = tmp_path / "dictionary.txt"
    _write(dictionary, ["garden"])
    rep = validate_wordlists(str(tmp_path / "nope.txt"), str(dictionary))
    assert rep["passed"] is False
    assert rep["start"]["exists"] is False
    assert any("not found" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)


def test_bundled_wordlists_pass():
    rep = validate_wordlists(str(DEFAULT_START_PATH), str(DEFAULT_DICTIONARY_PATH))
    assert rep["passed"] is True, rep["issues"]


def test_load_start_words_strips_and_skips_blanks(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("  Garden\n\n   \nsilkworm\r\n", encoding="utf-8")
    assert load_start_words(p) == ["garden", "silkworm"]


def test_load_start_words_missing_file_degrades(tmp_path: Path, caplog):
    assert load_start_words(tmp_path / "nope.txt") == []
    assert "unavailable" in caplog.text


@pytest.mark.parametrize("lines,kwargs,expected", [
    (["Garden", " garden ", "", "   ", "silkworm"], {}, ["garden", "silkworm"]),
    (["ox", "box", "o'clock", "café", "x-ray", "b0x"], {}, ["box"]),
    (["ox", "box"], {"min_len": 2}, ["ox", "box"]),
    (["grade", "garden", "silkworm"], {"max_len": 6}, ["grade", "garden"]),
    (["danger", "grade", "Danger", "grade"], {}, ["danger", "grade"]),  # first occurrence wins
])
def test_clean_words(lines, kwargs, expected):
    assert clean_words(lines, **kwargs) == expected


def test_clean_words_output_passes_validation(tmp_path: Path):
    start = tmp_path / "start.txt"
    dictionary = tmp_path / "dictionary.txt"
    raw = ["Garden", "", "garden", "ox", "???", " silkworm "]
    _write(start, raw)
    _write(dictionary, ["garden", "silkworm", "grade"])
    assert validate_wordlists(str(start), str(dictionary))["passed"] is False

    write_lines(clean_words(raw), start)
    rep = validate_wordlists(str(start), str(dictionary))
    assert rep["passed"] is True, rep["issues"]
    assert rep["start"]["count"] == 2
