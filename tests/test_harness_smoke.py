import json
from pathlib import Path

from wordscramble.dictionary import WordSetSpellChecker
from wordscramble.engine import GameRules, GameSession
from wordscramble.harness import playable_words, run_case, run_batch, summarize, write_csv, write_manifest

VOCAB = ["garden", "grade", "danger", "ragged", "red", "den", "ox", "dare", "read", "gander",
         "silk", "worm", "silkworm"]
CHECKER = WordSetSpellChecker([w for w in VOCAB if w != "gander"])


def test_playable_words_matches_session():
    words = playable_words("Garden", VOCAB, CHECKER)
    assert words == ["danger", "garden", "grade", "dare", "read", "den", "red"]

    # every surveyed word is accepted by a fresh session
    for w in words:
        s = GameSession(CHECKER)
        s.start_new_round(["garden"])
        assert s.submit_word(w).accepted


def test_playable_words_respects_rules():
    words = playable_words("boxer", ["ox", "box"], WordSetSpellChecker(["ox", "box"]),
                           rules=GameRules(min_word_length=2))
    assert words == ["box", "ox"]


def test_run_batch_and_summary(tmp_path: Path):
    results = run_batch(["garden", "", "silkworm"], VOCAB, CHECKER)
    assert [r["root_word"] for r in results] == ["garden", "silkworm"]
    assert results[0]["num_playable"] == 7
    assert results[1]["longest"] == "silkworm"

    stats = summarize(results)
    assert stats["count"] == 2
    assert stats["min"] == 3 and stats["max"] == 7
    assert stats["thinnest"] == "silkworm"

    csv_path = write_csv(results, str(tmp_path / "out" / "survey.csv"))
    rows = Path(csv_path).read_text(encoding="utf-8").splitlines()
    assert rows[0] == "root_word,num_playable,longest,time_ms,words"
    assert len(rows) == 3

    man = write_manifest({"summary": stats}, str(tmp_path / "m.json"))
    assert json.loads(Path(man).read_text(encoding="utf-8"))["summary"]["count"] == 2


def test_run_batch_sample_and_empty_summary():
    assert len(run_batch(["garden", "silkworm"], VOCAB, CHECKER, sample=1)) == 1
    assert summarize([])["count"] == 0


def test_run_case_shape():
    r = run_case("silkworm", VOCAB, CHECKER)
    assert set(r) == {"root_word", "num_playable", "longest", "words", "time_ms"}
    assert r["words"] == ["silkworm", "silk", "worm"]


def test_run_batch_consumes_lazily_and_reports_each_case():
    seen = []
    consumed = []

    def roots():
        for w in ["garden", "  ", "silkworm", "danger"]:
            consumed.append(w)
            yield w

    results = run_batch(roots(), VOCAB, CHECKER, sample=2,
                        on_case=lambda idx, r: seen.append((idx, r["root_word"])))
    assert seen == [(1, "garden"), (2, "silkworm")]
    assert [r["root_word"] for r in results] == ["garden", "silkworm"]
    # stops pulling root words once the sample is full
    assert "danger" not in consumed
