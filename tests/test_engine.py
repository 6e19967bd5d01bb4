import pytest
from wordscramble.dictionary import WordSetSpellChecker
from wordscramble.engine import (
    Rejection, error_text, normalize, is_original, is_possible, is_real,
)

CHECKER = WordSetSpellChecker(["silk", "milk", "worm", "grade", "cat", "ox", "garden"])


@pytest.mark.parametrize("raw,expected", [
    ("Cat", "cat"),
    ("  grade \n", "grade"),
    ("SILK", "silk"),
    ("   ", ""),
])
def test_normalize(raw, expected):
    assert normalize(raw) == expected


def test_is_original():
    used = ["grade", "cat"]
    assert is_original("garden", used) is True
    assert is_original("cat", used) is False
    assert is_original("cat", []) is True


# --- composability golden tests (letter multiplicity) ---
@pytest.mark.parametrize("word,root,expected", [
    ("silk", "silkworm", True),
    ("silkk", "silkworm", False),    # only one 'k'
    ("worms", "silkworm", True),
    ("silkworm", "silkworm", True),  # the root word itself is composable
    ("silkworms", "silkworm", False),
    ("grade", "garden", True),
    ("ragged", "garden", False),     # needs two 'g's
    ("zoo", "garden", False),
])
def test_is_possible(word, root, expected):
    assert is_possible(word, root) is expected


def test_is_possible_does_not_mutate_root():
    root = "garden"
    is_possible("grade", root)
    assert root == "garden"


def test_is_real_min_length_and_dictionary():
    assert is_real("cat", CHECKER) is True
    assert is_real("ox", CHECKER) is False          # known word, but too short
    assert is_real("ox", CHECKER, min_length=2) is True
    assert is_real("gard", CHECKER) is False        # unknown word
    assert is_real("cat", CHECKER, language="fr") is False


def test_is_real_skips_lookup_for_short_words():
    class Recorder:
        def __init__(self):
            self.calls = []

        def is_correctly_spelled(self, word, language):
            self.calls.append((word, language))
            return True

    rec = Recorder()
    assert is_real("ox", rec) is False
    assert rec.calls == []
    assert is_real("oxen", rec) is True
    assert rec.calls == [("oxen", "en")]


@pytest.mark.parametrize("reason,title,message", [
    (Rejection.ALREADY_USED, "Word already in use", "Be more original"),
    (Rejection.NOT_COMPOSABLE, "Word not in dictionary",
     "Try again with a different word from garden"),
    (Rejection.NOT_REAL, "Word is not real", "Try again with a different word"),
])
def test_error_text(reason, title, message):
    assert error_text(reason, "garden") == (title, message)
