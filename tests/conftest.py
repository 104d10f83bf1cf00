"""
Shared fixtures for the Wordle tests.

Dictionaries are written to ``tmp_path`` so no test depends on the system
word list.
"""

import pytest


WORDS = [
    "apple",
    "robot",
    "boost",
    "Paris",
    "crane",
    "sassy",
    "cat",
    "house",
    "letters",
    "it's",
]


@pytest.fixture
def make_dictionary(tmp_path):
    """Return a factory that writes a dictionary file and returns its path."""

    def _make(words=WORDS, name="words.txt", newline="\n", trailing=True):
        path = tmp_path / name
        text = newline.join(words)
        if trailing and words:
            text += newline
        path.write_bytes(text.encode("utf-8"))
        return str(path)

    return _make


@pytest.fixture
def dictionary(make_dictionary):
    return make_dictionary()


@pytest.fixture(autouse=True)
def _no_dictionary_override(monkeypatch):
    monkeypatch.delenv("WORDLE_DICTIONARY", raising=False)
    monkeypatch.delenv("WORDLE_LOG_LEVEL", raising=False)
