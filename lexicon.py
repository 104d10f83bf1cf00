"""Dictionary loading and random answer selection.

The dictionary is a plain-text file with one word per line, in any case.
Only entries with exactly ``word_length`` characters are kept; their case is
preserved so the answer can be revealed verbatim, while membership tests
ignore case.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from errors import DictionaryOpenError, NoWordOfLengthError

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Lexicon dataclass
# ------------------------------------------------------------------

@dataclass
class Lexicon:
    """The words of one length from a dictionary file."""
    words: list[str]
    word_length: int
    _lowered: set[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._lowered = {w.lower() for w in self.words}

    def contains(self, word: str) -> bool:
        """Case-insensitive membership test."""
        return word.lower() in self._lowered

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------

def _iter_entries(path: str | Path, word_length: int) -> Iterator[str]:
    """Yield every line of *path* that is exactly *word_length* long.

    The line terminator (``\\n`` or ``\\r\\n``) is not counted and a final
    line without one is still considered.
    """
    try:
        f = Path(path).open("r", encoding="utf-8", errors="replace")
    except OSError as exc:
        raise DictionaryOpenError(str(path)) from exc
    with f:
        for raw in f:
            w = raw.rstrip("\r\n")
            if len(w) == word_length:
                yield w


def load_lexicon(path: str | Path, word_length: int) -> Lexicon:
    """Load the *word_length*-letter entries of the dictionary at *path*.

    An empty result is not an error here; callers decide what an empty
    dictionary means.

    Raises
    ------
    DictionaryOpenError
        If *path* cannot be opened.
    """
    words = list(_iter_entries(path, word_length))
    logger.debug("loaded %d %d-letter words from %s", len(words), word_length, path)
    return Lexicon(words=words, word_length=word_length)


# ------------------------------------------------------------------
# Answer selection
# ------------------------------------------------------------------

def select_word(
    path: str | Path,
    word_length: int,
    rng: random.Random | None = None,
) -> str:
    """Pick a uniformly random *word_length*-letter entry from *path*.

    The file is read in its own pass, independent of ``load_lexicon``.

    Parameters
    ----------
    path : str or Path
        Dictionary file.
    word_length : int
        Required length of the answer.
    rng : random.Random or None
        Source of randomness.  None uses a fresh generator seeded from the
        system clock.

    Raises
    ------
    DictionaryOpenError
        If *path* cannot be opened.
    NoWordOfLengthError
        If the file holds no entry of the requested length.
    """
    candidates = list(_iter_entries(path, word_length))
    if not candidates:
        raise NoWordOfLengthError(str(path), word_length)
    if rng is None:
        rng = random.Random()
    word = rng.choice(candidates)
    logger.debug("selected answer from %d candidates", len(candidates))
    return word
