"""Wordle environment: guess validation, hints and per-game state."""

from __future__ import annotations

import logging
import string
from collections import Counter

from errors import GuessError, InputLengthError, InputSymbolError, NotInDictionaryError
from lexicon import Lexicon

logger = logging.getLogger(__name__)

_LETTERS = frozenset(string.ascii_letters)

# Feedback encoding:
# 2 = exact     (correct letter, correct position)   -> uppercase letter
# 1 = misplaced (correct letter, wrong position)     -> lowercase letter
# 0 = absent    (letter not present, or already credited elsewhere) -> '-'
EXACT = 2
MISPLACED = 1
ABSENT = 0

UNKNOWN = "-"


# ------------------------------------------------------------------
# Guess validation
# ------------------------------------------------------------------

def check_length(guess: str, word_length: int) -> bool:
    """True if *guess* has exactly *word_length* characters."""
    return len(guess) == word_length


def is_valid_syntax(guess: str, word_length: int) -> bool:
    """True if *guess* has the right length and contains only ASCII letters."""
    return check_length(guess, word_length) and all(ch in _LETTERS for ch in guess)


def is_correct(guess: str, answer: str) -> bool:
    """Case-insensitive, position-by-position comparison with *answer*."""
    return len(guess) == len(answer) and guess.lower() == answer.lower()


# ------------------------------------------------------------------
# Hints
# ------------------------------------------------------------------

def feedback(answer: str, guess: str) -> tuple[int, ...]:
    """Return the feedback tuple for *guess* against *answer*.

    Every unmatched answer letter is credited to at most one guess position,
    leftmost first, so repeated letters are never double counted.
    """
    n = len(answer)
    if len(guess) != n:
        raise ValueError(
            f"guess length ({len(guess)}) != answer length ({n})"
        )

    answer = answer.lower()
    guess = guess.lower()

    pat = [ABSENT] * n
    remaining: Counter[str] = Counter()

    # Pass 1 – exact matches
    for i, (a, g) in enumerate(zip(answer, guess)):
        if g == a:
            pat[i] = EXACT
        else:
            remaining[a] += 1

    # Pass 2 – misplaced letters, among unmatched positions only
    for i, g in enumerate(guess):
        if pat[i] == EXACT:
            continue
        if remaining[g] > 0:
            pat[i] = MISPLACED
            remaining[g] -= 1

    return tuple(pat)


def render_hint(guess: str, pattern: tuple[int, ...]) -> str:
    """Render a feedback *pattern* for *guess* as a hint string."""
    guess = guess.lower()
    out = []
    for g, p in zip(guess, pattern):
        if p == EXACT:
            out.append(g.upper())
        elif p == MISPLACED:
            out.append(g)
        else:
            out.append(UNKNOWN)
    return "".join(out)


def compute_hint(guess: str, answer: str) -> str:
    """Hint string for *guess*, e.g. ``bOo-T`` for ``boost`` against ``robot``."""
    return render_hint(guess, feedback(answer, guess))


# ------------------------------------------------------------------
# Game state
# ------------------------------------------------------------------

class WordleEnv:
    """A single game against a fixed answer.

    Parameters
    ----------
    lexicon : Lexicon
        Words accepted as guesses.
    answer : str
        The word to be guessed (case as stored in the dictionary).
    max_attempts : int
        Guesses allowed before the game is lost.
    """

    def __init__(self, lexicon: Lexicon, answer: str, max_attempts: int = 6) -> None:
        if len(answer) != lexicon.word_length:
            raise ValueError(
                f"answer length ({len(answer)}) != word_length ({lexicon.word_length})"
            )
        self._lexicon = lexicon
        self._answer = answer
        self._word_length = lexicon.word_length
        self._max_attempts = max_attempts
        self._remaining = max_attempts
        self._solved = False
        self._history: list[tuple[str, str | None]] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def guess(self, word: str) -> str | None:
        """Submit a guess.

        Returns the hint string, or None when *word* is the answer.

        Raises
        ------
        RuntimeError
            If the game is already over.
        InputLengthError, InputSymbolError
            If *word* is malformed.  No attempt is used.
        NotInDictionaryError
            If *word* is not in the lexicon.  The attempt is still used.
        """
        if self.game_over():
            raise RuntimeError("Game is already over")
        try:
            self._validate(word)
        except GuessError as exc:
            if exc.consumes_attempt:
                self._remaining -= 1
            logger.debug("%r rejected (%s), %d attempts left",
                         word, type(exc).__name__, self._remaining)
            raise

        if is_correct(word, self._answer):
            self._solved = True
            self._history.append((word, None))
            logger.debug("solved after %d attempts", self.attempts_used)
            return None

        self._remaining -= 1
        hint = compute_hint(word, self._answer)
        self._history.append((word, hint))
        logger.debug("guess %r -> %s, %d attempts left", word, hint, self._remaining)
        return hint

    def _validate(self, word: str) -> None:
        if not check_length(word, self._word_length):
            raise InputLengthError(self._word_length)
        if not is_valid_syntax(word, self._word_length):
            raise InputSymbolError()
        if not self._lexicon.contains(word):
            raise NotInDictionaryError(word)

    def is_solved(self) -> bool:
        return self._solved

    def remaining_attempts(self) -> int:
        return self._remaining

    def game_over(self) -> bool:
        return self._solved or self._remaining <= 0

    @property
    def attempts_used(self) -> int:
        return self._max_attempts - self._remaining + (1 if self._solved else 0)

    @property
    def history(self) -> list[tuple[str, str | None]]:
        return list(self._history)

    @property
    def answer(self) -> str:
        """Reveal the answer (only after game over)."""
        if not self.game_over():
            raise RuntimeError("Game is still in progress")
        return self._answer

