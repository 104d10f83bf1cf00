"""Exception types raised by the game and mapped to exit codes by ``wordle.main``."""

from __future__ import annotations


USAGE = "Usage: wordle [-len word-length] [-max max-guesses] [dictionary]"


class WordleError(Exception):
    """Base class for every error the game raises."""

    exit_code: int = 1


# ------------------------------------------------------------------
# Fatal: raised before any round is played
# ------------------------------------------------------------------

class UsageError(WordleError):
    """Malformed command line."""

    exit_code = 1

    def __init__(self, reason: str = "") -> None:
        super().__init__(USAGE)
        self.reason = reason


class DictionaryOpenError(WordleError, OSError):
    """The dictionary file could not be opened for reading."""

    exit_code = 2

    def __init__(self, path: str) -> None:
        super().__init__(f'wordle: dictionary file "{path}" cannot be opened')
        self.path = path


class NoWordOfLengthError(WordleError, ValueError):
    """The dictionary opened fine but holds no word of the requested length."""

    exit_code = 2

    def __init__(self, path: str, word_length: int) -> None:
        super().__init__(
            "The dictionary provided does not contain a number of "
            "the requested size"
        )
        self.path = path
        self.word_length = word_length


# ------------------------------------------------------------------
# Recoverable: raised for a single guess, the player is re-prompted
# ------------------------------------------------------------------

class GuessError(WordleError, ValueError):
    """A guess was rejected. ``str(exc)`` is the message shown to the player."""

    #: Whether the rejected guess still uses up one attempt.
    consumes_attempt: bool = False


class InputLengthError(GuessError):
    def __init__(self, word_length: int) -> None:
        super().__init__(f"Words must be {word_length} letters long - try again.")


class InputSymbolError(GuessError):
    def __init__(self) -> None:
        super().__init__("Words must contain only letters - try again.")


class NotInDictionaryError(GuessError):
    consumes_attempt = True

    def __init__(self, word: str) -> None:
        super().__init__("Word not found in the dictionary - try again.")
        self.word = word
