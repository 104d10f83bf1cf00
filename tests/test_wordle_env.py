"""
Tests for wordle_env module (guess validation, hints and game state).
"""

import pytest

from errors import InputLengthError, InputSymbolError, NotInDictionaryError
from lexicon import Lexicon
from wordle_env import (
    ABSENT,
    EXACT,
    MISPLACED,
    WordleEnv,
    check_length,
    compute_hint,
    feedback,
    is_correct,
    is_valid_syntax,
)


FIVE = ["apple", "robot", "boost", "Paris", "crane", "sassy", "house", "speed", "erase"]


@pytest.fixture
def lexicon():
    return Lexicon(words=FIVE, word_length=5)


# ------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------

def test_check_length():
    assert check_length("apple", 5)
    assert not check_length("app", 5)
    assert not check_length("apples", 5)
    assert not check_length("", 5)


@pytest.mark.parametrize("guess", ["apple", "APPLE", "aPpLe"])
def test_valid_syntax(guess):
    assert is_valid_syntax(guess, 5)


@pytest.mark.parametrize("guess", ["appl3", "ap le", "it's!", "a.ple", "ápple", "12345"])
def test_invalid_syntax(guess):
    assert not is_valid_syntax(guess, 5)


def test_syntax_requires_length():
    assert not is_valid_syntax("apples", 5)


def test_is_correct_ignores_case():
    assert is_correct("ROBOT", "robot")
    assert is_correct("paris", "Paris")
    assert not is_correct("robots", "robot")
    assert not is_correct("roboy", "robot")


# ------------------------------------------------------------------
# Hints
# ------------------------------------------------------------------

def test_hint_robot_boost():
    assert compute_hint("boost", "robot") == "bOo-T"
    assert feedback("robot", "boost") == (MISPLACED, EXACT, MISPLACED, ABSENT, EXACT)


def test_hint_apple_all_a():
    # Only one 'a' in the answer and it is matched exactly.
    assert compute_hint("aaaaa", "apple") == "A----"


def test_hint_extra_guess_duplicates_credited_once():
    # One 'e' left unmatched in the answer, so only the first 'e' is credited.
    assert compute_hint("eeeee", "crane") == "----E"
    assert compute_hint("speed", "erase") == "s-ee-"


def test_hint_more_answer_duplicates_than_guess():
    # 'sassy' has three 's'; the guess has one unmatched 's'.
    assert compute_hint("oscar", "sassy") == "-s-a-"


def test_hint_all_absent():
    assert compute_hint("crane", "boost") == "-----"


def test_hint_all_misplaced():
    assert compute_hint("eabcd", "abcde") == "eabcd"


def test_hint_is_case_insensitive():
    assert compute_hint("BOOST", "ROBOT") == "bOo-T"
    assert compute_hint("paris", "PARIS") == "PARIS"


def test_hint_is_deterministic():
    first = compute_hint("speed", "erase")

    assert all(compute_hint("speed", "erase") == first for _ in range(10))


def test_feedback_length_mismatch():
    with pytest.raises(ValueError):
        feedback("robot", "robots")


# ------------------------------------------------------------------
# Game state
# ------------------------------------------------------------------

def test_env_initial_state(lexicon):
    env = WordleEnv(lexicon, "robot", max_attempts=4)

    assert env.remaining_attempts() == 4
    assert not env.is_solved()
    assert not env.game_over()
    assert env.history == []


def test_env_answer_length_mismatch(lexicon):
    with pytest.raises(ValueError):
        WordleEnv(lexicon, "cat")


def test_env_hint_uses_attempt(lexicon):
    env = WordleEnv(lexicon, "robot", max_attempts=4)

    assert env.guess("boost") == "bOo-T"
    assert env.remaining_attempts() == 3
    assert env.history == [("boost", "bOo-T")]


def test_env_correct_guess(lexicon):
    env = WordleEnv(lexicon, "Paris", max_attempts=3)

    assert env.guess("PARIS") is None
    assert env.is_solved()
    assert env.game_over()
    assert env.attempts_used == 1
    assert env.answer == "Paris"


def test_env_length_error_keeps_attempt(lexicon):
    env = WordleEnv(lexicon, "robot", max_attempts=3)

    with pytest.raises(InputLengthError) as excinfo:
        env.guess("robo")

    assert str(excinfo.value) == "Words must be 5 letters long - try again."
    assert env.remaining_attempts() == 3


def test_env_symbol_error_keeps_attempt(lexicon):
    env = WordleEnv(lexicon, "robot", max_attempts=3)

    with pytest.raises(InputSymbolError) as excinfo:
        env.guess("rob0t")

    assert str(excinfo.value) == "Words must contain only letters - try again."
    assert env.remaining_attempts() == 3


def test_env_not_in_dictionary_uses_attempt(lexicon):
    env = WordleEnv(lexicon, "robot", max_attempts=3)

    with pytest.raises(NotInDictionaryError) as excinfo:
        env.guess("zzzzz")

    assert str(excinfo.value) == "Word not found in the dictionary - try again."
    assert excinfo.value.consumes_attempt
    assert env.remaining_attempts() == 2
    assert env.history == []


def test_env_runs_out(lexicon):
    env = WordleEnv(lexicon, "robot", max_attempts=3)
    env.guess("apple")
    with pytest.raises(NotInDictionaryError):
        env.guess("qqqqq")
    env.guess("crane")

    assert env.game_over()
    assert not env.is_solved()
    assert env.answer == "robot"
    with pytest.raises(RuntimeError):
        env.guess("robot")


def test_env_answer_hidden_while_playing(lexicon):
    env = WordleEnv(lexicon, "robot")

    with pytest.raises(RuntimeError):
        env.answer


def test_env_attempt_use_follows_error_type(lexicon, monkeypatch):
    monkeypatch.setattr(NotInDictionaryError, "consumes_attempt", False)
    monkeypatch.setattr(InputSymbolError, "consumes_attempt", True)
    env = WordleEnv(lexicon, "robot", max_attempts=3)

    with pytest.raises(NotInDictionaryError):
        env.guess("zzzzz")
    assert env.remaining_attempts() == 3

    with pytest.raises(InputSymbolError):
        env.guess("rob0t")
    assert env.remaining_attempts() == 2
