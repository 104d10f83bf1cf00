"""Command-line validation: turn raw arguments into a game ``Configuration``.

Accepted forms::

    wordle
    wordle dictionary
    wordle [-len N] [-max N] [dictionary]

``N`` is a single digit from 3 to 9 and each flag may be given once.  The
dictionary, when present, is the final argument and must open for reading.
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Sequence

from errors import DictionaryOpenError, UsageError

logger = logging.getLogger(__name__)

DEFAULT_WORD_LENGTH = 5
DEFAULT_MAX_ATTEMPTS = 6
DEFAULT_DICTIONARY = "/usr/share/dict/words"
MIN_VALUE = 3
MAX_VALUE = 9
MAX_ARGUMENTS = 5

_FLAGS = ("-len", "-max")


@dataclass(frozen=True)
class Configuration:
    """Settings for one game.

    Attributes
    ----------
    word_length : int
        Number of letters in the answer (3-9).
    max_attempts : int
        Guesses allowed before the game is lost (3-9).
    dictionary_path : str
        Newline-delimited word list the answer is drawn from.
    """

    word_length: int = DEFAULT_WORD_LENGTH
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    dictionary_path: str = DEFAULT_DICTIONARY


# ------------------------------------------------------------------
# argparse plumbing
# ------------------------------------------------------------------

class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting."""

    def error(self, message: str):
        raise UsageError(message)


class _StoreOnce(argparse.Action):
    """Store a flag value, rejecting a second occurrence of the flag."""

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest) is not None:
            raise argparse.ArgumentError(self, "may only be given once")
        setattr(namespace, self.dest, values)


def _single_digit(text: str) -> int:
    if len(text) != 1 or not text.isdigit():
        raise argparse.ArgumentTypeError(f"expected a single digit, got {text!r}")
    value = int(text)
    if not MIN_VALUE <= value <= MAX_VALUE:
        raise argparse.ArgumentTypeError(
            f"value must be between {MIN_VALUE} and {MAX_VALUE}, got {value}"
        )
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="wordle", add_help=False, allow_abbrev=False)
    parser.add_argument("-len", dest="word_length", type=_single_digit,
                        action=_StoreOnce, default=None)
    parser.add_argument("-max", dest="max_attempts", type=_single_digit,
                        action=_StoreOnce, default=None)
    parser.add_argument("dictionary", nargs="?", default=None)
    return parser


# ------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------

def check_dictionary(path: str) -> None:
    """Raise ``DictionaryOpenError`` unless *path* can be opened for reading."""
    try:
        with open(path, "r", encoding="utf-8", errors="replace"):
            pass
    except OSError as exc:
        logger.debug("cannot open dictionary %s: %s", path, exc)
        raise DictionaryOpenError(path) from exc


def parse_arguments(
    argv: Sequence[str],
    default_dictionary: str | None = None,
) -> Configuration:
    """Validate *argv* (program name excluded) and build a ``Configuration``.

    Raises
    ------
    UsageError
        If the command line is malformed.
    DictionaryOpenError
        If the dictionary, given or default, cannot be opened.
    """
    args = list(argv)
    if len(args) > MAX_ARGUMENTS:
        raise UsageError(f"too many arguments ({len(args)})")
    if any(not arg.strip() for arg in args):
        raise UsageError("blank argument")
    # A lone argument can only be a dictionary.
    if len(args) == 1 and args[0].startswith("-"):
        raise UsageError(f"expected a dictionary path, got {args[0]!r}")
    last = len(args) - 1
    dash_dictionary = False
    for i, arg in enumerate(args):
        follows_flag = i > 0 and args[i - 1] in _FLAGS
        if arg.startswith("-") and arg not in _FLAGS and not follows_flag:
            # Only the final argument may start with a dash; it names the dictionary.
            if i != last:
                raise UsageError(f"unrecognised option {arg!r}")
            dash_dictionary = True

    if dash_dictionary:
        ns = build_parser().parse_args(args[:-1] + ["--", args[-1]])
    else:
        ns = build_parser().parse_args(args)

    if ns.dictionary is not None:
        if args[-1] != ns.dictionary:
            raise UsageError("the dictionary must be the final argument")
        if len(args) > 1 and len(ns.dictionary) == 1:
            raise UsageError(f"unexpected argument {ns.dictionary!r}")
        dictionary = ns.dictionary
    else:
        dictionary = (
            default_dictionary
            or os.environ.get("WORDLE_DICTIONARY")
            or DEFAULT_DICTIONARY
        )
    check_dictionary(dictionary)

    config = Configuration(
        word_length=ns.word_length if ns.word_length is not None else DEFAULT_WORD_LENGTH,
        max_attempts=ns.max_attempts if ns.max_attempts is not None else DEFAULT_MAX_ATTEMPTS,
        dictionary_path=dictionary,
    )
    logger.debug("configuration: %s", config)
    return config
