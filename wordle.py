#!/usr/bin/env python3
"""Play Wordle in the terminal.

Usage:
    wordle                          # 5 letters, 6 attempts, system word list
    wordle -len 7 -max 4            # 7 letters, 4 attempts
    wordle -len 4 words.txt         # 4-letter words from words.txt

Exit status:
    0  the word was guessed
    1  malformed arguments
    2  dictionary cannot be opened, or has no word of the requested length
    3  out of attempts, or input ended early
"""

from __future__ import annotations

import logging
import os
import random
import sys
from typing import Sequence, TextIO

from arguments import Configuration, parse_arguments
from errors import GuessError, NoWordOfLengthError, WordleError
from lexicon import load_lexicon, select_word
from wordle_env import WordleEnv

logger = logging.getLogger(__name__)

EXIT_WON = 0
EXIT_LOST = 3


def _prompt(word_length: int, remaining: int) -> str:
    if remaining == 1:
        return f"Enter a {word_length} letter word (last attempt):"
    return f"Enter a {word_length} letter word ({remaining} attempts remaining):"


def play(
    config: Configuration,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    rng: random.Random | None = None,
) -> int:
    """Run one game and return its exit status.

    A dictionary with no word of the requested length ends the game with
    status 2 after the welcome banner.

    Raises
    ------
    DictionaryOpenError
        If the dictionary cannot be opened.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    print("Welcome to Wordle!", file=stdout)
    try:
        answer = select_word(config.dictionary_path, config.word_length, rng=rng)
    except NoWordOfLengthError as exc:
        print(exc, file=stdout)
        return exc.exit_code
    lexicon = load_lexicon(config.dictionary_path, config.word_length)
    env = WordleEnv(lexicon, answer, max_attempts=config.max_attempts)

    while not env.game_over():
        print(_prompt(config.word_length, env.remaining_attempts()), file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            print(f'Bad luck - the word is "{answer}".', file=stderr)
            logger.debug("input ended after %d attempts", env.attempts_used)
            return EXIT_LOST

        try:
            hint = env.guess(line.rstrip("\r\n"))
        except GuessError as exc:
            print(exc, file=stdout)
            continue

        if hint is None:
            print("Correct!", file=stdout)
            return EXIT_WON
        print(hint, file=stdout)

    print(f"Bad luck - the word is {answer}", file=stderr)
    return EXIT_LOST


def _log_level() -> int:
    name = os.environ.get("WORDLE_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(
        level=_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = parse_arguments(argv)
        return play(config)
    except WordleError as exc:
        logger.debug("%s: %s", type(exc).__name__, getattr(exc, "reason", "") or exc)
        print(exc, file=sys.stderr)
        return exc.exit_code


if __name__ == "__main__":
    sys.exit(main())
