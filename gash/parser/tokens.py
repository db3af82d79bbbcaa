# Gash Terminal Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Low-level character-class recognizers used by every Gash parser and auto-completer.

Each recognizer looks at `text` starting at `index` and returns a `Token`:
whether it matched, the exclusive end index it reached and the recognized value.
A miss reports the index where scanning stopped, which parsers keep as a
diagnostic position.

Recognizers:
- skip_blanks: zero or more spaces/tabs (always succeeds).
- blank_run: one or more spaces/tabs.
- letters: one or more ASCII letters.
- words: one letter followed by any run of letters or blanks.
- number: an integer or decimal literal, optionally signed, optional exponent.
- command_word: optional blanks, then letters.
- text_parameter / single_word_parameter / number_parameter:
  a mandatory blank run, then words / letters / number.
- short_options: blanks, `-`, then a cluster of letters (`-abc`).
- long_option: blanks, `--`, a letter, then letters or dashes (`--bar-word`).
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

BLANKS = " \t"

_BLANKS_RE = re.compile(r"[ \t]*")
_LETTERS_RE = re.compile(r"[A-Za-z]+")
_WORDS_RE = re.compile(r"[A-Za-z][A-Za-z \t]*")
_NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
_LONG_OPTION_RE = re.compile(r"[A-Za-z][A-Za-z-]*")


@dataclass(frozen=True)
class Token:
    """Outcome of a recognizer."""

    matched: bool
    end: int
    value: Any = None

    @classmethod
    def hit(cls, end: int, value: Any) -> Token:
        return cls(True, end, value)

    @classmethod
    def miss(cls, end: int) -> Token:
        return cls(False, end)


def _regex(pattern: re.Pattern[str], text: str, index: int) -> Token:
    match = pattern.match(text, index)
    if match is None or match.end() == index:
        return Token.miss(index)
    return Token.hit(match.end(), match.group())


def skip_blanks(text: str, index: int) -> int:
    """Return the index of the first non-blank character at or after `index`."""
    match = _BLANKS_RE.match(text, index)
    return match.end() if match else index


def blank_run(text: str, index: int) -> Token:
    return _regex(_BLANKS_RE, text, index)


def letters(text: str, index: int) -> Token:
    return _regex(_LETTERS_RE, text, index)


def words(text: str, index: int) -> Token:
    return _regex(_WORDS_RE, text, index)


def number(text: str, index: int) -> Token:
    token = _regex(_NUMBER_RE, text, index)
    if not token.matched:
        return token
    return Token.hit(token.end, float(token.value))


def format_number(value: float) -> str:
    """Render a parsed number the way it is stored as a parameter.

    Integral values lose their fractional part (`0.0` -> `0`).
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


def command_word(text: str, index: int) -> Token:
    return letters(text, skip_blanks(text, index))


def _after_blanks(text: str, index: int) -> int | None:
    blanks = blank_run(text, index)
    return blanks.end if blanks.matched else None


def text_parameter(text: str, index: int) -> Token:
    start = _after_blanks(text, index)
    if start is None:
        return Token.miss(index)
    return words(text, start)


def single_word_parameter(text: str, index: int) -> Token:
    start = _after_blanks(text, index)
    if start is None:
        return Token.miss(index)
    return letters(text, start)


def number_parameter(text: str, index: int) -> Token:
    start = _after_blanks(text, index)
    if start is None:
        return Token.miss(index)
    return number(text, start)


def short_options(text: str, index: int) -> Token:
    """Recognize a short option cluster; the value is the list of its letters."""
    start = _after_blanks(text, index)
    if start is None or not text.startswith("-", start):
        return Token.miss(index)
    cluster = letters(text, start + 1)
    if not cluster.matched:
        return Token.miss(start + 1)
    return Token.hit(cluster.end, list(cluster.value))


def long_option(text: str, index: int) -> Token:
    start = _after_blanks(text, index)
    if start is None or not text.startswith("--", start):
        return Token.miss(index)
    return _regex(_LONG_OPTION_RE, text, start + 2)
