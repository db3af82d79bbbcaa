# Gash Terminal Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result and state models shared by Gash parsers and auto-completers.

Contents:
- `ParsingFailureReason`: Why a line was rejected by a command parser.
- `ParseState`: The record threaded through parser combinators.
- `ParseResult`: The public outcome of `CommandParser.parse`.
- `OptionDefinition`: One legal short (`-f`) and/or long (`--force`) option.
- `AutoCompleteType`: Confidence classification of an auto-completion.
- `AutoCompleteState`: The record threaded through auto-completer combinators.
- `AutoCompleteResult`: The public outcome of `CommandAutoCompleter.autocomplete`.

States are frozen; every combinator step derives a new one with
`dataclasses.replace`, so a combinator tree never carries per-call state.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ParsingFailureReason(Enum):
    """Reason for a parsing failure."""

    WRONG_COMMAND = "wrong_command"
    MISSING_PARAM = "missing_param"
    UNRECOGNIZED_OPTION = "unrecognized_option"


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing an input line for one command."""

    success: bool
    failure_reason: ParsingFailureReason | None = None
    command: str | None = None
    params: list[str] = field(default_factory=list)
    options: list[str] = field(default_factory=list)

    def has_option(self, option: str) -> bool:
        """Return True if the short or long `option` was present on the line."""
        return option in self.options


@dataclass(frozen=True)
class ParseState:
    """Intermediate parser state.

    `position` is the exclusive index into the input the chain has reached.
    `option_not_found` is only used by the options parser to tell an absent
    option run apart from a malformed one.
    """

    success: bool = True
    failure_reason: ParsingFailureReason | None = None
    command: str | None = None
    position: int = 0
    params: tuple[str, ...] = ()
    options: tuple[str, ...] = ()
    option_not_found: bool = False

    def to_result(self) -> ParseResult:
        return ParseResult(
            success=self.success,
            failure_reason=self.failure_reason,
            command=self.command,
            params=list(self.params),
            options=list(self.options),
        )


INITIAL_PARSE_STATE = ParseState()


@dataclass(frozen=True)
class OptionDefinition:
    """Definition of an option to a command.

    Attributes:
        short (str | None): One letter, used as `-x`.
        long (str | None): A word or dash-joined words, used as `--some-word`.
    """

    short: str | None = None
    long: str | None = None

    def __post_init__(self) -> None:
        if self.short is None and self.long is None:
            raise ValueError("OptionDefinition needs a short or a long form.")
        if self.short is not None and len(self.short) != 1:
            raise ValueError(f"Short option must be a single letter: {self.short!r}")

    def matches(self, option: str) -> bool:
        return option in (self.short, self.long)


class AutoCompleteType(Enum):
    """Classification of an auto-completion attempt."""

    ALREADY_MATCHING = "already_matching"
    SINGLE_MATCH_FOUND = "single_match_found"
    MULTIPLE_MATCHES_FOUND = "multiple_matches_found"
    NOT_MATCHING = "not_matching"

    @property
    def is_completion(self) -> bool:
        """True for results that offer a completion the user has not typed yet."""
        return self in (
            AutoCompleteType.SINGLE_MATCH_FOUND,
            AutoCompleteType.MULTIPLE_MATCHES_FOUND,
        )


@dataclass(frozen=True)
class AutoCompleteResult:
    """Result of auto-completing an input line."""

    type: AutoCompleteType
    fixed_value: str = ""


NOT_MATCHING_RESULT = AutoCompleteResult(AutoCompleteType.NOT_MATCHING, "")


@dataclass(frozen=True)
class AutoCompleteState:
    """Intermediate auto-completer state.

    `fixed_value` is the completion accumulated so far; stages only append to it.
    """

    type: AutoCompleteType = AutoCompleteType.ALREADY_MATCHING
    position: int = 0
    fixed_value: str = ""
    option_not_found: bool = False

    def to_result(self) -> AutoCompleteResult:
        return AutoCompleteResult(type=self.type, fixed_value=self.fixed_value)


INITIAL_AUTOCOMPLETE_STATE = AutoCompleteState()
