# Gash Terminal Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parser combinators for recognizing Gash command lines.

A parser is an immutable node with a single operation:

    parse(text, state, index) -> ParseState

Nodes compose with `then` (sequence), `or_` (choice), `optional()` and
`repeat()`, so a command grammar is built once and evaluated for every line:

    CommandParser(man, SingleWordTextParameter()).parse("man list")
    # ParseResult(success=True, command="man", params=["list"], ...)

Leaf parsers:
- CommandBody: the command name, case-insensitive, leading blanks allowed.
- TextParameter: greedy multi-word text. It consumes the rest of the
  letters/blank run, so nothing meaningful can follow it.
- SingleWordTextParameter: one word of letters.
- NumberParameter: an integer or decimal, stored re-stringified.
- OptionsParser: short clusters and long options validated against the
  command's `OptionDefinition`s.

Malformed input never raises: it produces `success=False` and a
`ParsingFailureReason`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Sequence

from gash.parser import tokens
from gash.parser.parser_types import (
    INITIAL_PARSE_STATE,
    OptionDefinition,
    ParseResult,
    ParseState,
    ParsingFailureReason,
)
from gash.protocols import CommandProtocol


class Parser(ABC):
    """Base class for every parser combinator node."""

    @abstractmethod
    def parse(
        self, text: str, state: ParseState = INITIAL_PARSE_STATE, index: int | None = None
    ) -> ParseState:
        """
        Parse `text` starting at `index` (defaults to `state.position`).

        Args:
            text (str): The whole input line.
            state (ParseState): Result of the previous parser in the chain.
            index (int | None): Inclusive start index into `text`.

        Returns:
            ParseState: A new state; `state` itself is never modified.
        """

    def then(self, parser: Parser) -> Parser:
        return SequenceParser(self, parser)

    def or_(self, parser: Parser) -> Parser:
        return OrParser(self, parser)

    def optional(self) -> Parser:
        return OptionalParser(self)

    def repeat(self) -> Parser:
        return RepetitionParser(self)

    @staticmethod
    def _start(state: ParseState, index: int | None) -> int:
        return state.position if index is None else index


class SequenceParser(Parser):
    """Runs `second` on the remainder when `first` succeeds."""

    def __init__(self, first: Parser, second: Parser):
        self.first = first
        self.second = second

    def parse(
        self, text: str, state: ParseState = INITIAL_PARSE_STATE, index: int | None = None
    ) -> ParseState:
        first = self.first.parse(text, state, index)
        if not first.success:
            return first
        return self.second.parse(text, first, first.position)

    def __repr__(self) -> str:
        return f"SequenceParser({self.first!r}, {self.second!r})"


class OrParser(Parser):
    """Tries `second` from the original state when `first` fails."""

    def __init__(self, first: Parser, second: Parser):
        self.first = first
        self.second = second

    def parse(
        self, text: str, state: ParseState = INITIAL_PARSE_STATE, index: int | None = None
    ) -> ParseState:
        first = self.first.parse(text, state, index)
        if first.success:
            return first
        return self.second.parse(text, state, index)

    def __repr__(self) -> str:
        return f"OrParser({self.first!r}, {self.second!r})"


class OptionalParser(Parser):
    """Swallows a failure of the wrapped parser, returning the prior state."""

    def __init__(self, parser: Parser):
        self.parser = parser

    def parse(
        self, text: str, state: ParseState = INITIAL_PARSE_STATE, index: int | None = None
    ) -> ParseState:
        result = self.parser.parse(text, state, index)
        return result if result.success else state

    def __repr__(self) -> str:
        return f"OptionalParser({self.parser!r})"


class RepetitionParser(Parser):
    """Repeats the wrapped parser until it fails and returns the last success.

    An iteration that succeeds without advancing ends the repetition, which
    keeps `OptionalParser(...).repeat()` from spinning forever.
    """

    def __init__(self, parser: Parser):
        self.parser = parser

    def parse(
        self, text: str, state: ParseState = INITIAL_PARSE_STATE, index: int | None = None
    ) -> ParseState:
        current = state
        start = self._start(state, index)
        while True:
            result = self.parser.parse(text, current, start)
            if not result.success:
                return current
            if result.position <= start:
                return result
            current, start = result, result.position

    def __repr__(self) -> str:
        return f"RepetitionParser({self.parser!r})"


def _command_name(command: CommandProtocol | str) -> str:
    return command if isinstance(command, str) else command.name


class CommandBody(Parser):
    """Matches the leading word against a command name, ignoring case."""

    def __init__(self, command: CommandProtocol | str):
        self.name = _command_name(command)

    def parse(
        self, text: str, state: ParseState = INITIAL_PARSE_STATE, index: int | None = None
    ) -> ParseState:
        token = tokens.command_word(text, self._start(state, index))
        if token.matched and token.value.lower() == self.name.lower():
            return replace(state, success=True, command=self.name, position=token.end)
        return replace(
            state,
            success=False,
            failure_reason=ParsingFailureReason.WRONG_COMMAND,
            position=token.end,
        )

    def __repr__(self) -> str:
        return f"CommandBody({self.name!r})"


class CommandBodyLike(Parser):
    """Extracts whatever looks like a command word, without checking its name."""

    def parse(
        self, text: str, state: ParseState = INITIAL_PARSE_STATE, index: int | None = None
    ) -> ParseState:
        token = tokens.command_word(text, self._start(state, index))
        if token.matched:
            return replace(state, success=True, command=token.value, position=token.end)
        return replace(state, success=False, position=token.end)


class _ParameterParser(Parser):
    """Appends one recognized token to `params` or fails with MISSING_PARAM."""

    def _scan(self, text: str, index: int) -> tokens.Token:
        raise NotImplementedError

    def _render(self, value) -> str:
        return value

    def parse(
        self, text: str, state: ParseState = INITIAL_PARSE_STATE, index: int | None = None
    ) -> ParseState:
        token = self._scan(text, self._start(state, index))
        if not token.matched:
            return replace(
                state,
                success=False,
                failure_reason=ParsingFailureReason.MISSING_PARAM,
                position=token.end,
            )
        return replace(
            state,
            success=True,
            position=token.end,
            params=(*state.params, self._render(token.value)),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class TextParameter(_ParameterParser):
    """Greedy multi-word text parameter (`man some keyword`)."""

    def _scan(self, text: str, index: int) -> tokens.Token:
        return tokens.text_parameter(text, index)


class SingleWordTextParameter(_ParameterParser):
    """Single word of letters."""

    def _scan(self, text: str, index: int) -> tokens.Token:
        return tokens.single_word_parameter(text, index)


class NumberParameter(_ParameterParser):
    """Integer or decimal number parameter."""

    def _scan(self, text: str, index: int) -> tokens.Token:
        return tokens.number_parameter(text, index)

    def _render(self, value) -> str:
        return tokens.format_number(value)


class OptionsParser(Parser):
    """
    Greedily parses options and validates each against `definitions`.

    Short options may be clustered (`-ab` yields `a` and `b`), long options are
    dash-joined words (`--bar-word`). Any option-shaped token that is not
    defined fails the parse with UNRECOGNIZED_OPTION. A line without any
    option-shaped token at the current position parses successfully with no
    options consumed.
    """

    def __init__(self, definitions: Sequence[OptionDefinition] | None = None):
        self.definitions = tuple(definitions or ())

    def is_option_valid(self, option: str) -> bool:
        return any(definition.matches(option) for definition in self.definitions)

    def parse(
        self, text: str, state: ParseState = INITIAL_PARSE_STATE, index: int | None = None
    ) -> ParseState:
        current = replace(state, position=self._start(state, index))
        while True:
            result = self._parse_one(text, current)
            if not result.success:
                break
            current = result
        if result.option_not_found:
            return replace(result, success=True, failure_reason=None, option_not_found=False)
        return result

    def _parse_one(self, text: str, state: ParseState) -> ParseState:
        short = tokens.short_options(text, state.position)
        if short.matched:
            return self._accept(state, short.value, short.end)
        long = tokens.long_option(text, state.position)
        if long.matched:
            return self._accept(state, [long.value], long.end)
        return replace(state, success=False, option_not_found=True)

    def _accept(self, state: ParseState, options: list[str], end: int) -> ParseState:
        if not all(self.is_option_valid(option) for option in options):
            return replace(
                state,
                success=False,
                failure_reason=ParsingFailureReason.UNRECOGNIZED_OPTION,
            )
        return replace(
            state, success=True, position=end, options=(*state.options, *options)
        )

    def optional(self) -> Parser:
        return self

    def repeat(self) -> Parser:
        return self

    def __repr__(self) -> str:
        return f"OptionsParser({list(self.definitions)!r})"


class CommandParser:
    """
    Parses a command, its options and its parameters in one call.

    The combinator chain `CommandBody -> OptionsParser -> params` is built once
    here and reused by every `parse` call.

    Args:
        command (CommandProtocol | str): The command (or its name) to recognize.
        params (Parser | None): Parser or chain of parsers for the parameters.
        options (Sequence[OptionDefinition] | None): Options the command accepts.
            When None, options are not parsed at all.
    """

    def __init__(
        self,
        command: CommandProtocol | str,
        params: Parser | None = None,
        options: Sequence[OptionDefinition] | None = None,
    ):
        chain: Parser = CommandBody(command)
        if options is not None:
            chain = chain.then(OptionsParser(options))
        if params is not None:
            chain = chain.then(params)
        self.chain = chain

    def parse(self, line: str) -> ParseResult:
        return self.chain.parse(line, INITIAL_PARSE_STATE, 0).to_result()

    def __repr__(self) -> str:
        return f"CommandParser({self.chain!r})"


def CommandBodyLikeParse(line: str) -> ParseResult:  # pylint: disable=invalid-name
    """Extract the command-looking word at the head of `line`.

    Used to name an unknown command in diagnostics; it does not validate anything.
    """
    return CommandBodyLike().parse(line, INITIAL_PARSE_STATE, 0).to_result()
