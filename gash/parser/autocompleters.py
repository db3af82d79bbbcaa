# Gash Terminal Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Auto-completion combinators for Gash command lines.

These mirror the parser combinators but report one of four
`AutoCompleteType`s instead of a boolean success:

- ALREADY_MATCHING: the input already matches a valid continuation.
- SINGLE_MATCH_FOUND: exactly one candidate extends the input.
- MULTIPLE_MATCHES_FOUND: several candidates extend it; `fixed_value` holds
  their longest common prefix.
- NOT_MATCHING: nothing extends the input.

`then` only continues past a stage that is ALREADY_MATCHING, because completing
a later segment while an earlier one is still open makes no sense. `or_` only
falls through on NOT_MATCHING.

Options are handled permissively here: anything option-shaped is accepted and
re-emitted, whereas `OptionsParser` rejects options the command does not define.

A partial match (single or multiple) is only offered when nothing but blanks
follows the token being completed; completing in the middle of a line would
discard the text after it.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Iterable, Sequence

from gash.parser import tokens
from gash.parser.parser_types import (
    INITIAL_AUTOCOMPLETE_STATE,
    AutoCompleteResult,
    AutoCompleteState,
    AutoCompleteType,
)
from gash.protocols import CommandProtocol, KeywordProtocol


class AutoCompleter(ABC):
    """Base class for every auto-completer combinator node."""

    @abstractmethod
    def autocomplete(
        self,
        text: str,
        state: AutoCompleteState = INITIAL_AUTOCOMPLETE_STATE,
        index: int | None = None,
    ) -> AutoCompleteState:
        """
        Auto-complete `text` starting at `index` (defaults to `state.position`).

        Args:
            text (str): The whole input line.
            state (AutoCompleteState): Result of the previous stage.
            index (int | None): Inclusive start index into `text`.

        Returns:
            AutoCompleteState: A new state whose `fixed_value` extends `state`'s.
        """

    def then(self, completer: AutoCompleter) -> AutoCompleter:
        return SequenceAutoCompleter(self, completer)

    def or_(self, completer: AutoCompleter) -> AutoCompleter:
        return OrAutoCompleter(self, completer)

    @staticmethod
    def _start(state: AutoCompleteState, index: int | None) -> int:
        return state.position if index is None else index


class SequenceAutoCompleter(AutoCompleter):
    def __init__(self, first: AutoCompleter, second: AutoCompleter):
        self.first = first
        self.second = second

    def autocomplete(
        self,
        text: str,
        state: AutoCompleteState = INITIAL_AUTOCOMPLETE_STATE,
        index: int | None = None,
    ) -> AutoCompleteState:
        first = self.first.autocomplete(text, state, index)
        if first.type is not AutoCompleteType.ALREADY_MATCHING:
            return first
        return self.second.autocomplete(text, first, first.position)

    def __repr__(self) -> str:
        return f"SequenceAutoCompleter({self.first!r}, {self.second!r})"


class OrAutoCompleter(AutoCompleter):
    def __init__(self, first: AutoCompleter, second: AutoCompleter):
        self.first = first
        self.second = second

    def autocomplete(
        self,
        text: str,
        state: AutoCompleteState = INITIAL_AUTOCOMPLETE_STATE,
        index: int | None = None,
    ) -> AutoCompleteState:
        first = self.first.autocomplete(text, state, index)
        if first.type is not AutoCompleteType.NOT_MATCHING:
            return first
        return self.second.autocomplete(text, state, index)

    def __repr__(self) -> str:
        return f"OrAutoCompleter({self.first!r}, {self.second!r})"


def _at_line_end(text: str, end: int) -> bool:
    return not text[end:].strip(tokens.BLANKS)


def _not_matching(state: AutoCompleteState) -> AutoCompleteState:
    return replace(state, type=AutoCompleteType.NOT_MATCHING)


def common_prefix(candidates: Sequence[str]) -> str:
    """
    Longest prefix shared by all `candidates`, compared case-insensitively.

    The prefix is spelled the way the first candidate spells it. Scanning stops
    at the first disagreement or when any candidate runs out of characters.
    """
    if not candidates:
        return ""
    shared = 0
    for characters in zip(*candidates):
        first = characters[0].lower()
        if any(character.lower() != first for character in characters):
            break
        shared += 1
    return candidates[0][:shared]


class CommandBodyAutoCompleter(AutoCompleter):
    def __init__(self, command: CommandProtocol | str):
        self.name = command if isinstance(command, str) else command.name

    def autocomplete(
        self,
        text: str,
        state: AutoCompleteState = INITIAL_AUTOCOMPLETE_STATE,
        index: int | None = None,
    ) -> AutoCompleteState:
        token = tokens.command_word(text, self._start(state, index))
        if not token.matched:
            return _not_matching(state)
        typed = token.value.lower()
        name = self.name.lower()
        if typed == name:
            return replace(
                state,
                type=AutoCompleteType.ALREADY_MATCHING,
                fixed_value=state.fixed_value + self.name,
                position=token.end,
            )
        if name.startswith(typed) and _at_line_end(text, token.end):
            return replace(
                state,
                type=AutoCompleteType.SINGLE_MATCH_FOUND,
                fixed_value=state.fixed_value + self.name,
            )
        return _not_matching(state)

    def __repr__(self) -> str:
        return f"CommandBodyAutoCompleter({self.name!r})"


class _WordListAutoCompleter(AutoCompleter):
    """Completes one parameter token against a list of candidate words."""

    def __init__(self, words: Iterable[str]):
        self.words = tuple(words)

    def _scan(self, text: str, index: int) -> tokens.Token:
        raise NotImplementedError

    def autocomplete(
        self,
        text: str,
        state: AutoCompleteState = INITIAL_AUTOCOMPLETE_STATE,
        index: int | None = None,
    ) -> AutoCompleteState:
        token = self._scan(text, self._start(state, index))
        if not token.matched:
            return _not_matching(state)

        typed = token.value.lower()
        exact_matches = [word for word in self.words if word.lower() == typed]
        if exact_matches:
            return replace(
                state,
                type=AutoCompleteType.ALREADY_MATCHING,
                fixed_value=f"{state.fixed_value} {exact_matches[0]}",
                position=token.end,
            )

        partial_matches = [word for word in self.words if word.lower().startswith(typed)]
        if not partial_matches or not _at_line_end(text, token.end):
            return _not_matching(state)
        if len(partial_matches) == 1:
            return replace(
                state,
                type=AutoCompleteType.SINGLE_MATCH_FOUND,
                fixed_value=f"{state.fixed_value} {partial_matches[0]}",
            )
        return replace(
            state,
            type=AutoCompleteType.MULTIPLE_MATCHES_FOUND,
            fixed_value=f"{state.fixed_value} {common_prefix(partial_matches)}",
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.words)!r})"


class TextParamAutoCompleter(_WordListAutoCompleter):
    """Greedy multi-word token, so `"foo bar"` is matched as one candidate."""

    def _scan(self, text: str, index: int) -> tokens.Token:
        return tokens.text_parameter(text, index)


class SingleWordTextParamAutoCompleter(_WordListAutoCompleter):
    def _scan(self, text: str, index: int) -> tokens.Token:
        return tokens.single_word_parameter(text, index)


class NumberParamAutoCompleter(AutoCompleter):
    """Numbers are never completed, only accepted."""

    def autocomplete(
        self,
        text: str,
        state: AutoCompleteState = INITIAL_AUTOCOMPLETE_STATE,
        index: int | None = None,
    ) -> AutoCompleteState:
        token = tokens.number_parameter(text, self._start(state, index))
        if not token.matched:
            return _not_matching(state)
        return replace(
            state,
            type=AutoCompleteType.ALREADY_MATCHING,
            fixed_value=f"{state.fixed_value} {tokens.format_number(token.value)}",
            position=token.end,
        )

    def __repr__(self) -> str:
        return "NumberParamAutoCompleter()"


class OptionsAutoCompleter(AutoCompleter):
    """Skips over any option-shaped tokens, re-emitting them unchanged."""

    def autocomplete(
        self,
        text: str,
        state: AutoCompleteState = INITIAL_AUTOCOMPLETE_STATE,
        index: int | None = None,
    ) -> AutoCompleteState:
        current = replace(state, position=self._start(state, index))
        while True:
            result = self._complete_one(text, current)
            if result.option_not_found:
                return replace(
                    result, type=AutoCompleteType.ALREADY_MATCHING, option_not_found=False
                )
            current = result

    def _complete_one(self, text: str, state: AutoCompleteState) -> AutoCompleteState:
        short = tokens.short_options(text, state.position)
        if short.matched:
            return replace(
                state,
                type=AutoCompleteType.ALREADY_MATCHING,
                fixed_value=f"{state.fixed_value} -{''.join(short.value)}",
                position=short.end,
            )
        long = tokens.long_option(text, state.position)
        if long.matched:
            return replace(
                state,
                type=AutoCompleteType.ALREADY_MATCHING,
                fixed_value=f"{state.fixed_value} --{long.value}",
                position=long.end,
            )
        return replace(state, type=AutoCompleteType.NOT_MATCHING, option_not_found=True)

    def __repr__(self) -> str:
        return "OptionsAutoCompleter()"


# pylint: disable=invalid-name
def AutoCompleteTextParam(words: Iterable[str]) -> AutoCompleter:
    """Auto-complete a (possibly multi-word) text parameter from `words`."""
    return TextParamAutoCompleter(words)


def AutoCompleteSingleWordTextParam(words: Iterable[str]) -> AutoCompleter:
    """Auto-complete a single-word text parameter from `words`."""
    return SingleWordTextParamAutoCompleter(words)


def AutoCompleteKeywords(keywords: Iterable[KeywordProtocol]) -> AutoCompleter:
    """Auto-complete a text parameter from the names of `keywords`."""
    return TextParamAutoCompleter(keyword.name() for keyword in keywords)


def AutoCompleteNumber() -> AutoCompleter:
    return NumberParamAutoCompleter()


# pylint: enable=invalid-name


class CommandAutoCompleter:
    """
    Auto-completes a command, its options and its parameters in one call.

    The chain `CommandBody -> options -> params` is built once and reused.

    Args:
        command (CommandProtocol | str): The command (or its name) to complete.
        params (AutoCompleter | None): Auto-completer chain for the parameters.
    """

    def __init__(self, command: CommandProtocol | str, params: AutoCompleter | None = None):
        chain: AutoCompleter = CommandBodyAutoCompleter(command).then(OptionsAutoCompleter())
        if params is not None:
            chain = chain.then(params)
        self.chain = chain

    def autocomplete(self, line: str) -> AutoCompleteResult:
        return self.chain.autocomplete(line, INITIAL_AUTOCOMPLETE_STATE, 0).to_result()

    def __repr__(self) -> str:
        return f"CommandAutoCompleter({self.chain!r})"
