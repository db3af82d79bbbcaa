# Gash Terminal Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Command and keyword registry for Gash.

`CommandRegistry` owns the commands and keywords of one terminal session and
turns per-command results into a session-level decision:

- Parsing is first-match-wins in registration order. The scan stops at the
  first command that accepts the line or rejects it for any reason other
  than WRONG_COMMAND (the line was meant for that command but is malformed).
- Auto-completion asks every command, drops NOT_MATCHING results and picks a
  winner: a single ALREADY_MATCHING result beats everything, otherwise a single
  SINGLE_MATCH_FOUND / MULTIPLE_MATCHES_FOUND result is returned. Anything
  else is ambiguous and yields NOT_MATCHING.

The registry holds no global state; create one per session.
"""
from __future__ import annotations

from dataclasses import dataclass

from gash.exceptions import CommandAlreadyExistsError, InvalidCommandError
from gash.logger import logger
from gash.parser.parser_types import (
    NOT_MATCHING_RESULT,
    AutoCompleteResult,
    AutoCompleteType,
    ParseResult,
    ParsingFailureReason,
)
from gash.parser.parsers import CommandBodyLikeParse
from gash.protocols import CommandProtocol, KeywordProtocol
from gash.utils import CaseInsensitiveDict

NO_COMMAND_RESULT = ParseResult(
    success=False, failure_reason=ParsingFailureReason.WRONG_COMMAND
)


@dataclass(frozen=True)
class Dispatch:
    """Outcome of dispatching one line: the deciding command and its result."""

    command: CommandProtocol | None
    result: ParseResult


class CommandRegistry:
    """
    Ordered collection of the commands and keywords known to a session.

    Methods:
        register_command(): Add a command; names are unique, ignoring case.
        register_keyword(): Add a keyword (used for completion and `man`).
        parse_line(): Find the command a line is meant for.
        try_autocomplete(): Compute the session-level auto-completion.
        find_command() / find_keyword(): Case-insensitive lookup by name.
        available_commands(): Commands whose `available()` is true.
        unknown_command_name(): Readable name for an unrecognized line.
    """

    def __init__(self) -> None:
        self._commands: CaseInsensitiveDict = CaseInsensitiveDict()
        self._keywords: list[KeywordProtocol] = []

    @property
    def commands(self) -> list[CommandProtocol]:
        return list(self._commands.values())

    @property
    def keywords(self) -> list[KeywordProtocol]:
        return list(self._keywords)

    def register_command(self, command: CommandProtocol) -> None:
        if not isinstance(command, CommandProtocol):
            raise InvalidCommandError(
                f"{command!r} must provide 'name', 'parse' and 'autocomplete'."
            )
        if command.name in self._commands:
            raise CommandAlreadyExistsError(
                f"Command '{command.name}' is already registered."
            )
        self._commands[command.name] = command
        logger.debug("Registered command '%s'.", command.name)

    def register_keyword(self, keyword: KeywordProtocol) -> None:
        if not isinstance(keyword, KeywordProtocol) or not callable(keyword.name):
            raise InvalidCommandError(f"{keyword!r} must provide a 'name()' method.")
        self._keywords.append(keyword)
        logger.debug("Registered keyword '%s'.", keyword.name())

    def find_command(self, name: str) -> CommandProtocol | None:
        return self._commands.get(name.strip())

    def find_keyword(self, name: str) -> KeywordProtocol | None:
        wanted = name.strip().lower()
        return next(
            (keyword for keyword in self._keywords if keyword.name().lower() == wanted),
            None,
        )

    def available_commands(self) -> list[CommandProtocol]:
        return [
            command
            for command in self._commands.values()
            if getattr(command, "available", lambda: True)()
        ]

    def completion_words(self) -> list[str]:
        """Command names followed by keyword names, in registration order."""
        return [command.name for command in self._commands.values()] + [
            keyword.name() for keyword in self._keywords
        ]

    def parse_line(self, line: str) -> Dispatch:
        for command in self._commands.values():
            result = command.parse(line)
            if (
                result.success
                or result.failure_reason is not ParsingFailureReason.WRONG_COMMAND
            ):
                logger.debug(
                    "Line %r handled by '%s' (success=%s).",
                    line,
                    command.name,
                    result.success,
                )
                return Dispatch(command, result)
        return Dispatch(None, NO_COMMAND_RESULT)

    def try_autocomplete(self, line: str) -> AutoCompleteResult:
        results = [command.autocomplete(line) for command in self._commands.values()]
        already_matching = [
            result for result in results if result.type is AutoCompleteType.ALREADY_MATCHING
        ]
        if len(already_matching) == 1:
            return already_matching[0]

        completions = [result for result in results if result.type.is_completion]
        if len(completions) == 1:
            return completions[0]

        logger.debug(
            "No single completion for %r (%d matching, %d completing).",
            line,
            len(already_matching),
            len(completions),
        )
        return NOT_MATCHING_RESULT

    def unknown_command_name(self, line: str) -> str:
        result = CommandBodyLikeParse(line)
        if result.success and result.command is not None:
            return result.command
        return line

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return (
            f"CommandRegistry(commands={[command.name for command in self.commands]}, "
            f"keywords={len(self._keywords)})"
        )
