# Gash Terminal Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Main class for constructing and running a Gash terminal session.

Gash hosts a command registry behind an interactive prompt:

- Commands and keywords are registered on an explicitly owned `CommandRegistry`
- Each submitted line is dispatched to the first command that recognizes it
- Parse failures turn into readable diagnostics instead of exceptions
- Tab completion is driven by the registry's auto-completion
- Built-in `list` and `man` commands are available unless disabled

    gash = Gash("Dungeon")
    gash.add_command("look", look_around, help_text="Look around the room.")
    asyncio.run(gash.menu())
"""
from __future__ import annotations

from functools import cached_property
from typing import Any, Awaitable, Callable, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.history import History, InMemoryHistory
from prompt_toolkit.patch_stdout import patch_stdout
from prompt_toolkit.shortcuts import CompleteStyle
from rich.console import Console
from rich.markup import escape

from gash.builtins import build_list_command, build_man_command
from gash.command import Command
from gash.completer import GashCompleter
from gash.console import console as default_console
from gash.exceptions import InvalidActionError
from gash.logger import logger
from gash.parser.autocompleters import AutoCompleter
from gash.parser.parser_types import (
    AutoCompleteResult,
    OptionDefinition,
    ParseResult,
    ParsingFailureReason,
)
from gash.parser.parsers import Parser
from gash.protocols import CommandProtocol, KeywordProtocol
from gash.registry import CommandRegistry
from gash.signals import QuitSignal


class Gash:
    """
    Terminal session controller for Gash applications.

    Args:
        title (str): Title of the session, printed in log lines.
        prompt (str): Prompt text shown before the input. Defaults to `$ `.
        registry (CommandRegistry | None): Registry to use; a new one by default.
        register_builtins (bool): Whether to register `list` and `man`.
        welcome_message (str): Printed when the interactive loop starts.
        exit_message (str): Printed when the interactive loop ends.
        history (History | None): Prompt Toolkit history for the prompt session.
        console (Console | None): Rich console used for all output.

    Methods:
        add_command(): Build and register a `Command`.
        register_command() / register_keyword(): Register existing objects.
        run_line(): Dispatch one input line and run the matching command.
        try_autocomplete(): Session-level auto-completion of a partial line.
        menu(): Run the interactive prompt loop until the user quits.
    """

    def __init__(
        self,
        title: str = "Gash",
        *,
        prompt: str = "$ ",
        registry: CommandRegistry | None = None,
        register_builtins: bool = True,
        welcome_message: str = "",
        exit_message: str = "",
        history: History | None = None,
        console: Console | None = None,
    ) -> None:
        self.title = title
        self.prompt = prompt
        self.registry = registry if registry is not None else CommandRegistry()
        self.welcome_message = welcome_message
        self.exit_message = exit_message
        self.history: History = history or InMemoryHistory()
        self.console: Console = console or default_console
        self.last_result: ParseResult | None = None
        if register_builtins:
            self.register_command(build_list_command(self))
            self.register_command(build_man_command(self))

    def add_command(
        self,
        name: str,
        action: Callable[..., Any] | Callable[..., Awaitable[Any]] | None = None,
        *,
        params: Parser | None = None,
        completion: AutoCompleter | Callable[[], AutoCompleter] | None = None,
        options: Sequence[OptionDefinition] | None = None,
        help_text: str = "",
        hidden: bool = False,
    ) -> Command:
        """Creates a `Command` from the given grammar and registers it."""
        if action is not None and not callable(action):
            raise InvalidActionError(f"Action for command '{name}' must be callable.")
        command = Command(
            name=name,
            action=action,
            params=params,
            completion=completion,
            options=list(options) if options is not None else None,
            help_text=help_text,
            hidden=hidden,
        )
        self.register_command(command)
        return command

    def add_commands(self, commands: Sequence[Command]) -> None:
        for command in commands:
            self.register_command(command)

    def register_command(self, command: CommandProtocol) -> None:
        self.registry.register_command(command)

    def register_keyword(self, keyword: KeywordProtocol) -> None:
        self.registry.register_keyword(keyword)

    def try_autocomplete(self, line: str) -> AutoCompleteResult:
        return self.registry.try_autocomplete(line)

    def _report_failure(self, line: str, result: ParseResult) -> None:
        if result.failure_reason is ParsingFailureReason.WRONG_COMMAND:
            name = self.registry.unknown_command_name(line)
            logger.info("Unknown command '%s'.", name)
            self.console.print(
                f"[system]Unknown command [command]{escape(name)}[/command][/system]"
            )
        elif result.failure_reason is ParsingFailureReason.MISSING_PARAM:
            self.console.print(
                "[system]Missing required param(s) for a command. See "
                f"[command]man {escape(result.command or '')}[/command].[/system]"
            )
        elif result.failure_reason is ParsingFailureReason.UNRECOGNIZED_OPTION:
            self.console.print(
                "[system]Unknown option for a command. See "
                f"[command]man {escape(result.command or '')}[/command].[/system]"
            )
        self.console.print()

    async def _handle_action_error(self, command: CommandProtocol, error: Exception) -> None:
        logger.debug(
            "[%s] action failed with error: %s", command.name, error, exc_info=True
        )
        self.console.print(
            f"[error]An error occurred while executing {escape(command.name)}:[/error] "
            f"{escape(str(error))}"
        )

    async def run_line(self, line: str, *, remember: bool = True) -> ParseResult:
        """
        Dispatch one input line.

        The line is appended to the history (unless `remember` is False, as
        for lines the prompt session already recorded), parsed by the registry and, on
        success, the deciding command is executed. Failures print a diagnostic.
        Exceptions raised by actions are reported and do not propagate;
        `QuitSignal` does.

        Returns:
            ParseResult: The deciding command's parse result.
        """
        if not line.strip():
            return ParseResult(success=True)
        if remember:
            self.history.append_string(line)

        dispatch = self.registry.parse_line(line)
        self.last_result = dispatch.result
        if not dispatch.result.success or dispatch.command is None:
            self._report_failure(line, dispatch.result)
            return dispatch.result

        command = dispatch.command
        logger.info("Command '%s' selected.", command.name)
        if isinstance(command, Command):
            try:
                await command(dispatch.result)
            except Exception as error:  # pylint: disable=broad-except
                await self._handle_action_error(command, error)
        return dispatch.result

    async def run_lines(self, lines: Sequence[str]) -> list[ParseResult]:
        """Run several lines in order, without prompting."""
        return [await self.run_line(line) for line in lines]

    @cached_property
    def prompt_session(self) -> PromptSession:
        """Returns the prompt session for the terminal."""
        return PromptSession(
            message=self.prompt,
            history=self.history,
            multiline=False,
            completer=GashCompleter(self.registry),
            complete_style=CompleteStyle.COLUMN,
            complete_while_typing=False,
            interrupt_exception=QuitSignal,
            eof_exception=QuitSignal,
        )

    async def process_line(self) -> None:
        """Prompts for one line and runs it."""
        with patch_stdout(raw=True):
            line = await self.prompt_session.prompt_async()
        await self.run_line(line, remember=False)

    async def menu(self) -> None:
        """Runs the prompt loop until the user quits."""
        logger.info("Starting session: %s", self.title)
        if self.welcome_message:
            self.console.print(self.welcome_message)
        try:
            while True:
                try:
                    await self.process_line()
                except QuitSignal:
                    logger.info("[QuitSignal]. <- Exiting session.")
                    break
        finally:
            logger.info("Exiting session: %s", self.title)
            if self.exit_message:
                self.console.print(self.exit_message)

    def __repr__(self) -> str:
        return f"Gash(title={self.title!r}, registry={self.registry!r})"
