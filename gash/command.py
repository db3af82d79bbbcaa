# Gash Terminal Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the Command and Keyword classes for Gash.

A Command couples a name with its grammar and an action:

- `params`: a parser chain recognizing the command's parameters
- `completion`: an auto-completer chain (or a factory building one per call
  when its candidates change over time, like the built-in `man`)
- `options`: the option whitelist enforced while parsing
- `action`: sync or async callable receiving the successful `ParseResult`

The `CommandParser` and `CommandAutoCompleter` facades are built once, when the
command is created, and reused for every input line.
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator

from gash.logger import logger
from gash.parser.autocompleters import AutoCompleter, CommandAutoCompleter
from gash.parser.parser_types import AutoCompleteResult, OptionDefinition, ParseResult
from gash.parser.parsers import CommandParser, Parser
from gash.parser.tokens import letters
from gash.utils import ensure_async


class Command(BaseModel):
    """
    Represents a command the player can type into a Gash terminal.

    Attributes:
        name (str): Name used to invoke the command; letters only, case-insensitive.
        action (Callable | None): Called with the `ParseResult` of a matching line.
        params (Parser | None): Parser chain for the command's parameters.
        completion (AutoCompleter | Callable[[], AutoCompleter] | None):
            Auto-completer chain for the parameters, or a factory for one.
        options (list[OptionDefinition] | None): Options the command accepts.
            None disables option parsing entirely.
        help_text (str): Text shown by the built-in `man` command.
        hidden (bool): Hidden commands still run but are left out of `list`.
    """

    name: str
    action: Callable[..., Any] | Callable[..., Awaitable[Any]] | None = None
    params: Parser | None = None
    completion: AutoCompleter | Callable[[], AutoCompleter] | None = None
    options: list[OptionDefinition] | None = None
    help_text: str = ""
    hidden: bool = False

    _parser: CommandParser = PrivateAttr()
    _completer: CommandAutoCompleter | None = PrivateAttr(default=None)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, name: str) -> str:
        token = letters(name, 0)
        if not token.matched or token.end != len(name):
            raise ValueError(f"Command name must be a single word of letters: {name!r}")
        return name

    @field_validator("action", mode="before")
    @classmethod
    def wrap_callable_as_async(cls, action: Any) -> Any:
        if action is None:
            return None
        if callable(action):
            return ensure_async(action)
        raise ValueError("Action must be a callable.")

    def model_post_init(self, _: Any) -> None:
        """Build the command's parser and auto-completer chains."""
        self._parser = CommandParser(self.name, self.params, self.options)
        if isinstance(self.completion, AutoCompleter) or self.completion is None:
            self._completer = CommandAutoCompleter(self.name, self.completion)
        logger.debug("[Command:%s] grammar built: %r", self.name, self._parser)

    def parse(self, line: str) -> ParseResult:
        return self._parser.parse(line)

    def autocomplete(self, line: str) -> AutoCompleteResult:
        if self._completer is not None:
            return self._completer.autocomplete(line)
        assert callable(self.completion), "completion factory must be callable"
        return CommandAutoCompleter(self.name, self.completion()).autocomplete(line)

    def available(self) -> bool:
        return not self.hidden

    async def __call__(self, result: ParseResult) -> Any:
        """Run the command's action for a successfully parsed line."""
        if self.action is None:
            logger.debug("[Command:%s] no action configured.", self.name)
            return None
        return await self.action(result)

    def __str__(self) -> str:
        return f"Command(name='{self.name}', help_text='{self.help_text}')"


class Keyword:
    """
    A game mechanic, resource or entity that is not a command but is worth a
    manual page and is often a command parameter.

    Args:
        keyword (str): The keyword's name.
        help_text (str): Text shown by `man <keyword>`.
    """

    def __init__(self, keyword: str, help_text: str = ""):
        self._name = keyword
        self.help_text = help_text

    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Keyword({self._name!r})"
