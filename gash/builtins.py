# Gash Terminal Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Built-in `list` and `man` commands.

Both are ordinary `Command`s wired to a `Gash` instance:
- `list` prints the currently available commands.
- `man <name>` prints the help text of a command or keyword. Its completion
  candidates are rebuilt on every call, so commands and keywords registered
  later are offered too.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape

from gash.command import Command
from gash.parser.autocompleters import AutoCompleteTextParam
from gash.parser.parser_types import ParseResult
from gash.parser.parsers import TextParameter

if TYPE_CHECKING:
    from gash.gash import Gash


def build_list_command(gash: Gash) -> Command:
    def list_commands(_: ParseResult) -> list[str]:
        names = [command.name for command in gash.registry.available_commands()]
        gash.console.print(
            "[system]Currently available commands follow. "
            "You can use [command]man[/command] to learn more about them.[/system]"
        )
        for name in names:
            gash.console.print(f"    [command]{escape(name)}[/command]")
        gash.console.print()
        return names

    return Command(
        name="list",
        action=list_commands,
        help_text="Display list of currently available commands.",
    )


def build_man_command(gash: Gash) -> Command:
    def show_manual(result: ParseResult) -> str | None:
        topic = result.params[0].strip()
        entry = gash.registry.find_command(topic)
        style = "command"
        if entry is None:
            entry, style = gash.registry.find_keyword(topic), "keyword"
        if entry is None:
            gash.console.print(
                f"[system]Unrecognized command or keyword '{escape(topic)}', "
                "cannot display manual page.[/system]"
            )
            return None
        name = entry.name if isinstance(entry.name, str) else entry.name()
        help_text = getattr(entry, "help_text", "") or "No manual entry."
        gash.console.print(f"[{style}]{escape(name)}[/{style}]")
        gash.console.print(f"    [system]{escape(help_text)}[/system]")
        gash.console.print()
        return name

    return Command(
        name="man",
        action=show_manual,
        params=TextParameter(),
        completion=lambda: AutoCompleteTextParam(gash.registry.completion_words()),
        help_text="Display a manual page for a command or a game mechanic.",
    )
