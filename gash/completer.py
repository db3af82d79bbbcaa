# Gash Terminal Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `GashCompleter`, a Prompt Toolkit completer backed by a Gash registry.

The registry computes one session-level auto-completion for the text before the
cursor. When it is a single or multiple match that extends what was typed, the
completer offers it as a replacement for the whole text before the cursor.
ALREADY_MATCHING and NOT_MATCHING results offer nothing.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

if TYPE_CHECKING:
    from gash.registry import CommandRegistry


class GashCompleter(Completer):
    """
    Prompt Toolkit completer for Gash command input.

    Args:
        registry (CommandRegistry): The registry whose commands are completed.
    """

    def __init__(self, registry: "CommandRegistry"):
        self.registry = registry

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor
        result = self.registry.try_autocomplete(text)
        if not result.type.is_completion or result.fixed_value == text:
            return
        yield Completion(
            result.fixed_value,
            start_position=-len(text),
            display=result.fixed_value.split(" ")[-1] or result.fixed_value,
            display_meta=result.type.value.replace("_", " "),
        )
