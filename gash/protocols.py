# Gash Terminal Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the structural protocols Gash expects from commands and keywords.

These runtime-checkable `Protocol` classes let any object take part in
dispatch and auto-completion without inheriting from a Gash base class.

Protocols:
- CommandProtocol: Named object that parses and auto-completes input lines.
- KeywordProtocol: Named game mechanic or entity used as a completion candidate.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gash.parser.parser_types import AutoCompleteResult, ParseResult


@runtime_checkable
class CommandProtocol(Protocol):
    name: str

    def parse(self, line: str) -> ParseResult: ...

    def autocomplete(self, line: str) -> AutoCompleteResult: ...


@runtime_checkable
class KeywordProtocol(Protocol):
    def name(self) -> str: ...
