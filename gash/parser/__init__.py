"""
Gash Terminal Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .autocompleters import (
    AutoCompleteKeywords,
    AutoCompleteNumber,
    AutoCompleter,
    AutoCompleteSingleWordTextParam,
    AutoCompleteTextParam,
    CommandAutoCompleter,
    CommandBodyAutoCompleter,
    NumberParamAutoCompleter,
    OptionsAutoCompleter,
    OrAutoCompleter,
    SequenceAutoCompleter,
    SingleWordTextParamAutoCompleter,
    TextParamAutoCompleter,
)
from .parser_types import (
    AutoCompleteResult,
    AutoCompleteState,
    AutoCompleteType,
    OptionDefinition,
    ParseResult,
    ParseState,
    ParsingFailureReason,
)
from .parsers import (
    CommandBody,
    CommandBodyLike,
    CommandBodyLikeParse,
    CommandParser,
    NumberParameter,
    OptionalParser,
    OptionsParser,
    OrParser,
    Parser,
    RepetitionParser,
    SequenceParser,
    SingleWordTextParameter,
    TextParameter,
)

__all__ = [
    "Parser",
    "SequenceParser",
    "OrParser",
    "OptionalParser",
    "RepetitionParser",
    "CommandBody",
    "CommandBodyLike",
    "CommandBodyLikeParse",
    "TextParameter",
    "SingleWordTextParameter",
    "NumberParameter",
    "OptionsParser",
    "CommandParser",
    "AutoCompleter",
    "SequenceAutoCompleter",
    "OrAutoCompleter",
    "CommandBodyAutoCompleter",
    "TextParamAutoCompleter",
    "SingleWordTextParamAutoCompleter",
    "NumberParamAutoCompleter",
    "OptionsAutoCompleter",
    "AutoCompleteTextParam",
    "AutoCompleteSingleWordTextParam",
    "AutoCompleteKeywords",
    "AutoCompleteNumber",
    "CommandAutoCompleter",
    "ParseState",
    "ParseResult",
    "ParsingFailureReason",
    "OptionDefinition",
    "AutoCompleteType",
    "AutoCompleteState",
    "AutoCompleteResult",
]
