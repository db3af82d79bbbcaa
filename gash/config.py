# Gash Terminal Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Gash commands and keywords.

A YAML or TOML file declares the commands of a terminal session and their
grammar. Each parameter entry becomes one parser and one auto-completer in the
command's chains:

    commands:
      - name: buy
        action: shop.actions.buy
        options: [{short: f}, {long: force}]
        params:
          - type: number
          - type: word
            choices: [sword, shield]
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable, Literal, Sequence

import toml
import yaml
from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from gash.command import Command, Keyword
from gash.exceptions import ConfigError
from gash.gash import Gash
from gash.logger import logger
from gash.parser.autocompleters import (
    AutoCompleteNumber,
    AutoCompleter,
    AutoCompleteSingleWordTextParam,
    AutoCompleteTextParam,
)
from gash.parser.parser_types import OptionDefinition
from gash.parser.parsers import (
    NumberParameter,
    Parser,
    SingleWordTextParameter,
    TextParameter,
)
from gash.protocols import KeywordProtocol


def import_action(dotted_path: str) -> Any:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigError(f"Invalid action path: {dotted_path}")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        action = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigError(
            f"Module '{module_path}' has no attribute '{attr}': {error}"
        ) from error
    if not callable(action):
        raise ConfigError(f"Action '{dotted_path}' is not callable.")
    return action


class RawParam(BaseModel):
    """One command parameter in a Gash configuration file."""

    type: Literal["text", "word", "number"] = "text"
    choices: list[str] = Field(default_factory=list)
    keywords: bool = False

    def to_parser(self) -> Parser:
        if self.type == "number":
            return NumberParameter()
        if self.type == "word":
            return SingleWordTextParameter()
        return TextParameter()

    def to_completer(self, keywords: Sequence[KeywordProtocol]) -> AutoCompleter:
        if self.type == "number":
            return AutoCompleteNumber()
        words = list(self.choices)
        if self.keywords:
            words.extend(keyword.name() for keyword in keywords)
        if self.type == "word":
            return AutoCompleteSingleWordTextParam(words)
        return AutoCompleteTextParam(words)


class RawOption(BaseModel):
    """One option accepted by a configured command."""

    short: str | None = None
    long: str | None = None

    @model_validator(mode="after")
    def validate_forms(self) -> RawOption:
        if self.short is None and self.long is None:
            raise ValueError("An option needs a short or a long form.")
        if self.short is not None and len(self.short) != 1:
            raise ValueError(f"Short option must be a single letter: {self.short!r}")
        return self

    def to_option(self) -> OptionDefinition:
        return OptionDefinition(short=self.short, long=self.long)


class RawCommand(BaseModel):
    """Raw command model for Gash configuration."""

    name: str
    action: str | None = None
    help_text: str = ""
    hidden: bool = False
    options: list[RawOption] | None = None
    params: list[RawParam] = Field(default_factory=list)

    @field_validator("params")
    @classmethod
    def validate_params(cls, params: list[RawParam]) -> list[RawParam]:
        for param in params[:-1]:
            if param.type == "text":
                logger.warning(
                    "A 'text' parameter consumes the rest of the line; "
                    "parameters declared after it will never match."
                )
        return params

    def build_parser(self) -> Parser | None:
        parser: Parser | None = None
        for param in self.params:
            parser = param.to_parser() if parser is None else parser.then(param.to_parser())
        return parser

    def build_completion(
        self, keywords: Callable[[], Sequence[KeywordProtocol]]
    ) -> AutoCompleter | Callable[[], AutoCompleter] | None:
        if not self.params:
            return None

        def chain() -> AutoCompleter:
            current = keywords()
            completer: AutoCompleter | None = None
            for param in self.params:
                step = param.to_completer(current)
                completer = step if completer is None else completer.then(step)
            assert completer is not None
            return completer

        if any(param.keywords for param in self.params):
            return chain
        return chain()

    def to_command(self, keywords: Callable[[], Sequence[KeywordProtocol]]) -> Command:
        return Command(
            name=self.name,
            action=import_action(self.action) if self.action else None,
            params=self.build_parser(),
            completion=self.build_completion(keywords),
            options=(
                [option.to_option() for option in self.options]
                if self.options is not None
                else None
            ),
            help_text=self.help_text,
            hidden=self.hidden,
        )


class RawKeyword(BaseModel):
    """Raw keyword model for Gash configuration."""

    name: str
    help_text: str = ""


class GashConfig(BaseModel):
    """Gash terminal configuration model."""

    title: str = "Gash"
    prompt: str = "$ "
    builtins: bool = True
    welcome_message: str = ""
    exit_message: str = ""
    keywords: list[RawKeyword] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)

    def to_gash(self) -> Gash:
        gash = Gash(
            title=self.title,
            prompt=self.prompt,
            register_builtins=self.builtins,
            welcome_message=self.welcome_message,
            exit_message=self.exit_message,
        )
        for keyword in self.keywords:
            gash.register_keyword(Keyword(keyword.name, keyword.help_text))
        for raw_command in self.commands:
            gash.register_command(raw_command.to_command(lambda: gash.registry.keywords))
        return gash


def loader(file_path: Path | str) -> Gash:
    """
    Load a Gash terminal configuration from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        Gash: A terminal session with the configured commands and keywords.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file format is unsupported or its content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ConfigError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping with a list of commands.\n"
            "Example:\n"
            "title: 'My game'\n"
            "commands:\n"
            "  - name: 'look'\n"
            "    action: 'my_game.actions.look'"
        )

    try:
        config = GashConfig.model_validate(raw_config)
        gash = config.to_gash()
    except ValidationError as error:
        raise ConfigError(f"Invalid configuration in {path}:\n{error}") from error
    logger.debug(
        "Loaded %d command(s) and %d keyword(s) from %s",
        len(config.commands),
        len(config.keywords),
        path,
    )
    return gash
