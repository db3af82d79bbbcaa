# Gash Terminal Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Gash.

Malformed input lines are never exceptions: parsers and auto-completers report
them as result values. These exceptions signal mistakes in how a host wires
Gash together.

Exception Hierarchy:
- GashError
    ├── CommandAlreadyExistsError
    ├── InvalidCommandError
    ├── InvalidActionError
    └── ConfigError
"""


class GashError(Exception):
    """Base exception for Gash."""


class CommandAlreadyExistsError(GashError):
    """Exception raised when a command with the same name is already registered."""


class InvalidCommandError(GashError):
    """Exception raised when a registered object does not behave like a command."""


class InvalidActionError(GashError):
    """Exception raised when a command action is not callable."""


class ConfigError(GashError):
    """Exception raised when a configuration file cannot be turned into commands."""
