# Gash Terminal Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by the Gash shell.

Signals inherit from `BaseException` so they pass through the `except Exception`
blocks that guard command actions.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Gash."""


class QuitSignal(FlowSignal):
    """Raised to end the interactive session (Ctrl-C, Ctrl-D or a quitting action)."""

    def __init__(self, message: str = "Quit signal received."):
        super().__init__(message)
