"""
Gash Terminal Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .command import Command, Keyword
from .gash import Gash
from .registry import CommandRegistry

logger = logging.getLogger("gash")


__all__ = [
    "Gash",
    "Command",
    "Keyword",
    "CommandRegistry",
]
