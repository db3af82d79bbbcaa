"""
Gash Terminal Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .colors import GashColors, get_gash_theme

__all__ = [
    "GashColors",
    "get_gash_theme",
]
