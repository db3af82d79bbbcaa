# Gash Terminal Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Gash terminal sessions."""
from rich.console import Console

from gash.themes import get_gash_theme

console = Console(color_system="truecolor", theme=get_gash_theme())
