# Gash Terminal Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the Rich theme used by the Gash console.

Named styles keep markup short in output lines: `[command]man[/]`,
`[system]...[/]`, `[error]...[/]`.
"""
from rich.theme import Theme


class GashColors:
    """Hex colors used by the default Gash theme."""

    CYAN = "#00bcd4"
    BLACK = "#212121"
    GREY = "#9e9e9e"
    RED = "#e53935"


def get_gash_theme() -> Theme:
    return Theme(
        {
            "command": f"bold {GashColors.CYAN}",
            "keyword": f"{GashColors.BLACK} on {GashColors.CYAN}",
            "system": GashColors.GREY,
            "error": f"bold {GashColors.RED}",
        }
    )
