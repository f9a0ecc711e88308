# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for argsparse output and diagnostics."""
from rich.console import Console
from rich.theme import Theme

argsparse_theme = Theme(
    {
        "usage": "default",
        "report.set": "green",
        "report.unset": "dim",
        "error": "bold red",
    }
)

console = Console(theme=argsparse_theme)
error_console = Console(theme=argsparse_theme, stderr=True)
