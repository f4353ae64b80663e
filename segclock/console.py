"""
Shared Rich Console singletons for terminal output.

Two consoles are shared across the application:

  - `console` draws the clock. It is the only object that writes to stdout,
    so cursor position and alternate-screen state stay coordinated.
  - `err_console` writes warnings and errors to stderr. Messages printed here
    stay visible after the alternate screen is left, because the alternate
    screen only captures stdout drawing.

Tests can patch either name in the module that imports it.

Usage:
    from .console import err_console
    err_console.print("[red]Error: something broke[/red]")
"""

from rich.console import Console

console = Console()

err_console = Console(stderr=True)
