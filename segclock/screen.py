"""
Screen control for the full-screen clock.

Screen owns every terminal mode transition the clock makes and every byte it
draws. Drawing goes through the shared Rich console: ANSI sequences are
emitted as rich.control.Control renderables and text with console.out(), so
colour downgrading (truecolor -> 256 -> 16 colours) follows the console's
detected colour system.

Mode changes come in pairs. enter() turns on the alternate screen and raw
mode; leave() undoes both, shows the cursor and drops the colour. leave() is
written to run after a partial enter(), so `with screen:` and a
try/finally around the loop are enough to put the terminal back on every
exit path.

A frame is one line: render() erases the current line and rewrites it, which
avoids the flicker of clearing the whole screen every second. Only init()
clears the screen, and only at start-up and after a resize.
"""

from rich.color import Color
from rich.console import Console
from rich.control import Control
from rich.segment import ControlType
from rich.style import Style

from .errors import TerminalError
from .terminal import Dimensions, Terminal
from .utils import start_column

# ESC [ 2 K: erase the entire current line
ERASE_LINE = 2


class Screen:
    """Alternate-screen drawing surface for a single centered line."""

    def __init__(self, console: Console, terminal: Terminal) -> None:
        self.console = console
        self.terminal = terminal
        self.style: Style | None = None
        self.entered = False

    def __enter__(self) -> "Screen":
        self.enter()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.leave()

    def enter(self) -> None:
        """Switch to the alternate screen and put the terminal in raw mode."""
        self.entered = True
        try:
            self.console.set_alt_screen(True)
        except OSError as e:
            raise TerminalError(f"Could not switch to the alternate screen: {e}") from e
        try:
            self.terminal.enable_raw_mode()
        except TerminalError:
            self.leave()
            raise

    def init(self, dimensions: Dimensions, colour: Color | None = None) -> None:
        """Clear the screen and park the cursor, hidden, on the middle row.

        The colour, if any, is used for all text drawn until leave().
        """
        self.style = Style(color=colour) if colour is not None else None
        try:
            self.console.control(
                Control.clear(),
                Control.move_to(0, dimensions.rows // 2),
            )
            self.console.show_cursor(False)
        except OSError as e:
            raise TerminalError(f"Could not initialise the screen: {e}") from e

    def render(self, text: str, glyph_count: int, columns: int) -> None:
        """Redraw the current line with text centered horizontally."""
        try:
            self.console.control(
                Control((ControlType.ERASE_IN_LINE, ERASE_LINE)),
                Control.move_to_column(start_column(columns, glyph_count)),
            )
            self.console.out(text, style=self.style, highlight=False, end="")
        except OSError as e:
            raise TerminalError(f"Could not draw the clock: {e}") from e

    def leave(self) -> None:
        """Undo enter() and init(): cursor back, colour off, main screen, cooked mode.

        Every step is attempted even if an earlier one fails; the first
        failure is raised once all of them have run.
        """
        if not self.entered:
            return
        self.entered = False
        self.style = None

        failure: TerminalError | None = None
        try:
            self.console.show_cursor(True)
        except OSError as e:
            failure = TerminalError(f"Could not show the cursor: {e}")
        try:
            self.console.set_alt_screen(False)
        except OSError as e:
            failure = failure or TerminalError(f"Could not leave the alternate screen: {e}")
        try:
            self.terminal.disable_raw_mode()
        except TerminalError as e:
            failure = failure or e
        if failure is not None:
            raise failure
