"""
The render loop.

Clock is a two-state machine, RUNNING and TERMINATING. Each iteration makes
exactly one blocking call, Terminal.poll(), bounded by the redraw interval:

  - nothing arrives before the interval runs out: redraw the time (the tick)
  - a resize arrives: re-center vertically and horizontally and redraw now
  - Escape or "q" arrives: stop
  - anything else arrives: ignore it, draw nothing

One wait primitive serves both the redraw cadence and input handling, so
there is no timer thread, and a resize or quit preempts the tick instead of
waiting for the next second.
"""

import datetime
from collections.abc import Callable
from enum import Enum

from .config import Configuration
from .console import console
from .errors import TerminalError
from .glyphs import RenderedTime
from .screen import Screen
from .terminal import Dimensions, Event, KeyEvent, ResizeEvent, Terminal
from .timefmt import current_time, local_now

QUIT_KEYS = frozenset({"escape", "q"})


class LoopState(Enum):
    RUNNING = "running"
    TERMINATING = "terminating"


class Clock:
    """Draws the time once per poll interval until a quit key is pressed."""

    def __init__(
        self,
        config: Configuration,
        screen: Screen,
        terminal: Terminal,
        now: Callable[[], datetime.datetime] = local_now,
    ) -> None:
        self.config = config
        self.screen = screen
        self.terminal = terminal
        self.now = now
        self.layout = config.layout
        self.state = LoopState.RUNNING
        self.dimensions: Dimensions | None = None

    def run(self) -> None:
        """Take over the terminal, run until quit, and give the terminal back.

        The terminal is restored whether the loop ends by a quit key or by an
        exception; the exception then propagates to the caller.
        """
        with self.screen:
            self.reflow(self.terminal.size())
            while self.state is LoopState.RUNNING:
                self.step()

    def step(self) -> None:
        """Run one wait-then-react iteration."""
        event = self.terminal.poll(self.config.poll_interval)
        if event is None:
            self.tick()
        else:
            self.handle(event)

    def handle(self, event: Event) -> None:
        if isinstance(event, ResizeEvent):
            self.reflow(event.dimensions)
        elif isinstance(event, KeyEvent) and event.key in QUIT_KEYS:
            self.state = LoopState.TERMINATING

    def reflow(self, dimensions: Dimensions) -> None:
        """Adopt new terminal dimensions and redraw at the new center."""
        self.dimensions = dimensions
        self.screen.init(dimensions, self.config.colour)
        self.tick()

    def tick(self) -> RenderedTime:
        """Draw the current time on the center line."""
        assert self.dimensions is not None
        rendered = current_time(self.layout, self.now)
        self.screen.render(rendered.text, rendered.glyph_count, self.dimensions.columns)
        return rendered


def run_clock(config: Configuration) -> None:
    """Run the clock on the controlling terminal until the user quits."""
    try:
        terminal = Terminal()
    except (OSError, ValueError) as e:
        raise TerminalError(f"Standard input is not usable as a terminal: {e}") from e
    Clock(config, Screen(console, terminal), terminal).run()
