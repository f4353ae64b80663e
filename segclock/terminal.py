"""
Terminal input driver.

This module is the only place that touches the TTY's line discipline. It
provides three things the render loop needs:

  - the current terminal size
  - raw mode on/off, so single key presses arrive without waiting for Enter
  - poll(timeout): one blocking wait that returns on a key press, a resize,
    or when the timeout runs out

Resizes arrive as SIGWINCH. The handler writes one byte into a self-pipe and
the pipe's read end is part of the same select() call as stdin, so a resize
wakes the wait immediately instead of at the next tick. Since Python 3.5
select() is retried after a signal handler runs (PEP 475), so the handler
never surfaces as an InterruptedError here.

POSIX only: termios and SIGWINCH do not exist on Windows.
"""

import os
import select
import shutil
import signal
import sys
import termios
import tty
from collections import deque
from dataclasses import dataclass
from typing import NamedTuple

from .errors import TerminalError

ESC = "\x1b"

# Bytes read from the terminal in one go. A paste or a held key can deliver
# more than one key per read; the extra keys are queued.
READ_SIZE = 1024


class Dimensions(NamedTuple):
    columns: int
    rows: int


@dataclass(frozen=True)
class KeyEvent:
    """A key press. Printable keys are named by their character; a lone
    ESC is "escape"; other escape sequences keep their raw text."""

    key: str


@dataclass(frozen=True)
class ResizeEvent:
    dimensions: Dimensions


Event = KeyEvent | ResizeEvent


def decode_keys(data: bytes) -> list[KeyEvent]:
    """Split raw terminal input into key events.

    Cursor keys, function keys and the like arrive as ESC followed by a
    CSI ("ESC [ ... final") or SS3 ("ESC O x") sequence. Each such sequence
    becomes one opaque KeyEvent so that it is never mistaken for a bare
    Escape press.
    """
    text = data.decode("utf-8", errors="replace")
    keys: list[KeyEvent] = []
    i = 0
    while i < len(text):
        if text[i] != ESC:
            keys.append(KeyEvent(text[i]))
            i += 1
            continue

        if i + 1 == len(text) or text[i + 1] == ESC:
            keys.append(KeyEvent("escape"))
            i += 1
            continue

        introducer = text[i + 1]
        if introducer == "[":
            # Parameters run until a final byte in 0x40..0x7E
            end = i + 2
            while end < len(text) and not ("\x40" <= text[end] <= "\x7e"):
                end += 1
            end = min(end + 1, len(text))
        elif introducer == "O":
            end = min(i + 3, len(text))
        else:
            # Alt+key. ESC then q inside one read is Alt+q, which does not quit.
            end = i + 2
        keys.append(KeyEvent(text[i:end]))
        i = end
    return keys


class Terminal:
    """Raw-mode input and resize notification for one terminal."""

    def __init__(self, fd: int | None = None) -> None:
        self.fd = sys.stdin.fileno() if fd is None else fd
        self._saved_attrs: list | None = None
        self._wake_r: int | None = None
        self._wake_w: int | None = None
        self._previous_handler = None
        self._pending: deque[Event] = deque()

    @property
    def is_raw(self) -> bool:
        return self._saved_attrs is not None

    def size(self) -> Dimensions:
        """Size of the terminal behind fd, ignoring COLUMNS and LINES.

        Falls back to shutil.get_terminal_size() when fd is not a terminal.
        """
        try:
            columns, rows = os.get_terminal_size(self.fd)
        except OSError:
            columns, rows = shutil.get_terminal_size()
        return Dimensions(columns, rows)

    def enable_raw_mode(self) -> None:
        """Put the terminal in raw mode and start watching for resizes.

        Raises:
            TerminalError: if the input is not a terminal or its mode cannot be changed.
        """
        if self._saved_attrs is not None:
            return
        try:
            attrs = termios.tcgetattr(self.fd)
            tty.setraw(self.fd, termios.TCSANOW)
        except (termios.error, OSError) as e:
            raise TerminalError(f"Could not enable raw mode: {e}") from e
        self._saved_attrs = attrs
        self._watch_resize()

    def disable_raw_mode(self) -> None:
        """Restore the terminal attributes saved by enable_raw_mode().

        Does nothing if raw mode is not active.

        Raises:
            TerminalError: if the attributes cannot be restored.
        """
        self._unwatch_resize()
        if self._saved_attrs is None:
            return
        attrs, self._saved_attrs = self._saved_attrs, None
        try:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, attrs)
        except (termios.error, OSError) as e:
            raise TerminalError(f"Could not restore terminal mode: {e}") from e

    def poll(self, timeout: float) -> Event | None:
        """Wait up to timeout seconds for the next event.

        Returns None when the timeout expires with nothing to report.

        Raises:
            TerminalError: if waiting on or reading from the terminal fails,
                or its input has been closed.
        """
        if self._pending:
            return self._pending.popleft()

        readers = [self.fd]
        if self._wake_r is not None:
            readers.append(self._wake_r)

        try:
            ready, _, _ = select.select(readers, [], [], timeout)
        except (OSError, ValueError) as e:
            raise TerminalError(f"Could not wait for terminal input: {e}") from e

        if not ready:
            return None

        if self._wake_r is not None and self._wake_r in ready:
            self._drain_wake_pipe()
            return ResizeEvent(self.size())

        try:
            data = os.read(self.fd, READ_SIZE)
        except OSError as e:
            raise TerminalError(f"Could not read terminal input: {e}") from e
        if not data:
            raise TerminalError("Terminal input was closed")

        self._pending.extend(decode_keys(data))
        return self._pending.popleft() if self._pending else None

    def _watch_resize(self) -> None:
        self._wake_r, self._wake_w = os.pipe()
        os.set_blocking(self._wake_r, False)
        os.set_blocking(self._wake_w, False)
        try:
            self._previous_handler = signal.signal(signal.SIGWINCH, self._on_resize)
        except ValueError as e:
            # signal.signal only works in the main thread
            os.close(self._wake_r)
            os.close(self._wake_w)
            self._wake_r = self._wake_w = None
            raise TerminalError(f"Could not watch for terminal resizes: {e}") from e

    def _unwatch_resize(self) -> None:
        if self._wake_r is None or self._wake_w is None:
            return
        previous = self._previous_handler
        signal.signal(signal.SIGWINCH, signal.SIG_DFL if previous is None else previous)
        self._previous_handler = None
        os.close(self._wake_r)
        os.close(self._wake_w)
        self._wake_r = self._wake_w = None

    def _on_resize(self, signum, frame) -> None:
        if self._wake_w is None:
            return
        try:
            os.write(self._wake_w, b"\0")
        except BlockingIOError:
            # Pipe full: a wake-up is already pending
            pass

    def _drain_wake_pipe(self) -> None:
        assert self._wake_r is not None
        try:
            while os.read(self._wake_r, READ_SIZE):
                pass
        except BlockingIOError:
            pass
