"""
Error hierarchy for segclock.

Every fatal condition the clock can hit is raised as a subclass of
SegclockError. Each class carries the process exit status that main() uses
when the error reaches the top level, so the mapping from "what went wrong"
to "how the process exits" lives in one place.

Usage errors (unknown flags, missing flag values) are not represented here:
argparse reports those itself and exits with status 2.
"""


class SegclockError(Exception):
    """Base class for all segclock errors."""

    exit_code = 1


class ConfigurationError(SegclockError):
    """A setting has a value that cannot be used, e.g. a malformed colour."""

    exit_code = 2


class TerminalError(SegclockError):
    """The terminal could not be switched into or out of a mode, or written to."""


class ClockError(SegclockError):
    """The local time could not be read or formatted."""
