"""
Command-line entry point.

Parses flags, merges them with the environment and config file, runs the
clock and turns any fatal error into one message on stderr plus an exit
status:

  0  the user quit, or --help / --version was shown
  1  the terminal or the system clock failed
  2  a flag or a setting was invalid
"""

import argparse
import sys

from rich.markup import escape

from .clock import run_clock
from .colour import STANDARD_COLOURS
from .config import CONFIG_FILE, build_configuration
from .console import err_console
from .errors import SegclockError
from .utils import get_version


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="segclock",
        description="Full-screen terminal clock drawn with segmented-digit glyphs. "
        "Press q or Escape to quit.",
        epilog=f"Settings can also come from SEGCLOCK_24H, SEGCLOCK_SECONDS and "
        f"SEGCLOCK_COLOUR in the environment, a .env file, or {CONFIG_FILE}.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    parser.add_argument(
        "-24", dest="twenty_four_hour", action="store_true", help="use a 24-hour clock"
    )
    parser.add_argument(
        "--seconds", dest="show_seconds", action="store_true", help="include seconds"
    )
    parser.add_argument(
        "-c",
        "--color",
        "--colour",
        dest="colour",
        metavar="COLOUR",
        help=f"text colour: #RRGGBB or one of {', '.join(STANDARD_COLOURS)}",
    )
    return parser


def report(e: BaseException) -> None:
    err_console.print(f"[red]Error: {escape(str(e))}[/red]")


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        config = build_configuration(
            twenty_four_hour=args.twenty_four_hour,
            show_seconds=args.show_seconds,
            colour=args.colour,
        )
        run_clock(config)
    except SegclockError as e:
        report(e)
        sys.exit(e.exit_code)
    except OSError as e:
        report(e)
        sys.exit(1)
    except KeyboardInterrupt:
        err_console.print("[yellow]Interrupted.[/yellow]")
        sys.exit(1)
    except Exception as e:
        report(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
