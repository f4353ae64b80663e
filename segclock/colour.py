"""
Colour argument parsing.

Accepts the forms documented in --help and nothing else:

  - "#RRGGBB" hex (case-insensitive), giving a truecolor Color
  - one of the eight standard ANSI names, giving the terminal's own palette entry

Rich's Color.parse understands many more spellings (color(N), rgb(...),
bright_red, ...). Those are rejected here so the accepted set stays the one
the help text promises.
"""

import re

from rich.color import Color

from .errors import ConfigurationError

STANDARD_COLOURS = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def parse_colour(value: str) -> Color:
    """Parse a colour setting into a Rich Color.

    Raises:
        ConfigurationError: if value is neither #RRGGBB nor a standard colour name.
    """
    text = value.strip()

    match = _HEX_RE.match(text)
    if match:
        red, green, blue = (int(part, 16) for part in match.groups())
        return Color.from_rgb(red, green, blue)

    name = text.lower()
    if name in STANDARD_COLOURS:
        return Color.parse(name)

    raise ConfigurationError(
        f"Invalid colour {value!r}: expected #RRGGBB or one of {', '.join(STANDARD_COLOURS)}"
    )
