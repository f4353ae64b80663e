"""
Utility functions for segclock.

Small pure helpers shared by the screen and the command line:
  - Package version lookup (for --version)
  - Horizontal centering arithmetic
"""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Get the installed package version from Python package metadata.

    Returns "dev" when running from source without installing.
    """
    try:
        return version("segclock")
    except PackageNotFoundError:
        return "dev"


def start_column(columns: int, glyph_count: int) -> int:
    """Column at which a glyph_count-wide line starts when centered.

    Each half is rounded down separately, and the result saturates at 0 when
    the text is wider than the terminal:

        start_column(80, 10) == 35
        start_column(80, 81) == 0
    """
    return max(0, columns // 2 - glyph_count // 2)
