"""
Local time formatting.

The clock shows one of four fixed layouts. They form a closed set, so they are
modelled as an Enum picked by a pure function of the two boolean settings
rather than as format strings passed around the program.

Formatting is done by hand instead of through strftime: "%-I" (hour without a
leading zero) is not portable, and "%p" follows the C locale, while the clock
always shows the ASCII AM/PM marker.
"""

import datetime
from collections.abc import Callable
from enum import Enum

from .errors import ClockError
from .glyphs import RenderedTime, segmentify


class TimeLayout(Enum):
    """The four time layouts the clock can show."""

    TWELVE_HOUR = "h:mm AM/PM"
    TWELVE_HOUR_SECONDS = "h:mm:ss AM/PM"
    TWENTY_FOUR_HOUR = "HH:mm"
    TWENTY_FOUR_HOUR_SECONDS = "HH:mm:ss"

    @property
    def twenty_four_hour(self) -> bool:
        return self in (TimeLayout.TWENTY_FOUR_HOUR, TimeLayout.TWENTY_FOUR_HOUR_SECONDS)

    @property
    def show_seconds(self) -> bool:
        return self in (TimeLayout.TWELVE_HOUR_SECONDS, TimeLayout.TWENTY_FOUR_HOUR_SECONDS)


def select_layout(twenty_four_hour: bool, show_seconds: bool) -> TimeLayout:
    """Pick the layout for a (24-hour, seconds) settings pair."""
    if twenty_four_hour:
        return TimeLayout.TWENTY_FOUR_HOUR_SECONDS if show_seconds else TimeLayout.TWENTY_FOUR_HOUR
    return TimeLayout.TWELVE_HOUR_SECONDS if show_seconds else TimeLayout.TWELVE_HOUR


def format_time(layout: TimeLayout, moment: datetime.datetime | datetime.time) -> str:
    """Render moment in the given layout.

    Examples for 15:05:00:
        TWELVE_HOUR              -> "3:05 PM"
        TWELVE_HOUR_SECONDS      -> "3:05:00 PM"
        TWENTY_FOUR_HOUR         -> "15:05"
        TWENTY_FOUR_HOUR_SECONDS -> "15:05:00"
    """
    if layout.twenty_four_hour:
        text = f"{moment.hour:02d}:{moment.minute:02d}"
        if layout.show_seconds:
            text += f":{moment.second:02d}"
        return text

    # 0 -> 12 AM, 12 -> 12 PM
    hour = moment.hour % 12 or 12
    marker = "AM" if moment.hour < 12 else "PM"
    text = f"{hour}:{moment.minute:02d}"
    if layout.show_seconds:
        text += f":{moment.second:02d}"
    return f"{text} {marker}"


def local_now() -> datetime.datetime:
    """Current wall-clock time with the local UTC offset attached.

    Raises:
        ClockError: if the local time or its offset cannot be determined.
    """
    try:
        now = datetime.datetime.now().astimezone()
    except (OSError, OverflowError, ValueError) as e:
        raise ClockError(f"Could not determine the local time: {e}") from e
    if now.utcoffset() is None:
        raise ClockError("Could not determine the local UTC offset")
    return now


def current_time(
    layout: TimeLayout,
    now: Callable[[], datetime.datetime] = local_now,
) -> RenderedTime:
    """Read the clock and return the glyph-encoded time for layout.

    A fresh value is produced on every call; nothing is cached across frames.
    """
    try:
        text = format_time(layout, now())
    except ClockError:
        raise
    except (AttributeError, TypeError, ValueError) as e:
        raise ClockError(f"Could not format the current time: {e}") from e
    return segmentify(text)
