"""segclock - Full-screen terminal clock with segmented-digit glyphs"""

from .clock import QUIT_KEYS, Clock, LoopState, run_clock
from .colour import STANDARD_COLOURS, parse_colour
from .config import (
    CONFIG_FILE,
    DEFAULT_CONFIG,
    Configuration,
    build_configuration,
    get_bool_setting,
    get_setting,
    load_config,
)
from .console import console, err_console
from .errors import ClockError, ConfigurationError, SegclockError, TerminalError
from .glyphs import RenderedTime, encode_char, segmentify
from .screen import Screen
from .terminal import Dimensions, KeyEvent, ResizeEvent, Terminal, decode_keys
from .timefmt import TimeLayout, current_time, format_time, local_now, select_layout
from .utils import get_version, start_column

__all__ = [
    # Clock
    "QUIT_KEYS",
    "Clock",
    "LoopState",
    "run_clock",
    # Colour
    "STANDARD_COLOURS",
    "parse_colour",
    # Config
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "Configuration",
    "build_configuration",
    "get_bool_setting",
    "get_setting",
    "load_config",
    # Console
    "console",
    "err_console",
    # Errors
    "ClockError",
    "ConfigurationError",
    "SegclockError",
    "TerminalError",
    # Glyphs
    "RenderedTime",
    "encode_char",
    "segmentify",
    # Screen
    "Screen",
    # Terminal
    "Dimensions",
    "KeyEvent",
    "ResizeEvent",
    "Terminal",
    "decode_keys",
    # Time
    "TimeLayout",
    "current_time",
    "format_time",
    "local_now",
    "select_layout",
    # Utils
    "get_version",
    "start_column",
]
