import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from rich.color import Color

from .colour import parse_colour
from .console import err_console
from .timefmt import TimeLayout, select_layout

# Load environment variables from .env file
load_dotenv()

# Configuration Defaults
DEFAULT_CONFIG = {
    "SEGCLOCK_24H": "false",
    "SEGCLOCK_SECONDS": "false",
    "SEGCLOCK_COLOUR": "",
}

# Redraw cadence in seconds
POLL_INTERVAL = 1.0
POLL_INTERVAL_SECONDS = 0.5

# File Paths
SEGCLOCK_DIR = Path(os.getenv("SEGCLOCK_DIR", str(Path.home() / ".segclock")))
CONFIG_FILE = Path(os.getenv("SEGCLOCK_CONFIG_FILE", str(SEGCLOCK_DIR / "config.json")))


@dataclass(frozen=True)
class Configuration:
    """Settings for one run of the clock. Never changes once built."""

    twenty_four_hour: bool = False
    show_seconds: bool = False
    colour: Color | None = None

    @property
    def layout(self) -> TimeLayout:
        return select_layout(self.twenty_four_hour, self.show_seconds)

    @property
    def poll_interval(self) -> float:
        """How long the loop waits for input before redrawing."""
        return POLL_INTERVAL_SECONDS if self.show_seconds else POLL_INTERVAL


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from file"""
    config_file = path or CONFIG_FILE
    if config_file.exists():
        try:
            with open(config_file) as f:
                config = json.load(f)
            if isinstance(config, dict):
                return config
            err_console.print(
                f"[yellow]Warning: Ignoring config file {config_file}: expected a JSON object[/yellow]"
            )
        except (OSError, ValueError) as e:
            err_console.print(f"[yellow]Warning: Could not load config file: {e}[/yellow]")
    return {}


def get_setting(key: str, default: str, config: dict[str, Any] | None = None) -> str:
    """Get setting with priority: Env Var > Config File > Default"""
    # 1. Environment Variable
    env_val = os.getenv(key)
    if env_val:
        return env_val

    # 2. Config File
    if config is None:
        config = load_config()
    if key in config:
        return str(config[key])

    # 3. Default
    return default


def get_bool_setting(key: str, default: bool, config: dict[str, Any] | None = None) -> bool:
    """Get boolean setting with priority: Env Var > Config File > Default"""
    value = get_setting(key, str(default).lower(), config)
    return value.lower() in ("true", "1", "yes", "on")


def build_configuration(
    twenty_four_hour: bool = False,
    show_seconds: bool = False,
    colour: str | None = None,
    config_file: Path | None = None,
) -> Configuration:
    """Merge command-line values over env vars, the config file and defaults.

    Flags can only switch an option on. A colour given on the command line
    replaces any configured one.

    Raises:
        ConfigurationError: if the effective colour cannot be parsed.
    """
    config = load_config(config_file)

    if colour is None:
        colour = get_setting("SEGCLOCK_COLOUR", DEFAULT_CONFIG["SEGCLOCK_COLOUR"], config) or None

    return Configuration(
        twenty_four_hour=twenty_four_hour or get_bool_setting("SEGCLOCK_24H", False, config),
        show_seconds=show_seconds or get_bool_setting("SEGCLOCK_SECONDS", False, config),
        colour=parse_colour(colour) if colour is not None else None,
    )
