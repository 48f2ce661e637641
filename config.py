"""
Bowling Configuration

Centralized settings and constants for the console application.
"""

import logging
import sys
from dataclasses import dataclass


# Application info
APP_NAME = "bowling"
APP_TITLE = "SCORING BOWLING"
APP_VERSION = "1.0.0"


@dataclass(frozen=True)
class ConsoleSettings:
    """Console prompts and messages."""
    # Prompt shown before each command
    command_prompt: str = "Command: "

    # Prompt shown under the rules menu
    menu_prompt: str = "Select game type: "

    # Command help printed at startup
    help_lines: tuple[str, ...] = (
        "  Commands:",
        "    roll N - N pins rolled (0 to 10)",
        "    score - print score of current game",
        "    exit - exit from game",
    )


@dataclass(frozen=True)
class LogSettings:
    """Logging settings."""
    # Default level for the console entry point
    default_level: str = "WARNING"

    # Record format
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    datefmt: str = "%H:%M:%S"


# Singleton instances
CONSOLE_SETTINGS = ConsoleSettings()
LOG_SETTINGS = LogSettings()


def init_logging(level: str = LOG_SETTINGS.default_level, stream=None) -> None:
    """
    Route log records to stderr.

    stdout is reserved for the game dialogue, so handlers never write there.
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_SETTINGS.format, datefmt=LOG_SETTINGS.datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())


def init_config(level: str = LOG_SETTINGS.default_level) -> None:
    """Initialize configuration for a console session."""
    init_logging(level)
