"""
Bowling Services

Console command parsing and game logging.
"""

from services.commands import (
    Command,
    CommandError,
    RollCommand,
    ScoreCommand,
    ExitCommand,
    parse_command,
    parse_game_type,
)
from services.game_logger import GameLogger

__all__ = [
    "Command",
    "CommandError",
    "RollCommand",
    "ScoreCommand",
    "ExitCommand",
    "parse_command",
    "parse_game_type",
    "GameLogger",
]
