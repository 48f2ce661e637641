"""
Console command parsing.

Turns a line typed at the prompt into a command value. Parse errors never
reach the game engine; they surface as CommandError messages.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

from models.ruleset import GameType


ROLL_PATTERN = re.compile(r"roll\s+(?P<pins>10|[0-9])\s*$")


class CommandError(ValueError):
    """A line that is not a valid console command."""


@dataclass(frozen=True)
class RollCommand:
    """Pins knocked down by one roll."""
    pins: int


@dataclass(frozen=True)
class ScoreCommand:
    """Print the current score."""


@dataclass(frozen=True)
class ExitCommand:
    """Leave the game."""


Command = Union[RollCommand, ScoreCommand, ExitCommand]


def parse_command(line: str) -> Command:
    """
    Parse one console line.

    Commands are case-insensitive and surrounding whitespace is ignored:
    ``roll N`` (N is 0-10), ``score`` and ``exit``.

    Raises:
        CommandError: "invalid pins" for a malformed roll, otherwise
            "invalid command"
    """
    normalized = line.strip().lower()

    if normalized.startswith("roll"):
        match = ROLL_PATTERN.match(normalized)
        if match is None:
            raise CommandError("invalid pins")
        return RollCommand(pins=int(match.group("pins")))

    if normalized == "score":
        return ScoreCommand()
    if normalized == "exit":
        return ExitCommand()

    raise CommandError("invalid command")


def parse_game_type(line: str) -> Optional[GameType]:
    """Map a startup menu choice to its GameType, or None if unrecognised."""
    choice = line.strip()
    for game_type in GameType:
        if game_type.menu_key == choice:
            return game_type
    return None
