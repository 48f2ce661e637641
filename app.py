"""
Bowling Application Controller

Console REPL that wires the command parser to a BowlingGame.
"""

import logging
import sys
from typing import Optional, TextIO

from engine.scoring import BowlingGame
from models.ruleset import GameType, RuleSet
from services.commands import (
    CommandError,
    ExitCommand,
    RollCommand,
    ScoreCommand,
    parse_command,
    parse_game_type,
)
from services.game_logger import GameLogger
from config import APP_TITLE, CONSOLE_SETTINGS


logger = logging.getLogger(__name__)


class BowlingApp:
    """
    Top-level console controller.

    Reads one line per prompt from stdin and writes the dialogue to stdout.
    A game is created once the player picks a rule preset and is discarded
    when it closes or the player exits.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

        # Active game (created after the rules menu)
        self.game: Optional[BowlingGame] = None
        self.game_logger = GameLogger()

    def run(self) -> int:
        """
        Run a full session.

        Returns:
            Process exit code
        """
        self._print_banner()

        game_type = self.select_game_type()
        if game_type is None:
            self._write("Bye.")
            return 0

        self.game = self.create_game(RuleSet.for_game_type(game_type))

        while not self.game.closed():
            line = self._prompt(CONSOLE_SETTINGS.command_prompt)
            if line is None:
                logger.info("Input closed before the game finished")
                self._write("Bye.")
                return 0

            try:
                command = parse_command(line)
            except CommandError as e:
                self._write(f"Error: {e}")
                continue

            if isinstance(command, ExitCommand):
                self._write("Bye.")
                return 0
            if isinstance(command, ScoreCommand):
                self._write(f"Score: {self.game.score()}")
            elif isinstance(command, RollCommand):
                self._write(f"Rolled {command.pins} pins")
                if not self.game.roll(command.pins):
                    self._write("Invalid pins")

        self._write(f"Game over - final score: {self.game.score()}")
        return 0

    def select_game_type(self) -> Optional[GameType]:
        """
        Ask for a rule preset until a valid choice is made.

        Returns:
            The chosen GameType, or None if input ran out
        """
        menu = "  ".join(f"{game_type.menu_key}) {game_type.label}" for game_type in GameType)

        while True:
            self._write(menu)
            line = self._prompt(CONSOLE_SETTINGS.menu_prompt)
            if line is None:
                return None

            game_type = parse_game_type(line)
            if game_type is not None:
                return game_type

    def create_game(self, rules: RuleSet) -> BowlingGame:
        """Create a game for the chosen rules and attach the game logger."""
        game = BowlingGame(rules)
        self.game_logger.attach(game)
        return game

    def _print_banner(self) -> None:
        self._write(APP_TITLE)
        for line in CONSOLE_SETTINGS.help_lines:
            self._write(line)
        self._write("")

    def _prompt(self, text: str) -> Optional[str]:
        """Print a prompt and read one line; None at end of input."""
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line

    def _write(self, text: str) -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()
