"""
Game Logger - Writes a running account of a game to the log.

Listens to a BowlingGame's signals rather than being called by it, so the
engine stays free of reporting concerns.
"""

import logging
from typing import Optional

from engine.scoring import BowlingGame, perfect_score


class GameLogger:
    """
    Logs the progress of one game.

    Usage:
        game = BowlingGame(rules)
        GameLogger().attach(game)
    """

    LOGGER_NAME = "bowling.game"

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(self.LOGGER_NAME)

    def attach(self, game: BowlingGame) -> None:
        """Connect to every signal the game emits."""
        self.log_game_start(game)

        game.roll_recorded.connect(self.log_roll)
        game.roll_rejected.connect(self.log_rejected_roll)
        game.strike.connect(self.log_strike)
        game.spare.connect(self.log_spare)
        game.frame_completed.connect(self.log_frame_complete)
        game.game_closed.connect(self.log_game_complete)

    def log_game_start(self, game: BowlingGame) -> None:
        rules = game.rules
        self.logger.info(
            "=== GAME START === %d frames, %d rolls per frame, %d pins (+%d per frame), perfect game %d",
            rules.max_frames, rules.rolls_per_frame,
            rules.initial_pins, rules.pins_increment_per_frame, perfect_score(rules),
        )

    def log_roll(self, roll: dict) -> None:
        self.logger.debug(
            "Frame %d Roll %d | Pins: %d | Bonus roll: %s | Score: %d",
            roll["frame"], roll["roll"], roll["pins"], roll["bonus_roll"], roll["score"],
        )

    def log_rejected_roll(self, roll: dict) -> None:
        self.logger.info(
            "Frame %d | %d pins rejected, %d of %d already down",
            roll["frame"], roll["pins"], roll["frame_total"], roll["frame_pins"],
        )

    def log_strike(self, frame: int) -> None:
        self.logger.info("Strike in frame %d", frame)

    def log_spare(self, frame: int) -> None:
        self.logger.info("Spare in frame %d", frame)

    def log_frame_complete(self, frame: int) -> None:
        self.logger.info("Completed frame %d", frame)

    def log_game_complete(self, final_score: int) -> None:
        self.logger.info("=== GAME COMPLETE === Final score: %d", final_score)
