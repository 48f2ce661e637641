"""
Bowling Game Engine

Core scoring logic for variant bowling.
This module contains no console dependencies.
"""

from engine.scoring import (
    BowlingGame,
    ScoreState,
    FramePhase,
    GameClosedError,
    play_game,
    perfect_score,
)
from engine.strike_bonus import StrikeBonusTracker, STRIKE_BONUS_ROLLS
from engine.rules import pins_for_frame, frame_pin_schedule, perfect_game_rolls

__all__ = [
    "BowlingGame",
    "ScoreState",
    "FramePhase",
    "GameClosedError",
    "play_game",
    "perfect_score",
    "StrikeBonusTracker",
    "STRIKE_BONUS_ROLLS",
    "pins_for_frame",
    "frame_pin_schedule",
    "perfect_game_rolls",
]
