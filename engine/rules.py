"""
Rules arithmetic - Derived numbers for a bowling RuleSet.

Pin counts per frame and the roll sequence of a perfect game. These are
pure functions over a RuleSet; the game engine owns the state machine.
"""

from models.ruleset import RuleSet
from engine.strike_bonus import STRIKE_BONUS_ROLLS


def pins_for_frame(rules: RuleSet, frame: int) -> int:
    """
    Pin count standing at the start of a frame.

    Args:
        rules: The rule set in play
        frame: 1-indexed frame number

    Returns:
        initial_pins + (frame - 1) * pins_increment_per_frame
    """
    if not 1 <= frame <= rules.max_frames:
        raise ValueError(f"Frame must be between 1 and {rules.max_frames}, got {frame}")

    return rules.initial_pins + (frame - 1) * rules.pins_increment_per_frame


def frame_pin_schedule(rules: RuleSet) -> tuple[int, ...]:
    """Pin counts for every frame of the game, in order."""
    return tuple(pins_for_frame(rules, frame) for frame in range(1, rules.max_frames + 1))


def perfect_game_rolls(rules: RuleSet) -> list[int]:
    """
    Rolls of a perfect game: a strike in every frame, then the bonus rolls
    owed by the final strike (taken at the last frame's pin count).
    """
    schedule = frame_pin_schedule(rules)
    return list(schedule) + [schedule[-1]] * STRIKE_BONUS_ROLLS
