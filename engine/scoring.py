"""
Scoring Engine - Core game logic for variant bowling.

The BowlingGame ingests one roll at a time, validates it against the
current frame, applies spare and strike bonuses, advances frames and
decides when the game is over. It runs independently of the console and
reports what happens through Qt Signals.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from PySide6.QtCore import QObject, Signal

from models.ruleset import RuleSet
from engine.rules import perfect_game_rolls
from engine.strike_bonus import StrikeBonusTracker


logger = logging.getLogger(__name__)


class GameClosedError(RuntimeError):
    """Raised when a roll is delivered to a game that is already over."""


class FramePhase(Enum):
    """Where the game stands within the current frame."""
    FIRST_ROLL = "first_roll"
    MID_FRAME = "mid_frame"
    AWAITING_BONUS = "awaiting_bonus"
    CLOSED = "closed"


@dataclass(frozen=True)
class ScoreState:
    """
    Immutable snapshot of a game.
    Emitted after every accepted roll.
    """
    score: int = 0
    current_frame: int = 1
    max_frames: int = 10
    pins: int = 10
    total_rolls: int = 0
    remaining_rolls_in_frame: int = 2
    frame_scores: tuple[int, ...] = ()
    pending_spares: int = 0
    strike_bonus_slots: tuple[int, ...] = (0, 0)
    phase: FramePhase = FramePhase.FIRST_ROLL
    is_closed: bool = False


class BowlingGame(QObject):
    """
    Frame/roll state machine for a single player's game.

    A roll is either accepted (the score and frame state move on) or
    rejected as a pin overflow, in which case nothing changes and the
    caller may try again. Rolling once the game is closed is a bug in the
    caller and raises GameClosedError.

    Usage:
        game = BowlingGame(RuleSet.mars())
        while not game.closed():
            if not game.roll(pins):
                ...  # re-prompt
        final = game.score()
    """

    # Signals
    roll_recorded = Signal(dict)        # roll details
    roll_rejected = Signal(dict)        # rejected roll details
    strike = Signal(int)                # frame number
    spare = Signal(int)                 # frame number
    frame_completed = Signal(int)       # frame number
    score_updated = Signal(object)      # ScoreState
    game_closed = Signal(int)           # final score

    def __init__(self, rules: Optional[RuleSet] = None):
        """
        Initialize a fresh game.

        Args:
            rules: Game variant (default: normal ten-pin rules)
        """
        super().__init__()
        self._rules = rules if rules is not None else RuleSet()

        self._score: int = 0
        self._pins: int = self._rules.initial_pins
        self._total_rolls: int = 0
        self._current_frame: int = 1
        self._remaining_rolls_in_frame: int = self._rules.rolls_per_frame
        self._frame_scores: list[int] = []

        # Spares waiting for the next roll
        self._sparing: int = 0
        self._striking_rolls = StrikeBonusTracker()

    def __repr__(self) -> str:
        return (
            f"<BowlingGame(frame={self._current_frame}/{self._rules.max_frames}, "
            f"score={self._score}, closed={self.closed()})>"
        )

    # ============ Public Contract ============

    def closed(self) -> bool:
        """
        True once the last frame is finished and every bonus is paid.

        The last frame keeps granting bonus rolls while a spare or a strike
        earned there is still owed.
        """
        return (
            self._last_frame()
            and self._remaining_rolls_in_frame == 0
            and self._sparing == 0
            and self._striking_rolls.is_empty()
        )

    def score(self) -> int:
        """Current cumulative score."""
        return self._score

    def roll(self, pins: int) -> bool:
        """
        Record a roll.

        Args:
            pins: Pins knocked down by this roll

        Returns:
            True if the roll was accepted, False if it would knock down more
            pins than the frame holds

        Raises:
            GameClosedError: The game is already over
            ValueError: pins is negative
        """
        if self.closed():
            raise GameClosedError("Game already closed.")

        if pins < 0:
            raise ValueError(f"Pins cannot be negative: {pins}")

        # Bonus rolls only happen in the last frame
        is_bonus_roll = self._last_frame_bonus()

        if self._pins_overflow(pins, is_bonus_roll):
            logger.info(
                "Rejected %d pins in frame %d (frame total %d of %d)",
                pins, self._current_frame, sum(self._frame_scores), self._pins,
            )
            self.roll_rejected.emit({
                "frame": self._current_frame,
                "pins": pins,
                "frame_total": sum(self._frame_scores),
                "frame_pins": self._pins,
            })
            return False

        frame = self._current_frame
        first_roll = self._is_first_roll_in_frame()
        later_roll = self._is_later_roll_in_frame()

        self._total_rolls += 1
        self._frame_scores.append(pins)

        if not is_bonus_roll:
            self._add_score(pins)

        if self._sparing > 0:
            self._add_score(pins)

        self._add_score(pins * self._striking_rolls.active_count())
        self._striking_rolls.decrement_all()

        is_strike = first_roll and pins == self._pins
        if is_strike:
            self._striking_rolls.add()
            self._remaining_rolls_in_frame = 0

        is_spare = self._update_sparing(later_roll)
        frame_done = self._update_frame_after_roll(is_strike, is_bonus_roll)

        logger.debug(
            "Roll %d: %d pins in frame %d%s, score %d",
            self._total_rolls, pins, frame,
            " (bonus)" if is_bonus_roll else "", self._score,
        )

        self.roll_recorded.emit({
            "roll": self._total_rolls,
            "frame": frame,
            "pins": pins,
            "bonus_roll": is_bonus_roll,
            "strike": is_strike,
            "spare": is_spare,
            "score": self._score,
        })
        if is_strike:
            self.strike.emit(frame)
        if is_spare:
            self.spare.emit(frame)
        if frame_done:
            self.frame_completed.emit(frame)

        self._emit_score_update()

        if self.closed():
            logger.info("Game closed with %d points after %d rolls", self._score, self._total_rolls)
            self.game_closed.emit(self._score)

        return True

    # ============ Roll Processing ============

    def _add_score(self, pins: int) -> None:
        self._score += pins

    def _last_frame(self) -> bool:
        return self._current_frame == self._rules.max_frames

    def _last_frame_bonus(self) -> bool:
        """A roll taken only to pay a spare or strike earned in the last frame."""
        return (
            self._last_frame()
            and self._remaining_rolls_in_frame == 0
            and (self._striking_rolls.has_active() or self._sparing > 0)
        )

    def _is_first_roll_in_frame(self) -> bool:
        return self._remaining_rolls_in_frame == self._rules.rolls_per_frame

    def _is_later_roll_in_frame(self) -> bool:
        """A regular roll that follows at least one roll in the same frame."""
        return self._remaining_rolls_in_frame not in (self._rules.rolls_per_frame, 0)

    def _pins_overflow(self, pins: int, is_bonus_roll: bool) -> bool:
        if pins > self._pins:
            return True
        if is_bonus_roll or not self._is_later_roll_in_frame():
            return False
        return sum(self._frame_scores) + pins > self._pins

    def _update_sparing(self, later_roll: bool) -> bool:
        """
        Pay off one pending spare and declare a new one if this roll
        cleared the remaining pins.

        Returns:
            True if this roll was a spare
        """
        if self._sparing > 0:
            self._sparing -= 1

        is_spare = later_roll and sum(self._frame_scores) == self._pins
        if is_spare:
            self._sparing += 1
        return is_spare

    def _update_frame_after_roll(self, is_strike: bool, is_bonus_roll: bool) -> bool:
        """
        Count down the rolls left in the frame and move to the next frame
        when this one is over.

        Returns:
            True if this roll finished its frame
        """
        if self._remaining_rolls_in_frame > 0:
            self._remaining_rolls_in_frame -= 1

        frame_done = not is_bonus_roll and (is_strike or self._remaining_rolls_in_frame == 0)

        if not self._last_frame() and frame_done:
            self._set_to_next_frame()

        return frame_done

    def _set_to_next_frame(self) -> None:
        self._remaining_rolls_in_frame = self._rules.rolls_per_frame
        self._current_frame += 1
        self._frame_scores.clear()
        self._pins += self._rules.pins_increment_per_frame

    def _emit_score_update(self) -> None:
        self.score_updated.emit(self.get_score_state())

    # ============ Query Methods ============

    @property
    def rules(self) -> RuleSet:
        return self._rules

    @property
    def pins(self) -> int:
        """Pin count for the current frame."""
        return self._pins

    @property
    def current_frame(self) -> int:
        return self._current_frame

    @property
    def remaining_rolls_in_frame(self) -> int:
        return self._remaining_rolls_in_frame

    @property
    def total_rolls(self) -> int:
        return self._total_rolls

    @property
    def frame_scores(self) -> tuple[int, ...]:
        """Pins rolled so far in the current frame."""
        return tuple(self._frame_scores)

    @property
    def pending_spares(self) -> int:
        return self._sparing

    @property
    def strike_bonus_slots(self) -> tuple[int, ...]:
        return self._striking_rolls.slots

    @property
    def phase(self) -> FramePhase:
        """Current position in the per-frame state machine."""
        if self.closed():
            return FramePhase.CLOSED
        if self._remaining_rolls_in_frame == 0:
            return FramePhase.AWAITING_BONUS
        if self._is_first_roll_in_frame():
            return FramePhase.FIRST_ROLL
        return FramePhase.MID_FRAME

    def get_score_state(self) -> ScoreState:
        """Get the current score state snapshot."""
        return ScoreState(
            score=self._score,
            current_frame=self._current_frame,
            max_frames=self._rules.max_frames,
            pins=self._pins,
            total_rolls=self._total_rolls,
            remaining_rolls_in_frame=self._remaining_rolls_in_frame,
            frame_scores=tuple(self._frame_scores),
            pending_spares=self._sparing,
            strike_bonus_slots=self._striking_rolls.slots,
            phase=self.phase,
            is_closed=self.closed(),
        )


def play_game(rolls: Iterable[int], rules: Optional[RuleSet] = None) -> BowlingGame:
    """
    Feed a sequence of rolls into a new game.

    Rejected rolls are skipped, as a console player would simply re-roll.

    Returns:
        The game after the last roll
    """
    game = BowlingGame(rules)
    for pins in rolls:
        game.roll(pins)
    return game


def perfect_score(rules: Optional[RuleSet] = None) -> int:
    """Highest score reachable under a rule set (300 for normal rules)."""
    rules = rules if rules is not None else RuleSet()
    return play_game(perfect_game_rolls(rules), rules).score()
