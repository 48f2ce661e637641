"""
Strike Bonus Tracker - Carries strike bonuses across subsequent rolls.

Each slot counts how many of the upcoming rolls still owe an extra copy of
their pins to a strike. Two slots are enough: a strike in frame N and a
strike in frame N+1 can both be waiting on the same roll, but a third
strike is itself a roll and consumes one of them first.
"""

import logging


logger = logging.getLogger(__name__)

# Rolls that pay into a single strike's bonus
STRIKE_BONUS_ROLLS = 2


class StrikeBonusTracker:
    """
    Fixed two-slot counter for live strike bonuses.

    Usage:
        tracker = StrikeBonusTracker()
        tracker.add()                       # strike!
        multiplier = tracker.active_count() # extra copies for next roll
        tracker.decrement_all()
    """

    CAPACITY = 2

    def __init__(self, bonus_rolls: int = STRIKE_BONUS_ROLLS):
        self._bonus_rolls = bonus_rolls
        self._slots: list[int] = [0] * self.CAPACITY

    def __repr__(self) -> str:
        return f"<StrikeBonusTracker(slots={self._slots})>"

    @property
    def slots(self) -> tuple[int, ...]:
        """Snapshot of the slot counters."""
        return tuple(self._slots)

    def is_empty(self) -> bool:
        """True when no strike is waiting on any roll."""
        return all(slot == 0 for slot in self._slots)

    def has_active(self) -> bool:
        return not self.is_empty()

    def active_count(self) -> int:
        """
        Number of live strike bonuses.

        This is the multiplier applied to the next roll's pins.
        """
        return sum(1 for slot in self._slots if slot > 0)

    def decrement_all(self) -> None:
        """Consume one roll from every live bonus (saturating at 0)."""
        self._slots = [slot - 1 if slot > 0 else 0 for slot in self._slots]

    def add(self) -> None:
        """
        Install a new strike bonus in the first free slot.

        A full tracker cannot happen under the frame state machine; if it
        does, the new bonus is dropped and a warning is logged.
        """
        for index, slot in enumerate(self._slots):
            if slot == 0:
                self._slots[index] = self._bonus_rolls
                return

        logger.warning("Strike bonus dropped, tracker is full: %s", self._slots)
