"""
Rule set model for bowling game variants.

A RuleSet generalises ten-pin bowling along three axes: the number of
frames, the rolls allowed per frame, and the pin count (fixed, or growing
by a fixed increment at each new frame).
"""

import enum

from pydantic import BaseModel, ConfigDict, Field


class GameType(enum.Enum):
    """Rule presets offered by the console menu."""
    NORMAL = "normal"
    MARS = "mars"
    VENUS = "venus"

    @property
    def menu_key(self) -> str:
        """The digit that selects this preset in the startup menu."""
        return str(list(GameType).index(self) + 1)

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} rules"


class RuleSet(BaseModel):
    """
    Immutable game configuration.

    Defaults describe the traditional game: 10 frames of 2 rolls at 10 pins.
    Override individual fields at construction time, or derive a variant
    with ``with_overrides(...)``, which validates the changed fields.
    """
    model_config = ConfigDict(frozen=True)

    rolls_per_frame: int = Field(2, ge=1, le=255)
    max_frames: int = Field(10, ge=1, le=255)
    initial_pins: int = Field(10, ge=1, le=255)
    pins_increment_per_frame: int = Field(0, ge=0, le=255)

    def with_overrides(self, **changes) -> "RuleSet":
        """Copy of this rule set with some fields replaced, range-checked."""
        return self.model_validate({**self.model_dump(), **changes})

    @classmethod
    def normal(cls) -> "RuleSet":
        return cls()

    @classmethod
    def mars(cls) -> "RuleSet":
        """Twelve frames, three rolls per frame."""
        return cls(max_frames=12, rolls_per_frame=3)

    @classmethod
    def venus(cls) -> "RuleSet":
        """One pin in the first frame, one more pin in every frame after."""
        return cls(initial_pins=1, pins_increment_per_frame=1)

    @classmethod
    def for_game_type(cls, game_type: GameType) -> "RuleSet":
        return RULE_PRESETS[game_type]()


RULE_PRESETS = {
    GameType.NORMAL: RuleSet.normal,
    GameType.MARS: RuleSet.mars,
    GameType.VENUS: RuleSet.venus,
}
