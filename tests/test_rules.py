"""
Unit tests for RuleSet presets and derived rule arithmetic.
"""

import pytest
from pydantic import ValidationError

from models.ruleset import RuleSet, GameType, RULE_PRESETS
from engine.rules import pins_for_frame, frame_pin_schedule, perfect_game_rolls


class TestRuleSetDefaults:
    """Tests for the default rule set."""

    def test_defaults_are_ten_pin(self):
        """Default rules are 10 frames of 2 rolls at 10 pins."""
        rules = RuleSet()

        assert rules.rolls_per_frame == 2
        assert rules.max_frames == 10
        assert rules.initial_pins == 10
        assert rules.pins_increment_per_frame == 0

    def test_normal_preset_matches_defaults(self):
        """The normal preset is the default rule set."""
        assert RuleSet.normal() == RuleSet()

    def test_fields_can_be_overridden(self):
        """Individual fields may be set at construction."""
        rules = RuleSet(max_frames=5, initial_pins=5)

        assert rules.max_frames == 5
        assert rules.initial_pins == 5
        assert rules.rolls_per_frame == 2

    def test_with_overrides_leaves_source_untouched(self):
        """Deriving a variant does not change the source rule set."""
        rules = RuleSet()
        variant = rules.with_overrides(rolls_per_frame=3)

        assert variant.rolls_per_frame == 3
        assert variant.max_frames == 10
        assert rules.rolls_per_frame == 2

    def test_with_overrides_validates_ranges(self):
        """Derived variants are range-checked like new rule sets."""
        with pytest.raises(ValidationError):
            RuleSet().with_overrides(rolls_per_frame=0)
        with pytest.raises(ValidationError):
            RuleSet.mars().with_overrides(max_frames=0)
        with pytest.raises(ValidationError):
            RuleSet().with_overrides(initial_pins=256)

    def test_with_overrides_result_is_frozen(self):
        variant = RuleSet().with_overrides(max_frames=5)

        with pytest.raises(ValidationError):
            variant.max_frames = 6


class TestRuleSetValidation:
    """Tests for field range checks."""

    def test_rule_set_is_frozen(self):
        """A rule set cannot be changed after construction."""
        rules = RuleSet()

        with pytest.raises(ValidationError):
            rules.max_frames = 12

    def test_zero_frames_rejected(self):
        """At least one frame is required."""
        with pytest.raises(ValidationError):
            RuleSet(max_frames=0)

    def test_zero_rolls_rejected(self):
        """At least one roll per frame is required."""
        with pytest.raises(ValidationError):
            RuleSet(rolls_per_frame=0)

    def test_zero_initial_pins_rejected(self):
        """At least one pin is required."""
        with pytest.raises(ValidationError):
            RuleSet(initial_pins=0)

    def test_values_above_255_rejected(self):
        """Every field is capped at 255."""
        with pytest.raises(ValidationError):
            RuleSet(initial_pins=256)
        with pytest.raises(ValidationError):
            RuleSet(pins_increment_per_frame=256)

    def test_negative_increment_rejected(self):
        """The pin increment cannot shrink the pin count."""
        with pytest.raises(ValidationError):
            RuleSet(pins_increment_per_frame=-1)

    def test_zero_increment_allowed(self):
        """A fixed pin count is the usual case."""
        assert RuleSet(pins_increment_per_frame=0).pins_increment_per_frame == 0


class TestRulePresets:
    """Tests for the Mars and Venus presets."""

    def test_mars_preset(self):
        """Mars rules play 12 frames of 3 rolls."""
        rules = RuleSet.mars()

        assert rules.max_frames == 12
        assert rules.rolls_per_frame == 3
        assert rules.initial_pins == 10
        assert rules.pins_increment_per_frame == 0

    def test_venus_preset(self):
        """Venus rules start at 1 pin and add 1 pin per frame."""
        rules = RuleSet.venus()

        assert rules.initial_pins == 1
        assert rules.pins_increment_per_frame == 1
        assert rules.max_frames == 10
        assert rules.rolls_per_frame == 2

    def test_for_game_type(self):
        """Each game type builds its preset."""
        assert RuleSet.for_game_type(GameType.NORMAL) == RuleSet.normal()
        assert RuleSet.for_game_type(GameType.MARS) == RuleSet.mars()
        assert RuleSet.for_game_type(GameType.VENUS) == RuleSet.venus()

    def test_every_game_type_has_a_preset(self):
        """The preset table covers every game type."""
        assert set(RULE_PRESETS) == set(GameType)

    def test_menu_keys(self):
        """Menu digits follow declaration order."""
        assert GameType.NORMAL.menu_key == "1"
        assert GameType.MARS.menu_key == "2"
        assert GameType.VENUS.menu_key == "3"

    def test_labels(self):
        assert GameType.MARS.label == "Mars rules"


class TestRulesArithmetic:
    """Tests for derived pin counts."""

    def test_fixed_pins_every_frame(self):
        """Normal rules keep 10 pins in every frame."""
        assert frame_pin_schedule(RuleSet()) == (10,) * 10

    def test_venus_pins_grow(self):
        """Venus pin counts grow 1, 2, 3, ... 10."""
        assert frame_pin_schedule(RuleSet.venus()) == tuple(range(1, 11))

    def test_pins_for_frame_formula(self):
        """Pins at frame f are initial + (f - 1) * increment."""
        rules = RuleSet(initial_pins=3, pins_increment_per_frame=2)

        assert pins_for_frame(rules, 1) == 3
        assert pins_for_frame(rules, 4) == 9

    def test_pins_for_frame_out_of_range(self):
        """Frames outside the game are rejected."""
        with pytest.raises(ValueError):
            pins_for_frame(RuleSet(), 0)
        with pytest.raises(ValueError):
            pins_for_frame(RuleSet(), 11)

    def test_perfect_game_rolls_normal(self):
        """A perfect normal game is 12 strikes."""
        assert perfect_game_rolls(RuleSet()) == [10] * 12

    def test_perfect_game_rolls_mars(self):
        """A perfect Mars game is 14 strikes."""
        assert perfect_game_rolls(RuleSet.mars()) == [10] * 14

    def test_perfect_game_rolls_venus(self):
        """Venus bonus rolls use the last frame's pin count."""
        assert perfect_game_rolls(RuleSet.venus()) == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 10, 10]
