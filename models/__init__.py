"""
Bowling Models

Validated configuration models for bowling game variants.
"""

from models.ruleset import RuleSet, GameType, RULE_PRESETS

__all__ = [
    "RuleSet",
    "GameType",
    "RULE_PRESETS",
]
