"""Dice expressions for the resolution engine.

Provides a symbolic dice tree that can be parsed, rolled, exploded and
displayed, plus d20 rolling with advantage/disadvantage.

Usage:
    >>> from arbiter.dice import parse_dice, roll_d20, RollMode
    >>> expr = parse_dice("1d4 + 1d20 + 1")
    >>> expr.display()
    '1d20 + 1d4 + 1'
    >>> natural = roll_d20(RollMode.ADVANTAGE)
"""

# Types
from arbiter.dice.types import DamageType, DieFace, RollMode

# Nodes
from arbiter.dice.nodes import (
    Constant,
    Damage,
    DiceNode,
    Die,
    Sequence,
    d4,
    d6,
    d8,
    d10,
    d12,
    d20,
    die,
    display,
    evaluate,
    explode,
)

# Parser
from arbiter.dice.parser import parse_damage, parse_dice

# Randomness
from arbiter.dice.rng import get_rng, seed_rng
from arbiter.dice.roller import roll, roll_d20

__all__ = [
    # Types
    "DamageType",
    "DieFace",
    "RollMode",
    # Nodes
    "Constant",
    "Damage",
    "DiceNode",
    "Die",
    "Sequence",
    "d4",
    "d6",
    "d8",
    "d10",
    "d12",
    "d20",
    "die",
    "display",
    "evaluate",
    "explode",
    # Parser
    "parse_damage",
    "parse_dice",
    # Randomness
    "get_rng",
    "seed_rng",
    "roll",
    "roll_d20",
]
