"""Core dice rolling helpers.

The d20 is rolled for attacks, saves, checks and contests. Advantage rolls
twice and keeps the higher draw, disadvantage keeps the lower.
"""

import logging
import random

from arbiter.dice.nodes import d20
from arbiter.dice.parser import parse_dice
from arbiter.dice.rng import get_rng
from arbiter.dice.types import RollMode

logger = logging.getLogger(__name__)


def roll_d20(
    mode: RollMode = RollMode.STRAIGHT,
    rng: random.Random | None = None,
) -> int:
    """Roll the d20 in the given mode.

    Args:
        mode: STRAIGHT rolls once; ADVANTAGE/DISADVANTAGE roll twice and
            keep the higher/lower draw.
        rng: Generator to draw from (defaults to the shared one).

    Returns:
        The kept d20 value (1-20).

    Examples:
        >>> 1 <= roll_d20(RollMode.ADVANTAGE) <= 20
        True
    """
    rng = get_rng(rng)
    if mode == RollMode.STRAIGHT:
        result = d20.roll(rng)
        logger.debug(f"d20 straight: {result}")
        return result

    first = d20.roll(rng)
    second = d20.roll(rng)
    result = max(first, second) if mode == RollMode.ADVANTAGE else min(first, second)
    logger.debug(f"d20 {mode.value}: {first}, {second} -> {result}")
    return result


def roll(notation: str, rng: random.Random | None = None) -> int:
    """Parse dice notation and roll it.

    Raises:
        DiceParseError: If notation is invalid.

    Examples:
        >>> 3 <= roll("2d6 + 1") <= 13
        True
    """
    return parse_dice(notation).roll(rng)
