"""Dice notation parser.

Parses sums of dice and constants like 1d20, 2d6 + 3, d8 + 1d4 + 2, and
damage notation like "2d6 + 1 slashing".
"""

import re

from arbiter.dice.nodes import Constant, Damage, DiceNode, Sequence, die
from arbiter.dice.types import DamageType, DieFace
from arbiter.exceptions import DiceParseError


# A single term: optional count, 'd', faces -- or a bare integer
# Examples: 1d20, d6, 4d8, 3
DICE_TERM_PATTERN = re.compile(r"^(?:(\d*)d(\d+)|(\d+))$", re.IGNORECASE)

# Damage notation: dice expression followed by a damage type name
DAMAGE_PATTERN = re.compile(r"^\s*([\dd+\s]+?)\s+([a-z_ ]+?)(?:\s+damage)?\s*$", re.IGNORECASE)

SUPPORTED_FACES = tuple(face.sides for face in DieFace)


def _parse_term(term: str, notation: str) -> DiceNode:
    match = DICE_TERM_PATTERN.match(term)
    if not match:
        raise DiceParseError(f"Invalid dice term '{term}' in '{notation}'", notation)

    count_str, faces_str, constant_str = match.groups()
    if constant_str is not None:
        return Constant(int(constant_str))

    # Default to 1 die if not specified (e.g., "d20" means "1d20")
    count = int(count_str) if count_str else 1
    faces = int(faces_str)

    if count < 1:
        raise DiceParseError(f"Number of dice must be at least 1, got {count}", notation)
    if faces not in SUPPORTED_FACES:
        raise DiceParseError(
            f"Unsupported die size d{faces}; expected one of "
            + ", ".join(f"d{f}" for f in SUPPORTED_FACES),
            notation,
        )

    shared = die(faces)
    if count == 1:
        return shared
    return Sequence(children=(shared,) * count)


def parse_dice(notation: str) -> DiceNode:
    """Parse dice notation into a dice expression.

    Grammar is ``term ('+' term)*`` where a term is an integer or
    ``[count]d<faces>``. Whitespace and case are ignored.

    Args:
        notation: Dice notation string (e.g., "2d6 + 3", "1d20", "d8").

    Returns:
        A Die for a single "1dN", a Constant for a bare number, otherwise a
        flattened Sequence.

    Raises:
        DiceParseError: If notation is empty, malformed, or uses an
            unsupported die size.

    Examples:
        >>> parse_dice("1d20")
        Die(face=<DieFace.D20: 20>)
        >>> parse_dice("1d4 + 1d20 + 1").display()
        '1d20 + 1d4 + 1'
    """
    if not notation or not notation.strip():
        raise DiceParseError("Dice notation cannot be empty", notation)

    compact = "".join(notation.split()).lower()
    terms = compact.split("+")
    if any(not term for term in terms):
        raise DiceParseError(f"Invalid dice notation: '{notation}'", notation)

    nodes = [_parse_term(term, notation) for term in terms]
    if len(nodes) == 1:
        return nodes[0]
    return Sequence(children=tuple(nodes))


def parse_damage(notation: str) -> Damage:
    """Parse damage notation: a dice expression followed by a damage type.

    Args:
        notation: e.g. "2d6 slashing", "1d8 + 2 fire damage",
            "1d10 magical piercing".

    Returns:
        Damage with the parsed dice and type.

    Raises:
        DiceParseError: If the dice or the damage type are invalid.
    """
    if not notation or not notation.strip():
        raise DiceParseError("Damage notation cannot be empty", notation)

    match = DAMAGE_PATTERN.match(notation)
    if not match:
        raise DiceParseError(f"Invalid damage notation: '{notation}'", notation)

    dice_str, type_str = match.groups()
    try:
        damage_type = DamageType.parse(type_str)
    except ValueError as e:
        raise DiceParseError(str(e), notation) from e

    return Damage(children=(parse_dice(dice_str),), damage_type=damage_type)
