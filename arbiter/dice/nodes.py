"""Symbolic dice expressions.

A dice expression is a small tree of immutable nodes:

- ``Die``: a single die of a standard face (d4 ... d20).
- ``Constant``: a flat number, only used on its own (``"3"``).
- ``Sequence``: a sum of dice plus a flat constant. Nested sequences and
  constants are flattened on construction, so ``children`` only ever holds
  ``Die`` nodes and equality is a plain multiset comparison.
- ``Damage``: a ``Sequence`` tagged with a damage type, which can be marked
  as a critical hit (dice rolled twice, constant added once).

Dice are interchangeable, so ``die(6)`` always returns the same shared d6.
"""

import logging
import random
from collections import Counter
from dataclasses import dataclass, field, replace
from functools import lru_cache
from typing import Union

from arbiter.dice.rng import get_rng
from arbiter.dice.types import DamageType, DieFace
from arbiter.exceptions import IllegalStateError, UnsupportedOperationError

logger = logging.getLogger(__name__)


class _Combinable:
    """Algebraic ``+`` shared by every node: the result is a flat Sequence."""

    def __add__(self, other: "DiceNode | int") -> "DiceNode":
        if not isinstance(other, (Die, Constant, Sequence, int)):
            return NotImplemented
        return Sequence(children=(self, other))

    def __radd__(self, other: int) -> "DiceNode":
        # Lets sum() work over nodes (starts from 0)
        if not isinstance(other, int):
            return NotImplemented
        return Sequence(children=(self,), constant=other)

    def of(self, damage_type: DamageType | str) -> "Damage":
        """Tag this expression with a damage type."""
        return Damage(children=(self,), damage_type=damage_type)


@dataclass(frozen=True)
class Die(_Combinable):
    """A single die.

    Attributes:
        face: Which standard die this is.
    """

    face: DieFace

    def __post_init__(self) -> None:
        if not isinstance(self.face, DieFace):
            object.__setattr__(self, "face", DieFace.from_sides(self.face))

    @classmethod
    def of_face(cls, face: DieFace | int) -> "Die":
        """Get the shared die for a face."""
        return die(face)

    @property
    def sides(self) -> int:
        return self.face.sides

    def roll(self, rng: random.Random | None = None) -> int:
        """Draw uniformly from [1, sides]."""
        return get_rng(rng).randint(1, self.face.sides)

    def explode(self) -> "Die":
        return die(self.face.exploded())

    def display(self) -> str:
        return f"1{self.face.notation}"

    def dice_count(self) -> int:
        return 1

    def faces(self) -> set[DieFace]:
        return {self.face}

    def minimum(self) -> int:
        return 1

    def maximum(self) -> int:
        return self.face.sides

    def average(self) -> float:
        return (self.face.sides + 1) / 2

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True)
class Constant(_Combinable):
    """A flat value with no dice."""

    value: int = 0

    def __add__(self, other: "DiceNode | int") -> "DiceNode":
        if isinstance(other, Constant):
            return Constant(self.value + other.value)
        if isinstance(other, int):
            return Constant(self.value + other)
        return super().__add__(other)

    def __radd__(self, other: int) -> "DiceNode":
        if isinstance(other, int):
            return Constant(self.value + other)
        return NotImplemented

    def roll(self, rng: random.Random | None = None) -> int:
        return self.value

    def explode(self) -> "Constant":
        raise UnsupportedOperationError("Cannot explode a constant")

    def display(self) -> str:
        return str(self.value)

    def dice_count(self) -> int:
        return 0

    def faces(self) -> set[DieFace]:
        return set()

    def minimum(self) -> int:
        return self.value

    def maximum(self) -> int:
        return self.value

    def average(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, eq=False)
class Sequence(_Combinable):
    """A sum of dice plus a flat constant.

    Attributes:
        children: The dice of the expression, in insertion order.
        constant: Flat amount added after the dice.
    """

    children: tuple[Die, ...] = ()
    constant: int = 0

    def __post_init__(self) -> None:
        dice: list[Die] = []
        constant = self.constant
        for child in self.children:
            if isinstance(child, Die):
                dice.append(child)
            elif isinstance(child, Constant):
                constant += child.value
            elif isinstance(child, Sequence):
                # Absorb nested sequences, including their constants
                dice.extend(child.children)
                constant += child.constant
            elif isinstance(child, int) and not isinstance(child, bool):
                constant += child
            else:
                raise TypeError(f"Cannot add {type(child).__name__} to a dice sequence")
        object.__setattr__(self, "children", tuple(dice))
        object.__setattr__(self, "constant", constant)

    @classmethod
    def of_parts(cls, *parts: "DiceNode | int") -> "Sequence":
        """Build a sequence from any mix of nodes and ints."""
        return cls(children=parts)

    @property
    def _dice_rolls(self) -> int:
        """How many times the dice are rolled per evaluation."""
        return 1

    def __add__(self, other: "DiceNode | int") -> "DiceNode":
        if not isinstance(other, (Die, Constant, Sequence, int)):
            return NotImplemented
        # replace() keeps the concrete class (and damage type)
        return replace(self, children=self.children + (other,))

    def __radd__(self, other: int) -> "DiceNode":
        if not isinstance(other, int):
            return NotImplemented
        return replace(self, constant=self.constant + other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return self.constant == other.constant and Counter(self.children) == Counter(
            other.children
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, frozenset(Counter(self.children).items()), self.constant))

    def roll(self, rng: random.Random | None = None) -> int:
        """Roll every die and add the constant.

        Each die is drawn independently, so rolling twice gives independent
        results.
        """
        rng = get_rng(rng)
        total = self.constant
        for _ in range(self._dice_rolls):
            total += sum(child.roll(rng) for child in self.children)
        logger.debug(f"Rolled {self.display()}: {total}")
        return total

    def explode(self) -> "Sequence":
        """Upgrade every die by one face, keeping the constant."""
        return replace(self, children=tuple(child.explode() for child in self.children))

    def display(self) -> str:
        """Canonical notation, largest faces first.

        Examples:
            >>> Sequence.of_parts(d4, d20, 1).display()
            '1d20 + 1d4 + 1'
        """
        counts = Counter(child.face for child in self.children)
        text = " + ".join(
            f"{counts[face]}{face.notation}" for face in sorted(counts, reverse=True)
        )
        if self.constant > 0:
            text = f"{text} + {self.constant}" if text else str(self.constant)
        elif self.constant < 0:
            text = f"{text} - {-self.constant}" if text else str(self.constant)
        return text or "0"

    def dice_count(self) -> int:
        return len(self.children)

    def faces(self) -> set[DieFace]:
        return {child.face for child in self.children}

    def minimum(self) -> int:
        return self._dice_rolls * len(self.children) + self.constant

    def maximum(self) -> int:
        return self._dice_rolls * sum(child.sides for child in self.children) + self.constant

    def average(self) -> float:
        return self._dice_rolls * sum(child.average() for child in self.children) + self.constant

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, eq=False)
class Damage(Sequence):
    """A damage roll: dice tagged with a damage type.

    Attributes:
        damage_type: Type of damage dealt.
        doubled: Critical hit; the dice (not the constant) are rolled twice.
    """

    damage_type: DamageType | None = field(default=None, kw_only=True)
    doubled: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.damage_type is None:
            raise IllegalStateError("Damage type must be specified")
        if not isinstance(self.damage_type, DamageType):
            object.__setattr__(self, "damage_type", DamageType.parse(self.damage_type))

    @property
    def _dice_rolls(self) -> int:
        return 2 if self.doubled else 1

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is NotImplemented or not result:
            return result
        return self.damage_type == other.damage_type  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((super().__hash__(), self.damage_type))

    def critical(self) -> "Damage":
        """Copy of this damage marked as a critical hit."""
        return replace(self, doubled=True)

    def normal(self) -> "Damage":
        """Copy of this damage with the critical mark cleared."""
        return replace(self, doubled=False)

    def display(self) -> str:
        return f"{super().display()} {self.damage_type.value} damage"


DiceNode = Union[Die, Constant, Sequence]


@lru_cache(maxsize=None)
def _shared_die(face: DieFace) -> Die:
    return Die(face)


def die(face: DieFace | int) -> Die:
    """Get the shared die for a face or side count.

    Raises:
        ValueError: If the side count is not a standard face.
    """
    if not isinstance(face, DieFace):
        face = DieFace.from_sides(face)
    return _shared_die(face)


d4 = die(DieFace.D4)
d6 = die(DieFace.D6)
d8 = die(DieFace.D8)
d10 = die(DieFace.D10)
d12 = die(DieFace.D12)
d20 = die(DieFace.D20)


def evaluate(node: DiceNode, rng: random.Random | None = None) -> int:
    """Roll an expression once."""
    return node.roll(rng)


def explode(node: DiceNode) -> DiceNode:
    """Upgrade every die of an expression by one face.

    Raises:
        UnsupportedOperationError: For a bare constant, or when the
            expression holds a d20.
    """
    return node.explode()


def display(node: DiceNode) -> str:
    """Canonical notation for an expression."""
    return node.display()
