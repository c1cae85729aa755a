"""Ability scores and modifiers."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from arbiter.resolution.protocol import Attribute

if TYPE_CHECKING:
    from arbiter.resolution.protocol import Source


ABILITY_LABELS = {
    "STR": "Strength",
    "DEX": "Dexterity",
    "CON": "Constitution",
    "INT": "Intelligence",
    "WIS": "Wisdom",
    "CHA": "Charisma",
}


class Ability(str, Enum):
    """The six base abilities."""

    STR = "STR"
    DEX = "DEX"
    CON = "CON"
    INT = "INT"
    WIS = "WIS"
    CHA = "CHA"

    @property
    def label(self) -> str:
        """Full name, e.g. "Strength"."""
        return ABILITY_LABELS[self.value]

    @classmethod
    def parse(cls, text: str) -> "Ability":
        """Parse an abbreviation or full name, case-insensitively.

        Raises:
            ValueError: If text is not an ability.

        Examples:
            >>> Ability.parse("dex")
            <Ability.DEX: 'DEX'>
            >>> Ability.parse("Wisdom")
            <Ability.WIS: 'WIS'>
        """
        normalized = text.strip().upper()
        for ability in cls:
            if normalized in (ability.value, ability.label.upper()):
                return ability
        raise ValueError(f"Invalid ability: '{text}'")

    def retrieve_from(self, source: "Source[Any]") -> "AbilityScore":
        return source.provide(self)

    def __str__(self) -> str:
        return self.label


def ability_modifier(score: int) -> int:
    """Convert an ability score to its modifier.

    Uses the standard formula (score - 10) // 2, rounding down.

    Examples:
        >>> ability_modifier(10)
        0
        >>> ability_modifier(15)
        2
        >>> ability_modifier(8)
        -1
    """
    return (score - 10) // 2


@dataclass(frozen=True)
class AbilityScore(Attribute[Ability]):
    """A creature's score in one ability.

    Attributes:
        type: Which ability.
        value: The raw score (typically 1-20).
    """

    value: int = 10

    @property
    def score(self) -> int:
        return self.value

    @property
    def modifier(self) -> int:
        return ability_modifier(self.value)
