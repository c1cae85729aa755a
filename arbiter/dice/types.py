"""Dice system type definitions.

Enums for die faces, damage types and roll modes.
"""

from enum import Enum

from arbiter.exceptions import UnsupportedOperationError


class DieFace(int, Enum):
    """Standard polyhedral die faces, valued by their number of sides."""

    D4 = 4
    D6 = 6
    D8 = 8
    D10 = 10
    D12 = 12
    D20 = 20

    @property
    def sides(self) -> int:
        return self.value

    @property
    def notation(self) -> str:
        return f"d{self.value}"

    @classmethod
    def from_sides(cls, sides: int) -> "DieFace":
        """Look up a face by its side count.

        Raises:
            ValueError: If sides is not a standard face.
        """
        try:
            return cls(sides)
        except ValueError:
            raise ValueError(f"Unsupported die size: d{sides}") from None

    def exploded(self) -> "DieFace":
        """Get the next larger standard face (d4 -> d6 ... d12 -> d20).

        Raises:
            UnsupportedOperationError: For a d20, which has no larger face.
        """
        faces = list(DieFace)
        index = faces.index(self)
        if index == len(faces) - 1:
            raise UnsupportedOperationError("No die face above a d20")
        return faces[index + 1]


class DamageType(str, Enum):
    """Type of damage dealt by a damage roll."""

    BLUDGEONING = "bludgeoning"
    PIERCING = "piercing"
    SLASHING = "slashing"
    FIRE = "fire"
    COLD = "cold"
    LIGHTNING = "lightning"
    POISON = "poison"
    ACID = "acid"
    NECROTIC = "necrotic"
    RADIANT = "radiant"
    FORCE = "force"
    PSYCHIC = "psychic"
    THUNDER = "thunder"
    MAGICAL_BLUDGEONING = "magical bludgeoning"
    MAGICAL_PIERCING = "magical piercing"
    MAGICAL_SLASHING = "magical slashing"

    @property
    def is_magical(self) -> bool:
        """Only mundane bludgeoning, piercing and slashing are non-magical."""
        return self not in (
            DamageType.BLUDGEONING,
            DamageType.PIERCING,
            DamageType.SLASHING,
        )

    @classmethod
    def parse(cls, text: str) -> "DamageType":
        """Parse a damage type name.

        Accepts values ("fire", "magical slashing") and member names
        ("FIRE", "MAGICAL_SLASHING"), case-insensitively.

        Raises:
            ValueError: If the name is not a known damage type.
        """
        normalized = " ".join(text.strip().lower().replace("_", " ").split())
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown damage type: '{text}'") from None


class RollMode(str, Enum):
    """How the d20 is rolled."""

    STRAIGHT = "straight"
    ADVANTAGE = "advantage"
    DISADVANTAGE = "disadvantage"

    def combine(self, other: "RollMode") -> "RollMode":
        """Combine two modes; advantage and disadvantage cancel out.

        Examples:
            >>> RollMode.ADVANTAGE.combine(RollMode.DISADVANTAGE)
            <RollMode.STRAIGHT: 'straight'>
            >>> RollMode.STRAIGHT.combine(RollMode.ADVANTAGE)
            <RollMode.ADVANTAGE: 'advantage'>
        """
        if self == RollMode.STRAIGHT:
            return other
        if other == RollMode.STRAIGHT or other == self:
            return self
        return RollMode.STRAIGHT

    @classmethod
    def from_flags(cls, advantage: bool = False, disadvantage: bool = False) -> "RollMode":
        """Build a mode from advantage/disadvantage flags (both cancel)."""
        if advantage and not disadvantage:
            return cls.ADVANTAGE
        if disadvantage and not advantage:
            return cls.DISADVANTAGE
        return cls.STRAIGHT
