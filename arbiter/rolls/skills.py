"""Skills and their governing abilities.

Each of the eighteen skills is tied to exactly one ability.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from arbiter.resolution.protocol import Attribute
from arbiter.rolls.abilities import Ability

if TYPE_CHECKING:
    from arbiter.resolution.protocol import Source


class Skill(str, Enum):
    """Named proficiency domains."""

    ACROBATICS = "acrobatics"
    ANIMAL_HANDLING = "animal_handling"
    ARCANA = "arcana"
    ATHLETICS = "athletics"
    DECEPTION = "deception"
    HISTORY = "history"
    INSIGHT = "insight"
    INTIMIDATION = "intimidation"
    INVESTIGATION = "investigation"
    MEDICINE = "medicine"
    NATURE = "nature"
    PERCEPTION = "perception"
    PERFORMANCE = "performance"
    PERSUASION = "persuasion"
    RELIGION = "religion"
    SLEIGHT_OF_HAND = "sleight_of_hand"
    STEALTH = "stealth"
    SURVIVAL = "survival"

    @property
    def ability(self) -> Ability:
        """The governing ability."""
        return SKILL_ABILITIES[self]

    @property
    def label(self) -> str:
        """Display name, e.g. "Sleight of Hand"."""
        return " ".join(
            word if word == "of" else word.capitalize() for word in self.value.split("_")
        )

    def display(self) -> str:
        """Skill with its ability, e.g. "Athletics (Strength)"."""
        return f"{self.label} ({self.ability.label})"

    @classmethod
    def parse(cls, text: str) -> "Skill":
        """Parse a skill name ("Sleight of Hand", "sleight-of-hand", ...).

        Raises:
            ValueError: If text is not a skill.
        """
        # Normalize: lowercase and replace spaces/hyphens with underscores
        normalized = text.strip().lower().replace(" ", "_").replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Invalid skill: '{text}'") from None

    def retrieve_from(self, source: "Source[Any]") -> "SkillCheck":
        return source.provide(self)

    def __str__(self) -> str:
        return self.label


SKILL_ABILITIES: dict[Skill, Ability] = {
    # Strength-based skills
    Skill.ATHLETICS: Ability.STR,
    # Dexterity-based skills
    Skill.ACROBATICS: Ability.DEX,
    Skill.SLEIGHT_OF_HAND: Ability.DEX,
    Skill.STEALTH: Ability.DEX,
    # Intelligence-based skills
    Skill.ARCANA: Ability.INT,
    Skill.HISTORY: Ability.INT,
    Skill.INVESTIGATION: Ability.INT,
    Skill.NATURE: Ability.INT,
    Skill.RELIGION: Ability.INT,
    # Wisdom-based skills
    Skill.ANIMAL_HANDLING: Ability.WIS,
    Skill.INSIGHT: Ability.WIS,
    Skill.MEDICINE: Ability.WIS,
    Skill.PERCEPTION: Ability.WIS,
    Skill.SURVIVAL: Ability.WIS,
    # Charisma-based skills
    Skill.DECEPTION: Ability.CHA,
    Skill.INTIMIDATION: Ability.CHA,
    Skill.PERFORMANCE: Ability.CHA,
    Skill.PERSUASION: Ability.CHA,
}


def skills_for_ability(ability: Ability) -> list[Skill]:
    """Get all skills governed by an ability.

    Examples:
        >>> skills_for_ability(Ability.STR)
        [<Skill.ATHLETICS: 'athletics'>]
    """
    return [skill for skill, governing in SKILL_ABILITIES.items() if governing == ability]


@dataclass(frozen=True)
class SkillCheck(Attribute[Skill]):
    """An actor's total check bonus in one skill.

    Attributes:
        type: Which skill.
        bonus: Ability modifier plus proficiency bonus.
    """

    bonus: int = 0

    @property
    def score(self) -> int:
        return self.bonus
