"""Reference creature: a ready-made actor for rolls.

Host applications normally supply their own actors; ``Creature`` is the
minimal one the engine needs, holding ability scores, armor class and
proficiencies.
"""

import random
from typing import Any, assert_never

from arbiter.config import settings
from arbiter.creatures.contour import AbilityContour
from arbiter.dice.types import RollMode
from arbiter.exceptions import AttributeNotFoundError
from arbiter.resolution.protocol import Attribute, Source
from arbiter.rolls.abilities import Ability, AbilityScore
from arbiter.rolls.model import Attack, Check, Contest, Roll, Save, check_value, execute
from arbiter.rolls.proficiency import Proficiency, WeaponClass
from arbiter.rolls.skills import Skill, SkillCheck

DEFAULT_ARMOR_CLASS = 10


class Creature(Source[Any]):
    """A named creature that provides abilities and skills.

    Args:
        name: Display name used in reports.
        abilities: Ability scores (all 10 if omitted).
        ac: Armor class.
        base_proficiency: Flat proficiency bonus; defaults to the
            configured ``proficiency_bonus``.

    Example:
        >>> goblin = Creature("Goblin", AbilityContour.from_scores([8, 14, 10, 10, 8, 8]), ac=15)
        >>> goblin.add_skill(Skill.STEALTH, Proficiency.EXPERTISE).proficiency_bonus(Skill.STEALTH)
        4
    """

    def __init__(
        self,
        name: str,
        abilities: AbilityContour | None = None,
        ac: int = DEFAULT_ARMOR_CLASS,
        base_proficiency: int | None = None,
    ) -> None:
        self.name = name
        self.abilities = abilities if abilities is not None else AbilityContour()
        self.ac = ac
        self.base_proficiency = (
            base_proficiency if base_proficiency is not None else settings.proficiency_bonus
        )
        self.skills: dict[Skill, Proficiency] = {}
        self.saves: dict[Ability, Proficiency] = {}
        self.weapons: dict[WeaponClass, Proficiency] = {}

    # Proficiencies

    def add_skill(self, skill: Skill, level: Proficiency = Proficiency.PROFICIENT) -> "Creature":
        self.skills[skill] = level
        return self

    def add_save(self, ability: Ability, level: Proficiency = Proficiency.PROFICIENT) -> "Creature":
        self.saves[ability] = level
        return self

    def add_weapon_class(
        self, weapon_class: WeaponClass, level: Proficiency = Proficiency.PROFICIENT
    ) -> "Creature":
        self.weapons[weapon_class] = level
        return self

    def proficiency_bonus(self, key: Skill | Ability | WeaponClass) -> int:
        """Bonus from proficiency in a skill, saving throw or weapon class.

        Returns 0 when the creature has no proficiency in it.
        """
        if isinstance(key, Skill):
            level = self.skills.get(key)
        elif isinstance(key, Ability):
            level = self.saves.get(key)
        elif isinstance(key, WeaponClass):
            level = self.weapons.get(key)
        else:
            raise TypeError(f"No proficiency category for {key!r}")
        return Proficiency.bonus_for(level, self.base_proficiency)

    def is_proficient(self, roll: Roll) -> bool:
        """Whether any proficiency applies to the roll."""
        match roll:
            case Attack():
                key = roll.weapon_class
            case Save():
                key = roll.ability
            case Check():
                key = roll.skill
            case Contest():
                key = roll.source_skill
            case _:
                assert_never(roll)
        return self.proficiency_bonus(key) > 0

    # Source

    def provide(self, type_: Any) -> Attribute[Any]:
        """Ability score for an ability, check bonus for a skill.

        Raises:
            AttributeNotFoundError: For any other attribute type.
        """
        if isinstance(type_, Ability):
            return self.abilities.provide(type_)
        if isinstance(type_, Skill):
            bonus = self.abilities.modifier(type_.ability) + self.proficiency_bonus(type_)
            return SkillCheck(type_, bonus)
        raise AttributeNotFoundError(type_, f"{self.name} has no attribute of type {type_!r}")

    def ability_score(self, ability: Ability) -> AbilityScore:
        return self.abilities.provide(ability)

    # Rules

    def armor_class(self) -> int:
        return self.ac

    def difficulty_class(self, ability: Ability) -> int:
        """DC of this creature's effects: base + proficiency + ability modifier."""
        return settings.base_save_dc + self.base_proficiency + self.abilities.modifier(ability)

    def make(
        self,
        roll: Roll,
        mode: RollMode = RollMode.STRAIGHT,
        rng: random.Random | None = None,
    ) -> int:
        """Roll d20 + bonus for a roll."""
        return execute(roll, self, mode, rng)

    def check(
        self,
        skill: Skill,
        mode: RollMode = RollMode.STRAIGHT,
        rng: random.Random | None = None,
    ) -> int:
        """Roll a check in one skill."""
        return check_value(self, skill, mode, rng)

    def __repr__(self) -> str:
        return f"Creature(name={self.name!r}, ac={self.ac}, proficiency={self.base_proficiency})"

    def __str__(self) -> str:
        return self.name
