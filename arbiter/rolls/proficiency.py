"""Proficiency levels and weapon classes.

Proficiency applies to skills, saving throws and weapon classes. Absence of
proficiency is normal: lookups default to NONE rather than failing.
"""

from collections.abc import Iterable
from enum import Enum

from arbiter.rolls.abilities import Ability


class Proficiency(str, Enum):
    """How well trained an actor is: 0x, 1x or 2x the flat bonus."""

    NONE = "none"
    PROFICIENT = "proficient"
    EXPERTISE = "expertise"

    @property
    def multiplier(self) -> int:
        return PROFICIENCY_MULTIPLIERS[self]

    def bonus(self, proficiency_bonus: int) -> int:
        """Bonus at this level for an actor's flat proficiency bonus.

        Examples:
            >>> Proficiency.EXPERTISE.bonus(3)
            6
        """
        return self.multiplier * proficiency_bonus

    @classmethod
    def bonus_for(cls, level: "Proficiency | None", proficiency_bonus: int) -> int:
        """Like bonus(), treating a missing level as NONE."""
        if level is None:
            return 0
        return level.bonus(proficiency_bonus)


PROFICIENCY_MULTIPLIERS = {
    Proficiency.NONE: 0,
    Proficiency.PROFICIENT: 1,
    Proficiency.EXPERTISE: 2,
}


class WeaponClass(str, Enum):
    """Weapon groups a creature can be proficient with."""

    SIMPLE = "simple"
    MARTIAL = "martial"
    FIREARM = "firearm"
    IMPROVISED = "improvised"


class WeaponProperty(str, Enum):
    """Weapon properties relevant to attack resolution."""

    RANGED = "ranged"
    REACH = "reach"
    THROWN = "thrown"
    VERSATILE = "versatile"
    FINESSE = "finesse"
    HEAVY = "heavy"
    LIGHT = "light"
    LOADING = "loading"
    SPECIAL = "special"
    TWO_HANDED = "two_handed"
    AMMUNITION = "ammunition"


def abilities_for_properties(properties: Iterable[WeaponProperty]) -> tuple[Ability, ...]:
    """Ability options an attack with these weapon properties may use.

    Melee weapons use Strength, ranged weapons Dexterity; finesse adds
    Dexterity as an alternative. Options come back in ability order, which
    decides ties during resolution.

    Examples:
        >>> abilities_for_properties([WeaponProperty.FINESSE, WeaponProperty.LIGHT])
        (<Ability.STR: 'STR'>, <Ability.DEX: 'DEX'>)
        >>> abilities_for_properties([WeaponProperty.RANGED])
        (<Ability.DEX: 'DEX'>,)
    """
    properties = set(properties)
    options = {Ability.DEX} if WeaponProperty.RANGED in properties else {Ability.STR}
    if WeaponProperty.FINESSE in properties:
        options.add(Ability.DEX)
    return tuple(ability for ability in Ability if ability in options)
