"""Roll model: the four kinds of d20 roll and how each computes its bonus.

``Roll`` is a closed union of immutable variants. Every operation on a roll
is a single exhaustive ``match``, so adding a new kind means revisiting each
of them.

- ``Attack``: weapon attack against armor class; best ability among the
  declared options plus weapon proficiency.
- ``Save``: saving throw in one ability.
- ``Check``: skill check, optionally with an overriding ability.
- ``Contest``: opposed skill check against the target's best skill.
"""

import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar, Union, assert_never

from arbiter.dice.nodes import Damage
from arbiter.dice.roller import roll_d20
from arbiter.dice.types import RollMode
from arbiter.exceptions import IllegalStateError
from arbiter.rolls.abilities import Ability
from arbiter.rolls.actor import Actor
from arbiter.rolls.proficiency import WeaponClass
from arbiter.rolls.range import Range
from arbiter.rolls.skills import Skill

logger = logging.getLogger(__name__)


class RollKind(str, Enum):
    """Discriminator of the roll union."""

    ATTACK = "attack"
    SAVE = "save"
    CHECK = "check"
    CONTEST = "contest"


class SaveDescriptor(str, Enum):
    """Whether a save resists a magical effect (for resistance features)."""

    MAGICAL = "magical"
    NON_MAGICAL = "non_magical"

    @property
    def label(self) -> str:
        return self.value.replace("_", "-")


def _unique(options) -> tuple:
    # Keep first occurrence; order decides resolution ties
    return tuple(dict.fromkeys(options))


@dataclass(frozen=True)
class Attack:
    """A weapon attack roll.

    Attributes:
        damage: Damage dealt on a hit.
        ability_options: Abilities the attacker may use, in preference order.
        weapon_class: Weapon group checked for proficiency.
        range: Melee reach or ranged bands.
        title: Display name (usually the weapon).
    """

    damage: Damage
    ability_options: tuple[Ability, ...]
    weapon_class: WeaponClass
    range: Range = field(default_factory=Range.melee)
    title: str = "Attack"

    kind: ClassVar[RollKind] = RollKind.ATTACK

    def __post_init__(self) -> None:
        if not isinstance(self.damage, Damage):
            raise IllegalStateError("Attack damage must be a typed Damage expression")
        options = _unique(self.ability_options)
        if not options:
            raise IllegalStateError("Attack must declare at least one ability option")
        object.__setattr__(self, "ability_options", options)

    def versatile(self) -> "Attack":
        """The same attack wielded two-handed: every damage die one size up."""
        return replace(self, damage=self.damage.explode())


@dataclass(frozen=True)
class Save:
    """A saving throw.

    Attributes:
        ability: Ability the save is made with.
        descriptor: Magical or non-magical effect.
    """

    ability: Ability
    descriptor: SaveDescriptor = SaveDescriptor.NON_MAGICAL

    kind: ClassVar[RollKind] = RollKind.SAVE

    @property
    def ability_options(self) -> tuple[Ability, ...]:
        return (self.ability,)


@dataclass(frozen=True)
class Check:
    """A skill check.

    Attributes:
        skill: Skill being checked.
        ability: Overrides the skill's usual ability when set
            (e.g. an Intelligence (Sleight of Hand) check to tie a knot).
    """

    skill: Skill
    ability: Ability | None = None

    kind: ClassVar[RollKind] = RollKind.CHECK

    @property
    def check_ability(self) -> Ability:
        return self.ability if self.ability is not None else self.skill.ability

    @property
    def ability_options(self) -> tuple[Ability, ...]:
        return (self.check_ability,)


@dataclass(frozen=True)
class Contest:
    """An opposed skill check.

    Attributes:
        source_skill: Skill the initiator rolls.
        target_skill_options: Skills the target may oppose with; the target
            uses its best one.
    """

    source_skill: Skill
    target_skill_options: tuple[Skill, ...]

    kind: ClassVar[RollKind] = RollKind.CONTEST

    def __post_init__(self) -> None:
        options = _unique(self.target_skill_options)
        if not options:
            raise IllegalStateError("Contest must declare at least one target skill option")
        object.__setattr__(self, "target_skill_options", options)

    @property
    def ability_options(self) -> tuple[Ability, ...]:
        return (self.source_skill.ability,)


Roll = Union[Attack, Save, Check, Contest]


def resolve_ability(roll: Roll, actor: Actor) -> Ability:
    """Ability the actor uses for this roll."""
    match roll:
        case Attack():
            return actor.type(roll.ability_options)
        case Save():
            return roll.ability
        case Check():
            return roll.check_ability
        case Contest():
            return roll.source_skill.ability
        case _:
            assert_never(roll)


def resolve_bonus(roll: Roll, actor: Actor) -> int:
    """The actor's total modifier for this roll.

    - Check: ability modifier + skill proficiency.
    - Save: ability modifier + saving throw proficiency.
    - Attack: modifier of the best declared ability + weapon proficiency.
    - Contest: the initiator's check bonus in the source skill.
    """
    match roll:
        case Check():
            return actor.provide(roll.check_ability).modifier + actor.proficiency_bonus(roll.skill)
        case Save():
            return actor.provide(roll.ability).modifier + actor.proficiency_bonus(roll.ability)
        case Attack():
            best = actor.resolve(roll.ability_options)
            return best.modifier + actor.proficiency_bonus(roll.weapon_class)
        case Contest():
            skill = roll.source_skill
            return actor.provide(skill.ability).modifier + actor.proficiency_bonus(skill)
        case _:
            assert_never(roll)


def execute(
    roll: Roll,
    actor: Actor,
    mode: RollMode = RollMode.STRAIGHT,
    rng: random.Random | None = None,
) -> int:
    """Roll the d20 and add the actor's bonus."""
    natural = roll_d20(mode, rng)
    bonus = resolve_bonus(roll, actor)
    logger.debug(f"{actor.name} rolls {display(roll)}: {natural} + {bonus}")
    return natural + bonus


def check_value(
    actor: Actor,
    skill: Skill,
    mode: RollMode = RollMode.STRAIGHT,
    rng: random.Random | None = None,
) -> int:
    """A full check roll (d20 + ability modifier + proficiency) in one skill."""
    return execute(Check(skill), actor, mode, rng)


def display(roll: Roll) -> str:
    """Readable summary of a roll.

    Examples:
        >>> display(Check(Skill.ATHLETICS))
        'Check: Athletics (Strength)'
        >>> display(Save(Ability.CON))
        'Save: Constitution (non-magical)'
    """
    match roll:
        case Check(ability=None):
            return f"Check: {roll.skill.display()}"
        case Check():
            return f"Check: {roll.check_ability.label} ({roll.skill.label})"
        case Save():
            return f"Save: {roll.ability.label} ({roll.descriptor.label})"
        case Attack():
            prefix = "Ranged Attack" if roll.range.is_ranged else "Melee Attack"
            text = f"{prefix}: {roll.title} ({roll.damage.display()})"
            annotation = roll.range.display()
            return f"{text} {annotation}" if annotation else text
        case Contest():
            options = " or ".join(skill.label for skill in roll.target_skill_options)
            return f"Contest: {roll.source_skill.label} vs ({options})"
        case _:
            assert_never(roll)
