"""Rolls: checks, saves, attacks and contests, and the commands that send them.

Usage:
    >>> from arbiter.rolls import RollCommand, check_for, Skill
    >>> command = RollCommand(check_for(Skill.ATHLETICS)).with_dc(10)
    >>> command.send_to(creature)
    >>> command.report()
"""

# Attributes
from arbiter.rolls.abilities import Ability, AbilityScore, ability_modifier
from arbiter.rolls.skills import SKILL_ABILITIES, Skill, SkillCheck, skills_for_ability

# Proficiency and weapons
from arbiter.rolls.proficiency import (
    Proficiency,
    WeaponClass,
    WeaponProperty,
    abilities_for_properties,
)
from arbiter.rolls.range import Range

# Model
from arbiter.rolls.actor import Actor
from arbiter.rolls.model import (
    Attack,
    Check,
    Contest,
    Roll,
    RollKind,
    Save,
    SaveDescriptor,
    check_value,
    display,
    execute,
    resolve_ability,
    resolve_bonus,
)
from arbiter.rolls.factory import check_for, save_for

# Commands
from arbiter.rolls.command import RollCommand, RollOutcome

__all__ = [
    # Attributes
    "Ability",
    "AbilityScore",
    "ability_modifier",
    "SKILL_ABILITIES",
    "Skill",
    "SkillCheck",
    "skills_for_ability",
    # Proficiency and weapons
    "Proficiency",
    "WeaponClass",
    "WeaponProperty",
    "abilities_for_properties",
    "Range",
    # Model
    "Actor",
    "Attack",
    "Check",
    "Contest",
    "Roll",
    "RollKind",
    "Save",
    "SaveDescriptor",
    "check_value",
    "display",
    "execute",
    "resolve_ability",
    "resolve_bonus",
    "check_for",
    "save_for",
    # Commands
    "RollCommand",
    "RollOutcome",
]
