"""Shared canonical rolls.

Checks and saves carry no per-call state, so one instance per key is built
lazily and shared by every caller.
"""

from functools import lru_cache

from arbiter.rolls.abilities import Ability
from arbiter.rolls.model import Check, Save, SaveDescriptor
from arbiter.rolls.skills import Skill


@lru_cache(maxsize=None)
def _canonical_check(skill: Skill) -> Check:
    return Check(skill)


@lru_cache(maxsize=None)
def _canonical_save(ability: Ability, descriptor: SaveDescriptor) -> Save:
    return Save(ability, descriptor)


def check_for(skill: Skill) -> Check:
    """The canonical check for a skill."""
    return _canonical_check(Skill(skill))


def save_for(ability: Ability, descriptor: SaveDescriptor = SaveDescriptor.NON_MAGICAL) -> Save:
    """The canonical save for an ability and descriptor."""
    return _canonical_save(Ability(ability), SaveDescriptor(descriptor))
