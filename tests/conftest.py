"""Core test fixtures for engine tests."""

from unittest.mock import MagicMock

import pytest

from arbiter.creatures import AbilityContour, Creature
from arbiter.rolls import Proficiency, Skill, WeaponClass


@pytest.fixture
def fighter() -> Creature:
    """STR 15 / DEX 14 / CON 13 / INT 12 / WIS 10 / CHA 8, AC 12, simple weapons."""
    abilities = AbilityContour.from_scores([15, 14, 13, 12, 10, 8])
    return (
        Creature("Fighter", abilities, ac=12, base_proficiency=2)
        .add_weapon_class(WeaponClass.SIMPLE)
        .add_skill(Skill.ATHLETICS)
    )


@pytest.fixture
def wizard() -> Creature:
    """The fighter's scores reversed: CHA 15 down to STR 8, AC 10."""
    abilities = AbilityContour.from_scores([8, 10, 12, 13, 14, 15])
    return Creature("Wizard", abilities, ac=10, base_proficiency=2)


@pytest.fixture
def rogue() -> Creature:
    """Dexterous creature with stealth expertise, AC 14."""
    abilities = AbilityContour.from_scores([8, 16, 12, 10, 12, 14])
    return (
        Creature("Rogue", abilities, ac=14, base_proficiency=2)
        .add_skill(Skill.STEALTH, Proficiency.EXPERTISE)
        .add_skill(Skill.ACROBATICS)
        .add_weapon_class(WeaponClass.SIMPLE)
    )


@pytest.fixture
def make_rng():
    """Build a fake generator whose randint returns the given values in order."""

    def _make(*values: int) -> MagicMock:
        rng = MagicMock()
        rng.randint.side_effect = list(values)
        return rng

    return _make
