"""Tests for abilities, skills and proficiency."""

import pytest

from arbiter.rolls.abilities import Ability, AbilityScore, ability_modifier
from arbiter.rolls.proficiency import (
    Proficiency,
    WeaponProperty,
    abilities_for_properties,
)
from arbiter.rolls.skills import SKILL_ABILITIES, Skill, SkillCheck, skills_for_ability


class TestAbilityModifier:
    """Tests for ability score modifiers."""

    @pytest.mark.parametrize(
        "score,expected",
        [(1, -5), (8, -1), (9, -1), (10, 0), (11, 0), (15, 2), (20, 5)],
    )
    def test_modifier(self, score, expected):
        """Modifiers round down."""
        assert ability_modifier(score) == expected

    def test_ability_score_modifier(self):
        """AbilityScore exposes its modifier."""
        assert AbilityScore(Ability.STR, 15).modifier == 2
        assert AbilityScore(Ability.STR, 15).score == 15


class TestAbility:
    """Tests for the Ability enum."""

    def test_labels(self):
        """Abilities display with their full names."""
        assert Ability.CON.label == "Constitution"
        assert str(Ability.WIS) == "Wisdom"

    @pytest.mark.parametrize("text", ["dex", "DEX", "Dexterity", " dexterity "])
    def test_parse(self, text):
        """Abbreviations and full names parse."""
        assert Ability.parse(text) is Ability.DEX

    def test_parse_invalid(self):
        """Unknown abilities are rejected."""
        with pytest.raises(ValueError, match="Invalid ability"):
            Ability.parse("luck")


class TestSkill:
    """Tests for the Skill enum."""

    def test_eighteen_skills(self):
        """Every skill has a governing ability."""
        assert len(Skill) == 18
        assert set(SKILL_ABILITIES) == set(Skill)

    def test_governing_ability(self):
        """Skills map to their ability."""
        assert Skill.ATHLETICS.ability is Ability.STR
        assert Skill.STEALTH.ability is Ability.DEX
        assert Skill.PERSUASION.ability is Ability.CHA

    def test_no_constitution_skills(self):
        """Constitution governs no skill."""
        assert skills_for_ability(Ability.CON) == []

    def test_label(self):
        """Multi-word skills keep 'of' lowercase."""
        assert Skill.SLEIGHT_OF_HAND.label == "Sleight of Hand"
        assert Skill.ANIMAL_HANDLING.label == "Animal Handling"

    def test_display(self):
        """Display shows the governing ability."""
        assert Skill.ATHLETICS.display() == "Athletics (Strength)"

    @pytest.mark.parametrize("text", ["Sleight of Hand", "sleight-of-hand", "SLEIGHT_OF_HAND"])
    def test_parse(self, text):
        """Skill names parse in several spellings."""
        assert Skill.parse(text) is Skill.SLEIGHT_OF_HAND

    def test_parse_invalid(self):
        """Unknown skills are rejected."""
        with pytest.raises(ValueError, match="Invalid skill"):
            Skill.parse("cooking")

    def test_skill_check_score_is_bonus(self):
        """A skill check compares by its bonus."""
        assert SkillCheck(Skill.STEALTH, 6).score == 6


class TestProficiency:
    """Tests for proficiency levels."""

    def test_bonus_multiplies(self):
        """None, proficient and expertise give 0x, 1x and 2x."""
        assert Proficiency.NONE.bonus(3) == 0
        assert Proficiency.PROFICIENT.bonus(3) == 3
        assert Proficiency.EXPERTISE.bonus(3) == 6

    def test_missing_level_is_zero(self):
        """An absent proficiency contributes nothing."""
        assert Proficiency.bonus_for(None, 2) == 0


class TestAbilitiesForProperties:
    """Tests for attack ability options from weapon properties."""

    def test_melee_uses_strength(self):
        """Plain melee weapons use Strength."""
        assert abilities_for_properties([WeaponProperty.HEAVY]) == (Ability.STR,)

    def test_ranged_uses_dexterity(self):
        """Ranged weapons use Dexterity."""
        assert abilities_for_properties([WeaponProperty.RANGED, WeaponProperty.AMMUNITION]) == (
            Ability.DEX,
        )

    def test_finesse_adds_dexterity(self):
        """Finesse weapons may use either, Strength first."""
        assert abilities_for_properties([WeaponProperty.FINESSE]) == (Ability.STR, Ability.DEX)
