"""Tests for symbolic dice expressions."""

import random
from unittest.mock import MagicMock

import pytest

from arbiter.dice.nodes import (
    Constant,
    Damage,
    Die,
    Sequence,
    d4,
    d6,
    d8,
    d10,
    d12,
    d20,
    die,
    display,
    evaluate,
    explode,
)
from arbiter.dice.types import DamageType, DieFace
from arbiter.exceptions import IllegalStateError, UnsupportedOperationError


class TestDie:
    """Tests for single dice."""

    def test_shared_instances(self):
        """The same face always gives the same die object."""
        assert die(6) is d6
        assert die(DieFace.D6) is d6
        assert Die.of_face(20) is d20

    def test_equal_by_face(self):
        """Separately built dice of one face are equal."""
        assert Die(DieFace.D8) == d8
        assert Die(8) == d8

    def test_unsupported_face(self):
        """Non-standard sizes are rejected."""
        with pytest.raises(ValueError):
            die(100)

    def test_roll_draws_one_to_sides(self):
        """A die asks the generator for a value in [1, sides]."""
        rng = MagicMock()
        rng.randint.return_value = 5
        assert d8.roll(rng) == 5
        rng.randint.assert_called_once_with(1, 8)

    def test_roll_in_range(self):
        """Real draws stay within the die's range."""
        rng = random.Random(7)
        for _ in range(50):
            assert 1 <= d4.roll(rng) <= 4

    def test_display(self):
        """A single die displays with an explicit count of one."""
        assert d12.display() == "1d12"
        assert str(d6) == "1d6"

    def test_statistics(self):
        """Minimum, maximum and average of a die."""
        assert d6.minimum() == 1
        assert d6.maximum() == 6
        assert d6.average() == 3.5


class TestExplode:
    """Tests for exploding dice one face up."""

    def test_explode_d6(self):
        """A d6 explodes to a d8."""
        assert explode(d6) == d8

    def test_explode_d10(self):
        """A d10 explodes to a d12."""
        assert explode(d10) is d12

    def test_explode_d12(self):
        """A d12 explodes to a d20."""
        assert explode(d12) is d20

    def test_explode_d20_raises(self):
        """A d20 cannot explode."""
        with pytest.raises(UnsupportedOperationError):
            explode(d20)

    def test_explode_constant_raises(self):
        """A constant cannot explode."""
        with pytest.raises(UnsupportedOperationError):
            explode(Constant(3))

    def test_explode_sequence_keeps_constant(self):
        """Every die moves up a face and the constant is kept."""
        assert explode(d4 + d8 + 2) == Sequence.of_parts(d6, d10, 2)

    def test_explode_sequence_with_d20_raises(self):
        """A sequence holding a d20 cannot explode."""
        with pytest.raises(UnsupportedOperationError):
            explode(d6 + d20)


class TestSequence:
    """Tests for sums of dice."""

    def test_display_largest_face_first(self):
        """Dice are grouped by face, largest first, constant last."""
        assert Sequence.of_parts(d4, d20, 1).display() == "1d20 + 1d4 + 1"

    def test_display_groups_same_face(self):
        """Repeated faces are counted."""
        assert display(d6 + d8 + d6 + 3) == "1d8 + 2d6 + 3"

    def test_display_negative_constant(self):
        """Negative constants display as a subtraction."""
        assert Sequence.of_parts(d6, -1).display() == "1d6 - 1"

    def test_display_no_dice(self):
        """A sequence without dice shows only its constant."""
        assert Sequence().display() == "0"
        assert Sequence(constant=4).display() == "4"

    def test_flattens_nested(self):
        """Nested sequences and constants are absorbed."""
        nested = Sequence.of_parts(d6, Sequence.of_parts(d4, 2), Constant(1))
        assert nested.children == (d6, d4)
        assert nested.constant == 3

    def test_multiset_equality(self):
        """Equality ignores order of dice."""
        assert d4 + d6 + 1 == d6 + d4 + 1
        assert d6 + d6 != d6 + d8
        assert d6 + 1 != d6 + 2

    def test_constant_position_irrelevant(self):
        """A constant before or after the dice gives the same sequence."""
        assert Sequence.of_parts(d6, Constant(2)) == Sequence.of_parts(Constant(2), d6)

    def test_equal_sequences_hash_equal(self):
        """Equal sequences can share a set slot."""
        assert len({d4 + d6, d6 + d4}) == 1

    def test_add_int(self):
        """Ints fold into the constant."""
        expr = 2 + d6 + 3
        assert expr.constant == 5
        assert expr.dice_count() == 1

    def test_sum_builtin(self):
        """sum() over dice builds a sequence."""
        assert sum([d6, d6, d4]) == Sequence.of_parts(d6, d6, d4)

    def test_add_rejects_other_types(self):
        """Only dice nodes and ints can be added."""
        with pytest.raises(TypeError):
            d6 + "d6"

    def test_roll_sums_dice_and_constant(self, make_rng):
        """Every die is drawn and the constant added once."""
        rng = make_rng(3, 5)
        assert (d6 + d8 + 2).roll(rng) == 10
        assert rng.randint.call_count == 2

    def test_evaluate_is_roll(self, make_rng):
        """evaluate() rolls the expression once."""
        assert evaluate(d6 + 1, make_rng(4)) == 5

    def test_statistics(self):
        """Minimum, maximum and average include the constant."""
        expr = d6 + d6 + 1
        assert expr.minimum() == 3
        assert expr.maximum() == 13
        assert expr.average() == 8.0

    def test_faces(self):
        """Faces are the distinct die faces used."""
        assert (d6 + d6 + d4).faces() == {DieFace.D6, DieFace.D4}


class TestConstant:
    """Tests for flat values."""

    def test_constants_fold(self):
        """Constants added together stay constants."""
        assert Constant(2) + Constant(3) == Constant(5)
        assert Constant(2) + 1 == Constant(3)

    def test_roll_returns_value(self):
        """Rolling a constant never touches the generator."""
        rng = MagicMock()
        assert Constant(7).roll(rng) == 7
        rng.randint.assert_not_called()

    def test_constant_plus_die(self):
        """A constant plus a die is a sequence."""
        assert Constant(1) + d4 == Sequence.of_parts(d4, 1)


class TestDamage:
    """Tests for typed damage expressions."""

    def test_requires_type(self):
        """Damage without a type is invalid."""
        with pytest.raises(IllegalStateError, match="Damage type"):
            Damage(children=(d6,))

    def test_of_builds_damage(self):
        """of() tags an expression with a damage type."""
        damage = (d6 + 2).of(DamageType.SLASHING)
        assert isinstance(damage, Damage)
        assert damage.damage_type is DamageType.SLASHING
        assert damage.constant == 2

    def test_type_parsed_from_string(self):
        """String damage types are parsed."""
        assert d8.of("fire").damage_type is DamageType.FIRE

    def test_display(self):
        """Damage displays its dice then its type."""
        assert (d6 + d6 + 1).of(DamageType.SLASHING).display() == "2d6 + 1 slashing damage"

    def test_type_affects_equality(self):
        """Same dice of different types are different damage."""
        assert d6.of("fire") != d6.of("cold")
        assert d6.of("fire") == Damage(children=(d6,), damage_type=DamageType.FIRE)

    def test_damage_not_equal_to_plain_sequence(self):
        """Typed damage never equals an untyped sequence."""
        assert d6.of("fire") != Sequence.of_parts(d6)

    def test_add_keeps_type(self):
        """Adding to damage keeps it typed."""
        damage = d6.of("fire") + 2
        assert isinstance(damage, Damage)
        assert damage.damage_type is DamageType.FIRE

    def test_explode_keeps_type(self):
        """Exploded damage keeps its type."""
        assert explode(d6.of("piercing")) == d8.of("piercing")

    def test_critical_rolls_dice_twice(self, make_rng):
        """A critical rolls every die twice and adds the constant once."""
        damage = (d6 + 2).of("slashing").critical()
        rng = make_rng(4, 5)
        assert damage.roll(rng) == 11
        assert rng.randint.call_count == 2

    def test_critical_is_a_copy(self):
        """Marking a critical leaves the source damage untouched."""
        damage = d6.of("slashing")
        critical = damage.critical()
        assert critical.doubled
        assert not damage.doubled
        assert critical.normal() == damage

    def test_critical_statistics(self):
        """Critical bounds double the dice, not the constant."""
        damage = (d6 + 2).of("slashing").critical()
        assert damage.minimum() == 4
        assert damage.maximum() == 14
