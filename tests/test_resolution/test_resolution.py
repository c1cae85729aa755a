"""Tests for the attribute resolution protocol."""

from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

from arbiter.creatures import AbilityContour
from arbiter.exceptions import (
    EmptyOptionsError,
    IncomparableAttributesError,
    UnresolvedRequestError,
)
from arbiter.resolution import Attribute, AttributeType, Resolvable, Source
from arbiter.rolls import Ability, AbilityScore, Skill, SkillCheck


@dataclass(frozen=True)
class Speed(Attribute[str]):
    """Test attribute with a plain integer score."""

    feet: int = 30

    @property
    def score(self) -> int:
        return self.feet


class SpeedSource(Source[str]):
    """Test source backed by a dict."""

    def __init__(self, speeds: dict[str, int]) -> None:
        self.speeds = speeds
        self.calls: list[str] = []

    def provide(self, type_: str) -> Speed:
        self.calls.append(type_)
        return Speed(type_, self.speeds[type_])


class TestAttribute:
    """Tests for attribute comparison."""

    def test_compare_to(self):
        """compare_to orders by score."""
        assert Speed("walk", 30).compare_to(Speed("swim", 20)) == 1
        assert Speed("walk", 20).compare_to(Speed("swim", 30)) == -1
        assert Speed("walk", 30).compare_to(Speed("swim", 30)) == 0

    def test_over_is_strict(self):
        """over() is false on ties."""
        assert Speed("walk", 40).over(Speed("fly", 30))
        assert not Speed("walk", 30).over(Speed("fly", 30))

    def test_rich_comparisons(self):
        """Attributes support ordering operators."""
        assert Speed("walk", 20) < Speed("fly", 30)
        assert max([Speed("walk", 20), Speed("fly", 60)]).type == "fly"

    def test_incomparable_kinds(self):
        """Different attribute kinds cannot be compared."""
        with pytest.raises(IncomparableAttributesError):
            AbilityScore(Ability.STR, 10).compare_to(SkillCheck(Skill.ATHLETICS, 2))

    def test_ability_and_skill_are_attribute_types(self):
        """Abilities and skills fetch themselves from a source."""
        contour = AbilityContour.from_scores([15, 14, 13, 12, 10, 8])
        assert isinstance(Ability.STR, AttributeType)
        assert Ability.DEX.retrieve_from(contour) == AbilityScore(Ability.DEX, 14)


class TestSourceResolve:
    """Tests for picking the best option."""

    def test_picks_highest(self):
        """The highest score wins."""
        source = SpeedSource({"walk": 30, "fly": 60, "swim": 20})
        assert source.type(["walk", "fly", "swim"]) == "fly"

    def test_first_option_wins_ties(self):
        """On equal scores the earlier option is kept."""
        source = SpeedSource({"walk": 30, "climb": 30})
        assert source.type(["walk", "climb"]) == "walk"
        assert source.type(["climb", "walk"]) == "climb"

    def test_visits_in_order(self):
        """Options are provided in declaration order."""
        source = SpeedSource({"walk": 30, "fly": 60})
        source.resolve(["fly", "walk"])
        assert source.calls == ["fly", "walk"]

    def test_empty_options(self):
        """Resolving nothing is an error."""
        with pytest.raises(EmptyOptionsError):
            SpeedSource({}).resolve([])

    def test_ability_tie_prefers_first(self):
        """Equal abilities resolve to the first listed."""
        contour = AbilityContour.from_scores([14, 14, 10, 10, 10, 10])
        assert contour.type([Ability.DEX, Ability.STR]) is Ability.DEX


class TestResolvable:
    """Tests for resolvable requests."""

    def test_options_deduplicated_in_order(self):
        """Duplicate options are dropped, order kept."""
        request = Resolvable("walk", "fly", "walk")
        assert request.options == ("walk", "fly")

    def test_builders_chain(self):
        """add_option, add_options and add_if chain."""
        request = Resolvable.of(["walk"]).add_option("fly").add_options(["swim"]).add_if("climb", False)
        assert request.options == ("walk", "fly", "swim")

    def test_get_before_resolve(self):
        """Reading an unresolved request fails."""
        request = Resolvable("walk")
        with pytest.raises(UnresolvedRequestError):
            request.get()
        with pytest.raises(UnresolvedRequestError):
            request.type()

    def test_resolve_caches_result(self):
        """The resolved attribute is remembered."""
        request = Resolvable("walk", "fly")
        result = request.resolve(SpeedSource({"walk": 30, "fly": 60}))
        assert request.is_resolved
        assert request.get() is result
        assert request.type() == "fly"

    def test_resolve_again_overwrites(self):
        """A second resolve replaces the first result."""
        request = Resolvable("walk", "fly")
        request.resolve(SpeedSource({"walk": 30, "fly": 60}))
        request.resolve(SpeedSource({"walk": 50, "fly": 10}))
        assert request.type() == "walk"

    def test_empty_fails_before_consulting_source(self):
        """An empty request never touches the source."""
        source = MagicMock()
        with pytest.raises(EmptyOptionsError):
            Resolvable().resolve(source)
        source.resolve.assert_not_called()
        source.provide.assert_not_called()

    def test_resolved_constructor(self):
        """resolved() wraps a known attribute."""
        request = Resolvable.resolved(Speed("walk", 30))
        assert request.options == ("walk",)
        assert request.get().score == 30
