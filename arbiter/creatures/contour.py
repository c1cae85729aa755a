"""A creature's six ability scores."""

from collections.abc import Iterable, Sequence

from arbiter.exceptions import AttributeNotFoundError
from arbiter.resolution.protocol import Source
from arbiter.rolls.abilities import Ability, AbilityScore, ability_modifier

DEFAULT_SCORE = 10


class AbilityContour(Source[Ability]):
    """Ability scores keyed by ability, 10 unless set.

    Example:
        >>> contour = AbilityContour.from_scores([15, 14, 13, 12, 10, 8])
        >>> contour.modifier(Ability.STR)
        2
        >>> contour.type([Ability.STR, Ability.DEX])
        <Ability.STR: 'STR'>
    """

    def __init__(self, scores: dict[Ability, int] | None = None) -> None:
        self._scores = {ability: DEFAULT_SCORE for ability in Ability}
        for ability, value in (scores or {}).items():
            self._scores[Ability(ability)] = value

    @classmethod
    def from_scores(cls, scores: Sequence[int]) -> "AbilityContour":
        """Build from six scores in STR, DEX, CON, INT, WIS, CHA order.

        Raises:
            ValueError: If there are not exactly six scores.
        """
        if len(scores) != len(Ability):
            raise ValueError(f"Expected {len(Ability)} ability scores, got {len(scores)}")
        return cls(dict(zip(Ability, scores)))

    def score(self, ability: Ability) -> int:
        return self._scores[ability]

    def modifier(self, ability: Ability) -> int:
        return ability_modifier(self._scores[ability])

    def set_score(self, ability: Ability, value: int) -> "AbilityContour":
        self._scores[Ability(ability)] = value
        return self

    def provide(self, type_: Ability) -> AbilityScore:
        if not isinstance(type_, Ability):
            raise AttributeNotFoundError(type_)
        return AbilityScore(type_, self._scores[type_])

    def resolve(self, options: Iterable[Ability]) -> AbilityScore:
        return super().resolve(options)

    def as_dict(self) -> dict[Ability, int]:
        return dict(self._scores)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbilityContour):
            return NotImplemented
        return self._scores == other._scores

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        scores = ", ".join(f"{ability.value}={value}" for ability, value in self._scores.items())
        return f"AbilityContour({scores})"
