"""The capability a host creature must offer to take part in rolls."""

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from arbiter.resolution.protocol import Attribute
from arbiter.rolls.abilities import Ability
from arbiter.rolls.proficiency import WeaponClass
from arbiter.rolls.skills import Skill


@runtime_checkable
class Actor(Protocol):
    """A creature that can provide attributes and proficiencies.

    Implementations are expected to be ``Source`` instances for both
    abilities and skills.
    """

    name: str

    def provide(self, type_: Any) -> Attribute[Any]:
        """Concrete attribute for an ability or skill.

        Raises:
            AttributeNotFoundError: If the actor has no such attribute.
        """
        ...

    def resolve(self, options: Iterable[Any]) -> Attribute[Any]:
        """Best attribute among options; first option wins ties."""
        ...

    def type(self, options: Iterable[Any]) -> Any:
        """Type of the best attribute among options."""
        ...

    def proficiency_bonus(self, key: Skill | Ability | WeaponClass) -> int:
        """Proficiency bonus in a skill, saving throw or weapon class (0 if none)."""
        ...

    def armor_class(self) -> int:
        ...

    def difficulty_class(self, ability: Ability) -> int:
        """DC of effects this actor imposes using an ability."""
        ...
