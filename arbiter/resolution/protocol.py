"""Attribute resolution protocol.

Decouples *which* modifier applies from *what* its value is. A roll declares
a set of acceptable attribute types (e.g. Strength or Dexterity for a
finesse weapon); the acting creature, as a ``Source``, provides the concrete
``Attribute`` for each option and picks the best one.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from arbiter.exceptions import EmptyOptionsError, IncomparableAttributesError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@runtime_checkable
class AttributeType(Protocol):
    """A tag (ability, skill, ...) that can fetch its attribute from a source."""

    def retrieve_from(self, source: "Source[Any]") -> "Attribute[Any]":
        """Get the concrete attribute of this type from a source."""
        ...


@dataclass(frozen=True)
class Attribute(ABC, Generic[T]):
    """A typed, comparable attribute value.

    Attributes:
        type: The attribute type tag this value belongs to.
    """

    type: T

    @property
    @abstractmethod
    def score(self) -> int:
        """The value compared when choosing between attributes."""

    def compare_to(self, other: "Attribute[T]") -> int:
        """Compare scores: negative, zero or positive.

        Raises:
            IncomparableAttributesError: If other is a different kind of
                attribute.
        """
        if type(other) is not type(self):
            raise IncomparableAttributesError(
                f"Cannot compare {type(self).__name__} to {type(other).__name__}"
            )
        return (self.score > other.score) - (self.score < other.score)

    def over(self, other: "Attribute[T]") -> bool:
        """True if this attribute is strictly better than other."""
        return self.compare_to(other) > 0

    def __lt__(self, other: "Attribute[T]") -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: "Attribute[T]") -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: "Attribute[T]") -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: "Attribute[T]") -> bool:
        return self.compare_to(other) >= 0


class Source(ABC, Generic[T]):
    """Something that can provide attributes and choose between them."""

    @abstractmethod
    def provide(self, type_: T) -> Attribute[T]:
        """Provide the attribute of the given type.

        Raises:
            AttributeNotFoundError: If this source has no such attribute.
        """

    def resolve(self, options: Iterable[T]) -> Attribute[T]:
        """Pick the best attribute among the options.

        Options are visited in order and the running best is only replaced
        by a strictly greater one, so the first option wins ties.

        Args:
            options: Acceptable attribute types, in preference order.

        Returns:
            The best attribute.

        Raises:
            EmptyOptionsError: If there are no options.
        """
        best: Attribute[T] | None = None
        for option in options:
            candidate = self.provide(option)
            if best is None or candidate.over(best):
                best = candidate
        if best is None:
            raise EmptyOptionsError()
        logger.debug(f"Resolved {best.type!r} (score {best.score})")
        return best

    def type(self, options: Iterable[T]) -> T:
        """Type of the best attribute among the options."""
        return self.resolve(options).type
