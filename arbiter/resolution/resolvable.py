"""Resolvable requests: "of these options, which is best for this source?"."""

from collections.abc import Iterable
from typing import Generic, TypeVar

from arbiter.exceptions import EmptyOptionsError, UnresolvedRequestError
from arbiter.resolution.protocol import Attribute, Source

T = TypeVar("T")


class Resolvable(Generic[T]):
    """A pending choice between attribute types.

    Holds an ordered, duplicate-free list of acceptable options and, once
    resolved against a source, exactly one concrete attribute. Resolving
    again overwrites the previous result.

    Examples:
        >>> request = Resolvable(Ability.STR, Ability.DEX)
        >>> request.resolve(creature).type
        <Ability.STR: 'STR'>
    """

    def __init__(self, *options: T) -> None:
        self._options: list[T] = []
        self._result: Attribute[T] | None = None
        self.add_options(options)

    @classmethod
    def of(cls, options: Iterable[T]) -> "Resolvable[T]":
        """Build a request from any iterable of options."""
        return cls(*options)

    @classmethod
    def resolved(cls, result: Attribute[T]) -> "Resolvable[T]":
        """Build an already-resolved request around a known attribute."""
        request: Resolvable[T] = cls(result.type)
        request.set(result)
        return request

    @property
    def options(self) -> tuple[T, ...]:
        return tuple(self._options)

    @property
    def is_empty(self) -> bool:
        return not self._options

    @property
    def is_resolved(self) -> bool:
        return self._result is not None

    def add_option(self, option: T) -> "Resolvable[T]":
        if option not in self._options:
            self._options.append(option)
        return self

    def add_options(self, options: Iterable[T]) -> "Resolvable[T]":
        for option in options:
            self.add_option(option)
        return self

    def add_if(self, option: T, condition: bool) -> "Resolvable[T]":
        if condition:
            self.add_option(option)
        return self

    def resolve(self, source: Source[T]) -> Attribute[T]:
        """Ask the source for its best option and remember the answer.

        Raises:
            EmptyOptionsError: If there are no options; the source is not
                consulted.
        """
        if self.is_empty:
            raise EmptyOptionsError()
        self._result = source.resolve(self._options)
        return self._result

    def set(self, result: Attribute[T]) -> None:
        self._result = result

    def get(self) -> Attribute[T]:
        """The resolved attribute.

        Raises:
            UnresolvedRequestError: If not resolved yet.
        """
        if self._result is None:
            raise UnresolvedRequestError()
        return self._result

    def type(self) -> T:
        """The type of the resolved attribute.

        Raises:
            UnresolvedRequestError: If not resolved yet.
        """
        return self.get().type

    def __repr__(self) -> str:
        state = f"resolved={self._result!r}" if self.is_resolved else "unresolved"
        return f"Resolvable(options={self._options!r}, {state})"
