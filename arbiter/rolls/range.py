"""Attack ranges: melee reach or short/long ranged bands."""

from dataclasses import dataclass

from arbiter.dice.types import RollMode

DEFAULT_REACH = 1


@dataclass(frozen=True)
class Range:
    """Distance band of an attack, in the host's distance units.

    Attributes:
        short: Melee reach, or the normal range of a ranged attack.
        long: Long range of a ranged attack (None for melee).
    """

    short: int = DEFAULT_REACH
    long: int | None = None

    def __post_init__(self) -> None:
        if self.short < 1:
            raise ValueError(f"Range must be at least 1, got {self.short}")
        if self.long is not None and self.long < self.short:
            raise ValueError(f"Long range {self.long} is shorter than short range {self.short}")

    @classmethod
    def melee(cls, reach: int = DEFAULT_REACH) -> "Range":
        return cls(short=reach)

    @classmethod
    def ranged(cls, short: int, long: int) -> "Range":
        return cls(short=short, long=long)

    @property
    def is_ranged(self) -> bool:
        return self.long is not None

    @property
    def is_reach(self) -> bool:
        """Melee attack reaching further than adjacent."""
        return not self.is_ranged and self.short > DEFAULT_REACH

    def in_range(self, distance: int) -> bool:
        return distance <= (self.long if self.long is not None else self.short)

    def roll_mode(self, distance: int) -> RollMode:
        """Mode imposed by distance: disadvantage beyond short range.

        Raises:
            ValueError: If the target is out of range.
        """
        if not self.in_range(distance):
            raise ValueError(f"Target at {distance} is out of range")
        if distance <= self.short:
            return RollMode.STRAIGHT
        return RollMode.DISADVANTAGE

    def display(self) -> str:
        """Range annotation: "(20/60)" if ranged, "(Reach)" for reach, else empty."""
        if self.is_ranged:
            return f"({self.short}/{self.long})"
        if self.is_reach:
            return "(Reach)"
        return ""
