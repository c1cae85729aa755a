"""Reference creatures usable as roll sources and targets."""

from arbiter.creatures.contour import AbilityContour
from arbiter.creatures.creature import Creature

__all__ = [
    "AbilityContour",
    "Creature",
]
