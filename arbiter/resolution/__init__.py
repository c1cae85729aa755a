"""Attribute resolution protocol.

Lets any actor be asked "of these typed options, which is best, and what is
its value?".
"""

from arbiter.resolution.protocol import Attribute, AttributeType, Source
from arbiter.resolution.resolvable import Resolvable

__all__ = [
    "Attribute",
    "AttributeType",
    "Resolvable",
    "Source",
]
