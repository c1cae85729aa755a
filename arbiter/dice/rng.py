"""Process-wide random generator for dice.

Every random operation in the engine accepts an explicit ``rng``; when it is
omitted the shared generator from this module is used. The shared generator
is seeded from ``settings.rng_seed`` so whole runs can be reproduced.
"""

import logging
import random

from arbiter.config import get_settings

logger = logging.getLogger(__name__)

_default_rng: random.Random | None = None


def get_rng(rng: random.Random | None = None) -> random.Random:
    """Get the generator to draw from.

    Args:
        rng: Explicit generator. Returned unchanged when given.

    Returns:
        The explicit generator, or the shared default one.
    """
    global _default_rng
    if rng is not None:
        return rng
    if _default_rng is None:
        seed = get_settings().rng_seed
        logger.debug(f"Creating default dice generator (seed={seed})")
        _default_rng = random.Random(seed)
    return _default_rng


def seed_rng(seed: int | None) -> random.Random:
    """Replace the shared generator with a freshly seeded one."""
    global _default_rng
    _default_rng = random.Random(seed)
    return _default_rng
