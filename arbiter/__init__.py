"""Arbiter: action resolution for d20 tabletop rules.

Subpackages:
    dice: symbolic dice expressions and d20 rolling.
    resolution: picking the best attribute among typed options.
    rolls: checks, saves, attacks, contests and roll commands.
    creatures: reference actors.
"""

__version__ = "0.1.0"
