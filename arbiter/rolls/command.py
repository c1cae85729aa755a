"""Roll commands: one roll sent from a source creature to a target.

A command goes Created -> Attached (optional) -> Sent -> Reported:

    >>> command = RollCommand(attack).attach(fighter)
    >>> command.send_to(goblin)
    True
    >>> command.report()
    'Melee Attack: Longsword (1d8 slashing damage): Fighter hits Goblin (AC 15)'

Who rolls and what the difficulty is depends on the roll kind:

| Kind    | Difficulty                       | Roller | Success favors |
|---------|----------------------------------|--------|----------------|
| Attack  | target's armor class             | source | source         |
| Save    | source's DC for the save ability | target | target         |
| Check   | fixed DC set with ``with_dc``    | target | target         |
| Contest | target's check in its best skill | source | source         |
"""

import logging
import random
from dataclasses import dataclass

from arbiter.dice.types import RollMode
from arbiter.exceptions import IllegalStateError, UnsupportedOperationError
from arbiter.resolution.resolvable import Resolvable
from arbiter.rolls.abilities import Ability
from arbiter.rolls.actor import Actor
from arbiter.rolls.model import (
    Attack,
    Check,
    Contest,
    Roll,
    Save,
    check_value,
    display,
    execute,
    resolve_bonus,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RollOutcome:
    """Result of sending a roll command.

    Attributes:
        success: Whether the roller met the difficulty.
        total: The roller's d20 + bonus.
        difficulty: The DC, AC or opposing check that had to be met.
    """

    success: bool
    total: int
    difficulty: int


class RollCommand:
    """Binds a roll to a source and a target and resolves it.

    Attributes:
        roll: The roll to execute.
        source: The acting creature (initiator of the roll).
        target: The creature the roll was sent to.
        mode: Roll mode applied to the roller's d20.
        sent: Whether send_to() has been called.
        success: Outcome from the source's side for attacks and contests,
            from the target's side for saves and checks.
        source_value: Source's roll total, or the DC it imposes.
        target_value: Target's roll total, or its AC / opposing check.
    """

    def __init__(
        self,
        roll: Roll,
        mode: RollMode = RollMode.STRAIGHT,
        rng: random.Random | None = None,
    ) -> None:
        self.roll = roll
        self.mode = mode
        self.rng = rng
        self.source: Actor | None = None
        self.target: Actor | None = None
        self._ability: Resolvable[Ability] = Resolvable.of(roll.ability_options)
        self._fixed_dc: int | None = None
        self.require_source = True
        self.sent = False
        self.success: bool | None = None
        self.source_value = 0
        self.target_value = 0

    @property
    def source_ability(self) -> Ability | None:
        """Ability resolved for the source on attach, if any."""
        return self._ability.type() if self._ability.is_resolved else None

    @property
    def fixed_dc(self) -> int | None:
        return self._fixed_dc

    @property
    def outcome(self) -> RollOutcome | None:
        """The last outcome, or None before the command is sent."""
        if not self.sent:
            return None
        if self._source_rolls:
            return RollOutcome(self.success, self.source_value, self.target_value)
        return RollOutcome(self.success, self.target_value, self.source_value)

    @property
    def _source_rolls(self) -> bool:
        return isinstance(self.roll, (Attack, Contest))

    def attach(self, source: Actor) -> "RollCommand":
        """Bind the acting creature and resolve the ability it will use."""
        self.source = source
        self._ability.resolve(source)
        logger.debug(f"{source.name} attached to {display(self.roll)} using {self._ability.type()!r}")
        return self

    def with_dc(self, dc: int) -> "RollCommand":
        """Fix the difficulty; the command no longer needs a source."""
        self._fixed_dc = dc
        self.require_source = False
        return self

    def with_mode(self, mode: RollMode) -> "RollCommand":
        """Apply a roll mode; advantage and disadvantage cancel out."""
        self.mode = self.mode.combine(mode)
        return self

    def _require_source(self) -> Actor:
        if self.source is None:
            raise IllegalStateError("Source is required")
        return self.source

    def difficulty_class(self) -> int:
        """DC of a save or check.

        A fixed DC always wins; otherwise a save uses the source's DC for
        the resolved ability.

        Raises:
            UnsupportedOperationError: For attacks and contests.
            IllegalStateError: If the DC cannot be determined.
        """
        match self.roll:
            case Attack() | Contest():
                raise UnsupportedOperationError(f"{self.roll.kind.value.capitalize()} rolls have no DC")
            case Check():
                if self._fixed_dc is None:
                    raise IllegalStateError("Check must have a set DC")
                return self._fixed_dc
            case Save():
                if self._fixed_dc is not None:
                    return self._fixed_dc
                source = self._require_source()
                if not self._ability.is_resolved:
                    raise IllegalStateError("Save must have a source ability")
                return source.difficulty_class(self._ability.type())

    def source_bonus(self) -> int:
        """Source's total modifier for the roll.

        Raises:
            IllegalStateError: If no source is attached.
        """
        return resolve_bonus(self.roll, self._require_source())

    def send_to(self, target: Actor) -> bool:
        """Resolve the roll against a target.

        Sending again re-rolls and overwrites the previous outcome.

        Returns:
            The recorded success flag.

        Raises:
            IllegalStateError: If a required source or DC is missing.
        """
        if self.require_source and self.source is None:
            raise IllegalStateError("Source is required")

        roll = self.roll
        match roll:
            case Attack():
                source = self._require_source()
                difficulty = target.armor_class()
                total = execute(roll, source, self.mode, self.rng)
                self.source_value, self.target_value = total, difficulty
            case Save():
                difficulty = self.difficulty_class()
                total = execute(roll, target, self.mode, self.rng)
                self.source_value, self.target_value = difficulty, total
            case Check():
                difficulty = self.difficulty_class()
                total = execute(roll, target, self.mode, self.rng)
                self.source_value, self.target_value = difficulty, total
            case Contest():
                source = self._require_source()
                best_skill = target.type(roll.target_skill_options)
                difficulty = check_value(target, best_skill, RollMode.STRAIGHT, self.rng)
                total = execute(roll, source, self.mode, self.rng)
                self.source_value, self.target_value = total, difficulty

        self.target = target
        self.success = total >= difficulty
        self.sent = True
        logger.debug(
            f"{display(roll)} sent to {target.name}: {total} vs {difficulty} "
            f"-> {'success' if self.success else 'failure'}"
        )
        return self.success

    def report(self) -> str:
        """Readable result of the last send.

        Raises:
            IllegalStateError: If the command has not been sent.
        """
        if not self.sent:
            raise IllegalStateError("Roll has not been sent")

        target_name = self.target.name
        match self.roll:
            case Attack():
                verb = "hits" if self.success else "misses"
                result = f"{self.source.name} {verb} {target_name} (AC {self.target_value})"
            case Save():
                verb = "succeeds" if self.success else "fails"
                if self.source is not None:
                    against = f"against {self.source.name}'s {self.roll.ability.label} save"
                else:
                    against = f"on {self.roll.ability.label} save"
                result = f"{target_name} {verb} {against} (DC {self.source_value})"
            case Check():
                verb = "succeeds" if self.success else "fails"
                result = f"{target_name} {verb} on {self.roll.skill.label} check (DC {self.source_value})"
            case Contest():
                verb = "beats" if self.success else "loses to"
                result = (
                    f"{self.source.name} {verb} {target_name} "
                    f"in a skill contest (DC {self.target_value})"
                )
        return f"{display(self.roll)}: {result}"

    def display(self) -> str:
        """The roll with its DC (checks, saves) or source bonus (attacks, contests)."""
        match self.roll:
            case Check() | Save():
                return f"{display(self.roll)} (DC {self.difficulty_class()})"
            case Attack() | Contest():
                return f"{display(self.roll)} ({self.source_bonus():+d})"

    def copy(self) -> "RollCommand":
        """Independent command with the same state."""
        other = RollCommand(self.roll, self.mode, self.rng)
        other.source = self.source
        other.target = self.target
        if self._ability.is_resolved:
            other._ability.set(self._ability.get())
        other._fixed_dc = self._fixed_dc
        other.require_source = self.require_source
        other.sent = self.sent
        other.success = self.success
        other.source_value = self.source_value
        other.target_value = self.target_value
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RollCommand):
            return NotImplemented
        same = (
            self.roll == other.roll
            and self.source_ability == other.source_ability
            and self._fixed_dc == other._fixed_dc
            and self.require_source == other.require_source
            and self.sent == other.sent
        )
        if same and self.sent:
            same = (
                self.success == other.success
                and self.source_value == other.source_value
                and self.target_value == other.target_value
            )
        return same

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"RollCommand(roll={self.roll!r}, source_ability={self.source_ability!r}, "
            f"fixed_dc={self._fixed_dc!r}, sent={self.sent}, success={self.success})"
        )
