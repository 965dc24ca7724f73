"""
Lodestone - Dice Calculus

Sampling and closed-form evaluation of dice rolls and of DiceSpec,
the "base + NdS + level-scaled bonus" specification used for damage,
item and monster generation.

The same evaluate() call produces both real outcomes (Aspect.RANDOMISE)
and display values (every other aspect), so display code never needs a
separate formula.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from lodestone.engine.base import Aspect
from lodestone.engine.bonus import DEFAULT_CURVE, BonusCurve, bonus_evaluate, bonus_varies
from lodestone.engine.validators import validate_bonus_max, validate_dice

if TYPE_CHECKING:
    from lodestone.engine.rng import Rng


def roll(rng: Rng, dice: int, sides: int) -> int:
    """
    Roll `dice` dice with `sides` sides each and return the total.

    Returns 0 without consuming any draws when dice is 0.
    """
    validate_dice(dice, sides)
    return sum(rng.randint1(sides) for _ in range(dice))


def evaluate(dice: int, sides: int, aspect: Aspect, rng: Rng | None = None) -> int:
    """
    Reduce NdS to one number.

    Aspects:
        MINIMISE: every die shows 1
        MAXIMISE: every die shows `sides`
        AVERAGE: dice * (sides + 1) / 2, rounded half up
        EXTREMIFY: whichever of MINIMISE/MAXIMISE is farther from AVERAGE,
                   MAXIMISE on a tie
        RANDOMISE: roll(rng, dice, sides); requires rng

    Raises:
        ValueError: On invalid dice, or RANDOMISE without an rng
    """
    validate_dice(dice, sides)

    if aspect.is_random and rng is None:
        raise ValueError("Randomise aspect requires an Rng.")

    if aspect is Aspect.MINIMISE:
        return dice
    if aspect is Aspect.MAXIMISE:
        return dice * sides
    if aspect is Aspect.AVERAGE:
        return (dice * (sides + 1) + 1) // 2
    if aspect is Aspect.EXTREMIFY:
        average = evaluate(dice, sides, Aspect.AVERAGE)
        if dice * sides - average >= average - dice:
            return dice * sides
        return dice
    if aspect is Aspect.RANDOMISE:
        return roll(rng, dice, sides)
    raise ValueError(f"Unknown aspect {aspect!r}.")


# [base+][N]dS[Mbonus], or a bare constant with an optional bonus
_DICE_PATTERN = re.compile(
    r"^(?:(?P<base>-?\d+)\+(?=\d*d)|(?P<constant>-?\d+)(?=m|$))?"
    r"(?:(?P<dice>\d*)d(?P<sides>\d+))?"
    r"(?:m(?P<bonus>\d+))?$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class DiceSpec:
    """
    A stochastic outcome: base + `dice`d`sides` + a level-scaled bonus.

    Attributes:
        base: Constant added to every outcome
        dice: Number of dice (>= 0)
        sides: Sides per die (>= 1 when dice > 0; ignored otherwise)
        bonus: Maximum of the level-scaled bonus (>= 0)
    """
    base: int = 0
    dice: int = 0
    sides: int = 0
    bonus: int = 0

    def __post_init__(self) -> None:
        """Validate dice and bonus bounds. Sides are dropped when no dice are rolled."""
        validate_dice(self.dice, self.sides)
        validate_bonus_max(self.bonus)
        if self.dice == 0 and self.sides != 0:
            object.__setattr__(self, "sides", 0)

    @classmethod
    def parse(cls, text: str) -> DiceSpec:
        """
        Parse compact dice notation, e.g. "2d6", "5+1d4", "d8M3", "10".

        Raises:
            ValueError: If the text is not valid notation
        """
        cleaned = "".join(text.split())
        match = _DICE_PATTERN.match(cleaned) if cleaned else None
        if match is None:
            raise ValueError(f"Invalid dice notation {text!r}.")

        base = match.group("base") or match.group("constant") or "0"
        sides = match.group("sides")
        if sides is None:
            dice = 0
        else:
            dice = int(match.group("dice") or "1")

        return cls(
            base=int(base),
            dice=dice,
            sides=int(sides or "0"),
            bonus=int(match.group("bonus") or "0"),
        )

    def evaluate(
        self,
        level: int,
        aspect: Aspect,
        rng: Rng | None = None,
        curve: BonusCurve = DEFAULT_CURVE,
    ) -> int:
        """
        Reduce the whole specification to one number at the given level.

        The result is base + evaluate(dice, sides, aspect) +
        bonus_evaluate(bonus, level, aspect). RANDOMISE draws the dice
        first, then the bonus.
        """
        return (
            self.base
            + evaluate(self.dice, self.sides, aspect, rng)
            + bonus_evaluate(self.bonus, level, aspect, rng, curve)
        )

    def is_value_possible(self, level: int, test: int, curve: BonusCurve = DEFAULT_CURVE) -> bool:
        """True if `test` lies between the minimum and maximum outcomes at this level."""
        low = self.evaluate(level, Aspect.MINIMISE, curve=curve)
        high = self.evaluate(level, Aspect.MAXIMISE, curve=curve)
        return low <= test <= high

    def has_variance(self) -> bool:
        """True unless the specification always yields one fixed number."""
        return self.dice > 1 or self.sides > 1 or bonus_varies(self.bonus)

    def __str__(self) -> str:
        if self.dice > 0:
            text = f"{self.dice}d{self.sides}"
            if self.base:
                text = f"{self.base}+{text}"
        else:
            text = str(self.base)
        if self.bonus:
            text += f"M{self.bonus}"
        return text


def is_value_possible(
    spec: DiceSpec, level: int, test: int, curve: BonusCurve = DEFAULT_CURVE
) -> bool:
    """Module-level form of DiceSpec.is_value_possible."""
    return spec.is_value_possible(level, test, curve)


def has_variance(spec: DiceSpec) -> bool:
    """Module-level form of DiceSpec.has_variance."""
    return spec.has_variance()
