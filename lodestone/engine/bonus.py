"""
Lodestone - Bonus Calculus

Level-scaled enchantment bonuses bounded to [0, max]. The expected bonus
grows linearly with level and saturates at the curve's maximum depth;
sampled values scatter normally around it with a spread of a quarter of
max (by default).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from lodestone.engine.base import MAX_RAND_DEPTH, Aspect
from lodestone.engine.validators import validate_bonus_max

if TYPE_CHECKING:
    from lodestone.config.settings import Settings
    from lodestone.engine.rng import Rng


@dataclass(frozen=True)
class BonusCurve:
    """
    Shape of the level-scaled bonus.

    Attributes:
        max_depth: Level at which the expected bonus reaches max
        spread_divisor: Standard deviation of sampled bonuses is max / spread_divisor
    """
    max_depth: int = MAX_RAND_DEPTH
    spread_divisor: int = 4

    def __post_init__(self) -> None:
        if self.max_depth < 100:
            raise ValueError(f"Maximum depth must be at least 100, got {self.max_depth}.")
        if self.spread_divisor < 1:
            raise ValueError(f"Spread divisor must be at least 1, got {self.spread_divisor}.")

    @classmethod
    def from_settings(cls, settings: Settings) -> BonusCurve:
        return cls(
            max_depth=settings.max_rand_depth,
            spread_divisor=settings.bonus_spread_divisor,
        )

    def clamp_level(self, level: int) -> int:
        """Levels below 0 act as 0; levels past max_depth act as max_depth."""
        return max(0, min(level, self.max_depth))


DEFAULT_CURVE = BonusCurve()


def simulate_division(rng: Rng, dividend: int, divisor: int) -> int:
    """
    Integer division that rounds up with probability remainder / divisor.

    The expected result equals the exact quotient. Always consumes one
    randint0(divisor) draw, even when the division is exact.
    """
    quotient, remainder = divmod(dividend, divisor)
    if rng.randint0(divisor) < remainder:
        quotient += 1
    return quotient


def bonus(rng: Rng, max_bonus: int, level: int, curve: BonusCurve = DEFAULT_CURVE) -> int:
    """
    Sample a level-scaled bonus in [0, max_bonus].

    Args:
        rng: Source of randomness
        max_bonus: Upper bound of the bonus (>= 0)
        level: Dungeon level the bonus is generated at
        curve: Bonus curve shape

    Returns:
        Bonus value, normally distributed around max_bonus * level / max_depth
    """
    validate_bonus_max(max_bonus)
    level = curve.clamp_level(level)

    centre = simulate_division(rng, max_bonus * level, curve.max_depth)
    spread = simulate_division(rng, max_bonus, curve.spread_divisor)
    value = rng.normal(centre, spread)

    return max(0, min(value, max_bonus))


def bonus_evaluate(
    max_bonus: int,
    level: int,
    aspect: Aspect,
    rng: Rng | None = None,
    curve: BonusCurve = DEFAULT_CURVE,
) -> int:
    """
    Reduce a level-scaled bonus to one number.

    MINIMISE and MAXIMISE give the bounds 0 and max_bonus, AVERAGE the
    expected bonus at this level (rounded down), EXTREMIFY whichever bound
    lies farther from AVERAGE (MAXIMISE on a tie). RANDOMISE samples via
    bonus() and requires rng.
    """
    validate_bonus_max(max_bonus)

    if aspect.is_random and rng is None:
        raise ValueError("Randomise aspect requires an Rng.")

    if aspect is Aspect.MINIMISE:
        return 0
    if aspect is Aspect.MAXIMISE:
        return max_bonus
    if aspect is Aspect.AVERAGE:
        return max_bonus * curve.clamp_level(level) // curve.max_depth
    if aspect is Aspect.EXTREMIFY:
        average = bonus_evaluate(max_bonus, level, Aspect.AVERAGE, curve=curve)
        return max_bonus if max_bonus - average >= average else 0
    if aspect is Aspect.RANDOMISE:
        return bonus(rng, max_bonus, level, curve)
    raise ValueError(f"Unknown aspect {aspect!r}.")


def bonus_varies(max_bonus: int) -> bool:
    """True if the bonus can take more than one value at some level."""
    return validate_bonus_max(max_bonus) > 0
