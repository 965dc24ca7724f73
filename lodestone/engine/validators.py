"""
Lodestone - Input Validation Utilities

Precondition checks for the engine's public operations. All validators
either return the validated value or raise a descriptive ValueError.
Degenerate inputs are caller bugs, so nothing here tries to repair them.
"""

from lodestone.engine.base import MAX_MODULUS, WORD_MASK


def _require_int(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}.")
    return value


def validate_modulus(m: int) -> int:
    """
    Validate the range size handed to the uniform sampler.

    Args:
        m: Number of equally likely outcomes

    Returns:
        Validated modulus

    Raises:
        ValueError: If m is not in [1, MAX_MODULUS]
    """
    _require_int(m, "Modulus")

    if m < 1:
        raise ValueError(f"Modulus must be at least 1, got {m}.")

    if m > MAX_MODULUS:
        raise ValueError(f"Modulus must be at most {MAX_MODULUS:#x}, got {m:#x}.")

    return m


def validate_seed(seed: int) -> int:
    """
    Validate a 32-bit generator seed.

    Raises:
        ValueError: If seed does not fit in an unsigned 32-bit word
    """
    _require_int(seed, "Seed")

    if not (0 <= seed <= WORD_MASK):
        raise ValueError(f"Seed must be between 0 and {WORD_MASK}, got {seed}.")

    return seed


def validate_dice(dice: int, sides: int) -> tuple[int, int]:
    """
    Validate a dice count and side count.

    Sides are only checked for a lower bound when at least one die is rolled.

    Args:
        dice: Number of dice (>= 0)
        sides: Sides per die (>= 1 when dice > 0, >= 0 otherwise)

    Returns:
        Validated (dice, sides) pair

    Raises:
        ValueError: If either value is negative, or dice > 0 with sides < 1
    """
    _require_int(dice, "Dice count")
    _require_int(sides, "Side count")

    if dice < 0:
        raise ValueError(f"Dice count cannot be negative, got {dice}.")

    if sides < 0:
        raise ValueError(f"Side count cannot be negative, got {sides}.")

    if dice > 0 and sides < 1:
        raise ValueError(f"Rolling {dice} dice requires at least 1 side, got {sides}.")

    return dice, sides


def validate_bonus_max(max_bonus: int) -> int:
    """
    Validate the upper bound of a level-scaled bonus.

    Raises:
        ValueError: If max_bonus is negative
    """
    _require_int(max_bonus, "Bonus maximum")

    if max_bonus < 0:
        raise ValueError(f"Bonus maximum cannot be negative, got {max_bonus}.")

    return max_bonus


def validate_range(low: int, high: int) -> tuple[int, int]:
    """
    Validate an inclusive [low, high] range for rand_range.

    Raises:
        ValueError: If high < low or the span exceeds MAX_MODULUS
    """
    _require_int(low, "Range start")
    _require_int(high, "Range end")

    if high < low:
        raise ValueError(f"Range end {high} is below range start {low}.")

    validate_modulus(high - low + 1)
    return low, high


def validate_percent(percent: int) -> int:
    """
    Validate a fixed-mode percentage.

    Raises:
        ValueError: If percent is not in [0, 100]
    """
    _require_int(percent, "Fixed percentage")

    if not (0 <= percent <= 100):
        raise ValueError(f"Fixed percentage must be between 0 and 100, got {percent}.")

    return percent
