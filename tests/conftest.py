"""
Lodestone - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import itertools
from typing import Callable

import pytest

from lodestone.engine.dice import DiceSpec
from lodestone.engine.rng import Rng


GOLDEN_SEED = 12345


# =============================================================================
# GENERATOR FIXTURES
# =============================================================================

@pytest.fixture
def counting_entropy() -> Callable[[], int]:
    """Deterministic stand-in for the OS entropy source: 1000, 1001, ..."""
    counter = itertools.count(1000)
    return lambda: next(counter)


@pytest.fixture
def rng(counting_entropy) -> Rng:
    """Rng on the Complex Generator, seeded with the golden seed."""
    return Rng(seed=GOLDEN_SEED, entropy=counting_entropy)


@pytest.fixture
def quick_rng(counting_entropy) -> Rng:
    """Rng with the Quick Generator selected."""
    return Rng(seed=GOLDEN_SEED, quick=True, entropy=counting_entropy)


# =============================================================================
# DICE SPEC TEST DATA
# =============================================================================

@pytest.fixture
def dice_specs() -> dict[str, tuple[DiceSpec, int, int, int]]:
    """
    Common specifications with expected analytic values at level 0.

    Returns:
        Dict mapping name to (spec, minimum, average, maximum)
    """
    return {
        "longsword": (DiceSpec(base=0, dice=2, sides=6, bonus=0), 2, 7, 12),
        "dagger": (DiceSpec(base=0, dice=1, sides=4, bonus=0), 1, 3, 4),
        "flat": (DiceSpec(base=10), 10, 10, 10),
        "based": (DiceSpec(base=5, dice=3, sides=8), 8, 19, 29),
        "enchanted": (DiceSpec(base=0, dice=1, sides=6, bonus=5), 1, 4, 11),
        "negative_base": (DiceSpec(base=-3, dice=1, sides=6), -2, 1, 3),
    }
