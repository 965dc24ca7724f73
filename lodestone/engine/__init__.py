"""
Lodestone Engine.

Pure Python random number engine with zero UI dependencies.
Handles generator selection, unbiased range sampling, normal deviates,
dice rolls and level-scaled bonuses, plus closed-form min/max/average
analysis of the same specifications.
"""

from lodestone.engine.base import (
    MAX_MODULUS,
    MAX_RAND_DEPTH,
    RAND_DEG,
    Aspect,
    GeneratorMode,
)
from lodestone.engine.bonus import BonusCurve, bonus, bonus_evaluate
from lodestone.engine.dice import DiceSpec, evaluate, has_variance, is_value_possible, roll
from lodestone.engine.generators import ComplexGenerator, FixedGenerator, QuickGenerator
from lodestone.engine.rng import Rng

__all__ = [
    # Constants
    "MAX_MODULUS",
    "MAX_RAND_DEPTH",
    "RAND_DEG",
    # Enums
    "Aspect",
    "GeneratorMode",
    # Generators
    "QuickGenerator",
    "ComplexGenerator",
    "FixedGenerator",
    "Rng",
    # Dice Calculus
    "DiceSpec",
    "roll",
    "evaluate",
    "is_value_possible",
    "has_variance",
    # Bonus Calculus
    "BonusCurve",
    "bonus",
    "bonus_evaluate",
]
