"""
Lodestone - Engine Base Definitions

Enums and constants shared by the generators, samplers and calculus
modules. Everything here is plain data: no randomness is consumed.
"""

from enum import Enum, auto


# Assumed maximum dungeon depth. Level-scaled bonuses saturate here.
# Must be at least 100.
MAX_RAND_DEPTH = 128

# Number of 32-bit words of Complex Generator state.
RAND_DEG = 32

# Largest modulus the uniform sampler accepts (28 bits of raw output).
MAX_MODULUS = 0x10000000

WORD_MASK = 0xFFFFFFFF


class Aspect(Enum):
    """
    How a stochastic specification is reduced to a single number.

    MINIMISE, AVERAGE, MAXIMISE and EXTREMIFY are pure functions of the
    specification. RANDOMISE consumes draws from a generator.
    """
    MINIMISE = auto()
    AVERAGE = auto()
    MAXIMISE = auto()
    EXTREMIFY = auto()
    RANDOMISE = auto()

    @property
    def is_random(self) -> bool:
        """Returns True if evaluating this aspect consumes generator state."""
        return self is Aspect.RANDOMISE


class GeneratorMode(Enum):
    """Which algorithm services uniform draws."""
    QUICK = "quick"
    COMPLEX = "complex"
    FIXED = "fixed"
