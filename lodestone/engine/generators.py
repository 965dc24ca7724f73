"""
Lodestone - Generator Algorithms

Three interchangeable sources of raw 32-bit words:

- QuickGenerator: one-word linear congruential recurrence. Cheap, poor
  quality, reserved for cosmetic draws.
- ComplexGenerator: WELL1024a over 32 words of state. Used for every
  gameplay-determining draw.
- FixedGenerator: returns a pinned fraction of every requested range.
  Used to drive callers to known extremes in tests.

Every generator maps its raw output onto [0, m) the same way, via
Generator.draw_below, so swapping algorithms never changes the sampler.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from lodestone.engine.base import GeneratorMode, MAX_MODULUS, RAND_DEG, WORD_MASK
from lodestone.engine.validators import validate_modulus, validate_percent, validate_seed


def lcrng(value: int) -> int:
    """One step of the linear congruential recurrence, modulo 2**32."""
    return (value * 1103515245 + 12345) & WORD_MASK


class Generator(ABC):
    """Base class for a raw word source plus the unbiased range sampler."""

    mode: ClassVar[GeneratorMode]

    @abstractmethod
    def next_word(self) -> int:
        """Advance the generator and return a raw 32-bit word."""

    def draw_below(self, m: int) -> int:
        """
        Return an integer uniformly distributed over [0, m).

        The top 28 bits of each raw word are split into m partitions of
        equal size; words landing in the leftover tail are rejected and
        redrawn, so every result owns exactly the same number of raw values.

        Args:
            m: Range size, 1 <= m <= MAX_MODULUS

        Returns:
            Integer in [0, m)

        Raises:
            ValueError: If m is out of range
        """
        validate_modulus(m)

        # Only one outcome; don't advance the generator
        if m == 1:
            return 0

        partition = MAX_MODULUS // m
        while True:
            r = (self.next_word() >> 4) // partition
            if r < m:
                return r


class QuickGenerator(Generator):
    """Single-word linear congruential generator."""

    mode = GeneratorMode.QUICK

    def __init__(self, value: int = 0) -> None:
        self.value = validate_seed(value)

    def next_word(self) -> int:
        self.value = lcrng(self.value)
        return self.value

    def __repr__(self) -> str:
        return f"QuickGenerator(value={self.value})"


# WELL1024a parameters
_M1 = 3
_M2 = 24
_M3 = 10
_SEED_MIX_ROUNDS = RAND_DEG * 10


class ComplexGenerator(Generator):
    """
    WELL1024a generator over RAND_DEG words of state.

    Attributes:
        state: The RAND_DEG state words
        index: Rotating cursor into state
        z0, z1, z2: Tempering words from the most recent draw
    """

    mode = GeneratorMode.COMPLEX

    def __init__(self, seed: int = 0) -> None:
        self.state: list[int] = [0] * RAND_DEG
        self.index = 0
        self.z0 = 0
        self.z1 = 0
        self.z2 = 0
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """
        Derive the full state from a single 32-bit value.

        The first word is the seed itself, the rest are filled by the
        linear congruential recurrence, then the table is cycled ten times
        per word so that nearby seeds diverge quickly.
        """
        validate_seed(seed)

        state = [0] * RAND_DEG
        state[0] = seed
        for i in range(1, RAND_DEG):
            state[i] = lcrng(state[i - 1])

        index = 0
        for _ in range(_SEED_MIX_ROUNDS):
            j = (index + 1) % RAND_DEG
            state[j] = (state[j] + state[index]) & WORD_MASK
            index = j

        self.state = state
        self.index = index
        self.z0 = self.z1 = self.z2 = 0

    def next_word(self) -> int:
        state = self.state
        i = self.index
        last = (i + RAND_DEG - 1) % RAND_DEG

        vm1 = state[(i + _M1) % RAND_DEG]
        vm2 = state[(i + _M2) % RAND_DEG]
        vm3 = state[(i + _M3) % RAND_DEG]

        z0 = state[last]
        z1 = state[i] ^ vm1 ^ (vm1 >> 8)
        z2 = (vm2 ^ (vm2 << 19) ^ vm3 ^ (vm3 << 14)) & WORD_MASK

        state[i] = z1 ^ z2
        state[last] = (
            z0 ^ (z0 << 11) ^ z1 ^ (z1 << 7) ^ z2 ^ (z2 << 13)
        ) & WORD_MASK

        self.z0, self.z1, self.z2 = z0, z1, z2
        self.index = last
        return state[last]

    @property
    def state_words(self) -> tuple[int, ...]:
        """Immutable copy of the state table, cursor excluded."""
        return tuple(self.state)

    def __repr__(self) -> str:
        return f"ComplexGenerator(index={self.index})"


class FixedGenerator(Generator):
    """
    Pins every draw to a fixed percentage of the requested range.

    draw_below(m) returns percent% of (m - 1), rounded down, so
    percent=0 always yields the minimum and percent=100 the maximum.
    """

    mode = GeneratorMode.FIXED

    def __init__(self, percent: int) -> None:
        self.percent = validate_percent(percent)

    def next_word(self) -> int:
        """Fixed mode never produces raw words; only draw_below is meaningful."""
        raise TypeError("FixedGenerator has no raw word stream; use draw_below.")

    def draw_below(self, m: int) -> int:
        validate_modulus(m)
        return (self.percent * 1000 * (m - 1)) // (100 * 1000)

    def __repr__(self) -> str:
        return f"FixedGenerator(percent={self.percent})"
