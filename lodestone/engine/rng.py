"""
Lodestone - Random Number Context

An Rng owns one Quick Generator, one Complex Generator and a private
Quick Generator for draws that must never affect gameplay. Exactly one
of the first two (or a FixedGenerator, see fix()) services draw_below
at any time; selecting one never reads or perturbs the others.

Every higher-level draw (randint0, randint1, rand_spread, one_in,
rand_range, normal, dice and bonus calculus) goes through draw_below.

Rng instances are independent. Use one per logical owner; an instance
is not safe to share between threads without external locking.
"""

from __future__ import annotations

import logging
import secrets
from typing import TYPE_CHECKING, Callable

from lodestone.engine.base import GeneratorMode, WORD_MASK
from lodestone.engine.generators import (
    ComplexGenerator,
    FixedGenerator,
    Generator,
    QuickGenerator,
)
from lodestone.engine.normal import normal_deviate
from lodestone.engine.validators import validate_range, validate_seed

if TYPE_CHECKING:
    from lodestone.config.settings import Settings

logger = logging.getLogger(__name__)

EntropySource = Callable[[], int]


def system_entropy() -> int:
    """Fresh 32-bit value from the operating system."""
    return secrets.randbits(32)


class Rng:
    """
    Generator state plus the uniform sampler built on it.

    Args:
        seed: Seed for the Complex Generator. If None, the entropy source
              seeds it instead.
        quick: Start with the Quick Generator selected
        entropy: Callable returning fresh 32-bit values. Defaults to the
                 OS source.
    """

    def __init__(
        self,
        seed: int | None = None,
        quick: bool = False,
        entropy: EntropySource = system_entropy,
    ) -> None:
        self._entropy = entropy
        self.quick = QuickGenerator()
        self.complex = ComplexGenerator()
        self._simple = QuickGenerator(self._fresh_word())
        self._active: Generator = self.complex
        self._unfixed: Generator | None = None

        if seed is None:
            self.init_from_entropy()
        else:
            self.init_from_seed(seed)

        self.set_quick_mode(quick)

    @classmethod
    def from_settings(cls, settings: Settings) -> Rng:
        """Build an Rng seeded and configured from application settings."""
        return cls(seed=settings.seed, quick=settings.quick_mode)

    def _fresh_word(self) -> int:
        return self._entropy() & WORD_MASK

    # ── Seeding ─────────────────────────────────────────────────────────

    def init_from_seed(self, seed: int) -> None:
        """
        Deterministically reseed the Complex Generator.

        Two Rng instances seeded with the same value produce identical
        Complex Generator sequences on every platform. The Quick Generator
        is left alone.
        """
        validate_seed(seed)
        self.complex.seed(seed)
        logger.info("Complex generator seeded with %s", seed)

    def init_from_entropy(self) -> None:
        """Reseed the Complex Generator and reset the Quick Generator from entropy."""
        self.complex.seed(self._fresh_word())
        self.quick.value = self._fresh_word()
        logger.info("Generators seeded from entropy source")

    # ── Mode selection ──────────────────────────────────────────────────

    def set_quick_mode(self, enabled: bool) -> None:
        """
        Select the Quick (True) or Complex (False) generator for later draws.

        If fixed mode is active the choice takes effect on unfix().
        """
        target: Generator = self.quick if enabled else self.complex
        if self._unfixed is not None:
            self._unfixed = target
        else:
            self._active = target
        logger.debug("Quick mode %s", "enabled" if enabled else "disabled")

    def quick_mode(self) -> bool:
        """Returns True if the Quick Generator is (or will be, after unfix) selected."""
        selected = self._unfixed if self._unfixed is not None else self._active
        return selected is self.quick

    @property
    def mode(self) -> GeneratorMode:
        """The mode of the generator servicing draws right now."""
        return self._active.mode

    def fix(self, percent: int) -> None:
        """
        Pin every draw to percent% of its range until unfix() is called.

        fix(0) makes every draw return its minimum, fix(100) its maximum.
        """
        fixed = FixedGenerator(percent)
        if self._unfixed is None:
            self._unfixed = self._active
        self._active = fixed
        logger.debug("Draws fixed at %d%%", percent)

    def unfix(self) -> None:
        """Restore the generator that was selected before fix()."""
        if self._unfixed is None:
            return
        self._active = self._unfixed
        self._unfixed = None
        logger.debug("Draws unfixed")

    @property
    def is_fixed(self) -> bool:
        return self._unfixed is not None

    # ── Uniform draws ───────────────────────────────────────────────────

    def draw_below(self, m: int) -> int:
        """Uniform integer in [0, m). Raises ValueError unless 1 <= m <= MAX_MODULUS."""
        return self._active.draw_below(m)

    def randint0(self, m: int) -> int:
        """Uniform integer in [0, m)."""
        return self.draw_below(m)

    def randint1(self, m: int) -> int:
        """Uniform integer in [1, m]."""
        return self.draw_below(m) + 1

    def rand_spread(self, centre: int, spread: int) -> int:
        """Uniform integer in [centre - spread, centre + spread]."""
        if spread < 0:
            raise ValueError(f"Spread cannot be negative, got {spread}.")
        return centre + self.draw_below(2 * spread + 1) - spread

    def one_in(self, x: int) -> bool:
        """True with probability 1/x."""
        return self.draw_below(x) == 0

    def rand_range(self, low: int, high: int) -> int:
        """Uniform integer in [low, high]. rand_range(0, n - 1) == randint0(n)."""
        validate_range(low, high)
        if low == high:
            return low
        return low + self.draw_below(high - low + 1)

    def normal(self, mean: int, stddev: int) -> int:
        """Approximately normal deviate; see lodestone.engine.normal."""
        return normal_deviate(self, mean, stddev)

    def draw_below_unprotected(self, m: int) -> int:
        """
        Uniform integer in [0, m) from a private generator.

        For host tooling outside the simulation loop: never touches the
        Quick, Complex or fixed generators, so it cannot change any
        gameplay outcome. Not subject to fix().
        """
        return self._simple.draw_below(m)

    def __repr__(self) -> str:
        return f"Rng(mode={self.mode.value}, fixed={self.is_fixed})"
