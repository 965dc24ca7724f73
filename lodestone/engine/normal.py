"""
Lodestone - Normal Sampler

Integer deviates approximating a normal distribution, drawn by inverse
lookup in a cumulative half-normal table.

Each call with stddev >= 1 consumes exactly two uniform draws:
randint0(NORMAL_TABLE_SCALE) for the magnitude, then one_in(2) for the
sign. A call with stddev < 1 returns the mean and consumes nothing.
"""

from __future__ import annotations

import math
from bisect import bisect_left
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lodestone.engine.rng import Rng

# Table entries per standard deviation
NORMAL_TABLE_STD = 64

# Four standard deviations of table
NORMAL_TABLE_SIZE = NORMAL_TABLE_STD * 4

# Table values are probabilities out of this
NORMAL_TABLE_SCALE = 32768


def _build_table() -> tuple[int, ...]:
    # Entry i: P(|Z| < (i + 0.5) / NORMAL_TABLE_STD), scaled and capped
    table = []
    for i in range(NORMAL_TABLE_SIZE):
        z = (i + 0.5) / NORMAL_TABLE_STD
        value = int(NORMAL_TABLE_SCALE * math.erf(z / math.sqrt(2.0)) + 0.5)
        table.append(min(value, NORMAL_TABLE_SCALE - 1))
    return tuple(table)


NORMAL_TABLE: tuple[int, ...] = _build_table()


def normal_offset(stddev: int, roll: int) -> int:
    """
    Magnitude of the deviation selected by a table roll.

    Args:
        stddev: Standard deviation (>= 1)
        roll: Uniform value in [0, NORMAL_TABLE_SCALE)

    Returns:
        Non-negative offset from the mean, at most 4 * stddev
    """
    index = bisect_left(NORMAL_TABLE, roll)
    return stddev * index // NORMAL_TABLE_STD


def normal_deviate(rng: Rng, mean: int, stddev: int) -> int:
    """
    Return an integer roughly Normal(mean, stddev), within 4 stddevs of mean.

    The result is symmetric about mean: the sign draw is independent of
    the magnitude draw.
    """
    if stddev < 1:
        return mean

    offset = normal_offset(stddev, rng.randint0(NORMAL_TABLE_SCALE))

    if rng.one_in(2):
        return mean - offset
    return mean + offset
