"""Sample chart component — histogram of seeded Randomise outcomes."""

from __future__ import annotations

from collections import Counter

import streamlit as st

from lodestone.engine.base import Aspect
from lodestone.engine.bonus import DEFAULT_CURVE, BonusCurve
from lodestone.engine.dice import DiceSpec
from lodestone.engine.rng import Rng


def sample_outcomes(
    spec: DiceSpec,
    level: int,
    seed: int,
    count: int,
    curve: BonusCurve = DEFAULT_CURVE,
) -> Counter[int]:
    """Tally `count` outcomes from a fresh Rng seeded with `seed`."""
    rng = Rng(seed=seed)
    return Counter(
        spec.evaluate(level, Aspect.RANDOMISE, rng, curve) for _ in range(count)
    )


def render_sample_chart(
    spec: DiceSpec,
    level: int,
    seed: int,
    count: int,
    curve: BonusCurve = DEFAULT_CURVE,
) -> None:
    """Render a bar chart of sampled outcomes."""
    tally = sample_outcomes(spec, level, seed, count, curve)
    low = spec.evaluate(level, Aspect.MINIMISE, curve=curve)
    high = spec.evaluate(level, Aspect.MAXIMISE, curve=curve)

    # Keep zero-count values so gaps in the range stay visible
    chart = {str(value): tally.get(value, 0) for value in range(low, high + 1)}
    st.bar_chart(chart)
    st.caption(f"{count} rolls of {spec} at level {level}, seed {seed}")
